# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Animation Driver

Runs the simulation loops that turn a Lorenz trajectory into pictures:

- run / run_animation : indexed-color frame sequence with a fading trail
- create_animation : run and encode to an animated GIF
- render_attractor_image : dense truecolor plot of a long trajectory
- sensitivity_report : divergence of two nearly identical trajectories
- run_ascii_preview : paced character-cell preview in a terminal

Every run constructs its own integrator from its configuration; nothing is
shared between runs. All loops are sequential: each frame is built from
the trail as it stands after that frame's sub-steps.
"""

import logging
import math
import sys
import time
from pathlib import Path
from typing import Optional, TextIO, Union

import numpy as np

from lorenzanim.animation.encoders import save_animation
from lorenzanim.config import (
    AnimationConfig,
    PreviewConfig,
    SimulationConfig,
    StaticImageConfig,
)
from lorenzanim.rendering.ascii_preview import CLEAR_SCREEN, render_ascii_frame
from lorenzanim.rendering.frame_builder import FrameStyle, build_frame
from lorenzanim.rendering.palette import DEFAULT_BACKGROUND, build_palette
from lorenzanim.rendering.projection import project
from lorenzanim.rendering.rasterizer import put_pixel
from lorenzanim.systems.numerical_integration import create_integrator
from lorenzanim.types.core import RGBColor, RGBImage
from lorenzanim.types.trajectories import (
    Frame,
    FrameSequence,
    SensitivityResult,
    SensitivitySample,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Animation
# ============================================================================


def run(
    config: AnimationConfig,
    style: Optional[FrameStyle] = None,
    background: str = DEFAULT_BACKGROUND,
) -> FrameSequence:
    """
    Simulate and render an animation.

    Discards ``config.warmup_steps`` transient steps, then for each frame
    advances ``config.substeps`` steps and renders the trail.

    Parameters
    ----------
    config : AnimationConfig
        Frame size, frame count, stepping and simulation parameters
    style : Optional[FrameStyle]
        Frame layout; the default style if None
    background : str
        Hex color of palette index 0

    Returns
    -------
    FrameSequence
        ``config.frame_count`` frames, each shown for
        ``config.frame_delay`` hundredths of a second

    Examples
    --------
    >>> sequence = run(AnimationConfig(width=200, height=150, frame_count=20))
    >>> len(sequence["frames"])
    20
    """
    integrator = create_integrator(config.simulation)
    integrator.steps(config.warmup_steps)

    sequence: FrameSequence = {
        "frames": [],
        "width": config.width,
        "height": config.height,
        "palette": build_palette(background),
    }

    logger.info("Creating Lorenz attractor animation with %d frames", config.frame_count)
    for frame_index in range(config.frame_count):
        integrator.steps(config.substeps)
        pixels = build_frame(integrator.trail, config.width, config.height, frame_index, style)
        frame: Frame = {"pixels": pixels, "duration": config.frame_delay}
        sequence["frames"].append(frame)

        if frame_index % config.progress_interval == 0:
            logger.info("Progress: %d/%d frames", frame_index + 1, config.frame_count)

    logger.debug("Integrator stats: %s", integrator.get_stats())
    return sequence


def run_animation(width: int = 800, height: int = 600, frame_count: int = 360) -> FrameSequence:
    """Run an animation with default settings apart from size and length."""
    return run(AnimationConfig(width=width, height=height, frame_count=frame_count))


def create_animation(
    config: AnimationConfig,
    path: Union[str, Path],
    style: Optional[FrameStyle] = None,
    background: str = DEFAULT_BACKGROUND,
) -> Path:
    """
    Run an animation and write it as a GIF.

    Raises
    ------
    ValueError
        If ``config.frame_count`` is zero
    OSError
        If the output file cannot be written
    """
    sequence = run(config, style=style, background=background)
    return save_animation(sequence, path)


# ============================================================================
# Static Image
# ============================================================================


def point_color(y: float) -> Optional[RGBColor]:
    """
    Color of a plotted point from its y coordinate.

    ``intensity = clamp((y + 30) * 3, 0, 255)`` gives
    ``(intensity, intensity // 2, 255 - intensity)``. NaN gives None
    (the point is not drawn).
    """
    if math.isnan(y):
        return None
    intensity = int(max(0.0, min(255.0, (y + 30.0) * 3.0)))
    return intensity, intensity // 2, 255 - intensity


def render_attractor_image(config: Optional[StaticImageConfig] = None) -> RGBImage:
    """
    Plot a long trajectory as individual points on a black RGB image.

    Parameters
    ----------
    config : Optional[StaticImageConfig]
        Size, warm-up and iteration count; defaults reproduce the classic
        800x600 image of 50000 points

    Returns
    -------
    RGBImage
        (height, width, 3) uint8 array
    """
    config = config if config is not None else StaticImageConfig()
    integrator = create_integrator(config.simulation)
    integrator.steps(config.warmup_steps)

    image = np.zeros((config.height, config.width, 3), dtype=np.uint8)
    logger.info("Plotting %d points", config.iterations)
    for _ in range(config.iterations):
        point = integrator.step()
        coord = project(point, config.width, config.height)
        color = point_color(point.y)
        if coord is None or color is None:
            continue
        put_pixel(image, coord[0], coord[1], color)

    return image


# ============================================================================
# Sensitivity to Initial Conditions
# ============================================================================


def sensitivity_report(
    perturbation: float = 1e-4,
    samples: int = 20,
    stride: int = 100,
    simulation: Optional[SimulationConfig] = None,
) -> SensitivityResult:
    """
    Compare two trajectories whose x0 differs by ``perturbation``.

    Both integrators are built independently from the same configuration
    apart from x0. Each sample takes one step of both systems, records
    their x coordinates, then advances both by ``stride`` steps.

    Parameters
    ----------
    perturbation : float
        Offset added to x0 of the second system
    samples : int
        Number of rows to record
    stride : int
        Steps skipped between rows
    simulation : Optional[SimulationConfig]
        Reference configuration; the classic defaults if None

    Returns
    -------
    SensitivityResult
        Initial difference and sampled rows
    """
    if samples < 0 or stride < 0:
        raise ValueError(f"samples and stride must be non-negative, got {samples}, {stride}")

    reference_config = simulation if simulation is not None else SimulationConfig(trail_capacity=1)
    x0, y0, z0 = reference_config.initial_state
    perturbed_config = SimulationConfig(
        parameters=reference_config.parameters,
        dt=reference_config.dt,
        initial_state=(x0 + perturbation, y0, z0),
        trail_capacity=reference_config.trail_capacity,
    )

    reference = create_integrator(reference_config)
    perturbed = create_integrator(perturbed_config)

    rows = []
    for _ in range(samples):
        p1 = reference.step()
        p2 = perturbed.step()
        sample: SensitivitySample = {
            "time": reference.time,
            "x_reference": p1.x,
            "x_perturbed": p2.x,
            "difference": abs(p2.x - p1.x),
        }
        rows.append(sample)
        reference.steps(stride)
        perturbed.steps(stride)

    return {
        "initial_difference": perturbed_config.initial_state[0] - x0,
        "samples": rows,
    }


# ============================================================================
# Terminal Preview
# ============================================================================


def run_ascii_preview(config: Optional[PreviewConfig] = None, stream: Optional[TextIO] = None) -> int:
    """
    Print a character-cell animation, pausing ``config.delay`` seconds between frames.

    Returns
    -------
    int
        Number of frames written
    """
    config = config if config is not None else PreviewConfig()
    stream = stream if stream is not None else sys.stdout

    integrator = create_integrator(config.simulation)
    integrator.steps(config.warmup_steps)

    for frame_index in range(config.frame_count):
        integrator.steps(config.substeps)
        lines = render_ascii_frame(integrator.trail, config.columns, config.rows, frame_index)
        stream.write(CLEAR_SCREEN + "\n".join(lines) + "\n")
        stream.flush()
        if config.delay > 0:
            time.sleep(config.delay)

    return config.frame_count


__all__ = [
    "run",
    "run_animation",
    "create_animation",
    "point_color",
    "render_attractor_image",
    "sensitivity_report",
    "run_ascii_preview",
]

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
lorenzanim
==========

Lorenz attractor simulation rendered as fading-trail animations.

Pipeline
--------
integrator.step (repeated) → build_frame → {project, rasterizer} →
pixel buffer → raster sink

>>> from lorenzanim import AnimationConfig, create_animation
>>> create_animation(AnimationConfig(frame_count=120), "lorenz_animation.gif")

Authors
-------
Gil Benezer

License
-------
GNU Affero General Public License v3.0
"""

from lorenzanim.animation import (
    create_animation,
    render_attractor_image,
    run,
    run_animation,
    run_ascii_preview,
    save_animation,
    sensitivity_report,
)
from lorenzanim.config import (
    AnimationConfig,
    LorenzParameters,
    PreviewConfig,
    SimulationConfig,
    StaticImageConfig,
)
from lorenzanim.rendering import build_frame, project
from lorenzanim.systems import (
    ExplicitEulerIntegrator,
    LorenzSystem,
    TrailBuffer,
    create_integrator,
)
from lorenzanim.types import FrameSequence, Point3D

__version__ = "0.1.0"

__all__ = [
    "AnimationConfig",
    "LorenzParameters",
    "PreviewConfig",
    "SimulationConfig",
    "StaticImageConfig",
    "LorenzSystem",
    "TrailBuffer",
    "ExplicitEulerIntegrator",
    "create_integrator",
    "project",
    "build_frame",
    "run",
    "run_animation",
    "create_animation",
    "render_attractor_image",
    "sensitivity_report",
    "run_ascii_preview",
    "save_animation",
    "FrameSequence",
    "Point3D",
]

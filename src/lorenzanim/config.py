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
Configuration

Explicit configuration objects for every run mode. Each run builds its own
configuration and passes it to the constructors that need it; there is no
process-wide state.

Defaults reproduce the classic chaotic regime (sigma=10, rho=28, beta=8/3)
integrated with dt=0.01 from (1, 1, 1).

Main Classes
------------
LorenzParameters : Physical constants of the Lorenz system
SimulationConfig : Parameters + step size + initial state + trail capacity
AnimationConfig : Indexed-color animation run
StaticImageConfig : Dense single-image render
PreviewConfig : ASCII terminal preview

Examples
--------
>>> config = AnimationConfig(width=400, height=300, frame_count=120)
>>> sequence = run(config)
>>>
>>> # Perturbed initial condition
>>> sim = SimulationConfig(initial_state=(1.0001, 1.0, 1.0))
"""

import math
from dataclasses import dataclass, field
from typing import Tuple

DEFAULT_SIGMA = 10.0
DEFAULT_RHO = 28.0
DEFAULT_BETA = 8.0 / 3.0
DEFAULT_DT = 0.01
DEFAULT_INITIAL_STATE = (1.0, 1.0, 1.0)
DEFAULT_WARMUP_STEPS = 1000


def _require_positive_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def _require_non_negative_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")


@dataclass(frozen=True)
class LorenzParameters:
    """
    Physical constants of the Lorenz system.

    Attributes
    ----------
    sigma : float
        Prandtl number
    rho : float
        Rayleigh number
    beta : float
        Geometric factor of the convection cell
    """

    sigma: float = DEFAULT_SIGMA
    rho: float = DEFAULT_RHO
    beta: float = DEFAULT_BETA

    def __post_init__(self):
        for name in ("sigma", "rho", "beta"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite, got {getattr(self, name)!r}")


@dataclass(frozen=True)
class SimulationConfig:
    """
    Everything needed to construct one integrator.

    Attributes
    ----------
    parameters : LorenzParameters
        Physical constants
    dt : float
        Fixed integration step, > 0
    initial_state : Tuple[float, float, float]
        Starting (x, y, z)
    trail_capacity : int
        Maximum number of points kept in the trail
    """

    parameters: LorenzParameters = field(default_factory=LorenzParameters)
    dt: float = DEFAULT_DT
    initial_state: Tuple[float, float, float] = DEFAULT_INITIAL_STATE
    trail_capacity: int = 2000

    def __post_init__(self):
        if not math.isfinite(self.dt) or self.dt <= 0:
            raise ValueError(f"dt must be a finite positive number, got {self.dt!r}")
        if len(self.initial_state) != 3:
            raise ValueError(
                f"initial_state must have 3 components, got {len(self.initial_state)}"
            )
        _require_positive_int("trail_capacity", self.trail_capacity)


@dataclass(frozen=True)
class AnimationConfig:
    """
    Indexed-color animation run.

    Attributes
    ----------
    width, height : int
        Frame size in pixels
    frame_count : int
        Number of frames to render
    warmup_steps : int
        Steps discarded before the first frame
    substeps : int
        Integration steps between consecutive frames
    frame_delay : int
        Per-frame display time in hundredths of a second
    progress_interval : int
        Log progress every this many frames
    simulation : SimulationConfig
        Integrator construction parameters
    """

    width: int = 800
    height: int = 600
    frame_count: int = 360
    warmup_steps: int = DEFAULT_WARMUP_STEPS
    substeps: int = 10
    frame_delay: int = 1
    progress_interval: int = 10
    simulation: SimulationConfig = field(default_factory=SimulationConfig)

    def __post_init__(self):
        _require_positive_int("width", self.width)
        _require_positive_int("height", self.height)
        _require_non_negative_int("frame_count", self.frame_count)
        _require_non_negative_int("warmup_steps", self.warmup_steps)
        _require_positive_int("substeps", self.substeps)
        _require_non_negative_int("frame_delay", self.frame_delay)
        _require_positive_int("progress_interval", self.progress_interval)


@dataclass(frozen=True)
class StaticImageConfig:
    """
    Dense single-image render of the attractor.

    Attributes
    ----------
    width, height : int
        Image size in pixels
    iterations : int
        Number of plotted points after warm-up
    warmup_steps : int
        Steps discarded before plotting
    simulation : SimulationConfig
        Integrator construction parameters (the trail is not used)
    """

    width: int = 800
    height: int = 600
    iterations: int = 50000
    warmup_steps: int = DEFAULT_WARMUP_STEPS
    simulation: SimulationConfig = field(
        default_factory=lambda: SimulationConfig(trail_capacity=1)
    )

    def __post_init__(self):
        _require_positive_int("width", self.width)
        _require_positive_int("height", self.height)
        _require_non_negative_int("iterations", self.iterations)
        _require_non_negative_int("warmup_steps", self.warmup_steps)


@dataclass(frozen=True)
class PreviewConfig:
    """
    ASCII terminal preview.

    Attributes
    ----------
    columns, rows : int
        Canvas size in characters
    frame_count : int
        Number of frames to print
    warmup_steps : int
        Steps discarded before the first frame
    substeps : int
        Integration steps between frames
    delay : float
        Pause between frames in seconds
    simulation : SimulationConfig
        Integrator construction parameters
    """

    columns: int = 80
    rows: int = 24
    frame_count: int = 1000
    warmup_steps: int = DEFAULT_WARMUP_STEPS
    substeps: int = 5
    delay: float = 0.03
    simulation: SimulationConfig = field(
        default_factory=lambda: SimulationConfig(trail_capacity=100)
    )

    def __post_init__(self):
        _require_positive_int("columns", self.columns)
        _require_positive_int("rows", self.rows)
        _require_non_negative_int("frame_count", self.frame_count)
        _require_non_negative_int("warmup_steps", self.warmup_steps)
        _require_positive_int("substeps", self.substeps)
        if not math.isfinite(self.delay) or self.delay < 0:
            raise ValueError(f"delay must be a finite non-negative number, got {self.delay!r}")


__all__ = [
    "LorenzParameters",
    "SimulationConfig",
    "AnimationConfig",
    "StaticImageConfig",
    "PreviewConfig",
    "DEFAULT_SIGMA",
    "DEFAULT_RHO",
    "DEFAULT_BETA",
    "DEFAULT_DT",
    "DEFAULT_INITIAL_STATE",
    "DEFAULT_WARMUP_STEPS",
]

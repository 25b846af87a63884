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
Integrator Base - Abstract Interface for Trail-Keeping Integration

Defines the stateful stepping interface shared by the fixed-step
integrators: each integrator owns the current position of one Lorenz
trajectory and the bounded trail of its recent points.

Design Note
-----------
Integrators are owned mutable objects with a single ``step`` method.
Two integrators never share state, so independently perturbed
trajectories cannot influence each other.
"""

import math
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence

from lorenzanim.systems.lorenz import LorenzSystem
from lorenzanim.systems.trail import TrailBuffer
from lorenzanim.types.core import Point3D


class IntegratorBase(ABC):
    """
    Abstract base class for stateful Lorenz integrators.

    All integrators must implement:
    - step(): Advance one fixed time step, record and return the new point
    - name: Integrator name for display

    The base class handles state ownership, the trail, validation and
    statistics.

    Examples
    --------
    >>> integrator = ExplicitEulerIntegrator(LorenzSystem(), dt=0.01)
    >>> p = integrator.step()
    >>> _ = integrator.steps(999)
    >>> len(integrator.trail)
    1000
    """

    def __init__(
        self,
        system: LorenzSystem,
        dt: float,
        initial_state: Sequence[float] = (1.0, 1.0, 1.0),
        trail_capacity: int = 2000,
    ):
        """
        Initialize integrator.

        Parameters
        ----------
        system : LorenzSystem
            Vector field to integrate
        dt : float
            Fixed time step, finite and > 0
        initial_state : Sequence[float]
            Starting (x, y, z)
        trail_capacity : int
            Maximum number of points kept in the trail

        Raises
        ------
        ValueError
            If dt is not a finite positive number, the initial state does
            not have three components, or the trail capacity is not a
            positive integer
        """
        if not math.isfinite(dt) or dt <= 0:
            raise ValueError(f"Time step dt must be a finite positive number, got {dt!r}")
        if len(initial_state) != 3:
            raise ValueError(
                f"initial_state must have 3 components, got {len(initial_state)}"
            )

        self.system = system
        self.dt = float(dt)
        self.trail = TrailBuffer(trail_capacity)
        self._initial_state = Point3D(*(float(v) for v in initial_state))
        self._x, self._y, self._z = self._initial_state

        # Statistics
        self._stats = {
            "total_steps": 0,
            "total_fev": 0,  # Function evaluations
        }

    @abstractmethod
    def step(self) -> Point3D:
        """
        Advance one time step: (x, y, z)(t) → (x, y, z)(t + dt).

        The new point is appended to the trail, evicting the oldest entry
        once the trail is full.

        Returns
        -------
        Point3D
            The new position
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable integrator name."""
        pass

    # ========================================================================
    # Common Utilities (Shared by All Integrators)
    # ========================================================================

    def _evaluate_dynamics(self, x: float, y: float, z: float):
        self._stats["total_fev"] += 1
        return self.system(x, y, z)

    def _record(self, x: float, y: float, z: float) -> Point3D:
        self._x, self._y, self._z = x, y, z
        point = Point3D(x, y, z)
        self.trail.append(point)
        self._stats["total_steps"] += 1
        return point

    def steps(self, n: int) -> Point3D:
        """
        Take ``n`` steps and return the final position.

        Used for transient warm-up and for sub-stepping between frames.
        ``n = 0`` returns the current position unchanged.
        """
        if n < 0:
            raise ValueError(f"Number of steps must be non-negative, got {n}")
        for _ in range(n):
            self.step()
        return self.state

    @property
    def state(self) -> Point3D:
        """Current position."""
        return Point3D(self._x, self._y, self._z)

    @property
    def time(self) -> float:
        """Simulated time elapsed since construction or the last reset."""
        return self._stats["total_steps"] * self.dt

    def reset(self, initial_state: Optional[Sequence[float]] = None) -> None:
        """
        Return to the initial (or a new) state and clear the trail.

        Parameters
        ----------
        initial_state : Optional[Sequence[float]]
            New starting (x, y, z); the constructor's value if None
        """
        if initial_state is not None:
            if len(initial_state) != 3:
                raise ValueError(
                    f"initial_state must have 3 components, got {len(initial_state)}"
                )
            self._initial_state = Point3D(*(float(v) for v in initial_state))
        self._x, self._y, self._z = self._initial_state
        self.trail.clear()
        self.reset_stats()

    def get_stats(self) -> Dict[str, Any]:
        """
        Get integration statistics.

        Returns
        -------
        dict
            Statistics with keys:
            - 'total_steps': Total integration steps taken
            - 'total_fev': Total function evaluations
            - 'avg_fev_per_step': Average function evaluations per step
        """
        avg_fev = self._stats["total_fev"] / max(1, self._stats["total_steps"])

        return {
            **self._stats,
            "avg_fev_per_step": avg_fev,
        }

    def reset_stats(self):
        self._stats["total_steps"] = 0
        self._stats["total_fev"] = 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"dt={self.dt}, trail_capacity={self.trail.capacity}, "
            f"state={tuple(self.state)})"
        )

    def __str__(self) -> str:
        return f"{self.name} (dt={self.dt:.4f})"


__all__ = ["IntegratorBase"]

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
Fixed-Step Integrators

Explicit (forward) Euler integration of the Lorenz system:

    x_{k+1} = x_k + dt * f(x_k)

First order and only conditionally stable. The error is acceptable for
visualization at dt = 0.01; callers needing numerical fidelity must use a
smaller dt. Overflow under pathological parameters propagates as inf/NaN
and is not masked.
"""

from lorenzanim.config import SimulationConfig
from lorenzanim.systems.lorenz import LorenzSystem
from lorenzanim.systems.numerical_integration.integrator_base import IntegratorBase
from lorenzanim.types.core import Point3D


class ExplicitEulerIntegrator(IntegratorBase):
    """
    Explicit Euler integrator (Forward Euler) with trail bookkeeping.

    Characteristics:
    - Order: 1 (error ∝ dt)
    - Stability: Conditionally stable (small dt required)
    - Determinism: identical parameters, dt, initial state and step count
      give bit-identical trajectories

    Examples
    --------
    >>> integrator = ExplicitEulerIntegrator(LorenzSystem(), dt=0.01)
    >>> integrator.step()
    Point3D(x=1.0, y=1.26, z=0.9833333333333333)
    """

    def step(self) -> Point3D:
        x, y, z = self._x, self._y, self._z
        dx, dy, dz = self._evaluate_dynamics(x, y, z)
        dt = self.dt
        return self._record(x + dx * dt, y + dy * dt, z + dz * dt)

    @property
    def name(self) -> str:
        return "Euler (Explicit)"


def create_integrator(config: SimulationConfig) -> ExplicitEulerIntegrator:
    """
    Build an independent integrator from a simulation configuration.

    Each call constructs a fresh LorenzSystem and trail, so integrators
    created from the same configuration share no state.

    Examples
    --------
    >>> reference = create_integrator(SimulationConfig())
    >>> perturbed = create_integrator(
    ...     SimulationConfig(initial_state=(1.0001, 1.0, 1.0))
    ... )
    """
    return ExplicitEulerIntegrator(
        LorenzSystem(config.parameters),
        dt=config.dt,
        initial_state=config.initial_state,
        trail_capacity=config.trail_capacity,
    )


__all__ = ["ExplicitEulerIntegrator", "create_integrator"]

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
Lorenz System

Symbolic definition of the Lorenz vector field, compiled to a plain-float
callable for fast per-step evaluation.

The equations are declared once with SymPy and lambdified against the
``math`` module; the physical constants are passed as call arguments so the
numeric evaluation uses exactly the float values held by
:class:`~lorenzanim.config.LorenzParameters`.
"""

import math
from typing import List, Optional, Tuple

import sympy as sp

from lorenzanim.config import LorenzParameters
from lorenzanim.types.core import Point3D


class LorenzSystem:
    """
    Lorenz system - chaotic model of atmospheric convection.

    State Space:
    -----------
    State: [x, y, z]
        - x: Rate of convective motion
        - y: Horizontal temperature variation
        - z: Vertical temperature variation from linearity

    Dynamics:
    --------
        ẋ = σ(y - x)
        ẏ = x(ρ - z) - y
        ż = xy - βz

    Parameters:
    ----------
    parameters : LorenzParameters, optional
        σ (Prandtl number), ρ (Rayleigh number), β (geometric factor).
        Defaults to the classic chaotic regime σ=10, ρ=28, β=8/3.

    Equilibria:
    ----------
    **Origin**: [0, 0, 0], unstable for ρ > 1.

    **Convective equilibria (ρ > 1)**:
        C+ = [√(β(ρ-1)), √(β(ρ-1)), ρ-1]
        C- = [-√(β(ρ-1)), -√(β(ρ-1)), ρ-1]

    Both lose stability for ρ > 24.74; at ρ = 28 trajectories wander between
    the two wings of the butterfly-shaped strange attractor. Over the
    attractor x stays roughly within [-25, 25] and z within [0, 50].

    Examples
    --------
    >>> system = LorenzSystem()
    >>> system(1.0, 1.0, 1.0)
    (0.0, 26.0, -1.6666666666666665)
    >>> system.equilibria()[0]
    Point3D(x=0.0, y=0.0, z=0.0)
    """

    def __init__(self, parameters: Optional[LorenzParameters] = None):
        self.parameters = parameters if parameters is not None else LorenzParameters()
        self.define_system()

    def define_system(self):
        x, y, z = sp.symbols("x y z", real=True)
        sigma, rho, beta = sp.symbols("sigma rho beta", real=True)

        self.state_vars = [x, y, z]
        self.parameter_vars = [sigma, rho, beta]

        dx = sigma * (y - x)
        dy = x * (rho - z) - y
        dz = x * y - beta * z

        self._f_sym = sp.Matrix([dx, dy, dz])
        self._f_numeric = sp.lambdify(
            [x, y, z, sigma, rho, beta], [dx, dy, dz], modules="math"
        )

    @property
    def nx(self) -> int:
        """State dimension."""
        return len(self.state_vars)

    @property
    def symbolic_dynamics(self) -> sp.Matrix:
        """Vector field f(x, y, z) as a 3x1 SymPy matrix."""
        return self._f_sym

    def __call__(self, x: float, y: float, z: float) -> Tuple[float, float, float]:
        """
        Evaluate the state derivative (ẋ, ẏ, ż) at (x, y, z).

        Non-finite inputs propagate to non-finite outputs.
        """
        p = self.parameters
        dx, dy, dz = self._f_numeric(x, y, z, p.sigma, p.rho, p.beta)
        return dx, dy, dz

    def equilibria(self) -> List[Point3D]:
        """
        Fixed points of the vector field.

        Returns
        -------
        List[Point3D]
            The origin, followed by C+ and C- when ρ > 1 and β > 0.
        """
        points = [Point3D(0.0, 0.0, 0.0)]
        p = self.parameters
        if p.rho > 1.0 and p.beta > 0.0:
            r = math.sqrt(p.beta * (p.rho - 1.0))
            points.append(Point3D(r, r, p.rho - 1.0))
            points.append(Point3D(-r, -r, p.rho - 1.0))
        return points

    def __repr__(self) -> str:
        p = self.parameters
        return f"{self.__class__.__name__}(sigma={p.sigma}, rho={p.rho}, beta={p.beta})"


__all__ = ["LorenzSystem"]

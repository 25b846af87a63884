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
Unit tests for the symbolic Lorenz system.

Tests cover:
1. Numeric evaluation of the vector field
2. Parameter handling
3. Equilibria
4. Symbolic representation
"""

import math

import numpy as np
import pytest
import sympy as sp

from lorenzanim.config import LorenzParameters
from lorenzanim.systems.lorenz import LorenzSystem
from lorenzanim.types.core import Point3D


def hand_derivatives(x, y, z, sigma=10.0, rho=28.0, beta=8.0 / 3.0):
    return sigma * (y - x), x * (rho - z) - y, x * y - beta * z


class TestVectorField:
    """Test numeric evaluation of the Lorenz equations"""

    def test_default_parameters(self):
        """Test classic chaotic parameters are the default"""
        system = LorenzSystem()

        assert system.parameters.sigma == 10.0
        assert system.parameters.rho == 28.0
        assert system.parameters.beta == 8.0 / 3.0

    def test_derivative_at_unit_point(self):
        """Test derivative at (1, 1, 1)"""
        system = LorenzSystem()

        dx, dy, dz = system(1.0, 1.0, 1.0)

        assert dx == pytest.approx(0.0)
        assert dy == pytest.approx(26.0)
        assert dz == pytest.approx(1.0 - 8.0 / 3.0)

    def test_matches_closed_form(self):
        """Test lambdified field against the written-out equations"""
        system = LorenzSystem()
        rng = np.random.default_rng(0)

        for x, y, z in rng.uniform(-30, 50, size=(50, 3)):
            expected = hand_derivatives(float(x), float(y), float(z))
            actual = system(float(x), float(y), float(z))
            assert actual == pytest.approx(expected, rel=1e-12, abs=1e-12)

    def test_custom_parameters(self):
        """Test that custom parameters flow into evaluation"""
        params = LorenzParameters(sigma=5.0, rho=10.0, beta=1.0)
        system = LorenzSystem(params)

        result = system(2.0, 3.0, 4.0)

        assert result == pytest.approx(hand_derivatives(2.0, 3.0, 4.0, 5.0, 10.0, 1.0))

    def test_non_finite_input_propagates(self):
        """Test NaN input gives NaN output rather than raising"""
        system = LorenzSystem()

        dx, dy, dz = system(float("nan"), 1.0, 1.0)

        assert math.isnan(dx)
        assert math.isnan(dy)
        assert math.isnan(dz)

    def test_returns_plain_floats(self):
        """Test evaluation returns a 3-tuple of floats"""
        result = LorenzSystem()(1.0, 2.0, 3.0)

        assert isinstance(result, tuple)
        assert len(result) == 3
        assert all(isinstance(v, float) for v in result)


class TestEquilibria:
    """Test analytic fixed points"""

    def test_classic_equilibria(self):
        """Test origin and both convective equilibria for rho=28"""
        system = LorenzSystem()

        eq = system.equilibria()

        assert len(eq) == 3
        assert eq[0] == Point3D(0.0, 0.0, 0.0)
        r = math.sqrt(8.0 / 3.0 * 27.0)
        assert eq[1] == pytest.approx((r, r, 27.0))
        assert eq[2] == pytest.approx((-r, -r, 27.0))

    def test_equilibria_are_fixed_points(self):
        """Test derivative vanishes at every equilibrium"""
        system = LorenzSystem()

        for p in system.equilibria():
            assert system(*p) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_subcritical_rho_only_origin(self):
        """Test rho < 1 leaves only the origin"""
        system = LorenzSystem(LorenzParameters(rho=0.5))

        assert system.equilibria() == [Point3D(0.0, 0.0, 0.0)]


class TestSymbolic:
    """Test symbolic representation"""

    def test_symbolic_dynamics_shape(self):
        """Test vector field is a 3x1 matrix"""
        system = LorenzSystem()

        assert isinstance(system.symbolic_dynamics, sp.Matrix)
        assert system.symbolic_dynamics.shape == (3, 1)
        assert system.nx == 3

    def test_symbolic_first_component(self):
        """Test first equation is sigma*(y - x)"""
        system = LorenzSystem()
        x, y, _ = system.state_vars
        sigma, _, _ = system.parameter_vars

        assert sp.simplify(system.symbolic_dynamics[0] - sigma * (y - x)) == 0

    def test_repr(self):
        """Test repr shows parameters"""
        assert "rho=28.0" in repr(LorenzSystem())

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
Core Types

Basic building blocks shared by the simulation and rendering layers:
- 3D trajectory points
- Pixel coordinates and palette indices
- Indexed-color pixel buffers and RGB images

Usage
-----
>>> from lorenzanim.types.core import Point3D, PixelBuffer
>>>
>>> p = Point3D(1.0, 1.0, 1.0)
>>> print(p.z)  # 1.0
"""

from typing import NamedTuple, Tuple

import numpy as np

# ============================================================================
# Trajectory Points
# ============================================================================


class Point3D(NamedTuple):
    """
    Point in Lorenz state space.

    Produced once per integration step and never mutated afterwards.

    Attributes
    ----------
    x : float
        Rate of convective motion
    y : float
        Horizontal temperature variation
    z : float
        Vertical temperature variation

    Examples
    --------
    >>> p = Point3D(x=1.0, y=2.0, z=3.0)
    >>> x, y, z = p
    """

    x: float
    y: float
    z: float


# ============================================================================
# Raster Types
# ============================================================================

PixelCoord = Tuple[int, int]
"""
Integer pixel coordinate (px, py).

Origin at the top-left corner; py grows downward. Not clamped: values
may fall outside the buffer and must be bounds-checked before writing.
"""

ColorIndex = int
"""
Palette index in [0, 255].

Index 0 is reserved for the background.
"""

PixelBuffer = np.ndarray
"""
Indexed-color raster.

Shape (height, width), dtype uint8. Indexed as buffer[py, px].

Examples
--------
>>> buffer: PixelBuffer = np.zeros((600, 800), dtype=np.uint8)
>>> buffer[10, 20] = 255  # pixel at px=20, py=10
"""

RGBImage = np.ndarray
"""
Truecolor raster.

Shape (height, width, 3), dtype uint8.
"""

RGBColor = Tuple[int, int, int]
"""(r, g, b) triple with components in [0, 255]."""

BACKGROUND_INDEX: ColorIndex = 0
"""Palette index reserved for the background."""

MAX_COLOR_INDEX: ColorIndex = 255
"""Brightest palette index."""


__all__ = [
    "Point3D",
    "PixelCoord",
    "ColorIndex",
    "PixelBuffer",
    "RGBImage",
    "RGBColor",
    "BACKGROUND_INDEX",
    "MAX_COLOR_INDEX",
]

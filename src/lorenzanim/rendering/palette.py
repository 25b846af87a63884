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
Palette and Color Mapping

256-entry indexed palette used by every animation frame, plus the
mapping from trail recency to palette index.

Index 0 is the background. Indices 1..255 walk a sinusoidal rainbow:

    t = i / 255
    r = sin(2πt) * 127 + 128
    g = sin(2πt + 2π/3) * 127 + 128
    b = sin(2πt + 4π/3) * 127 + 128

Usage
-----
>>> palette = build_palette()
>>> palette[0]
(0, 0, 0)
>>> recency_color_index(1999, 2000)
254
"""

import math
from typing import List

from lorenzanim.types.core import BACKGROUND_INDEX, MAX_COLOR_INDEX, ColorIndex, RGBColor

PALETTE_SIZE = 256
DEFAULT_BACKGROUND = "#000000"


# ============================================================================
# Color Manipulation Utilities
# ============================================================================


def hex_to_rgb(hex_color: str) -> RGBColor:
    """
    Convert hex color to RGB tuple.

    Parameters
    ----------
    hex_color : str
        Hex color code (e.g., '#FF0000')

    Returns
    -------
    tuple
        (r, g, b) values in range [0, 255]

    Raises
    ------
    ValueError
        If the string is not a 6-digit hex color
    """
    digits = hex_color.lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected a 6-digit hex color, got {hex_color!r}")
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


# ============================================================================
# Palette Construction
# ============================================================================


def build_palette(background: str = DEFAULT_BACKGROUND) -> List[RGBColor]:
    """
    Build the 256-entry animation palette.

    Parameters
    ----------
    background : str
        Hex color for index 0

    Returns
    -------
    List[RGBColor]
        PALETTE_SIZE (r, g, b) triples
    """
    palette = [hex_to_rgb(background)]
    for i in range(1, PALETTE_SIZE):
        t = i / 255.0
        r = int(math.sin(t * math.pi * 2) * 127 + 128)
        g = int(math.sin(t * math.pi * 2 + math.pi * 2 / 3) * 127 + 128)
        b = int(math.sin(t * math.pi * 2 + math.pi * 4 / 3) * 127 + 128)
        palette.append((r, g, b))
    return palette


def palette_to_bytes(palette: List[RGBColor]) -> List[int]:
    """Flatten a palette to [r0, g0, b0, r1, ...] as expected by image encoders."""
    return [component for color in palette for component in color]


# ============================================================================
# Recency Mapping
# ============================================================================


def intensity_to_index(intensity: float) -> ColorIndex:
    """
    Map a normalized intensity to a drawable palette index.

    Intensity is clamped to [0, 1] and mapped linearly to [1, 255], so a
    finite intensity never yields the background index. NaN maps to the
    background (index 0).
    """
    if math.isnan(intensity):
        return BACKGROUND_INDEX
    intensity = max(0.0, min(1.0, intensity))
    return int(intensity * (MAX_COLOR_INDEX - 1) + 1)


def recency_color_index(position: int, length: int) -> ColorIndex:
    """
    Palette index for the trail segment ending at ``position``.

    Parameters
    ----------
    position : int
        Index of the segment's newer point in the trail (oldest = 0)
    length : int
        Trail length

    Returns
    -------
    ColorIndex
        Near 1 for the oldest segments, near 255 for the newest
    """
    if length <= 0:
        return BACKGROUND_INDEX
    return intensity_to_index(position / length)


__all__ = [
    "PALETTE_SIZE",
    "DEFAULT_BACKGROUND",
    "hex_to_rgb",
    "build_palette",
    "palette_to_bytes",
    "intensity_to_index",
    "recency_color_index",
]

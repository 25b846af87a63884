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
Rasterizer

Minimal drawing primitives on indexed-color pixel buffers:
- Line segments (integer Bresenham)
- Filled discs
- 3x5 bitmap glyphs and single-line text

Every primitive clips against the buffer: writes outside
0 <= x < width, 0 <= y < height are silently skipped, so a trajectory may
leave and re-enter the visible frame without special handling.

Buffers are NumPy arrays indexed as ``buffer[y, x]``. Any trailing
channel axis is written as a whole, so the same primitives also draw on
(height, width, 3) RGB images.
"""

from fractions import Fraction
from typing import Dict, Optional, Tuple

import numpy as np

from lorenzanim.types.core import BACKGROUND_INDEX, PixelBuffer

GLYPH_WIDTH = 3
GLYPH_HEIGHT = 5
GLYPH_ADVANCE = 6

Bitmap = Tuple[Tuple[bool, ...], ...]


def _bitmap(*rows: str) -> Bitmap:
    return tuple(tuple(c == "#" for c in row) for row in rows)


# fmt: off
GLYPHS: Dict[str, Bitmap] = {
    " ": _bitmap("...", "...", "...", "...", "..."),
    ":": _bitmap("...", ".#.", "...", ".#.", "..."),
    "0": _bitmap("###", "#.#", "#.#", "#.#", "###"),
    "1": _bitmap(".#.", "##.", ".#.", ".#.", "###"),
    "2": _bitmap("###", "..#", "###", "#..", "###"),
    "3": _bitmap("###", "..#", ".##", "..#", "###"),
    "4": _bitmap("#.#", "#.#", "###", "..#", "..#"),
    "5": _bitmap("###", "#..", "###", "..#", "###"),
    "6": _bitmap("###", "#..", "###", "#.#", "###"),
    "7": _bitmap("###", "..#", ".#.", ".#.", ".#."),
    "8": _bitmap("###", "#.#", "###", "#.#", "###"),
    "9": _bitmap("###", "#.#", "###", "..#", "###"),
    "A": _bitmap(".#.", "#.#", "###", "#.#", "#.#"),
    "F": _bitmap("###", "#..", "##.", "#..", "#.."),
    "L": _bitmap("#..", "#..", "#..", "#..", "###"),
    "a": _bitmap("...", ".##", "#.#", "#.#", ".##"),
    "c": _bitmap("...", ".##", "#..", "#..", ".##"),
    "e": _bitmap(".#.", "#.#", "###", "#..", ".##"),
    "i": _bitmap(".#.", "...", ".#.", ".#.", ".#."),
    "m": _bitmap("...", "##.", "###", "#.#", "#.#"),
    "n": _bitmap("...", "##.", "#.#", "#.#", "#.#"),
    "o": _bitmap(".#.", "#.#", "#.#", "#.#", ".#."),
    "r": _bitmap("...", "#..", "##.", "#..", "#.."),
    "t": _bitmap(".#.", "###", ".#.", ".#.", ".##"),
    "z": _bitmap("...", "###", "..#", ".#.", "###"),
}
# fmt: on

FALLBACK_GLYPH: Bitmap = _bitmap("...", "...", ".#.", "...", "...")


def new_pixel_buffer(width: int, height: int) -> PixelBuffer:
    """
    Allocate a background-filled indexed-color buffer.

    Parameters
    ----------
    width, height : int
        Buffer size in pixels, both positive

    Returns
    -------
    PixelBuffer
        uint8 array of shape (height, width) filled with index 0

    Raises
    ------
    ValueError
        If width or height is not a positive integer
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return np.full((height, width), BACKGROUND_INDEX, dtype=np.uint8)


def in_bounds(buffer: np.ndarray, x: int, y: int) -> bool:
    height, width = buffer.shape[:2]
    return 0 <= x < width and 0 <= y < height


def put_pixel(buffer: np.ndarray, x: int, y: int, value) -> None:
    """Write one pixel if it lies inside the buffer; otherwise do nothing."""
    if in_bounds(buffer, x, y):
        buffer[y, x] = value


def clip_segment(
    x1: int, y1: int, x2: int, y2: int, width: int, height: int
) -> Optional[Tuple[int, int, int, int]]:
    """
    Clip a segment to the pixel rectangle [0, width) x [0, height).

    Liang-Barsky clipping in exact rational arithmetic, so endpoints of any
    magnitude are handled without overflow or rounding drift. Endpoints
    already inside the rectangle are returned unchanged; clipped endpoints
    are rounded to the nearest pixel on the rectangle.

    Returns
    -------
    Optional[Tuple[int, int, int, int]]
        Clipped (x1, y1, x2, y2), or None if no part of the segment is
        inside the rectangle
    """
    x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
    if 0 <= x1 < width and 0 <= x2 < width and 0 <= y1 < height and 0 <= y2 < height:
        return x1, y1, x2, y2
    # Both endpoints beyond the same edge
    if (x1 < 0 and x2 < 0) or (x1 >= width and x2 >= width):
        return None
    if (y1 < 0 and y2 < 0) or (y1 >= height and y2 >= height):
        return None

    dx = x2 - x1
    dy = y2 - y1

    # Each constraint reads p * t <= q for the parameter t in [0, 1]
    t0, t1 = Fraction(0), Fraction(1)
    for p, q in ((-dx, x1), (dx, width - 1 - x1), (-dy, y1), (dy, height - 1 - y1)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = Fraction(q, p)
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)

    def at(t: Fraction) -> Tuple[int, int]:
        x = min(max(round(x1 + t * dx), 0), width - 1)
        y = min(max(round(y1 + t * dy), 0), height - 1)
        return x, y

    cx1, cy1 = (x1, y1) if t0 == 0 else at(t0)
    cx2, cy2 = (x2, y2) if t1 == 1 else at(t1)
    return cx1, cy1, cx2, cy2


def draw_line(buffer: np.ndarray, x1: int, y1: int, x2: int, y2: int, color_index) -> None:
    """
    Draw a segment with the integer Bresenham algorithm.

    The segment is first clipped to the buffer, so only its visible part is
    walked: the cost is bounded by the buffer size however far away the
    endpoints lie. Within the visible part every pixel of the discrete path
    is visited exactly once, and endpoints inside the buffer are hit exactly.

    Parameters
    ----------
    buffer : np.ndarray
        Target buffer, modified in place
    x1, y1, x2, y2 : int
        Endpoints in pixel coordinates (may lie outside the buffer)
    color_index : int
        Palette index (or RGB triple for RGB buffers)

    Examples
    --------
    >>> buf = new_pixel_buffer(10, 10)
    >>> draw_line(buf, 0, 0, 5, 0, 7)
    >>> np.flatnonzero(buf[0]).tolist()
    [0, 1, 2, 3, 4, 5]
    """
    height, width = buffer.shape[:2]

    clipped = clip_segment(x1, y1, x2, y2, width, height)
    if clipped is None:
        return
    x1, y1, x2, y2 = clipped

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    while True:
        buffer[y1, x1] = color_index

        if x1 == x2 and y1 == y2:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x1 += sx
        if e2 < dx:
            err += dx
            y1 += sy


def draw_filled_circle(buffer: np.ndarray, cx: int, cy: int, radius: int, color_index) -> None:
    """
    Fill every pixel (cx + dx, cy + dy) with dx² + dy² <= radius².

    Clipped to the buffer; a negative radius draws nothing.
    """
    height, width = buffer.shape[:2]
    r2 = radius * radius
    for dy in range(-radius, radius + 1):
        py = cy + dy
        if not 0 <= py < height:
            continue
        for dx in range(-radius, radius + 1):
            px = cx + dx
            if dx * dx + dy * dy <= r2 and 0 <= px < width:
                buffer[py, px] = color_index


def glyph_for(character: str) -> Bitmap:
    """Bitmap for ``character``, or the single-dot fallback if unknown."""
    return GLYPHS.get(character, FALLBACK_GLYPH)


def draw_glyph(buffer: np.ndarray, x: int, y: int, character: str, color_index) -> None:
    """Draw one 3x5 glyph with its top-left corner at (x, y)."""
    for row, line in enumerate(glyph_for(character)):
        for col, lit in enumerate(line):
            if lit:
                put_pixel(buffer, x + col, y + row, color_index)


def draw_text(buffer: np.ndarray, x: int, y: int, text: str, color_index) -> None:
    """
    Draw ``text`` on one line, glyphs placed GLYPH_ADVANCE pixels apart.

    No kerning, no wrapping; characters past the right edge are clipped.
    """
    for i, character in enumerate(text):
        draw_glyph(buffer, x + i * GLYPH_ADVANCE, y, character, color_index)


__all__ = [
    "GLYPHS",
    "FALLBACK_GLYPH",
    "GLYPH_WIDTH",
    "GLYPH_HEIGHT",
    "GLYPH_ADVANCE",
    "new_pixel_buffer",
    "in_bounds",
    "put_pixel",
    "clip_segment",
    "draw_line",
    "draw_filled_circle",
    "glyph_for",
    "draw_glyph",
    "draw_text",
]

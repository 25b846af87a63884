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
ASCII Preview

Character-cell rendering of a trail for terminal previews. Uses the same
projection as the raster frames, with one character per trail point chosen
by recency.
"""

from typing import List

from lorenzanim.rendering.projection import project
from lorenzanim.types.trajectories import Trail

CLEAR_SCREEN = "\033[2J\033[H"

# (threshold, character), checked in order; recency must exceed threshold
RECENCY_CHARACTERS = (
    (0.9, "●"),
    (0.7, "◆"),
    (0.5, "▲"),
    (0.3, "♦"),
)
OLDEST_CHARACTER = "·"


def recency_character(intensity: float) -> str:
    for threshold, character in RECENCY_CHARACTERS:
        if intensity > threshold:
            return character
    return OLDEST_CHARACTER


def render_ascii_frame(trail: Trail, columns: int, rows: int, frame_index: int) -> List[str]:
    """
    Render a trail onto a character canvas.

    Parameters
    ----------
    trail : Trail
        Points oldest → newest; read only
    columns, rows : int
        Canvas size in characters
    frame_index : int
        Number shown in the header line

    Returns
    -------
    List[str]
        ``rows`` strings of exactly ``columns`` characters. Row 0 starts
        with the "Frame: N | Lorenz Attractor" header, clipped to the width.
    """
    canvas = [[" "] * columns for _ in range(rows)]

    n = len(trail)
    for i, point in enumerate(trail):
        coord = project(point, columns, rows)
        if coord is None:
            continue
        x, y = coord
        if 0 <= x < columns and 0 <= y < rows:
            canvas[y][x] = recency_character(i / n)

    header = f"Frame: {frame_index} | Lorenz Attractor"
    if rows > 0:
        for i, character in enumerate(header[:columns]):
            canvas[0][i] = character

    return ["".join(row) for row in canvas]


__all__ = [
    "CLEAR_SCREEN",
    "RECENCY_CHARACTERS",
    "OLDEST_CHARACTER",
    "recency_character",
    "render_ascii_frame",
]

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
Frame Builder

Composes one animation frame from a trail snapshot: the trail as
recency-colored line segments, a bright disc at the current position, and
two lines of overlay text.

The builder only reads the trail. It never touches the integrator, so a
frame depends solely on the trail contents at the moment it is built.
"""

from dataclasses import dataclass
from typing import Optional

from lorenzanim.rendering.palette import recency_color_index
from lorenzanim.rendering.projection import project
from lorenzanim.rendering.rasterizer import (
    draw_filled_circle,
    draw_line,
    draw_text,
    new_pixel_buffer,
)
from lorenzanim.types.core import MAX_COLOR_INDEX, ColorIndex, PixelBuffer, PixelCoord
from lorenzanim.types.trajectories import Trail


@dataclass(frozen=True)
class FrameStyle:
    """
    Fixed visual layout of a frame.

    Attributes
    ----------
    marker_radius : int
        Radius of the current-position disc
    marker_color : ColorIndex
        Palette index of the disc
    counter_position : PixelCoord
        Top-left corner of the frame counter text
    counter_color : ColorIndex
        Palette index of the frame counter
    title : str
        Title text
    title_position : PixelCoord
        Top-left corner of the title
    title_color : ColorIndex
        Palette index of the title
    """

    marker_radius: int = 3
    marker_color: ColorIndex = MAX_COLOR_INDEX
    counter_position: PixelCoord = (10, 20)
    counter_color: ColorIndex = 200
    title: str = "Lorenz Attractor Animation"
    title_position: PixelCoord = (10, 35)
    title_color: ColorIndex = 150


DEFAULT_STYLE = FrameStyle()


def build_frame(
    trail: Trail,
    width: int,
    height: int,
    frame_index: int,
    style: Optional[FrameStyle] = None,
) -> PixelBuffer:
    """
    Render one frame.

    Parameters
    ----------
    trail : Trail
        Points oldest → newest; read only
    width, height : int
        Frame size in pixels
    frame_index : int
        Number shown in the frame counter
    style : Optional[FrameStyle]
        Layout and colors; DEFAULT_STYLE if None

    Returns
    -------
    PixelBuffer
        New (height, width) indexed buffer. A trail shorter than two
        points yields an all-background buffer.

    Examples
    --------
    >>> integrator = create_integrator(SimulationConfig())
    >>> integrator.steps(1010)
    >>> frame = build_frame(integrator.trail, 800, 600, frame_index=0)
    >>> frame.shape
    (600, 800)
    """
    style = style if style is not None else DEFAULT_STYLE
    buffer = new_pixel_buffer(width, height)

    n = len(trail)
    if n < 2:
        return buffer

    # Segments, oldest first; iteration avoids random access into deques
    previous = None
    for i, point in enumerate(trail):
        current = project(point, width, height)
        if i > 0 and previous is not None and current is not None:
            draw_line(
                buffer,
                previous[0],
                previous[1],
                current[0],
                current[1],
                recency_color_index(i, n),
            )
        previous = current

    # Current position marker
    if previous is not None:
        draw_filled_circle(
            buffer, previous[0], previous[1], style.marker_radius, style.marker_color
        )

    cx, cy = style.counter_position
    draw_text(buffer, cx, cy, f"Frame: {frame_index}", style.counter_color)
    tx, ty = style.title_position
    draw_text(buffer, tx, ty, style.title, style.title_color)

    return buffer


__all__ = ["FrameStyle", "DEFAULT_STYLE", "build_frame"]

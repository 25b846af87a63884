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
Rendering
=========

Projection, rasterization primitives, palette and frame composition.

>>> from lorenzanim.rendering import build_frame, build_palette
>>> frame = build_frame(integrator.trail, 800, 600, frame_index=0)
>>> palette = build_palette()
"""

from .ascii_preview import render_ascii_frame
from .frame_builder import DEFAULT_STYLE, FrameStyle, build_frame
from .palette import (
    build_palette,
    hex_to_rgb,
    intensity_to_index,
    palette_to_bytes,
    recency_color_index,
)
from .projection import project
from .rasterizer import (
    FALLBACK_GLYPH,
    GLYPHS,
    draw_filled_circle,
    draw_glyph,
    draw_line,
    draw_text,
    new_pixel_buffer,
    put_pixel,
)

__all__ = [
    # Projection
    "project",
    # Rasterizer
    "GLYPHS",
    "FALLBACK_GLYPH",
    "new_pixel_buffer",
    "put_pixel",
    "draw_line",
    "draw_filled_circle",
    "draw_glyph",
    "draw_text",
    # Palette
    "build_palette",
    "hex_to_rgb",
    "intensity_to_index",
    "palette_to_bytes",
    "recency_color_index",
    # Frames
    "FrameStyle",
    "DEFAULT_STYLE",
    "build_frame",
    "render_ascii_frame",
]

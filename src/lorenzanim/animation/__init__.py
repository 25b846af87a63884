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
Animation
=========

Simulation loops and the raster sink.

>>> from lorenzanim.animation import create_animation
>>> create_animation(AnimationConfig(frame_count=120), "lorenz_animation.gif")
"""

from .driver import (
    create_animation,
    point_color,
    render_attractor_image,
    run,
    run_animation,
    run_ascii_preview,
    sensitivity_report,
)
from .encoders import (
    indexed_to_image,
    save_animation,
    save_indexed_image,
    save_rgb_image,
)

__all__ = [
    "run",
    "run_animation",
    "create_animation",
    "point_color",
    "render_attractor_image",
    "sensitivity_report",
    "run_ascii_preview",
    "indexed_to_image",
    "save_animation",
    "save_indexed_image",
    "save_rgb_image",
]

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
Types Module

Central import point for the type definitions used across lorenzanim.

Module Organization
------------------
- core: Points, pixel coordinates, raster buffers
- trajectories: Trails, frames and result containers
"""

from .core import (
    BACKGROUND_INDEX,
    MAX_COLOR_INDEX,
    ColorIndex,
    PixelBuffer,
    PixelCoord,
    Point3D,
    RGBColor,
    RGBImage,
)
from .trajectories import (
    Frame,
    FrameSequence,
    SensitivityResult,
    SensitivitySample,
    Trail,
)

__all__ = [
    # Core
    "Point3D",
    "PixelCoord",
    "ColorIndex",
    "PixelBuffer",
    "RGBImage",
    "RGBColor",
    "BACKGROUND_INDEX",
    "MAX_COLOR_INDEX",
    # Trajectories
    "Trail",
    "Frame",
    "FrameSequence",
    "SensitivitySample",
    "SensitivityResult",
]

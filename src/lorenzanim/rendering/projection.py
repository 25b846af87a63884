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
Projection

Fixed orthographic camera mapping Lorenz points onto the X-Z plane, the
classic "butterfly" view. There are no rotation parameters.

Scale factors come from the attractor's approximate extents
(x in [-25, 25], z in [0, 50]): the x axis spans the image width over 50
units, the z axis spans the image height over 60 units. x is centred
horizontally; z = 0 sits at 80% of the image height and larger z moves up,
so the wings reach toward the top of the frame.
"""

import math
from typing import Optional

from lorenzanim.types.core import PixelCoord, Point3D

X_EXTENT = 50.0
Z_EXTENT = 60.0
Z_BASELINE = 0.8


def project(p: Point3D, width: int, height: int) -> Optional[PixelCoord]:
    """
    Project a 3D point to pixel coordinates.

    Pure function of its inputs. The result is not clamped to the image.

    Parameters
    ----------
    p : Point3D
        Point to project (y is ignored)
    width, height : int
        Image size in pixels

    Returns
    -------
    Optional[PixelCoord]
        (px, py), truncated toward zero, or None when x or z (or the
        scaled result) is not finite

    Examples
    --------
    >>> project(Point3D(0.0, 0.0, 0.0), 800, 600)
    (400, 480)
    >>> project(Point3D(0.0, 0.0, 50.0), 800, 600)
    (400, -20)
    """
    if not (math.isfinite(p.x) and math.isfinite(p.z)):
        return None

    scale_x = width / X_EXTENT
    scale_z = height / Z_EXTENT
    center_x = width / 2.0
    center_z = height * Z_BASELINE

    px = p.x * scale_x + center_x
    pz = center_z - p.z * scale_z
    if not (math.isfinite(px) and math.isfinite(pz)):
        return None
    return int(px), int(pz)


__all__ = ["project", "X_EXTENT", "Z_EXTENT", "Z_BASELINE"]

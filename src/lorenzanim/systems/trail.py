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
Trail Buffer

Bounded, insertion-ordered history of recent trajectory points used to
render fading trails. Appending beyond capacity evicts the oldest point.
"""

from collections import deque
from typing import Iterator, Tuple

from lorenzanim.types.core import Point3D


class TrailBuffer:
    """
    Fixed-capacity FIFO of Point3D, oldest first.

    Parameters
    ----------
    capacity : int
        Maximum number of retained points, >= 1

    Examples
    --------
    >>> trail = TrailBuffer(capacity=2)
    >>> for i in range(3):
    ...     trail.append(Point3D(float(i), 0.0, 0.0))
    >>> [p.x for p in trail]
    [1.0, 2.0]
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"Trail capacity must be a positive integer, got {capacity!r}")
        self._points = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._points.maxlen

    def append(self, point: Point3D) -> None:
        """Add the newest point, evicting the oldest when full."""
        self._points.append(point)

    def clear(self) -> None:
        self._points.clear()

    def oldest(self) -> Point3D:
        """Oldest retained point. Raises IndexError when empty."""
        return self._points[0]

    def newest(self) -> Point3D:
        """Most recently appended point. Raises IndexError when empty."""
        return self._points[-1]

    def snapshot(self) -> Tuple[Point3D, ...]:
        """Immutable copy of the current contents, oldest first."""
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point3D]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point3D:
        return self._points[index]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(len={len(self)}, capacity={self.capacity})"


__all__ = ["TrailBuffer"]

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
Unit tests for the bounded trail buffer.
"""

import pytest

from lorenzanim.systems.trail import TrailBuffer
from lorenzanim.types.core import Point3D


def point(i):
    return Point3D(float(i), 0.0, 0.0)


class TestTrailBuffer:
    """Test FIFO behavior and bounds"""

    def test_starts_empty(self):
        """Test new buffer is empty"""
        trail = TrailBuffer(5)

        assert len(trail) == 0
        assert list(trail) == []
        assert trail.capacity == 5

    @pytest.mark.parametrize("n", [0, 1, 4, 5, 6, 17])
    def test_length_is_min_of_appends_and_capacity(self, n):
        """Test len == min(n, capacity)"""
        trail = TrailBuffer(5)
        for i in range(n):
            trail.append(point(i))

        assert len(trail) == min(n, 5)

    def test_fifo_eviction(self):
        """Test oldest points are evicted first"""
        trail = TrailBuffer(3)
        for i in range(1, 8):
            trail.append(point(i))

        assert [p.x for p in trail] == [5.0, 6.0, 7.0]
        assert trail.oldest() == point(5)
        assert trail.newest() == point(7)

    def test_indexing(self):
        """Test index access in oldest-to-newest order"""
        trail = TrailBuffer(4)
        for i in range(3):
            trail.append(point(i))

        assert trail[0] == point(0)
        assert trail[-1] == point(2)

    def test_snapshot_is_independent(self):
        """Test snapshot does not change with later appends"""
        trail = TrailBuffer(2)
        trail.append(point(1))
        snap = trail.snapshot()
        trail.append(point(2))

        assert snap == (point(1),)

    def test_clear(self):
        """Test clear empties the buffer but keeps capacity"""
        trail = TrailBuffer(2)
        trail.append(point(1))
        trail.clear()

        assert len(trail) == 0
        assert trail.capacity == 2

    def test_empty_access_raises(self):
        """Test oldest/newest on empty buffer raise IndexError"""
        trail = TrailBuffer(2)

        with pytest.raises(IndexError):
            trail.oldest()
        with pytest.raises(IndexError):
            trail.newest()

    @pytest.mark.parametrize("capacity", [0, -1, 2.5, True])
    def test_invalid_capacity(self, capacity):
        """Test non-positive or non-integer capacity is rejected"""
        with pytest.raises(ValueError):
            TrailBuffer(capacity)

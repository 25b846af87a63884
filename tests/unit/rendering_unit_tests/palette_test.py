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
Unit tests for the palette and recency color mapping.
"""

import math

import pytest

from lorenzanim.rendering.palette import (
    PALETTE_SIZE,
    build_palette,
    hex_to_rgb,
    intensity_to_index,
    palette_to_bytes,
    recency_color_index,
)


class TestHexToRgb:
    """Test hex color parsing"""

    def test_with_hash(self):
        """Test '#RRGGBB' parsing"""
        assert hex_to_rgb("#FF8000") == (255, 128, 0)

    def test_without_hash(self):
        """Test bare hex digits"""
        assert hex_to_rgb("0a0b0c") == (10, 11, 12)

    @pytest.mark.parametrize("value", ["#FFF", "#GGGGGG", ""])
    def test_invalid(self, value):
        """Test malformed colors raise ValueError"""
        with pytest.raises(ValueError):
            hex_to_rgb(value)


class TestBuildPalette:
    """Test palette construction"""

    def test_size_and_background(self):
        """Test 256 entries with black at index 0"""
        palette = build_palette()

        assert len(palette) == PALETTE_SIZE == 256
        assert palette[0] == (0, 0, 0)

    def test_components_in_range(self):
        """Test every component is a byte"""
        for color in build_palette():
            assert len(color) == 3
            assert all(0 <= c <= 255 for c in color)

    def test_no_entry_matches_background(self):
        """Test drawable indices are never pure black"""
        palette = build_palette()

        assert (0, 0, 0) not in palette[1:]

    def test_sinusoidal_entries(self):
        """Test entry values follow the rainbow formula"""
        palette = build_palette()
        t = 64 / 255.0

        expected = (
            int(math.sin(t * math.pi * 2) * 127 + 128),
            int(math.sin(t * math.pi * 2 + math.pi * 2 / 3) * 127 + 128),
            int(math.sin(t * math.pi * 2 + math.pi * 4 / 3) * 127 + 128),
        )
        assert palette[64] == expected

    def test_custom_background(self):
        """Test background color is configurable"""
        palette = build_palette("#102030")

        assert palette[0] == (16, 32, 48)
        assert palette[1:] == build_palette()[1:]

    def test_to_bytes(self):
        """Test flattening for image encoders"""
        flat = palette_to_bytes([(1, 2, 3), (4, 5, 6)])

        assert flat == [1, 2, 3, 4, 5, 6]
        assert len(palette_to_bytes(build_palette())) == 768


class TestRecencyMapping:
    """Test recency to palette index mapping"""

    def test_intensity_endpoints(self):
        """Test [0, 1] maps onto [1, 255]"""
        assert intensity_to_index(0.0) == 1
        assert intensity_to_index(1.0) == 255
        assert intensity_to_index(0.5) == 128

    def test_intensity_is_clamped(self):
        """Test out-of-range intensities are clamped"""
        assert intensity_to_index(-3.0) == 1
        assert intensity_to_index(7.0) == 255
        assert intensity_to_index(float("inf")) == 255
        assert intensity_to_index(float("-inf")) == 1

    def test_nan_is_background(self):
        """Test NaN intensity maps to the background index"""
        assert intensity_to_index(float("nan")) == 0

    def test_recency_never_background(self):
        """Test every trail segment gets a drawable index"""
        n = 2000
        indices = [recency_color_index(i, n) for i in range(1, n)]

        assert min(indices) >= 1
        assert max(indices) <= 255

    def test_recency_is_monotonic(self):
        """Test newer segments are at least as bright"""
        n = 300
        indices = [recency_color_index(i, n) for i in range(1, n)]

        assert indices == sorted(indices)
        assert indices[0] < 5
        assert indices[-1] > 250

    def test_empty_trail(self):
        """Test zero-length trail maps to background"""
        assert recency_color_index(0, 0) == 0

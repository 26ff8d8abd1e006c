"""
Unit Tests for Relative Luminance.
"""

import pytest

from core.color.luminance import luminance_of, partial_luminance, relative_luminance
from core.color.parser import RGBTriplet


class TestPartialLuminance:
    """Tests for per-channel gamma correction."""

    def test_linear_segment(self):
        """Test values at or below the threshold are divided by 12.92."""
        assert partial_luminance(0.0) == 0.0
        assert partial_luminance(0.03928) == pytest.approx(0.03928 / 12.92)

    def test_power_segment(self):
        """Test values above the threshold use the 2.4 power curve."""
        assert partial_luminance(0.5) == pytest.approx(0.21404, abs=1e-5)
        assert partial_luminance(1.0) == pytest.approx(1.0)

    def test_monotonic(self):
        """Test gamma correction preserves ordering."""
        values = [partial_luminance(c / 255.0) for c in range(256)]

        assert values == sorted(values)


class TestRelativeLuminance:
    """Tests for relative_luminance."""

    def test_black(self):
        """Test black has zero luminance."""
        assert relative_luminance(0, 0, 0) == 0.0

    def test_white(self):
        """Test white has unit luminance."""
        assert relative_luminance(255, 255, 255) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "rgb,expected",
        [
            ((255, 0, 0), 0.2126),
            ((0, 255, 0), 0.7152),
            ((0, 0, 255), 0.0722),
        ],
    )
    def test_primary_coefficients(self, rgb, expected):
        """Test each primary contributes its sRGB coefficient."""
        assert relative_luminance(*rgb) == pytest.approx(expected)

    def test_mid_grey(self):
        """Test a mid grey against the known WCAG value."""
        assert relative_luminance(119, 119, 119) == pytest.approx(0.18448, abs=1e-4)

    def test_luminance_of_triplet(self):
        """Test luminance_of accepts RGBTriplet and tuples."""
        assert luminance_of(RGBTriplet(255, 0, 0)) == relative_luminance(255, 0, 0)
        assert luminance_of((0, 0, 255)) == relative_luminance(0, 0, 255)

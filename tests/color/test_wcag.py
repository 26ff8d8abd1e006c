"""
Unit Tests for WCAG Conformance Levels.
"""

import pytest

from core.color.wcag import WCAGLevel, evaluate_conformance, meets_level, minimum_ratio


class TestMeetsLevel:
    """Tests for meets_level."""

    @pytest.mark.parametrize(
        "level,large_text,threshold",
        [
            (WCAGLevel.AA, False, 4.5),
            (WCAGLevel.AA, True, 3.0),
            (WCAGLevel.AAA, False, 7.0),
            (WCAGLevel.AAA, True, 4.5),
        ],
    )
    def test_thresholds(self, level, large_text, threshold):
        """Test each level passes at its threshold and fails just below."""
        assert minimum_ratio(level, large_text) == threshold
        assert meets_level(threshold, level, large_text)
        assert not meets_level(threshold - 0.01, level, large_text)

    def test_string_level(self):
        """Test levels may be given as strings."""
        assert meets_level(7.0, "AAA")


class TestEvaluateConformance:
    """Tests for evaluate_conformance."""

    def test_maximum_contrast(self):
        """Test black on white passes everything."""
        report = evaluate_conformance(21.0)

        assert all(report.to_dict().values())

    def test_no_contrast(self):
        """Test identical colors fail everything."""
        report = evaluate_conformance(1.0)

        assert not any(report.to_dict().values())

    def test_mid_grey(self):
        """Test a ratio that only passes AA large text."""
        report = evaluate_conformance(4.48)

        assert report.to_dict() == {
            "aa_normal": False,
            "aa_large": True,
            "aaa_normal": False,
            "aaa_large": False,
        }

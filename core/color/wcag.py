"""
WCAG conformance levels for a contrast ratio.

WCAG Requirements:
- AA normal text (<18pt or <14pt bold): 4.5:1 minimum
- AA large text: 3:1 minimum
- AAA normal text: 7:1 minimum
- AAA large text: 4.5:1 minimum
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class WCAGLevel(str, Enum):
    """WCAG conformance levels."""

    AA = "AA"
    AAA = "AAA"


THRESHOLDS = {
    (WCAGLevel.AA, False): 4.5,
    (WCAGLevel.AA, True): 3.0,
    (WCAGLevel.AAA, False): 7.0,
    (WCAGLevel.AAA, True): 4.5,
}


def minimum_ratio(level: WCAGLevel, large_text: bool = False) -> float:
    return THRESHOLDS[(WCAGLevel(level), large_text)]


def meets_level(ratio: float, level: WCAGLevel, large_text: bool = False) -> bool:
    """
    Check whether a contrast ratio satisfies a WCAG level.

    Examples:
        >>> meets_level(4.5, WCAGLevel.AA)
        True
        >>> meets_level(4.49, WCAGLevel.AA)
        False
        >>> meets_level(4.49, WCAGLevel.AA, large_text=True)
        True
    """
    return ratio >= minimum_ratio(level, large_text)


@dataclass(frozen=True)
class ConformanceReport:
    """Pass/fail for each WCAG level and text size."""

    ratio: float
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool

    def to_dict(self) -> Dict[str, bool]:
        return {
            "aa_normal": self.aa_normal,
            "aa_large": self.aa_large,
            "aaa_normal": self.aaa_normal,
            "aaa_large": self.aaa_large,
        }


def evaluate_conformance(ratio: float) -> ConformanceReport:
    return ConformanceReport(
        ratio=ratio,
        aa_normal=meets_level(ratio, WCAGLevel.AA),
        aa_large=meets_level(ratio, WCAGLevel.AA, large_text=True),
        aaa_normal=meets_level(ratio, WCAGLevel.AAA),
        aaa_large=meets_level(ratio, WCAGLevel.AAA, large_text=True),
    )

"""
WCAG contrast ratio.

Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter luminance.
See https://www.w3.org/TR/UNDERSTANDING-WCAG20/visual-audio-contrast-contrast.html#contrast-ratiodef
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.color.errors import ParseErrorKind
from core.color.luminance import luminance_of
from core.color.parser import ParseResult, parse_color

logger = logging.getLogger("contrast.ratio")

# Ambient light offset added to both luminances
FLARE = 0.05

MIN_RATIO = 1.0
MAX_RATIO = 21.0


def contrast_ratio(l1: float, l2: float) -> float:
    """
    Calculate the contrast ratio between two relative luminances.

    The result does not depend on argument order.

    Args:
        l1: First relative luminance (0-1)
        l2: Second relative luminance (0-1)

    Returns:
        Contrast ratio (1-21)
        - 1 = no contrast (same luminance)
        - 21 = maximum contrast (black and white)
    """
    l1 += FLARE
    l2 += FLARE

    return l1 / l2 if l1 > l2 else l2 / l1


@dataclass(frozen=True)
class ContrastResult:
    """Outcome of comparing two color tokens."""

    first: ParseResult
    second: ParseResult
    luminance1: Optional[float] = None
    luminance2: Optional[float] = None
    ratio: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.ratio is not None

    @property
    def failure(self) -> Optional[ParseResult]:
        """First failed parse, if any."""
        for parsed in (self.first, self.second):
            if not parsed.ok:
                return parsed
        return None

    @property
    def error_kind(self) -> Optional[ParseErrorKind]:
        failed = self.failure
        return failed.error_kind if failed else None

    @property
    def message(self) -> Optional[str]:
        failed = self.failure
        return failed.message if failed else None

    def to_dict(self, precision: Optional[int] = None) -> Dict[str, Any]:
        ratio = self.ratio
        if ratio is not None and precision is not None:
            ratio = round(ratio, precision)
        return {
            "l1": self.first.token,
            "l2": self.second.token,
            "rgb1": list(self.first.value) if self.first.ok else None,
            "rgb2": list(self.second.value) if self.second.ok else None,
            "luminance1": self.luminance1,
            "luminance2": self.luminance2,
            "contrast_ratio": ratio,
        }


def contrast_ratio_for_tokens(token1: str, token2: str) -> ContrastResult:
    """
    Parse two color tokens and compute their contrast ratio.

    Both tokens are parsed; a failure in either is reported on the result
    rather than raised.

    Args:
        token1: First color token
        token2: Second color token

    Returns:
        ContrastResult with the ratio set on success
    """
    first = parse_color(token1)
    second = parse_color(token2)

    if not (first.ok and second.ok):
        return ContrastResult(first=first, second=second)

    luminance1 = luminance_of(first.value)
    luminance2 = luminance_of(second.value)
    ratio = contrast_ratio(luminance1, luminance2)

    logger.debug(
        f"{first.value.to_hex()} (L={luminance1:.4f}) vs "
        f"{second.value.to_hex()} (L={luminance2:.4f}) -> {ratio:.4f}"
    )

    return ContrastResult(
        first=first,
        second=second,
        luminance1=luminance1,
        luminance2=luminance2,
        ratio=ratio,
    )

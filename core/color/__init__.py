"""
Color parsing, relative luminance and WCAG contrast ratio.

Pipeline: color token -> RGBTriplet -> relative luminance -> contrast ratio.
"""

from .errors import ColorParseError, ParseErrorKind
from .parser import (
    RGBTriplet,
    ParseResult,
    parse_color,
    parse_color_or_raise,
)
from .luminance import (
    partial_luminance,
    relative_luminance,
    luminance_of,
)
from .contrast import (
    ContrastResult,
    contrast_ratio,
    contrast_ratio_for_tokens,
)
from .wcag import (
    ConformanceReport,
    WCAGLevel,
    evaluate_conformance,
    meets_level,
)

__all__ = [
    # Errors
    'ColorParseError',
    'ParseErrorKind',

    # Parsing
    'RGBTriplet',
    'ParseResult',
    'parse_color',
    'parse_color_or_raise',

    # Luminance
    'partial_luminance',
    'relative_luminance',
    'luminance_of',

    # Contrast
    'ContrastResult',
    'contrast_ratio',
    'contrast_ratio_for_tokens',

    # WCAG conformance
    'ConformanceReport',
    'WCAGLevel',
    'evaluate_conformance',
    'meets_level',
]

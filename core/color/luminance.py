"""
Relative luminance per WCAG 2.x.

See https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
"""

from typing import Union

from core.color.parser import RGBTriplet

# sRGB relative-luminance coefficients
RED_COEFFICIENT = 0.2126
GREEN_COEFFICIENT = 0.7152
BLUE_COEFFICIENT = 0.0722

LINEAR_THRESHOLD = 0.03928


def partial_luminance(channel: float) -> float:
    """
    Gamma-correct one normalized channel value.

    Args:
        channel: Channel value scaled to 0-1

    Returns:
        Linearized channel value (0-1)
    """
    if channel <= LINEAR_THRESHOLD:
        return channel / 12.92
    else:
        return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """
    Calculate relative luminance of an sRGB color.

    Args:
        r: Red value (0-255)
        g: Green value (0-255)
        b: Blue value (0-255)

    Returns:
        Relative luminance value (0-1)
        - 0 = darkest black
        - 1 = lightest white

    Examples:
        >>> relative_luminance(0, 0, 0)
        0.0
        >>> round(relative_luminance(255, 255, 255), 6)
        1.0
    """
    r_linear = partial_luminance(r / 255.0)
    g_linear = partial_luminance(g / 255.0)
    b_linear = partial_luminance(b / 255.0)

    return RED_COEFFICIENT * r_linear + GREEN_COEFFICIENT * g_linear + BLUE_COEFFICIENT * b_linear


def luminance_of(color: Union[RGBTriplet, tuple]) -> float:
    """Relative luminance of an RGBTriplet or (r, g, b) tuple."""
    r, g, b = color
    return relative_luminance(r, g, b)

"""
Color token parsing.

Accepts a 6-digit hex color (``RRGGBB``) or a decimal triplet (``R,G,B``).
A single leading ``#`` or ``0x`` prefix is stripped first. Short hex forms
(``#RGB``) are not expanded and surrounding whitespace is not trimmed.

Examples:
    >>> parse_color("#FF0080").value
    RGBTriplet(red=255, green=0, blue=128)
    >>> parse_color("255,0,128").value
    RGBTriplet(red=255, green=0, blue=128)
    >>> parse_color("12345").error_kind
    <ParseErrorKind.INVALID_FORMAT: 'INVALID_FORMAT'>
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Optional

from core.color.errors import ColorParseError, ParseErrorKind

logger = logging.getLogger("contrast.parser")

CHANNEL_MIN = 0
CHANNEL_MAX = 255

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_HEX_PAIR_RE = re.compile(r"[0-9A-Fa-f]{2}")


@dataclass(frozen=True)
class RGBTriplet:
    """Three 8-bit channel values in red, green, blue order."""

    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} channel must be an int, got {type(value).__name__}")
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise ValueError(
                    f"{name} channel must be between {CHANNEL_MIN} and {CHANNEL_MAX}, got {value}"
                )

    def __iter__(self) -> Iterator[int]:
        return iter((self.red, self.green, self.blue))

    def to_hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing one color token.

    Exactly one of ``value`` or ``error_kind`` is set.
    """

    token: str
    value: Optional[RGBTriplet] = None
    error_kind: Optional[ParseErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, token: str, value: RGBTriplet) -> "ParseResult":
        return cls(token=token, value=value)

    @classmethod
    def failure(cls, token: str, kind: ParseErrorKind, message: str) -> "ParseResult":
        logger.debug(f"Rejected color token {token!r}: {kind.value}")
        return cls(token=token, error_kind=kind, message=message)

    def error_dict(self) -> Optional[dict]:
        if self.ok:
            return None
        return {
            "error": self.error_kind.value,
            "token": self.token,
            "message": self.message,
        }

    def unwrap(self) -> RGBTriplet:
        """
        Return the parsed triplet.

        Raises:
            ColorParseError: If parsing failed
        """
        if not self.ok:
            raise ColorParseError(self.error_kind, self.token, self.message)
        return self.value


def _strip_prefix(token: str) -> str:
    if token.startswith("#"):
        return token[1:]
    if token.startswith("0x"):
        return token[2:]
    return token


def _parse_decimal(token: str, parts: list) -> ParseResult:
    channels = []
    for part in parts:
        if not _DECIMAL_RE.fullmatch(part):
            return _rgb_failure(token)
        channel = int(part)
        if not CHANNEL_MIN <= channel <= CHANNEL_MAX:
            return _rgb_failure(token)
        channels.append(channel)

    return ParseResult.success(token, RGBTriplet(*channels))


def _rgb_failure(token: str) -> ParseResult:
    return ParseResult.failure(
        token,
        ParseErrorKind.INVALID_RGB_VALUE,
        f"Invalid RGB value in '{token}': each channel must be an integer "
        f"between {CHANNEL_MIN} and {CHANNEL_MAX}.",
    )


def _parse_hex(token: str, body: str) -> ParseResult:
    channels = []
    for offset in (0, 2, 4):
        pair = body[offset:offset + 2]
        if not _HEX_PAIR_RE.fullmatch(pair):
            return ParseResult.failure(
                token,
                ParseErrorKind.INVALID_HEX_VALUE,
                f"Invalid hex value in '{token}': '{pair}' is not a hexadecimal number.",
            )
        channels.append(int(pair, 16))

    return ParseResult.success(token, RGBTriplet(*channels))


def parse_color(token: str) -> ParseResult:
    """
    Parse a color token into an RGB triplet.

    Args:
        token: Hex (``RRGGBB``, ``#RRGGBB``, ``0xRRGGBB``) or decimal
            (``R,G,B``) color string

    Returns:
        ParseResult holding either the RGBTriplet or the error kind and a
        message naming the original token
    """
    body = _strip_prefix(token)

    parts = body.split(",")
    if len(parts) == 3:
        return _parse_decimal(token, parts)

    if len(body) == 6:
        return _parse_hex(token, body)

    return ParseResult.failure(
        token,
        ParseErrorKind.INVALID_FORMAT,
        f"Invalid color format: '{token}'. Expected RRGGBB (optionally prefixed "
        f"with '#' or '0x') or R,G,B.",
    )


def parse_color_or_raise(token: str) -> RGBTriplet:
    """Parse a color token, raising ColorParseError on failure."""
    return parse_color(token).unwrap()

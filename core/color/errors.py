"""
Color parsing error types.

Parsing returns failures as values (see ``core.color.parser.ParseResult``);
``ColorParseError`` exists for callers that want to raise one.
"""

from enum import Enum


class ParseErrorKind(str, Enum):
    """Why a color token was rejected."""

    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_RGB_VALUE = "INVALID_RGB_VALUE"
    INVALID_HEX_VALUE = "INVALID_HEX_VALUE"


class ColorParseError(ValueError):
    """Raised when an unwrapped parse result holds an error."""

    def __init__(self, kind: ParseErrorKind, token: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.token = token
        self.message = message

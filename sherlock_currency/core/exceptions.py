"""Error variants of the conversion pipeline.

Every failure belongs to exactly one ErrorKind; the response formatter
picks its template from ``error.kind`` and never from the message text.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    USAGE = "usage"
    PARSE = "parse"
    NETWORK = "network"
    UNSUPPORTED_CURRENCY = "unsupported_currency"
    GENERIC = "generic"


class ConversionError(Exception):
    """Base class for all pipeline errors."""

    kind: ErrorKind = ErrorKind.GENERIC


class UsageError(ConversionError):
    """No conversion parameters were given on the command line."""

    kind = ErrorKind.USAGE

    def __init__(self) -> None:
        super().__init__(
            "Error: No conversion parameters provided. "
            "Usage: sherlock-currency [amount] [from_currency] [to_currency]"
        )


class ParseError(ConversionError):
    """Query does not match the supported grammar."""

    kind = ErrorKind.PARSE

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class NetworkError(ConversionError):
    """Rate service unreachable, non-success status or malformed body."""

    kind = ErrorKind.NETWORK

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        super().__init__(reason)


class UnsupportedCurrencyError(ConversionError):
    """Target code missing from the rate table."""

    kind = ErrorKind.UNSUPPORTED_CURRENCY

    def __init__(self, code: str) -> None:
        self.code = (code or "").upper()
        super().__init__(f"Currency '{self.code}' not supported or not found")


class GenericConversionError(ConversionError):
    kind = ErrorKind.GENERIC

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

"""Exception hierarchy for duration parsing and arithmetic."""

from __future__ import annotations

import enum


class ParseErrorKind(enum.StrEnum):
    EMPTY_INPUT = "empty_input"
    INVALID_NUMBER = "invalid_number"
    UNKNOWN_UNIT = "unknown_unit"
    OUT_OF_ORDER_UNIT = "out_of_order_unit"
    OVERFLOW = "overflow"
    TRAILING_INPUT = "trailing_input"


class DurationError(ValueError):
    """Base exception for duration errors.

    Provides dual messaging: a short user-facing message and
    internal details (input text, offsets) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class ParseError(DurationError):
    """Raised when duration text cannot be parsed.

    ``position`` is the offset of the offending fragment in ``text``. Both are
    ``None`` when the error comes from programmatic construction rather than
    from parsing text.
    """

    kind: ParseErrorKind

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        text: str | None = None,
        position: int | None = None,
        fragment: str | None = None,
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.text = text
        self.position = position
        self.fragment = fragment


class EmptyInputError(ParseError):
    """Raised when the input contains no tokens."""

    kind = ParseErrorKind.EMPTY_INPUT


class InvalidNumberError(ParseError):
    """Raised when an amount is malformed or exceeds the integer width."""

    kind = ParseErrorKind.INVALID_NUMBER


class UnknownUnitError(ParseError):
    """Raised when a unit letter is not in the unit table."""

    kind = ParseErrorKind.UNKNOWN_UNIT


class OutOfOrderUnitError(ParseError):
    """Raised when a unit repeats or does not strictly decrease."""

    kind = ParseErrorKind.OUT_OF_ORDER_UNIT


class DurationOverflowError(ParseError):
    """Raised when a component or the running total exceeds the representable range."""

    kind = ParseErrorKind.OVERFLOW


class TrailingInputError(ParseError):
    """Raised when characters outside the token grammar remain in the input."""

    kind = ParseErrorKind.TRAILING_INPUT


class DurationRangeError(DurationError):
    """Raised when a duration is constructed or computed outside its range."""


class UnsupportedValueError(DurationError):
    """Raised when a value of the wrong type is given for parsing or deserialization."""


# User-facing error message constants
ERR_MSG_EMPTY_INPUT = "empty duration"
ERR_MSG_INVALID_NUMBER = "invalid duration amount"
ERR_MSG_UNKNOWN_UNIT = "unknown duration unit"
ERR_MSG_OUT_OF_ORDER_UNIT = "duration units must appear once, in the order w, d, h, m, s"
ERR_MSG_OVERFLOW = "duration too large"
ERR_MSG_TRAILING_INPUT = "unexpected characters in duration"
ERR_MSG_OUT_OF_RANGE = "duration out of range"
ERR_MSG_UNSUPPORTED_VALUE = "unsupported duration value"

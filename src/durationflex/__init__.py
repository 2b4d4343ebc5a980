"""durationflex - Compact duration notation (1w6d23h49m59s) for configuration and CLIs."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("durationflex")
except PackageNotFoundError:  # running from a source tree without install metadata
    __version__ = "0.0.0.dev0"

from durationflex._constants import MAX_SECONDS
from durationflex._errors import (
    DurationError,
    DurationOverflowError,
    DurationRangeError,
    EmptyInputError,
    InvalidNumberError,
    OutOfOrderUnitError,
    ParseError,
    ParseErrorKind,
    TrailingInputError,
    UnknownUnitError,
    UnsupportedValueError,
)
from durationflex._formatter import format_duration
from durationflex._parser import parse
from durationflex.duration import ZERO, Duration
from durationflex.units import UNITS, Unit

__all__ = [
    "parse",
    "format_duration",
    "Duration",
    "Unit",
    "UNITS",
    "ZERO",
    "MAX_SECONDS",
    "DurationError",
    "ParseError",
    "ParseErrorKind",
    "EmptyInputError",
    "InvalidNumberError",
    "UnknownUnitError",
    "OutOfOrderUnitError",
    "DurationOverflowError",
    "TrailingInputError",
    "DurationRangeError",
    "UnsupportedValueError",
]

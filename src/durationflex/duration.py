"""The Duration value type."""

from __future__ import annotations

import functools
from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Any

from durationflex._constants import MAX_SECONDS, SECONDS_PER_DAY
from durationflex._errors import (
    ERR_MSG_OUT_OF_RANGE,
    ERR_MSG_UNSUPPORTED_VALUE,
    DurationRangeError,
    UnsupportedValueError,
)
from durationflex.units import Accumulator, Component, Unit, split_seconds


@functools.total_ordering
class Duration:
    """A non-negative amount of elapsed time, stored as whole seconds.

    Instances are immutable, hashable and totally ordered. ``str()`` gives the
    canonical text (``1h30m``), which :func:`durationflex.parse` accepts back.

    Arithmetic between durations never wraps: results below zero or above
    ``MAX_SECONDS`` raise :class:`DurationRangeError`. Durations also combine
    with ``timedelta`` (giving a ``timedelta``) and ``datetime`` (giving a
    ``datetime``).
    """

    # Plain class: pydantic dumps dataclasses as dicts in python mode.
    __slots__ = ("_seconds",)

    def __init__(self, seconds: int = 0) -> None:
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise UnsupportedValueError(
                ERR_MSG_UNSUPPORTED_VALUE,
                f"seconds must be an int, got {type(seconds).__name__}",
            )
        if not 0 <= seconds <= MAX_SECONDS:
            raise DurationRangeError(
                ERR_MSG_OUT_OF_RANGE,
                f"{seconds} seconds is outside [0, {MAX_SECONDS}]",
            )
        self._seconds = seconds

    @property
    def seconds(self) -> int:
        return self._seconds

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds < other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds})"

    # --- Construction ---

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        return cls(seconds)

    @classmethod
    def from_components(cls, components: Iterable[tuple[Unit, int]]) -> Duration:
        """Build a duration from ``(unit, amount)`` pairs.

        The pairs follow the same rules as parsed text: units strictly
        descending, each at most once, and no overflow.
        """
        acc = Accumulator()
        for unit, amount in components:
            acc.add(Component(unit, amount))
        return cls(acc.total)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Duration:
        """Convert a non-negative ``timedelta``, dropping sub-second precision."""
        if value < timedelta(0):
            raise DurationRangeError(
                ERR_MSG_OUT_OF_RANGE,
                f"negative timedelta {value!r}",
            )
        return cls(value.days * SECONDS_PER_DAY + value.seconds)

    @classmethod
    def parse(cls, text: str) -> Duration:
        from durationflex._parser import parse

        return parse(text)

    # --- Accessors ---

    def total_seconds(self) -> int:
        return self.seconds

    def to_timedelta(self) -> timedelta:
        try:
            return timedelta(seconds=self.seconds)
        except OverflowError as e:
            raise DurationRangeError(
                ERR_MSG_OUT_OF_RANGE,
                f"{self.seconds} seconds exceeds timedelta.max",
                wrapped=e,
            ) from e

    def components(self) -> list[tuple[Unit, int]]:
        """Non-zero ``(unit, amount)`` pairs of the canonical form, largest unit first."""
        return split_seconds(self.seconds)

    def __bool__(self) -> bool:
        return self.seconds != 0

    def __str__(self) -> str:
        from durationflex._formatter import format_duration

        return format_duration(self)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    # --- Arithmetic ---

    def __add__(self, other: Any) -> Any:
        if isinstance(other, Duration):
            return self._checked(self.seconds + other.seconds, "+", other)
        if isinstance(other, (timedelta, datetime)):
            return other + self.to_timedelta()
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        if isinstance(other, (timedelta, datetime)):
            return other + self.to_timedelta()
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, Duration):
            return self._checked(self.seconds - other.seconds, "-", other)
        if isinstance(other, timedelta):
            return self.to_timedelta() - other
        return NotImplemented

    def __rsub__(self, other: Any) -> Any:
        if isinstance(other, (timedelta, datetime)):
            return other - self.to_timedelta()
        return NotImplemented

    def _checked(self, seconds: int, op: str, other: Duration) -> Duration:
        if not 0 <= seconds <= MAX_SECONDS:
            raise DurationRangeError(
                ERR_MSG_OUT_OF_RANGE,
                f"{self.seconds}s {op} {other.seconds}s = {seconds}s is outside [0, {MAX_SECONDS}]",
            )
        return Duration(seconds)

    # --- pydantic ---

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from durationflex.serialization import duration_core_schema

        return duration_core_schema(allow_numeric=False)

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict[str, Any]:
        from durationflex.serialization import duration_json_schema

        return duration_json_schema(allow_numeric=False)


ZERO = Duration(0)

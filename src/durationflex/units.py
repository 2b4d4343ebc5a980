"""Unit table and component accumulation shared by the parser and the formatter."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from durationflex._constants import (
    MAX_SECONDS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
)
from durationflex._errors import (
    ERR_MSG_INVALID_NUMBER,
    ERR_MSG_OUT_OF_ORDER_UNIT,
    ERR_MSG_OVERFLOW,
    ERR_MSG_UNKNOWN_UNIT,
    DurationOverflowError,
    InvalidNumberError,
    OutOfOrderUnitError,
    UnknownUnitError,
)


class Unit(enum.Enum):
    """Supported units, declared from the largest magnitude to the smallest."""

    WEEK = ("w", SECONDS_PER_WEEK)
    DAY = ("d", SECONDS_PER_DAY)
    HOUR = ("h", SECONDS_PER_HOUR)
    MINUTE = ("m", SECONDS_PER_MINUTE)
    SECOND = ("s", 1)

    def __init__(self, tag: str, factor: int) -> None:
        self.tag = tag
        self.factor = factor

    @property
    def rank(self) -> int:
        """Position in the magnitude order, 0 for the largest unit."""
        return _RANKS[self]

    @classmethod
    def from_tag(cls, tag: str) -> Unit:
        try:
            return _BY_TAG[tag]
        except KeyError:
            raise UnknownUnitError(
                ERR_MSG_UNKNOWN_UNIT,
                f"unit {tag!r} is not one of {', '.join(_BY_TAG)}",
                fragment=tag,
            ) from None


UNITS: tuple[Unit, ...] = tuple(Unit)
_RANKS: dict[Unit, int] = {unit: i for i, unit in enumerate(UNITS)}
_BY_TAG: dict[str, Unit] = {unit.tag: unit for unit in UNITS}


@dataclass(frozen=True)
class Component:
    """A single ``(unit, amount)`` pair, with its location when it came from text."""

    unit: Unit
    amount: int
    position: int | None = None
    fragment: str | None = None


class Accumulator:
    """Sums components while enforcing strictly descending units and the range limit."""

    def __init__(self, text: str | None = None) -> None:
        self._text = text
        self._last: Unit | None = None
        self._total = 0
        self._count = 0

    @property
    def total(self) -> int:
        return self._total

    @property
    def count(self) -> int:
        return self._count

    def add(self, component: Component) -> None:
        unit, amount = component.unit, component.amount
        if not isinstance(unit, Unit):
            raise UnknownUnitError(
                ERR_MSG_UNKNOWN_UNIT,
                f"{unit!r} is not a Unit",
                **self._location(component),
            )
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidNumberError(
                ERR_MSG_INVALID_NUMBER,
                f"amount {amount!r} for unit {unit.tag!r} is not a non-negative integer",
                **self._location(component),
            )
        if amount > MAX_SECONDS:
            raise InvalidNumberError(
                ERR_MSG_INVALID_NUMBER,
                f"amount {amount} exceeds {MAX_SECONDS}",
                **self._location(component),
            )
        if self._last is not None and unit.rank <= self._last.rank:
            raise OutOfOrderUnitError(
                ERR_MSG_OUT_OF_ORDER_UNIT,
                f"unit {unit.tag!r} follows {self._last.tag!r}",
                **self._location(component),
            )
        if amount > (MAX_SECONDS - self._total) // unit.factor:
            raise DurationOverflowError(
                ERR_MSG_OVERFLOW,
                f"{amount}{unit.tag} on top of {self._total}s exceeds {MAX_SECONDS}s",
                **self._location(component),
            )
        self._total += amount * unit.factor
        self._last = unit
        self._count += 1

    def _location(self, component: Component) -> dict[str, Any]:
        return {
            "text": self._text,
            "position": component.position,
            "fragment": component.fragment,
        }


def split_seconds(seconds: int) -> list[tuple[Unit, int]]:
    """Break a count of seconds into non-zero amounts of the largest units possible."""
    parts = []
    remaining = seconds
    for unit in UNITS:
        amount, remaining = divmod(remaining, unit.factor)
        if amount:
            parts.append((unit, amount))
    return parts

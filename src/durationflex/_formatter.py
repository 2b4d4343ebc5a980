"""Canonical text rendering of durations."""

from __future__ import annotations

from io import StringIO

from durationflex._constants import ZERO_TEXT
from durationflex.duration import Duration
from durationflex.units import split_seconds


def format_duration(duration: Duration) -> str:
    """Render a Duration as canonical text, e.g. ``5400`` seconds -> ``1h30m``.

    Units are emitted largest first with zero amounts omitted, so the result
    is the unique text that parses back to the same duration. The zero
    duration renders as ``0s``.
    """
    w = StringIO()
    for unit, amount in split_seconds(duration.seconds):
        w.write(str(amount))
        w.write(unit.tag)
    return w.getvalue() or ZERO_TEXT

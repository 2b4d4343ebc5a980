"""Numeric limits and fixed representations for duration conversion."""

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY

MAX_SECONDS = 2**63 - 1
"""Largest representable duration, the range of a signed 64-bit count of seconds."""

ZERO_TEXT = "0s"
"""Canonical text of the zero duration."""

DURATION_PATTERN = r"^(?=[0-9])([0-9]+w)?([0-9]+d)?([0-9]+h)?([0-9]+m)?([0-9]+s)?$"
"""Regex describing canonical and accepted text, published in JSON schemas."""

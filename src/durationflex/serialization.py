"""Structured-data integration: plain helpers and pydantic field types.

Two wire shapes exist. Canonical text (``"1h30m"``) is always accepted and
always produced. A plain integer count of seconds is accepted only when
numeric fallback is enabled, for configuration fields that used to be
integers; it is never produced.

Usage with pydantic::

    class Settings(BaseModel):
        timeout: Duration                   # text only
        legacy_interval: DurationOrSeconds  # text or integer seconds
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from durationflex._constants import DURATION_PATTERN, MAX_SECONDS
from durationflex._errors import ERR_MSG_UNSUPPORTED_VALUE, UnsupportedValueError
from durationflex._formatter import format_duration
from durationflex._parser import parse
from durationflex.duration import Duration


def serialize(duration: Duration) -> str:
    return format_duration(duration)


def deserialize(value: Any, *, allow_numeric: bool = False) -> Duration:
    """Convert a wire value into a Duration.

    Args:
        value: A Duration, duration text, or (with ``allow_numeric``) an
            integer count of seconds.
        allow_numeric: Accept plain integers as seconds.

    Raises:
        ParseError: If text does not parse.
        DurationRangeError: If an integer is negative or too large.
        UnsupportedValueError: For any other type, including integers when
            numeric fallback is disabled.
    """
    if isinstance(value, Duration):
        return value
    if isinstance(value, str):
        return parse(value)
    if isinstance(value, int) and not isinstance(value, bool):
        if allow_numeric:
            return Duration.from_seconds(value)
        raise UnsupportedValueError(
            ERR_MSG_UNSUPPORTED_VALUE,
            f"integer {value} given where duration text is required (numeric fallback disabled)",
        )
    raise UnsupportedValueError(
        ERR_MSG_UNSUPPORTED_VALUE,
        f"cannot deserialize {type(value).__name__} as a duration",
    )


def _serialize_field(value: Duration, info: core_schema.SerializationInfo) -> Duration | str:
    # Python mode keeps the Duration; JSON mode emits canonical text.
    if info.mode_is_json():
        return serialize(value)
    return value


def duration_core_schema(*, allow_numeric: bool = False) -> CoreSchema:
    return core_schema.no_info_plain_validator_function(
        functools.partial(deserialize, allow_numeric=allow_numeric),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _serialize_field, info_arg=True
        ),
    )


def duration_json_schema(*, allow_numeric: bool = False) -> JsonSchemaValue:
    text_schema: JsonSchemaValue = {
        "type": "string",
        "pattern": DURATION_PATTERN,
        "examples": ["1h30m", "1w6d23h49m59s"],
    }
    if not allow_numeric:
        return text_schema
    return {
        "anyOf": [
            text_schema,
            {"type": "integer", "minimum": 0, "maximum": MAX_SECONDS},
        ]
    }


@dataclass(frozen=True)
class DurationValidation:
    """``Annotated`` marker selecting the accepted wire shapes for a Duration field."""

    allow_numeric: bool = False

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return duration_core_schema(allow_numeric=self.allow_numeric)

    def __get_pydantic_json_schema__(
        self, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return duration_json_schema(allow_numeric=self.allow_numeric)


DurationText = Annotated[Duration, DurationValidation()]
DurationOrSeconds = Annotated[Duration, DurationValidation(allow_numeric=True)]

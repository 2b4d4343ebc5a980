"""Structured-data integration tests."""

import json

import pytest
from pydantic import BaseModel, ValidationError

from durationflex import (
    Duration,
    DurationRangeError,
    OutOfOrderUnitError,
    TrailingInputError,
    UnsupportedValueError,
)
from durationflex.serialization import (
    DurationOrSeconds,
    DurationText,
    deserialize,
    serialize,
)


class Settings(BaseModel):
    timeout: Duration
    poll_interval: DurationText = Duration(300)
    legacy_interval: DurationOrSeconds = Duration(60)


class TestSerialize:
    def test_canonical_text(self):
        assert serialize(Duration(5400)) == "1h30m"

    def test_zero(self):
        assert serialize(Duration(0)) == "0s"


class TestDeserialize:
    def test_text(self):
        assert deserialize("1w2d") == Duration(9 * 86400)

    def test_duration_passthrough(self):
        d = Duration(5)
        assert deserialize(d) is d

    def test_parse_error_propagates(self):
        with pytest.raises(OutOfOrderUnitError):
            deserialize("5m3h")

    def test_integer_rejected_by_default(self):
        with pytest.raises(UnsupportedValueError, match="unsupported duration value"):
            deserialize(60)

    def test_integer_with_numeric_fallback(self):
        assert deserialize(60, allow_numeric=True) == Duration(60)

    def test_text_with_numeric_fallback(self):
        assert deserialize("1m", allow_numeric=True) == Duration(60)

    def test_digit_string_is_not_numeric(self):
        with pytest.raises(TrailingInputError):
            deserialize("60", allow_numeric=True)

    def test_negative_integer(self):
        with pytest.raises(DurationRangeError):
            deserialize(-1, allow_numeric=True)

    @pytest.mark.parametrize("value", [True, 1.5, None, [1], {"s": 1}])
    def test_other_types(self, value):
        with pytest.raises(UnsupportedValueError):
            deserialize(value, allow_numeric=True)


class TestPydanticModel:
    def test_validate_text(self):
        settings = Settings(timeout="1h23m")
        assert settings.timeout == Duration(4980)
        assert settings.poll_interval == Duration(300)

    def test_validate_json(self):
        settings = Settings.model_validate_json(
            '{"timeout": "1w6d23h49m59s", "legacy_interval": 120}'
        )
        assert settings.timeout == Duration(1_208_999)
        assert settings.legacy_interval == Duration(120)

    def test_text_field_rejects_integer(self):
        with pytest.raises(ValidationError):
            Settings(timeout=60)

    def test_text_only_alias_rejects_integer(self):
        with pytest.raises(ValidationError):
            Settings(timeout="1m", poll_interval=60)

    def test_invalid_text(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(timeout="5m3h")
        assert "duration units must appear once" in str(exc_info.value)

    def test_dump_json_uses_canonical_text(self):
        settings = Settings(timeout="90m", legacy_interval=3600)
        data = json.loads(settings.model_dump_json())
        assert data == {
            "timeout": "1h30m",
            "poll_interval": "5m",
            "legacy_interval": "1h",
        }

    def test_dump_python_keeps_duration(self):
        settings = Settings(timeout="90m")
        assert settings.model_dump()["timeout"] == Duration(5400)
        assert settings.model_dump(mode="json")["timeout"] == "1h30m"

    def test_python_round_trip(self):
        settings = Settings(timeout="90m", legacy_interval=3600)
        dumped = settings.model_dump()
        assert dumped["legacy_interval"] == Duration(3600)
        assert Settings.model_validate(dumped) == settings

    def test_json_round_trip(self):
        settings = Settings(timeout="2w1d", legacy_interval=0)
        assert Settings.model_validate_json(settings.model_dump_json()) == settings

    def test_json_schema(self):
        schema = Settings.model_json_schema()
        props = schema["properties"]
        assert props["timeout"]["type"] == "string"
        assert "pattern" in props["poll_interval"]
        legacy_types = {s["type"] for s in props["legacy_interval"]["anyOf"]}
        assert legacy_types == {"string", "integer"}

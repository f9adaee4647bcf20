"""Tests for the shared input validation helpers."""

import pytest

from src.application.validation import (
    MonitoringInterval,
    is_non_negative_int,
    normalize_symbol,
    require_non_negative_int,
)
from src.domain.errors import ValidationError


class TestNormalizeSymbol:
    def test_uppercases_and_trims(self):
        assert normalize_symbol("  aapl ") == "AAPL"

    @pytest.mark.parametrize("value", [None, "", "   ", 42, ["AAPL"]])
    def test_rejects_missing_blank_or_non_string(self, value):
        with pytest.raises(ValidationError) as exc_info:
            normalize_symbol(value)
        assert exc_info.value.field == "symbol"
        assert str(exc_info.value) == "Symbol must be a non-empty string."

    def test_custom_message(self):
        with pytest.raises(ValidationError, match="query parameter is required"):
            normalize_symbol(None, message="Symbol query parameter is required.")

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            normalize_symbol("")


class TestNonNegativeInt:
    @pytest.mark.parametrize("value", [0, 1, 59, 10_000])
    def test_accepts_non_negative_ints(self, value):
        assert is_non_negative_int(value)
        assert require_non_negative_int(value, "minutes") == value

    @pytest.mark.parametrize("value, expected", [(0.0, 0), (2.0, 2), (90.0, 90)])
    def test_accepts_integral_floats_as_ints(self, value, expected):
        assert is_non_negative_int(value)
        result = require_non_negative_int(value, "minutes")
        assert result == expected
        assert type(result) is int

    @pytest.mark.parametrize("value", [-1, -2.0, 1.5, float("nan"), float("inf"), "3", None, True, False])
    def test_rejects_everything_else(self, value):
        assert not is_non_negative_int(value)
        with pytest.raises(ValidationError) as exc_info:
            require_non_negative_int(value, "seconds")
        assert exc_info.value.field == "seconds"


class TestMonitoringInterval:
    @pytest.mark.parametrize(
        "minutes, seconds, expected",
        [(0, 1, 1), (1, 0, 60), (1, 30, 90), (0, 90, 90), (120, 5, 7205)],
    )
    def test_total_seconds(self, minutes, seconds, expected):
        interval = MonitoringInterval.from_input(minutes, seconds)
        assert interval.total_seconds == expected

    def test_describe_keeps_caller_units(self):
        assert MonitoringInterval.from_input(0, 90).describe() == "0m 90s"
        assert MonitoringInterval.from_input(2, 5).describe() == "2m 5s"

    def test_zero_interval_rejected(self):
        with pytest.raises(ValidationError, match="greater than 0 seconds") as exc_info:
            MonitoringInterval.from_input(0, 0)
        assert exc_info.value.field == "interval"

    def test_negative_minutes_rejected(self):
        with pytest.raises(ValidationError, match="non-negative integers") as exc_info:
            MonitoringInterval.from_input(-1, 0)
        assert exc_info.value.field == "minutes"

    def test_missing_seconds_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            MonitoringInterval.from_input(1, None)
        assert exc_info.value.field == "seconds"

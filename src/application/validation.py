"""
Input validation helpers shared by the application use cases.
Every failure raises ValidationError naming the offending field.
"""

from dataclasses import dataclass
from typing import Any

from src.domain.errors import ValidationError

SYMBOL_MESSAGE = "Symbol must be a non-empty string."
INTERVAL_FIELDS_MESSAGE = "Minutes and seconds must be valid non-negative integers."
INTERVAL_POSITIVE_MESSAGE = "Refresh interval must be greater than 0 seconds."


def normalize_symbol(value: Any, message: str = SYMBOL_MESSAGE) -> str:
    """Return *value* trimmed and uppercased.

    Raises:
        ValidationError: if *value* is not a string or is blank.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message, field="symbol")
    return value.strip().upper()


def is_non_negative_int(value: Any) -> bool:
    # bool is an int subclass; JSON true/false must not pass as 1/0.
    # JSON does not distinguish 1.0 from 1, so integral floats count.
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer() and value >= 0
    return isinstance(value, int) and value >= 0


def require_non_negative_int(value: Any, field: str) -> int:
    if not is_non_negative_int(value):
        raise ValidationError(INTERVAL_FIELDS_MESSAGE, field=field)
    return int(value)


@dataclass(frozen=True)
class MonitoringInterval:
    minutes: int
    seconds: int

    @classmethod
    def from_input(cls, minutes: Any, seconds: Any) -> "MonitoringInterval":
        """Validate raw request values and build a strictly positive interval.

        Raises:
            ValidationError: if either part is not a non-negative integer, or
                             if the combined interval is zero.
        """
        interval = cls(
            minutes=require_non_negative_int(minutes, "minutes"),
            seconds=require_non_negative_int(seconds, "seconds"),
        )
        if interval.total_seconds <= 0:
            raise ValidationError(INTERVAL_POSITIVE_MESSAGE, field="interval")
        return interval

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds

    def describe(self) -> str:
        return f"{self.minutes}m {self.seconds}s"

"""ymdate exception hierarchy.

All ymdate-specific exceptions inherit from YmdateError.
"""

from __future__ import annotations

from typing import Any


class YmdateError(Exception):
    """Base exception for all ymdate errors."""

    pass


class ParseError(YmdateError):
    """Failed to parse string representation.

    Raised when a value cannot be read as a canonical date string.
    """

    pass


class ValidationError(YmdateError):
    """Invalid input values.

    Raised when a calendar field is out of range or a delta field is
    not an exact integer.

    Examples:
        - Month value outside 1-12
        - Year value outside 1-9999
        - Day value outside valid range for month
        - Fractional number of days in a delta
    """

    pass


class MalformedDateString(ParseError):
    """Input does not match the fixed YYYY-MM-DD pattern."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Invalid date string: {value!r}. Expected YYYY-MM-DD"
        )


class InvalidYear(ValidationError):
    """Year outside the supported 1-9999 range."""

    def __init__(self, year: int) -> None:
        self.year = year
        super().__init__(f"year must be between 1 and 9999, got {year}")


class InvalidMonth(ValidationError):
    """Month outside 1-12."""

    def __init__(self, month: int) -> None:
        self.month = month
        super().__init__(f"month must be between 1 and 12, got {month}")


class InvalidDay(ValidationError):
    """Day outside the valid range for its month."""

    def __init__(self, year: int, month: int, day: int, max_day: int) -> None:
        self.year = year
        self.month = month
        self.day = day
        super().__init__(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


class NonIntegerDelta(ValidationError):
    """A delta field is present but not an exact integer."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} increment must be an integer value, got {value!r}")


__all__ = [
    "YmdateError",
    "ParseError",
    "ValidationError",
    "MalformedDateString",
    "InvalidYear",
    "InvalidMonth",
    "InvalidDay",
    "NonIntegerDelta",
]

"""Internal utilities for ymdate.

This module contains private implementation details:
    - Calendar rules (leap years, month lengths)
    - Raising validators
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from ymdate._internal.calendar import days_in_year, is_leap_year, max_day_in_month
from ymdate._internal.validation import (
    require_integer,
    validate_day,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "days_in_year",
    "is_leap_year",
    "max_day_in_month",
    "require_integer",
    "validate_day",
    "validate_month",
    "validate_year",
]

"""ymdate: calendar dates as canonical YYYY-MM-DD strings.

ymdate validates, decomposes, composes and shifts dates held as
10-character strings in the proleptic Gregorian calendar, years 1-9999.

Core Types:
    CalendarDate: Validated (year, month, day)
    DateDelta: Optional years/months/days shift
    YMD: Decoded, unvalidated (year, month, day) triple
    YearRange: Accepted-year window for validity checks

Calendar Functions:
    is_leap_year: Gregorian leap year rule
    max_day_in_month: Last valid day of a month

Validation Functions:
    is_valid_date: Check day/month/year values
    is_valid_date_string: Check a canonical string

Codec Functions:
    decompose: Split a canonical string into a YMD
    compose: Build a canonical string from fields

Arithmetic:
    shift: Shift a canonical string by years, months and days

Conversions:
    from_local_datetime, from_utc_datetime: datetime to string
    to_local_datetime, to_utc_datetime: string to aware datetime
    today, tomorrow, yesterday: wall-clock helpers

Exceptions:
    YmdateError: Base exception
    ParseError, MalformedDateString: Bad string shape
    ValidationError, InvalidYear, InvalidMonth, InvalidDay, NonIntegerDelta:
        Out-of-range or non-integer values

Example:
    >>> from ymdate import shift, is_valid_date_string
    >>> shift("2023-01-31", months=1)
    '2023-02-28'
    >>> is_valid_date_string("2023-02-29")
    False
"""

from __future__ import annotations

__version__ = "0.1.0"

# Calendar rules
from ymdate._internal.calendar import days_in_year, is_leap_year, max_day_in_month

# Core types
from ymdate.core.date import CalendarDate
from ymdate.core.delta import DateDelta
from ymdate.core.validity import is_valid_date, is_valid_date_string
from ymdate.core.year_range import DEFAULT_YEAR_RANGE, YearRange

# Codec
from ymdate.format.canonical import YMD, compose, decompose, matches_canonical

# Arithmetic
from ymdate.arithmetic.increment import increment, shift

# Conversions
from ymdate.convert.clock import today, tomorrow, yesterday
from ymdate.convert.native import (
    TimeOfDay,
    from_local_datetime,
    from_utc_datetime,
    to_local_datetime,
    to_utc_datetime,
)

# Exceptions
from ymdate.errors import (
    InvalidDay,
    InvalidMonth,
    InvalidYear,
    MalformedDateString,
    NonIntegerDelta,
    ParseError,
    ValidationError,
    YmdateError,
)

__all__: list[str] = [
    "__version__",
    # Calendar rules
    "is_leap_year",
    "max_day_in_month",
    "days_in_year",
    # Core types
    "CalendarDate",
    "DateDelta",
    "YMD",
    "YearRange",
    "DEFAULT_YEAR_RANGE",
    # Validation
    "is_valid_date",
    "is_valid_date_string",
    # Codec
    "matches_canonical",
    "decompose",
    "compose",
    # Arithmetic
    "increment",
    "shift",
    # Conversions
    "TimeOfDay",
    "from_local_datetime",
    "from_utc_datetime",
    "to_local_datetime",
    "to_utc_datetime",
    "today",
    "tomorrow",
    "yesterday",
    # Exceptions
    "YmdateError",
    "ParseError",
    "ValidationError",
    "MalformedDateString",
    "InvalidYear",
    "InvalidMonth",
    "InvalidDay",
    "NonIntegerDelta",
]

"""Date increment engine.

This module shifts a calendar date by a signed DateDelta while keeping
the result a valid calendar date.

The delta components are applied in a fixed order, each step seeing
the result of the previous one:
    1. Years
    2. Months (with year carry, then day clamping)
    3. Days (walking across month boundaries)

Month clamping rule:
    The day keeps its day-of-month and is clamped into the new month,
    unless the start date was the last day of its month, in which case
    the result is the last day of the new month too.

Examples:
    shift("2023-02-14", months=1)        -> "2023-03-14"
    shift("2023-01-31", months=1)        -> "2023-02-28"
    shift("2023-02-28", months=1)        -> "2023-03-31"  # end of month kept
    shift("2023-02-14", days=-86)        -> "2022-11-20"
    shift("2023-01-01", years=1, days=-1) -> "2023-12-31"
"""

from __future__ import annotations

from typing import Any, Optional

from ymdate._internal.calendar import is_leap_year, max_day_in_month
from ymdate._internal.constants import MAX_MONTH, MIN_MONTH, MONTHS_PER_YEAR
from ymdate._internal.validation import validate_year
from ymdate.core.date import CalendarDate
from ymdate.core.delta import DateDelta
from ymdate.format.canonical import YMD, compose


def _roll_month(year: int, month: int) -> tuple[int, int]:
    """Move month back into 1-12 by whole years."""
    while month < MIN_MONTH:
        month += MONTHS_PER_YEAR
        year -= 1
    while month > MAX_MONTH:
        month -= MONTHS_PER_YEAR
        year += 1
    return year, month


def increment(year: int, month: int, day: int, delta: DateDelta) -> YMD:
    """Apply delta to a valid (year, month, day) and normalize the result.

    The start triple must satisfy the calendar invariant. The year of the
    result is not range-checked here; a step that needs the length of a
    month in an unsupported year raises InvalidYear from the month table.

    Args:
        year: Start year.
        month: Start month (1-12).
        day: Start day, valid for the month.
        delta: The shift to apply.

    Returns:
        The shifted triple, with month in 1-12 and day valid for it.

    Raises:
        InvalidYear: If a month length is needed for a year outside 1-9999.

    Examples:
        >>> increment(2023, 2, 14, DateDelta(years=3, months=2, days=1))
        YMD(year=2026, month=4, day=15)
    """
    was_last_day_of_month = day == max_day_in_month(month, year)

    if delta.years is not None:
        year += delta.years

    if delta.months is not None:
        # floor division: -13 months carries -2 years, then +11 months
        carry_years = delta.months // MONTHS_PER_YEAR
        year += carry_years
        month += delta.months - carry_years * MONTHS_PER_YEAR
        year, month = _roll_month(year, month)

        max_day = max_day_in_month(month, year)
        day = max_day if was_last_day_of_month else min(day, max_day)

    if delta.days is not None:
        day += delta.days
        while day < 1:
            year, month = _roll_month(year, month - 1)
            day += max_day_in_month(month, year)
        while True:
            max_day = max_day_in_month(month, year)
            if day <= max_day:
                break
            day -= max_day
            year, month = _roll_month(year, month + 1)

    # A year step on its own can carry Feb 29 into a common year
    if month == 2 and day == 29 and not is_leap_year(year):
        day = 28

    return YMD(year, month, day)


def shift_date(date: CalendarDate, delta: DateDelta) -> CalendarDate:
    """Shift a CalendarDate, failing if the result leaves years 1-9999.

    Args:
        date: The date to shift.
        delta: The shift to apply.

    Returns:
        A new CalendarDate.

    Raises:
        InvalidYear: If the resulting year is outside 1-9999.
    """
    if delta.is_empty:
        return date
    year, month, day = increment(date.year, date.month, date.day, delta)
    validate_year(year)
    return CalendarDate(year, month, day)


def shift(
    value: str,
    delta: Any = None,
    *,
    years: Optional[int] = None,
    months: Optional[int] = None,
    days: Optional[int] = None,
) -> str:
    """Shift a canonical date string by years, months and days.

    The delta may be given positionally (a DateDelta or a mapping such
    as {"months": 1}) or as keyword arguments, but not both.

    Args:
        value: A canonical YYYY-MM-DD string naming a real date.
        delta: A DateDelta, a mapping, or None.
        years: Years to add (keyword form).
        months: Months to add (keyword form).
        days: Days to add (keyword form).

    Returns:
        The shifted date as a canonical string.

    Raises:
        MalformedDateString: If value is not of the YYYY-MM-DD form.
        ValidationError: If value does not name a real date.
        NonIntegerDelta: If a delta field is not an exact integer.
        InvalidYear: If the result falls outside years 1-9999.
        TypeError: If both a positional delta and keyword fields are given.

    Examples:
        >>> shift("2023-02-14", months=1)
        '2023-03-14'
        >>> shift("2023-02-14", {"days": -86})
        '2022-11-20'
        >>> shift("2023-01-31", months=1)
        '2023-02-28'
    """
    start = CalendarDate.from_string(value)

    keywords = DateDelta(years=years, months=months, days=days)
    if delta is not None and not keywords.is_empty:
        raise TypeError("pass the delta either positionally or as keywords, not both")
    resolved = keywords if delta is None else DateDelta.coerce(delta)

    return compose(shift_date(start, resolved))


__all__ = [
    "increment",
    "shift_date",
    "shift",
]

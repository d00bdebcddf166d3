"""Boolean date validity checks.

These predicates never raise: every rejection reason collapses to
False. Use CalendarDate or the codec when the reason matters.
"""

from __future__ import annotations

from ymdate._internal.calendar import max_day_in_month
from ymdate._internal.constants import MAX_DAY, MAX_MONTH, MIN_MONTH
from ymdate.core.year_range import DEFAULT_YEAR_RANGE, YearRange
from ymdate.errors import ValidationError
from ymdate.format.canonical import decompose, matches_canonical


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_date(
    day: int,
    month: int,
    year: int,
    year_range: YearRange = DEFAULT_YEAR_RANGE,
) -> bool:
    """Return True if day/month/year form a real calendar date.

    Args:
        day: Day of month.
        month: Month (1-12).
        year: Year, checked against year_range.
        year_range: Accepted years; defaults to 1-9999.

    Returns:
        False if any field is out of range or not an int, True otherwise.

    Examples:
        >>> is_valid_date(29, 2, 2024)
        True
        >>> is_valid_date(29, 2, 2023)
        False
        >>> is_valid_date(1, 1, 1850, YearRange(1900, 2100))
        False
    """
    if not (_is_int(day) and _is_int(month) and _is_int(year)):
        return False
    if year not in year_range:
        return False
    if month < MIN_MONTH or month > MAX_MONTH:
        return False
    if day < 1 or day > MAX_DAY:
        return False
    try:
        return day <= max_day_in_month(month, year)
    except ValidationError:
        # year_range wider than the month table supports
        return False


def is_valid_date_string(
    value: object,
    year_range: YearRange = DEFAULT_YEAR_RANGE,
) -> bool:
    """Return True if value is a canonical string naming a real date.

    The string must first match YYYY-MM-DD exactly; a string failing the
    pattern is invalid regardless of its field values.

    Examples:
        >>> is_valid_date_string("2024-02-29")
        True
        >>> is_valid_date_string("2023-02-29")
        False
        >>> is_valid_date_string("2024-2-29")
        False
        >>> is_valid_date_string(None)
        False
    """
    if not matches_canonical(value):
        return False
    year, month, day = decompose(value)  # type: ignore[arg-type]
    return is_valid_date(day, month, year, year_range)


__all__ = ["is_valid_date", "is_valid_date_string"]

"""CalendarDate class representing a validated calendar date.

This module provides the CalendarDate class, an immutable
(year, month, day) value in the proleptic Gregorian calendar,
restricted to years 1-9999.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from ymdate._internal.calendar import is_leap_year, max_day_in_month
from ymdate._internal.validation import validate_day, validate_month, validate_year
from ymdate.format.canonical import YMD, compose, decompose

if TYPE_CHECKING:
    from ymdate.core.delta import DateDelta


class CalendarDate:
    """A calendar date with year, month and day components.

    A CalendarDate always satisfies 1 <= year <= 9999, 1 <= month <= 12
    and 1 <= day <= max_day_in_month(month, year). Instances are never
    mutated; shift() and replace() return new dates.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = CalendarDate(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> str(CalendarDate(2024, 2, 29))
        '2024-02-29'

        >>> CalendarDate.from_string("2023-01-31").shift(months=1)
        CalendarDate(2023, 2, 28)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a CalendarDate from year, month, and day.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            InvalidYear: If year is outside 1-9999.
            InvalidMonth: If month is outside 1-12.
            InvalidDay: If day is not valid for the month.

        Examples:
            >>> CalendarDate(2024, 2, 30)
            Traceback (most recent call last):
            ...
            InvalidDay: day must be between 1 and 29 for 2024-02, got 30
        """
        for name, value in (("year", year), ("month", month), ("day", day)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")

        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def from_string(cls, s: str) -> CalendarDate:
        """Parse a canonical YYYY-MM-DD string.

        Args:
            s: The date string.

        Returns:
            The parsed CalendarDate.

        Raises:
            MalformedDateString: If s is not of the YYYY-MM-DD form.
            ValidationError: If the fields do not name a real date.

        Examples:
            >>> CalendarDate.from_string("2024-01-15")
            CalendarDate(2024, 1, 15)
        """
        year, month, day = decompose(s)
        return cls(year, month, day)

    @classmethod
    def from_fields(cls, value: Any) -> CalendarDate:
        """Create a CalendarDate from a YMD, a mapping, or any object
        with year/month/day attributes.

        Examples:
            >>> CalendarDate.from_fields({"year": 2024, "month": 3, "day": 1})
            CalendarDate(2024, 3, 1)
        """
        if isinstance(value, Mapping):
            return cls(value["year"], value["month"], value["day"])
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> CalendarDate:
        """Return today's date in the local timezone."""
        from ymdate.convert.clock import today

        return cls.from_string(today())

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> CalendarDate(2024, 1, 1).is_leap_year
            True
            >>> CalendarDate(1900, 1, 1).is_leap_year
            False
        """
        return is_leap_year(self._year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        return max_day_in_month(self._month, self._year)

    @property
    def is_last_day_of_month(self) -> bool:
        """Return True if this is the last day of its month.

        Examples:
            >>> CalendarDate(2023, 2, 28).is_last_day_of_month
            True
            >>> CalendarDate(2024, 2, 28).is_last_day_of_month
            False
        """
        return self._day == self.days_in_month

    def replace(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> CalendarDate:
        """Return a new CalendarDate with specified components replaced.

        Raises:
            ValidationError: If the resulting date is invalid.

        Examples:
            >>> CalendarDate(2024, 1, 15).replace(month=6)
            CalendarDate(2024, 6, 15)
        """
        return CalendarDate(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def shift(
        self,
        delta: DateDelta | Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> CalendarDate:
        """Return a new CalendarDate shifted by years, months and days.

        Args:
            delta: A DateDelta or mapping; alternatively pass years=,
                months= and days= as keywords.

        Returns:
            The shifted date.

        Raises:
            NonIntegerDelta: If a delta field is not an exact integer.
            InvalidYear: If the result falls outside years 1-9999.
            TypeError: If both delta and keyword fields are given.

        Examples:
            >>> CalendarDate(2023, 2, 14).shift(days=-86)
            CalendarDate(2022, 11, 20)
        """
        from ymdate.arithmetic.increment import shift_date
        from ymdate.core.delta import DateDelta

        keywords = DateDelta.coerce(fields)
        if delta is not None and not keywords.is_empty:
            raise TypeError("pass the delta either positionally or as keywords, not both")
        return shift_date(self, keywords if delta is None else DateDelta.coerce(delta))

    def to_fields(self) -> YMD:
        """Return the (year, month, day) triple."""
        return YMD(self._year, self._month, self._day)

    def to_string(self) -> str:
        """Return the date as a canonical YYYY-MM-DD string.

        Examples:
            >>> CalendarDate(1, 2, 3).to_string()
            '0001-02-03'
        """
        return compose(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.to_fields() == other.to_fields()

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another.

        Examples:
            >>> CalendarDate(2024, 1, 15) < CalendarDate(2024, 1, 16)
            True
        """
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.to_fields() < other.to_fields()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.to_fields() <= other.to_fields()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.to_fields() > other.to_fields()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.to_fields() >= other.to_fields()

    def __hash__(self) -> int:
        return hash(self.to_fields())

    def __repr__(self) -> str:
        return f"CalendarDate({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["CalendarDate"]

"""DateDelta class representing a signed year/month/day shift.

A DateDelta is input to the increment engine only. It is never
normalized: DateDelta(months=14) stays 14 months.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ymdate._internal.validation import require_integer

_FIELDS = ("years", "months", "days")


class DateDelta:
    """A shift by optional years, months and days.

    Each field is either None (absent, contributes no shift) or an exact
    integer, positive or negative. There is no range check.

    Attributes:
        years: Years to add, or None.
        months: Months to add, or None.
        days: Days to add, or None.

    Examples:
        >>> DateDelta(months=1)
        DateDelta(months=1)

        >>> DateDelta(days=1.5)
        Traceback (most recent call last):
        ...
        NonIntegerDelta: days increment must be an integer value, got 1.5
    """

    __slots__ = ("_years", "_months", "_days")

    def __init__(
        self,
        years: Optional[int] = None,
        months: Optional[int] = None,
        days: Optional[int] = None,
    ) -> None:
        """Create a DateDelta.

        Args:
            years: Number of years, or None.
            months: Number of months, or None.
            days: Number of days, or None.

        Raises:
            NonIntegerDelta: If a present field is not an exact integer.
        """
        self._years = None if years is None else require_integer("years", years)
        self._months = None if months is None else require_integer("months", months)
        self._days = None if days is None else require_integer("days", days)

    @classmethod
    def coerce(cls, value: Any) -> DateDelta:
        """Build a DateDelta from a DateDelta, a mapping, or None.

        Args:
            value: A DateDelta (returned as-is), a mapping whose keys are a
                subset of "years", "months" and "days", or None for an
                empty delta.

        Returns:
            A DateDelta.

        Raises:
            TypeError: If value is of another type or has unknown keys.
            NonIntegerDelta: If a present field is not an exact integer.

        Examples:
            >>> DateDelta.coerce({"days": -1})
            DateDelta(days=-1)
            >>> DateDelta.coerce(None).is_empty
            True
        """
        if value is None:
            return cls()
        if isinstance(value, DateDelta):
            return value
        if isinstance(value, Mapping):
            unknown = sorted(set(value) - set(_FIELDS), key=str)
            if unknown:
                raise TypeError(f"unknown delta field(s): {', '.join(map(repr, unknown))}")
            return cls(**value)
        raise TypeError(f"expected DateDelta, mapping or None, got {type(value).__name__}")

    @property
    def years(self) -> Optional[int]:
        return self._years

    @property
    def months(self) -> Optional[int]:
        return self._months

    @property
    def days(self) -> Optional[int]:
        return self._days

    @property
    def is_empty(self) -> bool:
        """True if no field is present."""
        return self._years is None and self._months is None and self._days is None

    def _key(self) -> tuple[Optional[int], Optional[int], Optional[int]]:
        return (self._years, self._months, self._days)

    def __neg__(self) -> DateDelta:
        """Return a delta with every present field negated.

        Note that shifting by a delta and then by its negation does not
        always return to the start date once months are involved, since
        month shifts clamp the day.
        """
        return DateDelta(*(None if v is None else -v for v in self._key()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateDelta):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        parts = [
            f"{name}={value}"
            for name, value in zip(_FIELDS, self._key())
            if value is not None
        ]
        return f"DateDelta({', '.join(parts)})"


__all__ = ["DateDelta"]

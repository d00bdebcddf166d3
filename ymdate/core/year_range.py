"""YearRange: the window of years a validity check accepts."""

from __future__ import annotations

from ymdate._internal.constants import MAX_YEAR, MIN_YEAR
from ymdate.errors import ValidationError


class YearRange:
    """An inclusive range of accepted years.

    Used by is_valid_date and is_valid_date_string to narrow (or,
    for the predicate only, widen) the default 1-9999 window.

    Attributes:
        min_year: Lowest accepted year.
        max_year: Highest accepted year.

    Examples:
        >>> r = YearRange(1900, 2100)
        >>> 2024 in r
        True
        >>> 1899 in r
        False
    """

    __slots__ = ("_min_year", "_max_year")

    def __init__(self, min_year: int = MIN_YEAR, max_year: int = MAX_YEAR) -> None:
        if min_year > max_year:
            raise ValidationError(
                f"min_year must not exceed max_year, got {min_year} > {max_year}"
            )
        self._min_year = min_year
        self._max_year = max_year

    @property
    def min_year(self) -> int:
        return self._min_year

    @property
    def max_year(self) -> int:
        return self._max_year

    def __contains__(self, year: object) -> bool:
        if isinstance(year, bool) or not isinstance(year, int):
            return False
        return self._min_year <= year <= self._max_year

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearRange):
            return NotImplemented
        return (self._min_year, self._max_year) == (other._min_year, other._max_year)

    def __hash__(self) -> int:
        return hash((self._min_year, self._max_year))

    def __repr__(self) -> str:
        return f"YearRange({self._min_year}, {self._max_year})"


DEFAULT_YEAR_RANGE = YearRange(MIN_YEAR, MAX_YEAR)


__all__ = ["YearRange", "DEFAULT_YEAR_RANGE"]

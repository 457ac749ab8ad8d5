"""Month enumeration.

This module provides the Month enum for the twelve months of the
ISO calendar, numbered from 1 (January) to 12 (December).
"""

from __future__ import annotations

from enum import Enum

from chronofield._internal.constants import DAYS_IN_MONTH
from chronofield.errors import ValidationError


class Month(Enum):
    """A month-of-year in the ISO calendar.

    Examples:
        >>> Month.FEBRUARY.length(leap_year=True)
        29
        >>> Month.NOVEMBER.first_month_of_quarter()
        <Month.OCTOBER: 10>
        >>> Month.DECEMBER.plus(1)
        <Month.JANUARY: 1>
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, month: int) -> Month:
        """Return the Month for a value from 1 to 12.

        Raises:
            ValidationError: If the value is outside 1-12.
        """
        if month < 1 or month > 12:
            raise ValidationError(f"month must be between 1 and 12, got {month}")
        return cls(month)

    def length(self, leap_year: bool) -> int:
        """Return the length of this month in days."""
        if self is Month.FEBRUARY and leap_year:
            return 29
        return DAYS_IN_MONTH[self.value]

    def min_length(self) -> int:
        """Return the minimum length of this month in days."""
        return self.length(False)

    def max_length(self) -> int:
        """Return the maximum length of this month in days."""
        return self.length(True)

    def first_day_of_year(self, leap_year: bool) -> int:
        """Return the day-of-year of the first day of this month."""
        leap = 1 if leap_year and self.value > 2 else 0
        return sum(DAYS_IN_MONTH[1 : self.value]) + 1 + leap

    def first_month_of_quarter(self) -> Month:
        """Return the month opening the quarter this month belongs to."""
        return Month(((self.value - 1) // 3) * 3 + 1)

    def plus(self, months: int) -> Month:
        """Return the month that is the given number of months later.

        The calculation rolls around the end of the year in both directions.
        """
        return Month((self.value - 1 + months) % 12 + 1)

    def minus(self, months: int) -> Month:
        """Return the month that is the given number of months earlier."""
        return self.plus(-(months % 12))


__all__ = ["Month"]

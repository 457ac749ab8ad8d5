"""DayOfWeek enumeration.

This module provides the DayOfWeek enum using the ISO-8601 numbering,
from 1 (Monday) to 7 (Sunday).
"""

from __future__ import annotations

from enum import Enum

from chronofield.errors import ValidationError


class DayOfWeek(Enum):
    """A day of the week, numbered per ISO-8601.

    Examples:
        >>> DayOfWeek.MONDAY.value
        1
        >>> DayOfWeek.SUNDAY.plus(1)
        <DayOfWeek.MONDAY: 1>
        >>> DayOfWeek.of(3)
        <DayOfWeek.WEDNESDAY: 3>
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, day_of_week: int) -> DayOfWeek:
        """Return the DayOfWeek for an ISO value from 1 to 7.

        Raises:
            ValidationError: If the value is outside 1-7.
        """
        if day_of_week < 1 or day_of_week > 7:
            raise ValidationError(
                f"day of week must be between 1 and 7, got {day_of_week}"
            )
        return cls(day_of_week)

    def plus(self, days: int) -> DayOfWeek:
        """Return the day-of-week that is the given number of days later.

        The calculation rolls around the end of the week in both directions.
        """
        amount = days % 7
        return DayOfWeek((self.value - 1 + amount) % 7 + 1)

    def minus(self, days: int) -> DayOfWeek:
        """Return the day-of-week that is the given number of days earlier."""
        return self.plus(-(days % 7))


__all__ = ["DayOfWeek"]

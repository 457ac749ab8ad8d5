"""Yearly rules that produce offset transitions.

A rule describes a recurring change such as "the last Sunday in October
at 01:00 UTC". It cannot say when the change happens on its own; calling
create_transition() with a year gives the concrete transition.

Examples:
    >>> from chronofield.core.time import Time
    >>> from chronofield.units.dayofweek import DayOfWeek
    >>> from chronofield.units.month import Month
    >>> from chronofield.units.offset import ZoneOffset
    >>> rule = ZoneOffsetTransitionRule.of(
    ...     Month.OCTOBER, -1, DayOfWeek.SUNDAY, Time(2, 0), False,
    ...     TimeDefinition.WALL, ZoneOffset.UTC, ZoneOffset.of_hours(1), ZoneOffset.UTC,
    ... )
    >>> str(rule.create_transition(2023).date_time_before)
    '2023-10-29T02:00'
"""

from __future__ import annotations

import logging
from enum import Enum

from chronofield.core.date import Date
from chronofield.core.datetime import DateTime
from chronofield.core.time import Time
from chronofield.errors import ValidationError
from chronofield.temporal.adjusters import last_day_of_month, next_or_same, previous_or_same
from chronofield.units.dayofweek import DayOfWeek
from chronofield.units.month import Month
from chronofield.units.offset import ZoneOffset
from chronofield.zone.transition import ZoneOffsetTransition

logger = logging.getLogger(__name__)


class TimeDefinition(Enum):
    """How the local time of a rule is to be read.

    UTC times are relative to UTC, STANDARD times to the standard offset
    in force, and WALL times to the offset in force just before the
    transition.

    Examples:
        >>> dt = DateTime.of(2023, 10, 29, 1, 0)
        >>> str(TimeDefinition.UTC.create_date_time(dt, ZoneOffset.UTC, ZoneOffset.of_hours(1)))
        '2023-10-29T02:00'
    """

    UTC = "utc"
    WALL = "wall"
    STANDARD = "standard"

    def create_date_time(
        self, date_time: DateTime, standard_offset: ZoneOffset, wall_offset: ZoneOffset
    ) -> DateTime:
        """Convert a date-time in this definition to wall-clock time.

        Args:
            date_time: The local date-time as written in the rule.
            standard_offset: The standard offset in force at the transition.
            wall_offset: The wall offset in force just before the transition.
        """
        if self is TimeDefinition.UTC:
            difference = wall_offset.total_seconds - ZoneOffset.UTC.total_seconds
            return date_time.plus_seconds(difference)
        if self is TimeDefinition.STANDARD:
            difference = wall_offset.total_seconds - standard_offset.total_seconds
            return date_time.plus_seconds(difference)
        return date_time

    def __str__(self) -> str:
        return self.name


class ZoneOffsetTransitionRule:
    """A rule for the transition that happens once a year.

    The day of the transition is given by a month, a day-of-month
    indicator and an optional day-of-week:

    - a positive indicator is the day-of-month; with a day-of-week, the
      transition is on that weekday on or after the day, so 8 with
      SUNDAY is the second Sunday of the month;
    - a negative indicator counts back from the end of the month, -1
      being the last day; with a day-of-week, the transition is on that
      weekday on or before the day, so -1 with SUNDAY is the last Sunday.

    Use ZoneOffsetTransitionRule.of() to create instances.
    """

    __slots__ = (
        "_month",
        "_dom",
        "_dow",
        "_time",
        "_time_end_of_day",
        "_time_definition",
        "_standard_offset",
        "_offset_before",
        "_offset_after",
    )

    def __init__(
        self,
        month: Month,
        day_of_month_indicator: int,
        day_of_week: DayOfWeek | None,
        time: Time,
        time_end_of_day: bool,
        time_definition: TimeDefinition,
        standard_offset: ZoneOffset,
        offset_before: ZoneOffset,
        offset_after: ZoneOffset,
    ) -> None:
        self._month = month
        self._dom = day_of_month_indicator
        self._dow = day_of_week
        self._time = time
        self._time_end_of_day = time_end_of_day
        self._time_definition = time_definition
        self._standard_offset = standard_offset
        self._offset_before = offset_before
        self._offset_after = offset_after

    @classmethod
    def of(
        cls,
        month: Month,
        day_of_month_indicator: int,
        day_of_week: DayOfWeek | None,
        time: Time,
        time_end_of_day: bool,
        time_definition: TimeDefinition,
        standard_offset: ZoneOffset,
        offset_before: ZoneOffset,
        offset_after: ZoneOffset,
    ) -> ZoneOffsetTransitionRule:
        """Create a validated rule.

        Args:
            month: The month of the transition.
            day_of_month_indicator: The day-of-month, or a negative count
                back from the end of the month; -28 to 31 excluding 0.
            day_of_week: The day-of-week to adjust to, or None for the
                exact day.
            time: The local time of the transition; must be midnight if
                time_end_of_day is set.
            time_end_of_day: True for a transition at 24:00.
            time_definition: How to interpret the time.
            standard_offset: The standard offset in force at the transition.
            offset_before: The offset before the transition.
            offset_after: The offset after the transition.

        Raises:
            ValidationError: If the indicator, the end-of-day flag or the
                time is invalid.
        """
        if day_of_month_indicator < -28 or day_of_month_indicator > 31 or day_of_month_indicator == 0:
            raise ValidationError(
                "Day of month indicator must be between -28 and 31 inclusive excluding zero"
            )
        if time_end_of_day and time != Time.MIDNIGHT:
            raise ValidationError("Time must be midnight when end of day flag is true")
        if time.nanosecond != 0:
            raise ValidationError("Time's nano-of-second must be zero")
        return cls(
            month,
            day_of_month_indicator,
            day_of_week,
            time,
            time_end_of_day,
            time_definition,
            standard_offset,
            offset_before,
            offset_after,
        )

    @property
    def month(self) -> Month:
        return self._month

    @property
    def day_of_month_indicator(self) -> int:
        return self._dom

    @property
    def day_of_week(self) -> DayOfWeek | None:
        return self._dow

    @property
    def local_time(self) -> Time:
        return self._time

    @property
    def is_midnight_end_of_day(self) -> bool:
        return self._time_end_of_day

    @property
    def time_definition(self) -> TimeDefinition:
        return self._time_definition

    @property
    def standard_offset(self) -> ZoneOffset:
        return self._standard_offset

    @property
    def offset_before(self) -> ZoneOffset:
        return self._offset_before

    @property
    def offset_after(self) -> ZoneOffset:
        return self._offset_after

    def create_transition(self, year: int) -> ZoneOffsetTransition:
        """Create the transition this rule describes for a year.

        Raises:
            ValidationError: If the year is outside the supported range.
        """
        if self._dom < 0:
            # -1 is the last day of the month
            last_day = Date(year, self._month.value, 1).adjust(last_day_of_month())
            date = last_day.plus_days(self._dom + 1)
            if self._dow is not None:
                date = date.adjust(previous_or_same(self._dow))
        else:
            date = Date(year, self._month.value, self._dom)
            if self._dow is not None:
                date = date.adjust(next_or_same(self._dow))
        if self._time_end_of_day:
            date = date.plus_days(1)
        local = DateTime(date, self._time)
        transition_time = self._time_definition.create_date_time(
            local, self._standard_offset, self._offset_before
        )
        transition = ZoneOffsetTransition(
            transition_time, self._offset_before, self._offset_after
        )
        logger.debug("Created %s for %d from %s", transition, year, self)
        return transition

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffsetTransitionRule):
            return NotImplemented
        return (
            self._month is other._month
            and self._dom == other._dom
            and self._dow is other._dow
            and self._time_definition is other._time_definition
            and self._time == other._time
            and self._time_end_of_day == other._time_end_of_day
            and self._standard_offset == other._standard_offset
            and self._offset_before == other._offset_before
            and self._offset_after == other._offset_after
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._month,
                self._dom,
                self._dow,
                self._time,
                self._time_end_of_day,
                self._time_definition,
                self._standard_offset,
                self._offset_before,
                self._offset_after,
            )
        )

    def __str__(self) -> str:
        """Return a description such as 'TransitionRule[Gap Z to +01:00, ...]'."""
        kind = "Gap" if self._offset_before < self._offset_after else "Overlap"
        parts = [f"TransitionRule[{kind} {self._offset_before} to {self._offset_after}, "]
        month_name = self._month.name
        if self._dow is not None:
            if self._dom == -1:
                parts.append(f"{self._dow.name} on or before last day of {month_name}")
            elif self._dom < 0:
                parts.append(
                    f"{self._dow.name} on or before last day minus {-self._dom - 1} "
                    f"of {month_name}"
                )
            else:
                parts.append(f"{self._dow.name} on or after {month_name} {self._dom}")
        else:
            parts.append(f"{month_name} {self._dom}")
        time_str = "24:00" if self._time_end_of_day else str(self._time)
        parts.append(
            f" at {time_str} {self._time_definition}, "
            f"standard offset {self._standard_offset}]"
        )
        return "".join(parts)


__all__ = ["TimeDefinition", "ZoneOffsetTransitionRule"]

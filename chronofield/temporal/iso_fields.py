"""Fields and units specific to the ISO-8601 calendar system.

This module provides the quarter-of-year and week-based-year fields
defined by ISO-8601, together with the two units they are measured in.

Quarters divide the year into four: January-March is Q1, April-June Q2,
July-September Q3 and October-December Q4. DAY_OF_QUARTER counts from 1
to 90, 91 or 92 within the quarter.

The week-based-year always starts on a Monday, and week 1 is the week
that contains the first Thursday of the calendar year. Days near the
start and end of a calendar year may therefore belong to the previous or
next week-based-year:

    =========== ======== ================ ================
    Date        Day      WeekOfWBY        WeekBasedYear
    =========== ======== ================ ================
    2008-12-28  Sunday   Week 52 of 2008  2008
    2008-12-29  Monday   Week 1 of 2009   2009
    2009-01-04  Sunday   Week 1 of 2009   2009
    2009-01-05  Monday   Week 2 of 2009   2009
    =========== ======== ================ ================

Every field and unit here refuses temporals from other calendars.

Examples:
    >>> from chronofield.core.date import Date
    >>> Date(2008, 12, 29).get(IsoFields.WEEK_BASED_YEAR)
    2009
    >>> Date(2024, 5, 15).get(IsoFields.QUARTER_OF_YEAR)
    2
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from chronofield._internal.calendar import is_leap_year
from chronofield._internal.constants import QUARTER_DAYS, SECONDS_PER_YEAR_ESTIMATED
from chronofield._internal.mathutils import (
    add_exact,
    floor_div,
    floor_mod,
    multiply_exact,
    subtract_exact,
    truncate_div,
    truncate_mod,
)
from chronofield.chrono.chronology import Chronology, IsoChronology
from chronofield.core.date import Date
from chronofield.core.duration import Duration
from chronofield.errors import ResolutionError, UnsupportedFieldError
from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.field import TemporalField, TemporalUnit
from chronofield.temporal.resolver_style import ResolverStyle
from chronofield.temporal.value_range import ValueRange
from chronofield.units.dayofweek import DayOfWeek
from chronofield.units.timeunit import ChronoUnit

if TYPE_CHECKING:
    from chronofield.temporal.field import Temporal, TemporalAccessor

logger = logging.getLogger(__name__)


class IsoUnit(TemporalUnit, Enum):
    """Units of the ISO calendar that ChronoUnit does not cover."""

    WEEK_BASED_YEARS = ("WeekBasedYears", SECONDS_PER_YEAR_ESTIMATED)
    QUARTER_YEARS = ("QuarterYears", SECONDS_PER_YEAR_ESTIMATED // 4)

    def __init__(self, display_name: str, seconds: int) -> None:
        self._display_name = display_name
        self._duration = Duration.of_seconds(seconds)

    @property
    def duration(self) -> Duration:
        return self._duration

    @property
    def is_duration_estimated(self) -> bool:
        return True

    @property
    def is_date_based(self) -> bool:
        return True

    @property
    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: Temporal) -> bool:
        return temporal.is_supported(ChronoField.EPOCH_DAY) and _is_iso(temporal)

    def add_to(self, temporal: Temporal, amount: int) -> Temporal:
        """Add an amount of this unit to an ISO temporal.

        Adding week-based-years keeps the week and day-of-week, moving
        week 53 to week 52 when the target year is short. Quarter-years
        are added as whole years plus three months per remaining quarter.

        Raises:
            UnsupportedFieldError: If the temporal is not an ISO date.
        """
        if not self.is_supported_by(temporal):
            raise UnsupportedFieldError(f"Unsupported unit: {self}")
        if self is IsoUnit.WEEK_BASED_YEARS:
            current = temporal.get(IsoField.WEEK_BASED_YEAR)
            return temporal.with_field(IsoField.WEEK_BASED_YEAR, add_exact(current, amount))
        return temporal.plus(truncate_div(amount, 4), ChronoUnit.YEARS).plus(
            truncate_mod(amount, 4) * 3, ChronoUnit.MONTHS
        )

    def between(self, start: Temporal, end: Temporal) -> int:
        if type(start) is not type(end):
            return start.until(end, self)
        if self is IsoUnit.WEEK_BASED_YEARS:
            return subtract_exact(
                end.get_long(IsoField.WEEK_BASED_YEAR),
                start.get_long(IsoField.WEEK_BASED_YEAR),
            )
        return truncate_div(start.until(end, ChronoUnit.MONTHS), 3)

    def __str__(self) -> str:
        return self._display_name


class IsoField(TemporalField, Enum):
    """Fields of the ISO calendar that ChronoField does not cover.

    Each member keeps its units and outer range as data; the behaviour
    of each member lives in the module-level functions below.
    """

    DAY_OF_QUARTER = (
        "DayOfQuarter", ChronoUnit.DAYS, IsoUnit.QUARTER_YEARS, ValueRange.of(1, 90, 92)
    )
    QUARTER_OF_YEAR = (
        "QuarterOfYear", IsoUnit.QUARTER_YEARS, ChronoUnit.YEARS, ValueRange.of(1, 4)
    )
    WEEK_OF_WEEK_BASED_YEAR = (
        "WeekOfWeekBasedYear", ChronoUnit.WEEKS, IsoUnit.WEEK_BASED_YEARS,
        ValueRange.of(1, 52, 53),
    )
    WEEK_BASED_YEAR = (
        "WeekBasedYear", IsoUnit.WEEK_BASED_YEARS, ChronoUnit.FOREVER,
        ChronoField.YEAR.range(),
    )

    def __init__(
        self,
        display_name: str,
        base_unit: TemporalUnit,
        range_unit: TemporalUnit,
        value_range: ValueRange,
    ) -> None:
        self._display_name = display_name
        self._base_unit = base_unit
        self._range_unit = range_unit
        self._range = value_range

    @property
    def base_unit(self) -> TemporalUnit:
        return self._base_unit

    @property
    def range_unit(self) -> TemporalUnit:
        return self._range_unit

    @property
    def is_date_based(self) -> bool:
        return True

    @property
    def is_time_based(self) -> bool:
        return False

    def range(self) -> ValueRange:
        return self._range

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        if self is IsoField.DAY_OF_QUARTER:
            return (
                temporal.is_supported(ChronoField.DAY_OF_YEAR)
                and temporal.is_supported(ChronoField.MONTH_OF_YEAR)
                and temporal.is_supported(ChronoField.YEAR)
                and _is_iso(temporal)
            )
        if self is IsoField.QUARTER_OF_YEAR:
            return temporal.is_supported(ChronoField.MONTH_OF_YEAR) and _is_iso(temporal)
        return temporal.is_supported(ChronoField.EPOCH_DAY) and _is_iso(temporal)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        self._ensure_supported(temporal)
        if self is IsoField.DAY_OF_QUARTER:
            return _day_of_quarter_range(temporal)
        if self is IsoField.WEEK_OF_WEEK_BASED_YEAR:
            return _week_range(IsoChronology.INSTANCE.date_from(temporal))
        return self._range

    def get_from(self, temporal: TemporalAccessor) -> int:
        self._ensure_supported(temporal)
        if self is IsoField.DAY_OF_QUARTER:
            return _day_of_quarter(temporal)
        if self is IsoField.QUARTER_OF_YEAR:
            return (temporal.get_long(ChronoField.MONTH_OF_YEAR) + 2) // 3
        date = IsoChronology.INSTANCE.date_from(temporal)
        if self is IsoField.WEEK_OF_WEEK_BASED_YEAR:
            return _week(date)
        return _week_based_year(date)

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        if self is IsoField.DAY_OF_QUARTER:
            current = self.get_from(temporal)
            self._range.check_valid_value(new_value, self)
            return temporal.with_field(
                ChronoField.DAY_OF_YEAR,
                temporal.get_long(ChronoField.DAY_OF_YEAR) + (new_value - current),
            )
        if self is IsoField.QUARTER_OF_YEAR:
            current = self.get_from(temporal)
            self._range.check_valid_value(new_value, self)
            return temporal.with_field(
                ChronoField.MONTH_OF_YEAR,
                temporal.get_long(ChronoField.MONTH_OF_YEAR) + (new_value - current) * 3,
            )
        if self is IsoField.WEEK_OF_WEEK_BASED_YEAR:
            self._range.check_valid_value(new_value, self)
            return temporal.plus(
                subtract_exact(new_value, self.get_from(temporal)), ChronoUnit.WEEKS
            )
        return _adjust_week_based_year(temporal, new_value)

    def resolve(
        self,
        field_values: dict[TemporalField, int],
        partial_temporal: TemporalAccessor,
        resolver_style: ResolverStyle,
    ) -> Date | None:
        if self is IsoField.DAY_OF_QUARTER:
            return _resolve_day_of_quarter(field_values, partial_temporal, resolver_style)
        if self is IsoField.WEEK_OF_WEEK_BASED_YEAR:
            return _resolve_week_of_week_based_year(
                field_values, partial_temporal, resolver_style
            )
        return None

    def _ensure_supported(self, temporal: TemporalAccessor) -> None:
        if not self.is_supported_by(temporal):
            raise UnsupportedFieldError(f"Unsupported field: {self}")

    def __str__(self) -> str:
        return self._display_name


class IsoFields:
    """The ISO-8601 fields and units, as a namespace.

    Examples:
        >>> str(IsoFields.DAY_OF_QUARTER)
        'DayOfQuarter'
    """

    DAY_OF_QUARTER = IsoField.DAY_OF_QUARTER
    QUARTER_OF_YEAR = IsoField.QUARTER_OF_YEAR
    WEEK_OF_WEEK_BASED_YEAR = IsoField.WEEK_OF_WEEK_BASED_YEAR
    WEEK_BASED_YEAR = IsoField.WEEK_BASED_YEAR
    WEEK_BASED_YEARS = IsoUnit.WEEK_BASED_YEARS
    QUARTER_YEARS = IsoUnit.QUARTER_YEARS

    def __init__(self) -> None:
        raise TypeError("IsoFields is not instantiable")


# Helpers


def _is_iso(temporal: TemporalAccessor) -> bool:
    return Chronology.from_temporal(temporal) is IsoChronology.INSTANCE


def _ensure_iso(temporal: TemporalAccessor) -> None:
    if not _is_iso(temporal):
        raise ResolutionError("Resolve requires IsoChronology")


def _check_strict(value_range: ValueRange, value: int, field: TemporalField) -> None:
    if not value_range.is_valid_value(value):
        logger.debug("STRICT resolve rejected %s=%d outside %s", field, value, value_range)
    value_range.check_valid_value(value, field)


def _day_of_quarter(temporal: TemporalAccessor) -> int:
    day_of_year = temporal.get(ChronoField.DAY_OF_YEAR)
    month = temporal.get(ChronoField.MONTH_OF_YEAR)
    year = temporal.get_long(ChronoField.YEAR)
    row = 4 if is_leap_year(year) else 0
    return day_of_year - QUARTER_DAYS[(month - 1) // 3 + row]


def _day_of_quarter_range(temporal: TemporalAccessor) -> ValueRange:
    quarter = IsoField.QUARTER_OF_YEAR.get_from(temporal)
    if quarter == 1:
        leap = is_leap_year(temporal.get_long(ChronoField.YEAR))
        return ValueRange.of(1, 91 if leap else 90)
    if quarter == 2:
        return ValueRange.of(1, 91)
    return ValueRange.of(1, 92)


def _weeks_in_week_based_year(week_based_year: int) -> int:
    """Return 53 if the year starts on a Thursday, or a Wednesday in a leap year."""
    day_of_week = Date(week_based_year, 1, 1).day_of_week
    if day_of_week is DayOfWeek.THURSDAY or (
        day_of_week is DayOfWeek.WEDNESDAY and is_leap_year(week_based_year)
    ):
        return 53
    return 52


def _week_range(date: Date) -> ValueRange:
    return ValueRange.of(1, _weeks_in_week_based_year(_week_based_year(date)))


def _week(date: Date) -> int:
    dow0 = date.day_of_week.value - 1
    doy0 = date.day_of_year - 1
    # shift to the Thursday of the same ISO week
    doy_thu0 = doy0 + (3 - dow0)
    aligned_week = truncate_div(doy_thu0, 7)
    first_thu_doy0 = doy_thu0 - aligned_week * 7
    first_mon_doy0 = first_thu_doy0 - 3
    if first_mon_doy0 < -3:
        first_mon_doy0 += 7
    if doy0 < first_mon_doy0:
        return _week_range(date.with_day_of_year(180).minus_years(1)).maximum
    week = (doy0 - first_mon_doy0) // 7 + 1
    if week == 53:
        if not (first_mon_doy0 == -3 or (first_mon_doy0 == -2 and date.is_leap_year)):
            week = 1
    return week


def _week_based_year(date: Date) -> int:
    year = date.year
    day_of_year = date.day_of_year
    if day_of_year <= 3:
        dow0 = date.day_of_week.value - 1
        if day_of_year - dow0 < -2:
            year -= 1
    elif day_of_year >= 363:
        dow0 = date.day_of_week.value - 1
        day_of_year = day_of_year - 363 - (1 if date.is_leap_year else 0)
        if day_of_year - dow0 >= 0:
            year += 1
    return year


def _adjust_week_based_year(temporal: Temporal, new_value: int) -> Temporal:
    field = IsoField.WEEK_BASED_YEAR
    field._ensure_supported(temporal)
    new_year = field.range().check_valid_int_value(new_value, field)
    date = IsoChronology.INSTANCE.date_from(temporal)
    day_of_week = date.day_of_week.value
    week = _week(date)
    if week == 53 and _weeks_in_week_based_year(new_year) == 52:
        week = 52
    # the 4th of January is always in week 1
    resolved = Date(new_year, 1, 4)
    days = (day_of_week - resolved.day_of_week.value) + (week - 1) * 7
    resolved = resolved.plus_days(days)
    return temporal.with_field(ChronoField.EPOCH_DAY, resolved.to_epoch_day())


def _resolve_day_of_quarter(
    field_values: dict[TemporalField, int],
    partial_temporal: TemporalAccessor,
    resolver_style: ResolverStyle,
) -> Date | None:
    year_value = field_values.get(ChronoField.YEAR)
    quarter_value = field_values.get(IsoField.QUARTER_OF_YEAR)
    if year_value is None or quarter_value is None:
        return None
    year = ChronoField.YEAR.check_valid_int_value(year_value)
    day_of_quarter = field_values[IsoField.DAY_OF_QUARTER]
    _ensure_iso(partial_temporal)
    if resolver_style is ResolverStyle.LENIENT:
        date = Date(year, 1, 1).plus_months(
            multiply_exact(subtract_exact(quarter_value, 1), 3)
        )
        day_of_quarter = subtract_exact(day_of_quarter, 1)
    else:
        quarter = IsoField.QUARTER_OF_YEAR.range().check_valid_int_value(
            quarter_value, IsoField.QUARTER_OF_YEAR
        )
        date = Date(year, (quarter - 1) * 3 + 1, 1)
        if day_of_quarter < 1 or day_of_quarter > 90:
            if resolver_style is ResolverStyle.STRICT:
                _check_strict(
                    IsoField.DAY_OF_QUARTER.range_refined_by(date),
                    day_of_quarter,
                    IsoField.DAY_OF_QUARTER,
                )
            else:
                IsoField.DAY_OF_QUARTER.range().check_valid_value(
                    day_of_quarter, IsoField.DAY_OF_QUARTER
                )
        day_of_quarter -= 1
    del field_values[IsoField.DAY_OF_QUARTER]
    del field_values[ChronoField.YEAR]
    del field_values[IsoField.QUARTER_OF_YEAR]
    return date.plus_days(day_of_quarter)


def _resolve_week_of_week_based_year(
    field_values: dict[TemporalField, int],
    partial_temporal: TemporalAccessor,
    resolver_style: ResolverStyle,
) -> Date | None:
    year_value = field_values.get(IsoField.WEEK_BASED_YEAR)
    dow_value = field_values.get(ChronoField.DAY_OF_WEEK)
    if year_value is None or dow_value is None:
        return None
    week_based_year = IsoField.WEEK_BASED_YEAR.range().check_valid_int_value(
        year_value, IsoField.WEEK_BASED_YEAR
    )
    week = field_values[IsoField.WEEK_OF_WEEK_BASED_YEAR]
    _ensure_iso(partial_temporal)
    date = Date(week_based_year, 1, 4)
    if resolver_style is ResolverStyle.LENIENT:
        # day-of-week values outside 1-7 roll into neighbouring weeks
        date = date.plus_weeks(floor_div(dow_value - 1, 7))
        day_of_week = floor_mod(dow_value - 1, 7) + 1
        date = date.plus_weeks(subtract_exact(week, 1))
    else:
        day_of_week = ChronoField.DAY_OF_WEEK.check_valid_int_value(dow_value)
        if week < 1 or week > 52:
            if resolver_style is ResolverStyle.STRICT:
                _check_strict(_week_range(date), week, IsoField.WEEK_OF_WEEK_BASED_YEAR)
            else:
                IsoField.WEEK_OF_WEEK_BASED_YEAR.range().check_valid_value(
                    week, IsoField.WEEK_OF_WEEK_BASED_YEAR
                )
        date = date.plus_weeks(week - 1)
    date = date.with_field(ChronoField.DAY_OF_WEEK, day_of_week)
    del field_values[IsoField.WEEK_OF_WEEK_BASED_YEAR]
    del field_values[IsoField.WEEK_BASED_YEAR]
    del field_values[ChronoField.DAY_OF_WEEK]
    return date


__all__ = ["IsoField", "IsoUnit", "IsoFields"]

"""Localized definitions of the day-of-week, week-of-month and week-of-year.

Different regions number weeks differently. A WeekFields value captures
the two things that vary:

- the first day of the week, such as MONDAY in ISO-8601 or SUNDAY in
  the US;
- the minimal number of days, from 1 to 7, that the first week of a
  month or year must contain.

Together they define five derived fields: day-of-week, week-of-month,
week-of-year, week-of-week-based-year and week-based-year. A partial
week before the first full week is week 0 for week-of-month and
week-of-year. The week-based fields never have a week 0; those days
belong to the last week of the previous week-based-year instead.

For example, with weeks starting on Monday and at least 4 days in the
first week:

    ============ ========= ============ ===========
    Date         Day       WeekOfMonth  WeekOfYear
    ============ ========= ============ ===========
    2008-12-31   Wednesday 5            53
    2009-01-01   Thursday  1            1
    2009-01-05   Monday    2            2
    ============ ========= ============ ===========

WeekFields instances are shared: WeekFields.of() returns the same
instance for the same pair of values, from any thread.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, ClassVar

from chronofield._internal.mathutils import (
    add_exact,
    floor_mod,
    multiply_exact,
    subtract_exact,
    to_int_exact,
)
from chronofield._internal.validation import validate_range
from chronofield.chrono.chronology import Chronology
from chronofield.errors import ResolutionError, UnsupportedFieldError
from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.field import TemporalField
from chronofield.temporal.iso_fields import IsoUnit
from chronofield.temporal.resolver_style import ResolverStyle
from chronofield.temporal.value_range import ValueRange
from chronofield.units.dayofweek import DayOfWeek
from chronofield.units.timeunit import ChronoUnit

if TYPE_CHECKING:
    from chronofield.core.date import Date
    from chronofield.temporal.field import Temporal, TemporalAccessor, TemporalUnit

logger = logging.getLogger(__name__)

_CACHE: dict[tuple[DayOfWeek, int], WeekFields] = {}
_CACHE_LOCK = threading.Lock()

DAY_OF_WEEK_RANGE = ValueRange.of(1, 7)
WEEK_OF_MONTH_RANGE = ValueRange.of(0, 1, 4, 6)
WEEK_OF_YEAR_RANGE = ValueRange.of(0, 1, 52, 54)
WEEK_OF_WEEK_BASED_YEAR_RANGE = ValueRange.of(1, 52, 53)


class WeekFields:
    """A week definition: first day of the week plus minimal days in week 1.

    Obtain instances with WeekFields.of(); ISO and SUNDAY_START are
    predefined.

    Examples:
        >>> from chronofield.core.date import Date
        >>> wf = WeekFields.of(DayOfWeek.SUNDAY, 1)
        >>> Date(2024, 3, 3).get(wf.week_of_month())
        2
        >>> WeekFields.of(DayOfWeek.MONDAY, 4) is WeekFields.ISO
        True
    """

    __slots__ = (
        "_first_day_of_week",
        "_minimal_days",
        "_day_of_week",
        "_week_of_month",
        "_week_of_year",
        "_week_of_week_based_year",
        "_week_based_year",
    )

    ISO: ClassVar[WeekFields]
    SUNDAY_START: ClassVar[WeekFields]

    @validate_range(minimal_days_in_first_week=(1, 7))
    def __init__(
        self, first_day_of_week: DayOfWeek, minimal_days_in_first_week: int
    ) -> None:
        """Create a WeekFields; use WeekFields.of() to get the shared instance.

        Raises:
            ValidationError: If minimal_days_in_first_week is outside 1-7.
        """
        self._first_day_of_week = first_day_of_week
        self._minimal_days = minimal_days_in_first_week
        self._day_of_week = ComputedDayOfField(
            "DayOfWeek", self, ChronoUnit.DAYS, ChronoUnit.WEEKS, DAY_OF_WEEK_RANGE
        )
        self._week_of_month = ComputedDayOfField(
            "WeekOfMonth", self, ChronoUnit.WEEKS, ChronoUnit.MONTHS, WEEK_OF_MONTH_RANGE
        )
        self._week_of_year = ComputedDayOfField(
            "WeekOfYear", self, ChronoUnit.WEEKS, ChronoUnit.YEARS, WEEK_OF_YEAR_RANGE
        )
        self._week_of_week_based_year = ComputedDayOfField(
            "WeekOfWeekBasedYear", self, ChronoUnit.WEEKS, IsoUnit.WEEK_BASED_YEARS,
            WEEK_OF_WEEK_BASED_YEAR_RANGE,
        )
        self._week_based_year = ComputedDayOfField(
            "WeekBasedYear", self, IsoUnit.WEEK_BASED_YEARS, ChronoUnit.FOREVER,
            ChronoField.YEAR.range(),
        )

    @classmethod
    def of(cls, first_day_of_week: DayOfWeek, minimal_days_in_first_week: int) -> WeekFields:
        """Return the shared WeekFields for a first day and minimal days.

        Concurrent first-time callers may each build a candidate, but
        only one is published and every caller gets the published one.

        Raises:
            ValidationError: If minimal_days_in_first_week is outside 1-7.
        """
        key = (first_day_of_week, minimal_days_in_first_week)
        cached = _CACHE.get(key)
        if cached is not None:
            return cached

        candidate = cls(first_day_of_week, minimal_days_in_first_week)
        with _CACHE_LOCK:
            published = _CACHE.setdefault(key, candidate)
        if published is candidate:
            logger.debug("Published %s", published)
        else:
            logger.debug("Lost publish race for %s, using the published instance", published)
        return published

    @property
    def first_day_of_week(self) -> DayOfWeek:
        return self._first_day_of_week

    @property
    def minimal_days_in_first_week(self) -> int:
        return self._minimal_days

    def day_of_week(self) -> ComputedDayOfField:
        """Return the localized day-of-week field, from 1 to 7.

        Day 1 is the first day of the week, so for SUNDAY_START
        Sunday is 1 and Saturday is 7.
        """
        return self._day_of_week

    def week_of_month(self) -> ComputedDayOfField:
        """Return the week-of-month field, from 0 to 6."""
        return self._week_of_month

    def week_of_year(self) -> ComputedDayOfField:
        """Return the week-of-year field, from 0 to 54."""
        return self._week_of_year

    def week_of_week_based_year(self) -> ComputedDayOfField:
        """Return the week-of-week-based-year field, from 1 to 53."""
        return self._week_of_week_based_year

    def week_based_year(self) -> ComputedDayOfField:
        """Return the week-based-year field."""
        return self._week_based_year

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeekFields):
            return NotImplemented
        return (
            self._first_day_of_week is other._first_day_of_week
            and self._minimal_days == other._minimal_days
        )

    def __hash__(self) -> int:
        return hash((self._first_day_of_week, self._minimal_days))

    def __repr__(self) -> str:
        return f"WeekFields.of(DayOfWeek.{self._first_day_of_week.name}, {self._minimal_days})"

    def __str__(self) -> str:
        return f"WeekFields[{self._first_day_of_week.name},{self._minimal_days}]"


class ComputedDayOfField(TemporalField):
    """A week-based field computed from day-of-week and day-of-month/year.

    One implementation covers all five WeekFields fields; the range
    unit says which one an instance is. Instances compare by identity,
    which is safe because each WeekFields owns its own five fields and
    WeekFields values are shared.
    """

    __slots__ = ("_name", "_week_def", "_base_unit", "_range_unit", "_range")

    def __init__(
        self,
        name: str,
        week_def: WeekFields,
        base_unit: TemporalUnit,
        range_unit: TemporalUnit,
        value_range: ValueRange,
    ) -> None:
        self._name = name
        self._week_def = week_def
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
        if not temporal.is_supported(ChronoField.DAY_OF_WEEK):
            return False
        unit = self._range_unit
        if unit is ChronoUnit.WEEKS:
            return True
        if unit is ChronoUnit.MONTHS:
            return temporal.is_supported(ChronoField.DAY_OF_MONTH)
        if unit is ChronoUnit.YEARS or unit is IsoUnit.WEEK_BASED_YEARS:
            return temporal.is_supported(ChronoField.DAY_OF_YEAR)
        return temporal.is_supported(ChronoField.YEAR)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        unit = self._range_unit
        if unit is ChronoUnit.WEEKS:
            return self._range
        if unit is ChronoUnit.MONTHS:
            return self._range_by_week(temporal, ChronoField.DAY_OF_MONTH)
        if unit is ChronoUnit.YEARS:
            return self._range_by_week(temporal, ChronoField.DAY_OF_YEAR)
        if unit is IsoUnit.WEEK_BASED_YEARS:
            return self._range_week_of_week_based_year(temporal)
        return ChronoField.YEAR.range()

    def get_from(self, temporal: TemporalAccessor) -> int:
        if not self.is_supported_by(temporal):
            raise UnsupportedFieldError(f"Unsupported field: {self}")
        unit = self._range_unit
        if unit is ChronoUnit.WEEKS:
            return self._localized_day_of_week(temporal)
        if unit is ChronoUnit.MONTHS:
            return self._localized_week_of_month(temporal)
        if unit is ChronoUnit.YEARS:
            return self._localized_week_of_year(temporal)
        if unit is IsoUnit.WEEK_BASED_YEARS:
            return self._localized_week_of_week_based_year(temporal)
        return self._localized_week_based_year(temporal)

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        """Return a copy of the temporal with this field changed.

        The week-based-year keeps the week and day-of-week; every other
        field moves the temporal by the difference in its base unit.
        """
        new_val = self._range.check_valid_int_value(new_value, self)
        current = temporal.get(self)
        if new_val == current:
            return temporal
        if self._range_unit is ChronoUnit.FOREVER:
            local_dow = temporal.get(self._week_def.day_of_week())
            week = temporal.get(self._week_def.week_of_week_based_year())
            resolved = self._of_week_based_year(
                Chronology.from_temporal(temporal), new_val, week, local_dow
            )
            return temporal.with_field(ChronoField.EPOCH_DAY, resolved.to_epoch_day())
        return temporal.plus(new_val - current, self._base_unit)

    def resolve(
        self,
        field_values: dict[TemporalField, int],
        partial_temporal: TemporalAccessor,
        resolver_style: ResolverStyle,
    ) -> Date | None:
        value = field_values[self]
        new_value = to_int_exact(value)
        if self._range_unit is ChronoUnit.WEEKS:
            # no leniency for the localized day-of-week
            checked = self._range.check_valid_int_value(value, self)
            start_dow = self._week_def.first_day_of_week.value
            iso_dow = floor_mod((start_dow - 1) + (checked - 1), 7) + 1
            del field_values[self]
            field_values[ChronoField.DAY_OF_WEEK] = iso_dow
            return None
        if ChronoField.DAY_OF_WEEK not in field_values:
            return None
        iso_dow = ChronoField.DAY_OF_WEEK.check_valid_int_value(
            field_values[ChronoField.DAY_OF_WEEK]
        )
        local_dow = self._localized_day_of_iso_week(iso_dow)
        chronology = Chronology.from_temporal(partial_temporal)
        if ChronoField.YEAR in field_values:
            year = ChronoField.YEAR.check_valid_int_value(field_values[ChronoField.YEAR])
            if (
                self._range_unit is ChronoUnit.MONTHS
                and ChronoField.MONTH_OF_YEAR in field_values
            ):
                month = field_values[ChronoField.MONTH_OF_YEAR]
                return self._resolve_week_of_month(
                    field_values, chronology, year, month, new_value, local_dow,
                    resolver_style,
                )
            if self._range_unit is ChronoUnit.YEARS:
                return self._resolve_week_of_year(
                    field_values, chronology, year, new_value, local_dow, resolver_style
                )
        elif (
            (
                self._range_unit is IsoUnit.WEEK_BASED_YEARS
                or self._range_unit is ChronoUnit.FOREVER
            )
            and self._week_def.week_based_year() in field_values
            and self._week_def.week_of_week_based_year() in field_values
        ):
            return self._resolve_week_based_year(
                field_values, chronology, local_dow, resolver_style
            )
        return None

    # Week arithmetic

    def _localized_day_of_week(self, temporal: TemporalAccessor) -> int:
        return self._localized_day_of_iso_week(temporal.get(ChronoField.DAY_OF_WEEK))

    def _localized_day_of_iso_week(self, iso_dow: int) -> int:
        start = self._week_def.first_day_of_week.value
        return floor_mod(iso_dow - start, 7) + 1

    def _localized_week_of_month(self, temporal: TemporalAccessor) -> int:
        dow = self._localized_day_of_week(temporal)
        dom = temporal.get(ChronoField.DAY_OF_MONTH)
        offset = self._start_of_week_offset(dom, dow)
        return _compute_week(offset, dom)

    def _localized_week_of_year(self, temporal: TemporalAccessor) -> int:
        dow = self._localized_day_of_week(temporal)
        doy = temporal.get(ChronoField.DAY_OF_YEAR)
        offset = self._start_of_week_offset(doy, dow)
        return _compute_week(offset, doy)

    def _localized_week_based_year(self, temporal: TemporalAccessor) -> int:
        dow = self._localized_day_of_week(temporal)
        year = temporal.get(ChronoField.YEAR)
        doy = temporal.get(ChronoField.DAY_OF_YEAR)
        offset = self._start_of_week_offset(doy, dow)
        week = _compute_week(offset, doy)
        if week == 0:
            return year - 1
        year_len = temporal.range(ChronoField.DAY_OF_YEAR).maximum
        new_year_week = _compute_week(offset, year_len + self._week_def.minimal_days_in_first_week)
        if week >= new_year_week:
            return year + 1
        return year

    def _localized_week_of_week_based_year(self, temporal: TemporalAccessor) -> int:
        dow = self._localized_day_of_week(temporal)
        doy = temporal.get(ChronoField.DAY_OF_YEAR)
        offset = self._start_of_week_offset(doy, dow)
        week = _compute_week(offset, doy)
        if week == 0:
            # the last day of the previous year
            date = Chronology.from_temporal(temporal).date_from(temporal)
            return self._localized_week_of_week_based_year(date.minus_days(doy))
        if week > 50:
            year_len = temporal.range(ChronoField.DAY_OF_YEAR).maximum
            new_year_week = _compute_week(
                offset, year_len + self._week_def.minimal_days_in_first_week
            )
            if week >= new_year_week:
                week = week - new_year_week + 1
        return week

    def _start_of_week_offset(self, day: int, dow: int) -> int:
        """Return the offset of the first full week from the start of the period.

        A leading partial week shorter than the minimal days becomes
        week 0.
        """
        week_start = floor_mod(day - dow, 7)
        offset = -week_start
        if week_start + 1 > self._week_def.minimal_days_in_first_week:
            offset = 7 - week_start
        return offset

    def _of_week_based_year(
        self, chronology: Chronology, week_based_year: int, week: int, dow: int
    ) -> Date:
        date = chronology.date(week_based_year, 1, 1)
        local_dow = self._localized_day_of_week(date)
        offset = self._start_of_week_offset(1, local_dow)
        year_len = date.length_of_year()
        new_year_week = _compute_week(offset, year_len + self._week_def.minimal_days_in_first_week)
        week = min(week, new_year_week - 1)
        days = -offset + (dow - 1) + (week - 1) * 7
        return date.plus_days(days)

    # Ranges

    def _range_by_week(self, temporal: TemporalAccessor, field: ChronoField) -> ValueRange:
        dow = self._localized_day_of_week(temporal)
        offset = self._start_of_week_offset(temporal.get(field), dow)
        field_range = temporal.range(field)
        return ValueRange.of(
            _compute_week(offset, field_range.minimum),
            _compute_week(offset, field_range.maximum),
        )

    def _range_week_of_week_based_year(self, temporal: TemporalAccessor) -> ValueRange:
        if not temporal.is_supported(ChronoField.DAY_OF_YEAR):
            return WEEK_OF_YEAR_RANGE
        dow = self._localized_day_of_week(temporal)
        doy = temporal.get(ChronoField.DAY_OF_YEAR)
        offset = self._start_of_week_offset(doy, dow)
        week = _compute_week(offset, doy)
        if week == 0:
            # a day in the last week of the previous year
            date = Chronology.from_temporal(temporal).date_from(temporal)
            return self._range_week_of_week_based_year(date.minus_days(doy + 7))
        year_len = temporal.range(ChronoField.DAY_OF_YEAR).maximum
        new_year_week = _compute_week(offset, year_len + self._week_def.minimal_days_in_first_week)
        if week >= new_year_week:
            # a day in the first week of the next year
            date = Chronology.from_temporal(temporal).date_from(temporal)
            return self._range_week_of_week_based_year(date.plus_days(year_len - doy + 1 + 7))
        return ValueRange.of(1, new_year_week - 1)

    # Resolution

    def _resolve_week_of_month(
        self,
        field_values: dict[TemporalField, int],
        chronology: Chronology,
        year: int,
        month: int,
        week_of_month: int,
        local_dow: int,
        resolver_style: ResolverStyle,
    ) -> Date:
        if resolver_style is ResolverStyle.LENIENT:
            date = chronology.date(year, 1, 1).plus_months(subtract_exact(month, 1))
            weeks = subtract_exact(week_of_month, self._localized_week_of_month(date))
            days = local_dow - self._localized_day_of_week(date)
            date = date.plus_days(add_exact(multiply_exact(weeks, 7), days))
        else:
            month_valid = ChronoField.MONTH_OF_YEAR.check_valid_int_value(month)
            date = chronology.date(year, month_valid, 1)
            wom = self._range.check_valid_int_value(week_of_month, self)
            weeks = wom - self._localized_week_of_month(date)
            days = local_dow - self._localized_day_of_week(date)
            date = date.plus_days(weeks * 7 + days)
            if resolver_style is ResolverStyle.STRICT and date.month_value != month:
                logger.debug("STRICT resolve of %s landed on %s, outside month %d", self, date, month)
                raise ResolutionError(
                    "Strict mode rejected resolved date as it is in a different month"
                )
        del field_values[self]
        del field_values[ChronoField.YEAR]
        del field_values[ChronoField.MONTH_OF_YEAR]
        del field_values[ChronoField.DAY_OF_WEEK]
        return date

    def _resolve_week_of_year(
        self,
        field_values: dict[TemporalField, int],
        chronology: Chronology,
        year: int,
        week_of_year: int,
        local_dow: int,
        resolver_style: ResolverStyle,
    ) -> Date:
        date = chronology.date(year, 1, 1)
        if resolver_style is ResolverStyle.LENIENT:
            weeks = subtract_exact(week_of_year, self._localized_week_of_year(date))
            days = local_dow - self._localized_day_of_week(date)
            date = date.plus_days(add_exact(multiply_exact(weeks, 7), days))
        else:
            woy = self._range.check_valid_int_value(week_of_year, self)
            weeks = woy - self._localized_week_of_year(date)
            days = local_dow - self._localized_day_of_week(date)
            date = date.plus_days(weeks * 7 + days)
            if resolver_style is ResolverStyle.STRICT and date.year != year:
                logger.debug("STRICT resolve of %s landed on %s, outside year %d", self, date, year)
                raise ResolutionError(
                    "Strict mode rejected resolved date as it is in a different year"
                )
        del field_values[self]
        del field_values[ChronoField.YEAR]
        del field_values[ChronoField.DAY_OF_WEEK]
        return date

    def _resolve_week_based_year(
        self,
        field_values: dict[TemporalField, int],
        chronology: Chronology,
        local_dow: int,
        resolver_style: ResolverStyle,
    ) -> Date:
        year_field = self._week_def.week_based_year()
        week_field = self._week_def.week_of_week_based_year()
        week_based_year = year_field.range().check_valid_int_value(
            field_values[year_field], year_field
        )
        if resolver_style is ResolverStyle.LENIENT:
            # only checked arithmetic bounds how far the week may roll
            date = self._of_week_based_year(chronology, week_based_year, 1, local_dow)
            weeks = subtract_exact(field_values[week_field], 1)
            date = date.plus_weeks(weeks)
        else:
            week = week_field.range().check_valid_int_value(field_values[week_field], week_field)
            date = self._of_week_based_year(chronology, week_based_year, week, local_dow)
            if (
                resolver_style is ResolverStyle.STRICT
                and self._localized_week_based_year(date) != week_based_year
            ):
                logger.debug(
                    "STRICT resolve of %s landed on %s, outside week-based-year %d",
                    self, date, week_based_year,
                )
                raise ResolutionError(
                    "Strict mode rejected resolved date as it is in a different "
                    "week-based-year"
                )
        # self is one of the two week-based fields
        field_values.pop(year_field, None)
        field_values.pop(week_field, None)
        del field_values[ChronoField.DAY_OF_WEEK]
        return date

    def __repr__(self) -> str:
        return f"ComputedDayOfField({self})"

    def __str__(self) -> str:
        return f"{self._name}[{self._week_def}]"


def _compute_week(offset: int, day: int) -> int:
    """Return the week number of a day given the start-of-week offset."""
    return (7 + offset + (day - 1)) // 7


WeekFields.ISO = WeekFields.of(DayOfWeek.MONDAY, 4)
WeekFields.SUNDAY_START = WeekFields.of(DayOfWeek.SUNDAY, 1)


__all__ = ["WeekFields", "ComputedDayOfField"]

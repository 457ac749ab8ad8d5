"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates in
the proleptic ISO calendar, using astronomical year numbering (year 0
exists and equals 1 BCE).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronofield._internal.calendar import (
    days_before_month,
    days_in_month,
    days_in_year,
    epoch_day_to_iso_day_of_week,
    epoch_day_to_ymd,
    is_leap_year,
    ymd_to_epoch_day,
)
from chronofield._internal.mathutils import (
    add_exact,
    floor_div,
    floor_mod,
    multiply_exact,
    negate_exact,
    truncate_div,
)
from chronofield._internal.validation import (
    validate_day,
    validate_month,
    validate_year,
)
from chronofield.chrono.chronology import IsoChronology
from chronofield.errors import UnsupportedFieldError, ValidationError
from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.field import Temporal, TemporalField, TemporalUnit
from chronofield.temporal.value_range import ValueRange
from chronofield.units.dayofweek import DayOfWeek
from chronofield.units.month import Month
from chronofield.units.timeunit import ChronoUnit

if TYPE_CHECKING:
    from chronofield.core.datetime import DateTime
    from chronofield.core.time import Time

_DATE_FIELDS = frozenset(
    {
        ChronoField.DAY_OF_WEEK,
        ChronoField.DAY_OF_MONTH,
        ChronoField.DAY_OF_YEAR,
        ChronoField.EPOCH_DAY,
        ChronoField.MONTH_OF_YEAR,
        ChronoField.PROLEPTIC_MONTH,
        ChronoField.YEAR,
    }
)

_DATE_UNITS = frozenset(
    {
        ChronoUnit.DAYS,
        ChronoUnit.WEEKS,
        ChronoUnit.MONTHS,
        ChronoUnit.YEARS,
        ChronoUnit.DECADES,
        ChronoUnit.CENTURIES,
        ChronoUnit.MILLENNIA,
    }
)


class Date(Temporal):
    """A calendar date in the proleptic ISO calendar.

    Date represents a specific calendar day with year, month, and day
    components. Internally it is a single count of days from
    1970-01-01, which makes day arithmetic trivial.

    Attributes:
        year: The year (can be negative for BCE dates).
        month_value: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year
        2024
        >>> d.day_of_week
        <DayOfWeek.MONDAY: 1>
        >>> d.plus_months(1)
        Date(2024, 2, 15)
        >>> Date(2024, 1, 31).plus_months(1)  # Clamps to Feb 29
        Date(2024, 2, 29)
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Date(2023, 2, 29)
            Traceback (most recent call last):
            ...
            ValidationError: day must be between 1 and 28 for 2023-02, got 29
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)
        self._days: int = ymd_to_epoch_day(year, month, day)

    @classmethod
    def _from_epoch_day(cls, epoch_day: int) -> Date:
        instance = object.__new__(cls)
        instance._days = epoch_day
        return instance

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> Date:
        """Create a Date from the count of days since 1970-01-01.

        Raises:
            FieldRangeError: If the epoch day is outside the year range.

        Examples:
            >>> Date.of_epoch_day(0)
            Date(1970, 1, 1)
            >>> Date.of_epoch_day(-1)
            Date(1969, 12, 31)
        """
        ChronoField.EPOCH_DAY.check_valid_value(epoch_day)
        return cls._from_epoch_day(epoch_day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> Date:
        """Create a Date from a year and a day-of-year.

        Raises:
            ValidationError: If the day-of-year is invalid for the year.

        Examples:
            >>> Date.of_year_day(2024, 60)
            Date(2024, 2, 29)
        """
        ChronoField.YEAR.check_valid_value(year)
        ChronoField.DAY_OF_YEAR.check_valid_value(day_of_year)
        if day_of_year == 366 and not is_leap_year(year):
            raise ValidationError(
                f"Invalid date 'DayOfYear 366' as '{year}' is not a leap year"
            )
        return cls._from_epoch_day(ymd_to_epoch_day(year, 1, 1) + day_of_year - 1)

    # Components

    @property
    def year(self) -> int:
        """Return the year (astronomical numbering)."""
        return epoch_day_to_ymd(self._days)[0]

    @property
    def month(self) -> Month:
        """Return the month-of-year as a Month."""
        return Month(epoch_day_to_ymd(self._days)[1])

    @property
    def month_value(self) -> int:
        """Return the month-of-year from 1 to 12."""
        return epoch_day_to_ymd(self._days)[1]

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return epoch_day_to_ymd(self._days)[2]

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the day of the week.

        Examples:
            >>> Date(2008, 12, 28).day_of_week
            <DayOfWeek.SUNDAY: 7>
        """
        return DayOfWeek(epoch_day_to_iso_day_of_week(self._days))

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        year, month, day = epoch_day_to_ymd(self._days)
        return days_before_month(year, month) + day

    @property
    def is_leap_year(self) -> bool:
        """Return True if the year of this date is a leap year."""
        return is_leap_year(self.year)

    @property
    def chronology(self) -> IsoChronology:
        return IsoChronology.INSTANCE

    def length_of_month(self) -> int:
        """Return the number of days in the month of this date."""
        year, month, _ = epoch_day_to_ymd(self._days)
        return days_in_month(year, month)

    def length_of_year(self) -> int:
        """Return 365 or 366."""
        return days_in_year(self.year)

    def to_epoch_day(self) -> int:
        """Return the count of days since 1970-01-01."""
        return self._days

    def _proleptic_month(self) -> int:
        year, month, _ = epoch_day_to_ymd(self._days)
        return year * 12 + month - 1

    # Arithmetic

    def plus_days(self, days: int) -> Date:
        """Return a copy with days added.

        Raises:
            OverflowError: If the day count leaves the 64-bit range.
            FieldRangeError: If the result is outside the year range.
        """
        if days == 0:
            return self
        return Date.of_epoch_day(add_exact(self._days, days))

    def plus_weeks(self, weeks: int) -> Date:
        """Return a copy with weeks added."""
        return self.plus_days(multiply_exact(weeks, 7))

    def plus_months(self, months: int) -> Date:
        """Return a copy with months added.

        The day-of-month is clamped to the last valid day of the
        resulting month.
        """
        if months == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)
        calc_months = add_exact(year * 12 + (month - 1), months)
        new_year = ChronoField.YEAR.check_valid_int_value(floor_div(calc_months, 12))
        new_month = floor_mod(calc_months, 12) + 1
        return _resolve_previous_valid(new_year, new_month, day)

    def plus_years(self, years: int) -> Date:
        """Return a copy with years added.

        February 29 becomes February 28 when the new year is not leap.
        """
        if years == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)
        new_year = ChronoField.YEAR.check_valid_int_value(add_exact(year, years))
        return _resolve_previous_valid(new_year, month, day)

    def minus_days(self, days: int) -> Date:
        return self.plus_days(negate_exact(days))

    def minus_weeks(self, weeks: int) -> Date:
        return self.plus_weeks(negate_exact(weeks))

    def minus_months(self, months: int) -> Date:
        return self.plus_months(negate_exact(months))

    def minus_years(self, years: int) -> Date:
        return self.plus_years(negate_exact(years))

    def with_day_of_month(self, day_of_month: int) -> Date:
        """Return a copy with the day-of-month changed.

        Raises:
            ValidationError: If the day is invalid for the month.
        """
        year, month, day = epoch_day_to_ymd(self._days)
        if day == day_of_month:
            return self
        return Date(year, month, day_of_month)

    def with_day_of_year(self, day_of_year: int) -> Date:
        """Return a copy with the day-of-year changed.

        Raises:
            ValidationError: If the day is invalid for the year.
        """
        if self.day_of_year == day_of_year:
            return self
        return Date.of_year_day(self.year, day_of_year)

    def with_month(self, month: int) -> Date:
        """Return a copy with the month changed, clamping the day."""
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        year, current, day = epoch_day_to_ymd(self._days)
        if current == month:
            return self
        return _resolve_previous_valid(year, month, day)

    def with_year(self, year: int) -> Date:
        """Return a copy with the year changed, clamping February 29."""
        ChronoField.YEAR.check_valid_value(year)
        current, month, day = epoch_day_to_ymd(self._days)
        if current == year:
            return self
        return _resolve_previous_valid(year, month, day)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        Raises:
            ValidationError: If the resulting date is invalid.

        Examples:
            >>> Date(2024, 1, 15).replace(month=6)
            Date(2024, 6, 15)
        """
        y, m, d = epoch_day_to_ymd(self._days)
        return Date(
            year if year is not None else y,
            month if month is not None else m,
            day if day is not None else d,
        )

    def at_time(self, time: Time) -> DateTime:
        """Combine this date with a time of day."""
        from chronofield.core.datetime import DateTime

        return DateTime(self, time)

    # Field access

    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            return field in _DATE_FIELDS
        return field is not None and field.is_supported_by(self)

    def is_supported_unit(self, unit: TemporalUnit) -> bool:
        if isinstance(unit, ChronoUnit):
            return unit in _DATE_UNITS
        return unit is not None and unit.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        if field is ChronoField.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field is ChronoField.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        return super().range(field)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            if field is ChronoField.DAY_OF_WEEK:
                return self.day_of_week.value
            if field is ChronoField.DAY_OF_MONTH:
                return self.day
            if field is ChronoField.DAY_OF_YEAR:
                return self.day_of_year
            if field is ChronoField.EPOCH_DAY:
                return self._days
            if field is ChronoField.MONTH_OF_YEAR:
                return self.month_value
            if field is ChronoField.PROLEPTIC_MONTH:
                return self._proleptic_month()
            if field is ChronoField.YEAR:
                return self.year
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        return field.get_from(self)

    def with_field(self, field: TemporalField, new_value: int) -> Date:
        if isinstance(field, ChronoField):
            if field not in _DATE_FIELDS:
                raise UnsupportedFieldError(f"Unsupported field: {field}")
            field.check_valid_value(new_value)
            if field is ChronoField.DAY_OF_WEEK:
                return self.plus_days(new_value - self.day_of_week.value)
            if field is ChronoField.DAY_OF_MONTH:
                return self.with_day_of_month(new_value)
            if field is ChronoField.DAY_OF_YEAR:
                return self.with_day_of_year(new_value)
            if field is ChronoField.EPOCH_DAY:
                return Date.of_epoch_day(new_value)
            if field is ChronoField.MONTH_OF_YEAR:
                return self.with_month(new_value)
            if field is ChronoField.PROLEPTIC_MONTH:
                return self.plus_months(new_value - self._proleptic_month())
            return self.with_year(new_value)
        return field.adjust_into(self, new_value)

    def plus(self, amount: int, unit: TemporalUnit) -> Date:
        if isinstance(unit, ChronoUnit):
            if unit is ChronoUnit.DAYS:
                return self.plus_days(amount)
            if unit is ChronoUnit.WEEKS:
                return self.plus_weeks(amount)
            if unit is ChronoUnit.MONTHS:
                return self.plus_months(amount)
            if unit is ChronoUnit.YEARS:
                return self.plus_years(amount)
            if unit is ChronoUnit.DECADES:
                return self.plus_years(multiply_exact(amount, 10))
            if unit is ChronoUnit.CENTURIES:
                return self.plus_years(multiply_exact(amount, 100))
            if unit is ChronoUnit.MILLENNIA:
                return self.plus_years(multiply_exact(amount, 1000))
            raise UnsupportedFieldError(f"Unsupported unit: {unit}")
        return unit.add_to(self, amount)

    def until(self, end: Temporal, unit: TemporalUnit) -> int:
        """Return the whole units from this date to end.

        The result is negative when end is earlier, and is truncated
        toward zero.

        Examples:
            >>> Date(2024, 1, 31).until(Date(2024, 2, 29), ChronoUnit.MONTHS)
            0
            >>> Date(2024, 1, 31).until(Date(2024, 3, 31), ChronoUnit.MONTHS)
            2
        """
        end_date = IsoChronology.INSTANCE.date_from(end)
        if isinstance(unit, ChronoUnit):
            if unit is ChronoUnit.DAYS:
                return end_date._days - self._days
            if unit is ChronoUnit.WEEKS:
                return truncate_div(end_date._days - self._days, 7)
            if unit is ChronoUnit.MONTHS:
                return self._months_until(end_date)
            if unit is ChronoUnit.YEARS:
                return truncate_div(self._months_until(end_date), 12)
            if unit is ChronoUnit.DECADES:
                return truncate_div(self._months_until(end_date), 120)
            if unit is ChronoUnit.CENTURIES:
                return truncate_div(self._months_until(end_date), 1200)
            if unit is ChronoUnit.MILLENNIA:
                return truncate_div(self._months_until(end_date), 12000)
            raise UnsupportedFieldError(f"Unsupported unit: {unit}")
        return unit.between(self, end_date)

    def _months_until(self, end: Date) -> int:
        packed_start = self._proleptic_month() * 32 + self.day
        packed_end = end._proleptic_month() * 32 + end.day
        return truncate_div(packed_end - packed_start, 32)

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        year, month, day = epoch_day_to_ymd(self._days)
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation, such as '2024-01-15'.

        Years outside 0000-9999 carry an explicit sign.
        """
        year, month, day = epoch_day_to_ymd(self._days)
        if year < 0:
            year_str = f"-{abs(year):04d}"
        elif year > 9999:
            year_str = f"+{year}"
        else:
            year_str = f"{year:04d}"
        return f"{year_str}-{month:02d}-{day:02d}"


def _resolve_previous_valid(year: int, month: int, day: int) -> Date:
    """Build a date, clamping the day to the end of the month."""
    validate_year(year)
    return Date(year, month, min(day, days_in_month(year, month)))


__all__ = ["Date"]

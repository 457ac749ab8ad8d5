"""ChronoField enumeration for the standard date-time fields.

Temporal types handle these fields directly; every other field is
asked to compute itself from the temporal. ChronoField therefore
forwards get_from() and adjust_into() straight back to the temporal.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from chronofield._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from chronofield.temporal.field import TemporalField
from chronofield.temporal.value_range import ValueRange
from chronofield.units.timeunit import ChronoUnit

if TYPE_CHECKING:
    from chronofield.temporal.field import Temporal, TemporalAccessor


class ChronoField(TemporalField, Enum):
    """Standard fields of the ISO calendar and the time of day.

    Examples:
        >>> ChronoField.MONTH_OF_YEAR.range()
        ValueRange(1, 1, 12, 12)
        >>> str(ChronoField.DAY_OF_MONTH.range())
        '1 - 28/31'
        >>> ChronoField.HOUR_OF_DAY.is_time_based
        True
    """

    NANO_OF_SECOND = (
        "NanoOfSecond", ChronoUnit.NANOS, ChronoUnit.SECONDS,
        ValueRange.of(0, NANOS_PER_SECOND - 1),
    )
    SECOND_OF_MINUTE = (
        "SecondOfMinute", ChronoUnit.SECONDS, ChronoUnit.MINUTES, ValueRange.of(0, 59)
    )
    MINUTE_OF_HOUR = (
        "MinuteOfHour", ChronoUnit.MINUTES, ChronoUnit.HOURS, ValueRange.of(0, 59)
    )
    HOUR_OF_DAY = ("HourOfDay", ChronoUnit.HOURS, ChronoUnit.DAYS, ValueRange.of(0, 23))
    SECOND_OF_DAY = (
        "SecondOfDay", ChronoUnit.SECONDS, ChronoUnit.DAYS,
        ValueRange.of(0, SECONDS_PER_DAY - 1),
    )
    DAY_OF_WEEK = ("DayOfWeek", ChronoUnit.DAYS, ChronoUnit.WEEKS, ValueRange.of(1, 7))
    DAY_OF_MONTH = (
        "DayOfMonth", ChronoUnit.DAYS, ChronoUnit.MONTHS, ValueRange.of(1, 28, 31)
    )
    DAY_OF_YEAR = (
        "DayOfYear", ChronoUnit.DAYS, ChronoUnit.YEARS, ValueRange.of(1, 365, 366)
    )
    EPOCH_DAY = (
        "EpochDay", ChronoUnit.DAYS, ChronoUnit.FOREVER,
        ValueRange.of(-365_243_219_162, 365_241_780_471),
    )
    MONTH_OF_YEAR = (
        "MonthOfYear", ChronoUnit.MONTHS, ChronoUnit.YEARS, ValueRange.of(1, 12)
    )
    PROLEPTIC_MONTH = (
        "ProlepticMonth", ChronoUnit.MONTHS, ChronoUnit.FOREVER,
        ValueRange.of(MIN_YEAR * 12, MAX_YEAR * 12 + 11),
    )
    YEAR = ("Year", ChronoUnit.YEARS, ChronoUnit.FOREVER, ValueRange.of(MIN_YEAR, MAX_YEAR))

    def __init__(
        self,
        display_name: str,
        base_unit: ChronoUnit,
        range_unit: ChronoUnit,
        value_range: ValueRange,
    ) -> None:
        self._display_name = display_name
        self._base_unit = base_unit
        self._range_unit = range_unit
        self._range = value_range

    @property
    def base_unit(self) -> ChronoUnit:
        return self._base_unit

    @property
    def range_unit(self) -> ChronoUnit:
        return self._range_unit

    @property
    def is_date_based(self) -> bool:
        return self._base_unit.is_date_based

    @property
    def is_time_based(self) -> bool:
        return self._base_unit.is_time_based

    def range(self) -> ValueRange:
        """Return the outer range of the field, ignoring any context."""
        return self._range

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        return temporal.range(self)

    def check_valid_value(self, value: int) -> int:
        """Check the value against the outer range of this field.

        Raises:
            FieldRangeError: If the value is invalid.
        """
        return self._range.check_valid_value(value, self)

    def check_valid_int_value(self, value: int) -> int:
        """Check the value against the outer range and the int domain.

        Raises:
            FieldRangeError: If the value is invalid.
        """
        return self._range.check_valid_int_value(value, self)

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(self)

    def get_from(self, temporal: TemporalAccessor) -> int:
        return temporal.get_long(self)

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        return temporal.with_field(self, new_value)

    def __str__(self) -> str:
        return self._display_name


__all__ = ["ChronoField"]

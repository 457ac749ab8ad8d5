"""DateTime class combining a Date and a Time.

A DateTime carries no offset. Transitions keep the local date-time of
the change together with the offsets either side of it, and convert to
an instant through to_epoch_second().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronofield._internal.constants import NANOS_PER_DAY, NANOS_PER_SECOND, SECONDS_PER_DAY
from chronofield._internal.mathutils import (
    add_exact,
    floor_div,
    floor_mod,
    multiply_exact,
    truncate_div,
)
from chronofield.chrono.chronology import IsoChronology
from chronofield.core.date import Date
from chronofield.core.time import Time
from chronofield.errors import UnsupportedFieldError
from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.field import Temporal, TemporalField, TemporalUnit
from chronofield.units.offset import ZoneOffset
from chronofield.units.timeunit import ChronoUnit

if TYPE_CHECKING:
    from chronofield.temporal.value_range import ValueRange


class DateTime(Temporal):
    """A date-time without an offset, such as 2023-10-29T02:00.

    Examples:
        >>> dt = DateTime.of(2023, 10, 29, 2, 0)
        >>> str(dt)
        '2023-10-29T02:00'
        >>> dt.to_epoch_second(ZoneOffset.of_hours(1))
        1698541200
    """

    __slots__ = ("_date", "_time")

    def __init__(self, date: Date, time: Time) -> None:
        self._date = date
        self._time = time

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> DateTime:
        """Create a DateTime from its components.

        Raises:
            ValidationError: If any component is out of range.
        """
        return cls(Date(year, month, day), Time(hour, minute, second, nanosecond))

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, nanosecond: int, offset: ZoneOffset
    ) -> DateTime:
        """Create the local date-time of an instant seen at an offset.

        Examples:
            >>> DateTime.of_epoch_second(0, 0, ZoneOffset.of_hours(2))
            DateTime(1970, 1, 1, 2, 0, 0, nanosecond=0)
        """
        ChronoField.NANO_OF_SECOND.check_valid_value(nanosecond)
        local_second = add_exact(epoch_second, offset.total_seconds)
        local_epoch_day = floor_div(local_second, SECONDS_PER_DAY)
        second_of_day = floor_mod(local_second, SECONDS_PER_DAY)
        return cls(
            Date.of_epoch_day(local_epoch_day),
            Time._from_nanos(second_of_day * NANOS_PER_SECOND + nanosecond),
        )

    @property
    def date(self) -> Date:
        return self._date

    @property
    def time(self) -> Time:
        return self._time

    @property
    def chronology(self) -> IsoChronology:
        return self._date.chronology

    def to_epoch_second(self, offset: ZoneOffset) -> int:
        """Return the seconds from 1970-01-01T00:00Z of this date-time at an offset."""
        seconds = multiply_exact(self._date.to_epoch_day(), SECONDS_PER_DAY)
        seconds = add_exact(seconds, self._time.to_second_of_day())
        return seconds - offset.total_seconds

    def plus_days(self, days: int) -> DateTime:
        return self._with(self._date.plus_days(days), self._time)

    def plus_seconds(self, seconds: int) -> DateTime:
        """Return a copy with seconds added, rolling into other days.

        Examples:
            >>> DateTime.of(2023, 10, 29, 23, 0).plus_seconds(3600)
            DateTime(2023, 10, 30, 0, 0, 0, nanosecond=0)
        """
        return self._plus_nanos(multiply_exact(seconds, NANOS_PER_SECOND))

    def _plus_nanos(self, nanos: int) -> DateTime:
        if nanos == 0:
            return self
        total = self._time.to_nano_of_day() + nanos
        new_date = self._date.plus_days(floor_div(total, NANOS_PER_DAY))
        return self._with(new_date, Time._from_nanos(floor_mod(total, NANOS_PER_DAY)))

    def _with(self, date: Date, time: Time) -> DateTime:
        if date is self._date and time is self._time:
            return self
        return DateTime(date, time)

    # Field access

    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            return self._date.is_supported(field) or self._time.is_supported(field)
        return field is not None and field.is_supported_by(self)

    def is_supported_unit(self, unit: TemporalUnit) -> bool:
        if isinstance(unit, ChronoUnit):
            return unit.is_time_based or self._date.is_supported_unit(unit)
        return unit is not None and unit.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        if isinstance(field, ChronoField):
            if field.is_time_based:
                return self._time.range(field)
            return self._date.range(field)
        return field.range_refined_by(self)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            if field.is_time_based:
                return self._time.get_long(field)
            return self._date.get_long(field)
        return field.get_from(self)

    def with_field(self, field: TemporalField, new_value: int) -> DateTime:
        if isinstance(field, ChronoField):
            if field.is_time_based:
                return self._with(self._date, self._time.with_field(field, new_value))
            return self._with(self._date.with_field(field, new_value), self._time)
        return field.adjust_into(self, new_value)

    def plus(self, amount: int, unit: TemporalUnit) -> DateTime:
        if isinstance(unit, ChronoUnit):
            if unit.is_time_based:
                return self._plus_nanos(
                    multiply_exact(amount, unit.duration.total_nanoseconds)
                )
            return self._with(self._date.plus(amount, unit), self._time)
        return unit.add_to(self, amount)

    def until(self, end: Temporal, unit: TemporalUnit) -> int:
        """Return the whole units from this date-time to end, truncated toward zero."""
        if not isinstance(end, DateTime):
            raise UnsupportedFieldError(
                f"Unable to obtain DateTime from {type(end).__name__}"
            )
        if isinstance(unit, ChronoUnit):
            if unit.is_time_based:
                days = end._date.to_epoch_day() - self._date.to_epoch_day()
                nanos = end._time.to_nano_of_day() - self._time.to_nano_of_day()
                total = days * NANOS_PER_DAY + nanos
                return truncate_div(total, unit.duration.total_nanoseconds)
            end_date = end._date
            if end_date > self._date and end._time < self._time:
                end_date = end_date.minus_days(1)
            elif end_date < self._date and end._time > self._time:
                end_date = end_date.plus_days(1)
            return self._date.until(end_date, unit)
        return unit.between(self, end)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._date, self._time) < (other._date, other._time)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._date, self._time) <= (other._date, other._time)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._date, self._time) > (other._date, other._time)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._date, self._time) >= (other._date, other._time)

    def __hash__(self) -> int:
        return hash((self._date, self._time))

    def __repr__(self) -> str:
        d, t = self._date, self._time
        return (
            f"DateTime({d.year}, {d.month_value}, {d.day}, "
            f"{t.hour}, {t.minute}, {t.second}, nanosecond={t.nanosecond})"
        )

    def __str__(self) -> str:
        return f"{self._date}T{self._time}"


__all__ = ["DateTime"]

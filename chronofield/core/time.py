"""Time class representing a time of day.

This module provides the Time class for representing time-of-day values
with nanosecond precision. Transition rules use it for the wall-clock
time a change happens at.
"""

from __future__ import annotations

from typing import ClassVar

from chronofield._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from chronofield._internal.mathutils import truncate_div
from chronofield._internal.validation import validate_range
from chronofield.errors import UnsupportedFieldError
from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.field import Temporal, TemporalField, TemporalUnit
from chronofield.units.timeunit import ChronoUnit

_TIME_FIELDS = frozenset(
    {
        ChronoField.NANO_OF_SECOND,
        ChronoField.SECOND_OF_MINUTE,
        ChronoField.MINUTE_OF_HOUR,
        ChronoField.HOUR_OF_DAY,
        ChronoField.SECOND_OF_DAY,
    }
)


class Time(Temporal):
    """A time of day with nanosecond precision.

    Time represents the time portion of a day, from midnight (00:00:00)
    to just before the next midnight (23:59:59.999999999). It does not
    include any date or offset information.

    The internal representation stores the total nanoseconds since
    midnight in a single `_nanos` slot.

    Examples:
        >>> t = Time(14, 30, 45)
        >>> t.hour
        14
        >>> t.to_second_of_day()
        52245
        >>> str(Time(2, 0))
        '02:00'
    """

    __slots__ = ("_nanos",)

    MIDNIGHT: ClassVar[Time]
    NOON: ClassVar[Time]

    @validate_range(hour=(0, 23), minute=(0, 59), second=(0, 59), nanosecond=(0, 999_999_999))
    def __init__(
        self, hour: int = 0, minute: int = 0, second: int = 0, nanosecond: int = 0
    ) -> None:
        """Create a Time from component parts.

        Raises:
            ValidationError: If any component is out of range.
        """
        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> Time:
        """Create a Time from nanoseconds since midnight, without validation."""
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    @validate_range(second_of_day=(0, SECONDS_PER_DAY - 1))
    def of_second_of_day(cls, second_of_day: int) -> Time:
        """Create a Time from the seconds since midnight.

        Examples:
            >>> Time.of_second_of_day(3661)
            Time(1, 1, 1, nanosecond=0)
        """
        return cls._from_nanos(second_of_day * NANOS_PER_SECOND)

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        """Return the nanoseconds within the second (0-999999999)."""
        return self._nanos % NANOS_PER_SECOND

    def to_second_of_day(self) -> int:
        """Return the whole seconds since midnight."""
        return self._nanos // NANOS_PER_SECOND

    def to_nano_of_day(self) -> int:
        """Return the nanoseconds since midnight."""
        return self._nanos

    def plus_seconds(self, seconds: int) -> Time:
        """Return a copy with seconds added, wrapping around midnight.

        Examples:
            >>> Time(23, 0).plus_seconds(7200)
            Time(1, 0, 0, nanosecond=0)
        """
        return self.plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_nanos(self, nanos: int) -> Time:
        """Return a copy with nanoseconds added, wrapping around midnight."""
        return Time._from_nanos((self._nanos + nanos) % NANOS_PER_DAY)

    # Field access

    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            return field in _TIME_FIELDS
        return field is not None and field.is_supported_by(self)

    def is_supported_unit(self, unit: TemporalUnit) -> bool:
        if isinstance(unit, ChronoUnit):
            return unit.is_time_based
        return unit is not None and unit.is_supported_by(self)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            if field is ChronoField.NANO_OF_SECOND:
                return self.nanosecond
            if field is ChronoField.SECOND_OF_MINUTE:
                return self.second
            if field is ChronoField.MINUTE_OF_HOUR:
                return self.minute
            if field is ChronoField.HOUR_OF_DAY:
                return self.hour
            if field is ChronoField.SECOND_OF_DAY:
                return self.to_second_of_day()
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        return field.get_from(self)

    def with_field(self, field: TemporalField, new_value: int) -> Time:
        if isinstance(field, ChronoField):
            if field not in _TIME_FIELDS:
                raise UnsupportedFieldError(f"Unsupported field: {field}")
            field.check_valid_value(new_value)
            delta = new_value - self.get_long(field)
            if field is ChronoField.NANO_OF_SECOND:
                return self.plus_nanos(delta)
            if field is ChronoField.SECOND_OF_MINUTE or field is ChronoField.SECOND_OF_DAY:
                return self.plus_seconds(delta)
            if field is ChronoField.MINUTE_OF_HOUR:
                return self.plus_seconds(delta * SECONDS_PER_MINUTE)
            return self.plus_seconds(delta * SECONDS_PER_HOUR)
        return field.adjust_into(self, new_value)

    def plus(self, amount: int, unit: TemporalUnit) -> Time:
        if isinstance(unit, ChronoUnit):
            if not unit.is_time_based:
                raise UnsupportedFieldError(f"Unsupported unit: {unit}")
            return self.plus_nanos(amount * unit.duration.total_nanoseconds)
        return unit.add_to(self, amount)

    def until(self, end: Temporal, unit: TemporalUnit) -> int:
        """Return the whole units from this time to end, within one day."""
        if not isinstance(end, Time):
            raise UnsupportedFieldError(
                f"Unable to obtain Time from {type(end).__name__}"
            )
        if isinstance(unit, ChronoUnit):
            if not unit.is_time_based:
                raise UnsupportedFieldError(f"Unsupported unit: {unit}")
            return truncate_div(end._nanos - self._nanos, unit.duration.total_nanoseconds)
        return unit.between(self, end)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return (
            f"Time({self.hour}, {self.minute}, {self.second}, "
            f"nanosecond={self.nanosecond})"
        )

    def __str__(self) -> str:
        """Return a string like '02:00', '02:00:30' or '02:00:30.5'."""
        result = f"{self.hour:02d}:{self.minute:02d}"
        if self.second or self.nanosecond:
            result += f":{self.second:02d}"
            if self.nanosecond:
                result += f".{self.nanosecond:09d}".rstrip("0")
        return result


Time.MIDNIGHT = Time._from_nanos(0)
Time.NOON = Time._from_nanos(12 * NANOS_PER_HOUR)


__all__ = ["Time"]

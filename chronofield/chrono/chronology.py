"""Calendar systems.

Derived fields such as IsoFields.QUARTER_OF_YEAR are only defined for
the ISO calendar. They call Chronology.from_temporal() to find out which
calendar a temporal belongs to and refuse anything else.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from chronofield._internal.calendar import is_leap_year

if TYPE_CHECKING:
    from chronofield.core.date import Date
    from chronofield.temporal.field import TemporalAccessor, TemporalField
    from chronofield.temporal.value_range import ValueRange


class Chronology:
    """A calendar system, identified by its id."""

    __slots__ = ()

    @property
    def id(self) -> str:
        raise NotImplementedError

    @staticmethod
    def from_temporal(temporal: TemporalAccessor) -> Chronology:
        """Return the calendar system of a temporal.

        Temporals without a calendar of their own, such as a Time, are
        treated as ISO.
        """
        chronology = temporal.chronology
        if chronology is None:
            return IsoChronology.INSTANCE
        return chronology

    def date(self, year: int, month: int, day: int) -> Date:
        raise NotImplementedError

    def date_from(self, temporal: TemporalAccessor) -> Date:
        raise NotImplementedError

    def date_epoch_day(self, epoch_day: int) -> Date:
        raise NotImplementedError

    def is_leap_year(self, year: int) -> bool:
        raise NotImplementedError

    def range(self, field: TemporalField) -> ValueRange:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"

    def __str__(self) -> str:
        return self.id


class IsoChronology(Chronology):
    """The proleptic ISO-8601 calendar.

    There is exactly one instance, IsoChronology.INSTANCE.

    Examples:
        >>> IsoChronology.INSTANCE.date(2024, 2, 29)
        Date(2024, 2, 29)
        >>> IsoChronology.INSTANCE.is_leap_year(1900)
        False
    """

    __slots__ = ()

    INSTANCE: ClassVar[IsoChronology]

    @property
    def id(self) -> str:
        return "ISO"

    def date(self, year: int, month: int, day: int) -> Date:
        """Return the ISO date for year, month and day.

        Raises:
            ValidationError: If the date is invalid.
        """
        from chronofield.core.date import Date

        return Date(year, month, day)

    def date_from(self, temporal: TemporalAccessor) -> Date:
        """Return the ISO date of a temporal, via its epoch day."""
        from chronofield.core.date import Date
        from chronofield.temporal.chrono_field import ChronoField

        if isinstance(temporal, Date):
            return temporal
        return self.date_epoch_day(temporal.get_long(ChronoField.EPOCH_DAY))

    def date_epoch_day(self, epoch_day: int) -> Date:
        from chronofield.core.date import Date

        return Date.of_epoch_day(epoch_day)

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def range(self, field: TemporalField) -> ValueRange:
        return field.range()


IsoChronology.INSTANCE = IsoChronology()


__all__ = ["Chronology", "IsoChronology"]

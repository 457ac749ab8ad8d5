"""Field, unit and temporal contracts.

These classes define the capability every date-time field and unit
implements, and the field-access protocol every temporal type speaks.
Built-in fields (ChronoField) and units (ChronoUnit) are handled
directly by the temporal types; any other field or unit is asked to do
the work itself:

    date.get_long(ChronoField.YEAR)         # handled by Date
    date.get_long(IsoFields.QUARTER_OF_YEAR)  # Date calls QUARTER_OF_YEAR.get_from(date)

The same double dispatch lets independently defined fields cooperate
when a date is reconstructed from a map of field values: each field's
resolve() looks at itself and its related fields, and either builds a
date or leaves the map for another field to handle.

The contracts are plain base classes rather than ABCs so that enums can
implement them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from chronofield._internal.constants import LONG_MAX, LONG_MIN
from chronofield.errors import DateTimeError, UnsupportedFieldError

if TYPE_CHECKING:
    from chronofield.chrono.chronology import Chronology
    from chronofield.core.duration import Duration
    from chronofield.temporal.resolver_style import ResolverStyle
    from chronofield.temporal.value_range import ValueRange

TemporalAdjuster = Callable[["Temporal"], "Temporal"]


class TemporalUnit:
    """A unit of date-time, such as days or quarter-years."""

    @property
    def duration(self) -> Duration:
        """Return the (possibly estimated) duration of one unit."""
        raise NotImplementedError

    @property
    def is_duration_estimated(self) -> bool:
        """Return True if the duration is an estimate, as for months."""
        raise NotImplementedError

    @property
    def is_date_based(self) -> bool:
        raise NotImplementedError

    @property
    def is_time_based(self) -> bool:
        raise NotImplementedError

    def is_supported_by(self, temporal: Temporal) -> bool:
        """Return True if this unit can be added to the temporal.

        The default tries adding one unit to the temporal, then minus one.
        """
        try:
            temporal.plus(1, self)
            return True
        except UnsupportedFieldError:
            return False
        except DateTimeError:
            pass
        try:
            temporal.plus(-1, self)
            return True
        except DateTimeError:
            return False

    def add_to(self, temporal: Temporal, amount: int) -> Temporal:
        """Return a copy of the temporal with the amount of this unit added."""
        raise NotImplementedError

    def between(self, start: Temporal, end: Temporal) -> int:
        """Return the whole number of units between two temporals."""
        raise NotImplementedError


class TemporalField:
    """A field of date-time, such as month-of-year or quarter-of-year."""

    @property
    def base_unit(self) -> TemporalUnit:
        """Return the unit the field is measured in."""
        raise NotImplementedError

    @property
    def range_unit(self) -> TemporalUnit:
        """Return the unit the field is bound by."""
        raise NotImplementedError

    @property
    def is_date_based(self) -> bool:
        raise NotImplementedError

    @property
    def is_time_based(self) -> bool:
        raise NotImplementedError

    def range(self) -> ValueRange:
        """Return the context-free range of valid values."""
        raise NotImplementedError

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        """Return the range of valid values in the context of a temporal."""
        return self.range()

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        """Return True if get_from() can be called on the temporal."""
        raise NotImplementedError

    def get_from(self, temporal: TemporalAccessor) -> int:
        """Return the value of this field from the temporal.

        Raises:
            UnsupportedFieldError: If the temporal lacks what the field needs.
        """
        raise NotImplementedError

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        """Return a copy of the temporal with this field set to new_value.

        The argument is never mutated.
        """
        raise NotImplementedError

    def resolve(
        self,
        field_values: dict[TemporalField, int],
        partial_temporal: TemporalAccessor,
        resolver_style: ResolverStyle,
    ) -> TemporalAccessor | None:
        """Resolve this field, and related ones, into a date.

        Returns None, leaving the map untouched, when the map lacks the
        data needed. On success every consumed field, this one included,
        is removed from the map. A field may also normalize the map and
        return None, which tells the caller to try again.
        """
        return None


class TemporalAccessor:
    """Read-only access to date-time fields."""

    __slots__ = ()

    @property
    def chronology(self) -> Chronology | None:
        """Return the calendar system, or None for non-date temporals."""
        return None

    def is_supported(self, field: TemporalField) -> bool:
        """Return True if the field can be queried."""
        raise NotImplementedError

    def range(self, field: TemporalField) -> ValueRange:
        """Return the range of valid values for the field in this context.

        Raises:
            UnsupportedFieldError: If the field is not supported.
        """
        from chronofield.temporal.chrono_field import ChronoField

        if isinstance(field, ChronoField):
            if self.is_supported(field):
                return field.range()
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        return field.range_refined_by(self)

    def get(self, field: TemporalField) -> int:
        """Return the value of the field, checked to be a valid int value."""
        value_range = self.range(field)
        if not value_range.is_int_value():
            raise UnsupportedFieldError(
                f"Invalid field {field} for get() method, use get_long() instead"
            )
        value = self.get_long(field)
        return value_range.check_valid_int_value(value, field)

    def get_long(self, field: TemporalField) -> int:
        """Return the value of the field as a long."""
        raise NotImplementedError


class Temporal(TemporalAccessor):
    """A temporal that can be adjusted and moved by amounts of time."""

    __slots__ = ()

    def is_supported_unit(self, unit: TemporalUnit) -> bool:
        """Return True if the unit can be added to or subtracted from this."""
        raise NotImplementedError

    def with_field(self, field: TemporalField, new_value: int) -> Temporal:
        """Return a copy with the field changed."""
        raise NotImplementedError

    def plus(self, amount: int, unit: TemporalUnit) -> Temporal:
        """Return a copy with the amount of the unit added."""
        raise NotImplementedError

    def minus(self, amount: int, unit: TemporalUnit) -> Temporal:
        """Return a copy with the amount of the unit subtracted."""
        if amount == LONG_MIN:
            return self.plus(LONG_MAX, unit).plus(1, unit)
        return self.plus(-amount, unit)

    def until(self, end: Temporal, unit: TemporalUnit) -> int:
        """Return the whole number of units from this temporal to end."""
        raise NotImplementedError

    def adjust(self, adjuster: TemporalAdjuster) -> Temporal:
        """Return the temporal produced by the adjuster."""
        return adjuster(self)


__all__ = [
    "TemporalAdjuster",
    "TemporalUnit",
    "TemporalField",
    "TemporalAccessor",
    "Temporal",
]

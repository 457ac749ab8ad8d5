"""Resolution of a map of field values into a date.

resolve_fields() drives the cooperative resolve() protocol. Each derived
field in the map gets a chance to consume itself and its related fields
and produce a date; a field may instead rewrite the map into simpler
fields and return None. The driver keeps going until nothing changes,
then falls back to the standard YEAR/MONTH_OF_YEAR/DAY_OF_MONTH and
YEAR/DAY_OF_YEAR combinations, and finally checks every leftover field
against the resolved date.

Examples:
    >>> from chronofield.temporal.chrono_field import ChronoField
    >>> from chronofield.temporal.iso_fields import IsoFields
    >>> resolve_fields({
    ...     IsoFields.WEEK_BASED_YEAR: 2009,
    ...     IsoFields.WEEK_OF_WEEK_BASED_YEAR: 1,
    ...     ChronoField.DAY_OF_WEEK: 1,
    ... }, ResolverStyle.STRICT)
    Date(2008, 12, 29)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chronofield._internal.calendar import is_leap_year
from chronofield._internal.constants import MAX_RESOLVE_PASSES
from chronofield._internal.mathutils import subtract_exact
from chronofield.chrono.chronology import Chronology, IsoChronology
from chronofield.core.date import Date
from chronofield.errors import ResolutionError, UnsupportedFieldError
from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.field import TemporalAccessor
from chronofield.temporal.resolver_style import ResolverStyle
from chronofield.units.month import Month

if TYPE_CHECKING:
    from chronofield.temporal.field import TemporalField

logger = logging.getLogger(__name__)


class _PartialTemporal(TemporalAccessor):
    """The field values seen as a temporal, handed to each resolve() call."""

    __slots__ = ("_field_values", "_chronology")

    def __init__(
        self, field_values: dict[TemporalField, int], chronology: Chronology
    ) -> None:
        self._field_values = field_values
        self._chronology = chronology

    @property
    def chronology(self) -> Chronology:
        return self._chronology

    def is_supported(self, field: TemporalField) -> bool:
        return field in self._field_values

    def get_long(self, field: TemporalField) -> int:
        try:
            return self._field_values[field]
        except KeyError:
            raise UnsupportedFieldError(f"Unsupported field: {field}") from None


def resolve_fields(
    field_values: dict[TemporalField, int],
    resolver_style: ResolverStyle = ResolverStyle.SMART,
    chronology: Chronology | None = None,
) -> Date | None:
    """Resolve a map of field values into a date.

    The map is modified in place: consumed fields are removed, and
    fields that agree with the resolved date are removed by the final
    cross-check. Fields the date cannot be checked against stay in the
    map.

    Args:
        field_values: The field values, modified in place.
        resolver_style: How strictly values are validated.
        chronology: The calendar system, ISO by default.

    Returns:
        The resolved date, or None if the map holds too little to
        identify a date.

    Raises:
        ResolutionError: If fields resolve to different dates, a field
            disagrees with the resolved date, or a resolve() method never
            settles.
        ValidationError: If a value is invalid under the resolver style.
    """
    if chronology is None:
        chronology = IsoChronology.INSTANCE
    partial = _PartialTemporal(field_values, chronology)
    date = _resolve_derived_fields(field_values, partial, resolver_style)
    builtin = _resolve_builtin_fields(field_values, resolver_style, chronology)
    date = _merge(date, builtin)
    if date is not None:
        _cross_check(field_values, date)
    return date


def _resolve_derived_fields(
    field_values: dict[TemporalField, int],
    partial: TemporalAccessor,
    resolver_style: ResolverStyle,
) -> Date | None:
    date: Date | None = None
    changed = 0
    while changed < MAX_RESOLVE_PASSES:
        progressed = False
        for field in list(field_values):
            if isinstance(field, ChronoField) or field not in field_values:
                continue
            resolved = field.resolve(field_values, partial, resolver_style)
            if resolved is not None:
                if not isinstance(resolved, Date):
                    raise ResolutionError(
                        f"Method resolve() of {field} must return a date, got "
                        f"{type(resolved).__name__}"
                    )
                logger.debug("Pass %d: %s resolved to %s", changed + 1, field, resolved)
                field_values.pop(field, None)
                date = _merge(date, resolved)
                progressed = True
                break
            if field not in field_values:
                logger.debug("Pass %d: %s rewrote the field values", changed + 1, field)
                progressed = True
                break
        if not progressed:
            return date
        changed += 1
    raise ResolutionError(
        "One of the fields has an incorrectly implemented resolve method"
    )


def _merge(current: Date | None, resolved: Date | None) -> Date | None:
    if current is None:
        return resolved
    if resolved is not None and resolved != current:
        raise ResolutionError(
            f"Conflict found: Fields resolved to two different dates: {current} {resolved}"
        )
    return current


def _resolve_builtin_fields(
    field_values: dict[TemporalField, int],
    resolver_style: ResolverStyle,
    chronology: Chronology,
) -> Date | None:
    if ChronoField.EPOCH_DAY in field_values:
        return chronology.date_epoch_day(field_values.pop(ChronoField.EPOCH_DAY))
    if ChronoField.YEAR not in field_values:
        return None
    if ChronoField.MONTH_OF_YEAR in field_values and ChronoField.DAY_OF_MONTH in field_values:
        return _resolve_year_month_day(field_values, resolver_style)
    if ChronoField.DAY_OF_YEAR in field_values:
        return _resolve_year_day(field_values, resolver_style)
    return None


def _resolve_year_month_day(
    field_values: dict[TemporalField, int], resolver_style: ResolverStyle
) -> Date:
    year = ChronoField.YEAR.check_valid_int_value(field_values.pop(ChronoField.YEAR))
    month_value = field_values.pop(ChronoField.MONTH_OF_YEAR)
    day_value = field_values.pop(ChronoField.DAY_OF_MONTH)
    if resolver_style is ResolverStyle.LENIENT:
        months = subtract_exact(month_value, 1)
        days = subtract_exact(day_value, 1)
        return Date(year, 1, 1).plus_months(months).plus_days(days)
    month = ChronoField.MONTH_OF_YEAR.check_valid_int_value(month_value)
    day = ChronoField.DAY_OF_MONTH.check_valid_int_value(day_value)
    if resolver_style is ResolverStyle.SMART:
        # clamp to the end of the month, so June 31 becomes June 30
        day = min(day, Month(month).length(is_leap_year(year)))
    return Date(year, month, day)


def _resolve_year_day(
    field_values: dict[TemporalField, int], resolver_style: ResolverStyle
) -> Date:
    year = ChronoField.YEAR.check_valid_int_value(field_values.pop(ChronoField.YEAR))
    day_value = field_values.pop(ChronoField.DAY_OF_YEAR)
    if resolver_style is ResolverStyle.LENIENT:
        return Date.of_year_day(year, 1).plus_days(subtract_exact(day_value, 1))
    day_of_year = ChronoField.DAY_OF_YEAR.check_valid_int_value(day_value)
    return Date.of_year_day(year, day_of_year)


def _cross_check(field_values: dict[TemporalField, int], date: Date) -> None:
    for field, value in list(field_values.items()):
        if not date.is_supported(field):
            continue
        actual = date.get_long(field)
        if actual != value:
            raise ResolutionError(
                f"Conflict found: Field {field} {actual} differs from {field} {value} "
                f"derived from {date}"
            )
        del field_values[field]


__all__ = ["resolve_fields"]

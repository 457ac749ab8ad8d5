"""Fields, units and the field-access protocol.

This package exposes the contracts and the built-in fields directly:
    - TemporalField, TemporalUnit: Capability contracts
    - TemporalAccessor, Temporal: Field-access protocol
    - ChronoField: Built-in fields (YEAR, DAY_OF_WEEK, ...)
    - ValueRange: Valid range of a field
    - ResolverStyle: STRICT, SMART or LENIENT

The derived fields live in their own modules, which depend on the core
types and so are not imported here:
    - chronofield.temporal.iso_fields: IsoFields, IsoField, IsoUnit
    - chronofield.temporal.week_fields: WeekFields
    - chronofield.temporal.resolver: resolve_fields
    - chronofield.temporal.adjusters: next_or_same, previous_or_same, ...
"""

from __future__ import annotations

from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.field import (
    Temporal,
    TemporalAccessor,
    TemporalAdjuster,
    TemporalField,
    TemporalUnit,
)
from chronofield.temporal.resolver_style import ResolverStyle
from chronofield.temporal.value_range import ValueRange

__all__: list[str] = [
    "ChronoField",
    "ResolverStyle",
    "Temporal",
    "TemporalAccessor",
    "TemporalAdjuster",
    "TemporalField",
    "TemporalUnit",
    "ValueRange",
]

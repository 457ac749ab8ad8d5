"""Chronofield: pluggable date-time fields with cooperative resolution.

Chronofield models date-time fields and units as capabilities. Built-in
fields such as YEAR and DAY_OF_WEEK are handled by the temporal types
themselves; derived fields such as ISO quarters, ISO week-based years and
locale-style week numbering compute their values, ranges and adjustments
on top of them, and cooperate to rebuild a date from a map of field
values.

Core Types:
    Date: Calendar date in the proleptic ISO calendar
    Time: Time of day with nanosecond precision
    DateTime: Date and time without an offset
    Duration: Time span with nanosecond precision

Fields and Units:
    ChronoField, ChronoUnit: Built-in fields and units
    IsoFields: Quarter and week-based-year fields and units
    WeekFields: Week numbering for a first day-of-week and minimal days
    ValueRange: Valid range of a field
    resolve_fields: Resolve a map of field values into a date

Zone Rules:
    ZoneOffset: Fixed offset from UTC
    ZoneOffsetTransition: A gap or overlap between two offsets
    ZoneOffsetTransitionRule: A yearly rule producing transitions

Exceptions:
    DateTimeError: Base exception
    ValidationError: Invalid input values
    FieldRangeError: Field value outside its range
    ResolutionError: Field values that cannot be resolved
    UnsupportedFieldError: Field or unit not supported
    OverflowError: Arithmetic overflow
    TimezoneError: Invalid offset

Example:
    >>> from chronofield import Date, IsoFields
    >>> Date(2008, 12, 29).get(IsoFields.WEEK_BASED_YEAR)
    2009
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from chronofield.core.date import Date
from chronofield.core.datetime import DateTime
from chronofield.core.duration import Duration
from chronofield.core.time import Time

# Calendar systems
from chronofield.chrono.chronology import Chronology, IsoChronology

# Units
from chronofield.units.dayofweek import DayOfWeek
from chronofield.units.month import Month
from chronofield.units.offset import ZoneOffset
from chronofield.units.timeunit import ChronoUnit

# Fields
from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.field import (
    Temporal,
    TemporalAccessor,
    TemporalAdjuster,
    TemporalField,
    TemporalUnit,
)
from chronofield.temporal.iso_fields import IsoFields
from chronofield.temporal.resolver import resolve_fields
from chronofield.temporal.resolver_style import ResolverStyle
from chronofield.temporal.value_range import ValueRange
from chronofield.temporal.week_fields import WeekFields

# Zone rules
from chronofield.zone.transition import ZoneOffsetTransition
from chronofield.zone.transition_rule import TimeDefinition, ZoneOffsetTransitionRule

# Exceptions
from chronofield.errors import (
    DateTimeError,
    FieldRangeError,
    OverflowError,
    ResolutionError,
    TimezoneError,
    UnsupportedFieldError,
    ValidationError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Duration",
    "Time",
    # Calendar systems
    "Chronology",
    "IsoChronology",
    # Units
    "ChronoUnit",
    "DayOfWeek",
    "Month",
    "ZoneOffset",
    # Fields
    "ChronoField",
    "IsoFields",
    "ResolverStyle",
    "Temporal",
    "TemporalAccessor",
    "TemporalAdjuster",
    "TemporalField",
    "TemporalUnit",
    "ValueRange",
    "WeekFields",
    "resolve_fields",
    # Zone rules
    "TimeDefinition",
    "ZoneOffsetTransition",
    "ZoneOffsetTransitionRule",
    # Exceptions
    "DateTimeError",
    "ValidationError",
    "FieldRangeError",
    "ResolutionError",
    "UnsupportedFieldError",
    "OverflowError",
    "TimezoneError",
]

"""Common temporal adjusters.

An adjuster is any callable taking a temporal and returning an adjusted
copy. Apply one with ``temporal.adjust(adjuster)``:

    >>> from chronofield.core.date import Date
    >>> from chronofield.units.dayofweek import DayOfWeek
    >>> Date(2023, 10, 31).adjust(previous_or_same(DayOfWeek.SUNDAY))
    Date(2023, 10, 29)

The adjusters only use the generic field protocol, so they work on any
temporal that supports DAY_OF_WEEK or DAY_OF_MONTH.
"""

from __future__ import annotations

from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.field import Temporal, TemporalAdjuster
from chronofield.units.dayofweek import DayOfWeek
from chronofield.units.timeunit import ChronoUnit


def next_or_same(day_of_week: DayOfWeek) -> TemporalAdjuster:
    """Return an adjuster to the first occurrence of a day-of-week on or after the date."""
    target = day_of_week.value

    def adjust(temporal: Temporal) -> Temporal:
        current = temporal.get(ChronoField.DAY_OF_WEEK)
        if current == target:
            return temporal
        diff = current - target
        return temporal.plus(7 - diff if diff >= 0 else -diff, ChronoUnit.DAYS)

    return adjust


def previous_or_same(day_of_week: DayOfWeek) -> TemporalAdjuster:
    """Return an adjuster to the last occurrence of a day-of-week on or before the date."""
    target = day_of_week.value

    def adjust(temporal: Temporal) -> Temporal:
        current = temporal.get(ChronoField.DAY_OF_WEEK)
        if current == target:
            return temporal
        diff = target - current
        return temporal.minus(7 - diff if diff >= 0 else -diff, ChronoUnit.DAYS)

    return adjust


def last_day_of_month() -> TemporalAdjuster:
    """Return an adjuster to the last day of the month."""

    def adjust(temporal: Temporal) -> Temporal:
        return temporal.with_field(
            ChronoField.DAY_OF_MONTH,
            temporal.range(ChronoField.DAY_OF_MONTH).maximum,
        )

    return adjust


__all__ = ["next_or_same", "previous_or_same", "last_day_of_month"]

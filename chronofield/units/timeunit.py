"""ChronoUnit enumeration for the standard units of time.

This module provides the ChronoUnit enum, the built-in set of units
from nanoseconds up to millennia, plus FOREVER as an artificial unit
that bounds fields with no upper limit such as the year.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from chronofield._internal.constants import (
    LONG_MAX,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH_ESTIMATED,
    SECONDS_PER_YEAR_ESTIMATED,
)
from chronofield.core.duration import Duration
from chronofield.temporal.field import TemporalUnit

if TYPE_CHECKING:
    from chronofield.temporal.field import Temporal


class ChronoUnit(TemporalUnit, Enum):
    """Standard units of time.

    Units from NANOS to HALF_DAYS are time-based and have exact
    durations. DAYS and above are date-based; their durations are
    estimates, since a day may be 23 or 25 hours across a transition and
    months and years vary in length.

    Examples:
        >>> ChronoUnit.HOURS.duration.total_seconds
        3600
        >>> ChronoUnit.MONTHS.is_duration_estimated
        True
        >>> ChronoUnit.WEEKS.is_date_based
        True
    """

    NANOS = ("Nanos", 0, 1)
    MICROS = ("Micros", 0, 1_000)
    MILLIS = ("Millis", 0, 1_000_000)
    SECONDS = ("Seconds", 1, 0)
    MINUTES = ("Minutes", SECONDS_PER_MINUTE, 0)
    HOURS = ("Hours", SECONDS_PER_HOUR, 0)
    HALF_DAYS = ("HalfDays", SECONDS_PER_DAY // 2, 0)
    DAYS = ("Days", SECONDS_PER_DAY, 0)
    WEEKS = ("Weeks", 7 * SECONDS_PER_DAY, 0)
    MONTHS = ("Months", SECONDS_PER_MONTH_ESTIMATED, 0)
    YEARS = ("Years", SECONDS_PER_YEAR_ESTIMATED, 0)
    DECADES = ("Decades", SECONDS_PER_YEAR_ESTIMATED * 10, 0)
    CENTURIES = ("Centuries", SECONDS_PER_YEAR_ESTIMATED * 100, 0)
    MILLENNIA = ("Millennia", SECONDS_PER_YEAR_ESTIMATED * 1000, 0)
    ERAS = ("Eras", SECONDS_PER_YEAR_ESTIMATED * 1_000_000_000, 0)
    FOREVER = ("Forever", LONG_MAX, 999_999_999)

    def __init__(self, display_name: str, seconds: int, nanos: int) -> None:
        self._display_name = display_name
        self._duration = Duration.of_seconds(seconds, nanos)

    @property
    def duration(self) -> Duration:
        return self._duration

    @property
    def is_duration_estimated(self) -> bool:
        return self._duration >= ChronoUnit.DAYS._duration

    @property
    def is_date_based(self) -> bool:
        return self._duration >= ChronoUnit.DAYS._duration and self is not ChronoUnit.FOREVER

    @property
    def is_time_based(self) -> bool:
        return self._duration < ChronoUnit.DAYS._duration

    def is_supported_by(self, temporal: Temporal) -> bool:
        return temporal.is_supported_unit(self)

    def add_to(self, temporal: Temporal, amount: int) -> Temporal:
        return temporal.plus(amount, self)

    def between(self, start: Temporal, end: Temporal) -> int:
        return start.until(end, self)

    def __str__(self) -> str:
        return self._display_name


__all__ = ["ChronoUnit"]

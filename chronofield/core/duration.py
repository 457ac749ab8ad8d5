"""Duration class representing an exact span of time.

Units use a Duration for their (possibly estimated) length, and offset
transitions use one for the size of the gap or overlap.
"""

from __future__ import annotations

from chronofield._internal.constants import (
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


class Duration:
    """A span of time with nanosecond precision.

    The internal representation is normalized such that:
    - `_seconds` is always in the range [0, 86400)
    - `_nanos` is always in the range [0, 1_000_000_000)
    - `_days` holds the sign for negative durations

    Examples:
        >>> Duration.of_seconds(3600)
        Duration(days=0, seconds=3600, nanoseconds=0)
        >>> Duration.of_seconds(-3600).total_seconds
        -3600
        >>> str(Duration(days=1, seconds=90))
        '1 day, 0:01:30'
    """

    __slots__ = ("_days", "_seconds", "_nanos")

    def __init__(self, days: int = 0, seconds: int = 0, nanoseconds: int = 0) -> None:
        """Create a Duration; every component may be negative."""
        total_nanos = (days * SECONDS_PER_DAY + seconds) * NANOS_PER_SECOND + nanoseconds
        total_seconds, self._nanos = divmod(total_nanos, NANOS_PER_SECOND)
        self._days, self._seconds = divmod(total_seconds, SECONDS_PER_DAY)

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration."""
        return cls()

    @classmethod
    def of_days(cls, days: int) -> Duration:
        """Create a Duration of whole standard 24 hour days."""
        return cls(days=days)

    @classmethod
    def of_hours(cls, hours: int) -> Duration:
        """Create a Duration of whole hours."""
        return cls(seconds=hours * SECONDS_PER_HOUR)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a Duration of seconds plus a nanosecond adjustment."""
        return cls(seconds=seconds, nanoseconds=nano_adjustment)

    @property
    def days(self) -> int:
        """Return the days component (can be negative)."""
        return self._days

    @property
    def seconds(self) -> int:
        """Return the seconds within the day, in [0, 86400)."""
        return self._seconds

    @property
    def nanoseconds(self) -> int:
        """Return the nanoseconds within the second, in [0, 1e9)."""
        return self._nanos

    @property
    def total_seconds(self) -> int:
        """Return the whole seconds of this duration, rounded down."""
        return self._days * SECONDS_PER_DAY + self._seconds

    @property
    def total_nanoseconds(self) -> int:
        """Return the full length in nanoseconds."""
        return self.total_seconds * NANOS_PER_SECOND + self._nanos

    @property
    def is_negative(self) -> bool:
        """Return True if this duration is shorter than zero."""
        return self._days < 0

    @property
    def is_zero(self) -> bool:
        """Return True if this duration has zero length."""
        return self._days == 0 and self._seconds == 0 and self._nanos == 0

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self.total_nanoseconds + other.total_nanoseconds)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self.total_nanoseconds - other.total_nanoseconds)

    def __mul__(self, other: object) -> Duration:
        if not isinstance(other, int):
            return NotImplemented
        return Duration(nanoseconds=self.total_nanoseconds * other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __neg__(self) -> Duration:
        return Duration(nanoseconds=-self.total_nanoseconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds == other.total_nanoseconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds < other.total_nanoseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds <= other.total_nanoseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds > other.total_nanoseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds >= other.total_nanoseconds

    def __hash__(self) -> int:
        return hash(self.total_nanoseconds)

    def __repr__(self) -> str:
        return f"Duration(days={self._days}, seconds={self._seconds}, nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return a string like "1 day, 2:30:45" or "-1 day, 23:00:00"."""
        hours = self._seconds // SECONDS_PER_HOUR
        minutes = (self._seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
        secs = self._seconds % SECONDS_PER_MINUTE

        time_str = f"{hours}:{minutes:02d}:{secs:02d}"
        if self._nanos > 0:
            time_str += f".{self._nanos:09d}".rstrip("0")

        if self._days == 0:
            return time_str
        if abs(self._days) == 1:
            return f"{self._days} day, {time_str}"
        return f"{self._days} days, {time_str}"

    def __bool__(self) -> bool:
        return not self.is_zero


__all__ = ["Duration"]

"""Zone offset representation.

This module provides the ZoneOffset class for fixed offsets from UTC,
such as +01:00. Offsets on a 15 minute boundary are interned, so
ZoneOffset.of_hours(1) always returns the same instance.
"""

from __future__ import annotations

import logging
import threading
from typing import ClassVar

from chronofield._internal.constants import (
    MAX_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from chronofield._internal.validation import validate_range
from chronofield.errors import TimezoneError

logger = logging.getLogger(__name__)

_CACHE: dict[int, ZoneOffset] = {}
_CACHE_LOCK = threading.Lock()


class ZoneOffset:
    """A fixed offset from UTC, from -18:00 to +18:00.

    The offset is stored in seconds from UTC, with positive values being
    east of UTC (ahead in time) and negative values being west of UTC
    (behind in time). Offsets are ordered by their total seconds.

    Attributes:
        total_seconds: The offset in seconds.

    Examples:
        >>> ZoneOffset.of_hours(1).total_seconds
        3600
        >>> str(ZoneOffset.of_hours_minutes(-3, -30))
        '-03:30'
        >>> ZoneOffset.of_hours(0) is ZoneOffset.UTC
        True
    """

    __slots__ = ("_total_seconds", "_id")

    UTC: ClassVar[ZoneOffset]
    MIN: ClassVar[ZoneOffset]
    MAX: ClassVar[ZoneOffset]

    def __init__(self, total_seconds: int) -> None:
        """Create a ZoneOffset; prefer the of_* factories, which intern.

        Raises:
            TimezoneError: If total_seconds is outside +/-18 hours.
        """
        if not isinstance(total_seconds, int):
            raise TimezoneError(
                f"total_seconds must be an integer, got {type(total_seconds).__name__}"
            )
        if abs(total_seconds) > MAX_OFFSET_SECONDS:
            raise TimezoneError(
                f"Zone offset not in valid range: -18:00 to +18:00, got {total_seconds}s"
            )
        self._total_seconds: int = total_seconds
        self._id: str = _build_id(total_seconds)

    @classmethod
    def of_total_seconds(cls, total_seconds: int) -> ZoneOffset:
        """Return the offset for a total amount of seconds.

        Offsets that are a multiple of 15 minutes come from a shared
        cache: a candidate is built outside the lock, published with
        setdefault under it, and the published instance is returned.

        Raises:
            TimezoneError: If total_seconds is outside +/-18 hours.
        """
        if total_seconds % (15 * SECONDS_PER_MINUTE) != 0:
            return cls(total_seconds)

        cached = _CACHE.get(total_seconds)
        if cached is not None:
            return cached

        candidate = cls(total_seconds)
        with _CACHE_LOCK:
            published = _CACHE.setdefault(total_seconds, candidate)
        if published is not candidate:
            logger.debug("Lost publish race for offset %s", published)
        return published

    @classmethod
    def of_hours(cls, hours: int) -> ZoneOffset:
        """Return the offset for a whole number of hours.

        Examples:
            >>> ZoneOffset.of_hours(-5).total_seconds
            -18000
        """
        return cls.of_hours_minutes_seconds(hours, 0, 0)

    @classmethod
    def of_hours_minutes(cls, hours: int, minutes: int) -> ZoneOffset:
        """Return the offset for hours and minutes, which must share a sign."""
        return cls.of_hours_minutes_seconds(hours, minutes, 0)

    @classmethod
    @validate_range(hours=(-18, 18), minutes=(-59, 59), seconds=(-59, 59))
    def of_hours_minutes_seconds(
        cls, hours: int, minutes: int, seconds: int
    ) -> ZoneOffset:
        """Return the offset for hours, minutes and seconds.

        All non-zero components must share the same sign.

        Raises:
            TimezoneError: If the signs differ or the total is out of range.
            ValidationError: If a component is out of its own range.
        """
        if hours > 0 and (minutes < 0 or seconds < 0):
            raise TimezoneError(
                "Zone offset minutes and seconds must be positive because hours is positive"
            )
        if hours < 0 and (minutes > 0 or seconds > 0):
            raise TimezoneError(
                "Zone offset minutes and seconds must be negative because hours is negative"
            )
        if (minutes > 0 and seconds < 0) or (minutes < 0 and seconds > 0):
            raise TimezoneError(
                "Zone offset minutes and seconds must have the same sign"
            )
        total = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        return cls.of_total_seconds(total)

    @property
    def total_seconds(self) -> int:
        """Return the offset in seconds; positive values are east of UTC."""
        return self._total_seconds

    @property
    def id(self) -> str:
        """Return the normalized offset id, such as '+01:00' or 'Z'."""
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds == other._total_seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds < other._total_seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds <= other._total_seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds > other._total_seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds >= other._total_seconds

    def __hash__(self) -> int:
        return hash(self._total_seconds)

    def __repr__(self) -> str:
        return f"ZoneOffset({self._id!r})"

    def __str__(self) -> str:
        return self._id


def _build_id(total_seconds: int) -> str:
    if total_seconds == 0:
        return "Z"
    abs_seconds = abs(total_seconds)
    hours = abs_seconds // SECONDS_PER_HOUR
    minutes = (abs_seconds // SECONDS_PER_MINUTE) % 60
    sign = "-" if total_seconds < 0 else "+"
    result = f"{sign}{hours:02d}:{minutes:02d}"
    seconds = abs_seconds % 60
    if seconds != 0:
        result += f":{seconds:02d}"
    return result


ZoneOffset.UTC = ZoneOffset.of_total_seconds(0)
ZoneOffset.MIN = ZoneOffset.of_total_seconds(-MAX_OFFSET_SECONDS)
ZoneOffset.MAX = ZoneOffset.of_total_seconds(MAX_OFFSET_SECONDS)


__all__ = ["ZoneOffset"]

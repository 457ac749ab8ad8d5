"""A transition between two offsets caused by a discontinuity in the local time-line."""

from __future__ import annotations

from chronofield.core.datetime import DateTime
from chronofield.core.duration import Duration
from chronofield.errors import ValidationError
from chronofield.units.offset import ZoneOffset


class ZoneOffsetTransition:
    """A change from one offset to another at a specific instant.

    A gap happens when the offset increases, as when clocks go forward
    in spring: some local date-times never occur. An overlap happens when
    the offset decreases, as when clocks go back in autumn: some local
    date-times occur twice.

    The transition is kept as the local date-time just before it, seen
    with the offset before, plus the two offsets.

    Examples:
        >>> t = ZoneOffsetTransition(
        ...     DateTime.of(2023, 10, 29, 2, 0),
        ...     ZoneOffset.of_hours(1),
        ...     ZoneOffset.UTC,
        ... )
        >>> t.is_overlap
        True
        >>> str(t.date_time_after)
        '2023-10-29T01:00'
        >>> str(t)
        'Transition[Overlap at 2023-10-29T02:00+01:00 to Z]'
    """

    __slots__ = ("_epoch_second", "_date_time_before", "_offset_before", "_offset_after")

    def __init__(
        self,
        date_time_before: DateTime,
        offset_before: ZoneOffset,
        offset_after: ZoneOffset,
    ) -> None:
        """Create a transition from the local date-time before it.

        Raises:
            ValidationError: If the date-time has non-zero nanoseconds.
        """
        if date_time_before.time.nanosecond != 0:
            raise ValidationError("Nano-of-second must be zero")
        self._epoch_second = date_time_before.to_epoch_second(offset_before)
        self._date_time_before = date_time_before
        self._offset_before = offset_before
        self._offset_after = offset_after

    @classmethod
    def of(
        cls,
        date_time_before: DateTime,
        offset_before: ZoneOffset,
        offset_after: ZoneOffset,
    ) -> ZoneOffsetTransition:
        """Create a transition, checking the offsets differ.

        Raises:
            ValidationError: If the offsets are equal or the date-time
                has non-zero nanoseconds.
        """
        if offset_before == offset_after:
            raise ValidationError("Offsets must not be equal")
        return cls(date_time_before, offset_before, offset_after)

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, offset_before: ZoneOffset, offset_after: ZoneOffset
    ) -> ZoneOffsetTransition:
        """Create a transition from the instant it happens at."""
        return cls(
            DateTime.of_epoch_second(epoch_second, 0, offset_before),
            offset_before,
            offset_after,
        )

    @property
    def instant(self) -> int:
        """Return the instant of the transition, in seconds from the epoch."""
        return self._epoch_second

    @property
    def date_time_before(self) -> DateTime:
        return self._date_time_before

    @property
    def date_time_after(self) -> DateTime:
        """Return the local date-time of the transition, seen with the offset after."""
        return self._date_time_before.plus_seconds(self._duration_seconds())

    @property
    def offset_before(self) -> ZoneOffset:
        return self._offset_before

    @property
    def offset_after(self) -> ZoneOffset:
        return self._offset_after

    @property
    def duration(self) -> Duration:
        """Return the size of the gap (positive) or overlap (negative)."""
        return Duration.of_seconds(self._duration_seconds())

    @property
    def is_gap(self) -> bool:
        return self._offset_after.total_seconds > self._offset_before.total_seconds

    @property
    def is_overlap(self) -> bool:
        return self._offset_after.total_seconds < self._offset_before.total_seconds

    def is_valid_offset(self, offset: ZoneOffset) -> bool:
        """Return True if the offset is valid for a local date-time in the transition.

        No offset is valid during a gap; both are valid during an overlap.
        """
        if self.is_gap:
            return False
        return offset == self._offset_before or offset == self._offset_after

    def valid_offsets(self) -> list[ZoneOffset]:
        if self.is_gap:
            return []
        return [self._offset_before, self._offset_after]

    def _duration_seconds(self) -> int:
        return self._offset_after.total_seconds - self._offset_before.total_seconds

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffsetTransition):
            return NotImplemented
        return (
            self._epoch_second == other._epoch_second
            and self._offset_before == other._offset_before
            and self._offset_after == other._offset_after
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffsetTransition):
            return NotImplemented
        return self._epoch_second < other._epoch_second

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffsetTransition):
            return NotImplemented
        return self._epoch_second <= other._epoch_second

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffsetTransition):
            return NotImplemented
        return self._epoch_second > other._epoch_second

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffsetTransition):
            return NotImplemented
        return self._epoch_second >= other._epoch_second

    def __hash__(self) -> int:
        return hash((self._epoch_second, self._offset_before, self._offset_after))

    def __repr__(self) -> str:
        return (
            f"ZoneOffsetTransition({self._date_time_before!r}, "
            f"{self._offset_before!r}, {self._offset_after!r})"
        )

    def __str__(self) -> str:
        kind = "Gap" if self.is_gap else "Overlap"
        return (
            f"Transition[{kind} at {self._date_time_before}{self._offset_before} "
            f"to {self._offset_after}]"
        )


__all__ = ["ZoneOffsetTransition"]

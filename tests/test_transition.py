"""Tests for ZoneOffsetTransition."""

from __future__ import annotations

import pytest

from chronofield.core.datetime import DateTime
from chronofield.core.duration import Duration
from chronofield.errors import ValidationError
from chronofield.units.offset import ZoneOffset
from chronofield.zone.transition import ZoneOffsetTransition

PLUS_ONE = ZoneOffset.of_hours(1)
PLUS_TWO = ZoneOffset.of_hours(2)
UTC = ZoneOffset.UTC


@pytest.fixture
def overlap() -> ZoneOffsetTransition:
    """Clocks going back from +01:00 to Z at 02:00 on 2023-10-29."""
    return ZoneOffsetTransition(DateTime.of(2023, 10, 29, 2, 0), PLUS_ONE, UTC)


@pytest.fixture
def gap() -> ZoneOffsetTransition:
    """Clocks going forward from Z to +01:00 at 01:00 on 2023-03-26."""
    return ZoneOffsetTransition(DateTime.of(2023, 3, 26, 1, 0), UTC, PLUS_ONE)


class TestOverlap:
    """Tests for a transition where the offset decreases."""

    def test_kind(self, overlap: ZoneOffsetTransition) -> None:
        """Test gap and overlap flags."""
        assert overlap.is_overlap
        assert not overlap.is_gap

    def test_date_times(self, overlap: ZoneOffsetTransition) -> None:
        """The local time after is an hour earlier."""
        assert overlap.date_time_before == DateTime.of(2023, 10, 29, 2, 0)
        assert overlap.date_time_after == DateTime.of(2023, 10, 29, 1, 0)

    def test_instant(self, overlap: ZoneOffsetTransition) -> None:
        """The instant is the date-time before, seen at the offset before."""
        assert overlap.instant == 1698541200

    def test_duration(self, overlap: ZoneOffsetTransition) -> None:
        """An overlap has a negative duration."""
        assert overlap.duration == Duration.of_seconds(-3600)

    def test_valid_offsets(self, overlap: ZoneOffsetTransition) -> None:
        """Both offsets are valid during an overlap."""
        assert overlap.valid_offsets() == [PLUS_ONE, UTC]
        assert overlap.is_valid_offset(PLUS_ONE)
        assert overlap.is_valid_offset(UTC)
        assert not overlap.is_valid_offset(PLUS_TWO)

    def test_str(self, overlap: ZoneOffsetTransition) -> None:
        """str shows the kind, the local time and both offsets."""
        assert str(overlap) == "Transition[Overlap at 2023-10-29T02:00+01:00 to Z]"


class TestGap:
    """Tests for a transition where the offset increases."""

    def test_kind(self, gap: ZoneOffsetTransition) -> None:
        """Test gap and overlap flags."""
        assert gap.is_gap
        assert not gap.is_overlap

    def test_date_times(self, gap: ZoneOffsetTransition) -> None:
        """The local time after is an hour later."""
        assert gap.date_time_after == DateTime.of(2023, 3, 26, 2, 0)
        assert gap.duration == Duration.of_seconds(3600)
        assert gap.instant == 1679792400

    def test_no_valid_offsets(self, gap: ZoneOffsetTransition) -> None:
        """No offset is valid during a gap."""
        assert gap.valid_offsets() == []
        assert not gap.is_valid_offset(UTC)
        assert not gap.is_valid_offset(PLUS_ONE)

    def test_str(self, gap: ZoneOffsetTransition) -> None:
        """Test the gap description."""
        assert str(gap) == "Transition[Gap at 2023-03-26T01:00Z to +01:00]"


class TestConstruction:
    """Tests for the factories and validation."""

    def test_of(self, overlap: ZoneOffsetTransition) -> None:
        """of() builds an equal transition."""
        assert ZoneOffsetTransition.of(DateTime.of(2023, 10, 29, 2, 0), PLUS_ONE, UTC) == overlap

    def test_of_rejects_equal_offsets(self) -> None:
        """A transition must change the offset."""
        with pytest.raises(ValidationError, match="Offsets must not be equal"):
            ZoneOffsetTransition.of(DateTime.of(2023, 10, 29, 2, 0), UTC, UTC)

    def test_rejects_nanoseconds(self) -> None:
        """Transitions happen on whole seconds."""
        with pytest.raises(ValidationError, match="Nano-of-second must be zero"):
            ZoneOffsetTransition(DateTime.of(2023, 10, 29, 2, 0, 0, 1), PLUS_ONE, UTC)

    def test_of_epoch_second(self, overlap: ZoneOffsetTransition) -> None:
        """A transition can be built from its instant."""
        t = ZoneOffsetTransition.of_epoch_second(1698541200, PLUS_ONE, UTC)
        assert t == overlap
        assert t.date_time_before == DateTime.of(2023, 10, 29, 2, 0)

    def test_offset_properties(self, overlap: ZoneOffsetTransition) -> None:
        """Test the offset accessors."""
        assert overlap.offset_before == PLUS_ONE
        assert overlap.offset_after == UTC


class TestComparison:
    """Tests for equality, hashing and ordering."""

    def test_equality(self, overlap: ZoneOffsetTransition) -> None:
        """Transitions are equal by instant and offsets."""
        same = ZoneOffsetTransition(DateTime.of(2023, 10, 29, 2, 0), PLUS_ONE, UTC)
        assert same == overlap
        assert hash(same) == hash(overlap)
        # same instant, different offset after
        assert ZoneOffsetTransition(DateTime.of(2023, 10, 29, 2, 0), PLUS_ONE, PLUS_TWO) != overlap

    def test_equal_instants_from_different_local_times(self) -> None:
        """The same instant written at different offsets is equal."""
        a = ZoneOffsetTransition(DateTime.of(2023, 10, 29, 2, 0), PLUS_ONE, UTC)
        b = ZoneOffsetTransition.of_epoch_second(a.instant, PLUS_ONE, UTC)
        assert a == b

    def test_ordering(self, gap: ZoneOffsetTransition, overlap: ZoneOffsetTransition) -> None:
        """Transitions order by instant."""
        assert gap < overlap
        assert overlap > gap
        assert gap <= gap
        assert sorted([overlap, gap]) == [gap, overlap]

    def test_repr(self, overlap: ZoneOffsetTransition) -> None:
        """repr shows the constructor arguments."""
        assert repr(overlap) == (
            "ZoneOffsetTransition(DateTime(2023, 10, 29, 2, 0, 0, nanosecond=0), "
            "ZoneOffset('+01:00'), ZoneOffset('Z'))"
        )

"""Tests for ZoneOffsetTransitionRule and TimeDefinition."""

from __future__ import annotations

import logging

import pytest

from chronofield.core.date import Date
from chronofield.core.datetime import DateTime
from chronofield.core.time import Time
from chronofield.errors import ValidationError
from chronofield.units.dayofweek import DayOfWeek
from chronofield.units.month import Month
from chronofield.units.offset import ZoneOffset
from chronofield.zone.transition import ZoneOffsetTransition
from chronofield.zone.transition_rule import TimeDefinition, ZoneOffsetTransitionRule

UTC = ZoneOffset.UTC
PLUS_ONE = ZoneOffset.of_hours(1)
PLUS_TWO = ZoneOffset.of_hours(2)
MINUS_FIVE = ZoneOffset.of_hours(-5)
MINUS_FOUR = ZoneOffset.of_hours(-4)


def _rule(
    month: Month = Month.OCTOBER,
    dom: int = -1,
    dow: DayOfWeek | None = DayOfWeek.SUNDAY,
    time: Time = Time(2, 0),
    end_of_day: bool = False,
    definition: TimeDefinition = TimeDefinition.WALL,
    standard: ZoneOffset = UTC,
    before: ZoneOffset = PLUS_ONE,
    after: ZoneOffset = UTC,
) -> ZoneOffsetTransitionRule:
    return ZoneOffsetTransitionRule.of(
        month, dom, dow, time, end_of_day, definition, standard, before, after
    )


class TestTimeDefinition:
    """Tests for converting rule times to wall-clock times."""

    def test_utc(self) -> None:
        """UTC times are shifted by the wall offset."""
        dt = DateTime.of(2023, 10, 29, 1, 0)
        result = TimeDefinition.UTC.create_date_time(dt, PLUS_ONE, PLUS_TWO)
        assert result == DateTime.of(2023, 10, 29, 3, 0)

    def test_standard(self) -> None:
        """STANDARD times are shifted by the daylight saving amount."""
        dt = DateTime.of(2023, 10, 29, 2, 0)
        result = TimeDefinition.STANDARD.create_date_time(dt, PLUS_ONE, PLUS_TWO)
        assert result == DateTime.of(2023, 10, 29, 3, 0)

    def test_wall(self) -> None:
        """WALL times are already wall-clock times."""
        dt = DateTime.of(2023, 10, 29, 2, 0)
        assert TimeDefinition.WALL.create_date_time(dt, PLUS_ONE, PLUS_TWO) == dt

    def test_crosses_midnight(self) -> None:
        """A shift may move the date."""
        dt = DateTime.of(2023, 12, 31, 23, 30)
        result = TimeDefinition.UTC.create_date_time(dt, UTC, PLUS_ONE)
        assert result == DateTime.of(2024, 1, 1, 0, 30)

    def test_str(self) -> None:
        """str is the member name."""
        assert str(TimeDefinition.WALL) == "WALL"
        assert str(TimeDefinition.STANDARD) == "STANDARD"


class TestValidation:
    """Tests for ZoneOffsetTransitionRule.of() checks."""

    @pytest.mark.parametrize("dom", [0, -29, 32])
    def test_day_of_month_indicator(self, dom: int) -> None:
        """The indicator is -28 to 31 excluding zero."""
        with pytest.raises(ValidationError, match="Day of month indicator must be between"):
            _rule(dom=dom)

    @pytest.mark.parametrize("dom", [-28, 31])
    def test_day_of_month_indicator_limits(self, dom: int) -> None:
        """The limits themselves are accepted."""
        assert _rule(dom=dom).day_of_month_indicator == dom

    def test_end_of_day_requires_midnight(self) -> None:
        """24:00 is written as midnight with the flag set."""
        with pytest.raises(ValidationError, match="Time must be midnight"):
            _rule(time=Time(10, 0), end_of_day=True)

    def test_rejects_nanoseconds(self) -> None:
        """Rule times are whole seconds."""
        with pytest.raises(ValidationError, match="nano-of-second must be zero"):
            _rule(time=Time(2, 0, 0, 1))


class TestCreateTransition:
    """Tests for building the transition of a given year."""

    def test_last_sunday_of_october(self) -> None:
        """-1 with SUNDAY is the last Sunday."""
        transition = _rule().create_transition(2023)
        assert transition == ZoneOffsetTransition(
            DateTime.of(2023, 10, 29, 2, 0), PLUS_ONE, UTC
        )
        assert transition.is_overlap
        assert str(transition) == "Transition[Overlap at 2023-10-29T02:00+01:00 to Z]"

    def test_different_years(self) -> None:
        """Each year gets its own date."""
        rule = _rule()
        assert rule.create_transition(2024).date_time_before == DateTime.of(2024, 10, 27, 2, 0)
        assert rule.create_transition(2025).date_time_before == DateTime.of(2025, 10, 26, 2, 0)

    def test_second_sunday_of_march(self) -> None:
        """8 with SUNDAY is the second Sunday, as in US daylight saving."""
        rule = _rule(
            month=Month.MARCH, dom=8, standard=MINUS_FIVE, before=MINUS_FIVE, after=MINUS_FOUR
        )
        transition = rule.create_transition(2024)
        assert transition.date_time_before == DateTime.of(2024, 3, 10, 2, 0)
        assert transition.date_time_after == DateTime.of(2024, 3, 10, 3, 0)
        assert transition.is_gap
        assert transition.instant == 1710054000
        assert rule.create_transition(2023).date_time_before == DateTime.of(2023, 3, 12, 2, 0)

    def test_utc_definition(self) -> None:
        """01:00 UTC is 03:00 wall time at +02:00."""
        rule = _rule(
            time=Time(1, 0),
            definition=TimeDefinition.UTC,
            standard=PLUS_ONE,
            before=PLUS_TWO,
            after=PLUS_ONE,
        )
        transition = rule.create_transition(2023)
        assert transition.date_time_before == DateTime.of(2023, 10, 29, 3, 0)
        assert transition.instant == 1698541200

    def test_standard_definition(self) -> None:
        """02:00 standard time is 03:00 wall time during daylight saving."""
        rule = _rule(
            definition=TimeDefinition.STANDARD,
            standard=PLUS_ONE,
            before=PLUS_TWO,
            after=PLUS_ONE,
        )
        assert rule.create_transition(2023).date_time_before == DateTime.of(2023, 10, 29, 3, 0)

    def test_end_of_day(self) -> None:
        """24:00 on the last Saturday is midnight starting the next day."""
        rule = _rule(
            month=Month.MARCH,
            dow=DayOfWeek.SATURDAY,
            time=Time.MIDNIGHT,
            end_of_day=True,
            standard=PLUS_ONE,
            before=PLUS_ONE,
            after=PLUS_TWO,
        )
        transition = rule.create_transition(2023)
        assert transition.date_time_before == DateTime.of(2023, 3, 26, 0, 0)
        assert transition.is_gap

    def test_counting_back_from_month_end(self) -> None:
        """-8 with SUNDAY is the Sunday on or before the 24th of October."""
        rule = _rule(dom=-8)
        assert rule.create_transition(2023).date_time_before == DateTime.of(2023, 10, 22, 2, 0)

    def test_last_day_without_day_of_week(self) -> None:
        """-1 without a day-of-week is the last day, leap years included."""
        rule = _rule(month=Month.FEBRUARY, dow=None, before=UTC, after=PLUS_ONE)
        assert rule.create_transition(2024).date_time_before.date == Date(2024, 2, 29)
        assert rule.create_transition(2023).date_time_before.date == Date(2023, 2, 28)

    def test_exact_day(self) -> None:
        """A positive indicator without a day-of-week is the exact day."""
        rule = _rule(month=Month.APRIL, dom=1, dow=None)
        assert rule.create_transition(2023).date_time_before == DateTime.of(2023, 4, 1, 2, 0)

    def test_equal_offsets_allowed(self) -> None:
        """A rule that changes nothing still produces a transition."""
        rule = _rule(before=UTC, after=UTC)
        transition = rule.create_transition(2023)
        assert not transition.is_gap
        assert not transition.is_overlap

    def test_year_out_of_range(self) -> None:
        """Years beyond the supported range are rejected."""
        with pytest.raises(ValidationError):
            _rule().create_transition(1_000_000_000)

    def test_creation_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each transition created leaves a debug record."""
        caplog.set_level(logging.DEBUG, logger="chronofield.zone.transition_rule")
        _rule().create_transition(2023)
        assert any("for 2023" in r.getMessage() for r in caplog.records)


class TestRuleProperties:
    """Tests for accessors, equality and string forms."""

    def test_accessors(self) -> None:
        """Test every accessor."""
        rule = _rule()
        assert rule.month is Month.OCTOBER
        assert rule.day_of_month_indicator == -1
        assert rule.day_of_week is DayOfWeek.SUNDAY
        assert rule.local_time == Time(2, 0)
        assert not rule.is_midnight_end_of_day
        assert rule.time_definition is TimeDefinition.WALL
        assert rule.standard_offset == UTC
        assert rule.offset_before == PLUS_ONE
        assert rule.offset_after == UTC

    def test_equality(self) -> None:
        """Rules are equal when every part is equal."""
        assert _rule() == _rule()
        assert hash(_rule()) == hash(_rule())
        assert _rule() != _rule(dom=-2)
        assert _rule() != _rule(definition=TimeDefinition.UTC)

    def test_str_last_day(self) -> None:
        """Test the description of a last-weekday rule."""
        assert str(_rule()) == (
            "TransitionRule[Overlap +01:00 to Z, SUNDAY on or before last day of OCTOBER "
            "at 02:00 WALL, standard offset Z]"
        )

    def test_str_on_or_after(self) -> None:
        """Test the description of an on-or-after rule."""
        rule = _rule(
            month=Month.MARCH, dom=8, standard=MINUS_FIVE, before=MINUS_FIVE, after=MINUS_FOUR
        )
        assert str(rule) == (
            "TransitionRule[Gap -05:00 to -04:00, SUNDAY on or after MARCH 8 "
            "at 02:00 WALL, standard offset -05:00]"
        )

    def test_str_minus_days(self) -> None:
        """Test the description of a rule counting back from the month end."""
        assert "SUNDAY on or before last day minus 7 of OCTOBER" in str(_rule(dom=-8))

    def test_str_exact_day_and_end_of_day(self) -> None:
        """Test the description of an exact-day rule at 24:00."""
        rule = _rule(month=Month.APRIL, dom=1, dow=None, time=Time.MIDNIGHT, end_of_day=True)
        assert str(rule) == (
            "TransitionRule[Overlap +01:00 to Z, APRIL 1 at 24:00 WALL, standard offset Z]"
        )

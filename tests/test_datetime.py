"""Tests for the DateTime class."""

from __future__ import annotations

import pytest

from chronofield.chrono.chronology import IsoChronology
from chronofield.core.date import Date
from chronofield.core.datetime import DateTime
from chronofield.core.time import Time
from chronofield.errors import UnsupportedFieldError, ValidationError
from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.value_range import ValueRange
from chronofield.units.offset import ZoneOffset
from chronofield.units.timeunit import ChronoUnit


class TestDateTimeConstruction:
    """Tests for DateTime construction."""

    def test_of(self) -> None:
        """Test construction from components."""
        dt = DateTime.of(2023, 10, 29, 2, 0)
        assert dt.date == Date(2023, 10, 29)
        assert dt.time == Time(2, 0)
        assert dt.chronology is IsoChronology.INSTANCE

    def test_of_invalid(self) -> None:
        """Invalid components raise."""
        with pytest.raises(ValidationError):
            DateTime.of(2023, 2, 29)
        with pytest.raises(ValidationError):
            DateTime.of(2023, 1, 1, 24)

    def test_of_epoch_second(self) -> None:
        """Test conversion from an instant seen at an offset."""
        assert DateTime.of_epoch_second(0, 0, ZoneOffset.UTC) == DateTime.of(1970, 1, 1)
        assert DateTime.of_epoch_second(0, 0, ZoneOffset.of_hours(2)) == DateTime.of(
            1970, 1, 1, 2
        )
        assert DateTime.of_epoch_second(-1, 0, ZoneOffset.UTC) == DateTime.of(
            1969, 12, 31, 23, 59, 59
        )
        assert DateTime.of_epoch_second(1698541200, 0, ZoneOffset.UTC) == DateTime.of(
            2023, 10, 29, 1
        )

    def test_to_epoch_second(self) -> None:
        """Test conversion to an instant."""
        dt = DateTime.of(2023, 10, 29, 2, 0)
        assert dt.to_epoch_second(ZoneOffset.of_hours(1)) == 1698541200
        assert dt.to_epoch_second(ZoneOffset.UTC) == 1698544800
        assert DateTime.of(1970, 1, 1).to_epoch_second(ZoneOffset.UTC) == 0


class TestDateTimeArithmetic:
    """Tests for arithmetic."""

    def test_plus_seconds_rolls_day(self) -> None:
        """Seconds roll into the next or previous day."""
        assert DateTime.of(2023, 10, 29, 23).plus_seconds(3600) == DateTime.of(2023, 10, 30)
        assert DateTime.of(2023, 1, 1).plus_seconds(-1) == DateTime.of(2022, 12, 31, 23, 59, 59)

    def test_plus_days(self) -> None:
        """Days keep the time."""
        assert DateTime.of(2024, 2, 28, 10).plus_days(1) == DateTime.of(2024, 2, 29, 10)

    def test_plus_units(self) -> None:
        """Time and date units are both supported."""
        dt = DateTime.of(2024, 1, 31, 23)
        assert dt.plus(25, ChronoUnit.HOURS) == DateTime.of(2024, 2, 2, 0)
        assert dt.plus(1, ChronoUnit.MONTHS) == DateTime.of(2024, 2, 29, 23)
        assert dt.minus(1, ChronoUnit.WEEKS) == DateTime.of(2024, 1, 24, 23)

    def test_until(self) -> None:
        """Date units count only complete days."""
        start = DateTime.of(2024, 1, 1, 12)
        end = DateTime.of(2024, 1, 3, 11)
        assert start.until(end, ChronoUnit.DAYS) == 1
        assert start.until(end, ChronoUnit.HOURS) == 47
        assert end.until(start, ChronoUnit.DAYS) == -1
        assert end.until(start, ChronoUnit.HOURS) == -47

    def test_until_other_type(self) -> None:
        """The end must be a DateTime."""
        with pytest.raises(UnsupportedFieldError, match="Unable to obtain DateTime"):
            DateTime.of(2024, 1, 1).until(Date(2024, 1, 2), ChronoUnit.DAYS)


class TestDateTimeFields:
    """Tests for the field-access protocol."""

    def test_supports_date_and_time_fields(self) -> None:
        """A date-time supports both kinds of ChronoField."""
        dt = DateTime.of(2024, 3, 15, 10, 30)
        assert dt.is_supported(ChronoField.HOUR_OF_DAY)
        assert dt.is_supported(ChronoField.DAY_OF_YEAR)
        assert dt.is_supported_unit(ChronoUnit.NANOS)
        assert dt.is_supported_unit(ChronoUnit.YEARS)
        assert not dt.is_supported_unit(ChronoUnit.FOREVER)

    def test_get(self) -> None:
        """Fields are read from the date or the time."""
        dt = DateTime.of(2024, 3, 15, 10, 30)
        assert dt.get(ChronoField.HOUR_OF_DAY) == 10
        assert dt.get(ChronoField.DAY_OF_MONTH) == 15
        assert dt.get_long(ChronoField.EPOCH_DAY) == Date(2024, 3, 15).to_epoch_day()

    def test_range(self) -> None:
        """Ranges come from the date or the time."""
        dt = DateTime.of(2023, 2, 15, 10, 30)
        assert dt.range(ChronoField.DAY_OF_MONTH) == ValueRange.of(1, 28)
        assert dt.range(ChronoField.HOUR_OF_DAY) == ValueRange.of(0, 23)

    def test_with_field(self) -> None:
        """Changing a field keeps the other half."""
        dt = DateTime.of(2024, 3, 15, 10, 30)
        assert dt.with_field(ChronoField.DAY_OF_MONTH, 1) == DateTime.of(2024, 3, 1, 10, 30)
        assert dt.with_field(ChronoField.HOUR_OF_DAY, 0) == DateTime.of(2024, 3, 15, 0, 30)


class TestDateTimeFormatting:
    """Tests for repr, str and comparison."""

    def test_repr(self) -> None:
        """Test repr."""
        assert repr(DateTime.of(2023, 10, 30)) == "DateTime(2023, 10, 30, 0, 0, 0, nanosecond=0)"

    def test_str(self) -> None:
        """Test ISO 8601 formatting."""
        assert str(DateTime.of(2023, 10, 29, 2, 0)) == "2023-10-29T02:00"
        assert str(DateTime.of(2023, 10, 29, 2, 0, 30)) == "2023-10-29T02:00:30"

    def test_ordering(self) -> None:
        """Date-times order by date, then time."""
        assert DateTime.of(2024, 1, 1, 23) < DateTime.of(2024, 1, 2, 0)
        assert DateTime.of(2024, 1, 1, 10) > DateTime.of(2024, 1, 1, 9)
        assert hash(DateTime.of(2024, 1, 1)) == hash(Date(2024, 1, 1).at_time(Time()))

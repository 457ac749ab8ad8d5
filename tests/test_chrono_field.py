"""Tests for the ChronoField enumeration."""

from __future__ import annotations

import pytest

from chronofield._internal.constants import MAX_YEAR, MIN_YEAR
from chronofield.core.date import Date
from chronofield.core.time import Time
from chronofield.errors import FieldRangeError
from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.resolver_style import ResolverStyle
from chronofield.temporal.value_range import ValueRange
from chronofield.units.timeunit import ChronoUnit


class TestChronoFieldDefinitions:
    """Tests for units and ranges."""

    def test_units(self) -> None:
        """Each field knows its base and range units."""
        assert ChronoField.DAY_OF_MONTH.base_unit is ChronoUnit.DAYS
        assert ChronoField.DAY_OF_MONTH.range_unit is ChronoUnit.MONTHS
        assert ChronoField.YEAR.range_unit is ChronoUnit.FOREVER
        assert ChronoField.SECOND_OF_DAY.range_unit is ChronoUnit.DAYS

    def test_date_and_time_based(self) -> None:
        """Date/time classification follows the base unit."""
        assert ChronoField.HOUR_OF_DAY.is_time_based
        assert not ChronoField.HOUR_OF_DAY.is_date_based
        assert ChronoField.EPOCH_DAY.is_date_based
        assert ChronoField.YEAR.is_date_based

    @pytest.mark.parametrize(
        "field,expected",
        [
            (ChronoField.NANO_OF_SECOND, ValueRange.of(0, 999_999_999)),
            (ChronoField.HOUR_OF_DAY, ValueRange.of(0, 23)),
            (ChronoField.SECOND_OF_DAY, ValueRange.of(0, 86_399)),
            (ChronoField.DAY_OF_WEEK, ValueRange.of(1, 7)),
            (ChronoField.DAY_OF_MONTH, ValueRange.of(1, 28, 31)),
            (ChronoField.DAY_OF_YEAR, ValueRange.of(1, 365, 366)),
            (ChronoField.MONTH_OF_YEAR, ValueRange.of(1, 12)),
            (ChronoField.YEAR, ValueRange.of(MIN_YEAR, MAX_YEAR)),
            (ChronoField.PROLEPTIC_MONTH, ValueRange.of(MIN_YEAR * 12, MAX_YEAR * 12 + 11)),
        ],
    )
    def test_ranges(self, field: ChronoField, expected: ValueRange) -> None:
        """Test the outer range of each field."""
        assert field.range() == expected

    def test_epoch_day_range_matches_year_range(self) -> None:
        """The epoch day range spans exactly the supported years."""
        r = ChronoField.EPOCH_DAY.range()
        assert Date.of_epoch_day(r.minimum) == Date(MIN_YEAR, 1, 1)
        assert Date.of_epoch_day(r.maximum) == Date(MAX_YEAR, 12, 31)
        assert not r.is_int_value()

    def test_str(self) -> None:
        """str is the display name."""
        assert str(ChronoField.YEAR) == "Year"
        assert str(ChronoField.DAY_OF_MONTH) == "DayOfMonth"


class TestChronoFieldChecks:
    """Tests for the value checks."""

    def test_check_valid_value(self) -> None:
        """Valid values pass through; invalid ones raise."""
        assert ChronoField.MONTH_OF_YEAR.check_valid_value(12) == 12
        with pytest.raises(FieldRangeError, match="MonthOfYear"):
            ChronoField.MONTH_OF_YEAR.check_valid_value(0)

    def test_check_valid_int_value(self) -> None:
        """Fields wider than an int fail the int check."""
        assert ChronoField.YEAR.check_valid_int_value(2024) == 2024
        with pytest.raises(FieldRangeError):
            ChronoField.EPOCH_DAY.check_valid_int_value(0)


class TestChronoFieldDispatch:
    """Tests for the methods that forward to the temporal."""

    def test_is_supported_by(self) -> None:
        """Support is decided by the temporal."""
        assert ChronoField.YEAR.is_supported_by(Date(2024, 1, 1))
        assert not ChronoField.YEAR.is_supported_by(Time(10))
        assert ChronoField.HOUR_OF_DAY.is_supported_by(Time(10))

    def test_get_from_and_adjust_into(self) -> None:
        """Reading and writing go through the temporal."""
        d = Date(2024, 3, 15)
        assert ChronoField.DAY_OF_MONTH.get_from(d) == 15
        assert ChronoField.DAY_OF_MONTH.adjust_into(d, 1) == Date(2024, 3, 1)

    def test_range_refined_by(self) -> None:
        """The refined range comes from the temporal."""
        assert ChronoField.DAY_OF_MONTH.range_refined_by(Date(2023, 2, 1)) == ValueRange.of(1, 28)

    def test_resolve_returns_none(self) -> None:
        """Built-in fields leave resolution to the resolver."""
        field_values = {ChronoField.YEAR: 2024}
        assert ChronoField.YEAR.resolve(field_values, Date(2024, 1, 1), ResolverStyle.SMART) is None
        assert field_values == {ChronoField.YEAR: 2024}

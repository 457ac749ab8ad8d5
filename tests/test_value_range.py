"""Tests for the ValueRange class."""

from __future__ import annotations

import pytest

from chronofield._internal.constants import INT_MAX, INT_MIN
from chronofield.errors import FieldRangeError, ValidationError
from chronofield.temporal.chrono_field import ChronoField
from chronofield.temporal.value_range import ValueRange


class TestValueRangeConstruction:
    """Tests for ValueRange.of() with two, three and four bounds."""

    def test_fixed_range(self) -> None:
        """Two bounds give a fixed range."""
        r = ValueRange.of(1, 12)
        assert r.minimum == 1
        assert r.largest_minimum == 1
        assert r.smallest_maximum == 12
        assert r.maximum == 12
        assert r.is_fixed()

    def test_variable_maximum(self) -> None:
        """Three bounds give a fixed minimum and a variable maximum."""
        r = ValueRange.of(1, 28, 31)
        assert r.minimum == 1
        assert r.smallest_maximum == 28
        assert r.maximum == 31
        assert not r.is_fixed()

    def test_fully_variable(self) -> None:
        """Four bounds give a variable minimum and maximum."""
        r = ValueRange.of(0, 1, 4, 6)
        assert r.minimum == 0
        assert r.largest_minimum == 1
        assert r.smallest_maximum == 4
        assert r.maximum == 6

    def test_single_value_range(self) -> None:
        """A range may hold exactly one value."""
        r = ValueRange.of(5, 5)
        assert r.is_valid_value(5)
        assert not r.is_valid_value(4)

    def test_min_greater_than_max(self) -> None:
        """A minimum above the maximum is rejected."""
        with pytest.raises(ValidationError, match="Minimum value must be less than maximum value"):
            ValueRange.of(5, 4)

    def test_smallest_minimum_greater_than_largest_minimum(self) -> None:
        """The smallest minimum may not exceed the largest minimum."""
        with pytest.raises(ValidationError, match="Smallest minimum value"):
            ValueRange.of(2, 1, 3, 4)

    def test_smallest_maximum_greater_than_largest_maximum(self) -> None:
        """The smallest maximum may not exceed the largest maximum."""
        with pytest.raises(ValidationError, match="Smallest maximum value"):
            ValueRange.of(1, 1, 5, 4)

    def test_largest_minimum_greater_than_largest_maximum(self) -> None:
        """The largest minimum may not exceed the largest maximum."""
        with pytest.raises(ValidationError, match="Minimum value must be less than maximum value"):
            ValueRange.of(1, 6, 4, 5)

    def test_wrong_number_of_bounds(self) -> None:
        """One or five bounds are a programming error."""
        with pytest.raises(TypeError):
            ValueRange.of(1)
        with pytest.raises(TypeError):
            ValueRange.of(1, 2, 3, 4, 5)


class TestValueRangeValidation:
    """Tests for value checks."""

    def test_is_valid_value(self) -> None:
        """Values between minimum and maximum are valid."""
        r = ValueRange.of(1, 28, 31)
        assert r.is_valid_value(1)
        assert r.is_valid_value(30)
        assert r.is_valid_value(31)
        assert not r.is_valid_value(0)
        assert not r.is_valid_value(32)

    def test_is_int_value(self) -> None:
        """A range is int-sized when both ends fit 32 bits."""
        assert ValueRange.of(INT_MIN, INT_MAX).is_int_value()
        assert not ValueRange.of(0, INT_MAX + 1).is_int_value()
        assert not ValueRange.of(INT_MIN - 1, 0).is_int_value()

    def test_is_valid_int_value(self) -> None:
        """A value is a valid int value only in an int-sized range."""
        assert ValueRange.of(1, 12).is_valid_int_value(6)
        assert not ValueRange.of(0, 2**40).is_valid_int_value(6)

    def test_check_valid_value_returns_value(self) -> None:
        """A valid value is returned unchanged."""
        assert ValueRange.of(1, 12).check_valid_value(7) == 7

    def test_check_valid_value_with_field(self) -> None:
        """The error names the field, the range and the value."""
        r = ChronoField.MONTH_OF_YEAR.range()
        with pytest.raises(
            FieldRangeError,
            match=r"Invalid value for MonthOfYear \(valid values 1 - 12\): 13",
        ) as exc_info:
            r.check_valid_value(13, ChronoField.MONTH_OF_YEAR)
        assert exc_info.value.field is ChronoField.MONTH_OF_YEAR
        assert exc_info.value.value == 13
        assert exc_info.value.value_range == r

    def test_check_valid_value_without_field(self) -> None:
        """The error message works without a field."""
        with pytest.raises(FieldRangeError, match=r"Invalid value \(valid values 1 - 12\): 0"):
            ValueRange.of(1, 12).check_valid_value(0)

    def test_check_valid_int_value_rejects_wide_range(self) -> None:
        """check_valid_int_value fails for a range that is not int-sized."""
        with pytest.raises(FieldRangeError):
            ValueRange.of(0, 2**40).check_valid_int_value(5)

    def test_field_range_error_is_validation_error(self) -> None:
        """FieldRangeError can be caught as ValidationError."""
        with pytest.raises(ValidationError):
            ValueRange.of(1, 4).check_valid_value(5)


class TestValueRangeDunder:
    """Tests for equality, hashing and string forms."""

    def test_equality(self) -> None:
        """Ranges with equal bounds are equal."""
        assert ValueRange.of(1, 12) == ValueRange.of(1, 12)
        assert ValueRange.of(1, 12) != ValueRange.of(1, 11)
        assert ValueRange.of(1, 28, 31) == ValueRange.of(1, 1, 28, 31)

    def test_hash(self) -> None:
        """Equal ranges hash equally."""
        assert hash(ValueRange.of(1, 28, 31)) == hash(ValueRange.of(1, 1, 28, 31))
        assert len({ValueRange.of(1, 7), ValueRange.of(1, 7)}) == 1

    def test_repr(self) -> None:
        """repr shows all four bounds."""
        assert repr(ValueRange.of(1, 12)) == "ValueRange(1, 1, 12, 12)"

    @pytest.mark.parametrize(
        "bounds,expected",
        [
            ((1, 12), "1 - 12"),
            ((1, 28, 31), "1 - 28/31"),
            ((0, 1, 4, 6), "0/1 - 4/6"),
            ((1, 52, 53), "1 - 52/53"),
        ],
    )
    def test_str(self, bounds: tuple[int, ...], expected: str) -> None:
        """str shows variable ends with a slash."""
        assert str(ValueRange.of(*bounds)) == expected

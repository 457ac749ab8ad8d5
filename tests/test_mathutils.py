"""Tests for overflow-checked integer arithmetic."""

from __future__ import annotations

import pytest

from chronofield._internal.constants import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN
from chronofield._internal.mathutils import (
    add_exact,
    floor_div,
    floor_mod,
    multiply_exact,
    negate_exact,
    subtract_exact,
    to_int_exact,
    truncate_div,
    truncate_mod,
)
from chronofield.errors import DateTimeError, OverflowError


class TestCheckedArithmetic:
    """Tests for the 64-bit checked operations."""

    def test_add_exact(self) -> None:
        """Addition inside the range returns the sum."""
        assert add_exact(2, 3) == 5
        assert add_exact(LONG_MAX - 1, 1) == LONG_MAX

    def test_add_exact_overflow(self) -> None:
        """Addition past LONG_MAX raises."""
        with pytest.raises(OverflowError, match="long overflow in add"):
            add_exact(LONG_MAX, 1)

    def test_subtract_exact_overflow(self) -> None:
        """Subtraction past LONG_MIN raises."""
        with pytest.raises(OverflowError, match="long overflow in subtract"):
            subtract_exact(LONG_MIN, 1)

    def test_multiply_exact_overflow(self) -> None:
        """Multiplication past LONG_MAX raises."""
        assert multiply_exact(2**31, 2**31) == 2**62
        with pytest.raises(OverflowError, match="long overflow in multiply"):
            multiply_exact(2**62, 2)

    def test_negate_exact(self) -> None:
        """Negating LONG_MIN overflows; every other value negates."""
        assert negate_exact(LONG_MAX) == -LONG_MAX
        with pytest.raises(OverflowError):
            negate_exact(LONG_MIN)

    def test_to_int_exact(self) -> None:
        """Values outside 32 bits are rejected."""
        assert to_int_exact(INT_MAX) == INT_MAX
        assert to_int_exact(INT_MIN) == INT_MIN
        with pytest.raises(OverflowError, match="integer overflow"):
            to_int_exact(INT_MAX + 1)

    def test_overflow_error_is_datetime_error(self) -> None:
        """Chronofield's OverflowError belongs to the library hierarchy."""
        with pytest.raises(DateTimeError):
            add_exact(LONG_MAX, LONG_MAX)


class TestDivision:
    """Tests for floor and truncating division."""

    @pytest.mark.parametrize(
        "x,y,expected",
        [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (-6, 3, -2), (0, 5, 0)],
    )
    def test_truncate_div(self, x: int, y: int, expected: int) -> None:
        """truncate_div rounds toward zero."""
        assert truncate_div(x, y) == expected

    @pytest.mark.parametrize(
        "x,y,expected",
        [(7, 2, 1), (-7, 2, -1), (7, -2, 1), (-7, -2, -1), (-8, 4, 0)],
    )
    def test_truncate_mod(self, x: int, y: int, expected: int) -> None:
        """truncate_mod takes the sign of the dividend."""
        assert truncate_mod(x, y) == expected

    def test_floor_div_and_mod(self) -> None:
        """floor_div rounds down and floor_mod takes the sign of the divisor."""
        assert floor_div(-7, 2) == -4
        assert floor_div(7, 2) == 3
        assert floor_mod(-1, 7) == 6
        assert floor_mod(8, 7) == 1

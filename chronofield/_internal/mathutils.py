"""Overflow-checked integer arithmetic.

Python integers never wrap, so these helpers instead enforce the signed
64-bit (and, for to_int_exact, 32-bit) domains that field values and day
counts are defined over. Anything outside raises OverflowError rather than
silently producing a value no other calendar system could represent.

This module is not part of the public API.
"""

from __future__ import annotations

from chronofield._internal.constants import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN
from chronofield.errors import OverflowError


def _check_long(result: int, operation: str) -> int:
    if result < LONG_MIN or result > LONG_MAX:
        raise OverflowError(f"long overflow in {operation}: {result}")
    return result


def add_exact(x: int, y: int) -> int:
    """Return x + y, raising OverflowError outside the 64-bit range.

    Examples:
        >>> add_exact(2, 3)
        5
        >>> add_exact(2**63 - 1, 1)
        Traceback (most recent call last):
        ...
        OverflowError: long overflow in add: 9223372036854775808
    """
    return _check_long(x + y, "add")


def subtract_exact(x: int, y: int) -> int:
    """Return x - y, raising OverflowError outside the 64-bit range."""
    return _check_long(x - y, "subtract")


def multiply_exact(x: int, y: int) -> int:
    """Return x * y, raising OverflowError outside the 64-bit range."""
    return _check_long(x * y, "multiply")


def negate_exact(x: int) -> int:
    """Return -x, raising OverflowError for the minimum 64-bit value."""
    return _check_long(-x, "negate")


def to_int_exact(value: int) -> int:
    """Return value unchanged if it fits a signed 32-bit int.

    Raises:
        OverflowError: If value is outside -2**31 to 2**31 - 1.
    """
    if value < INT_MIN or value > INT_MAX:
        raise OverflowError(f"integer overflow: {value}")
    return value


def floor_div(x: int, y: int) -> int:
    """Return the floor of x / y (rounding toward negative infinity)."""
    return x // y


def truncate_div(x: int, y: int) -> int:
    """Return x / y rounded toward zero.

    Examples:
        >>> truncate_div(-7, 2)
        -3
    """
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


def truncate_mod(x: int, y: int) -> int:
    """Return the remainder of truncate_div, with the sign of x."""
    return x - truncate_div(x, y) * y


def floor_mod(x: int, y: int) -> int:
    """Return the floor modulus of x and y, with the sign of y.

    Examples:
        >>> floor_mod(-1, 7)
        6
    """
    return x % y


__all__ = [
    "add_exact",
    "subtract_exact",
    "multiply_exact",
    "negate_exact",
    "to_int_exact",
    "floor_div",
    "floor_mod",
    "truncate_div",
    "truncate_mod",
]

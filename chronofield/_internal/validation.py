"""Validation utilities for Chronofield.

This module provides validation decorators and utilities for
ensuring constructor arguments are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from chronofield._internal.calendar import days_in_month
from chronofield._internal.constants import MAX_YEAR, MIN_YEAR
from chronofield.errors import ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Both min and max are inclusive. Parameters passed as None are not
    checked.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(minimal_days=(1, 7))
        ... def make(minimal_days: int) -> int:
        ...     return minimal_days

        >>> make(8)
        Traceback (most recent call last):
        ...
        ValidationError: minimal_days must be between 1 and 7, got 8
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)
        param_names = list(sig.parameters.keys())

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            all_args = dict(zip(param_names, args))
            all_args.update(kwargs)

            for param_name, (min_val, max_val) in limits.items():
                if param_name in all_args:
                    value = all_args[param_name]
                    if value is not None and (value < min_val or value > max_val):
                        raise ValidationError(
                            f"{param_name} must be between {min_val} and {max_val}, "
                            f"got {value}"
                        )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
]

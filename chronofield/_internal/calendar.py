"""Calendar utilities for Chronofield.

This module provides internal functions for proleptic ISO calendar
calculations: leap years, month lengths and conversion between
(year, month, day) and the epoch day count.

Epoch day 0 = 1970-01-01.

This module is not part of the public API.
"""

from __future__ import annotations

from chronofield._internal.constants import (
    DAYS_0000_TO_1970,
    DAYS_IN_MONTH,
    DAYS_PER_CYCLE,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to the epoch day count.

    Python's // floors toward negative infinity, so the leap-year count
    below is correct for negative years too.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        Days since 1970-01-01 (negative before it).

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(2000, 3, 1)
        11017
    """
    y = year
    days_before_year = y * 365 + (y + 3) // 4 - (y + 99) // 100 + (y + 399) // 400
    return (
        days_before_year
        + days_before_month(year, month)
        + day
        - 1
        - DAYS_0000_TO_1970
    )


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert an epoch day count to year, month, day.

    The computation works on a calendar that starts on 0000-03-01 so that
    the leap day falls at the very end of each four year cycle.

    Args:
        epoch_day: Days since 1970-01-01.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> epoch_day_to_ymd(0)
        (1970, 1, 1)
        >>> epoch_day_to_ymd(-1)
        (1969, 12, 31)
    """
    zero_day = epoch_day + DAYS_0000_TO_1970 - 60
    cycles, zero_day = divmod(zero_day, DAYS_PER_CYCLE)
    adjust = cycles * 400

    year_est = (400 * zero_day + 591) // DAYS_PER_CYCLE
    doy_est = zero_day - (
        365 * year_est + year_est // 4 - year_est // 100 + year_est // 400
    )
    if doy_est < 0:
        year_est -= 1
        doy_est = zero_day - (
            365 * year_est + year_est // 4 - year_est // 100 + year_est // 400
        )
    year_est += adjust

    march_month0 = (doy_est * 5 + 2) // 153
    month = (march_month0 + 2) % 12 + 1
    day = doy_est - (march_month0 * 306 + 5) // 10 + 1
    year_est += march_month0 // 10
    return (year_est, month, day)


def epoch_day_to_iso_day_of_week(epoch_day: int) -> int:
    """Return the ISO day of week (1=Monday, 7=Sunday) of an epoch day.

    1970-01-01 was a Thursday.
    """
    return (epoch_day + 3) % 7 + 1


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "epoch_day_to_iso_day_of_week",
]

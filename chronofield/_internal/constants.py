"""Internal constants for Chronofield.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Integer domains for overflow-checked arithmetic
INT_MIN: int = -(2**31)
INT_MAX: int = 2**31 - 1
LONG_MIN: int = -(2**63)
LONG_MAX: int = 2**63 - 1

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Year limits of the proleptic ISO calendar
MIN_YEAR: int = -999_999_999
MAX_YEAR: int = 999_999_999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Day-of-year before the first day of each quarter.
# Row 0-3 is a standard year, row 4-7 a leap year.
QUARTER_DAYS: tuple[int, ...] = (0, 90, 181, 273, 0, 91, 182, 274)

# Days from 0000-01-01 to 1970-01-01
DAYS_0000_TO_1970: int = 719_528
DAYS_PER_CYCLE: int = 146_097  # 400 years

# Estimated unit lengths, in seconds
SECONDS_PER_YEAR_ESTIMATED: int = 31_556_952  # 365.2425 days
SECONDS_PER_MONTH_ESTIMATED: int = SECONDS_PER_YEAR_ESTIMATED // 12

# Zone offset limits (in seconds)
MAX_OFFSET_SECONDS: int = 18 * SECONDS_PER_HOUR

# Upper bound on resolve passes before a field is considered broken
MAX_RESOLVE_PASSES: int = 50


__all__ = [
    "INT_MIN",
    "INT_MAX",
    "LONG_MIN",
    "LONG_MAX",
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "QUARTER_DAYS",
    "DAYS_0000_TO_1970",
    "DAYS_PER_CYCLE",
    "SECONDS_PER_YEAR_ESTIMATED",
    "SECONDS_PER_MONTH_ESTIMATED",
    "MAX_OFFSET_SECONDS",
    "MAX_RESOLVE_PASSES",
]

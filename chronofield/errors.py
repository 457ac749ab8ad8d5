"""Chronofield exception hierarchy.

All Chronofield-specific exceptions inherit from DateTimeError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chronofield.temporal.field import TemporalField
    from chronofield.temporal.value_range import ValueRange


class DateTimeError(Exception):
    """Base exception for all Chronofield errors."""

    pass


class ValidationError(DateTimeError):
    """Invalid input values.

    Raised when a value object cannot be constructed from the arguments
    given. These are programmer errors and are never recoverable.

    Examples:
        - ValueRange whose minimum exceeds its maximum
        - Day-of-month indicator of zero in a transition rule
        - Minimal days in first week outside 1-7
        - February 30
    """

    pass


class FieldRangeError(ValidationError):
    """A field value lies outside its valid range.

    Raised by ValueRange.check_valid_value() and check_valid_int_value().
    The offending field, value and range are kept on the exception.

    Examples:
        - Quarter-of-year 5
        - Day-of-quarter 92 in the first quarter under STRICT resolution
    """

    def __init__(
        self,
        message: str,
        field: TemporalField | None = None,
        value: int | None = None,
        value_range: ValueRange | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
        self.value_range = value_range


class ResolutionError(ValidationError):
    """A set of field values could not be resolved to a consistent date.

    Examples:
        - STRICT week-of-month resolution landing in another month
        - Two derived fields resolving to different dates
        - Resolving ISO fields against a non-ISO chronology
    """

    pass


class UnsupportedFieldError(DateTimeError):
    """A field or unit is not supported by a temporal.

    Raised when a derived field needs underlying fields (or a chronology)
    that the target temporal does not provide. Always predictable by
    calling is_supported_by() first.

    Examples:
        - DAY_OF_QUARTER on a Time
        - WEEK_BASED_YEARS added to a non-ISO date
    """

    pass


class OverflowError(DateTimeError):
    """Arithmetic operation exceeded representable range.

    Raised when a checked calculation leaves the signed 64-bit domain,
    or the 32-bit domain where an int value is required.

    Examples:
        - Adding weeks whose day count does not fit 64 bits
        - Converting a week count above 2**31 - 1 to an int
    """

    pass


class TimezoneError(DateTimeError):
    """Invalid zone offset.

    Examples:
        - Offset outside the -18:00 to +18:00 range
        - Hours and minutes with different signs
    """

    pass


__all__ = [
    "DateTimeError",
    "ValidationError",
    "FieldRangeError",
    "ResolutionError",
    "UnsupportedFieldError",
    "OverflowError",
    "TimezoneError",
]

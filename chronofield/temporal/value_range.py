"""ValueRange: the range of valid values for a date-time field.

All fields can be expressed as an integer range. A range may itself be
variable: day-of-month always starts at 1 but ends anywhere from 28 to
31, which is written as the range 1 - 28/31.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronofield._internal.constants import INT_MAX, INT_MIN
from chronofield.errors import FieldRangeError, ValidationError

if TYPE_CHECKING:
    from chronofield.temporal.field import TemporalField


class ValueRange:
    """The closed range of valid values for a field.

    A range is described by four values: the smallest and largest
    possible minimum, and the smallest and largest possible maximum.
    Instances are immutable.

    Examples:
        >>> ValueRange.of(1, 12)
        ValueRange(1, 1, 12, 12)
        >>> str(ValueRange.of(1, 28, 31))
        '1 - 28/31'
        >>> ValueRange.of(1, 28, 31).is_valid_value(30)
        True
    """

    __slots__ = ("_min_smallest", "_min_largest", "_max_smallest", "_max_largest")

    def __init__(
        self, min_smallest: int, min_largest: int, max_smallest: int, max_largest: int
    ) -> None:
        """Create a ValueRange without validation; use ValueRange.of()."""
        self._min_smallest = min_smallest
        self._min_largest = min_largest
        self._max_smallest = max_smallest
        self._max_largest = max_largest

    @classmethod
    def of(cls, *bounds: int) -> ValueRange:
        """Obtain a range from two, three or four bounds.

        - ``of(min, max)``: a fixed range.
        - ``of(min, max_smallest, max_largest)``: fixed minimum,
          variable maximum.
        - ``of(min_smallest, min_largest, max_smallest, max_largest)``:
          fully variable.

        Raises:
            ValidationError: If the bounds are not correctly ordered.
            TypeError: If not given two to four bounds.

        Examples:
            >>> ValueRange.of(1, 4, 6).maximum
            6
            >>> ValueRange.of(7, 4, 6)
            Traceback (most recent call last):
            ...
            ValidationError: Minimum value must be less than maximum value
        """
        if len(bounds) == 2:
            min_value, max_value = bounds
            if min_value > max_value:
                raise ValidationError("Minimum value must be less than maximum value")
            return cls(min_value, min_value, max_value, max_value)
        if len(bounds) == 3:
            min_value, max_smallest, max_largest = bounds
            return cls.of(min_value, min_value, max_smallest, max_largest)
        if len(bounds) == 4:
            min_smallest, min_largest, max_smallest, max_largest = bounds
            if min_smallest > min_largest:
                raise ValidationError(
                    "Smallest minimum value must be less than largest minimum value"
                )
            if max_smallest > max_largest:
                raise ValidationError(
                    "Smallest maximum value must be less than largest maximum value"
                )
            if min_largest > max_largest:
                raise ValidationError("Minimum value must be less than maximum value")
            return cls(min_smallest, min_largest, max_smallest, max_largest)
        raise TypeError(f"ValueRange.of() takes 2 to 4 bounds, got {len(bounds)}")

    @property
    def minimum(self) -> int:
        """Return the minimum value the field can take."""
        return self._min_smallest

    @property
    def largest_minimum(self) -> int:
        """Return the largest possible minimum value."""
        return self._min_largest

    @property
    def smallest_maximum(self) -> int:
        """Return the smallest possible maximum value."""
        return self._max_smallest

    @property
    def maximum(self) -> int:
        """Return the maximum value the field can take."""
        return self._max_largest

    def is_fixed(self) -> bool:
        """Return True if both the minimum and the maximum are fixed."""
        return (
            self._min_smallest == self._min_largest
            and self._max_smallest == self._max_largest
        )

    def is_int_value(self) -> bool:
        """Return True if every value in the range fits a 32-bit int."""
        return self.minimum >= INT_MIN and self.maximum <= INT_MAX

    def is_valid_value(self, value: int) -> bool:
        """Return True if value lies between minimum and maximum."""
        return self.minimum <= value <= self.maximum

    def is_valid_int_value(self, value: int) -> bool:
        """Return True if the range is int-sized and value is within it."""
        return self.is_int_value() and self.is_valid_value(value)

    def check_valid_value(self, value: int, field: TemporalField | None = None) -> int:
        """Return value if it is valid, otherwise raise.

        Args:
            value: The value to check.
            field: The field being checked, used in the error message.

        Raises:
            FieldRangeError: If the value is outside the range.
        """
        if not self.is_valid_value(value):
            raise FieldRangeError(
                self._invalid_field_message(field, value), field, value, self
            )
        return value

    def check_valid_int_value(
        self, value: int, field: TemporalField | None = None
    ) -> int:
        """Return value if it is valid and the range is int-sized.

        Raises:
            FieldRangeError: If the value is invalid or the range is not
                int-sized.
        """
        if not self.is_valid_int_value(value):
            raise FieldRangeError(
                self._invalid_field_message(field, value), field, value, self
            )
        return value

    def _invalid_field_message(self, field: TemporalField | None, value: int) -> str:
        if field is not None:
            return f"Invalid value for {field} (valid values {self}): {value}"
        return f"Invalid value (valid values {self}): {value}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueRange):
            return NotImplemented
        return (
            self._min_smallest == other._min_smallest
            and self._min_largest == other._min_largest
            and self._max_smallest == other._max_smallest
            and self._max_largest == other._max_largest
        )

    def __hash__(self) -> int:
        return hash(
            (self._min_smallest, self._min_largest, self._max_smallest, self._max_largest)
        )

    def __repr__(self) -> str:
        return (
            f"ValueRange({self._min_smallest}, {self._min_largest}, "
            f"{self._max_smallest}, {self._max_largest})"
        )

    def __str__(self) -> str:
        """Return a string like '1 - 28/31'."""
        result = str(self._min_smallest)
        if self._min_smallest != self._min_largest:
            result += f"/{self._min_largest}"
        result += f" - {self._max_smallest}"
        if self._max_smallest != self._max_largest:
            result += f"/{self._max_largest}"
        return result


__all__ = ["ValueRange"]

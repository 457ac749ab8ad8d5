"""Internal utilities for Chronofield.

This module contains private implementation details:
    - Constants and magic numbers
    - Calendar arithmetic over epoch days
    - Overflow-checked integer math
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronofield._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]

"""ResolverStyle enumeration."""

from __future__ import annotations

from enum import Enum


class ResolverStyle(Enum):
    """How strictly field values are validated when resolving a date.

    STRICT rejects any value outside the exact range and any result that
    leaves the requested period. SMART checks only the declared numeric
    range, so a result may spill into an adjacent period. LENIENT checks
    almost nothing and lets out-of-range values roll over arithmetically.

    Examples:
        >>> ResolverStyle.SMART.value
        'smart'
    """

    STRICT = "strict"
    SMART = "smart"
    LENIENT = "lenient"


__all__ = ["ResolverStyle"]

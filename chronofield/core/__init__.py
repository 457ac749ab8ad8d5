"""Core temporal types.

This module provides the primitive temporals the field machinery works on:
    - Date: Calendar date in the proleptic ISO calendar
    - Time: Time of day with nanosecond precision
    - DateTime: Combined date and time without an offset
    - Duration: Time span with nanosecond precision
"""

from __future__ import annotations

from chronofield.core.date import Date
from chronofield.core.datetime import DateTime
from chronofield.core.duration import Duration
from chronofield.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Duration",
    "Time",
]

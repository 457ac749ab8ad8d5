"""Temporal units and enumerations.

This module provides:
    - ChronoUnit: Standard units (NANOS through FOREVER)
    - DayOfWeek: MONDAY through SUNDAY
    - Month: JANUARY through DECEMBER
    - ZoneOffset: Fixed offset from UTC
"""

from __future__ import annotations

from chronofield.units.dayofweek import DayOfWeek
from chronofield.units.month import Month
from chronofield.units.offset import ZoneOffset
from chronofield.units.timeunit import ChronoUnit

__all__: list[str] = [
    "ChronoUnit",
    "DayOfWeek",
    "Month",
    "ZoneOffset",
]

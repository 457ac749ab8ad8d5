"""Calendar systems."""

from __future__ import annotations

from chronofield.chrono.chronology import Chronology, IsoChronology

__all__: list[str] = [
    "Chronology",
    "IsoChronology",
]

"""Offset transitions and the yearly rules that produce them."""

from __future__ import annotations

from chronofield.zone.transition import ZoneOffsetTransition
from chronofield.zone.transition_rule import TimeDefinition, ZoneOffsetTransitionRule

__all__: list[str] = [
    "TimeDefinition",
    "ZoneOffsetTransition",
    "ZoneOffsetTransitionRule",
]

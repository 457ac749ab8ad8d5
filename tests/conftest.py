"""Pytest configuration and fixtures for Chronofield tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so chronofield can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def sunday_start():
    """WeekFields with weeks starting on Sunday and a one-day first week."""
    from chronofield.temporal.week_fields import WeekFields

    return WeekFields.SUNDAY_START


@pytest.fixture
def iso_week():
    """WeekFields with ISO-8601 week numbering."""
    from chronofield.temporal.week_fields import WeekFields

    return WeekFields.ISO

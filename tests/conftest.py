"""Shared fixtures: a fixed reference instant and calendars."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest


@pytest.fixture
def now():
    # 2025-12-13T12:00:00Z
    return datetime(2025, 12, 13, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def utc():
    return ZoneInfo("UTC")


@pytest.fixture
def toronto():
    return ZoneInfo("America/Toronto")

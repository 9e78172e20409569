"""Ports - interfaces/protocols for external dependencies."""

from .goal_repo import GoalRepository
from .settings_store import SettingsStore

__all__ = [
    "GoalRepository",
    "SettingsStore",
]

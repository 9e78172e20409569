"""Adapters - I/O implementations of ports."""

from .levelup_api import LevelUpAPIAdapter, APIError
from .file_settings import FileSettingsStore

__all__ = [
    "LevelUpAPIAdapter",
    "APIError",
    "FileSettingsStore",
]

"""User settings storage interface."""

from typing import Protocol

from levelup.core.settings import UserSettings


class SettingsStore(Protocol):
    """Interface for durable load/save of user settings."""

    def load(self) -> UserSettings:
        """Load settings. Returns defaults if nothing is stored."""
        ...

    def save(self, settings: UserSettings) -> None:
        """Persist settings."""
        ...

"""File-based user settings storage adapter."""

import json
import logging
from pathlib import Path

from levelup.core.settings import UserSettings

logger = logging.getLogger(__name__)


class FileSettingsStore:
    """
    JSON-file settings storage.

    Implements SettingsStore protocol. The derived prompt prefix is written to
    a sibling `.prompt.txt` file on every save so the chat pipeline can pick
    it up without decoding the settings.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    @property
    def prompt_path(self) -> Path:
        return self.path.with_suffix(".prompt.txt")

    def load(self) -> UserSettings:
        """Load settings, or defaults if the file is missing or unreadable."""
        if not self.path.exists():
            return UserSettings()
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not read settings from {self.path}: {e}")
            return UserSettings()
        if not isinstance(data, dict):
            logger.warning(f"Settings file {self.path} does not hold an object")
            return UserSettings()
        return UserSettings.from_dict(data)

    def save(self, settings: UserSettings) -> None:
        """Write settings and the derived prompt prefix."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(settings.to_dict(), indent=2))
        self.prompt_path.write_text(settings.prompt_prefix())

    def read_prompt_prefix(self) -> str:
        """Last saved prompt prefix, or an empty string."""
        if not self.prompt_path.exists():
            return ""
        return self.prompt_path.read_text()

"""Configuration management for LevelUp."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

LEVELUP_HOME = Path(os.environ.get("LEVELUP_HOME", Path.home() / "levelup"))
CONFIG_FILE = LEVELUP_HOME / "config" / "levelup.conf"
DATA_DIR = LEVELUP_HOME / "data"


@dataclass
class Config:
    """LevelUp configuration."""

    server_address: str = ""
    api_token: str = ""
    timezone: str = "UTC"
    settings_file: str = ""

    def tz(self) -> ZoneInfo:
        """The configured timezone, falling back to UTC if it's unknown."""
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone {self.timezone!r}, using UTC")
            return ZoneInfo("UTC")

    def settings_path(self) -> Path:
        if self.settings_file:
            return Path(self.settings_file).expanduser()
        return DATA_DIR / "settings.json"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from levelup.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "server_address":
                config.server_address = value
            case "api_token":
                config.api_token = value
            case "timezone":
                config.timezone = value
            case "settings_file":
                config.settings_file = value
            case _:
                logger.debug(f"Ignoring unknown config key {key!r}")

    return config

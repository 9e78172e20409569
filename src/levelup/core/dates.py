"""Timestamp decoding for upstream API records - no I/O dependencies.

The LevelUp backend is inconsistent about timestamps: some fields carry a
timezone offset, some don't, and fractional seconds come and go. Every parser
below handles exactly one of those shapes. A missing offset always means UTC,
never the local timezone.
"""

import logging
import re
from collections.abc import Callable
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

# Fixed-width date and time fields; strptime alone would accept "2025-1-3T1:2:3".
_ISO_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,6})?(Z|[+-]\d{2}:?\d{2})?\Z")


class InvalidTimestampError(ValueError):
    """Raised when a timestamp matches none of the known formats, or isn't a string."""

    def __init__(self, value: object):
        super().__init__(f"Invalid date: {value!r}")
        self.value = value


def _strptime(value: str, fmt: str) -> datetime | None:
    if not _ISO_SHAPE.match(value):
        return None
    try:
        return datetime.strptime(value, fmt)
    except ValueError:
        return None


def parse_iso_with_offset(value: str) -> datetime | None:
    """2025-12-13T18:29:21Z or 2025-12-13T18:29:21+02:00"""
    return _strptime(value, "%Y-%m-%dT%H:%M:%S%z")


def parse_iso_with_offset_fractional(value: str) -> datetime | None:
    """2025-12-13T18:29:21.349Z or 2025-12-13T18:29:21.349613+02:00"""
    return _strptime(value, "%Y-%m-%dT%H:%M:%S.%f%z")


def parse_no_timezone_fractional(value: str) -> datetime | None:
    """2025-12-13T18:29:21.349613, read as UTC."""
    parsed = _strptime(value, "%Y-%m-%dT%H:%M:%S.%f")
    return parsed.replace(tzinfo=timezone.utc) if parsed else None


def parse_no_timezone(value: str) -> datetime | None:
    """2026-01-12T18:27:02, read as UTC."""
    parsed = _strptime(value, "%Y-%m-%dT%H:%M:%S")
    return parsed.replace(tzinfo=timezone.utc) if parsed else None


# Tried in order; the first parser that returns a datetime wins.
TIMESTAMP_PARSERS: tuple[Callable[[str], datetime | None], ...] = (
    parse_iso_with_offset,
    parse_iso_with_offset_fractional,
    parse_no_timezone_fractional,
    parse_no_timezone,
)


def parse_timestamp(value: object) -> datetime:
    """
    Decode an upstream timestamp into an aware datetime.

    Pure function - no I/O.

    Raises:
        InvalidTimestampError: if no parser accepts the string.
    """
    if not isinstance(value, str):
        logger.debug(f"Timestamp is not a string: {value!r}")
        raise InvalidTimestampError(value)

    value = value.strip()
    for parser in TIMESTAMP_PARSERS:
        parsed = parser(value)
        if parsed is not None:
            return parsed

    logger.debug(f"No timestamp format matched {value!r}")
    raise InvalidTimestampError(value)


def parse_optional_timestamp(value: object) -> datetime | None:
    """Like parse_timestamp, but passes None (JSON null) through."""
    if value is None:
        return None
    return parse_timestamp(value)

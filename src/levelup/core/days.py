"""Calendar-day arithmetic against an explicit timezone."""

from datetime import datetime, time, timedelta, timezone, tzinfo


def as_aware(instant: datetime) -> datetime:
    """Naive datetimes are taken to be UTC, never local time."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant


def start_of_day(instant: datetime, tz: tzinfo, offset_days: int = 0) -> datetime:
    """
    Midnight of the calendar day containing `instant` in `tz`,
    shifted by `offset_days` whole calendar days.

    Days are counted on the wall clock, so a DST change doesn't move the result
    off midnight.
    """
    local_date = as_aware(instant).astimezone(tz).date() + timedelta(days=offset_days)
    return datetime.combine(local_date, time.min, tzinfo=tz)


def calendar_days_between(earlier: datetime, later: datetime, tz: tzinfo) -> int:
    """Number of day boundaries in `tz` between two instants (negative if reversed)."""
    earlier_day = as_aware(earlier).astimezone(tz).date()
    later_day = as_aware(later).astimezone(tz).date()
    return (later_day - earlier_day).days

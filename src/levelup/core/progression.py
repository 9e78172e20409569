"""Level and streak progression - no I/O dependencies."""

import math
from dataclasses import dataclass
from datetime import datetime, tzinfo

from .days import calendar_days_between

POINTS_PER_LEVEL_UNIT = 100


@dataclass
class StreakState:
    """Daily activity streak."""

    current: int = 0
    longest: int = 0
    last_activity: datetime | None = None


@dataclass
class Progress:
    """Where a point total sits on the level curve."""

    total_points: int
    level: int
    points_to_next: int

    @property
    def next_level_threshold(self) -> int:
        return points_for_level(self.level + 1)


def points_for_level(level: int) -> int:
    """
    Cumulative points needed to reach a level: 100 * level^2.

    Levels below 1 are treated as level 1.
    """
    level = max(level, 1)
    return POINTS_PER_LEVEL_UNIT * level * level


def level_for_total_points(total: int) -> int:
    """
    Highest level whose threshold is <= total.

    Level 1 is the floor, so anything under 400 points (including zero and
    negative totals) is level 1.
    """
    if total <= 0:
        return 1
    return max(1, math.isqrt(int(total) // POINTS_PER_LEVEL_UNIT))


def points_to_next_level(level: int, total_points: int) -> int:
    """Points still needed to reach `level + 1`."""
    return points_for_level(level + 1) - total_points


def progress_for(total_points: int) -> Progress:
    """Level and distance to the next level for a point total."""
    total_points = max(total_points, 0)
    level = level_for_total_points(total_points)
    return Progress(
        total_points=total_points,
        level=level,
        points_to_next=points_to_next_level(level, total_points),
    )


def update_streak(
    current_streak: int,
    longest_streak: int,
    last_activity: datetime | None,
    now: datetime,
    tz: tzinfo,
) -> StreakState:
    """
    Streak state after a qualifying activity at `now`.

    Days are calendar days in `tz`, not 24h windows.

    - no previous activity: streak starts at 1
    - same day: nothing changes, last_activity stays where it was
    - previous day: streak grows by one
    - two or more days ago: streak restarts at 1, longest is kept

    Pure function - no I/O.
    """
    if last_activity is None:
        return StreakState(current=1, longest=max(longest_streak, 1), last_activity=now)

    days = calendar_days_between(last_activity, now, tz)

    # Activity stamped after today (clock skew) counts as today.
    if days <= 0:
        return StreakState(current=current_streak, longest=longest_streak, last_activity=last_activity)

    if days == 1:
        current = current_streak + 1
        return StreakState(current=current, longest=max(longest_streak, current), last_activity=now)

    return StreakState(current=1, longest=longest_streak, last_activity=now)


def record_activity(state: StreakState, now: datetime, tz: tzinfo) -> StreakState:
    """Apply update_streak to a stored StreakState."""
    return update_streak(state.current, state.longest, state.last_activity, now, tz)

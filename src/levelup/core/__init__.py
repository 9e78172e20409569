"""Functional core - pure business logic with no I/O."""

from .dates import InvalidTimestampError, parse_timestamp, parse_optional_timestamp
from .progression import (
    Progress,
    StreakState,
    level_for_total_points,
    points_for_level,
    points_to_next_level,
    progress_for,
    update_streak,
)
from .goals import Goal, GoalStatus, Objective, ObjectiveStatus
from .pinning import MAX_PINNED_GOALS, auto_pin_if_needed, pin, pinned_goals, unpin
from .tasks import Task
from .bucketing import Boundaries, Bucket, Section, TaskListFilter, boundaries, bucket, filtered_tasks, sections
from .settings import UserSettings

__all__ = [
    # Dates
    "InvalidTimestampError",
    "parse_timestamp",
    "parse_optional_timestamp",
    # Progression
    "Progress",
    "StreakState",
    "level_for_total_points",
    "points_for_level",
    "points_to_next_level",
    "progress_for",
    "update_streak",
    # Goals
    "Goal",
    "GoalStatus",
    "Objective",
    "ObjectiveStatus",
    "MAX_PINNED_GOALS",
    "auto_pin_if_needed",
    "pin",
    "pinned_goals",
    "unpin",
    # Tasks
    "Task",
    "Boundaries",
    "Bucket",
    "Section",
    "TaskListFilter",
    "boundaries",
    "bucket",
    "filtered_tasks",
    "sections",
    # Settings
    "UserSettings",
]

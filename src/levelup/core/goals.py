"""Goal and objective domain types - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4


def _new_id() -> str:
    return str(uuid4())


class GoalStatus(Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class ObjectiveStatus(Enum):
    LOCKED = "locked"
    AVAILABLE = "available"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Objective:
    """A single step toward a goal, worth some points."""

    title: str
    description: str = ""
    estimated_hours: float = 1.0
    points_value: int = 100
    tier: str = "Foundation"
    position: int = 0
    status: ObjectiveStatus = ObjectiveStatus.AVAILABLE
    id: str = field(default_factory=_new_id)

    @property
    def is_completed(self) -> bool:
        return self.status is ObjectiveStatus.COMPLETED

    @property
    def formatted_estimate(self) -> str:
        """Estimate for display: "30m", "2h", "1h 30m"."""
        total_minutes = round(self.estimated_hours * 60)
        hours, minutes = divmod(total_minutes, 60)
        if hours == 0:
            return f"{minutes}m"
        if minutes == 0:
            return f"{hours}h"
        return f"{hours}h {minutes}m"


@dataclass
class Goal:
    """
    A user goal.

    Pin state is changed in place by levelup.core.pinning; `is_pinned` and
    `pinned_at` are kept in step there.
    """

    title: str
    description: str = ""
    status: GoalStatus = GoalStatus.ACTIVE
    is_pinned: bool = False
    pinned_at: datetime | None = None
    created_at: datetime | None = None
    objectives: list[Objective] = field(default_factory=list)
    id: str = field(default_factory=_new_id)

    @property
    def is_active(self) -> bool:
        return self.status is GoalStatus.ACTIVE

    @property
    def ordered_objectives(self) -> list[Objective]:
        return sorted(self.objectives, key=lambda o: o.position)

    @property
    def progress_percentage(self) -> float:
        """Completed objectives as a fraction of all objectives (0.0-1.0)."""
        if not self.objectives:
            return 0.0
        completed = sum(1 for o in self.objectives if o.is_completed)
        return completed / len(self.objectives)

    @property
    def total_points(self) -> int:
        return sum(o.points_value for o in self.objectives)

    @property
    def earned_points(self) -> int:
        return sum(o.points_value for o in self.objectives if o.is_completed)


def active_goals(goals: list[Goal]) -> list[Goal]:
    """Filter to goals that are still being worked on."""
    return [g for g in goals if g.is_active]

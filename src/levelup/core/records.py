"""Upstream LevelUp API records.

Each record decodes its timestamps through levelup.core.dates. An unreadable
timestamp raises InvalidTimestampError rather than falling back to a default.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .dates import parse_optional_timestamp, parse_timestamp
from .goals import Goal, GoalStatus, Objective, ObjectiveStatus


class RecordError(ValueError):
    """Raised when an API record is missing a required field."""

    pass


def _require(data: dict, key: str, record: str):
    try:
        return data[key]
    except KeyError:
        raise RecordError(f"{record} record missing '{key}'") from None


@dataclass
class AuthRecord:
    token: str
    expires_at: datetime
    device_id: str

    @classmethod
    def from_api(cls, data: dict) -> "AuthRecord":
        return cls(
            token=_require(data, "token", "auth"),
            expires_at=parse_timestamp(_require(data, "expires_at", "auth")),
            device_id=_require(data, "device_id", "auth"),
        )


@dataclass
class ObjectiveRecord:
    id: str
    title: str
    description: str
    estimated_hours: float
    points_value: int
    tier: str
    position: int
    status: str

    @classmethod
    def from_api(cls, data: dict) -> "ObjectiveRecord":
        return cls(
            id=_require(data, "id", "objective"),
            title=_require(data, "title", "objective"),
            description=data.get("description") or "",
            estimated_hours=float(data.get("estimated_hours") or 0),
            points_value=int(data.get("points_value") or 0),
            tier=data.get("tier") or "",
            position=int(data.get("position") or 0),
            status=data.get("status") or ObjectiveStatus.AVAILABLE.value,
        )

    def to_objective(self) -> Objective:
        try:
            status = ObjectiveStatus(self.status)
        except ValueError:
            status = ObjectiveStatus.AVAILABLE
        return Objective(
            id=self.id,
            title=self.title,
            description=self.description,
            estimated_hours=self.estimated_hours,
            points_value=self.points_value,
            tier=self.tier,
            position=self.position,
            status=status,
        )


@dataclass
class GoalRecord:
    id: str
    title: str
    status: str
    created_at: datetime
    updated_at: datetime | None = None
    description: str = ""
    target_date: datetime | None = None
    last_path_generated_at: datetime | None = None
    objectives: list[ObjectiveRecord] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "GoalRecord":
        return cls(
            id=_require(data, "id", "goal"),
            title=_require(data, "title", "goal"),
            status=data.get("status") or GoalStatus.ACTIVE.value,
            created_at=parse_timestamp(_require(data, "created_at", "goal")),
            updated_at=parse_optional_timestamp(data.get("updated_at")),
            description=data.get("description") or "",
            target_date=parse_optional_timestamp(data.get("target_date")),
            last_path_generated_at=parse_optional_timestamp(data.get("last_path_generated_at")),
            objectives=[ObjectiveRecord.from_api(o) for o in data.get("objectives") or []],
        )

    def to_goal(self) -> Goal:
        """Fresh, unpinned domain Goal. Pin state lives on the client."""
        try:
            status = GoalStatus(self.status)
        except ValueError:
            status = GoalStatus.ACTIVE
        return Goal(
            id=self.id,
            title=self.title,
            description=self.description,
            status=status,
            created_at=self.created_at,
            objectives=[o.to_objective() for o in self.objectives],
        )


@dataclass
class JobStatusRecord:
    """Status of a plan-generation job."""

    id: str
    status: str
    created_at: datetime
    goal_id: str | None = None
    plan_id: str | None = None
    type: str | None = None
    error: str | None = None
    plan_version_id: str | None = None
    diff_id: str | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None

    @classmethod
    def from_api(cls, data: dict) -> "JobStatusRecord":
        return cls(
            id=_require(data, "id", "job"),
            status=_require(data, "status", "job"),
            created_at=parse_timestamp(_require(data, "created_at", "job")),
            goal_id=data.get("goal_id"),
            plan_id=data.get("plan_id"),
            type=data.get("type"),
            error=data.get("error"),
            plan_version_id=data.get("plan_version_id"),
            diff_id=data.get("diff_id"),
            started_at=parse_optional_timestamp(data.get("started_at")),
            finished_at=parse_optional_timestamp(data.get("finished_at")),
        )

    @property
    def is_finished(self) -> bool:
        return self.status in ("succeeded", "failed")


@dataclass
class PlanVersionRecord:
    """
    One generated version of a goal's plan.

    `raw_response` is the model output as the server stored it. It is only
    ever checked for the presence of keys, never validated.
    """

    id: str
    plan_id: str
    version: int
    created_at: datetime
    prompt_hash: str | None = None
    raw_response: dict | None = None
    objectives: list[ObjectiveRecord] = field(default_factory=list)
    dependencies: list[dict] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "PlanVersionRecord":
        raw = data.get("raw_response")
        return cls(
            id=_require(data, "id", "plan version"),
            plan_id=_require(data, "plan_id", "plan version"),
            version=int(_require(data, "version", "plan version")),
            created_at=parse_timestamp(_require(data, "created_at", "plan version")),
            prompt_hash=data.get("prompt_hash"),
            raw_response=raw if isinstance(raw, dict) else None,
            objectives=[ObjectiveRecord.from_api(o) for o in data.get("objectives") or []],
            dependencies=list(data.get("dependencies") or []),
        )

    @property
    def has_plan(self) -> bool:
        return self.raw_response is not None and "plan" in self.raw_response

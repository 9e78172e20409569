"""Goal repository interface."""

from typing import Protocol

from levelup.core.records import GoalRecord, JobStatusRecord, PlanVersionRecord


class GoalRepository(Protocol):
    """Interface for fetching goal and plan records from any backend."""

    def fetch_goals(self) -> list[GoalRecord]:
        """Fetch all goals."""
        ...

    def fetch_job(self, job_id: str) -> JobStatusRecord:
        """Fetch the status of a plan-generation job."""
        ...

    def fetch_plan_version(self, version_id: str) -> PlanVersionRecord:
        """Fetch one version of a plan."""
        ...

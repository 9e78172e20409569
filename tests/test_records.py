"""Tests for upstream API record decoding."""

from datetime import datetime, timezone

import pytest

from levelup.core.dates import InvalidTimestampError
from levelup.core.goals import GoalStatus, ObjectiveStatus
from levelup.core.records import (
    AuthRecord,
    GoalRecord,
    JobStatusRecord,
    PlanVersionRecord,
    RecordError,
)


class TestAuthRecord:
    def test_no_timezone_expires_at(self):
        record = AuthRecord.from_api({"token": "t", "expires_at": "2026-01-12T18:27:02", "device_id": "dev"})
        assert record.token == "t"
        assert record.device_id == "dev"
        assert record.expires_at == datetime(2026, 1, 12, 18, 27, 2, tzinfo=timezone.utc)

    def test_missing_token(self):
        with pytest.raises(RecordError, match="token"):
            AuthRecord.from_api({"expires_at": "2026-01-12T18:27:02", "device_id": "dev"})


class TestGoalRecord:
    @pytest.fixture
    def payload(self):
        return {
            "id": "186a09f8-7335-4850-bf69-5e08cff10bbb",
            "title": "Launch my product",
            "description": None,
            "target_date": None,
            "status": "active",
            "created_at": "2025-12-13T18:29:21.349613",
            "updated_at": "2025-12-13T18:29:21.349613",
            "last_path_generated_at": None,
        }

    def test_fractional_no_timezone_created_at(self, payload):
        record = GoalRecord.from_api(payload)
        assert record.id == "186a09f8-7335-4850-bf69-5e08cff10bbb"
        assert record.status == "active"
        assert record.description == ""
        assert record.target_date is None
        assert record.created_at == datetime(2025, 12, 13, 18, 29, 21, 349613, tzinfo=timezone.utc)

    def test_bad_timestamp_propagates(self, payload):
        payload["created_at"] = "last tuesday"
        with pytest.raises(InvalidTimestampError) as exc_info:
            GoalRecord.from_api(payload)
        assert exc_info.value.value == "last tuesday"

    def test_numeric_timestamp_raises_invalid_timestamp(self, payload):
        payload["created_at"] = 1765645200
        with pytest.raises(InvalidTimestampError) as exc_info:
            GoalRecord.from_api(payload)
        assert exc_info.value.value == 1765645200

    def test_to_goal(self, payload):
        payload["objectives"] = [
            {
                "id": "o1",
                "title": "Write landing page",
                "estimated_hours": 1.5,
                "points_value": 120,
                "tier": "Foundation",
                "position": 0,
                "status": "completed",
            },
            {"id": "o2", "title": "Ship", "status": "something-new"},
        ]
        goal = GoalRecord.from_api(payload).to_goal()

        assert goal.id == payload["id"]
        assert goal.status is GoalStatus.ACTIVE
        assert goal.is_pinned is False
        assert goal.created_at == datetime(2025, 12, 13, 18, 29, 21, 349613, tzinfo=timezone.utc)
        assert [o.status for o in goal.objectives] == [ObjectiveStatus.COMPLETED, ObjectiveStatus.AVAILABLE]
        assert goal.objectives[0].formatted_estimate == "1h 30m"
        assert goal.progress_percentage == 0.5


class TestJobStatusRecord:
    def test_decodes_with_id_field(self):
        record = JobStatusRecord.from_api(
            {
                "id": "e50d243f-2112-4d29-9823-abe1d6ce79bf",
                "goal_id": "a6b52e73-6d7e-483d-9b55-62b5c766bfa8",
                "plan_id": "8e3f9e09-2d6b-49d8-ad9d-a9a4d5be4441",
                "type": "initial",
                "status": "queued",
                "error": None,
                "plan_version_id": None,
                "diff_id": None,
                "started_at": None,
                "finished_at": None,
                "created_at": "2025-12-13T18:46:03.599698",
            }
        )
        assert record.id == "e50d243f-2112-4d29-9823-abe1d6ce79bf"
        assert record.status == "queued"
        assert record.plan_id == "8e3f9e09-2d6b-49d8-ad9d-a9a4d5be4441"
        assert record.started_at is None
        assert record.is_finished is False

    def test_finished(self):
        record = JobStatusRecord.from_api(
            {
                "id": "j",
                "status": "succeeded",
                "created_at": "2025-12-13T18:46:03Z",
                "finished_at": "2025-12-13T18:47:03.1+00:00",
            }
        )
        assert record.is_finished is True
        assert record.finished_at == datetime(2025, 12, 13, 18, 47, 3, 100000, tzinfo=timezone.utc)


class TestPlanVersionRecord:
    def test_decodes_plan_id_prompt_hash_raw_response(self):
        record = PlanVersionRecord.from_api(
            {
                "id": "470e4411-0c07-4b2f-a653-9f1b754a615e",
                "plan_id": "2f26e2c9-f9d4-458c-8557-d19206b201d2",
                "version": 1,
                "prompt_hash": "f7416777143473a4",
                "raw_response": {"plan": {"title": "T", "deadline_days": 108}},
                "created_at": "2025-12-13T18:46:03.599698",
                "objectives": [],
                "dependencies": [],
            }
        )
        assert record.plan_id == "2f26e2c9-f9d4-458c-8557-d19206b201d2"
        assert record.prompt_hash == "f7416777143473a4"
        assert record.has_plan is True
        assert record.raw_response["plan"]["deadline_days"] == 108

    def test_missing_raw_response(self):
        record = PlanVersionRecord.from_api(
            {"id": "v", "plan_id": "p", "version": 2, "created_at": "2025-12-13T18:46:03"}
        )
        assert record.raw_response is None
        assert record.has_plan is False

    def test_missing_plan_id(self):
        with pytest.raises(RecordError, match="plan_id"):
            PlanVersionRecord.from_api({"id": "v", "version": 1, "created_at": "2025-12-13T18:46:03"})

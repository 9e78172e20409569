"""Task domain type - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from .dates import parse_optional_timestamp, parse_timestamp


@dataclass
class Task:
    """A to-do item, optionally with a due instant."""

    title: str
    created_at: datetime
    updated_at: datetime
    due_date: datetime | None = None
    notes: str = ""
    is_done: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))

    @classmethod
    def from_api(cls, data: dict) -> "Task":
        """Create Task from a stored or API task record."""
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            notes=data.get("notes") or "",
            is_done=bool(data.get("is_done", False)),
            due_date=parse_optional_timestamp(data.get("due_date")),
            created_at=parse_timestamp(data["created_at"]),
            updated_at=parse_timestamp(data.get("updated_at") or data["created_at"]),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "notes": self.notes,
            "is_done": self.is_done,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

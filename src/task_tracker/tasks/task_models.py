# src/task_tracker/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

# Fractional seconds of any length (RFC 3339 allows nanoseconds) -> microseconds.
_FRACTION_RE = re.compile(r"\.(\d+)")


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values are stored verbatim in the JSON document.
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.TODO
        try:
            return cls(raw)
        except ValueError:
            return cls.TODO


def parse_timestamp(raw: str) -> datetime:
    if not isinstance(raw, str):
        raise TypeError(f"timestamp must be a string, got {raw!r}")
    value = raw.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    value = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value)
    return datetime.fromisoformat(value)


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """
        Build a Task from one JSON entry.

        Raises KeyError / ValueError / TypeError on malformed entries;
        the store wraps those into TaskStoreError.
        """
        if not isinstance(data, dict):
            raise TypeError(f"task entry must be an object, got {type(data).__name__}")
        task_id = data["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise TypeError(f"task id must be an integer, got {task_id!r}")
        return cls(
            id=task_id,
            description=str(data.get("description") or ""),
            status=TaskStatus.from_raw(data.get("status")),
            created_at=parse_timestamp(data["createdAt"]),
            updated_at=parse_timestamp(data["updatedAt"]),
        )

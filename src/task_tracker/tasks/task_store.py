# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Statuses a task can be moved to explicitly (todo is only set on add).
SETTABLE_STATUSES = frozenset({TaskStatus.IN_PROGRESS, TaskStatus.DONE})
LIST_FILTERS = ("all", *(s.value for s in TaskStatus))


class TaskStoreError(RuntimeError):
    """Raised when the task file cannot be read, parsed or written."""


def _now() -> datetime:
    return datetime.now().astimezone()


class TaskStore:
    """
    JSON-file task store.

    Every operation is a full read-modify-write cycle:
    - load the whole collection from the file,
    - apply one change in memory,
    - write the whole collection back.

    Nothing is cached between calls; the file is the only state.
    No locking: two processes writing at once can lose updates.
    """

    def __init__(self, path: str | Path = "tasks.json", *, clock: Clock | None = None) -> None:
        self._path = Path(path)
        self._clock: Clock = clock or _now
        logger.debug("TaskStore path=%s", self._path)

    # ---- low-level helpers ----

    def _write_text(self, text: str) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskStoreError(f"failed to write {self._path}: {e}") from e

    @staticmethod
    def _next_id(tasks: list[Task]) -> int:
        return max((t.id for t in tasks), default=0) + 1

    @staticmethod
    def _find(tasks: list[Task], task_id: int) -> Task | None:
        for task in tasks:
            if task.id == task_id:
                return task
        return None

    @staticmethod
    def _check_description(description: str) -> str:
        if not description or not description.strip():
            raise ValueError("description is required")
        return description

    # ---- persistence ----

    def load(self) -> list[Task]:
        """
        Read the whole collection.

        A missing file is created with an empty array. Any other read
        error, malformed JSON or malformed entry raises TaskStoreError.
        """
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.info("%s not found, creating an empty task file", self._path)
            self._write_text("[]")
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise TaskStoreError(f"failed to read {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise TaskStoreError(f"failed to parse {self._path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise TaskStoreError(
                f"failed to parse {self._path}: expected a JSON array, got {type(data).__name__}"
            )

        tasks: list[Task] = []
        for idx, entry in enumerate(data):
            try:
                tasks.append(Task.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                raise TaskStoreError(f"failed to parse {self._path}: bad task at index {idx}: {e!r}") from e

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Serialize the whole collection (2-space indent) and replace the file."""
        try:
            text = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise TaskStoreError(f"failed to encode tasks: {e}") from e
        self._write_text(text)
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)

    # ---- public API ----

    def add_task(self, description: str) -> Task:
        description = self._check_description(description)
        tasks = self.load()
        now = self._clock()
        task = Task(
            id=self._next_id(tasks),
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        tasks.append(task)
        self.save(tasks)
        logger.info("Task added id=%s", task.id)
        return task

    def update_task(self, task_id: int, description: str) -> Task | None:
        description = self._check_description(description)
        tasks = self.load()
        task = self._find(tasks, task_id)
        if task is None:
            logger.debug("update: task id=%s not found", task_id)
            return None
        task.description = description
        task.updated_at = self._clock()
        self.save(tasks)
        logger.info("Task updated id=%s", task_id)
        return task

    def delete_task(self, task_id: int) -> bool:
        """
        Remove the task with the given id.

        The file is rewritten even when nothing matched.
        Returns True if a task was removed.
        """
        tasks = self.load()
        kept = [t for t in tasks if t.id != task_id]
        self.save(kept)
        removed = len(kept) != len(tasks)
        logger.info("Task delete id=%s removed=%s", task_id, removed)
        return removed

    def set_status(self, task_id: int, status: TaskStatus | str) -> Task | None:
        try:
            new_status = TaskStatus(status)
        except ValueError:
            new_status = None
        if new_status not in SETTABLE_STATUSES:
            raise ValueError(f"invalid status {status!r}, use 'in-progress' or 'done'")

        tasks = self.load()
        task = self._find(tasks, task_id)
        if task is None:
            logger.debug("set_status: task id=%s not found", task_id)
            return None
        task.status = new_status
        task.updated_at = self._clock()
        self.save(tasks)
        logger.info("Task status id=%s status=%s", task_id, new_status.value)
        return task

    def list_tasks(self, status_filter: str = "all") -> list[Task]:
        """Return tasks whose status equals the filter, or every task for "all"."""
        if status_filter not in LIST_FILTERS:
            raise ValueError(f"invalid filter {status_filter!r}, use one of: {', '.join(LIST_FILTERS)}")
        tasks = self.load()
        if status_filter == "all":
            return tasks
        return [t for t in tasks if t.status == status_filter]

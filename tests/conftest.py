# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(tasks_path: Path, clock: FakeClock) -> TaskStore:
    """Real JSON store in a per-test directory, with a deterministic clock."""
    return TaskStore(tasks_path, clock=clock)


@pytest.fixture()
def settings(tasks_path: Path) -> Settings:
    return Settings(tasks_path=tasks_path, log_level="WARNING", log_file=None)

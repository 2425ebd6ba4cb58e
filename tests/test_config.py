# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from task_tracker.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in ("TASK_CLI_TASKS_PATH", "TASK_CLI_LOG_LEVEL", "TASK_CLI_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.tasks_path == Path("tasks.json")
    assert s.log_level == "WARNING"
    assert s.console_level == logging.WARNING
    assert s.log_file is None


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_CLI_TASKS_PATH", str(tmp_path / "mine.json"))
    monkeypatch.setenv("TASK_CLI_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_CLI_LOG_FILE", str(tmp_path / "task-cli.log"))

    s = Settings.from_env()

    assert s.tasks_path == tmp_path / "mine.json"
    assert s.console_level == logging.DEBUG
    assert s.log_file == tmp_path / "task-cli.log"


def test_invalid_values_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("TASK_CLI_TASKS_PATH", "   ")
    monkeypatch.setenv("TASK_CLI_LOG_LEVEL", "loud")

    s = Settings.from_env()

    assert s.tasks_path == Path("tasks.json")
    assert s.log_level == "WARNING"

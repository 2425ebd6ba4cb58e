# tests/test_main.py

from __future__ import annotations

import json

import pytest

from task_tracker.cli import main as cli_main


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch) -> None:
    # setup_logging replaces root handlers, which would also drop pytest's capture handlers.
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)


def test_main_runs_command_and_prints_reply(settings, tasks_path, capsys) -> None:
    assert cli_main.main(["add", "buy milk"], settings=settings) == 0
    assert capsys.readouterr().out == "Task added successfully (ID: 1)\n"

    data = json.loads(tasks_path.read_text("utf-8"))
    assert data[0]["description"] == "buy milk"
    assert data[0]["status"] == "todo"


def test_main_usage_and_not_found_exit_zero(settings, capsys) -> None:
    assert cli_main.main([], settings=settings) == 0
    assert cli_main.main(["update", "abc", "x"], settings=settings) == 0
    assert cli_main.main(["mark-done", "7"], settings=settings) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Usage: task-cli <command> [arguments]",
        "Invalid ID",
        "Task with ID 7 not found",
    ]


def test_main_empty_list_prints_nothing(settings, capsys) -> None:
    assert cli_main.main(["list"], settings=settings) == 0
    assert capsys.readouterr().out == ""


def test_main_malformed_file_exits_non_zero(settings, tasks_path, capsys) -> None:
    tasks_path.write_text("[{broken", "utf-8")

    assert cli_main.main(["list"], settings=settings) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: failed to parse")
    assert tasks_path.read_text("utf-8") == "[{broken"


def test_run_exits_with_status(settings, tasks_path, monkeypatch) -> None:
    tasks_path.write_text("42", "utf-8")
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr("sys.argv", ["task-cli", "add", "x"])

    with pytest.raises(SystemExit) as exc:
        cli_main.run()
    assert exc.value.code == 1


@pytest.mark.parametrize(
    "raw",
    [b"\xff\xfe[]", ("[" * 100000 + "]" * 100000).encode()],
)
def test_main_corrupt_file_reports_error_instead_of_traceback(
    settings, tasks_path, capsys, raw: bytes
) -> None:
    tasks_path.write_bytes(raw)

    assert cli_main.main(["list"], settings=settings) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: failed to ")

# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime

from ..tasks.task_models import Task, TaskStatus
from ..tasks.task_store import LIST_FILTERS, TaskStore

PROG = "task-cli"

_ID_RE = re.compile(r"[+-]?[0-9]+")

CommandHandler = Callable[[TaskStore, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Positional-argument command registry (add, update, delete, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str = "",
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (usage, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def names(self) -> list[str]:
        return list(self._help)

    def handle(self, store: TaskStore, argv: list[str]) -> str:
        """
        Dispatch argv like ["update", "3", "new text"].
        Returns the text to print (possibly empty).

        TaskStoreError is not caught here; the entrypoint turns it into
        a non-zero exit.
        """
        if not argv:
            return f"Usage: {PROG} <command> [arguments]"

        name = argv[0]
        args = argv[1:]

        handler = self._handlers.get(name.lower())
        if not handler:
            return f"Unknown command: {name}\nAvailable commands: {', '.join(self.names())}"

        logger.debug("Dispatch command=%s args=%s", name, args)
        return handler(store, args)

    def build_help(self) -> str:
        lines = [f"Usage: {PROG} <command> [arguments]", "", "Commands:"]
        width = max((len(f"{n} {u}".strip()) for n, (u, _) in self._help.items()), default=0)
        for name, (usage, help_text) in self._help.items():
            lines.append(f"  {f'{name} {usage}'.strip():<{width}}  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _usage(command: str, args: str) -> str:
    return f"Usage: {PROG} {command} {args}"


def _parse_id(raw: str) -> int | None:
    # Optional sign and ASCII digits only: no spaces, underscores or other scripts' digits.
    if not _ID_RE.fullmatch(raw):
        return None
    return int(raw)


def _fmt_ts(ts: datetime) -> str:
    # RFC 1123 layout, in the local zone so %Z is an abbreviation (CEST, UTC, ...)
    return ts.astimezone().strftime("%a, %d %b %Y %H:%M:%S %Z").rstrip()


def format_task(task: Task) -> str:
    return (
        f"ID: {task.id}\n"
        f"Description: {task.description}\n"
        f"Status: {task.status.value}\n"
        f"Created At: {_fmt_ts(task.created_at)}\n"
        f"Updated At: {_fmt_ts(task.updated_at)}\n"
    )


def cmd_help(store: TaskStore, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(store: TaskStore, args: list[str]) -> str:
    if not args:
        return _usage("add", "<description>")
    try:
        task = store.add_task(" ".join(args))
    except ValueError:
        return "Description must not be empty"
    return f"Task added successfully (ID: {task.id})"


def cmd_update(store: TaskStore, args: list[str]) -> str:
    if len(args) < 2:
        return _usage("update", "<id> <description>")
    task_id = _parse_id(args[0])
    if task_id is None:
        return "Invalid ID"
    try:
        task = store.update_task(task_id, " ".join(args[1:]))
    except ValueError:
        return "Description must not be empty"
    if task is None:
        return f"Task with ID {task_id} not found"
    return f"Task updated successfully (ID: {task_id})"


def cmd_delete(store: TaskStore, args: list[str]) -> str:
    if not args:
        return _usage("delete", "<id>")
    task_id = _parse_id(args[0])
    if task_id is None:
        return "Invalid ID"
    if not store.delete_task(task_id):
        return f"Task with ID {task_id} not found"
    return f"Task deleted successfully (ID: {task_id})"


def _mark(command: str, status: TaskStatus) -> CommandHandler:
    def handler(store: TaskStore, args: list[str]) -> str:
        if not args:
            return _usage(command, "<id>")
        task_id = _parse_id(args[0])
        if task_id is None:
            return "Invalid ID"
        task = store.set_status(task_id, status)
        if task is None:
            return f"Task with ID {task_id} not found"
        return f"Task marked as '{status.value}' (ID: {task_id})"

    handler.__name__ = f"cmd_{command.replace('-', '_')}"
    return handler


cmd_mark_in_progress = _mark("mark-in-progress", TaskStatus.IN_PROGRESS)
cmd_mark_done = _mark("mark-done", TaskStatus.DONE)


def cmd_list(store: TaskStore, args: list[str]) -> str:
    """
    list          -> every task
    list <status> -> tasks with that status (todo | in-progress | done | all)
    """
    status_filter = args[0].lower() if args else "all"
    if status_filter not in LIST_FILTERS:
        return _usage("list", f"[{'|'.join(LIST_FILTERS[1:])}|all]")
    tasks = store.list_tasks(status_filter)
    return "\n".join(format_task(t) for t in tasks)


registry.register("add", cmd_add, help_text="Add a new task.", usage="<description>")
registry.register(
    "update", cmd_update, help_text="Change a task's description.", usage="<id> <description>"
)
registry.register("delete", cmd_delete, help_text="Delete a task.", usage="<id>")
registry.register(
    "mark-in-progress", cmd_mark_in_progress, help_text="Mark a task as in progress.", usage="<id>"
)
registry.register("mark-done", cmd_mark_done, help_text="Mark a task as done.", usage="<id>")
registry.register(
    "list",
    cmd_list,
    help_text="List tasks, optionally filtered by status.",
    usage="[todo|in-progress|done|all]",
)
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["-h", "--help"])

# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the TaskStore from settings, dispatches one
command and maps storage failures to a non-zero exit status.
"""

from __future__ import annotations

import logging
import sys

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore, TaskStoreError
from .commands import registry

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    """
    Run one command and return the process exit status.

    Usage errors and not-found conditions are normal replies (status 0);
    a TaskStoreError means the task file could not be read or written (status 1).
    """
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    setup_logging(console_level=settings.console_level, log_file=settings.log_file)

    store = TaskStore(settings.tasks_path)
    try:
        reply = registry.handle(store, argv)
    except TaskStoreError as e:
        logger.debug("Command failed argv=%s", argv, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if reply:
        print(reply)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

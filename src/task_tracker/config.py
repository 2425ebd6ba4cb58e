# src/task_tracker/config.py

"""Settings loaded from environment variables (+ optional .env).

- One frozen Settings object for the whole app.
- Invalid values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_CLI"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_log_level(name: str, default: str) -> str:
    raw = _env(name, default).strip().upper()
    return raw if raw in _LOG_LEVELS else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    tasks_path: Path

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    @property
    def console_level(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            tasks_path=_env_path(_k("TASKS_PATH"), None) or Path("tasks.json"),
            log_level=_env_log_level(_k("LOG_LEVEL"), "WARNING"),
            log_file=_env_path(_k("LOG_FILE"), None),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

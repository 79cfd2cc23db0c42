# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing here touches task data; tasks are never written to disk.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKTRACK"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App ----
    app_name: str
    prompt: str

    # ---- Logging ----
    log_level: str
    log_file_enabled: bool
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Personal Task Manager").strip() or "Personal Task Manager"
        # The prompt keeps its trailing space, so no strip here.
        prompt = _env(_k("PROMPT"), "> ") or "> "

        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file_enabled = _env_bool(_k("LOG_FILE_ENABLED"), False)
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/task_tracker"))

        return Settings(
            app_name=app_name,
            prompt=prompt,
            log_level=log_level,
            log_file_enabled=log_file_enabled,
            log_dir=log_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Every value has a usable default; nothing is required at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKPAD"

STORAGE_BACKENDS = ("json", "sqlite", "memory")

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


def _default_storage_file(backend: str) -> str:
    return "tasks.sqlite3" if backend == "sqlite" else "tasks.json"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Storage ----
    storage_backend: str
    storage_key: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        storage_backend = _env(_k("STORAGE_BACKEND"), "json").strip().lower() or "json"
        storage_key = _env(_k("STORAGE_KEY"), "tasks").strip() or "tasks"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / _default_storage_file(storage_backend))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            storage_backend=storage_backend,
            storage_key=storage_key,
            data_dir=data_dir,
            storage_path=storage_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

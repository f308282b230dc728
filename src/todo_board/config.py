# src/todo_board/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a working default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TODO_BOARD"

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


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Remote task service ----
    api_base_url: str
    tasks_path: str
    http_timeout_seconds: Optional[float]
    offline: bool

    # ---- Board ----
    owner_id: int
    page_size: int
    mock_year_month: str

    @property
    def tasks_url(self) -> str:
        return self.api_base_url.rstrip("/") + "/" + self.tasks_path.lstrip("/")

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-board").strip() or "todo-board"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo_board"))

        api_base_url = _env(_k("API_BASE_URL"), "https://jsonplaceholder.typicode.com").strip()
        tasks_path = _env(_k("TASKS_PATH"), "/todos").strip() or "/todos"
        # None keeps the transport default.
        http_timeout_seconds = _env_float(_k("HTTP_TIMEOUT_SECONDS"), None)
        offline = _env_bool(_k("OFFLINE"), False)

        owner_id = _env_int(_k("OWNER_ID"), 1)
        page_size = _env_int(_k("PAGE_SIZE"), 10)
        if page_size <= 0:
            page_size = 10
        mock_year_month = _env(_k("MOCK_YEAR_MONTH"), "2024-07").strip() or "2024-07"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            api_base_url=api_base_url,
            tasks_path=tasks_path,
            http_timeout_seconds=http_timeout_seconds,
            offline=offline,
            owner_id=owner_id,
            page_size=page_size,
            mock_year_month=mock_year_month,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

# src/todo_board/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) log directory exists,
- wires the concrete task service into a TaskBoard.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.board import TaskBoard
from ..core.ports import TaskService
from ..tasks.offline import OfflineTaskClient
from ..tasks.task_client import HttpTaskClient

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_task_service(settings) -> TaskService:
    if getattr(settings, "offline", False):
        logger.info("Offline mode: using built-in demo tasks.")
        return OfflineTaskClient()
    return HttpTaskClient.from_settings(settings)


def create_board(*, settings=None, service: TaskService | None = None) -> TaskBoard:
    """
    Create a TaskBoard from the provided settings.

    Keeping settings and the service injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if service is None:
        service = create_task_service(settings)

    return TaskBoard(
        service,
        owner_id=settings.owner_id,
        page_size=settings.page_size,
        year_month=settings.mock_year_month,
    )

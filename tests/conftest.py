# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_board.core.board import TaskBoard

from .fakes import FakeTaskService

TODAY = "2024-07-15"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the board.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        data_dir=tmp_path / "data",
        tasks_url="https://example.test/todos",
        http_timeout_seconds=None,
        offline=True,
        owner_id=1,
        page_size=10,
        mock_year_month="2024-07",
    )


@pytest.fixture()
def service() -> FakeTaskService:
    return FakeTaskService()


@pytest.fixture()
def board(service: FakeTaskService) -> TaskBoard:
    """TaskBoard over the fake service with a fixed 'today'."""
    return TaskBoard(service, today=lambda: TODAY)

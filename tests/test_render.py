# tests/test_render.py

from __future__ import annotations

import httpx
import pytest

from todo_board.connectors.pager import BREAK, Pager, pager_items
from todo_board.connectors.render import render_board
from todo_board.core.board import TaskBoard
from todo_board.tasks.task_client import TaskServiceError

from .fakes import FakeTaskService, make_records


def test_pager_items_window_and_breaks() -> None:
    assert pager_items(0, 0) == []
    assert pager_items(2, 1) == [0, 1]
    assert pager_items(20, 0) == [0, 1, 2, BREAK, 17, 18, 19]
    assert pager_items(20, 10) == [0, 1, 2, BREAK, 9, 10, 11, BREAK, 17, 18, 19]
    assert pager_items(5, 2) == [0, 1, 2, 3, 4]


def test_pager_keeps_requests_in_range() -> None:
    pages: list[int] = []
    pager = Pager(pages.append)

    assert pager.goto(-4, 3) is True
    assert pager.goto(8, 3) is True
    assert pager.next(2, 3) is False
    assert pager.prev(0, 3) is False
    assert pager.goto(0, 0) is False
    assert pages == [0, 2]


def test_loading_screen(board: TaskBoard) -> None:
    assert render_board(board.view()) == ["Loading..."]


@pytest.mark.asyncio
async def test_error_screen_shows_only_message(board: TaskBoard, service: FakeTaskService) -> None:
    request = httpx.Request("GET", "https://example.test/todos")
    err = TaskServiceError("GET failed")
    err.__cause__ = httpx.ConnectError("refused", request=request)
    service.fetch_error = err

    await board.load()

    assert render_board(board.view()) == ["Error: Network Error"]


@pytest.mark.asyncio
async def test_list_screen(board: TaskBoard, service: FakeTaskService) -> None:
    service.records = make_records(12)
    await board.load()
    board.set_pending("Buy milk")

    lines = render_board(board.view())

    assert lines[0] == "Todo List"
    assert 'New todo: "Buy milk" (use /add to submit)' in lines
    assert "- task number 0  [Pending]" in lines
    assert "- task number 1  [Completed]" in lines
    assert "  Date: 2024-07-1" in lines
    assert "- task number 10  [Pending]" not in lines
    assert lines[-1] == "← Prev [1] 2 Next →"


@pytest.mark.asyncio
async def test_empty_page_message(board: TaskBoard, service: FakeTaskService) -> None:
    service.records = make_records(12)
    await board.load()
    board.change_page(1)
    board.set_search("no such title")

    lines = render_board(board.view())

    assert "(no todos on this page)" in lines
    assert 'Filter: search="no such title"' in lines

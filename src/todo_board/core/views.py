# src/todo_board/core/views.py

"""
Derived views over the source list: search/date filter and pagination.

All functions are pure; callers hand in an immutable snapshot and get a new tuple back.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from ..tasks.task_models import Task

DEFAULT_PAGE_SIZE = 10

T = TypeVar("T")


def task_matches(task: Task, search: str, filter_date: str) -> bool:
    if search and search.lower() not in task.title.lower():
        return False
    if filter_date and task.display_date != filter_date:
        return False
    return True


def filter_tasks(tasks: Sequence[Task], search: str = "", filter_date: str = "") -> tuple[Task, ...]:
    return tuple(t for t in tasks if task_matches(t, search, filter_date))


def page_count(total: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    if total <= 0:
        return 0
    return -(-total // page_size)


def paginate(items: Sequence[T], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> tuple[T, ...]:
    """
    Contiguous slice [page*size, page*size+size).

    An out-of-range page yields an empty tuple.
    """
    start = page * page_size
    if start < 0:
        return ()
    return tuple(items[start : start + page_size])

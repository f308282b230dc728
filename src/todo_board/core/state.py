# src/todo_board/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import Task


@dataclass
class BoardState:
    """
    View state owned by one TaskBoard.

    `tasks` is the source list. It is always replaced, never mutated in place,
    so any reader holding the old tuple keeps a consistent snapshot.
    """

    tasks: tuple[Task, ...] = ()
    loading: bool = True
    error: BaseException | None = None

    page: int = 0
    pending: str = ""
    search: str = ""
    filter_date: str = ""


@dataclass(frozen=True, slots=True)
class BoardView:
    """Everything the renderer needs for one pass."""

    loading: bool
    error: BaseException | None
    search: str
    filter_date: str
    pending: str
    page: int
    page_size: int
    page_count: int
    total: int
    filtered: tuple[Task, ...]
    items: tuple[Task, ...] = field(default_factory=tuple)

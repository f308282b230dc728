# src/todo_board/core/board.py

from __future__ import annotations

"""
TaskBoard: the single view component.

Owns one BoardState and the two writers of its source list:
- load(): one bulk read per activation, dates assigned by position,
- add_task(): create request, then an optimistic local prepend.

Filtering and paging are derived in view() on every call.

Neither network call is cancellable. If the board is discarded while a request
is in flight, the late completion still writes into this (now unobserved) state.
"""

import logging
from collections.abc import Callable

from .ports import TaskService
from .state import BoardState, BoardView
from .views import DEFAULT_PAGE_SIZE, filter_tasks, page_count, paginate
from ..tasks.task_models import DEFAULT_YEAR_MONTH, Task, mock_display_date, today_iso

logger = logging.getLogger(__name__)


class TaskBoard:
    def __init__(
        self,
        service: TaskService,
        *,
        owner_id: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        year_month: str = DEFAULT_YEAR_MONTH,
        today: Callable[[], str] = today_iso,
    ) -> None:
        self.service = service
        self.owner_id = owner_id
        self.page_size = page_size
        self.year_month = year_month
        self._today = today
        self.state = BoardState()
        self._activated = False

    # -------------------- loader --------------------
    async def load(self) -> None:
        """Fetch the full collection once. Later calls are ignored."""
        if self._activated:
            logger.debug("Board already activated; load ignored.")
            return
        self._activated = True

        try:
            records = await self.service.fetch_tasks()
            tasks = tuple(
                Task.from_record(raw, display_date=mock_display_date(i, self.year_month))
                for i, raw in enumerate(records)
            )
        except Exception as e:
            logger.warning("Task load failed: %s", e, extra={"console": False})
            self.state.error = e
        else:
            self.state.tasks = tasks
            logger.info("Loaded %d tasks.", len(tasks))
        finally:
            self.state.loading = False

    # -------------------- add handler --------------------
    async def add_task(self) -> None:
        """
        Submit the pending text as a new task.

        Blank pending text: no request, no change.
        Failure: diagnostic log only; list and pending text stay as they were.
        """
        text = self.state.pending
        if not text.strip():
            return

        try:
            echo = await self.service.create_task(user_id=self.owner_id, title=text, completed=False)
            task = Task.from_record(echo, display_date=self._today(), require_id=False)
        except Exception:
            logger.exception("Error adding task", extra={"console": False})
            return

        # Re-read the source list: another add may have completed while we waited.
        self.state.tasks = (task, *self.state.tasks)
        self.state.pending = ""
        logger.debug("Added task id=%s", task.id)

    # -------------------- UI parameters --------------------
    def set_search(self, text: str) -> None:
        self.state.search = text

    def set_filter_date(self, value: str) -> None:
        self.state.filter_date = value

    def set_pending(self, text: str) -> None:
        self.state.pending = text

    def change_page(self, index: int) -> None:
        # The pager keeps the index in range; nothing is checked here.
        self.state.page = index

    # -------------------- derived view --------------------
    def view(self) -> BoardView:
        s = self.state
        filtered = filter_tasks(s.tasks, s.search, s.filter_date)
        return BoardView(
            loading=s.loading,
            error=s.error,
            search=s.search,
            filter_date=s.filter_date,
            pending=s.pending,
            page=s.page,
            page_size=self.page_size,
            page_count=page_count(len(filtered), self.page_size),
            total=len(s.tasks),
            filtered=filtered,
            items=paginate(filtered, s.page, self.page_size),
        )

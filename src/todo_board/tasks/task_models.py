# src/todo_board/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

DEFAULT_YEAR_MONTH = "2024-07"
MOCK_DATE_CYCLE = 30


def mock_display_date(index: int, year_month: str = DEFAULT_YEAR_MONTH) -> str:
    """
    Synthetic date for the record at `index` of a bulk load.

    Mock-data convenience only: it has no relation to when the task was created.
    The day is not zero-padded ("2024-07-1" ... "2024-07-30").
    """
    return f"{year_month}-{(index % MOCK_DATE_CYCLE) + 1}"


def today_iso() -> str:
    return datetime.now(UTC).date().isoformat()


@dataclass(frozen=True, slots=True)
class Task:
    id: Any
    title: str
    completed: bool
    user_id: Any
    display_date: str

    @classmethod
    def from_record(cls, raw: Mapping[str, Any], *, display_date: str, require_id: bool = True) -> Task:
        """
        Build a Task from a service record (bulk item or create echo).

        Raises ValueError for records that are not usable: no title, or no id
        when `require_id` is set. Create echoes are trusted as returned, so the
        add handler passes require_id=False.
        """
        if not isinstance(raw, Mapping):
            raise ValueError(f"Task record must be an object, got {type(raw).__name__}")
        if require_id and raw.get("id") is None:
            raise ValueError("Task record has no id")
        title = raw.get("title")
        if not isinstance(title, str):
            raise ValueError(f"Task record {raw.get('id')!r} has no title")

        return cls(
            id=raw.get("id"),
            title=title,
            completed=bool(raw.get("completed", False)),
            user_id=raw.get("userId"),
            display_date=display_date,
        )

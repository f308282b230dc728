# src/todo_board/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The board depends on a Protocol instead of a concrete HTTP client.
This keeps the remote service swappable (online / offline demo) and makes testing easier.
"""

from typing import Any, Protocol

TaskRecord = dict[str, Any]
# Raw service record: {"id": ..., "userId": ..., "title": "...", "completed": false}.


class TaskService(Protocol):
    """Remote task collection: bulk read + create."""

    async def fetch_tasks(self) -> list[TaskRecord]: ...

    async def create_task(self, *, user_id: Any, title: str, completed: bool = False) -> TaskRecord: ...

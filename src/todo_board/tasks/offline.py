# src/todo_board/tasks/offline.py

from __future__ import annotations

from typing import Any

from ..core.ports import TaskRecord

_SAMPLE_TITLES = (
    "delectus aut autem",
    "quis ut nam facilis et officia qui",
    "fugiat veniam minus",
    "et porro tempora",
    "laboriosam mollitia et enim quasi adipisci quia provident illum",
    "qui ullam ratione quibusdam voluptatem quia omnis",
    "illo expedita consequatur quia in",
    "quo adipisci enim quam ut ab",
    "molestiae perspiciatis ipsa",
    "make a phone call",
)


class OfflineTaskClient:
    """
    Offline deterministic task service used for demos when the network is unavailable.

    Behavior mirrors the public mock API:
    - fetch_tasks -> `count` records spread over 10 owners, every third one completed
    - create_task -> echoes the payload with the next id; nothing is stored
    """

    def __init__(self, count: int = 200) -> None:
        self.count = count
        self._next_id = count + 1

    async def fetch_tasks(self) -> list[TaskRecord]:
        per_user = max(1, self.count // 10)
        return [
            {
                "userId": i // per_user + 1,
                "id": i + 1,
                "title": _SAMPLE_TITLES[i % len(_SAMPLE_TITLES)],
                "completed": i % 3 == 0,
            }
            for i in range(self.count)
        ]

    async def create_task(self, *, user_id: Any, title: str, completed: bool = False) -> TaskRecord:
        # Ids continue after the bulk records and never repeat.
        task_id = self._next_id
        self._next_id += 1
        return {"userId": user_id, "title": title, "completed": completed, "id": task_id}

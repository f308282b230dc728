# src/todo_board/tasks/task_client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.ports import TaskRecord

logger = logging.getLogger(__name__)


class TaskServiceError(RuntimeError):
    """Remote task service call failed (transport, HTTP status, or payload shape)."""


def _make_timeout_obj(timeout_s: float | None) -> Any:
    """
    httpx.Timeout for an explicit value, or the httpx default when unset.
    """
    if timeout_s is None:
        return httpx.USE_CLIENT_DEFAULT
    return httpx.Timeout(timeout_s)


def friendly_error_message(err: BaseException) -> str:
    if isinstance(err, TaskServiceError) and err.__cause__ is not None:
        cause = err.__cause__
        if isinstance(cause, httpx.HTTPStatusError):
            return f"Request failed with status code {cause.response.status_code}"
        if isinstance(cause, httpx.TimeoutException):
            return "Request timed out"
        if isinstance(cause, httpx.TransportError):
            return "Network Error"
    msg = str(err).strip()
    return msg or err.__class__.__name__


class HttpTaskClient:
    """
    Async client for a JSONPlaceholder-style /todos collection.

    One instance wraps one httpx.AsyncClient. No retries, no cancellation.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_s: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self._timeout = _make_timeout_obj(timeout_s)
        self._client = client or httpx.AsyncClient()
        self._owns_client = client is None

    @classmethod
    def from_settings(cls, settings) -> HttpTaskClient:
        return cls(
            settings.tasks_url,
            timeout_s=getattr(settings, "http_timeout_seconds", None),
        )

    async def _request(self, method: str, *, json: Any = None) -> Any:
        logger.debug("%s %s", method, self.url)
        try:
            response = await self._client.request(method, self.url, json=json, timeout=self._timeout)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            raise TaskServiceError(f"{method} {self.url} failed: {e}") from e
        except ValueError as e:
            raise TaskServiceError(f"{method} {self.url} returned invalid JSON") from e

    async def fetch_tasks(self) -> list[TaskRecord]:
        data = await self._request("GET")
        if not isinstance(data, list):
            raise TaskServiceError(f"Expected a list of tasks, got {type(data).__name__}")
        return data

    async def create_task(self, *, user_id: Any, title: str, completed: bool = False) -> TaskRecord:
        data = await self._request(
            "POST",
            json={"userId": user_id, "title": title, "completed": completed},
        )
        if not isinstance(data, dict):
            raise TaskServiceError(f"Expected a task object, got {type(data).__name__}")
        return data

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

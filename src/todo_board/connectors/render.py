# src/todo_board/connectors/render.py

"""Text rendering of a BoardView.

Decisions:
- Three screens: loading, error (nothing else shown), list.
- Colour/strike-through only on a TTY; NO_COLOR disables, FORCE_COLOR forces.
- Pure: render_* return lines, printing is the connector's job.
"""

from __future__ import annotations

import os
import sys

from ..core.state import BoardView
from ..tasks.task_client import friendly_error_message
from ..tasks.task_models import Task
from .pager import BREAK, pager_items

TITLE = "Todo List"
PREV_LABEL = "← Prev"
NEXT_LABEL = "Next →"


def color_enabled() -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    force = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
    return force or sys.stdout.isatty()


def _style(text: str, code: str, enabled: bool) -> str:
    return f"\033[{code}m{text}\033[0m" if enabled else text


def render_loading() -> list[str]:
    return ["Loading..."]


def render_error(err: BaseException, *, colors: bool = False) -> list[str]:
    return [_style(f"Error: {friendly_error_message(err)}", "31", colors)]


def render_task(task: Task, *, colors: bool = False) -> list[str]:
    title = _style(task.title, "9", colors) if task.completed else task.title
    status = "Completed" if task.completed else "Pending"
    return [
        f"- {title}  [{status}]",
        "  " + _style(f"Date: {task.display_date}", "2", colors),
    ]


def render_pager(view: BoardView, *, colors: bool = False) -> str:
    if view.page_count <= 0:
        return ""
    parts = [PREV_LABEL if view.page > 0 else _style(PREV_LABEL, "2", colors)]
    for item in pager_items(view.page_count, view.page):
        if item == BREAK:
            parts.append(BREAK)
        elif item == view.page:
            parts.append(_style(f"[{item + 1}]", "1;7", colors))
        else:
            parts.append(str(item + 1))
    last = view.page >= view.page_count - 1
    parts.append(_style(NEXT_LABEL, "2", colors) if last else NEXT_LABEL)
    return " ".join(parts)


def render_board(view: BoardView, *, colors: bool = False) -> list[str]:
    if view.loading:
        return render_loading()
    if view.error is not None:
        return render_error(view.error, colors=colors)

    lines = [_style(TITLE, "1", colors), ""]

    filters = []
    if view.search:
        filters.append(f'search="{view.search}"')
    if view.filter_date:
        filters.append(f"date={view.filter_date}")
    if filters:
        lines.append("Filter: " + ", ".join(filters))
    if view.pending:
        lines.append(f'New todo: "{view.pending}" (use /add to submit)')
    if filters or view.pending:
        lines.append("")

    if view.items:
        for task in view.items:
            lines.extend(render_task(task, colors=colors))
    else:
        lines.append(_style("(no todos on this page)", "2", colors))

    pager = render_pager(view, colors=colors)
    if pager:
        lines.append("")
        lines.append(pager)
    return lines

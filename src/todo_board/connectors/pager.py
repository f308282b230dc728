# src/todo_board/connectors/pager.py

from __future__ import annotations

"""
Page-index widget for the console.

It owns range handling: every request it hands to the board is already
within 0..page_count-1. The board itself never checks.
"""

from collections.abc import Callable
from typing import Union

BREAK = "..."

PagerItem = Union[int, str]


def pager_items(
    page_count: int,
    selected: int,
    *,
    range_displayed: int = 2,
    margin_displayed: int = 3,
) -> list[PagerItem]:
    """
    0-based page indexes to show, with BREAK markers for the gaps.

    Always shows `margin_displayed` pages at each end plus a window of
    `range_displayed` pages around `selected`.
    """
    if page_count <= 0:
        return []
    if page_count <= range_displayed:
        return list(range(page_count))

    left = range_displayed // 2
    right = range_displayed - left
    if selected > page_count - range_displayed / 2:
        right = page_count - selected
        left = range_displayed - right
    elif selected < range_displayed / 2:
        left = selected
        right = range_displayed - left

    out: list[PagerItem] = []
    for index in range(page_count):
        page = index + 1
        in_margin = page <= margin_displayed or page > page_count - margin_displayed
        in_window = selected - left <= index <= selected + right
        if in_margin or in_window:
            out.append(index)
        elif out and out[-1] != BREAK:
            out.append(BREAK)
    return out


class Pager:
    """Turns next/prev/goto requests into an in-range page index."""

    def __init__(self, on_page_change: Callable[[int], None]) -> None:
        self._on_page_change = on_page_change

    @staticmethod
    def _clamp(index: int, page_count: int) -> int | None:
        if page_count <= 0:
            return None
        return max(0, min(index, page_count - 1))

    def goto(self, index: int, page_count: int) -> bool:
        target = self._clamp(index, page_count)
        if target is None:
            return False
        self._on_page_change(target)
        return True

    def next(self, current: int, page_count: int) -> bool:
        if current >= page_count - 1:
            # Still recover from an out-of-range page left behind by filtering.
            if current > page_count - 1:
                return self.goto(page_count - 1, page_count)
            return False
        return self.goto(current + 1, page_count)

    def prev(self, current: int, page_count: int) -> bool:
        if current <= 0:
            return False
        return self.goto(min(current - 1, page_count - 1), page_count)

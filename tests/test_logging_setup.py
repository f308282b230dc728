# tests/test_logging_setup.py

from __future__ import annotations

import logging

from todo_board.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int, **extra) -> logging.LogRecord:
    record = logging.LogRecord(name, level, __file__, 1, "msg", None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("todo_board.cli.main", logging.INFO))
    assert not f.filter(_record("todo_board.core.board", logging.ERROR, console=False))
    assert not f.filter(_record("httpx", logging.WARNING))
    assert f.filter(_record("httpx", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))

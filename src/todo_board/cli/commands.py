# src/todo_board/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Union, cast

from ..connectors.pager import Pager
from ..core.board import TaskBoard

CommandEmitter = Callable[[str], None]
CommandResult = Union[str, None, Awaitable[Union[str, None]]]
CommandHandler2 = Callable[[TaskBoard, list[str]], CommandResult]
CommandHandler3 = Callable[[TaskBoard, list[str], Union[CommandEmitter, None]], CommandResult]
CommandHandler4 = Callable[[TaskBoard, list[str], Union[CommandEmitter, None], str], CommandResult]
CommandHandler = Union[CommandHandler2, CommandHandler3, CommandHandler4]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /search, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(
        self,
        board: TaskBoard,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string, "" for "handled, nothing to say", or None if not a command.

        Four-parameter handlers also get `text`: everything after the command word
        and its single separating space, untouched.
        """
        if not line.startswith("/"):
            return None

        name, _, text = line[1:].partition(" ")
        name = name.strip().lower()
        if not name:
            return "Empty command. Use /help to list available commands."

        args = text.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 4:
            result = cast(CommandHandler4, handler)(board, args, emit, text)
        elif nparams == 3:
            result = cast(CommandHandler3, handler)(board, args, emit)
        else:
            result = cast(CommandHandler2, handler)(board, args)

        if inspect.isawaitable(result):
            result = await result
        return "" if result is None else result

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(board: TaskBoard, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(board: TaskBoard, args: list[str]) -> str:
    view = board.view()
    return (
        "Status:\n"
        f"  Tasks loaded: {view.total}\n"
        f"  Matching: {len(view.filtered)}\n"
        f"  Search: {view.search or '-'}\n"
        f"  Date: {view.filter_date or '-'}\n"
        f"  Page: {view.page + 1} of {view.page_count}"
    )


def cmd_search(board: TaskBoard, args: list[str], emit: CommandEmitter | None, text: str) -> None:
    """
    /search text  -> case-insensitive title search
    /search       -> clear
    """
    board.set_search(text)


def cmd_date(board: TaskBoard, args: list[str]) -> None:
    """
    /date 2024-07-5  -> only tasks with exactly that date
    /date            -> clear
    """
    board.set_filter_date(args[0] if args else "")


def cmd_new(board: TaskBoard, args: list[str], emit: CommandEmitter | None, text: str) -> None:
    board.set_pending(text)


async def cmd_add(
    board: TaskBoard, args: list[str], emit: CommandEmitter | None = None, text: str = ""
) -> None:
    """
    /add text  -> set pending text (as typed) and submit it
    /add       -> submit the current pending text
    """
    if text.strip():
        board.set_pending(text)
    if emit and board.state.pending.strip():
        emit("Adding...")
    await board.add_task()


def cmd_page(board: TaskBoard, args: list[str]) -> str | None:
    view = board.view()
    if not args:
        return f"Page {view.page + 1} of {view.page_count}. Usage: /page N"
    try:
        number = int(args[0])
    except ValueError:
        return "Usage: /page N"
    if not Pager(board.change_page).goto(number - 1, view.page_count):
        return "No pages to show."
    return None


def cmd_next(board: TaskBoard, args: list[str]) -> None:
    view = board.view()
    Pager(board.change_page).next(view.page, view.page_count)


def cmd_prev(board: TaskBoard, args: list[str]) -> None:
    view = board.view()
    Pager(board.change_page).prev(view.page, view.page_count)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show loaded/matching counts and current filters.")
registry.register("search", cmd_search, help_text="Search titles: /search text (no text clears).", aliases=["s"])
registry.register("date", cmd_date, help_text="Filter by date: /date 2024-07-5 (no value clears).", aliases=["d"])
registry.register("new", cmd_new, help_text="Type a new todo without submitting: /new text.")
registry.register("add", cmd_add, help_text="Add a todo: /add text (no text submits /new text).", aliases=["a"])
registry.register("page", cmd_page, help_text="Go to page: /page N.", aliases=["p"])
registry.register("next", cmd_next, help_text="Next page.", aliases=["n"])
registry.register("prev", cmd_prev, help_text="Previous page.")

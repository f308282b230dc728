# src/todo_board/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.board import TaskBoard
from .render import color_enabled, render_board

logger = logging.getLogger(__name__)

PROMPT = ">>> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _clear_screen() -> None:
    if sys.stdout.isatty():
        print("\033[H\033[2J", end="", flush=True)


def _print_board(board: TaskBoard) -> None:
    _clear_screen()
    for line in render_board(board.view(), colors=color_enabled()):
        print(line)
    print()


async def _read_line(prompt: str) -> str:
    # input() blocks; keep the event loop free for in-flight requests.
    return await asyncio.to_thread(input, prompt)


async def run_console_loop(board: TaskBoard) -> None:
    logger.info("Console connector started.")

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    load = asyncio.create_task(board.load())
    _print_board(board)
    await load
    _print_board(board)

    if board.state.error is not None:
        # Error screen only; a fresh start is the only way out.
        logger.info("Console connector finished (load failed).")
        return

    print("Type /help for commands. Use /exit to quit.\n")

    while True:
        try:
            raw = await _read_line(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        user_input = raw.strip()
        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            # Plain text is what the user is typing into the "new todo" field, kept as typed.
            board.set_pending(raw)
            _print_board(board)
            continue

        try:
            cmd_response = await command_registry.handle(board, raw.lstrip(), emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        _print_board(board)
        if cmd_response:
            print(f"[{_ts_local()}] {cmd_response}\n")

    logger.info("Console connector finished.")

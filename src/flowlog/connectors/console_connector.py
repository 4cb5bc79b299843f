# src/flowlog/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_api import run_command

logger = logging.getLogger(__name__)


def _redraw(state: AppState) -> None:
    if state.dashboard is not None:
        state.dashboard.draw()


def _say(state: AppState, text: str) -> None:
    if state.dashboard is not None:
        state.dashboard.console.print(text, markup=False, highlight=False)
    else:
        print(text)


def handle_line(state: AppState, line: str) -> str | None:
    """
    One console input line.

    Slash commands are the direct handlers (task form, drag/drop, buttons);
    anything else goes through the free-text command interpreter, exactly as
    a recognized utterance would.
    """
    with state.lock:
        if line.startswith("/"):
            return command_registry.handle(state, line)
        run_command(state, line)
        return None


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    _redraw(state)
    _say(state, "Type /help for commands, /exit to quit.")

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        with state.lock:
            _redraw(state)
            if reply:
                _say(state, reply)

    logger.info("Console connector finished.")

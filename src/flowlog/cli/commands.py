# src/flowlog/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..connectors.voice_connector import start_voice_in_background
from ..core.state import AppState
from ..tasks import task_api
from ..ui.dashboard import SECTIONS

CommandHandler = Callable[[AppState, list[str]], str | None]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console (/help, /add, /move, ...)."""

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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string, or None if the line is not a command or the
        command has nothing to say beyond its toast.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Anything else is read as a spoken-style command, e.g. 'add task write report 30'.")
        return "\n".join(lines)


registry = CommandRegistry()


def _position(raw: str) -> int | None:
    """1-based position as shown in the timeline -> 0-based index."""
    raw = raw.rstrip(".")
    if not raw.isdigit() or int(raw) < 1:
        return None
    return int(raw) - 1


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str | None:
    """
    /add <name...> <duration>
    The last word is the duration, the rest is the name.
    """
    name = " ".join(args[:-1])
    duration = args[-1] if args else ""
    task_api.submit_task(state, name, duration)
    return None


def cmd_drag(state: AppState, args: list[str]) -> str | None:
    if len(args) != 1 or (idx := _position(args[0])) is None:
        return "Usage: /drag <position>"
    task_api.drag_start(state, idx)
    return None


def cmd_drop(state: AppState, args: list[str]) -> str | None:
    if len(args) != 1 or (idx := _position(args[0])) is None:
        return "Usage: /drop <position>"
    task_api.drop(state, idx)
    return None


def cmd_move(state: AppState, args: list[str]) -> str | None:
    if len(args) != 2:
        return "Usage: /move <from> <to>"
    src, dst = _position(args[0]), _position(args[1])
    if src is None or dst is None:
        return "Usage: /move <from> <to>"
    task_api.move_task(state, src, dst)
    return None


def cmd_theme(state: AppState, args: list[str]) -> str:
    return f"Theme: {task_api.toggle_theme(state)}"


def cmd_export(state: AppState, args: list[str]) -> str | None:
    task_api.export_tasks(state)
    return None


def cmd_collapse(state: AppState, args: list[str]) -> str | None:
    if len(args) != 1 or state.dashboard is None:
        return f"Usage: /collapse <{'|'.join(SECTIONS)}>"
    try:
        state.dashboard.toggle_section(args[0])
    except KeyError:
        return f"Unknown section. Use one of: {', '.join(SECTIONS)}"
    return None


def cmd_voice(state: AppState, args: list[str]) -> str:
    """
    /voice        -> show status
    /voice on     -> start listening
    /voice off    -> stop listening
    """
    running = state.voice_runner is not None and state.voice_runner.is_alive()
    if not args:
        return f"Voice commands are {'ON' if running else 'OFF'}. Use /voice on or /voice off."

    arg = args[0].lower()

    if arg in ("on", "1", "true", "yes"):
        if running:
            return "Voice commands are already ON."
        state.voice_runner = start_voice_in_background(state)
        if state.voice_runner is None:
            return "Voice commands are not supported here (see log for details)."
        return "Voice commands enabled. Try: 'add task write report 30'."

    if arg in ("off", "0", "false", "no"):
        if not running or state.voice_runner is None:
            return "Voice commands are already OFF."
        logger.debug("Voice stop requested.")
        # Runs under state.lock, which a pending utterance may be waiting on:
        # stop() makes that utterance a no-op, the daemon thread exits on its own.
        state.voice_runner.stop()
        state.voice_runner = None
        return "Voice commands disabled."

    return "Usage: /voice on or /voice off."


def cmd_status(state: AppState, args: list[str]) -> str:
    running = state.voice_runner is not None and state.voice_runner.is_alive()
    export_path = getattr(state.exporter, "path", None)
    return (
        "Status:\n"
        f"  Theme: {state.theme.theme}\n"
        f"  Voice: {'ON' if running else 'OFF'}\n"
        f"  Tasks: {len(state.store)}\n"
        f"  Export file: {export_path if export_path is not None else '-'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Log a task: /add <name...> <minutes>.")
registry.register("drag", cmd_drag, help_text="Pick up the task at a position: /drag <n>.")
registry.register("drop", cmd_drop, help_text="Drop the picked-up task at a position: /drop <n>.")
registry.register("move", cmd_move, help_text="Reorder in one step: /move <from> <to>.", aliases=["mv"])
registry.register("theme", cmd_theme, help_text="Toggle light/dark theme.", aliases=["dark"])
registry.register("export", cmd_export, help_text="Export tasks to CSV.")
registry.register(
    "collapse", cmd_collapse, help_text=f"Collapse/expand a section: /collapse <{'|'.join(SECTIONS)}>."
)
registry.register("voice", cmd_voice, help_text="Voice commands: /voice on | /voice off.")
registry.register("status", cmd_status, help_text="Show theme, voice, task count and export path.")

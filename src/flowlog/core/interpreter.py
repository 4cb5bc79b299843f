# src/flowlog/core/interpreter.py

"""
Free-text command interpreter.

Commands arrive from typed input or a recognized utterance. Rules are tested
in order and the first matching predicate wins; there is no backtracking, so
"export in dark mode" toggles the theme and never exports.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from .ports import Notifier
from ..tasks.task_models import parse_duration

logger = logging.getLogger(__name__)

ADD_TASK_PREFIX = "add task"


class CommandResult(StrEnum):
    TASK_ADDED = "task_added"
    IGNORED = "ignored"
    THEME_TOGGLED = "theme_toggled"
    EXPORTED = "exported"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True)
class CommandRule:
    name: str
    matches: Callable[[str], bool]
    run: Callable[[str], CommandResult]


def normalize_command(raw: str) -> str:
    return (raw or "").strip().lower()


def parse_add_task(command: str) -> tuple[str, int] | None:
    """
    "add task write report 30" -> ("write report", 30).

    The last whitespace-delimited token is the duration; everything before it
    is the name. Returns None when the name is empty or the duration is not an
    integer.
    """
    if not command.startswith(ADD_TASK_PREFIX):
        return None
    parts = command[len(ADD_TASK_PREFIX):].split()
    if not parts:
        return None

    duration = parse_duration(parts[-1])
    name = " ".join(parts[:-1])
    if not name or duration is None:
        return None
    return name, duration


class CommandInterpreter:
    """Ordered (predicate, handler) cascade over normalized command text."""

    def __init__(
        self,
        *,
        add_task: Callable[[str, int], object],
        toggle_theme: Callable[[], object],
        export: Callable[[], object],
        notifier: Notifier,
    ) -> None:
        self._add_task = add_task
        self._toggle_theme = toggle_theme
        self._export = export
        self._notifier = notifier

        self.rules: tuple[CommandRule, ...] = (
            CommandRule("add_task", lambda c: c.startswith(ADD_TASK_PREFIX), self._run_add_task),
            CommandRule("dark_mode", lambda c: "dark mode" in c, self._run_toggle_theme),
            CommandRule("export", lambda c: "export" in c, self._run_export),
        )

    def handle(self, raw_command: str) -> CommandResult:
        command = normalize_command(raw_command)
        for rule in self.rules:
            if rule.matches(command):
                logger.debug("Command %r matched rule=%s", command, rule.name)
                return rule.run(command)

        logger.debug("Command %r unrecognized", command)
        self._notifier.show(f"Unrecognized command: {command}")
        return CommandResult.UNRECOGNIZED

    # ---- rule handlers ----

    def _run_add_task(self, command: str) -> CommandResult:
        parsed = parse_add_task(command)
        if parsed is None:
            # Malformed voice adds are dropped without a notice.
            return CommandResult.IGNORED
        name, duration = parsed
        self._add_task(name, duration)
        return CommandResult.TASK_ADDED

    def _run_toggle_theme(self, command: str) -> CommandResult:
        self._toggle_theme()
        return CommandResult.THEME_TOGGLED

    def _run_export(self, command: str) -> CommandResult:
        self._export()
        return CommandResult.EXPORTED

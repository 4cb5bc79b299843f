# src/flowlog/tasks/task_api.py

"""
Small high-level helpers used by the console commands and the interpreter.

They take the AppState, call the store or a collaborator, and raise the
user-facing notices. Callers hold state.lock.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..core.errors import IndexOutOfRange, InvalidInput
from ..core.interpreter import CommandInterpreter, CommandResult
from .task_models import TaskRecord

if TYPE_CHECKING:
    from ..core.state import AppState

logger = logging.getLogger(__name__)

MSG_TASK_ADDED = "Task added successfully!"
MSG_INVALID_TASK = "Please enter both task name and duration!"
MSG_REORDERED = "Tasks reordered!"


def submit_task(state: AppState, name: Any, duration: Any) -> TaskRecord | None:
    """Task-entry form: add or explain why not. Returns the new record or None."""
    try:
        record = state.store.add_task(name, duration)
    except InvalidInput:
        logger.debug("Rejected task name=%r duration=%r", name, duration)
        state.notifier.show(MSG_INVALID_TASK)
        return None
    state.notifier.show(MSG_TASK_ADDED)
    return record


def drag_start(state: AppState, index: int) -> None:
    """First half of a drag-and-drop reorder: remember the source position."""
    state.drag_index = index


def drop(state: AppState, target_index: int) -> bool:
    """
    Second half of a drag-and-drop reorder.

    Without a captured source this is a no-op. Stale or invalid indices are
    a silent no-op too (the list may have changed since the drag started).
    Returns True when the list was reordered.
    """
    source = state.drag_index
    if source is None:
        return False

    try:
        state.store.reorder_task(source, target_index)
    except IndexOutOfRange as e:
        logger.debug("Ignored drop from=%s to=%s: %s", source, target_index, e)
        return False
    finally:
        state.drag_index = None

    state.notifier.show(MSG_REORDERED)
    return True


def move_task(state: AppState, from_index: int, to_index: int) -> bool:
    """Drag and drop in one call."""
    drag_start(state, from_index)
    return drop(state, to_index)


def export_tasks(state: AppState) -> Path | None:
    return state.exporter.export(state.store.snapshot())


def toggle_theme(state: AppState) -> str:
    theme = state.theme.toggle()
    logger.info("Theme switched to %s", theme)
    return theme


def build_interpreter(state: AppState) -> CommandInterpreter:
    return CommandInterpreter(
        add_task=lambda name, duration: submit_task(state, name, duration),
        toggle_theme=lambda: toggle_theme(state),
        export=lambda: export_tasks(state),
        notifier=state.notifier,
    )


def run_command(state: AppState, text: str) -> CommandResult:
    """Dispatch one free-text command atomically with respect to other input sources."""
    with state.lock:
        return state.interpreter.handle(text)

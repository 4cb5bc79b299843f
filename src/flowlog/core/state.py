# src/flowlog/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .interpreter import CommandInterpreter
from .ports import Notifier, TaskExporter, ThemeToggle
from ..tasks.task_store import TaskStore
from ..views.sync import ViewSynchronizer

if TYPE_CHECKING:
    from ..connectors.voice_connector import VoiceBackgroundRunner
    from ..ui.dashboard import ConsoleDashboard


@dataclass
class AppState:
    """Everything one session needs, wired once by the bootstrap."""

    # Settings object (config.Settings or a test stand-in).
    settings: Any

    store: TaskStore
    views: ViewSynchronizer
    notifier: Notifier
    theme: ThemeToggle
    exporter: TaskExporter
    dashboard: ConsoleDashboard | None = None

    # Drag source captured by /drag (0-based); stays stale if no drop follows.
    drag_index: int | None = None

    voice_runner: VoiceBackgroundRunner | None = None

    # Built right after construction (tasks.task_api.build_interpreter); its
    # handlers close over this state.
    interpreter: CommandInterpreter = field(init=False)

    # Serializes mutations coming from the console and the voice listener thread.
    lock: threading.RLock = field(default_factory=threading.RLock)

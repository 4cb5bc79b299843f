# src/flowlog/core/ports.py

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps renderers and platform collaborators swappable and makes testing easier.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..tasks.task_models import TaskRecord
    from ..views.sync import ChartData, Kpis


class TimelineRenderer(Protocol):
    """Receives one display line per task, in list order."""
    def render_timeline(self, lines: list[str]) -> None: ...


class KpiRenderer(Protocol):
    def render_kpis(self, kpis: Kpis) -> None: ...


class SuggestionRenderer(Protocol):
    def render_suggestions(self, suggestions: list[str]) -> None: ...


class ChartRenderer(Protocol):
    """Receives a full replacement dataset on every change."""
    def render_chart(self, chart: ChartData) -> None: ...


class Notifier(Protocol):
    """Transient user-facing notice (toast)."""
    def show(self, message: str) -> None: ...


class ThemeToggle(Protocol):
    @property
    def theme(self) -> str: ...
    def toggle(self) -> str: ...


class TaskExporter(Protocol):
    def export(self, tasks: Sequence[TaskRecord]) -> Path | None: ...


class SpeechSource(Protocol):
    """
    Blocking speech-to-text source.

    listen() waits for one finalized utterance and returns its transcript.
    It raises RecognitionError when that utterance could not be recognized;
    the caller keeps listening afterwards.
    """
    def listen(self) -> str: ...

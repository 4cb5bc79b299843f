# src/flowlog/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the store, views and collaborators into AppState.
"""

from __future__ import annotations

import functools
import logging

from rich.console import Console

from ..config import get_settings
from ..core.state import AppState
from ..tasks.suggestions import suggest
from ..tasks.task_api import build_interpreter
from ..tasks.task_export import CsvExporter
from ..tasks.task_store import TaskStore
from ..ui.dashboard import ConsoleDashboard
from ..ui.theme import ThemeStore
from ..ui.toast import Toast
from ..views.sync import ViewSynchronizer

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.theme_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, console: Console | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    theme = ThemeStore(settings.theme_path)
    dashboard = ConsoleDashboard(theme, console=console, chart_width=settings.chart_width)
    toast = Toast(dashboard.show_toast, duration_seconds=settings.toast_seconds)

    views = ViewSynchronizer(
        timeline=dashboard,
        kpis=dashboard,
        suggestions=dashboard,
        chart=dashboard,
        time_format=settings.time_format,
        suggest_fn=functools.partial(
            suggest,
            min_tasks=settings.suggest_min_tasks,
            long_mean_minutes=settings.suggest_long_minutes,
        ),
    )

    store = TaskStore()
    views.attach(store)

    state = AppState(
        settings=settings,
        store=store,
        views=views,
        notifier=toast,
        theme=theme,
        exporter=CsvExporter(
            settings.export_dir,
            toast,
            filename=settings.export_filename,
            time_format=settings.time_format,
        ),
        dashboard=dashboard,
    )
    state.interpreter = build_interpreter(state)
    return state

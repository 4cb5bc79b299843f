# tests/conftest.py

from __future__ import annotations

import io
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

from flowlog.core.state import AppState
from flowlog.tasks.task_api import build_interpreter
from flowlog.tasks.task_export import CsvExporter
from flowlog.tasks.task_store import TaskStore
from flowlog.ui.theme import ThemeStore
from flowlog.views.sync import ViewSynchronizer

from .fakes import FakeClock, FakeNotifier, RecordingRenderer

TIME_FORMAT = "%I:%M:%S %p"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="flowlog-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        theme_path=tmp_path / "data" / "theme.json",
        export_dir=tmp_path / "export",
        export_filename="workflow_tasks.csv",
        time_format=TIME_FORMAT,
        toast_seconds=3.0,
        chart_width=20,
        voice_enabled=False,
        voice_language="en-US",
        voice_phrase_limit=8.0,
        suggest_min_tasks=5,
        suggest_long_minutes=45.0,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    clock: FakeClock,
    renderer: RecordingRenderer,
    notifier: FakeNotifier,
) -> AppState:
    """
    AppState wired with deterministic fakes.

    NOTE: We keep the real TaskStore, ViewSynchronizer, ThemeStore and
    CsvExporter here because their behavior is part of what we want to test.
    """
    store = TaskStore(clock=clock)
    views = ViewSynchronizer(
        timeline=renderer,
        kpis=renderer,
        suggestions=renderer,
        chart=renderer,
        time_format=TIME_FORMAT,
    )
    views.attach(store)

    st = AppState(
        settings=settings,
        store=store,
        views=views,
        notifier=notifier,
        theme=ThemeStore(settings.theme_path),
        exporter=CsvExporter(settings.export_dir, notifier, time_format=TIME_FORMAT),
    )
    st.interpreter = build_interpreter(st)
    return st


@pytest.fixture()
def console_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def console(console_output: io.StringIO) -> Console:
    return Console(file=console_output, width=120, color_system=None, force_terminal=False)

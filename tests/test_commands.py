# tests/test_commands.py

from __future__ import annotations

import io
from types import SimpleNamespace

import pytest
from rich.console import Console

from flowlog.cli.bootstrap import create_initial_state
from flowlog.cli.commands import CommandRegistry, registry
from flowlog.connectors.console_connector import handle_line
from flowlog.ui.toast import Toast


def test_command_registry_routes_with_aliases(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def handler(state, args):
        seen.append(args)
        return "ok"

    reg.register("go", handler, "go somewhere", aliases=["g"])

    assert reg.handle(state, "/go a b") == "ok"
    assert reg.handle(state, "/G c") == "ok"
    assert seen == [["a", "b"], ["c"]]
    assert "/go - go somewhere" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_uses_last_word_as_duration(state) -> None:
    assert registry.handle(state, "/add write the report 30") is None
    assert [(t.name, t.duration_minutes) for t in state.store] == [("write the report", 30)]


def test_add_without_args_shows_invalid_notice(state) -> None:
    registry.handle(state, "/add")
    assert len(state.store) == 0
    assert state.notifier.messages == ["Please enter both task name and duration!"]


def test_move_uses_one_based_positions(state) -> None:
    for n in ("A", "B", "C"):
        state.store.add_task(n, 10)

    registry.handle(state, "/move 1 3")

    assert [t.name for t in state.store] == ["B", "C", "A"]
    assert state.notifier.messages == ["Tasks reordered!"]


def test_drag_and_drop_commands(state) -> None:
    for n in ("A", "B", "C"):
        state.store.add_task(n, 10)

    registry.handle(state, "/drag 3")
    assert state.drag_index == 2
    registry.handle(state, "/drop 1")

    assert [t.name for t in state.store] == ["C", "A", "B"]
    assert state.drag_index is None


@pytest.mark.parametrize("line", ["/move 0 1", "/move a b", "/move 1", "/drag", "/drop x"])
def test_bad_positions_return_usage(state, line: str) -> None:
    assert (registry.handle(state, line) or "").startswith("Usage:")


def test_theme_command_reports_new_theme(state) -> None:
    assert registry.handle(state, "/theme") == "Theme: dark"
    assert registry.handle(state, "/dark") == "Theme: light"


def test_status_reports_counts(state) -> None:
    state.store.add_task("A", 10)
    reply = registry.handle(state, "/status") or ""
    assert "Tasks: 1" in reply
    assert "Voice: OFF" in reply
    assert "workflow_tasks.csv" in reply


def test_voice_on_when_unsupported(state, monkeypatch: pytest.MonkeyPatch) -> None:
    import flowlog.cli.commands as commands

    monkeypatch.setattr(commands, "start_voice_in_background", lambda state: None)
    reply = registry.handle(state, "/voice on") or ""
    assert "not supported" in reply
    assert state.voice_runner is None
    assert registry.handle(state, "/voice off") == "Voice commands are already OFF."


def test_free_text_goes_through_interpreter(state) -> None:
    assert handle_line(state, "add task write report 30") is None
    assert [t.name for t in state.store] == ["write report"]

    handle_line(state, "sing a song")
    assert state.notifier.messages[-1] == "Unrecognized command: sing a song"


def test_collapse_with_bootstrapped_state(settings: SimpleNamespace, console: Console, console_output: io.StringIO) -> None:
    st = create_initial_state(settings=settings, console=console)
    assert isinstance(st.notifier, Toast)

    assert registry.handle(st, "/collapse chart") is None
    assert st.dashboard is not None and "chart" in st.dashboard.collapsed
    assert "Unknown section" in (registry.handle(st, "/collapse sidebar") or "")

    registry.handle(st, "/add write report 30")
    st.dashboard.draw()
    out = console_output.getvalue()
    assert "Task added successfully!" in out
    assert "write report (30 mins)" in out
    assert "(collapsed)" in out

# tests/test_dashboard.py

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from flowlog.ui.dashboard import ConsoleDashboard
from flowlog.ui.theme import ThemeStore
from flowlog.views.sync import ChartData, Kpis


@pytest.fixture()
def dashboard(tmp_path: Path, console: Console) -> ConsoleDashboard:
    return ConsoleDashboard(ThemeStore(tmp_path / "theme.json"), console=console, chart_width=20)


def test_empty_dashboard_draws_placeholders(dashboard: ConsoleDashboard, console_output: io.StringIO) -> None:
    dashboard.draw()
    out = console_output.getvalue()

    assert "Task Timeline" in out
    assert "No tasks yet." in out
    assert "Total tasks" in out
    assert "No data." in out


def test_draw_shows_rendered_views(dashboard: ConsoleDashboard, console_output: io.StringIO) -> None:
    dashboard.render_timeline(["09:00:00 AM - write report (30 mins)"])
    dashboard.render_kpis(Kpis(task_count=1, average_duration=30.0))
    dashboard.render_suggestions(["More data needed for insights."])
    dashboard.render_chart(ChartData(labels=["write report"], values=[30]))

    dashboard.draw()
    out = console_output.getvalue()

    assert "1." in out
    assert "09:00:00 AM - write report (30 mins)" in out
    assert "30.00" in out
    assert "• More data needed for insights." in out
    assert "█" * 20 in out


def test_chart_scales_bars_to_peak(dashboard: ConsoleDashboard, console_output: io.StringIO) -> None:
    dashboard.render_chart(ChartData(labels=["long", "short"], values=[40, 10]))
    dashboard.draw()
    lines = console_output.getvalue().splitlines()

    long_line = next(line for line in lines if "long" in line)
    short_line = next(line for line in lines if "short" in line)
    assert long_line.count("█") == 20
    assert short_line.count("█") == 5


def test_collapsed_section_hides_body(dashboard: ConsoleDashboard, console_output: io.StringIO) -> None:
    dashboard.render_timeline(["09:00:00 AM - secret (5 mins)"])

    assert dashboard.toggle_section("Timeline") is True
    dashboard.draw()
    out = console_output.getvalue()

    assert "(collapsed)" in out
    assert "secret" not in out

    assert dashboard.toggle_section("timeline") is False


def test_unknown_section_raises(dashboard: ConsoleDashboard) -> None:
    with pytest.raises(KeyError):
        dashboard.toggle_section("sidebar")


def test_toast_is_printed_and_cleared(dashboard: ConsoleDashboard, console_output: io.StringIO) -> None:
    dashboard.show_toast("Tasks reordered!")
    assert "Tasks reordered!" in console_output.getvalue()

    dashboard.show_toast(None)
    console_output.truncate(0)
    console_output.seek(0)
    dashboard.draw()
    assert "Tasks reordered!" not in console_output.getvalue()

# src/flowlog/ui/dashboard.py

from __future__ import annotations

import logging
import threading
from typing import Final

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..views.sync import ChartData, Kpis
from .theme import ThemeStore

logger = logging.getLogger(__name__)

SECTIONS: Final[tuple[str, ...]] = ("timeline", "kpis", "suggestions", "chart")
SECTION_TITLES: Final[dict[str, str]] = {
    "timeline": "Task Timeline",
    "kpis": "KPIs",
    "suggestions": "AI Workflow Suggestions",
    "chart": "Task Duration (mins)",
}
BAR_CHAR = "█"


class ConsoleDashboard:
    """
    Terminal renderer for all four views.

    Each render_* call only stores the data it was handed; draw() prints the
    whole dashboard from the stored pieces using the current theme palette.
    Collapsed sections keep receiving data but are drawn as a bare title.
    """

    def __init__(
        self,
        theme: ThemeStore,
        *,
        console: Console | None = None,
        chart_width: int = 40,
    ) -> None:
        self.theme = theme
        self.console = console or Console()
        self.chart_width = max(10, int(chart_width))
        self.collapsed: set[str] = set()

        self._lock = threading.RLock()
        self._timeline: list[str] = []
        self._kpis = Kpis(task_count=0, average_duration=0.0)
        self._suggestions: list[str] = []
        self._chart = ChartData()
        self._toast: str | None = None

    # ---- renderer ports ----

    def render_timeline(self, lines: list[str]) -> None:
        with self._lock:
            self._timeline = list(lines)

    def render_kpis(self, kpis: Kpis) -> None:
        with self._lock:
            self._kpis = kpis

    def render_suggestions(self, suggestions: list[str]) -> None:
        with self._lock:
            self._suggestions = list(suggestions)

    def render_chart(self, chart: ChartData) -> None:
        with self._lock:
            self._chart = ChartData(labels=list(chart.labels), values=list(chart.values))

    # ---- toast display ----

    def show_toast(self, text: str | None) -> None:
        """Toast display hook: prints a new notice right away; hiding just clears it."""
        with self._lock:
            self._toast = text
            if text is not None:
                self.console.print(Text(f" {text} ", style=self.theme.palette["toast"]))

    # ---- sections ----

    def toggle_section(self, name: str) -> bool:
        """Flip a section's collapsed state. Returns True when it is now collapsed."""
        key = name.strip().lower()
        if key not in SECTIONS:
            raise KeyError(key)
        with self._lock:
            if key in self.collapsed:
                self.collapsed.discard(key)
                return False
            self.collapsed.add(key)
            return True

    # ---- drawing ----

    def draw(self) -> None:
        with self._lock:
            if self.console.is_terminal:
                self.console.clear()
            self.console.print(self._build())

    def _build(self) -> Group:
        palette = self.theme.palette
        parts: list[Panel | Text] = [
            self._section("timeline", self._timeline_body(palette)),
            self._section("kpis", self._kpi_body(palette)),
            self._section("suggestions", self._suggestions_body(palette)),
            self._section("chart", self._chart_body(palette)),
        ]
        if self._toast:
            parts.append(Text(f" {self._toast} ", style=palette["toast"]))
        return Group(*parts)

    def _section(self, key: str, body: Table | Text) -> Panel:
        palette = self.theme.palette
        title = Text(SECTION_TITLES[key], style=palette["title"])
        if key in self.collapsed:
            return Panel(Text("(collapsed)", style=palette["muted"]), title=title, border_style=palette["border"])
        return Panel(body, title=title, border_style=palette["border"])

    def _timeline_body(self, palette: dict[str, str]) -> Table | Text:
        if not self._timeline:
            return Text("No tasks yet.", style=palette["muted"])
        table = Table.grid(padding=(0, 1))
        table.add_column(justify="right", style=palette["muted"])
        table.add_column(style=palette["text"])
        for pos, line in enumerate(self._timeline, start=1):
            table.add_row(f"{pos}.", line)
        return table

    def _kpi_body(self, palette: dict[str, str]) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style=palette["muted"])
        table.add_column(style=palette["kpi"])
        table.add_row("Total tasks", str(self._kpis.task_count))
        table.add_row("Avg duration (mins)", self._kpis.average_label())
        return table

    def _suggestions_body(self, palette: dict[str, str]) -> Text:
        text = Text()
        for i, s in enumerate(self._suggestions):
            if i:
                text.append("\n")
            text.append(f"• {s}", style=palette["suggestion"])
        return text

    def _chart_body(self, palette: dict[str, str]) -> Table | Text:
        chart = self._chart
        if not chart.labels:
            return Text("No data.", style=palette["muted"])

        peak = max([v for v in chart.values if v > 0], default=0)
        table = Table.grid(padding=(0, 1))
        table.add_column(style=palette["text"], no_wrap=True, max_width=24)
        table.add_column(no_wrap=True)
        table.add_column(justify="right", style=palette["muted"])
        for label, value in zip(chart.labels, chart.values):
            # The axis starts at zero; non-positive durations draw no bar.
            size = round(self.chart_width * value / peak) if peak and value > 0 else 0
            table.add_row(label, Text(BAR_CHAR * size, style=palette["bar"]), str(value))
        return table

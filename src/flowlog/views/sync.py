# src/flowlog/views/sync.py

"""
View synchronization.

Every view is a pure projection of the task list. On each store change the
synchronizer builds one DashboardSnapshot from a single task tuple and hands
its parts to the renderers in a fixed order:
timeline -> KPIs -> suggestions -> chart.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from ..core.ports import ChartRenderer, KpiRenderer, SuggestionRenderer, TimelineRenderer
from ..tasks.suggestions import suggest
from ..tasks.task_models import TaskRecord
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

DEFAULT_TIME_FORMAT = "%I:%M:%S %p"

SuggestFn = Callable[[Sequence[TaskRecord]], list[str]]


@dataclass(frozen=True, slots=True)
class Kpis:
    task_count: int
    average_duration: float

    def average_label(self) -> str:
        # An empty list shows a bare 0, anything else two decimals.
        if self.task_count == 0:
            return "0"
        return f"{self.average_duration:.2f}"


@dataclass(frozen=True, slots=True)
class ChartData:
    labels: list[str] = field(default_factory=list)
    values: list[int] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class DashboardSnapshot:
    timeline: list[str]
    kpis: Kpis
    suggestions: list[str]
    chart: ChartData


def format_task_line(task: TaskRecord, time_format: str = DEFAULT_TIME_FORMAT) -> str:
    return f"{task.time_label(time_format)} - {task.name} ({task.duration_minutes} mins)"


def timeline_lines(tasks: Sequence[TaskRecord], time_format: str = DEFAULT_TIME_FORMAT) -> list[str]:
    return [format_task_line(t, time_format) for t in tasks]


def compute_kpis(tasks: Sequence[TaskRecord]) -> Kpis:
    if not tasks:
        return Kpis(task_count=0, average_duration=0.0)
    total = sum(t.duration_minutes for t in tasks)
    return Kpis(task_count=len(tasks), average_duration=round(total / len(tasks), 2))


def chart_data(tasks: Sequence[TaskRecord]) -> ChartData:
    return ChartData(
        labels=[t.name for t in tasks],
        values=[t.duration_minutes for t in tasks],
    )


def build_snapshot(
    tasks: Sequence[TaskRecord],
    *,
    time_format: str = DEFAULT_TIME_FORMAT,
    suggest_fn: SuggestFn = suggest,
) -> DashboardSnapshot:
    frozen = tuple(tasks)
    return DashboardSnapshot(
        timeline=timeline_lines(frozen, time_format),
        kpis=compute_kpis(frozen),
        suggestions=list(suggest_fn(frozen)),
        chart=chart_data(frozen),
    )


class ViewSynchronizer:
    """Fans one store snapshot out to the four renderers."""

    def __init__(
        self,
        *,
        timeline: TimelineRenderer,
        kpis: KpiRenderer,
        suggestions: SuggestionRenderer,
        chart: ChartRenderer,
        time_format: str = DEFAULT_TIME_FORMAT,
        suggest_fn: SuggestFn = suggest,
    ) -> None:
        self._timeline = timeline
        self._kpis = kpis
        self._suggestions = suggestions
        self._chart = chart
        self._time_format = time_format
        self._suggest_fn = suggest_fn
        self.last_snapshot: DashboardSnapshot | None = None

    def attach(self, store: TaskStore) -> Callable[[], None]:
        """Subscribe to store changes and draw the current (usually empty) list once."""
        unsubscribe = store.subscribe(self.sync)
        self.sync(store.snapshot())
        return unsubscribe

    def sync(self, tasks: Sequence[TaskRecord]) -> DashboardSnapshot:
        snap = build_snapshot(tasks, time_format=self._time_format, suggest_fn=self._suggest_fn)

        self._timeline.render_timeline(snap.timeline)
        self._kpis.render_kpis(snap.kpis)
        self._suggestions.render_suggestions(snap.suggestions)
        self._chart.render_chart(snap.chart)

        self.last_snapshot = snap
        logger.debug(
            "Views synced tasks=%d avg=%s suggestion=%r",
            snap.kpis.task_count,
            snap.kpis.average_label(),
            snap.suggestions[0] if snap.suggestions else None,
        )
        return snap

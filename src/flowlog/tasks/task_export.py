# src/flowlog/tasks/task_export.py

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from ..core.ports import Notifier
from ..views.sync import DEFAULT_TIME_FORMAT
from .task_models import TaskRecord

logger = logging.getLogger(__name__)

CSV_HEADER = ("Task Name", "Duration", "Time")
DEFAULT_FILENAME = "workflow_tasks.csv"


def tasks_to_csv(tasks: Sequence[TaskRecord], time_format: str = DEFAULT_TIME_FORMAT) -> str:
    """
    Header plus one row per task, comma-joined, newline-separated.

    Fields are joined as-is (no quoting), so a name containing a comma
    spills into an extra column.
    """
    rows = [list(CSV_HEADER)]
    for t in tasks:
        rows.append([t.name, str(t.duration_minutes), t.time_label(time_format)])
    return "\n".join(",".join(row) for row in rows)


class CsvExporter:
    """Writes the task log to <export_dir>/<filename> and reports via the notifier."""

    def __init__(
        self,
        export_dir: str | Path,
        notifier: Notifier,
        *,
        filename: str = DEFAULT_FILENAME,
        time_format: str = DEFAULT_TIME_FORMAT,
    ) -> None:
        self._export_dir = Path(export_dir)
        self._notifier = notifier
        self._filename = filename
        self._time_format = time_format

    @property
    def path(self) -> Path:
        return self._export_dir / self._filename

    def export(self, tasks: Sequence[TaskRecord]) -> Path | None:
        if not tasks:
            self._notifier.show("No tasks to export!")
            return None

        content = tasks_to_csv(tasks, self._time_format)
        path = self.path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".tmp")
            tmp.write_text(content, "utf-8", newline="")
            os.replace(tmp, path)
        except OSError:
            logger.exception("Failed to export tasks to %s", path)
            self._notifier.show(f"Export failed: could not write {path}")
            return None

        logger.info("Exported %d task(s) to %s", len(tasks), path)
        self._notifier.show("Exported to CSV!")
        return path

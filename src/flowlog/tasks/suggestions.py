# src/flowlog/tasks/suggestions.py

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from .task_models import TaskRecord

MIN_TASKS_FOR_INSIGHT: Final[int] = 5
LONG_TASK_MEAN_MINUTES: Final[float] = 45.0

MORE_DATA_NEEDED: Final[str] = "More task data needed for deeper AI insights."
AUTOMATE_LONGER_TASKS: Final[str] = "Consider automating longer tasks to save time."
EFFICIENCY_OPTIMAL: Final[str] = "Workflow efficiency is within optimal range."


def suggest(
    tasks: Sequence[TaskRecord],
    *,
    min_tasks: int = MIN_TASKS_FOR_INSIGHT,
    long_mean_minutes: float = LONG_TASK_MEAN_MINUTES,
) -> list[str]:
    """
    Rule-based workflow advice. Always returns exactly one advisory.

    - fewer than min_tasks tasks -> ask for more data
    - mean duration above long_mean_minutes -> suggest automation
    - otherwise -> efficiency is fine
    """
    if len(tasks) < min_tasks:
        return [MORE_DATA_NEEDED]

    mean = sum(t.duration_minutes for t in tasks) / len(tasks)
    if mean > long_mean_minutes:
        return [AUTOMATE_LONGER_TASKS]
    return [EFFICIENCY_OPTIMAL]

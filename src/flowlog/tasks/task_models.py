# src/flowlog/tasks/task_models.py

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dataclass(frozen=True, slots=True)
class TaskRecord:
    """
    One logged task.

    Identity within a session is positional (index in the store), so two
    records with equal fields are still distinct entries.
    """

    name: str
    duration_minutes: int
    recorded_at: datetime

    def time_label(self, time_format: str) -> str:
        return self.recorded_at.strftime(time_format)


def parse_duration(raw: Any) -> int | None:
    """
    Parse a duration the way a form field would be read.

    - ints pass through (bools are rejected)
    - finite floats are truncated
    - strings are read from their leading integer: "30", " 30 ", "30min" -> 30
    Returns None when nothing numeric can be read.
    """
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return None
        return int(raw)
    if isinstance(raw, str):
        m = _LEADING_INT.match(raw)
        if not m:
            return None
        return int(m.group(1))
    return None

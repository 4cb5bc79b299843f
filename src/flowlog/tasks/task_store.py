# src/flowlog/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import datetime
from typing import Any

from ..core.errors import IndexOutOfRange, InvalidInput
from .task_models import TaskRecord, parse_duration

logger = logging.getLogger(__name__)

TaskSnapshot = tuple[TaskRecord, ...]
StoreListener = Callable[[TaskSnapshot], None]


class TaskStore:
    """
    In-memory ordered task list for one session.

    The store is the only place the list is mutated. Every successful
    mutation calls each subscribed listener exactly once, synchronously,
    with an immutable snapshot, before the mutating call returns.
    Failed mutations leave the list untouched and notify nobody.

    Thread-safety:
    - none on its own; callers serialize mutations (AppState.lock)
    """

    def __init__(self, *, clock: Callable[[], datetime] | None = None) -> None:
        self._tasks: list[TaskRecord] = []
        self._listeners: list[StoreListener] = []
        self._clock = clock or datetime.now

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[TaskRecord]:
        return iter(self.snapshot())

    def snapshot(self) -> TaskSnapshot:
        return tuple(self._tasks)

    # ---- change notification ----

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register an on-change listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # ---- mutations ----

    def add_task(self, name: Any, duration_minutes: Any) -> TaskRecord:
        """
        Append a task.

        Raises InvalidInput when the name is empty/blank or the duration
        does not parse as a number. Sign and zero are not validated.
        """
        clean_name = name.strip() if isinstance(name, str) else ""
        duration = parse_duration(duration_minutes)
        if not clean_name or duration is None:
            raise InvalidInput("task name and numeric duration are required")

        record = TaskRecord(name=clean_name, duration_minutes=duration, recorded_at=self._clock())
        self._tasks.append(record)
        logger.debug("Task added name=%r duration=%s total=%d", record.name, duration, len(self._tasks))

        self._notify()
        return record

    def reorder_task(self, from_index: int, to_index: int) -> None:
        """
        Move the record at from_index so it ends up at to_index.

        The record is removed first and to_index is applied to the shortened
        list, so moving forward lands one slot further than a pre-removal
        reading of to_index would suggest: reorder_task(0, 2) on [A, B, C]
        gives [B, C, A]. Both indices must lie in [0, len) at call time.
        """
        length = len(self._tasks)
        for idx in (from_index, to_index):
            if not 0 <= idx < length:
                raise IndexOutOfRange(idx, length)

        record = self._tasks.pop(from_index)
        self._tasks.insert(to_index, record)
        logger.debug("Task moved %d -> %d name=%r", from_index, to_index, record.name)

        self._notify()

# src/flowlog/ui/toast.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

ToastDisplay = Callable[[str | None], None]


class _Timer(Protocol):
    daemon: bool

    def start(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], _Timer]


class Toast:
    """
    Transient notice shown for a fixed window.

    Calls are not queued: a new show() replaces the visible text and starts
    a fresh window. Timers are never cancelled; a stale timer firing after a
    newer show() is ignored, so it cannot hide the newer text early.
    """

    def __init__(
        self,
        display: ToastDisplay,
        *,
        duration_seconds: float = 3.0,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self._display = display
        self._duration = float(duration_seconds)
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._generation = 0
        self._text: str | None = None

    @property
    def text(self) -> str | None:
        """Currently visible notice, or None when hidden."""
        return self._text

    def show(self, message: str) -> None:
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._text = message

        logger.debug("Toast shown: %s", message)
        self._display(message)

        timer = self._timer_factory(self._duration, lambda: self._hide(generation))
        timer.daemon = True
        timer.start()

    def _hide(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._text is None:
                return
            self._text = None
        self._display(None)

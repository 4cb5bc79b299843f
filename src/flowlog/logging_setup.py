# src/flowlog/logging_setup.py

"""
Logging for a terminal the dashboard owns.

stderr shares the screen with the rich dashboard and the input() prompt, so
only warnings and up reach it, and never from the voice thread: a background
print would tear the prompt line. Those records are shown as toast notices
instead (attach_notifier). Everything goes to <data_dir>/flowlog.log at the
configured level.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .core.ports import Notifier

APP_LOGGER = "flowlog"
LOG_FILENAME = "flowlog.log"

# Loggers that emit from threads other than the console's.
BACKGROUND_LOGGERS: tuple[str, ...] = ("flowlog.connectors.voice_connector",)


def parse_level(name: str | int | None, default: int = logging.INFO) -> int:
    """FLOWLOG_LOG_LEVEL value -> logging level; unknown names fall back to default."""
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else default


def _is_app(name: str) -> bool:
    return name == APP_LOGGER or name.startswith(APP_LOGGER + ".")


def _is_background(name: str) -> bool:
    return any(name == n or name.startswith(n + ".") for n in BACKGROUND_LOGGERS)


class _PromptSafeFilter(logging.Filter):
    """
    stderr filter:
    - background-thread records never print (they become toast notices)
    - app records pass at app_level
    - third-party records and py.warnings only at ERROR+
    """

    def __init__(self, app_level: int) -> None:
        super().__init__()
        self.app_level = app_level

    def filter(self, record: logging.LogRecord) -> bool:
        if _is_background(record.name):
            return False
        if _is_app(record.name):
            return record.levelno >= self.app_level
        return record.levelno >= logging.ERROR


class NoticeHandler(logging.Handler):
    """Shows a log record as a one-line toast notice."""

    def __init__(self, notifier: Notifier, level: int = logging.WARNING) -> None:
        super().__init__(level)
        self._notifier = notifier

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._notifier.show(f"{record.levelname.capitalize()}: {record.getMessage()}")
        except Exception:
            self.handleError(record)


def setup_logging(*, log_dir: str | Path, log_level: str | int = "INFO") -> Path:
    """
    Configure the root logger once, before the dashboard is drawn.

    log_level drives the file log. The console never goes below WARNING
    (the dashboard redraws would scroll DEBUG/INFO lines away anyway) but a
    stricter level, e.g. ERROR, applies to it too.
    Returns the log file path.
    """
    level = parse_level(log_level)
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILENAME

    root = logging.getLogger()
    root.setLevel(min(level, logging.WARNING))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    console.addFilter(_PromptSafeFilter(max(level, logging.WARNING)))
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file


def attach_notifier(notifier: Notifier, *, level: int = logging.WARNING) -> list[NoticeHandler]:
    """
    Route background-thread warnings to the toast.

    Records still propagate to the root, so the file log keeps them.
    Returns the installed handlers (one per background logger).
    """
    handlers: list[NoticeHandler] = []
    for name in BACKGROUND_LOGGERS:
        handler = NoticeHandler(notifier, level)
        logging.getLogger(name).addHandler(handler)
        handlers.append(handler)
    return handlers

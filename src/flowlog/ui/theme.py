# src/flowlog/ui/theme.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Final

logger = logging.getLogger(__name__)

LIGHT: Final[str] = "light"
DARK: Final[str] = "dark"

# rich styles per theme; keys are used by the dashboard
PALETTES: Final[dict[str, dict[str, str]]] = {
    LIGHT: {
        "title": "bold #0066ff",
        "text": "black",
        "muted": "grey50",
        "kpi": "bold #0066ff",
        "bar": "#0066ff",
        "suggestion": "dark_green",
        "toast": "bold white on #0066ff",
        "border": "#0066ff",
    },
    DARK: {
        "title": "bold #66a3ff",
        "text": "grey93",
        "muted": "grey62",
        "kpi": "bold #66a3ff",
        "bar": "#66a3ff",
        "suggestion": "pale_green3",
        "toast": "bold black on #66a3ff",
        "border": "grey42",
    },
}


class ThemeStore:
    """
    Persisted light/dark flag.

    The file is read once at construction; toggle() flips the flag and
    writes it back (atomic replace). A missing or unreadable file means light.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._theme = self._read()
        logger.info("Theme loaded theme=%s path=%s", self._theme, self._path)

    @property
    def theme(self) -> str:
        return self._theme

    @property
    def is_dark(self) -> bool:
        return self._theme == DARK

    @property
    def palette(self) -> dict[str, str]:
        return PALETTES[self._theme]

    def toggle(self) -> str:
        self._theme = LIGHT if self._theme == DARK else DARK
        self._write()
        return self._theme

    def _read(self) -> str:
        if not self._path.exists():
            return LIGHT
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Unreadable theme file %s, using light theme.", self._path, exc_info=True)
            return LIGHT
        if isinstance(data, dict) and data.get("theme") == DARK:
            return DARK
        return LIGHT

    def _write(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(".tmp")
            tmp.write_text(json.dumps({"theme": self._theme}), "utf-8")
            os.replace(tmp, self._path)
            logger.debug("Theme saved theme=%s path=%s", self._theme, self._path)
        except OSError:
            # The in-memory flag still applies for this session.
            logger.exception("Failed to save theme to %s", self._path)
            with contextlib.suppress(OSError):
                self._path.with_suffix(".tmp").unlink()

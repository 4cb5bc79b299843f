# src/flowlog/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
- Local safe overrides may live in an uncommitted config_local.py.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "FLOWLOG"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    theme_path: Path

    # ---- Export ----
    export_dir: Path
    export_filename: str

    # ---- Display ----
    time_format: str
    toast_seconds: float
    chart_width: int

    # ---- Voice ----
    voice_enabled: bool
    voice_language: str
    voice_phrase_limit: float

    # ---- Suggestion tuning ----
    suggest_min_tasks: int
    suggest_long_minutes: float

    @property
    def export_path(self) -> Path:
        return self.export_dir / self.export_filename

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "flowlog").strip() or "flowlog"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/flowlog"))
        theme_path = _env_path(_k("THEME_PATH"), data_dir / "theme.json")

        export_dir = _env_path(_k("EXPORT_DIR"), Path("."))
        export_filename = _env(_k("EXPORT_FILENAME"), "workflow_tasks.csv").strip() or "workflow_tasks.csv"

        # Mirrors a browser's en-US toLocaleTimeString(), e.g. "09:41:07 AM".
        time_format = _env(_k("TIME_FORMAT"), "%I:%M:%S %p")
        toast_seconds = max(0.1, _env_float(_k("TOAST_SECONDS"), 3.0))
        chart_width = max(10, _env_int(_k("CHART_WIDTH"), 40))

        voice_enabled = _env_bool(_k("VOICE_ENABLED"), False)
        voice_language = _env(_k("VOICE_LANGUAGE"), "en-US").strip() or "en-US"
        voice_phrase_limit = max(1.0, _env_float(_k("VOICE_PHRASE_LIMIT"), 8.0))

        suggest_min_tasks = max(1, _env_int(_k("SUGGEST_MIN_TASKS"), 5))
        suggest_long_minutes = _env_float(_k("SUGGEST_LONG_MINUTES"), 45.0)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            theme_path=theme_path,
            export_dir=export_dir,
            export_filename=export_filename,
            time_format=time_format,
            toast_seconds=toast_seconds,
            chart_width=chart_width,
            voice_enabled=voice_enabled,
            voice_language=voice_language,
            voice_phrase_limit=voice_phrase_limit,
            suggest_min_tasks=suggest_min_tasks,
            suggest_long_minutes=suggest_long_minutes,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
try:
    import config_local as _config_local  # type: ignore

    # Simple overrides for selected names. Keep it explicit.
    if hasattr(_config_local, "VOICE_ENABLED"):
        object.__setattr__(SETTINGS, "voice_enabled", bool(_config_local.VOICE_ENABLED))  # type: ignore[misc]
    if hasattr(_config_local, "EXPORT_DIR"):
        object.__setattr__(SETTINGS, "export_dir", Path(_config_local.EXPORT_DIR))  # type: ignore[misc]
except ImportError:
    pass


def get_settings() -> Settings:
    return SETTINGS

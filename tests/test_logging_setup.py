# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from flowlog.logging_setup import NoticeHandler, _PromptSafeFilter, attach_notifier, parse_level, setup_logging

from .fakes import FakeNotifier

VOICE_LOGGER = "flowlog.connectors.voice_connector"


def _record(name: str, level: int, msg: str = "msg") -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    voice_logger = logging.getLogger(VOICE_LOGGER)
    saved_voice = list(voice_logger.handlers)
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in saved_handlers:
            h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    voice_logger.handlers[:] = saved_voice
    logging.captureWarnings(False)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("debug", logging.DEBUG), (" ERROR ", logging.ERROR), ("loud", logging.INFO), (None, logging.INFO), (30, 30)],
)
def test_parse_level(raw, expected) -> None:
    assert parse_level(raw) == expected


def test_console_filter_keeps_voice_thread_off_stderr() -> None:
    f = _PromptSafeFilter(logging.WARNING)
    assert f.filter(_record(VOICE_LOGGER, logging.ERROR)) is False
    assert f.filter(_record("flowlog.tasks.task_store", logging.WARNING)) is True
    assert f.filter(_record("flowlog.tasks.task_store", logging.INFO)) is False
    assert f.filter(_record("rich", logging.WARNING)) is False
    assert f.filter(_record("py.warnings", logging.ERROR)) is True


def test_console_filter_follows_stricter_app_level() -> None:
    f = _PromptSafeFilter(logging.ERROR)
    assert f.filter(_record("flowlog.ui.theme", logging.WARNING)) is False
    assert f.filter(_record("flowlog.ui.theme", logging.ERROR)) is True


def test_notice_handler_shows_message() -> None:
    notifier = FakeNotifier()
    handler = NoticeHandler(notifier)
    handler.handle(_record(VOICE_LOGGER, logging.WARNING, "Speech recognition error: speech was not understood"))
    assert notifier.messages == ["Warning: Speech recognition error: speech was not understood"]


def test_setup_logging_writes_file_at_configured_level(tmp_path: Path, restore_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path, log_level="WARNING")
    log = logging.getLogger("flowlog.tests")
    log.info("quiet line")
    log.warning("loud line")
    for h in logging.getLogger().handlers:
        h.flush()

    text = log_file.read_text("utf-8")
    assert log_file == tmp_path / "flowlog.log"
    assert "loud line" in text
    assert "quiet line" not in text


def test_background_warnings_become_notices(tmp_path: Path, restore_logging) -> None:
    setup_logging(log_dir=tmp_path, log_level="DEBUG")
    notifier = FakeNotifier()
    attach_notifier(notifier)

    voice_log = logging.getLogger(VOICE_LOGGER)
    voice_log.info("Voice command: dark mode")
    voice_log.warning("Speech recognition not supported: no microphone")

    assert notifier.messages == ["Warning: Speech recognition not supported: no microphone"]

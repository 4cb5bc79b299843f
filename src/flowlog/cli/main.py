# src/flowlog/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs:
- the voice listener in a background thread (optional),
- the console REPL in the main thread.
"""

from __future__ import annotations

import contextlib
import logging
import signal

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..connectors.voice_connector import start_voice_in_background
from ..logging_setup import attach_notifier, setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    runner = getattr(state, "voice_runner", None)
    if runner is None:
        return
    try:
        runner.stop()
        runner.join(timeout=10.0)
    except Exception:
        logger.debug("Voice listener shutdown failed.", exc_info=True)
    state.voice_runner = None


def main() -> None:
    settings = get_settings()

    log_file = setup_logging(log_dir=settings.data_dir, log_level=settings.log_level)

    logger.info("Starting %s (log: %s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)
    attach_notifier(state.notifier)

    if settings.voice_enabled:
        state.voice_runner = start_voice_in_background(state)

    def _handle_sigterm(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        raise KeyboardInterrupt

    with contextlib.suppress(ValueError, AttributeError):
        # SIGTERM may be unavailable on some platforms.
        signal.signal(signal.SIGTERM, _handle_sigterm)

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()

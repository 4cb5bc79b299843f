# src/flowlog/connectors/voice_connector.py

"""
Voice command connector.

A long-lived listening session runs in a background thread with its own event
loop (the console REPL blocks on input()). Each finalized utterance is
normalized and dispatched as one independent command under state.lock.
Recognition errors are logged and listening continues.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..core.errors import RecognitionError, UnsupportedPlatform
from ..core.interpreter import normalize_command
from ..core.ports import SpeechSource
from ..core.state import AppState
from ..tasks.task_api import run_command

logger = logging.getLogger(__name__)


class SpeechRecognitionSource:
    """
    Microphone + Google Web Speech via the SpeechRecognition package.

    Construction raises UnsupportedPlatform when the package, PyAudio or a
    microphone is missing. listen() returns "" when nobody spoke within
    listen_timeout so the caller gets a chance to stop between utterances.
    """

    def __init__(
        self,
        *,
        language: str = "en-US",
        phrase_time_limit: float = 8.0,
        listen_timeout: float = 5.0,
    ) -> None:
        try:
            import speech_recognition as sr  # type: ignore
        except ImportError as e:
            raise UnsupportedPlatform(
                "SpeechRecognition is not installed (pip install 'flowlog[voice]')"
            ) from e

        try:
            microphone = sr.Microphone()
        except (AttributeError, OSError) as e:
            # AttributeError: PyAudio missing; OSError: no input device.
            raise UnsupportedPlatform(f"no usable microphone: {e!r}") from e

        self._sr: Any = sr
        self._recognizer: Any = sr.Recognizer()
        self._microphone: Any = microphone
        self._language = language
        self._phrase_time_limit = phrase_time_limit
        self._listen_timeout = listen_timeout
        self._calibrated = False

    def listen(self) -> str:
        sr = self._sr
        with self._microphone as source:
            if not self._calibrated:
                self._recognizer.adjust_for_ambient_noise(source, duration=0.5)
                self._calibrated = True
            try:
                audio = self._recognizer.listen(
                    source,
                    timeout=self._listen_timeout,
                    phrase_time_limit=self._phrase_time_limit,
                )
            except sr.WaitTimeoutError:
                return ""

        try:
            return str(self._recognizer.recognize_google(audio, language=self._language))
        except sr.UnknownValueError as e:
            raise RecognitionError("speech was not understood") from e
        except sr.RequestError as e:
            raise RecognitionError(f"recognition service unavailable: {e}") from e


async def run_voice_listener(
    source: SpeechSource,
    dispatch: Callable[[str], object],
    *,
    error_delay_seconds: float = 0.5,
) -> None:
    """
    Listen forever, dispatching one normalized command per utterance.

    - empty transcripts are skipped
    - recognition errors are logged, then listening resumes after a short delay
    - a crashing dispatch is logged and does not end the session

    To stop the listener, cancel the coroutine/task.
    """
    delay = max(0.0, float(error_delay_seconds))

    while True:
        try:
            transcript = await asyncio.to_thread(source.listen)
        except RecognitionError as e:
            logger.warning("Speech recognition error: %s", e)
            await asyncio.sleep(delay)
            continue
        except Exception:
            logger.exception("Speech source failed; retrying.")
            await asyncio.sleep(delay)
            continue

        command = normalize_command(transcript)
        if not command:
            continue

        logger.info("Voice command: %s", command)
        try:
            dispatch(command)
        except Exception:
            logger.exception("Voice command handler crashed command=%r", command)


def dispatch_voice_command(
    state: AppState,
    command: str,
    *,
    stopped: threading.Event | None = None,
) -> None:
    """Run one utterance under state.lock; dropped if the listener was stopped while it waited."""
    with state.lock:
        if stopped is not None and stopped.is_set():
            logger.info("Voice listener stopped, dropping command=%r", command)
            return
        run_command(state, command)
        if state.dashboard is not None:
            state.dashboard.draw()


@dataclass
class VoiceBackgroundRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    task: asyncio.Task
    stopped: threading.Event

    def stop(self) -> None:
        """Stop dispatching at once and cancel the listener; does not wait for the thread."""
        self.stopped.set()
        try:
            self.loop.call_soon_threadsafe(self.task.cancel)
        except RuntimeError:
            logger.debug("Voice loop already closed.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)

    def is_alive(self) -> bool:
        return self.thread.is_alive()


def start_voice_in_background(
    state: AppState,
    *,
    source: SpeechSource | None = None,
) -> VoiceBackgroundRunner | None:
    """
    Start the listener in a background thread.

    Returns None (and logs) when speech recognition is unsupported here;
    the rest of the app keeps working without voice.
    """
    if source is None:
        settings = state.settings
        try:
            source = SpeechRecognitionSource(
                language=getattr(settings, "voice_language", "en-US"),
                phrase_time_limit=getattr(settings, "voice_phrase_limit", 8.0),
            )
        except UnsupportedPlatform as e:
            logger.warning("Speech recognition not supported: %s", e)
            return None

    ready = threading.Event()
    stopped = threading.Event()
    holder: dict[str, object] = {}
    speech = source

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        task = loop.create_task(
            run_voice_listener(speech, lambda c: dispatch_voice_command(state, c, stopped=stopped))
        )

        holder["loop"] = loop
        holder["task"] = task
        ready.set()

        try:
            loop.run_until_complete(task)
        except asyncio.CancelledError:
            logger.info("Voice listener stopped.")
        finally:
            with contextlib.suppress(RuntimeError):
                loop.close()

    t = threading.Thread(target=runner, name="flowlog-voice", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    task = holder.get("task")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(task, asyncio.Task):
        logger.error("Voice thread did not initialize properly.")
        return None

    logger.info("Voice listener started.")
    return VoiceBackgroundRunner(thread=t, loop=loop, task=task, stopped=stopped)

# src/flowlog/core/errors.py

"""
Error taxonomy.

None of these is fatal to a session: callers degrade every failure to a
no-op plus an optional notice.
"""

from __future__ import annotations


class FlowlogError(Exception):
    """Base class for all flowlog errors."""


class InvalidInput(FlowlogError, ValueError):
    """A task was submitted with an empty name or a non-numeric duration."""


class IndexOutOfRange(FlowlogError, IndexError):
    """A reorder referenced a position outside the current task list."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"index {index} out of range for {length} task(s)")
        self.index = index
        self.length = length


class UnsupportedPlatform(FlowlogError, RuntimeError):
    """Speech recognition is not available on this machine."""


class RecognitionError(FlowlogError):
    """A single utterance could not be turned into text."""

"""flowlog: a single-session workflow tracker for the terminal."""

__version__ = "0.1.0"

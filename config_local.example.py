# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for everything else. Only the names below are read.
"""

# Example: always start with the microphone listener on
# VOICE_ENABLED = True

# Example: write exports somewhere other than the working directory
# from pathlib import Path
# EXPORT_DIR = Path("~/Documents/flowlog").expanduser()

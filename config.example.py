# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Local machine-specific overrides go to config_local.py (gitignored).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "FLOWLOG_APP_NAME": "App display name (default: flowlog).",
    "FLOWLOG_LOG_LEVEL": "File log level (default: INFO). The console only shows warnings.",
    # Paths (gitignored)
    "FLOWLOG_DATA_DIR": "Local data directory for logs and theme (default: .local/flowlog).",
    "FLOWLOG_THEME_PATH": "Persisted theme flag (default: <data_dir>/theme.json).",
    # Export
    "FLOWLOG_EXPORT_DIR": "Directory the CSV export is written to (default: current directory).",
    "FLOWLOG_EXPORT_FILENAME": "CSV file name (default: workflow_tasks.csv).",
    # Display
    "FLOWLOG_TIME_FORMAT": "strftime format for task times (default: %I:%M:%S %p).",
    "FLOWLOG_TOAST_SECONDS": "How long a notice stays visible (default: 3).",
    "FLOWLOG_CHART_WIDTH": "Width of the longest chart bar in cells (default: 40, min 10).",
    # Voice
    "FLOWLOG_VOICE_ENABLED": "Start the voice listener at launch (true/false, default: false).",
    "FLOWLOG_VOICE_LANGUAGE": "Recognition language tag (default: en-US).",
    "FLOWLOG_VOICE_PHRASE_LIMIT": "Max seconds per utterance (default: 8).",
    # Suggestion tuning
    "FLOWLOG_SUGGEST_MIN_TASKS": "Tasks needed before insights are given (default: 5).",
    "FLOWLOG_SUGGEST_LONG_MINUTES": "Mean duration above which automation is suggested (default: 45).",
}

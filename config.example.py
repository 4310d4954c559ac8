# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKS_APP_NAME": "App display name (default: task-tracker).",
    "TASKS_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKS_LOG_TO_FILE": "Also write full DEBUG logs to <data_dir>/task-tracker.log (default: true).",
    # Paths (gitignored)
    "TASKS_DATA_DIR": "Local data directory for the log file (default: .local/task-tracker).",
    # Console rendering
    "TASKS_DATE_FORMAT": "strftime format for dates in /list and /show (default: %Y-%m-%d).",
}

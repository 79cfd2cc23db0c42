# config.example.py

"""
Documentation-only module (safe to commit).

Configuration is loaded from environment variables (optionally via a local .env file).
Task data is never written to disk; these settings only affect presentation and logging.
"""

ENV_VARS = {
    # App
    "TASKTRACK_APP_NAME": "Banner title (default: Personal Task Manager).",
    "TASKTRACK_PROMPT": "REPL prompt (default: '> ').",
    # Logging
    "TASKTRACK_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKTRACK_LOG_FILE_ENABLED": "Also write full DEBUG logs to a file (true/false).",
    "TASKTRACK_LOG_DIR": "Log file directory (default: .local/task_tracker).",
}

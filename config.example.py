# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Connectors
    "TASKPAD_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    # Storage
    "TASKPAD_STORAGE_BACKEND": "Where the task list is kept: json | sqlite | memory (default: json).",
    "TASKPAD_STORAGE_KEY": "Key the task snapshot is stored under (default: tasks).",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory, also holds taskpad.log (default: .local/taskpad).",
    "TASKPAD_STORAGE_PATH": (
        "Backend file (default: <data_dir>/tasks.json, or <data_dir>/tasks.sqlite3 for sqlite)."
    ),
}

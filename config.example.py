# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit a real .env.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKTRACK_APP_NAME": "App display name (default: tasktrack).",
    "TASKTRACK_LOG_LEVEL": "Console logging level (default: INFO).",
    # Connectors
    "TASKTRACK_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # Paths (gitignored)
    "TASKTRACK_DATA_DIR": "Local data directory (default: .local/tasktrack).",
    "TASKTRACK_DB_PATH": "SQLite database path (default: <data_dir>/tasktrack.sqlite3).",
    # Credentials
    "TASKTRACK_BCRYPT_ROUNDS": "bcrypt cost factor for new salts, clamped to 4..31 (default: 10).",
}

# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local switch overrides, gitignored)
"""

ENV_VARS = {
    # App / logging
    "TODOC_APP_NAME": "Bot display name (default: ekud).",
    "TODOC_LOG_LEVEL": "Console logging level (default: INFO).",
    # Behaviour
    "TODOC_AUTOSAVE": "Save after every change (true/false, default: true).",
    "TODOC_CONSOLE_ENABLED": "Run the console connector (true/false, default: true).",
    # Paths (gitignored)
    "TODOC_DATA_DIR": "Local data and log directory (default: .local/todo).",
    "TODOC_SAVE_PATH": "Task save file (default: <data_dir>/tasks.txt).",
}

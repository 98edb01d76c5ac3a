# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_DATA_DIR": "Local data directory for the log file (default: .local/tasklist).",
    # Task source
    "TASKLIST_SEED_PATH": (
        "JSON array of {id, title, done} objects to load at startup "
        "(default: unset => built-in seed)."
    ),
    "TASKLIST_AUTOLOAD": "Load tasks from the source at startup (true/false, default: true).",
    # Store policy
    "TASKLIST_ALLOW_DUPLICATE_IDS": "Accept tasks whose id is already stored (default: false).",
}

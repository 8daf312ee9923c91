# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # Logging
    "EXPOSURE_LOG_LEVEL": "Console logging level (default: INFO).",
    "EXPOSURE_LOG_DIR": "Directory for exposure.log (default: <data_dir>).",
    # Paths (gitignored)
    "EXPOSURE_DATA_DIR": "Local data directory (default: .local/exposure).",
    "EXPOSURE_TASKS_PATH": "Task JSON document path (default: <data_dir>/tasks.json).",
    # Sessions
    "EXPOSURE_TICK_SECONDS": "Timer tick cadence in seconds (default: 1.0).",
    "EXPOSURE_SINGLE_ACTIVE_SESSION": (
        "Refuse starting a task while another one is ongoing (true/false, default: false)."
    ),
}

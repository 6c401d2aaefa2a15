# config.example.py

"""
Documentation-only module (safe to commit).

Settings are loaded from environment variables, optionally via a local .env
file (python-dotenv). This file lists every variable taskpulse reads.
"""

ENV_VARS = {
    # App / logging
    "TASKPULSE_APP_NAME": "App display name used in log lines (default: taskpulse).",
    "TASKPULSE_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKPULSE_LOG_DIR": "Directory for taskpulse.log (default: .local/taskpulse).",
    "TASKPULSE_FILE_LOGGING": "Write the debug log file (true/false, default: true).",
    # Classification
    "TASKPULSE_DUE_SOON_DAYS": "Default due-soon window in days for reports (default: 3).",
}

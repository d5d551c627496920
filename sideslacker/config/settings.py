from __future__ import annotations

import os
from pathlib import Path

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SLACK_TIMEOUT_SEC = 5.0


def get_slack_webhook_url() -> str | None:
    configured = os.getenv("SIDESLACKER_SLACK_WEBHOOK_URL")
    if isinstance(configured, str) and configured.strip():
        return configured.strip()
    return None


def get_slack_timeout_sec() -> float:
    configured = os.getenv("SIDESLACKER_SLACK_TIMEOUT_SEC")
    if configured is None:
        return DEFAULT_SLACK_TIMEOUT_SEC
    try:
        value = float(configured)
    except (TypeError, ValueError):
        return DEFAULT_SLACK_TIMEOUT_SEC
    return value if value > 0 else DEFAULT_SLACK_TIMEOUT_SEC


def get_name_directory_path() -> Path | None:
    configured = os.getenv("SIDESLACKER_NAME_DIRECTORY_PATH")
    if isinstance(configured, str) and configured.strip():
        return Path(configured.strip()).expanduser()
    return None


def get_api_host() -> str:
    configured = os.getenv("SIDESLACKER_API_HOST")
    host = (
        configured.strip()
        if isinstance(configured, str) and configured.strip()
        else DEFAULT_API_HOST
    )
    return host


def get_api_port() -> int:
    configured = os.getenv("SIDESLACKER_API_PORT")
    if configured is None:
        return DEFAULT_API_PORT
    try:
        value = int(configured)
    except (TypeError, ValueError):
        return DEFAULT_API_PORT
    if value <= 0 or value > 65535:
        return DEFAULT_API_PORT
    return value


def get_log_level() -> str:
    configured = str(os.getenv("SIDESLACKER_LOG_LEVEL") or "").strip().upper()
    if configured in {"DEBUG", "INFO", "WARNING", "ERROR"}:
        return configured
    return DEFAULT_LOG_LEVEL

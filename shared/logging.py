from __future__ import annotations

"""Structured JSON logging for the tubeseo web app.

Logs are emitted as single-line JSON objects. Secrets such as
``OPENAI_API_KEY`` or OAuth tokens are masked before logging.
"""

import json
import logging
import os
from typing import Any

from shared.config import settings


SERVICE_NAME = "tubeseo"

# Configure root logger for JSON output. Only the JSON message body is printed.
_LEVEL = getattr(logging, os.getenv("LOG_LEVEL", settings.LOG_LEVEL).upper(), logging.INFO)
logging.basicConfig(level=_LEVEL, format="%(message)s")

_SECRET_KEYS = {
    "access_token",
    "refresh_token",
    "api_key",
    "client_secret",
    "OPENAI_API_KEY",
    "GOOGLE_CLIENT_SECRET",
}


def _current_secrets() -> list[str]:
    return [settings.OPENAI_API_KEY, settings.GOOGLE_CLIENT_SECRET]


def _mask(value: Any) -> Any:
    """Replace occurrences of known secret values with ``[MASKED]``."""
    if isinstance(value, str):
        for secret in _current_secrets():
            if secret and secret in value:
                value = value.replace(secret, "[MASKED]")
    return value


def _log(level: int, event: str, **fields: object) -> None:
    data: dict[str, Any] = {"service": SERVICE_NAME, "event": event}
    for key, value in fields.items():
        if key in _SECRET_KEYS:
            data[key] = "[MASKED]"
        else:
            data[key] = _mask(value)
    logging.log(level, json.dumps(data, default=str))


def log_info(event: str, **fields: object) -> None:
    """Emit an informational JSON log line."""
    _log(logging.INFO, event, **fields)


def log_error(event: str, **fields: object) -> None:
    """Emit an error JSON log line."""
    _log(logging.ERROR, event, **fields)


def log_debug(event: str, **fields: object) -> None:
    """Emit a debug-level JSON log line."""
    _log(logging.DEBUG, event, **fields)


__all__ = ["log_info", "log_error", "log_debug", "SERVICE_NAME"]

"""Logging setup for readmegen.

Log lines can carry the Gemini request URL (``?key=...``) or a GitHub
``Authorization`` header, so every message and every config dump goes through
:func:`redact_sensitive` before it is written.
"""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional

REDACTED = "***REDACTED***"

# Config/dict keys whose values are secrets
SECRET_KEY = re.compile(r"api[_-]?key|^key$|token|secret|authorization", re.IGNORECASE)

# Secret assignments inside free text: key=..., api_key: ..., access_token=..., Authorization: Bearer ...
SECRET_ASSIGNMENT = re.compile(
    r"\b((?:api[_-]?)?key|[a-z_]*token|secret|authorization)(\s*[=:]\s*)(?:bearer\s+)?[^\s&\"',]+",
    re.IGNORECASE
)

# Pipeline context passed through ``extra=``
CONTEXT_FIELDS = ("owner", "repo", "archetype", "state")

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with pipeline context when present."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_sensitive(record.getMessage()),
        }
        entry.update(
            (name, getattr(record, name)) for name in CONTEXT_FIELDS if hasattr(record, name)
        )
        if record.exc_info:
            entry["exception"] = redact_sensitive(self.formatException(record.exc_info))
        return json.dumps(entry)


class RedactingFormatter(logging.Formatter):
    """Plain-text formatter that scrubs secrets from the rendered line."""

    def format(self, record: logging.LogRecord) -> str:
        return redact_sensitive(super().format(record))


def redact_sensitive(data: Any) -> Any:
    """Return ``data`` with secrets replaced.

    Dicts are redacted by key (recursively), lists item by item and strings
    by ``name=value`` / ``name: value`` assignments. Unset secrets (None or
    empty) are left as they are so a config dump still shows what is missing.
    """
    if isinstance(data, dict):
        return {
            key: REDACTED if _is_secret_key(key) and value else redact_sensitive(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact_sensitive(item) for item in data]
    if isinstance(data, str):
        return SECRET_ASSIGNMENT.sub(rf"\1={REDACTED}", data)
    return data


def _is_secret_key(key: Any) -> bool:
    return isinstance(key, str) and bool(SECRET_KEY.search(key))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def setup_logging(level: str = "INFO", structured: bool = True, stream: Optional[Any] = None) -> None:
    """Configure the root logger.

    Args:
        level: Level name, e.g. ``"DEBUG"``; unknown names fall back to INFO
        structured: Emit JSON lines instead of plain text
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter() if structured else RedactingFormatter(PLAIN_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # httpx logs full request URLs, which carry the Gemini key
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

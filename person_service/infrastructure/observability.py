"""Structured Logging: JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (person_id, error_code, path, method) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging() is idempotent: repeated calls never stack handlers
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = ("person_id", "error_code", "path", "method", "status_code")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _ServiceHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _ServiceHandler):
            logging.root.removeHandler(existing)

    handler = _ServiceHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))

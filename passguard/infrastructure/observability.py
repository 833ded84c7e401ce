"""Structured Logging - JSON formatter and setup for the passguard shell.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (rule_count, failure_count, candidate_length) surfaced when present
    - Logs go to stderr; stdout is reserved for the validation outcome
    - The candidate password itself is never logged

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging replaces its own handler on repeat calls (no duplicate lines)
"""

import logging
import json
import sys
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "rule_count", "failure_count", "candidate_length",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

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


class _PassguardHandler(logging.StreamHandler):
    """Marker subclass so setup_logging can find its own handler."""


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _PassguardHandler):
            logging.root.removeHandler(existing)

    handler = _PassguardHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler

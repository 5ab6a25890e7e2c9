"""Structured Logging — JSON and text formatters sharing the request-domain fields.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Domain fields (todo_id, template_id, error_code, path, status_code,
      mail_backend) surface in both formats when present on the record
    - setup_logging replaces its own handler on repeat calls, never stacks one

Design Decisions:
    - setup_logging called once per app startup via lifespan; create_app()
      may run several times in one process (tests, reload)
"""

import logging
import json
from datetime import datetime, timezone

DOMAIN_FIELDS = (
    "todo_id", "template_id", "error_code", "path",
    "status_code", "mail_backend",
)

_HANDLER_NAME = "todo_api"


def domain_fields(record: logging.LogRecord) -> dict:
    """Domain extras passed via `extra=`, in DOMAIN_FIELDS order."""
    return {
        key: record.__dict__[key]
        for key in DOMAIN_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **domain_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with domain extras appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s — %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = " ".join(f"{k}={v}" for k, v in domain_fields(record).items())
        if not extras:
            return line
        # exception text, if any, stays on the lines after the first
        head, sep, tail = line.partition("\n")
        return f"{head} [{extras}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the app handler on the root logger and return it."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler

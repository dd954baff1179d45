"""Structured Logging: one JSON object per line, tagged with the service name.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, service,
      logger, and message
    - Records logged with a `path` extra get a `request` object holding both
      `method` and `path`; `method` is null when the caller did not supply it
    - setup_logging owns exactly one root handler, however often it runs
"""

import logging
import json
from datetime import datetime, timezone


SERVICE_NAME = "user-api"
HANDLER_NAME = "user_api"

REQUEST_FIELDS = ("method", "path")
CONTEXT_FIELDS = ("error_code", "user_id")


class JSONFormatter(logging.Formatter):
    """Format records as JSON lines for log shipping."""

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if getattr(record, "path", None) is not None:
            log["request"] = {
                key: getattr(record, key, None) for key in REQUEST_FIELDS
            }
        for key in CONTEXT_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install (or replace) the service's root log handler."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))

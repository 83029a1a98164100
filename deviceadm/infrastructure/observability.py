"""Structured Logging — JSON log lines for device store callers.

Invariants:
    - Every line has timestamp, level, logger and message
    - device_id / operation extras are copied onto the line when a call site sets them
    - A logged DeviceAdmError contributes its code, category and error kind
    - setup_logging is idempotent: calling it again replaces its own handler

Design Decisions:
    - stdlib logging + own formatter, no logging dependency
    - Errors are classified from the exception itself so callers can log
      `logger.exception(...)` without repeating error_code by hand
"""

import logging
import json
from datetime import datetime, timezone

from deviceadm.core.errors import DeviceAdmError

EXTRA_FIELDS = ("device_id", "operation", "error_code")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "deviceadm"


def _error_fields(exc: DeviceAdmError) -> dict:
    fields = {"error_code": exc.code, "error_category": exc.category.value}
    kind = (exc.context.debug_info or {}).get("kind")
    if kind:
        fields["error_kind"] = kind
    if exc.context.device_id:
        fields["device_id"] = exc.context.device_id
    return fields


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            exc = record.exc_info[1]
            if isinstance(exc, DeviceAdmError):
                log.update(_error_fields(exc))
            log["exception"] = self.formatException(record.exc_info)
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the deviceadm handler on the root logger and return it."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler

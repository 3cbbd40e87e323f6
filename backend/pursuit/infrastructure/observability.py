"""Structured Logging — one stream handler, JSON or text, with workspace extras.

Invariants:
    - Every record carries timestamp, level, logger and message
    - Known extras (storage_key, application_id, error_code, path, sort,
      match_count, delay_ms) are emitted only when the caller passed them
    - setup_logging is idempotent: calling it twice never duplicates output

Design Decisions:
    - stdlib logging + a small Formatter: log shippers read the JSON lines as-is
    - Text format appends extras as key=value so development logs keep the same fields
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "storage_key", "application_id", "error_code", "path",
    "sort", "match_count", "delay_ms",
)
_HANDLER_NAME = "pursuit"


def _extras(record: logging.LogRecord) -> dict:
    return {
        name: getattr(record, name)
        for name in EXTRA_FIELDS
        if getattr(record, name, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with extras appended."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)-7s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if extras:
            line += " " + " ".join(f"{k}={v}" for k, v in extras.items())
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the pursuit handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler

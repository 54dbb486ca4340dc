"""
Structured logging for the "starflow" logger.

Production emits one JSON object per line, everything else a readable line.
The request id lives in a ContextVar set by RequestIdMiddleware; a handler
filter copies it onto each record. Fields passed through `extra=` are rendered
by both formatters.
"""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Dict, Optional

LOGGER_NAME = "starflow"

request_id_ctx_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Attributes every LogRecord carries; anything else was passed via extra=
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime", "request_id"}

_LATENCY_BUCKETS = ((10, "<10ms"), (100, "10-100ms"), (500, "100-500ms"), (1000, "500-1000ms"))

_MAX_FIELD_CHARS = 500


def get_request_id() -> Optional[str]:
    return request_id_ctx_var.get()


def latency_bucket_ms(latency_ms: Optional[float]) -> str:
    if latency_ms is None:
        return "unknown"
    for upper, label in _LATENCY_BUCKETS:
        if latency_ms < upper:
            return label
    return ">=1000ms"


def _timestamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace("+00:00", "Z")


def _extra_fields(record: logging.LogRecord) -> Dict[str, object]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RESERVED_ATTRS and value is not None
    }


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = get_request_id()
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": _timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
            **_extra_fields(record),
        }
        return json.dumps(payload, default=str)


class PrettyFormatter(logging.Formatter):
    """`<ts> INFO [starflow] [rid=...] commitment.claimed week_key=2026-02-W2`"""

    def format(self, record: logging.LogRecord) -> str:
        parts = [_timestamp(record), record.levelname, "[starflow]"]
        rid = getattr(record, "request_id", None)
        if rid:
            parts.append(f"[rid={rid}]")
        parts.append(record.getMessage())
        parts.extend(f"{key}={value}" for key, value in sorted(_extra_fields(record).items()))
        return " ".join(parts)


def configure_logging(env: str = "development") -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter() if env.lower() == "production" else PrettyFormatter())
    handler.addFilter(RequestIdFilter())

    logger.handlers = [handler]
    logger.propagate = True


def _clip(value: object) -> str:
    text = str(value)
    if len(text) <= _MAX_FIELD_CHARS:
        return text
    return text[:_MAX_FIELD_CHARS] + "...<truncated>"


def log_event(
    level: str,
    msg: str,
    *,
    user_id: Optional[str] = None,
    week_key: Optional[str] = None,
    event_type: Optional[str] = None,
    extra: Optional[Dict[str, object]] = None,
) -> None:
    """Log a domain event with the current request id; extra values are clipped to 500 chars."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        # Used outside the app (scripts, unit tests of services)
        configure_logging(os.getenv("STARFLOW_ENV", "development"))

    fields: Dict[str, object] = {
        "request_id": get_request_id(),
        "user_id": user_id,
        "week_key": week_key,
        "event_type": event_type,
    }
    for key, value in (extra or {}).items():
        fields[key] = _clip(value)

    getattr(logger, level, logger.info)(msg, extra=fields)

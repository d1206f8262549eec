"""JSON logging formatter used by the llmclient logging setup.

:class:`JsonFormatter` serializes the standard record fields, hoists the keys
of JSON-encoded messages (as produced by ``log_event``) to the top level and
redacts credential-looking keys so bearer tokens never reach a log sink.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
import contextlib
from typing import Any, Dict

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

REDACTED = "***"
_SECRET_KEYS = frozenset({"api_key", "authorization", "key", "token"})

_RECORD_INTERNALS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "name",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


def _redact(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {k: (REDACTED if k.lower() in _SECRET_KEYS and v else v) for k, v in payload.items()}


class JsonFormatter(logging.Formatter):
    """Lightweight JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:
        base: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        msg_text = record.getMessage()
        base["msg"] = msg_text
        with contextlib.suppress(ValueError):
            parsed = json.loads(msg_text)
            if isinstance(parsed, dict):
                base.update(_redact(parsed))
                # cli.* events are printed to a terminal; the hoisted keys suffice
                ev = parsed.get("event")
                if isinstance(ev, str) and ev.startswith("cli."):
                    base.pop("msg", None)
        extra = {
            k: v
            for k, v in record.__dict__.items()
            if not k.startswith("_") and k not in _RECORD_INTERNALS and k not in base
        }
        base.update(_redact(extra))
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO", "REDACTED"]

from __future__ import annotations

"""JSON logging helpers with per-run context for the modprime driver."""

import json
import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Dict, TextIO

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_FIELDS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

_CONTEXT: logging.LoggerAdapter | None = None


class ContextAwareAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        context = dict(self.extra)
        context.update(kwargs.get("extra") or {})
        kwargs["extra"] = context
        return msg, kwargs


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - logging override
        payload: Dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in _RECORD_FIELDS or key.startswith("_"):
                continue
            payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        # Large integers stay exact; anything else falls back to str().
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(
    level: int | str = logging.INFO, *, json_output: bool = True, stream: TextIO | None = None
) -> None:
    """Route root logging through one handler writing to ``stream`` (stdout by default)."""

    global _CONTEXT
    base_logger = logging.getLogger()
    handler = logging.StreamHandler(stream=stream or sys.stdout)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    base_logger.handlers = [handler]
    base_logger.setLevel(level)

    _CONTEXT = ContextAwareAdapter(base_logger, extra={})


@contextmanager
def log_context(**fields: object):
    """Temporarily push contextual fields (run_id, nbits, etc.)."""

    if _CONTEXT is None:
        configure_logging()
    adapter = _CONTEXT  # type: ignore[misc]
    prev = dict(adapter.extra or {})
    adapter.extra = {**prev, **{k: v for k, v in fields.items() if v is not None}}
    try:
        yield
    finally:
        adapter.extra = prev


def get_logger(name: str) -> logging.LoggerAdapter:
    if _CONTEXT is None:
        configure_logging()
    assert _CONTEXT is not None
    return ContextAwareAdapter(logging.getLogger(name), extra=dict(_CONTEXT.extra))

"""Structured logging for the client.

Call sites log plain dicts (``logger.info({"esendex": "request_ok", ...})``).
``logger`` is a structlog ``BoundLogger`` wrapped around the stdlib
``esendex`` logger: dict events are merged into the event dict and rendered
as one JSON line, then handed to stdlib logging, so the host application
decides where they go.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict

import structlog

LOGGER_NAME = "esendex"


def merge_dict_event(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten ``logger.info({...})`` payloads into the event dict."""
    event = event_dict.get("event")
    if isinstance(event, dict):
        del event_dict["event"]
        return {**event, **event_dict}
    return event_dict


PROCESSORS = [
    structlog.stdlib.filter_by_level,
    merge_dict_event,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(default=str, ensure_ascii=False),
]


def get_logger(name: str = LOGGER_NAME) -> Any:
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str | int = "INFO") -> None:
    """Attach a stderr handler to the package logger (idempotent)."""
    std = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    std.setLevel(level)
    if not any(getattr(h, "_esendex", False) for h in std.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._esendex = True  # type: ignore[attr-defined]
        std.addHandler(handler)


logger = get_logger()

"""Base logging utilities for the cancellation invoker.

Rationale:
- Central place to configure the shared ``currents`` logger and its single
  managed console handler.
- Avoid ad-hoc logger setup in the service layer.

Formats:
- ``workflow`` (default): GitHub workflow commands on stdout, the surface the
  runner reads step output from.
- ``json``: one JSON object per line on stderr.
- ``plain``: human-readable text on stderr.

The level comes from ``CURRENTS_LOG_LEVEL`` when set, else from the caller.
Child loggers (``currents.*``) carry no handlers of their own and propagate to
the base logger.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Optional, TextIO

from ..config.defaults import DEFAULT_LOG_FORMAT, LOG_FORMAT_ENV, LOG_FORMATS, LOG_LEVEL_ENV
from .log_support import JsonFormatter, LogContext, WorkflowCommandFormatter

BASE_LOGGER_NAME = "currents"
EVENTS_LOGGER_NAME = "currents.events"

_BASE_LOGGER_ATTR = "_currents_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_currents_console_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def resolve_log_format(value: str | None = None) -> str:
    """Return a supported format name from ``value`` or ``CURRENTS_LOG_FORMAT``."""
    candidate = (value or os.getenv(LOG_FORMAT_ENV) or DEFAULT_LOG_FORMAT).strip().lower()
    return candidate if candidate in LOG_FORMATS else DEFAULT_LOG_FORMAT


def _make_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter()
    if log_format == "plain":
        return logging.Formatter(_PLAIN_FORMAT)
    return WorkflowCommandFormatter()


def _stream_for(log_format: str) -> TextIO:
    # Resolved at call time so redirected/captured streams are honored.
    return sys.stdout if log_format == "workflow" else sys.stderr


def _ensure_base_logger(log_format: str, level: int) -> logging.Logger:
    """Initialize (or refresh) and return the shared ``currents`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    logger.setLevel(desired_level)

    handler: Optional[logging.StreamHandler] = None
    for existing in logger.handlers:
        if getattr(existing, _CONSOLE_HANDLER_ATTR, False) and isinstance(existing, logging.StreamHandler):
            handler = existing
            break
    if handler is None:
        handler = logging.StreamHandler(_stream_for(log_format))
        setattr(handler, _CONSOLE_HANDLER_ATTR, True)
        logger.handlers[:] = [handler]
    else:
        handler.setStream(_stream_for(log_format))
    handler.setLevel(desired_level)
    handler.setFormatter(_make_formatter(log_format))
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(
    name: str = BASE_LOGGER_NAME,
    log_format: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Return ``name`` wired to the shared base logger.

    Every call re-applies format, level and output stream to the managed
    console handler, so the most recent caller's settings win.
    """
    base_logger = _ensure_base_logger(resolve_log_format(log_format), level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.DEBUG,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON message.

    ``None``-valued fields are dropped. The context is merged shallowly.
    """
    payload: dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "EVENTS_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "log_event",
    "resolve_log_format",
]

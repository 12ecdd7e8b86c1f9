"""Base structured logging utilities for the gateway.

All gateway loggers are children of the shared ``gateway`` logger, which owns
a single stderr handler. ``normalized_log_event`` guarantees the canonical
keys ``phase`` and ``attempt`` on chat events and adds ``error_kind`` on failures.

Never pass credentials or message contents to these helpers; log counts and
flags instead.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "gateway"

_BASE_LOGGER_ATTR = "_gateway_logger_initialized"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

REQUIRED_NORMALIZED_KEYS = ("phase", "attempt")


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


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``gateway`` logger once."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger

    desired_level = _parse_level(os.getenv("GATEWAY_LOG_LEVEL"), default=level)
    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT))
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return the shared gateway logger or one of its children.

    Child names are placed under ``gateway.`` so they inherit the shared
    handler (``get_logger("dispatcher")`` -> ``gateway.dispatcher``).
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logger(*, level: int | str | None = None, json_mode: bool = True) -> logging.Logger:
    """Reconfigure the shared gateway logger at runtime.

    Adjusts the level and swaps the formatter of the managed stderr handler
    without requiring a process restart.
    """
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)
    if level is not None:
        resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(resolved)
        for h in logger.handlers:
            h.setLevel(resolved)
    for h in logger.handlers:
        h.setFormatter(JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Keys whose value is ``None`` are dropped unless ``keep_none`` is set.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_kind: str | None = None,
    level: int | None = None,
    **extra_fields: Any,
) -> None:
    """Emit a chat lifecycle event with the normalized key set.

    ``phase`` and ``attempt`` are always present (``attempt`` may be null).
    ``error_kind`` is included only for failures, and failures default to
    WARNING level so they stand out from the INFO lifecycle stream.
    """
    base_fields: Dict[str, Any] = {"phase": phase, "attempt": attempt}
    if error_kind is not None:
        base_fields["error_kind"] = error_kind
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    if level is None:
        level = logging.WARNING if error_kind is not None else logging.INFO
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "BASE_LOGGER_NAME",
    "REQUIRED_NORMALIZED_KEYS",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
]

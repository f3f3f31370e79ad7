"""Structured logging for the MCP server.

Every record goes to stderr: stdout belongs to the MCP stdio transport and a
stray line there corrupts the JSON-RPC stream.

Layout:
- One base logger, ``mindbridge``, owns the handlers (console, plus an
  optional rotating file). Component loggers (``mindbridge.openai``,
  ``mindbridge.service`` ...) only propagate to it.
- Events are single JSON objects built by :func:`log_event`. Adapter and
  dispatcher events go through :func:`normalized_log_event`, which always
  carries ``structured`` and ``phase`` and adds ``error_code`` on failures.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "mindbridge"
LOG_LEVEL_ENV = "MINDBRIDGE_LOG_LEVEL"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Handler markers; only handlers carrying one are touched on reconfiguration
_CONSOLE_MARK = "_mindbridge_console"
_FILE_MARK = "_mindbridge_file"

_LEVEL_ALIASES = {"WARN": logging.WARNING, "FATAL": logging.CRITICAL}


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Resolve a level name such as ``"debug"`` or ``"WARN"``; unknown names give ``default``."""
    if not value:
        return default
    name = value.strip().upper()
    if name in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[name]
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else default


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(PLAIN_FORMAT)


def _marked(logger: logging.Logger, mark: str) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, mark, False)]


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Create the base logger on first use; refresh its console stream afterwards.

    ``MINDBRIDGE_LOG_LEVEL`` is read once, on first initialization; later
    level changes go through :func:`configure_logger`. The console handler is
    re-pointed at the current ``sys.stderr`` on every call so that stream
    replacement (pytest ``capsys``) is honored. A console whose stream has
    been closed is replaced, since flushing it would raise.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    consoles = _marked(base, _CONSOLE_MARK)
    if consoles:
        for console in consoles:
            stream = getattr(console, "stream", None)
            if stream is None or getattr(stream, "closed", False):
                base.removeHandler(console)
                with contextlib.suppress(Exception):
                    console.close()
                base.addHandler(_new_console(json_mode, console.level))
                continue
            if isinstance(console, logging.StreamHandler):
                with contextlib.suppress(Exception):
                    console.setStream(sys.stderr)
            if json_mode != isinstance(console.formatter, JsonFormatter):
                console.setFormatter(_make_formatter(json_mode))
        return base

    initial = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    base.handlers[:] = [_new_console(json_mode, initial)]
    base.setLevel(initial)
    base.propagate = False
    return base


def _new_console(json_mode: bool, level: int) -> logging.Handler:
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_make_formatter(json_mode))
    console.setLevel(level)
    setattr(console, _CONSOLE_MARK, True)
    return console


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` under the ``mindbridge`` hierarchy, initializing the base logger if needed."""
    base = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base
    child = logging.getLogger(name)
    child.setLevel(logging.NOTSET)
    child.propagate = True
    return child


def _swap_file_handler(base: logging.Logger, file_path: Optional[str], json_mode: bool) -> None:
    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for handler in _marked(base, _FILE_MARK):
        if target is not None and getattr(handler, "baseFilename", None) == target:
            handler.setFormatter(_make_formatter(json_mode))
            handler.setLevel(base.level)
            target = None
            continue
        base.removeHandler(handler)
        with contextlib.suppress(OSError):
            handler.close()
    if target is None:
        return
    os.makedirs(os.path.dirname(target) or ".", exist_ok=True)
    handler = RotatingFileHandler(
        target, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS, encoding="utf-8"
    )
    setattr(handler, _FILE_MARK, True)
    handler.setLevel(base.level)
    handler.setFormatter(_make_formatter(json_mode))
    base.addHandler(handler)


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the base logger at runtime (used by the CLI flags).

    Args:
        level: Numeric level or level name. ``None`` keeps the current level.
        file_path: Attach a rotating JSON log file at this path. ``None``
            detaches any file previously attached here.
        json_mode: JSON records when true, plain text otherwise.

    Returns:
        The base ``mindbridge`` logger.
    """
    base = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)
    if level is not None:
        numeric = _parse_level(level, default=base.level) if isinstance(level, str) else level
        base.setLevel(numeric)
        for handler in base.handlers:
            handler.setLevel(numeric)
    _swap_file_handler(base, file_path, json_mode)
    return base


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Log ``event`` as one JSON object.

    The payload is ``{"event": event}`` followed by the context fields and then
    ``fields``. ``None`` values are dropped unless ``keep_none`` is set.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload.update(ctx.to_dict())
    payload.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("structured", "phase")


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    error_code: str | None = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Log a lifecycle event carrying the canonical keys.

    ``error_code`` appears only when set. Extras never overwrite ``structured``,
    ``phase`` or ``error_code``, and ``None`` extras are dropped.
    """
    fields: Dict[str, Any] = {"structured": True, "phase": phase}
    if error_code is not None:
        fields["error_code"] = error_code
    fields.update({k: v for k, v in extra_fields.items() if v is not None and k not in fields})
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]

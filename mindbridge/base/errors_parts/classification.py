"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping, message heuristics
as a fallback, and best-effort extraction of the human-readable message that
vendor SDKs attach to their status errors.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict, Mapping, Optional

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from a provider exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def code_for_status(status: int) -> ErrorCode:
    """Map an HTTP status to an :class:`ErrorCode` (``SERVER_ERROR`` for other 5xx)."""
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    return ErrorCode.SERVER_ERROR if status >= 500 else ErrorCode.UNKNOWN


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for exceptions without a status."""
    pattern_groups = (
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.AUTH, ("unauthorized", "forbidden", "api key")),
        (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
        (ErrorCode.UNAVAILABLE, ("unavailable", "connection")),
        (ErrorCode.VALIDATION, ("invalid", "malformed")),
    )
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    for code, patterns in pattern_groups:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (stdlib, asyncio, httpx).
        3. HTTP status mapping.
        4. Message heuristics.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None:
        return code_for_status(status)
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def _message_from_body(body: Any) -> Optional[str]:
    if isinstance(body, str) and body.strip():
        return body.strip()
    if not isinstance(body, Mapping):
        return None
    msg = body.get("message")
    if isinstance(msg, str) and msg:
        return msg
    inner = body.get("error")
    if isinstance(inner, str) and inner:
        return inner
    if isinstance(inner, Mapping):
        msg = inner.get("message")
        if isinstance(msg, str) and msg:
            return msg
    return None


def extract_sdk_error_message(exc: Exception) -> str:
    """Return the vendor-declared message carried by an SDK exception.

    Both the ``openai`` and ``anthropic`` SDKs expose the decoded error body
    on ``exc.body``; OpenAI unwraps the ``error`` envelope while Anthropic
    keeps it, so both shapes are accepted. Falls back to ``str(exc)``.
    """
    msg = _message_from_body(getattr(exc, "body", None))
    if msg:
        return msg
    return str(exc) or exc.__class__.__name__


__all__ = [
    "classify_exception",
    "code_for_status",
    "extract_sdk_error_message",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]

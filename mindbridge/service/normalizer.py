"""Error/result normalizer.

Every tool answer is exactly one :class:`ToolEnvelope` with one text block:
adapter successes carry the reply, adapter failures carry
``Error from <Vendor>: <message>``, and dispatch-time rejections carry
``Error: <message>``.
"""

from __future__ import annotations

from ..base.models import Failure, Success, ToolEnvelope, UnifiedResult


def to_envelope(result: UnifiedResult) -> ToolEnvelope:
    """Wrap an adapter outcome into the caller-facing envelope."""
    if isinstance(result, Success):
        return ToolEnvelope.from_text(result.text)
    if isinstance(result, Failure):
        return ToolEnvelope.from_text(result.text, is_error=True)
    raise TypeError(f"unsupported result type: {type(result).__name__}")


def rejection_envelope(message: str) -> ToolEnvelope:
    """Envelope for a request rejected before any vendor call."""
    return ToolEnvelope.from_text(f"Error: {message}", is_error=True)


__all__ = ["to_envelope", "rejection_envelope"]

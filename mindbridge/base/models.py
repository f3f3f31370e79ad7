"""
Provider-agnostic domain models public surface.

This module re-exports the one-class-per-file implementations under
``mindbridge.base.models_parts`` to keep a stable import path.
"""

from .models_parts.unified_request import (
    PROVIDER_IDS,
    ReasoningEffort,
    UnifiedRequest,
    canonical_provider_id,
    parse_request,
)
from .models_parts.unified_result import Failure, Success, UnifiedResult
from .models_parts.tool_envelope import ToolEnvelope

__all__ = [
    "PROVIDER_IDS",
    "ReasoningEffort",
    "UnifiedRequest",
    "canonical_provider_id",
    "parse_request",
    "Success",
    "Failure",
    "UnifiedResult",
    "ToolEnvelope",
]

"""One-class-per-file model implementations re-exported by ``base.models``."""

from .unified_request import PROVIDER_IDS, ReasoningEffort, UnifiedRequest, canonical_provider_id, parse_request
from .unified_result import Failure, Success, UnifiedResult
from .tool_envelope import ToolEnvelope

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

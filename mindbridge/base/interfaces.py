"""LLMProvider Protocol.

Defines the capability contract every vendor adapter satisfies. The
dispatcher and registry depend only on this protocol.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from .models import UnifiedRequest, UnifiedResult


@runtime_checkable
class LLMProvider(Protocol):
    """Minimal interface for Large Language Model providers.

    Implementations map :class:`UnifiedRequest` fields to their vendor call,
    normalize replies to :class:`Success`, and never leak SDK objects upstream.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g., ``"openai"`` or ``"openaiCompatible"``."""
        ...

    @property
    def display_name(self) -> str:
        """Vendor label used in error envelopes, e.g., ``"Google AI"``."""
        ...

    async def get_response(self, request: UnifiedRequest) -> UnifiedResult:
        """Execute a single completion request.

        Failure handling: never raise for vendor errors; return a ``Failure``
        carrying the extracted message instead.
        """
        ...

    def get_available_models(self) -> List[str]:
        """Return the ordered model identifiers this adapter accepts."""
        ...

    def is_valid_model(self, model: str) -> bool:
        ...

    def supports_reasoning_effort(self) -> bool:
        """Vendor-level reasoning-effort capability."""
        ...

    def supports_reasoning_effort_for_model(self, model: str) -> bool:
        ...


__all__ = ["LLMProvider"]

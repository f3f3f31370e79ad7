"""OpenAI provider adapter.

Summary:
- Chat Completions via ``openai.AsyncOpenAI`` (shared base class).
- Reasoning models (o1/o3 families) take ``reasoning_effort`` and
  ``max_completion_tokens`` and reject sampling parameters, so those are
  dropped for them.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.models import UnifiedRequest
from ..base.openai_style import BaseOpenAIStyleProvider

# Models that use the reasoning parameter set
REASONING_PARAM_MODELS = frozenset({"o1", "o1-mini", "o3", "o3-mini"})

DEFAULT_REASONING_EFFORT = "medium"


class OpenAIProvider(BaseOpenAIStyleProvider):
    """OpenAI LLM provider implementation."""

    PROVIDER_ID = "openai"
    DISPLAY_NAME = "OpenAI"
    MODELS = ("gpt-4o", "gpt-4o-mini", "o1", "o1-mini", "o3", "o3-mini", "gpt-4.5")
    REASONING_MODELS = frozenset({"o1", "o3-mini"})
    SUPPORTS_REASONING = True
    NO_CONTENT_MESSAGE = "No response received from OpenAI"

    def _build_params(self, request: UnifiedRequest) -> Dict[str, Any]:
        """Apply the reasoning parameter set for o-series models.

        For models in :data:`REASONING_PARAM_MODELS` the token budget moves to
        ``max_completion_tokens``, ``reasoning_effort`` defaults to ``medium``,
        and temperature and the other sampling knobs are never sent.
        """
        if request.model not in REASONING_PARAM_MODELS:
            return super()._build_params(request)
        return {
            "model": request.model,
            "messages": self._build_messages(request),
            "max_completion_tokens": request.max_tokens,
            "reasoning_effort": request.reasoning_effort or DEFAULT_REASONING_EFFORT,
        }


__all__ = ["OpenAIProvider", "REASONING_PARAM_MODELS"]

"""Generic OpenAI-compatible provider adapter.

Targets any server exposing the Chat Completions API (vLLM, LM Studio,
llama.cpp server, ...). The model list comes from configuration; an empty
allowlist accepts every model name. Reasoning effort is not supported.
"""

from __future__ import annotations

from typing import List

from ..base.openai_style import BaseOpenAIStyleProvider


class OpenAICompatibleProvider(BaseOpenAIStyleProvider):
    """Adapter for self-hosted or third-party OpenAI-compatible servers."""

    PROVIDER_ID = "openaiCompatible"
    DISPLAY_NAME = "OpenAI-compatible API"
    NO_CONTENT_MESSAGE = "No response content received from OpenAI-compatible API"

    def get_available_models(self) -> List[str]:
        return list(self._credentials.models)

    def is_valid_model(self, model: str) -> bool:
        models = self.get_available_models()
        return not models or model in models


__all__ = ["OpenAICompatibleProvider"]

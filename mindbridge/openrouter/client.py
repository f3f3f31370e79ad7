"""OpenRouter provider adapter (OpenAI-style JSON over httpx).

Requests carry the OpenRouter attribution headers (``HTTP-Referer`` and
``X-Title``). Reasoning effort is not supported and is ignored.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.http_style import BaseHTTPProvider, error_field_message
from ..base.models import UnifiedRequest
from ..config.defaults import OPENROUTER_DEFAULT_BASE_URL, OPENROUTER_REFERER, OPENROUTER_TITLE


class OpenRouterProvider(BaseHTTPProvider):
    """OpenRouter chat completions adapter."""

    PROVIDER_ID = "openrouter"
    DISPLAY_NAME = "OpenRouter"
    MODELS = (
        "openai/gpt-4-turbo-preview",
        "anthropic/claude-3-sonnet",
        "anthropic/claude-3-opus",
        "google/gemini-pro",
        "meta/llama-3",
        "mistral/mistral-medium",
    )
    DEFAULT_BASE_URL = OPENROUTER_DEFAULT_BASE_URL

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        headers.update(
            {
                "Authorization": f"Bearer {self._credentials.api_key or ''}",
                "HTTP-Referer": OPENROUTER_REFERER,
                "X-Title": OPENROUTER_TITLE,
            }
        )
        return headers

    def build_payload(self, request: UnifiedRequest) -> Dict[str, Any]:
        messages: List[Dict[str, str]] = []
        if request.system_prompt:
            messages.append({"role": "system", "content": request.system_prompt})
        messages.append({"role": "user", "content": request.prompt})
        payload: Dict[str, Any] = {
            "model": request.model,
            "messages": messages,
            "max_tokens": request.max_tokens,
            "stream": False,
        }
        if request.temperature is not None:
            payload["temperature"] = request.temperature
        return payload

    async def _complete(self, request: UnifiedRequest) -> str:
        data = await self._post_json(
            f"{self.base_url}/chat/completions",
            self.build_payload(request),
            model=request.model,
        )
        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            text = None
        if not text or not isinstance(text, str):
            raise self._no_content("No response received from OpenRouter", request.model)
        return text

    def _extract_error_message(self, data: Any) -> Optional[str]:
        return error_field_message(data)


__all__ = ["OpenRouterProvider"]

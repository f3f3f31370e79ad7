"""Ollama provider adapter for a local daemon (``/api/chat``).

No API key is involved; the base URL defaults to the local daemon address.
Reasoning effort is not supported and is ignored.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.http_style import BaseHTTPProvider
from ..base.models import UnifiedRequest
from ..config.defaults import OLLAMA_DEFAULT_HOST


class OllamaProvider(BaseHTTPProvider):
    """Ollama chat adapter."""

    PROVIDER_ID = "ollama"
    DISPLAY_NAME = "Ollama"
    MODELS = ("llama2", "mistral", "mixtral", "nous-hermes", "neural-chat", "vicuna", "codellama", "phi")
    DEFAULT_BASE_URL = OLLAMA_DEFAULT_HOST

    def build_payload(self, request: UnifiedRequest) -> Dict[str, Any]:
        messages: List[Dict[str, str]] = []
        if request.system_prompt:
            messages.append({"role": "system", "content": request.system_prompt})
        messages.append({"role": "user", "content": request.prompt})
        options: Dict[str, Any] = {"num_predict": request.max_tokens}
        if request.temperature is not None:
            options["temperature"] = request.temperature
        if request.top_p is not None:
            options["top_p"] = request.top_p
        if request.top_k is not None:
            options["top_k"] = request.top_k
        if request.stop_sequences:
            options["stop"] = list(request.stop_sequences)
        return {"model": request.model, "messages": messages, "options": options, "stream": False}

    async def _complete(self, request: UnifiedRequest) -> str:
        data = await self._post_json(f"{self.base_url}/api/chat", self.build_payload(request), model=request.model)
        text = _reply_text(data)
        if not text:
            raise self._no_content("No response content received from Ollama", request.model)
        return text

    def _extract_error_message(self, data: Any) -> Optional[str]:
        if isinstance(data, Mapping):
            err = data.get("error")
            if isinstance(err, str) and err:
                return err
        return None


def _reply_text(data: Any) -> Optional[str]:
    if not isinstance(data, Mapping):
        return None
    message = data.get("message")
    if isinstance(message, Mapping):
        content = message.get("content")
        if isinstance(content, str) and content:
            return content
    response = data.get("response")
    return response if isinstance(response, str) and response else None


__all__ = ["OllamaProvider"]

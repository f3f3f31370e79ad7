"""DeepSeek provider adapter (OpenAI-style JSON over httpx).

Reasoning effort is honored only by ``deepseek-reasoner``: a synthetic system
message asks for ``Reasoning: ... Answer: ...`` structure, and replies from
that model are re-labeled into "Chain of Thought Reasoning" / "Final Answer"
sections when both markers come back verbatim.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.http_style import BaseHTTPProvider, error_field_message
from ..base.models import UnifiedRequest
from ..base.reasoning import reasoning_instruction, restructure_reasoning
from ..config.defaults import DEEPSEEK_DEFAULT_BASE_URL


class DeepSeekProvider(BaseHTTPProvider):
    """DeepSeek chat completions adapter."""

    PROVIDER_ID = "deepseek"
    DISPLAY_NAME = "DeepSeek"
    MODELS = ("deepseek-chat", "deepseek-coder", "deepseek-reasoner")
    REASONING_MODELS = frozenset({"deepseek-reasoner"})
    SUPPORTS_REASONING = True
    DEFAULT_BASE_URL = DEEPSEEK_DEFAULT_BASE_URL

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        headers["Authorization"] = f"Bearer {self._credentials.api_key or ''}"
        return headers

    def build_messages(self, request: UnifiedRequest) -> List[Dict[str, str]]:
        messages: List[Dict[str, str]] = []
        if request.system_prompt:
            messages.append({"role": "system", "content": request.system_prompt})
        messages.append({"role": "user", "content": request.prompt})
        if request.reasoning_effort and self.supports_reasoning_effort_for_model(request.model):
            messages.insert(0, {"role": "system", "content": reasoning_instruction(request.reasoning_effort)})
        return messages

    def build_payload(self, request: UnifiedRequest) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": request.model,
            "messages": self.build_messages(request),
            "max_tokens": request.max_tokens,
        }
        if request.temperature is not None:
            payload["temperature"] = request.temperature
        return payload

    async def _complete(self, request: UnifiedRequest) -> str:
        data = await self._post_json(
            f"{self.base_url}/v1/chat/completions",
            self.build_payload(request),
            model=request.model,
        )
        text = _choice_content(data)
        if not text:
            raise self._no_content("No response content received from DeepSeek", request.model)
        if self.supports_reasoning_effort_for_model(request.model):
            return restructure_reasoning(text)
        return text

    def _extract_error_message(self, data: Any) -> Optional[str]:
        if isinstance(data, Mapping):
            msg = data.get("message")
            if isinstance(msg, str) and msg:
                return msg
        return error_field_message(data)


def _choice_content(data: Any) -> Optional[str]:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) else None


__all__ = ["DeepSeekProvider"]

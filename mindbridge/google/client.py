"""Google AI (Gemini) provider adapter over the ``generateContent`` REST API.

Summary:
- Every model accepts reasoning effort. It is expressed as extra user turns:
  the system prompt (if any), a synthetic reasoning instruction, then the
  prompt. Without reasoning effort the system prompt goes to
  ``systemInstruction``. Replies are never restructured.
- Thinking models may answer with ``usageMetadata`` but no text. That is a
  success with an explanatory placeholder when reasoning was requested, and a
  content error otherwise.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.http_style import BaseHTTPProvider, error_field_message
from ..base.models import UnifiedRequest
from ..base.reasoning import reasoning_instruction
from ..config.defaults import GOOGLE_DEFAULT_BASE_URL, GOOGLE_DEFAULT_TOP_K, GOOGLE_DEFAULT_TOP_P


def thinking_placeholder(model: str) -> str:
    """Explain an empty reply from a thinking model."""
    return (
        f"The model {model} supports thinking capabilities in Google AI Studio, "
        "but the thinking process is not provided in the API output. "
        "The API call was successful, but no content was returned."
    )


class GoogleProvider(BaseHTTPProvider):
    """Google Generative Language API adapter."""

    PROVIDER_ID = "google"
    DISPLAY_NAME = "Google AI"
    MODELS = (
        "gemini-1.5-pro",
        "gemini-1.5-flash",
        "gemini-1.0-pro",
        "gemini-1.0-pro-vision",
        "gemini-2.0-flash",
        "gemini-2.0-flash-thinking-exp",
    )
    SUPPORTS_REASONING = True
    DEFAULT_BASE_URL = GOOGLE_DEFAULT_BASE_URL

    def supports_reasoning_effort_for_model(self, model: str) -> bool:
        return True

    def build_payload(self, request: UnifiedRequest) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if request.reasoning_effort:
            turns: List[str] = []
            if request.system_prompt:
                turns.append(request.system_prompt)
            turns.append(reasoning_instruction(request.reasoning_effort))
            turns.append(request.prompt)
            payload["contents"] = [{"role": "user", "parts": [{"text": t}]} for t in turns]
        else:
            payload["contents"] = [{"role": "user", "parts": [{"text": request.prompt}]}]
            if request.system_prompt:
                payload["systemInstruction"] = {"parts": [{"text": request.system_prompt}]}

        generation: Dict[str, Any] = {
            "maxOutputTokens": request.max_tokens,
            "topK": request.top_k if request.top_k is not None else GOOGLE_DEFAULT_TOP_K,
            "topP": request.top_p if request.top_p is not None else GOOGLE_DEFAULT_TOP_P,
        }
        if request.temperature is not None:
            generation["temperature"] = request.temperature
        if request.stop_sequences:
            generation["stopSequences"] = list(request.stop_sequences)
        payload["generationConfig"] = generation
        return payload

    async def _complete(self, request: UnifiedRequest) -> str:
        data = await self._post_json(
            f"{self.base_url}/models/{request.model}:generateContent",
            self.build_payload(request),
            model=request.model,
            params={"key": self._credentials.api_key or ""},
        )
        text = _candidate_text(data)
        if text:
            return text
        if isinstance(data, Mapping) and data.get("usageMetadata"):
            if request.reasoning_effort:
                return thinking_placeholder(request.model)
            raise self._no_content("No response content received from Google AI", request.model)
        raise self._no_content("No response received from Google AI", request.model)

    def _extract_error_message(self, data: Any) -> Optional[str]:
        return error_field_message(data)


def _candidate_text(data: Any) -> Optional[str]:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


__all__ = ["GoogleProvider", "thinking_placeholder"]

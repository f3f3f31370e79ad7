"""BaseOpenAIStyleProvider: adapters built on the ``openai`` SDK.

Purpose:
- Share Chat Completions plumbing between the OpenAI adapter and the generic
  OpenAI-compatible adapter: client construction, message assembly, the SDK
  call, SDK error translation, and text extraction.

External dependencies:
- ``openai.AsyncOpenAI``. The client is built once per adapter with
  ``max_retries=0`` so a failed attempt yields a single error.

Subclasses override :meth:`_build_params` to apply their vendor rules and set
``NO_CONTENT_MESSAGE``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import openai
from openai import AsyncOpenAI

from ..config.credentials import ProviderCredentials
from .constants import DEFAULT_HTTP_TIMEOUT, NO_API_KEY_PLACEHOLDER, SDK_MAX_RETRIES
from .errors import VendorTransportError, classify_exception, extract_sdk_error_message
from .models import UnifiedRequest
from .provider_base import BaseProvider


class BaseOpenAIStyleProvider(BaseProvider):
    """Reusable base class for OpenAI-compatible Chat Completions adapters.

    Parameters:
        credentials: API key and base URL for the target server.
        client: Optional pre-built ``AsyncOpenAI`` (or compatible fake); when
            omitted one is created from ``credentials``.
    """

    NO_CONTENT_MESSAGE = "No response received"

    def __init__(self, credentials: Optional[ProviderCredentials] = None, client: Any = None) -> None:
        super().__init__(credentials)
        self._client = client if client is not None else self._make_client()

    def _make_client(self) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=self._credentials.api_key or NO_API_KEY_PLACEHOLDER,
            base_url=self._credentials.base_url,
            max_retries=SDK_MAX_RETRIES,
            timeout=DEFAULT_HTTP_TIMEOUT,
        )

    @staticmethod
    def _build_messages(request: UnifiedRequest) -> List[Dict[str, str]]:
        messages: List[Dict[str, str]] = []
        if request.system_prompt:
            messages.append({"role": "system", "content": request.system_prompt})
        messages.append({"role": "user", "content": request.prompt})
        return messages

    def _build_params(self, request: UnifiedRequest) -> Dict[str, Any]:
        """Translate the request into ``chat.completions.create`` kwargs."""
        params: Dict[str, Any] = {
            "model": request.model,
            "messages": self._build_messages(request),
            "max_tokens": request.max_tokens,
        }
        optional = {
            "temperature": request.temperature,
            "top_p": request.top_p,
            "frequency_penalty": request.frequency_penalty,
            "presence_penalty": request.presence_penalty,
            "stop": request.stop_sequences or None,
        }
        params.update({k: v for k, v in optional.items() if v is not None})
        return params

    async def _complete(self, request: UnifiedRequest) -> str:
        params = self._build_params(request)
        try:
            completion = await self._client.chat.completions.create(**params)
        except openai.APIError as exc:
            raise VendorTransportError(
                code=classify_exception(exc),
                message=extract_sdk_error_message(exc),
                provider=self.provider_name,
                model=request.model,
                status=getattr(exc, "status_code", None),
                raw=exc,
            ) from exc
        text = extract_choice_text(completion)
        if not text:
            raise self._no_content(self.NO_CONTENT_MESSAGE, request.model)
        return text


def extract_choice_text(completion: Any) -> Optional[str]:
    """Return ``choices[0].message.content`` from an SDK completion, if present."""
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else None


__all__ = ["BaseOpenAIStyleProvider", "extract_choice_text"]

"""Anthropic provider adapter.

Summary:
- Messages API via ``anthropic.AsyncAnthropic`` with ``max_retries=0``.
- The system prompt uses the dedicated ``system`` parameter.
- For the extended-thinking model, reasoning effort maps to a thinking budget
  (see :func:`helpers.thinking_budget`); sampling parameters are dropped
  because the vendor rejects them alongside thinking.
- Reply blocks (thinking, redacted thinking, text) are rendered into one text.
"""

from __future__ import annotations

from typing import Any, Optional

import anthropic
from anthropic import AsyncAnthropic

from ..base.constants import DEFAULT_HTTP_TIMEOUT, SDK_MAX_RETRIES
from ..base.errors import VendorTransportError, classify_exception, extract_sdk_error_message
from ..base.models import UnifiedRequest
from ..base.provider_base import BaseProvider
from ..config.credentials import ProviderCredentials
from .helpers import build_params, render_content_blocks


class AnthropicProvider(BaseProvider):
    """Anthropic Claude adapter.

    Parameters:
        credentials: API key and optional base URL.
        client: Optional pre-built ``AsyncAnthropic`` (or compatible fake).
    """

    PROVIDER_ID = "anthropic"
    DISPLAY_NAME = "Anthropic"
    MODELS = (
        "claude-3-7-sonnet-20250219",
        "claude-3-5-sonnet-20241022",
        "claude-3-5-haiku-20241022",
        "claude-3-opus-20240229",
        "claude-3-sonnet-20240229",
        "claude-3-haiku-20240307",
    )
    REASONING_MODELS = frozenset({"claude-3-7-sonnet-20250219"})
    SUPPORTS_REASONING = True

    def __init__(self, credentials: Optional[ProviderCredentials] = None, client: Any = None) -> None:
        super().__init__(credentials)
        self._client = client if client is not None else self._make_client()

    def _make_client(self) -> AsyncAnthropic:
        return AsyncAnthropic(
            api_key=self._credentials.api_key,
            base_url=self._credentials.base_url,
            max_retries=SDK_MAX_RETRIES,
            timeout=DEFAULT_HTTP_TIMEOUT,
        )

    def thinking_engaged(self, request: UnifiedRequest) -> bool:
        """Return True when the call should enable extended thinking."""
        return bool(request.reasoning_effort) and self.supports_reasoning_effort_for_model(request.model)

    async def _complete(self, request: UnifiedRequest) -> str:
        params = build_params(request, thinking=self.thinking_engaged(request))
        try:
            message = await self._client.messages.create(**params)
        except anthropic.APIError as exc:
            raise VendorTransportError(
                code=classify_exception(exc),
                message=extract_sdk_error_message(exc),
                provider=self.provider_name,
                model=request.model,
                status=getattr(exc, "status_code", None),
                raw=exc,
            ) from exc
        text = render_content_blocks(getattr(message, "content", None))
        if not text:
            raise self._no_content("No text response received from Anthropic", request.model)
        return text


__all__ = ["AnthropicProvider"]

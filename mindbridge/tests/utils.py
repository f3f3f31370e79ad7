"""Shared helpers for the test suite (fake transports and adapters)."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, Dict, List, Optional

import httpx

from mindbridge.base.models import Success, UnifiedRequest, UnifiedResult


def run(coro):
    """Run a coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)


def make_request(**fields: Any) -> UnifiedRequest:
    base: Dict[str, Any] = {"prompt": "hello", "provider": "openai", "model": "gpt-4o"}
    base.update(fields)
    return UnifiedRequest.model_validate(base)


class Recorder:
    """httpx MockTransport handler that records requests and replays one response."""

    def __init__(self, status: int = 200, json_body: Any = None, text: Optional[str] = None) -> None:
        self.status = status
        self.json_body = json_body
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(self.status, json=self.json_body if self.json_body is not None else {})

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def failing_client(exc_factory: Callable[[httpx.Request], Exception]) -> httpx.AsyncClient:
    """Client whose transport raises the exception built by ``exc_factory``."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_factory(request)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class FakeAdapter:
    """In-memory adapter satisfying the LLMProvider protocol."""

    def __init__(
        self,
        provider: str = "fake",
        models: Optional[List[str]] = None,
        reasoning: bool = False,
        result: Optional[UnifiedResult] = None,
    ) -> None:
        self._provider = provider
        self._models = list(models or ["m1", "m2"])
        self._reasoning = reasoning
        self._result = result or Success(text="ok")
        self.calls: List[UnifiedRequest] = []

    @property
    def provider_name(self) -> str:
        return self._provider

    @property
    def display_name(self) -> str:
        return self._provider.title()

    async def get_response(self, request: UnifiedRequest) -> UnifiedResult:
        self.calls.append(request)
        return self._result

    def get_available_models(self) -> List[str]:
        return list(self._models)

    def is_valid_model(self, model: str) -> bool:
        return model in self._models

    def supports_reasoning_effort(self) -> bool:
        return self._reasoning

    def supports_reasoning_effort_for_model(self, model: str) -> bool:
        return self._reasoning


def openai_completion(content: Optional[str], model: str = "gpt-4o") -> Dict[str, Any]:
    """Minimal Chat Completions response body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
    }

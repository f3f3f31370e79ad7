"""Adapter boundary behavior shared by every vendor adapter."""

from __future__ import annotations

import json
import logging

from mindbridge.base.errors import ErrorCode, VendorTransportError
from mindbridge.base.http import aclose_all_clients, get_async_client
from mindbridge.base.models import Failure, Success
from mindbridge.base.provider_base import BaseProvider

from .utils import make_request, run


class _Scripted(BaseProvider):
    PROVIDER_ID = "openai"
    DISPLAY_NAME = "Scripted"
    MODELS = ("m1",)

    def __init__(self, outcome):
        super().__init__()
        self.outcome = outcome

    async def _complete(self, request):
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


def _events(records):
    return [json.loads(r.getMessage()) for r in records]


def test_success_logs_start_and_end(log_records):
    result = run(_Scripted("fine").get_response(make_request(model="m1")))
    assert result == Success(text="fine")
    chat = [e for e in _events(log_records) if e["event"].startswith("chat.")]
    assert [e["event"] for e in chat] == ["chat.start", "chat.end"]
    assert chat[-1]["ok"] is True
    assert chat[-1]["model"] == "m1"
    assert "latency_ms" in chat[-1]


def test_provider_error_becomes_failure(log_records):
    err = VendorTransportError(code=ErrorCode.AUTH, message="bad key", provider="openai", status=401)
    result = run(_Scripted(err).get_response(make_request(model="m1")))
    assert result == Failure(provider="Scripted", message="bad key", code=ErrorCode.AUTH)
    end = [r for r in log_records if json.loads(r.getMessage())["event"] == "chat.end"][-1]
    assert end.levelno == logging.WARNING
    payload = json.loads(end.getMessage())
    assert payload["error_code"] == "auth"
    assert payload["http_status"] == 401


def test_unexpected_exception_never_escapes():
    result = run(_Scripted(KeyError("choices")).get_response(make_request(model="m1")))
    assert isinstance(result, Failure)
    assert result.text == "Error from Scripted: 'choices'"


def test_capability_defaults():
    adapter = _Scripted("x")
    assert adapter.get_available_models() == ["m1"]
    assert adapter.is_valid_model("m1")
    assert not adapter.supports_reasoning_effort()
    assert not adapter.supports_reasoning_effort_for_model("m1")


def test_http_pool_reuses_and_closes():
    a = get_async_client(None, "ollama")
    assert get_async_client(None, "ollama") is a
    assert get_async_client(None, "google") is not a
    run(aclose_all_clients())
    assert a.is_closed
    assert get_async_client(None, "ollama") is not a

"""Error classification and SDK message extraction."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

import httpx
import pytest

from mindbridge.base.errors import (
    ErrorCode,
    ProviderError,
    UnknownModelError,
    UnknownProviderError,
    VendorTransportError,
    classify_exception,
    code_for_status,
    extract_sdk_error_message,
)


class _StatusError(Exception):
    def __init__(self, status_code, body=None):
        super().__init__(f"status {status_code}")
        self.status_code = status_code
        self.body = body


@pytest.mark.parametrize(
    "status, code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMIT),
        (503, ErrorCode.UNAVAILABLE),
        (529, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.UNKNOWN),
    ],
)
def test_code_for_status(status, code):
    assert code_for_status(status) == code


def test_provider_error_passthrough():
    err = VendorTransportError(code=ErrorCode.RATE_LIMIT, message="slow down", provider="openai")
    assert classify_exception(err) == ErrorCode.RATE_LIMIT
    assert isinstance(err, ProviderError)


def test_timeouts():
    assert classify_exception(asyncio.TimeoutError()) == ErrorCode.TIMEOUT
    assert classify_exception(httpx.ReadTimeout("slow")) == ErrorCode.TIMEOUT


def test_status_from_response_attribute():
    exc = Exception("boom")
    exc.response = SimpleNamespace(status_code=401)  # type: ignore[attr-defined]
    assert classify_exception(exc) == ErrorCode.AUTH


def test_message_heuristics():
    assert classify_exception(RuntimeError("Rate limit reached")) == ErrorCode.RATE_LIMIT
    assert classify_exception(RuntimeError("something odd")) == ErrorCode.UNKNOWN


@pytest.mark.parametrize(
    "body, expected",
    [
        ({"message": "unwrapped"}, "unwrapped"),
        ({"type": "error", "error": {"message": "wrapped"}}, "wrapped"),
        ({"error": "plain string"}, "plain string"),
        ("raw text body", "raw text body"),
    ],
)
def test_extract_sdk_error_message(body, expected):
    assert extract_sdk_error_message(_StatusError(400, body)) == expected


def test_extract_sdk_error_message_falls_back_to_str():
    assert extract_sdk_error_message(_StatusError(500, None)) == "status 500"
    assert extract_sdk_error_message(_StatusError(500, {"detail": "x"})) == "status 500"


def test_rejection_messages():
    assert str(UnknownProviderError("groq", ["openai", "ollama"])) == (
        'Provider "groq" not configured. Available providers: openai, ollama'
    )
    assert str(UnknownModelError("ollama", "phi3", ["phi"])) == (
        'Model "phi3" not found for provider "ollama". Available models: phi'
    )

"""DeepSeek adapter: reasoning restructuring and error extraction."""

from __future__ import annotations

import httpx

from mindbridge.base.errors import ErrorCode
from mindbridge.config import ProviderCredentials
from mindbridge.deepseek import DeepSeekProvider

from .utils import Recorder, failing_client, make_request, run


def _reply(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _adapter(http_client, base_url=None):
    return DeepSeekProvider(ProviderCredentials(api_key="ds-key", base_url=base_url), http_client=http_client)


def _request(**fields):
    fields.setdefault("provider", "deepseek")
    fields.setdefault("model", "deepseek-reasoner")
    return make_request(**fields)


def test_reasoner_reply_is_restructured():
    rec = Recorder(json_body=_reply("Reasoning: X\nAnswer: Y"))
    result = run(_adapter(rec.client()).get_response(_request(reasoning_effort="high")))
    assert result.ok
    assert result.text == "Chain of Thought Reasoning:\nX\n\nFinal Answer:\nY"


def test_reply_without_markers_is_verbatim():
    rec = Recorder(json_body=_reply("Just the answer."))
    result = run(_adapter(rec.client()).get_response(_request(reasoning_effort="low")))
    assert result.text == "Just the answer."


def test_reasoning_instruction_is_first_system_message():
    rec = Recorder(json_body=_reply("ok"))
    run(_adapter(rec.client()).get_response(_request(reasoning_effort="high", systemPrompt="you are terse")))
    messages = rec.last_json["messages"]
    assert [m["role"] for m in messages] == ["system", "system", "user"]
    assert "extremely detailed step-by-step reasoning" in messages[0]["content"]
    assert messages[1]["content"] == "you are terse"


def test_chat_model_gets_no_reasoning_instruction():
    rec = Recorder(json_body=_reply("Reasoning: a Answer: b"))
    result = run(_adapter(rec.client()).get_response(_request(model="deepseek-chat", reasoning_effort="high")))
    assert rec.last_json["messages"] == [{"role": "user", "content": "hello"}]
    assert result.text == "Reasoning: a Answer: b"


def test_request_shape_and_auth_header():
    rec = Recorder(json_body=_reply("ok"))
    run(_adapter(rec.client(), base_url="https://ds.example/").get_response(_request(temperature=0.2, maxTokens=64)))
    req = rec.requests[-1]
    assert str(req.url) == "https://ds.example/v1/chat/completions"
    assert req.headers["Authorization"] == "Bearer ds-key"
    assert rec.last_json == {
        "model": "deepseek-reasoner",
        "messages": [{"role": "user", "content": "hello"}],
        "max_tokens": 64,
        "temperature": 0.2,
    }


def test_error_json_message():
    rec = Recorder(status=401, json_body={"error": {"message": "Authentication Fails"}})
    result = run(_adapter(rec.client()).get_response(_request()))
    assert result.text == "Error from DeepSeek: Authentication Fails"
    assert result.code == ErrorCode.AUTH


def test_error_top_level_message():
    rec = Recorder(status=422, json_body={"message": "bad params"})
    result = run(_adapter(rec.client()).get_response(_request()))
    assert result.message == "bad params"


def test_error_raw_body_fallback():
    rec = Recorder(status=502, text="upstream exploded")
    result = run(_adapter(rec.client()).get_response(_request()))
    assert result.message == "DeepSeek request failed with status 502: upstream exploded"
    assert result.code == ErrorCode.TRANSIENT


def test_error_status_only_fallback():
    rec = Recorder(status=503, text="")
    result = run(_adapter(rec.client()).get_response(_request()))
    assert result.message == "DeepSeek request failed with status 503"


def test_transport_error():
    client = failing_client(lambda req: httpx.ConnectError("connection refused", request=req))
    result = run(_adapter(client).get_response(_request()))
    assert result.text == "Error from DeepSeek: DeepSeek request failed: connection refused"


def test_empty_choices():
    rec = Recorder(json_body={"choices": []})
    result = run(_adapter(rec.client()).get_response(_request()))
    assert result.text == "Error from DeepSeek: No response content received from DeepSeek"

"""MCP server wiring without a live stdio transport."""

from __future__ import annotations

import json

import pytest
from mcp.types import CallToolRequest, CallToolRequestParams, TextContent

from mindbridge.base.models import ToolEnvelope
from mindbridge.base.registry import ProviderRegistry
from mindbridge.config import load_config
from mindbridge.service.server import MindBridgeServer, ToolCallError, envelope_to_content

from .utils import FakeAdapter, run


def _server(**adapters):
    return MindBridgeServer(registry=ProviderRegistry(adapters))


def test_tool_definitions():
    tools = _server().list_tool_definitions()
    assert [t.name for t in tools] == ["getSecondOpinion", "listProviders", "listReasoningModels"]
    schema = tools[0].inputSchema
    assert "openaiCompatible" in schema["properties"]["provider"]["enum"]


def test_envelope_to_content():
    content = envelope_to_content(ToolEnvelope.from_text("hello"))
    assert content == [TextContent(type="text", text="hello")]


def test_error_envelope_raises_tool_call_error():
    with pytest.raises(ToolCallError) as exc:
        envelope_to_content(ToolEnvelope.from_text("Error: nope", is_error=True))
    assert str(exc.value) == "Error: nope"


def test_unknown_tool():
    env = run(_server().call("summarize", {}))
    assert env.is_error
    assert env.first_text == "Error: Unknown tool: summarize"


def test_call_routes_second_opinion():
    adapter = FakeAdapter("openai", models=["gpt-4o"])
    env = run(_server(openai=adapter).call("getSecondOpinion", {"prompt": "p", "provider": "openai", "model": "gpt-4o"}))
    assert env.first_text == "ok"
    assert len(adapter.calls) == 1


def test_call_with_no_arguments_is_rejected():
    env = run(_server().call("getSecondOpinion", None))
    assert env.is_error
    assert env.first_text.startswith("Error: Invalid request:")


def test_call_routes_listing_tools():
    server = _server(ollama=FakeAdapter("ollama", models=["phi"]))
    assert json.loads(run(server.call("listProviders", None)).first_text) == {
        "ollama": {"models": ["phi"], "supportsReasoning": False}
    }
    assert "models" in json.loads(run(server.call("listReasoningModels", {})).first_text)


def test_server_builds_registry_from_config():
    server = MindBridgeServer(config=load_config({"OPENROUTER_API_KEY": "or"}))
    assert server.registry.list_ids() == ["openrouter", "ollama"]


def _call_over_mcp(server, name, arguments):
    handler = server.server.request_handlers[CallToolRequest]
    request = CallToolRequest(method="tools/call", params=CallToolRequestParams(name=name, arguments=arguments))
    return run(handler(request)).root


def test_mcp_call_matches_provider_case_insensitively():
    adapter = FakeAdapter("openai", models=["gpt-4o"])
    server = _server(openai=adapter)
    result = _call_over_mcp(server, "getSecondOpinion", {"prompt": "p", "provider": "OpenAI", "model": "gpt-4o"})
    assert result.isError is False
    assert result.content[0].text == "ok"
    assert adapter.calls[0].provider == "openai"


def test_mcp_call_schema_error_keeps_envelope_text():
    server = _server(openai=FakeAdapter("openai", models=["gpt-4o"]))
    result = _call_over_mcp(
        server, "getSecondOpinion", {"prompt": "p", "provider": "openai", "model": "gpt-4o", "temperature": 2}
    )
    assert result.isError is True
    assert result.content[0].text.startswith("Error: Invalid request: temperature")


def test_mcp_call_rejection_is_error_result():
    server = _server(openai=FakeAdapter("openai", models=["gpt-4o"]))
    result = _call_over_mcp(server, "getSecondOpinion", {"prompt": "p", "provider": "ollama", "model": "phi"})
    assert result.isError is True
    assert result.content[0].text == 'Error: Provider "ollama" not configured. Available providers: openai'

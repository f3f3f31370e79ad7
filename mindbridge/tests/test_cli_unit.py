"""CLI parsing and subcommand handlers."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest

from mindbridge.base.models import Failure, Success
from mindbridge.base.registry import ProviderRegistry
from mindbridge.service import cli
from mindbridge.service.cli import cli_actions
from mindbridge.service.cli.cli_parser import build_parser

from .utils import FakeAdapter


def _registry(result=None):
    return ProviderRegistry({"openai": FakeAdapter("openai", models=["gpt-4o"], result=result)})


def _ask_args(*extra):
    return build_parser().parse_args(["ask", "what is 6*7?", "--provider", "openai", "--model", "gpt-4o", *extra])


def test_reasoning_models_command(capsys):
    assert cli.main(["reasoning-models"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert "deepseek-reasoner" in payload["models"]


def test_providers_command_uses_environment(capsys, monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "or-key")
    assert cli.main(["providers"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert list(payload) == ["openrouter", "ollama"]
    assert payload["openrouter"]["supportsReasoning"] is False


def test_ask_arguments_use_aliases_and_drop_unset():
    args = _ask_args("--system", "be brief", "--reasoning-effort", "low")
    assert cli_actions.ask_arguments(args) == {
        "prompt": "what is 6*7?",
        "provider": "openai",
        "model": "gpt-4o",
        "systemPrompt": "be brief",
        "maxTokens": 1024,
        "reasoning_effort": "low",
    }


def test_ask_prints_reply(capsys):
    registry = _registry(Success(text="42"))
    assert cli_actions.handle_ask(_ask_args(), registry=registry) == 0
    out = capsys.readouterr()
    assert out.out.strip() == "42"
    sent = registry.lookup("openai").calls[0]
    assert sent.prompt == "what is 6*7?"


def test_ask_error_goes_to_stderr(capsys):
    registry = _registry(Failure(provider="OpenAI", message="quota exceeded"))
    assert cli_actions.handle_ask(_ask_args(), registry=registry) == 1
    out = capsys.readouterr()
    assert out.out == ""
    assert "Error from OpenAI: quota exceeded" in out.err


def test_ask_json_output(capsys):
    assert cli_actions.handle_ask(_ask_args("--json"), registry=_registry()) == 0
    assert json.loads(capsys.readouterr().out) == {"content": [{"type": "text", "text": "ok"}], "isError": False}


def test_ask_rejects_out_of_range_temperature(capsys):
    assert cli_actions.handle_ask(_ask_args("--temperature", "3"), registry=_registry()) == 1
    assert "Invalid request: temperature" in capsys.readouterr().err


def test_serve_bootstrap_failure_returns_1(capsys, monkeypatch):
    monkeypatch.setattr(cli_actions.signal, "signal", lambda *a: None)

    def factory():
        raise RuntimeError("cannot build registry")

    assert cli_actions.handle_serve(SimpleNamespace(), server_factory=factory) == 1
    err = capsys.readouterr().err
    assert "MCP server starting on stdio" in err
    assert "Fatal error: cannot build registry" in err


def test_serve_runs_server_until_eof(monkeypatch):
    monkeypatch.setattr(cli_actions.signal, "signal", lambda *a: None)
    started = []

    class _Server:
        registry = _registry()

        async def start(self):
            started.append(True)

    assert cli_actions.handle_serve(SimpleNamespace(), server_factory=_Server) == 0
    assert started == [True]


def test_serve_interrupt_is_clean_exit(monkeypatch):
    monkeypatch.setattr(cli_actions.signal, "signal", lambda *a: None)

    class _Server:
        registry = _registry()

        async def start(self):
            raise KeyboardInterrupt

    assert cli_actions.handle_serve(SimpleNamespace(), server_factory=_Server) == 0


def test_default_command_is_serve(monkeypatch):
    seen = []
    monkeypatch.setattr(cli, "handle_serve", lambda args: seen.append(args.cmd) or 0)
    assert cli.main([]) == 0
    assert seen == ["serve"]


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    assert "1.2.0" in capsys.readouterr().out

"""Registry construction, lookup and capability queries."""

from __future__ import annotations

import json

import pytest

from mindbridge.base.errors import UnknownProviderError
from mindbridge.base.factory import ProviderFactory
from mindbridge.base.interfaces import LLMProvider
from mindbridge.base.registry import ProviderRegistry, is_configured, resolve_active_providers
from mindbridge.config import ProviderCredentials, ServerConfig, load_config

from .utils import FakeAdapter

FULL_ENV = {
    "OPENAI_API_KEY": "sk-1",
    "ANTHROPIC_API_KEY": "ak-1",
    "DEEPSEEK_API_KEY": "ds-1",
    "GOOGLE_API_KEY": "g-1",
    "OPENROUTER_API_KEY": "or-1",
    "OPENAI_COMPATIBLE_API_BASE_URL": "http://localhost:8000/v1",
}


def test_resolve_active_providers_is_pure_and_ordered():
    cfg = ServerConfig(
        providers={
            "openaiCompatible": ProviderCredentials(base_url="http://x/v1"),
            "ollama": ProviderCredentials(base_url="http://localhost:11434"),
            "google": ProviderCredentials(api_key="g"),
            "anthropic": ProviderCredentials(base_url="https://api.anthropic.com"),  # no key
        }
    )
    active = resolve_active_providers(cfg)
    assert list(active) == ["google", "ollama", "openaiCompatible"]


def test_is_configured_rules():
    assert not is_configured("openai", None)
    assert not is_configured("openai", ProviderCredentials(base_url="https://api.openai.com/v1"))
    assert is_configured("openai", ProviderCredentials(api_key="k"))
    assert is_configured("ollama", ProviderCredentials(base_url="http://localhost:11434"))
    assert not is_configured("openaiCompatible", ProviderCredentials(api_key="k"))


def test_from_config_uses_builder_without_network():
    built = []

    def builder(pid, creds):
        built.append(pid)
        return FakeAdapter(provider=pid)

    reg = ProviderRegistry.from_config(load_config({"GOOGLE_API_KEY": "g"}), builder=builder)
    assert built == ["google", "ollama"]
    assert reg.list_ids() == ["google", "ollama"]


def test_lookup_is_case_insensitive():
    reg = ProviderRegistry({"openaiCompatible": FakeAdapter("openaiCompatible"), "openai": FakeAdapter("openai")})
    assert reg.lookup("OPENAICOMPATIBLE") is reg.lookup("openaiCompatible")
    assert reg.has("OpenAI")
    assert reg.lookup("missing") is None
    assert not reg.has("")


def test_unknown_ids_return_safe_defaults():
    reg = ProviderRegistry({"openai": FakeAdapter("openai", reasoning=True)})
    assert reg.list_models("anthropic") == []
    assert reg.supports_reasoning_effort("anthropic") is False
    assert reg.supports_reasoning_effort("openai") is True
    assert reg.is_valid_model("anthropic", "m1") is False


def test_registry_is_read_only():
    reg = ProviderRegistry({"openai": FakeAdapter("openai")})
    with pytest.raises(TypeError):
        reg._adapters["x"] = FakeAdapter("x")  # type: ignore[index]


def test_real_adapters_satisfy_protocol_and_declare_models():
    reg = ProviderRegistry.from_config(load_config(FULL_ENV))
    assert reg.list_ids() == [
        "openai",
        "anthropic",
        "deepseek",
        "google",
        "openrouter",
        "ollama",
        "openaiCompatible",
    ]
    for pid in reg.list_ids():
        adapter = reg.lookup(pid)
        assert isinstance(adapter, LLMProvider)
        if pid == "openaiCompatible":
            # no allowlist declared: every model is accepted
            assert reg.list_models(pid) == []
            for model in ("qwen2", "anything-goes", "gpt-4o"):
                assert adapter.is_valid_model(model)
        else:
            assert reg.list_models(pid)


def test_reasoning_capability_per_vendor():
    reg = ProviderRegistry.from_config(load_config(FULL_ENV))
    expected = {
        "openai": True,
        "anthropic": True,
        "deepseek": True,
        "google": True,
        "openrouter": False,
        "ollama": False,
        "openaiCompatible": False,
    }
    assert {pid: reg.supports_reasoning_effort(pid) for pid in reg.list_ids()} == expected

    gated = {pid: [m for m in reg.list_models(pid) if reg.lookup(pid).supports_reasoning_effort_for_model(m)]
             for pid in reg.list_ids()}
    assert gated["openai"] == ["o1", "o3-mini"]
    assert gated["anthropic"] == ["claude-3-7-sonnet-20250219"]
    assert gated["deepseek"] == ["deepseek-reasoner"]
    assert gated["google"] == reg.list_models("google")
    assert gated["ollama"] == gated["openrouter"] == []


def test_describe_shape():
    reg = ProviderRegistry({"ollama": FakeAdapter("ollama", models=["phi"])})
    assert reg.describe() == {"ollama": {"models": ["phi"], "supportsReasoning": False}}


def test_factory_unknown_provider():
    with pytest.raises(UnknownProviderError) as exc:
        ProviderFactory.create("nope")
    assert "Available providers: openai, anthropic" in str(exc.value)


def test_factory_import_failure(monkeypatch):
    monkeypatch.setattr(
        ProviderFactory,
        "_PROVIDERS",
        {"ollama": {"module": "does.not.exist", "class": "X"}},
        raising=False,
    )
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("ollama")


def test_factory_forwards_injected_clients():
    adapter = ProviderFactory.create("ollama", ProviderCredentials(base_url="http://h:1/"), http_client=None)
    assert adapter.provider_name == "ollama"
    assert adapter.base_url == "http://h:1"


def test_registry_built_event_carries_masked_config(log_records):
    cfg = load_config({"GOOGLE_API_KEY": "g-secret-1"})
    ProviderRegistry.from_config(cfg, builder=lambda pid, creds: FakeAdapter(provider=pid))
    built = [json.loads(r.getMessage()) for r in log_records if '"registry.built"' in r.getMessage()]
    assert len(built) == 1
    summary = built[0]["config"]
    assert summary["google"]["api_key"] is True
    assert built[0]["providers"] == ["google", "ollama"]
    assert all("g-secret-1" not in r.getMessage() for r in log_records)

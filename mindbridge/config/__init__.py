"""Unified configuration layer.

Goals
-----
* Centralize defaults (base URLs, server identity).
* Read credentials from the process environment, after an optional ``.env``
  file has been merged in (``DOTENV_FILE`` overrides the path).
* Provide a single call site: :func:`load_config` returning an immutable
  :class:`ServerConfig`.

Environment Variables
---------------------
``OPENAI_API_KEY``, ``ANTHROPIC_API_KEY``, ``DEEPSEEK_API_KEY`` (+
``DEEPSEEK_API_BASE_URL``), ``GOOGLE_API_KEY`` (+ ``GOOGLE_API_BASE_URL``),
``OPENROUTER_API_KEY``, ``OPENAI_COMPATIBLE_API_BASE_URL`` (+
``OPENAI_COMPATIBLE_API_KEY``, ``OPENAI_COMPATIBLE_API_MODELS``) and
``OLLAMA_BASE_URL``.

A slot is filled only when the vendor's minimum configuration is present:
an API key for hosted vendors, a base URL for the OpenAI-compatible vendor.
Ollama always gets a slot because its base URL falls back to the local
daemon address.

Public API
----------
* load_config(environ: Mapping | None = None) -> ServerConfig
"""
from __future__ import annotations

import os
from typing import Dict, Mapping, MutableMapping, Optional

from .credentials import ProviderCredentials, ServerConfig
from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_BASE_URL,
    GOOGLE_DEFAULT_BASE_URL,
    OLLAMA_DEFAULT_HOST,
    OPENAI_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_BASE_URL,
)
from .env import is_placeholder, resolve_base_url, resolve_model_allowlist, resolve_provider_key

# Hosted vendors: key required, base URL from env override or default
_KEYED_DEFAULTS: Dict[str, str] = {
    "openai": OPENAI_DEFAULT_BASE_URL,
    "anthropic": ANTHROPIC_DEFAULT_BASE_URL,
    "deepseek": DEEPSEEK_DEFAULT_BASE_URL,
    "google": GOOGLE_DEFAULT_BASE_URL,
    "openrouter": OPENROUTER_DEFAULT_BASE_URL,
}

_DOTENV_LOADED = False


def _load_dotenv_once(environ: MutableMapping[str, str]) -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments, blank lines and an optional
    ``export`` prefix. Existing variables win unless they hold a placeholder.
    Safe to call multiple times.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    path = environ.get("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        return
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            if line.startswith("export "):
                line = line[len("export "):]
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            if k and (k not in environ or is_placeholder(environ.get(k))):
                environ[k] = v


def load_config(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """Build the immutable :class:`ServerConfig` from environment variables.

    Parameters
    ----------
    environ:
        Mapping to read from. Defaults to ``os.environ`` (after merging a
        ``.env`` file). Passing an explicit mapping skips ``.env`` loading,
        which keeps tests hermetic.
    """
    if environ is None:
        _load_dotenv_once(os.environ)
        environ = os.environ

    providers: Dict[str, ProviderCredentials] = {}
    for name, default_base in _KEYED_DEFAULTS.items():
        key = resolve_provider_key(name, environ)
        if not key:
            continue
        providers[name] = ProviderCredentials(
            api_key=key,
            base_url=resolve_base_url(name, environ) or default_base,
        )

    providers["ollama"] = ProviderCredentials(
        base_url=resolve_base_url("ollama", environ) or OLLAMA_DEFAULT_HOST,
    )

    compat_base = resolve_base_url("openaiCompatible", environ)
    if compat_base:
        providers["openaiCompatible"] = ProviderCredentials(
            api_key=resolve_provider_key("openaiCompatible", environ),
            base_url=compat_base,
            models=resolve_model_allowlist("openaiCompatible", environ),
        )

    return ServerConfig(providers=providers)


__all__ = ["ProviderCredentials", "ServerConfig", "load_config"]

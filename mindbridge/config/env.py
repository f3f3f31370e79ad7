"""mindbridge.config.env
=====================

Centralized environment variable mapping for provider credentials.

Purpose
-------
- Single source of truth mapping provider identifiers to the environment
  variables that carry their API key, base URL, and model allowlist.
- Small helpers to read those variables consistently.

Failure Modes
-------------
Helpers never raise on unknown providers or unset variables; they return
``None`` (or an empty tuple) and let the loader decide.
"""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional, Tuple

# Canonical provider → API key env var
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
    "google": "GOOGLE_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
    "openaiCompatible": "OPENAI_COMPATIBLE_API_KEY",
}

# Provider → base URL env var (providers absent here use a fixed base URL)
BASE_URL_ENV_MAP: Dict[str, str] = {
    "deepseek": "DEEPSEEK_API_BASE_URL",
    "google": "GOOGLE_API_BASE_URL",
    "ollama": "OLLAMA_BASE_URL",
    "openaiCompatible": "OPENAI_COMPATIBLE_API_BASE_URL",
}

# Provider → comma-separated model allowlist env var
MODELS_ENV_MAP: Dict[str, str] = {
    "openaiCompatible": "OPENAI_COMPATIBLE_API_MODELS",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', or 'your_'/'your-' (as in
    ``your_api_key_here``). Case-insensitive and resilient to spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or v.startswith(("your_", "your-"))


def _read(environ: Mapping[str, str], name: Optional[str]) -> Optional[str]:
    if not name:
        return None
    val = (environ.get(name) or "").strip()
    if not val or is_placeholder(val):
        return None
    return val


def resolve_provider_key(provider: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the API key for ``provider`` or ``None`` when unset/placeholder."""
    return _read(os.environ if environ is None else environ, ENV_MAP.get(provider))


def resolve_base_url(provider: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the configured base URL override for ``provider``, if any."""
    return _read(os.environ if environ is None else environ, BASE_URL_ENV_MAP.get(provider))


def parse_model_list(raw: Optional[str]) -> Tuple[str, ...]:
    """Split a comma-separated allowlist, stripping blanks and empty entries."""
    if not raw:
        return ()
    return tuple(m.strip() for m in raw.split(",") if m.strip())


def resolve_model_allowlist(provider: str, environ: Optional[Mapping[str, str]] = None) -> Tuple[str, ...]:
    """Return the declared model allowlist for ``provider`` (possibly empty)."""
    env = os.environ if environ is None else environ
    name = MODELS_ENV_MAP.get(provider)
    return parse_model_list(env.get(name)) if name else ()


__all__ = [
    "ENV_MAP",
    "BASE_URL_ENV_MAP",
    "MODELS_ENV_MAP",
    "is_placeholder",
    "resolve_provider_key",
    "resolve_base_url",
    "parse_model_list",
    "resolve_model_allowlist",
]

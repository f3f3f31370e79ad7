"""Immutable configuration value objects.

``ProviderCredentials`` holds one vendor's connection data; ``ServerConfig``
holds one optional slot per canonical provider id. Both are built once at
startup by :func:`mindbridge.config.load_config` and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ProviderCredentials:
    """Connection data for one vendor.

    Attributes:
        api_key: Secret used for authentication, when the vendor needs one.
        base_url: API root; adapters fall back to their vendor default.
        models: Statically declared model allowlist (may be empty).
    """

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    models: Tuple[str, ...] = ()

    def __repr__(self) -> str:
        masked = "***" if self.api_key else None
        return f"ProviderCredentials(api_key={masked!r}, base_url={self.base_url!r}, models={self.models!r})"


@dataclass(frozen=True)
class ServerConfig:
    """Per-vendor credential slots keyed by canonical provider id."""

    providers: Mapping[str, ProviderCredentials] = field(default_factory=dict)

    def get(self, provider: str) -> Optional[ProviderCredentials]:
        return self.providers.get(provider)

    def to_dict(self) -> Dict[str, Dict[str, object]]:
        """Return a log-safe summary (keys reported as presence only)."""
        return {
            name: {
                "api_key": bool(creds.api_key),
                "base_url": creds.base_url,
                "models": list(creds.models),
            }
            for name, creds in self.providers.items()
        }


__all__ = ["ProviderCredentials", "ServerConfig"]

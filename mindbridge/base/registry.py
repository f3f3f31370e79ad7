"""Provider registry: the read-only set of active adapters.

Two steps are kept apart:

1. :func:`resolve_active_providers` decides which vendors are configured. It
   is a pure function of a :class:`ServerConfig` and constructs nothing.
2. :meth:`ProviderRegistry.from_config` instantiates one adapter per active
   vendor through :class:`ProviderFactory`.

After construction the registry is never mutated, so concurrent requests can
share it without locking.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..config.credentials import ProviderCredentials, ServerConfig
from .factory import ProviderFactory
from .interfaces import LLMProvider
from .logging import get_logger, log_event
from .models import PROVIDER_IDS

# Vendors whose only required setting is a base URL
_BASE_URL_ONLY = frozenset({"ollama", "openaiCompatible"})

logger = get_logger("mindbridge.registry")


def is_configured(provider: str, credentials: Optional[ProviderCredentials]) -> bool:
    """Return True when ``credentials`` meet ``provider``'s minimum requirements."""
    if credentials is None:
        return False
    if provider in _BASE_URL_ONLY:
        return bool(credentials.base_url)
    return bool(credentials.api_key)


def resolve_active_providers(config: ServerConfig) -> Dict[str, ProviderCredentials]:
    """Select configured vendors, in registration order.

    Returns:
        Ordered mapping of canonical provider id to credentials for every
        vendor whose minimum configuration is present.
    """
    active: Dict[str, ProviderCredentials] = {}
    for pid in PROVIDER_IDS:
        creds = config.get(pid)
        if is_configured(pid, creds):
            active[pid] = creds  # type: ignore[assignment]
    return active


AdapterBuilder = Callable[[str, ProviderCredentials], Any]


class ProviderRegistry:
    """Mapping from provider id to adapter, keyed in registration order."""

    def __init__(self, adapters: Mapping[str, LLMProvider]) -> None:
        self._adapters: Mapping[str, LLMProvider] = MappingProxyType(dict(adapters))
        self._by_lower = {pid.lower(): pid for pid in self._adapters}

    @classmethod
    def from_config(
        cls,
        config: ServerConfig,
        builder: Optional[AdapterBuilder] = None,
    ) -> "ProviderRegistry":
        """Instantiate adapters for every active vendor.

        Parameters:
            config: Startup configuration.
            builder: Optional ``(provider_id, credentials) -> adapter``
                callable; defaults to :meth:`ProviderFactory.create`.
        """
        build = builder or ProviderFactory.create
        adapters = {pid: build(pid, creds) for pid, creds in resolve_active_providers(config).items()}
        log_event(logger, "registry.built", providers=list(adapters), config=config.to_dict())
        return cls(adapters)

    def lookup(self, provider: str) -> Optional[LLMProvider]:
        """Return the adapter for ``provider`` (case-insensitive) or ``None``."""
        pid = self._by_lower.get((provider or "").strip().lower())
        return self._adapters[pid] if pid else None

    def has(self, provider: str) -> bool:
        return self.lookup(provider) is not None

    def list_ids(self) -> List[str]:
        return list(self._adapters)

    def list_models(self, provider: str) -> List[str]:
        adapter = self.lookup(provider)
        return adapter.get_available_models() if adapter else []

    def supports_reasoning_effort(self, provider: str) -> bool:
        adapter = self.lookup(provider)
        return adapter.supports_reasoning_effort() if adapter else False

    def is_valid_model(self, provider: str, model: str) -> bool:
        adapter = self.lookup(provider)
        return adapter.is_valid_model(model) if adapter else False

    def describe(self) -> Dict[str, Dict[str, Any]]:
        """Return ``{id: {"models": [...], "supportsReasoning": bool}}``."""
        return {
            pid: {
                "models": adapter.get_available_models(),
                "supportsReasoning": adapter.supports_reasoning_effort(),
            }
            for pid, adapter in self._adapters.items()
        }

    def __len__(self) -> int:
        return len(self._adapters)


__all__ = ["ProviderRegistry", "resolve_active_providers", "is_configured"]

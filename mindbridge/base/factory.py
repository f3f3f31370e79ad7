"""Provider Factory utilities.

Purpose
-------
Centralize creation of adapter instances implementing ``LLMProvider``.
Adapter modules are imported lazily with ``importlib`` so that constructing
the registry only imports the SDKs of vendors that are actually configured.

Timeout and fallback semantics
------------------------------
None. The factory either returns an instance or raises
:class:`UnknownProviderError` with an actionable message.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Optional, Tuple, Type

from ..config.credentials import ProviderCredentials
from .errors import UnknownProviderError
from .models import PROVIDER_IDS, canonical_provider_id


class ProviderFactory:
    """Create provider adapters based on a canonical id (e.g., ``"openai"``).

    Lookup is case-insensitive; ``"OpenAICompatible"`` resolves to
    ``"openaiCompatible"``.
    """

    # Map canonical provider ids to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "mindbridge.openai.client", "class": "OpenAIProvider"},
        "anthropic": {"module": "mindbridge.anthropic.client", "class": "AnthropicProvider"},
        "deepseek": {"module": "mindbridge.deepseek.client", "class": "DeepSeekProvider"},
        "google": {"module": "mindbridge.google.client", "class": "GoogleProvider"},
        "openrouter": {"module": "mindbridge.openrouter.client", "class": "OpenRouterProvider"},
        "ollama": {"module": "mindbridge.ollama.client", "class": "OllamaProvider"},
        "openaiCompatible": {
            "module": "mindbridge.openai_compatible.client",
            "class": "OpenAICompatibleProvider",
        },
    }

    @classmethod
    def adapter_class(cls, provider: str) -> Type:
        """Import and return the adapter class for ``provider``.

        Raises
        ------
        UnknownProviderError
            If the id is unknown, the module fails to import, or the class is
            missing from the module.
        """
        name = canonical_provider_id(provider)
        entry = cls._PROVIDERS.get(name) if name else None
        if not entry:
            raise UnknownProviderError(provider, cls.supported())

        module_path, class_name = entry["module"], entry["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:
            raise UnknownProviderError(provider, cls.supported()) from exc
        try:
            return getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(provider, cls.supported()) from exc

    @classmethod
    def create(
        cls,
        provider: str,
        credentials: Optional[ProviderCredentials] = None,
        **kwargs: Any,
    ) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Provider id (case-insensitive).
        credentials:
            Connection data for the vendor.
        **kwargs:
            Adapter-specific constructor kwargs, e.g. ``client=`` for SDK
            adapters or ``http_client=`` for httpx adapters.
        """
        klass = cls.adapter_class(provider)
        return klass(credentials, **kwargs)

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider ids in registration order."""
        return tuple(pid for pid in PROVIDER_IDS if pid in cls._PROVIDERS)


__all__ = ["ProviderFactory", "UnknownProviderError"]

"""
Base package.

Exports the capability contract, request/result models, error taxonomy, and
the factory/registry used to build the active adapter set.
"""

from .errors import (
    ErrorCode,
    ProviderError,
    RequestShapeError,
    UnknownModelError,
    UnknownProviderError,
    VendorContentError,
    VendorTransportError,
)
from .factory import ProviderFactory
from .interfaces import LLMProvider
from .models import PROVIDER_IDS, Failure, Success, ToolEnvelope, UnifiedRequest, UnifiedResult
from .registry import ProviderRegistry, resolve_active_providers

__all__ = [
    "ErrorCode",
    "ProviderError",
    "RequestShapeError",
    "UnknownProviderError",
    "UnknownModelError",
    "VendorTransportError",
    "VendorContentError",
    "ProviderFactory",
    "LLMProvider",
    "PROVIDER_IDS",
    "UnifiedRequest",
    "UnifiedResult",
    "Success",
    "Failure",
    "ToolEnvelope",
    "ProviderRegistry",
    "resolve_active_providers",
]

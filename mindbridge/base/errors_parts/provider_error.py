"""
Structured vendor error exception types.

`ProviderError` wraps a vendor failure with a normalized `ErrorCode`. The two
subclasses split the failure surface the way adapters observe it: the call
itself failed (`VendorTransportError`) or it succeeded without usable text
(`VendorContentError`). Adapters raise these internally and convert them into
a ``Failure`` result at their public boundary.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable message extracted from the vendor when possible.
        provider: Provider key where the error originated (e.g., ``"openai"``).
        model: Optional model name associated with the failure.
        status: HTTP status code when the vendor answered with one.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    status: Optional[int] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class VendorTransportError(ProviderError):
    """The HTTP/SDK call failed (network error or non-2xx status)."""


@dataclass
class VendorContentError(ProviderError):
    """The call succeeded but the parsed response carried no usable text."""


__all__ = ["ProviderError", "VendorTransportError", "VendorContentError"]

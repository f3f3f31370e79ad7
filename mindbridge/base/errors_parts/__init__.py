"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `mindbridge.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError, VendorContentError, VendorTransportError
from .request_errors import RequestShapeError, UnknownModelError, UnknownProviderError
from .classification import classify_exception, code_for_status, extract_sdk_error_message

__all__ = [
    "ErrorCode",
    "ProviderError",
    "VendorTransportError",
    "VendorContentError",
    "RequestShapeError",
    "UnknownProviderError",
    "UnknownModelError",
    "classify_exception",
    "code_for_status",
    "extract_sdk_error_message",
]

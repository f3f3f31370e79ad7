"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``mindbridge.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError, VendorContentError, VendorTransportError
from .errors_parts.request_errors import RequestShapeError, UnknownModelError, UnknownProviderError
from .errors_parts.classification import classify_exception, code_for_status, extract_sdk_error_message

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

"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings and default numbers.

# pragma: allowlist secret
"""
from __future__ import annotations

# Sent to OpenAI-compatible servers that run without authentication
NO_API_KEY_PLACEHOLDER = "dummy-key"  # pragma: allowlist secret - not a real secret

# Default HTTP timeout (seconds). Transport default only; no per-call timeout layer.
DEFAULT_HTTP_TIMEOUT = 300.0

# SDK clients never retry on their own
SDK_MAX_RETRIES = 0

# Separator between rendered reply blocks
BLOCK_SEPARATOR = "\n\n"

__all__ = [
    "NO_API_KEY_PLACEHOLDER",
    "DEFAULT_HTTP_TIMEOUT",
    "SDK_MAX_RETRIES",
    "BLOCK_SEPARATOR",
]

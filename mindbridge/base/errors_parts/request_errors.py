"""
Dispatch-time rejection errors.

These are raised before any vendor call happens. The dispatcher turns each of
them into an error envelope; they never reach the tool runtime.
"""
from __future__ import annotations

from typing import Sequence


class RequestShapeError(ValueError):
    """The unified request failed schema validation.

    The message lists each offending field as ``<field>: <reason>``.
    """


class UnknownProviderError(LookupError):
    """A provider identifier does not resolve to a registered adapter.

    Attributes:
        provider: The identifier as supplied by the caller.
        available: Registered provider ids at the time of the lookup.
    """

    def __init__(self, provider: str, available: Sequence[str] = ()) -> None:
        self.provider = provider
        self.available = list(available)
        super().__init__(
            f'Provider "{provider}" not configured. Available providers: {", ".join(self.available)}'
        )


class UnknownModelError(LookupError):
    """A model is not accepted by the resolved adapter."""

    def __init__(self, provider: str, model: str, available: Sequence[str] = ()) -> None:
        self.provider = provider
        self.model = model
        self.available = list(available)
        super().__init__(
            f'Model "{model}" not found for provider "{provider}". '
            f'Available models: {", ".join(self.available)}'
        )


__all__ = ["RequestShapeError", "UnknownProviderError", "UnknownModelError"]

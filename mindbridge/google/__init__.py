"""Google AI provider package."""

from .client import GoogleProvider

__all__ = ["GoogleProvider"]

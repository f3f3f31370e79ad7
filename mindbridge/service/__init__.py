"""Service layer: dispatcher, tool handlers, MCP server and CLI."""

from .dispatcher import RequestDispatcher
from .normalizer import rejection_envelope, to_envelope

__all__ = ["RequestDispatcher", "to_envelope", "rejection_envelope"]

"""
Caller-facing success/error envelope.

Mirrors the MCP ``CallToolResult`` shape: a list of text blocks plus an
``isError`` flag. Exactly one text block is produced per envelope.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ToolEnvelope:
    """Uniform wrapper returned by every tool.

    Attributes:
        content: Text blocks, each ``{"type": "text", "text": ...}``.
        is_error: Whether the envelope reports a failure.
    """

    content: List[Dict[str, str]] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def from_text(cls, text: str, *, is_error: bool = False) -> "ToolEnvelope":
        return cls(content=[{"type": "text", "text": text}], is_error=is_error)

    @property
    def first_text(self) -> str:
        """Return the text of the first block (empty string when absent)."""
        return self.content[0]["text"] if self.content else ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable ``{"content", "isError"}`` mapping."""
        return {"content": [dict(block) for block in self.content], "isError": self.is_error}


__all__ = ["ToolEnvelope"]

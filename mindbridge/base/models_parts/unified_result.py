"""
Tagged per-request outcome returned by every adapter.

``Success`` carries the reply text; ``Failure`` carries the vendor label and
the extracted error message. Both are immutable and created fresh per request.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..errors_parts.error_code import ErrorCode


@dataclass(frozen=True)
class Success:
    """A vendor reply with usable text."""

    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A vendor call that did not produce usable text.

    Attributes:
        provider: Human-readable vendor label (e.g., ``"OpenAI"``).
        message: Message extracted from the vendor error when possible.
        code: Normalized error category, used for logging only.
    """

    provider: str
    message: str
    code: Optional[ErrorCode] = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return f"Error from {self.provider}: {self.message}"


UnifiedResult = Union[Success, Failure]

__all__ = ["Success", "Failure", "UnifiedResult"]

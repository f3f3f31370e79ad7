"""Anthropic helpers module.

Purpose:
- Side-effect-free utilities for the Anthropic adapter: thinking-budget
  mapping, ``messages.create`` parameter building, and rendering of the reply
  content blocks into text. Keeping them here lets tests exercise the vendor
  rules without an SDK client.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..base.constants import BLOCK_SEPARATOR
from ..base.models import UnifiedRequest
from ..config.defaults import ANTHROPIC_THINKING_BUDGETS

REDACTED_THINKING_TEXT = "Redacted thinking: [Content redacted for safety]"


def thinking_budget(effort: Optional[str]) -> int:
    """Map a reasoning-effort level to an extended-thinking token budget.

    ``low`` → 4000, ``high`` → 32000; ``medium``, ``None`` and unknown levels
    map to 16000.
    """
    return ANTHROPIC_THINKING_BUDGETS.get(effort or "medium", ANTHROPIC_THINKING_BUDGETS["medium"])


def build_params(request: UnifiedRequest, *, thinking: bool) -> Dict[str, Any]:
    """Build ``client.messages.create`` keyword arguments.

    Parameters:
        request: Validated unified request.
        thinking: Whether extended thinking is engaged for this call.

    Returns:
        Parameter mapping. When ``thinking`` is true the mapping carries a
        ``thinking`` block, ``max_tokens`` is raised by the budget so the
        vendor accepts it, and temperature/top_p/top_k are absent.
    """
    params: Dict[str, Any] = {
        "model": request.model,
        "max_tokens": request.max_tokens,
        "messages": [{"role": "user", "content": request.prompt}],
    }
    if request.system_prompt:
        params["system"] = request.system_prompt
    if request.stop_sequences:
        params["stop_sequences"] = list(request.stop_sequences)

    if thinking:
        budget = thinking_budget(request.reasoning_effort)
        params["thinking"] = {"type": "enabled", "budget_tokens": budget}
        params["max_tokens"] = budget + request.max_tokens
        return params

    sampling = {"temperature": request.temperature, "top_p": request.top_p, "top_k": request.top_k}
    params.update({k: v for k, v in sampling.items() if v is not None})
    return params


def render_content_blocks(blocks: Iterable[Any]) -> str:
    """Render reply blocks into a single string.

    ``thinking`` blocks are prefixed with ``Thinking:``, ``redacted_thinking``
    blocks become a fixed notice, and ``text`` blocks are kept as-is. Blocks
    are joined by a blank line; unknown block types are skipped.
    """
    rendered: List[str] = []
    for block in blocks or ():
        kind = getattr(block, "type", None)
        if kind == "thinking":
            rendered.append(f"Thinking: {getattr(block, 'thinking', '')}")
        elif kind == "redacted_thinking":
            rendered.append(REDACTED_THINKING_TEXT)
        elif kind == "text":
            text = getattr(block, "text", None)
            if text:
                rendered.append(text)
    return BLOCK_SEPARATOR.join(rendered)


__all__ = ["thinking_budget", "build_params", "render_content_blocks", "REDACTED_THINKING_TEXT"]

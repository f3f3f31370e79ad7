"""Reasoning-effort helpers shared by adapters.

Vendors without a native reasoning knob get a synthetic instruction asking for
an explicit ``Reasoning: ... Answer: ...`` structure; :func:`restructure_reasoning`
re-labels the two halves when the marker pair comes back verbatim.
"""

from __future__ import annotations

import re
from typing import Optional

# Static catalog advertised by the ``listReasoningModels`` tool
REASONING_MODELS = (
    "o1",
    "o3-mini",
    "deepseek-reasoner",
    "claude-3-7-sonnet-20250219",
)

REASONING_MODELS_DESCRIPTION = (
    "These models are specifically optimized for reasoning tasks and support the "
    "reasoning_effort parameter."
)

_DEPTH = {
    "low": "brief",
    "medium": "detailed",
    "high": "extremely detailed",
}

_MARKERS = re.compile(r"Reasoning:(.*?)Answer:(.*)", re.DOTALL)


def reasoning_instruction(effort: str) -> str:
    """Return the synthetic instruction for ``effort`` (unknown levels read as medium)."""
    depth = _DEPTH.get(effort, _DEPTH["medium"])
    return (
        f"Please provide {depth} step-by-step reasoning before giving your final answer. "
        'Start with "Reasoning:" and end with "Answer:" to clearly separate your thought '
        "process from your final response."
    )


def split_reasoning(text: str) -> Optional[tuple[str, str]]:
    """Return ``(reasoning, answer)`` when both markers are present, else ``None``."""
    match = _MARKERS.search(text)
    if match is None:
        return None
    return match.group(1).strip(), match.group(2).strip()


def restructure_reasoning(text: str) -> str:
    """Re-label a marked reply; return ``text`` unchanged when the markers are missing."""
    halves = split_reasoning(text)
    if halves is None:
        return text
    reasoning, answer = halves
    return f"Chain of Thought Reasoning:\n{reasoning}\n\nFinal Answer:\n{answer}"


__all__ = [
    "REASONING_MODELS",
    "REASONING_MODELS_DESCRIPTION",
    "reasoning_instruction",
    "split_reasoning",
    "restructure_reasoning",
]

"""Tool handlers behind the MCP surface.

Each handler returns a :class:`ToolEnvelope`; the server module only adapts
envelopes to MCP content types. Keeping the handlers transport-free lets the
CLI and the tests call them directly.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

from ..base.models import ToolEnvelope, UnifiedRequest
from ..base.reasoning import REASONING_MODELS, REASONING_MODELS_DESCRIPTION
from ..base.registry import ProviderRegistry
from .dispatcher import RequestDispatcher

GET_SECOND_OPINION = "getSecondOpinion"
LIST_PROVIDERS = "listProviders"
LIST_REASONING_MODELS = "listReasoningModels"

TOOL_DESCRIPTIONS: Dict[str, str] = {
    GET_SECOND_OPINION: "Get responses from various LLM providers",
    LIST_PROVIDERS: "List all configured LLM providers and their available models",
    LIST_REASONING_MODELS: "List all available models that support reasoning capabilities",
}

_EMPTY_SCHEMA: Dict[str, Any] = {"type": "object", "properties": {}}


def tool_input_schemas() -> Dict[str, Dict[str, Any]]:
    """Return the JSON input schema of every tool, keyed by tool name."""
    return {
        GET_SECOND_OPINION: UnifiedRequest.tool_input_schema(),
        LIST_PROVIDERS: dict(_EMPTY_SCHEMA),
        LIST_REASONING_MODELS: dict(_EMPTY_SCHEMA),
    }


async def get_second_opinion(dispatcher: RequestDispatcher, arguments: Optional[Mapping[str, Any]]) -> ToolEnvelope:
    return await dispatcher.dispatch(arguments or {})


def list_providers(registry: ProviderRegistry) -> ToolEnvelope:
    """JSON mapping of provider id to its models and reasoning support."""
    return ToolEnvelope.from_text(json.dumps(registry.describe(), indent=2))


def list_reasoning_models() -> ToolEnvelope:
    """Static catalog of reasoning-capable models (independent of configuration)."""
    payload = {"models": list(REASONING_MODELS), "description": REASONING_MODELS_DESCRIPTION}
    return ToolEnvelope.from_text(json.dumps(payload, indent=2))


__all__ = [
    "GET_SECOND_OPINION",
    "LIST_PROVIDERS",
    "LIST_REASONING_MODELS",
    "TOOL_DESCRIPTIONS",
    "tool_input_schemas",
    "get_second_opinion",
    "list_providers",
    "list_reasoning_models",
]

"""
Pydantic model and validator for the inbound "second opinion" request.

Purpose
-------
Validate the tool arguments once at the edge so adapters can trust every
field. Field aliases match the tool-facing argument names (``systemPrompt``,
``maxTokens`` ...) while Python code uses snake_case attributes.

Fallback semantics: none. Validation either succeeds or raises
:class:`RequestShapeError` (via :func:`parse_request`).
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...config.defaults import MAX_TOKENS_DEFAULT
from ..errors_parts.request_errors import RequestShapeError

ReasoningEffort = Literal["low", "medium", "high"]

# Canonical provider identifiers, in registration order
PROVIDER_IDS = (
    "openai",
    "anthropic",
    "deepseek",
    "google",
    "openrouter",
    "ollama",
    "openaiCompatible",
)

_CANONICAL_BY_LOWER = {pid.lower(): pid for pid in PROVIDER_IDS}


def canonical_provider_id(value: str) -> Optional[str]:
    """Return the canonical spelling of a provider id, or ``None`` if unknown."""
    return _CANONICAL_BY_LOWER.get((value or "").strip().lower())


class UnifiedRequest(BaseModel):
    """Provider-agnostic request accepted by the dispatcher.

    Parameters:
        prompt: The user prompt (non-empty).
        provider: One of :data:`PROVIDER_IDS` (``providerId`` also accepted);
            matched case-insensitively.
        model: Target model identifier (non-empty).
        system_prompt: Optional system instruction (``systemPrompt``).
        temperature: Optional sampling temperature within [0, 1].
        max_tokens: Positive output budget (``maxTokens``), default
            :data:`MAX_TOKENS_DEFAULT`.
        reasoning_effort: Optional ``low`` / ``medium`` / ``high`` hint.
        top_p, top_k, stop_sequences, frequency_penalty, presence_penalty,
        stream: Optional vendor-specific sampling knobs.

    Snake_case fields also accept their camelCase spellings
    (``reasoningEffort``, ``topP``, ``stopSequences`` ...).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    prompt: str = Field(..., min_length=1, description="The prompt to send to the LLM")
    provider: str = Field(
        ...,
        validation_alias=AliasChoices("provider", "providerId"),
        description="The LLM provider to use",
    )
    model: str = Field(..., min_length=1, description="The model to use")
    system_prompt: Optional[str] = Field(
        None, alias="systemPrompt", description="Optional system prompt to provide context"
    )
    temperature: Optional[float] = Field(None, ge=0, le=1, description="Sampling temperature (0-1)")
    max_tokens: int = Field(
        MAX_TOKENS_DEFAULT, gt=0, alias="maxTokens", description="Maximum tokens in the response"
    )
    reasoning_effort: Optional[ReasoningEffort] = Field(
        None,
        validation_alias=AliasChoices("reasoning_effort", "reasoningEffort"),
        description="Reasoning effort level for models that support it",
    )
    top_p: Optional[float] = Field(
        None,
        ge=0,
        le=1,
        validation_alias=AliasChoices("top_p", "topP"),
        description="Nucleus sampling threshold (0-1)",
    )
    top_k: Optional[int] = Field(
        None, gt=0, validation_alias=AliasChoices("top_k", "topK"), description="Top-k sampling cutoff"
    )
    stop_sequences: Optional[List[str]] = Field(
        None,
        validation_alias=AliasChoices("stop_sequences", "stopSequences"),
        description="Sequences that stop generation",
    )
    stream: Optional[bool] = Field(None, description="Accepted for compatibility; responses are never streamed")
    frequency_penalty: Optional[float] = Field(
        None,
        ge=-2,
        le=2,
        validation_alias=AliasChoices("frequency_penalty", "frequencyPenalty"),
        description="Frequency penalty (-2 to 2)",
    )
    presence_penalty: Optional[float] = Field(
        None,
        ge=-2,
        le=2,
        validation_alias=AliasChoices("presence_penalty", "presencePenalty"),
        description="Presence penalty (-2 to 2)",
    )

    @field_validator("provider")
    @classmethod
    def _canonical_provider(cls, value: str) -> str:
        canonical = canonical_provider_id(value)
        if canonical is None:
            raise ValueError(f"must be one of: {', '.join(PROVIDER_IDS)}")
        return canonical

    @classmethod
    def tool_input_schema(cls) -> Dict[str, Any]:
        """Return the JSON schema advertised to tool callers (alias names)."""
        schema = cls.model_json_schema(by_alias=True)
        schema["properties"]["provider"]["enum"] = list(PROVIDER_IDS)
        return schema


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "request"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def parse_request(arguments: Mapping[str, Any] | UnifiedRequest) -> UnifiedRequest:
    """Validate raw tool arguments into a :class:`UnifiedRequest`.

    Raises:
        RequestShapeError: When any field is missing, empty, out of range, or
            not a member of its enumeration.
    """
    if isinstance(arguments, UnifiedRequest):
        return arguments
    try:
        return UnifiedRequest.model_validate(dict(arguments or {}))
    except ValidationError as exc:
        raise RequestShapeError(f"Invalid request: {_format_validation_error(exc)}") from exc


__all__ = [
    "PROVIDER_IDS",
    "ReasoningEffort",
    "UnifiedRequest",
    "canonical_provider_id",
    "parse_request",
]

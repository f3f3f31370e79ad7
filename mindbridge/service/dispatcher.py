"""Request validator and dispatcher.

``RequestDispatcher.dispatch`` walks one request through
``Unvalidated → ProviderResolved → ModelResolved → Dispatched → Completed``.
Any validation failure jumps straight to ``Rejected`` and yields an error
envelope; no vendor call is made and nothing is retried.

A reasoning-effort hint aimed at a vendor without reasoning support is not a
rejection: a warning is logged and the request is still dispatched.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Mapping, Tuple, Union

from ..base.errors import RequestShapeError, UnknownModelError, UnknownProviderError
from ..base.interfaces import LLMProvider
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ToolEnvelope, UnifiedRequest, parse_request
from ..base.registry import ProviderRegistry
from .normalizer import rejection_envelope, to_envelope


class DispatchState(str, enum.Enum):
    """Lifecycle of a single request inside the dispatcher."""

    UNVALIDATED = "unvalidated"
    PROVIDER_RESOLVED = "provider_resolved"
    MODEL_RESOLVED = "model_resolved"
    DISPATCHED = "dispatched"
    COMPLETED = "completed"
    REJECTED = "rejected"


class RequestDispatcher:
    """Validate, resolve and invoke one adapter per request.

    Parameters:
        registry: Read-only provider registry built at startup.
    """

    def __init__(self, registry: ProviderRegistry) -> None:
        self._registry = registry
        self._logger = get_logger("mindbridge.service")

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    def resolve(self, request: UnifiedRequest) -> Tuple[LLMProvider, DispatchState]:
        """Resolve the adapter for ``request`` and check the model.

        Raises:
            UnknownProviderError: The provider is not registered.
            UnknownModelError: The adapter does not accept the model.
        """
        adapter = self._registry.lookup(request.provider)
        if adapter is None:
            raise UnknownProviderError(request.provider, self._registry.list_ids())
        if not adapter.is_valid_model(request.model):
            raise UnknownModelError(request.provider, request.model, adapter.get_available_models())
        return adapter, DispatchState.MODEL_RESOLVED

    async def dispatch(self, arguments: Union[Mapping[str, Any], UnifiedRequest]) -> ToolEnvelope:
        """Run one request end to end and return its envelope.

        Never raises for request or vendor errors.
        """
        ctx = LogContext(tool="getSecondOpinion")
        try:
            request = parse_request(arguments)
        except RequestShapeError as exc:
            return self._reject(ctx, DispatchState.UNVALIDATED, str(exc), "validation")

        ctx = LogContext(provider=request.provider, model=request.model, tool="getSecondOpinion")
        try:
            adapter, _ = self.resolve(request)
        except UnknownProviderError as exc:
            return self._reject(ctx, DispatchState.UNVALIDATED, str(exc), "unknown_provider")
        except UnknownModelError as exc:
            return self._reject(ctx, DispatchState.PROVIDER_RESOLVED, str(exc), "unknown_model")

        if request.reasoning_effort and not adapter.supports_reasoning_effort():
            normalized_log_event(
                self._logger,
                "dispatch.reasoning_ignored",
                ctx,
                phase=DispatchState.MODEL_RESOLVED.value,
                level=logging.WARNING,
                message=(
                    f'Provider "{request.provider}" does not support reasoning_effort parameter. '
                    "It will be ignored."
                ),
            )

        normalized_log_event(self._logger, "dispatch.start", ctx, phase=DispatchState.DISPATCHED.value)
        result = await adapter.get_response(request)
        envelope = to_envelope(result)
        normalized_log_event(
            self._logger,
            "dispatch.end",
            ctx,
            phase=DispatchState.COMPLETED.value,
            is_error=envelope.is_error,
        )
        return envelope

    def _reject(self, ctx: LogContext, state: DispatchState, message: str, code: str) -> ToolEnvelope:
        normalized_log_event(
            self._logger,
            "dispatch.rejected",
            ctx,
            phase=DispatchState.REJECTED.value,
            error_code=code,
            level=logging.WARNING,
            from_state=state.value,
            error=message,
        )
        return rejection_envelope(message)


__all__ = ["RequestDispatcher", "DispatchState"]

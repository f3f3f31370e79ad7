"""BaseProvider: shared adapter boundary.

Purpose:
- Implement the capability queries from class-level declarations
  (``MODELS``, ``REASONING_MODELS``, ``SUPPORTS_REASONING``).
- Own the adapter boundary: ``get_response`` logs start/end events, invokes
  the vendor-specific ``_complete`` hook, and converts every exception into a
  :class:`Failure`. Nothing raised by a vendor call escapes.

Subclasses implement ``_complete(request) -> str`` and raise
:class:`VendorTransportError` / :class:`VendorContentError` for vendor
failures.
"""

from __future__ import annotations

import logging
import time
from typing import ClassVar, FrozenSet, List, Optional, Tuple

from ..config.credentials import ProviderCredentials
from .errors import ErrorCode, ProviderError, VendorContentError, classify_exception
from .logging import LogContext, get_logger, normalized_log_event
from .models import Failure, Success, UnifiedRequest, UnifiedResult


class BaseProvider:
    """Reusable base for vendor adapters.

    Class attributes:
        PROVIDER_ID: Canonical provider identifier (registry key).
        DISPLAY_NAME: Vendor label used in error envelopes.
        MODELS: Statically declared model identifiers, in display order.
        REASONING_MODELS: Models for which reasoning effort is honored.
        SUPPORTS_REASONING: Vendor-level reasoning capability.
    """

    PROVIDER_ID: ClassVar[str] = ""
    DISPLAY_NAME: ClassVar[str] = ""
    MODELS: ClassVar[Tuple[str, ...]] = ()
    REASONING_MODELS: ClassVar[FrozenSet[str]] = frozenset()
    SUPPORTS_REASONING: ClassVar[bool] = False

    def __init__(self, credentials: Optional[ProviderCredentials] = None) -> None:
        self._credentials = credentials or ProviderCredentials()
        self._logger = get_logger(f"mindbridge.{self.PROVIDER_ID.lower()}")

    # ----- identity -----
    @property
    def provider_name(self) -> str:
        return self.PROVIDER_ID

    @property
    def display_name(self) -> str:
        return self.DISPLAY_NAME

    # ----- capability queries -----
    def get_available_models(self) -> List[str]:
        return list(self.MODELS)

    def is_valid_model(self, model: str) -> bool:
        return model in self.get_available_models()

    def supports_reasoning_effort(self) -> bool:
        return self.SUPPORTS_REASONING

    def supports_reasoning_effort_for_model(self, model: str) -> bool:
        return model in self.REASONING_MODELS

    # ----- request boundary -----
    async def get_response(self, request: UnifiedRequest) -> UnifiedResult:
        """Run one vendor call and return a tagged result.

        Returns:
            ``Success`` with the reply text, or ``Failure`` with the vendor
            label and the extracted message. Never raises for vendor errors.
        """
        ctx = LogContext(provider=self.provider_name, model=request.model)
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            reasoning_effort=request.reasoning_effort,
            max_tokens=request.max_tokens,
        )
        started = time.perf_counter()
        try:
            text = await self._complete(request)
        except ProviderError as exc:
            return self._failure(ctx, started, exc.message, exc.code, http_status=exc.status)
        except Exception as exc:  # adapter boundary: every failure becomes a Failure
            self._logger.debug("unexpected adapter error", exc_info=True)
            return self._failure(ctx, started, str(exc) or exc.__class__.__name__, classify_exception(exc))
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            ok=True,
            latency_ms=_elapsed_ms(started),
            chars=len(text),
        )
        return Success(text=text)

    async def _complete(self, request: UnifiedRequest) -> str:  # pragma: no cover - abstract
        """Perform the vendor call and return the reply text."""
        raise NotImplementedError

    # ----- helpers -----
    def _no_content(self, message: str, model: Optional[str] = None) -> VendorContentError:
        """Build the error raised when a reply carries no usable text."""
        return VendorContentError(
            code=ErrorCode.NO_CONTENT,
            message=message,
            provider=self.provider_name,
            model=model,
        )

    def _failure(
        self,
        ctx: LogContext,
        started: float,
        message: str,
        code: ErrorCode,
        http_status: Optional[int] = None,
    ) -> Failure:
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            error_code=code.value,
            level=logging.WARNING,
            ok=False,
            http_status=http_status,
            latency_ms=_elapsed_ms(started),
            error=message,
        )
        return Failure(provider=self.display_name, message=message, code=code)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 2)


__all__ = ["BaseProvider"]

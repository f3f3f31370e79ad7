"""BaseHTTPProvider: adapters that speak to a vendor REST API through httpx.

External dependencies:
- ``httpx`` async client, either injected (tests, embedding applications) or
  taken from the shared pool in :mod:`mindbridge.base.http`.

Error extraction:
- Non-2xx replies are decoded as JSON when possible and handed to the
  vendor hook ``_extract_error_message``. When that yields nothing the raw
  body is used, and an empty body produces a generic status message.
- Transport exceptions (connect errors, timeouts) become
  :class:`VendorTransportError` with a classified :class:`ErrorCode`.

Timeouts & retries: none beyond the client's transport default.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

import httpx

from ..config.credentials import ProviderCredentials
from .errors import ErrorCode, VendorContentError, VendorTransportError, classify_exception, code_for_status
from .http import get_async_client
from .provider_base import BaseProvider


class BaseHTTPProvider(BaseProvider):
    """Reusable base for httpx-backed adapters.

    Subclasses set ``DEFAULT_BASE_URL`` and implement ``_complete`` using
    :meth:`_post_json`. They override :meth:`_extract_error_message` to read
    their vendor's error JSON shape.
    """

    DEFAULT_BASE_URL: str = ""

    def __init__(
        self,
        credentials: Optional[ProviderCredentials] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(credentials)
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        """Configured base URL without a trailing slash."""
        return (self._credentials.base_url or self.DEFAULT_BASE_URL).rstrip("/")

    def _client(self) -> httpx.AsyncClient:
        return self._http_client or get_async_client(None, self.provider_name)

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    async def _post_json(
        self,
        url: str,
        payload: Mapping[str, Any],
        *,
        model: Optional[str] = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """POST ``payload`` as JSON and return the decoded reply body.

        Raises:
            VendorTransportError: On transport failure or non-2xx status.
            VendorContentError: When a 2xx reply is not valid JSON.
        """
        try:
            resp = await self._client().post(url, json=dict(payload), headers=self._headers(), params=params)
        except httpx.HTTPError as exc:
            raise VendorTransportError(
                code=classify_exception(exc),
                message=f"{self.display_name} request failed: {exc}",
                provider=self.provider_name,
                model=model,
                raw=exc,
            ) from exc

        if not resp.is_success:
            raise VendorTransportError(
                code=code_for_status(resp.status_code),
                message=self._error_message(resp),
                provider=self.provider_name,
                model=model,
                status=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise VendorContentError(
                code=ErrorCode.NO_CONTENT,
                message=f"{self.display_name} returned a response that is not valid JSON",
                provider=self.provider_name,
                model=model,
                status=resp.status_code,
                raw=exc,
            ) from exc

    def _error_message(self, resp: httpx.Response) -> str:
        """Best-effort human-readable message for a non-2xx reply."""
        body = resp.text.strip()
        data: Any = None
        if body:
            try:
                data = json.loads(body)
            except ValueError:
                data = None
        if data is not None:
            msg = self._extract_error_message(data)
            if msg:
                return msg
        if body:
            return f"{self.display_name} request failed with status {resp.status_code}: {body}"
        return f"{self.display_name} request failed with status {resp.status_code}"

    def _extract_error_message(self, data: Any) -> Optional[str]:
        """Return the vendor-declared error message from decoded JSON, if any."""
        return None


def error_field_message(data: Any) -> Optional[str]:
    """Read ``{"error": {"message": str}}``, the most common vendor error shape."""
    if isinstance(data, Mapping):
        err = data.get("error")
        if isinstance(err, Mapping):
            msg = err.get("message")
            if isinstance(msg, str) and msg:
                return msg
    return None


__all__ = ["BaseHTTPProvider", "error_field_message"]

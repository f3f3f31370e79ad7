"""Shared async HTTP client pool for adapters.

Purpose:
    Provide a centralized pool of reusable ``httpx.AsyncClient`` instances so
    adapters do not allocate a connection pool per call. Adapters that receive
    an injected client (tests, embedding applications) never touch the pool.

Timeout strategy:
    Clients are created with :data:`DEFAULT_HTTP_TIMEOUT` as their transport
    default. There is no per-call timeout layer on top.

Lifecycle & cleanup:
    Clients are cached by ``(base_url, purpose)``. The server awaits
    :func:`aclose_all_clients` on shutdown.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional, Tuple

import httpx

from ..constants import DEFAULT_HTTP_TIMEOUT

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.AsyncClient] = {}

logger = logging.getLogger("mindbridge.http")


def get_async_client(base_url: Optional[str], purpose: str) -> httpx.AsyncClient:
    """Return a pooled ``httpx.AsyncClient`` for the given base URL and purpose.

    Parameters:
        base_url: Optional API base URL set on the client so callers can use
            relative paths. ``None`` groups clients under a shared key.
        purpose: Short string discriminating pools (e.g., the provider id).

    Returns:
        A reusable ``httpx.AsyncClient`` instance.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is None or client.is_closed:
        if base_url:
            client = httpx.AsyncClient(base_url=base_url, timeout=DEFAULT_HTTP_TIMEOUT)
        else:
            client = httpx.AsyncClient(timeout=DEFAULT_HTTP_TIMEOUT)
        _CLIENTS[key] = client
    return client


async def aclose_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    clients = list(_CLIENTS.values())
    _CLIENTS.clear()
    results = await asyncio.gather(*(c.aclose() for c in clients), return_exceptions=True)
    for res in results:
        if isinstance(res, Exception):
            logger.debug("http client close failed: %s", res)


__all__ = ["get_async_client", "aclose_all_clients"]

"""Shared HTTP client construction for the dispatcher.

Purpose:
    Build ``httpx.AsyncClient`` instances whose timeouts derive exclusively
    from :func:`get_timeout_config`, so no numeric timeout literals are
    scattered across the gateway.

Lifecycle:
    The service creates one client in its lifespan and closes it on shutdown;
    the client holds only a connection pool, no per-request state. A
    ``Gateway`` built without a client creates and owns one.

Testing:
    ``transport`` accepts any httpx transport, typically
    ``httpx.MockTransport`` acting as a stub upstream.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..timeouts import TimeoutConfig, get_timeout_config


def build_timeout(cfg: Optional[TimeoutConfig] = None) -> httpx.Timeout:
    """Return the ``httpx.Timeout`` matching ``cfg`` (or the cached config)."""
    cfg = cfg or get_timeout_config()
    return httpx.Timeout(cfg.http_timeout_seconds, connect=cfg.connect_timeout_seconds)


def build_async_client(
    timeout_config: Optional[TimeoutConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` configured for upstream provider calls.

    Parameters:
        timeout_config: Optional explicit timeouts; defaults to
            :func:`get_timeout_config`.
        transport: Optional transport override (tests, proxies).

    Returns:
        A new client. The caller owns it and must close it (``aclose`` or
        ``async with``).
    """
    return httpx.AsyncClient(timeout=build_timeout(timeout_config), transport=transport)


__all__ = ["build_async_client", "build_timeout"]

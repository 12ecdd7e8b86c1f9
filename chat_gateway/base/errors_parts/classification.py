"""
Error classification helpers mapping exceptions to normalized ErrorKind values.

Covers three concerns used across the gateway:

- ``classify_exception``: turn an arbitrary exception raised on the network
  path into an :class:`ErrorKind`.
- ``error_from_exception``: wrap such an exception into a :class:`GatewayError`
  carrying the classified kind, status and retry hint.
- ``is_retryable``: retry hint derived from kind and upstream status.
- ``http_status_for``: the status code the HTTP service answers with for a
  given failure.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

import httpx

from .error_kind import ErrorKind
from .gateway_error import GatewayError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_RETRYABLE_UPSTREAM_STATUSES = frozenset({408, 429})

_HTTP_STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.NOT_CONFIGURED: 400,
    ErrorKind.UPSTREAM_ERROR: 502,
    ErrorKind.MALFORMED_RESPONSE: 500,
    ErrorKind.TRANSPORT_ERROR: 500,
}


def classify_exception(exc: BaseException) -> ErrorKind:
    """Classify an exception into a normalized :class:`ErrorKind`.

    Precedence:
        1. GatewayError passthrough.
        2. Timeouts (asyncio, builtin, httpx) and ``httpx.TransportError``.
        3. Exceptions exposing an HTTP status -> ``UPSTREAM_ERROR``.
        4. ``TRANSPORT_ERROR`` fallback for anything else raised while talking
           to the upstream.
    """
    if isinstance(exc, GatewayError):
        return exc.kind
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)):
        return ErrorKind.TRANSPORT_ERROR
    if isinstance(exc, httpx.TransportError):
        return ErrorKind.TRANSPORT_ERROR
    if _extract_status(exc) is not None:
        return ErrorKind.UPSTREAM_ERROR
    return ErrorKind.TRANSPORT_ERROR


def error_from_exception(exc: BaseException, *, provider: str, message: str) -> GatewayError:
    """Wrap ``exc`` raised while calling ``provider`` into a :class:`GatewayError`.

    ``message`` is used verbatim; ``str(exc)`` is never copied into it.
    """
    if isinstance(exc, GatewayError):
        return exc.with_provider(provider)
    kind = classify_exception(exc)
    status = _extract_status(exc) if kind is ErrorKind.UPSTREAM_ERROR else None
    return GatewayError(
        kind=kind,
        message=message,
        provider=provider,
        upstream_status=status,
        retryable=is_retryable(kind, status),
        raw=exc,
    )


def is_retryable(kind: ErrorKind, upstream_status: Optional[int] = None) -> bool:
    """Return the retry hint for a failure.

    Transport failures are always retryable. Upstream failures are retryable
    only for throttling, timeouts and server-side statuses. Invalid input,
    missing configuration and malformed bodies never are.
    """
    if kind is ErrorKind.TRANSPORT_ERROR:
        return True
    if kind is ErrorKind.UPSTREAM_ERROR:
        if upstream_status is None:
            return False
        return upstream_status in _RETRYABLE_UPSTREAM_STATUSES or 500 <= upstream_status < 600
    return False


def http_status_for(error: GatewayError) -> int:
    """Return the HTTP status the service responds with for ``error``.

    ``UPSTREAM_ERROR`` reuses the provider's status when it is a 4xx or 5xx;
    anything else (missing, informational, redirect) becomes 502. Every other
    kind maps to a fixed status.
    """
    status = error.upstream_status
    if error.kind is ErrorKind.UPSTREAM_ERROR and status is not None and 400 <= status < 600:
        return status
    return _HTTP_STATUS_BY_KIND[error.kind]


__all__ = [
    "classify_exception",
    "error_from_exception",
    "is_retryable",
    "http_status_for",
]

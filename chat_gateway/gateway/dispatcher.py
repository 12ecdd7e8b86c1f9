"""Dispatcher: one normalized request in, one upstream call, one ChatResult out.

Steps per call:

1. Pick the adapter for ``request.provider`` (cached per dispatcher).
2. Resolve the credential; a missing or blank value fails fast with
   ``NOT_CONFIGURED`` and no network traffic.
3. ``encode`` -> HTTP call on the shared ``httpx.AsyncClient`` -> ``decode``.
4. Exceptions from the HTTP call and the optional overall deadline go
   through ``error_from_exception``: transport failures and timeouts become
   ``TRANSPORT_ERROR``, anything carrying an HTTP status ``UPSTREAM_ERROR``.

Every ``GatewayError`` is returned as ``ChatResult.failure`` with its kind
intact. ``asyncio.CancelledError`` always propagates so a disconnected caller
aborts the in-flight upstream request.
"""
from __future__ import annotations

import asyncio
import dataclasses
import os
import time
from typing import Dict, Mapping, Optional

import httpx

from ..base.constants import NOT_CONFIGURED_MESSAGE, PROVIDER_LABELS
from ..base.errors import ErrorKind, GatewayError, error_from_exception
from ..base.factory import AdapterFactory, UnknownProviderError
from ..base.interfaces import CredentialResolver, ProviderAdapter
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ChatRequest, ChatResult, WireRequest, WireResponse
from ..base.resilience import RetryConfig, get_retry_config, retry_async
from ..base.timeouts import TimeoutConfig, get_timeout_config

_logger = get_logger("gateway.dispatcher")

_REDACTED = "***"


def _max_concurrency_from_env() -> Optional[int]:
    raw = os.getenv("GATEWAY_MAX_CONCURRENCY")
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def _redact(message: str, credential: str) -> str:
    """Remove the credential from an upstream-supplied message."""
    if credential and credential in message:
        return message.replace(credential, _REDACTED)
    return message


def _transport_message(provider: str, exc: BaseException) -> str:
    # str(exc) is avoided: httpx messages can include the request URL, and
    # the Gemini URL carries the key as a query parameter.
    label = PROVIDER_LABELS.get(provider, provider)
    if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError)):
        return f"{label} request timed out"
    return f"{label} request failed ({type(exc).__name__})"


class Dispatcher:
    """Route a validated :class:`ChatRequest` to its provider adapter.

    Parameters:
        credentials: Resolver consulted once per call.
        client: Shared ``httpx.AsyncClient`` (connection pool only).
        timeout_config: Overall deadline source; defaults to
            :func:`get_timeout_config`.
        retry_config: Retry policy; defaults to ``GATEWAY_MAX_ATTEMPTS``
            (a single attempt unless configured).
        max_concurrency: Per-provider cap on in-flight upstream calls;
            defaults to ``GATEWAY_MAX_CONCURRENCY`` (unbounded when unset).
        adapters: Pre-built adapters keyed by provider, mainly for tests.
    """

    def __init__(
        self,
        credentials: CredentialResolver,
        client: httpx.AsyncClient,
        *,
        timeout_config: Optional[TimeoutConfig] = None,
        retry_config: Optional[RetryConfig] = None,
        max_concurrency: Optional[int] = None,
        adapters: Optional[Mapping[str, ProviderAdapter]] = None,
    ) -> None:
        self._credentials = credentials
        self._client = client
        self._timeouts = timeout_config or get_timeout_config()
        self._retry = retry_config or get_retry_config()
        self._max_concurrency = max_concurrency if max_concurrency is not None else _max_concurrency_from_env()
        self._adapters: Dict[str, ProviderAdapter] = dict(adapters or {})
        self._semaphores: Dict[str, asyncio.Semaphore] = {}

    def adapter_for(self, provider: str) -> ProviderAdapter:
        """Return the (cached) adapter for ``provider``.

        Raises ``GatewayError(INVALID_REQUEST)`` for unknown providers.
        """
        name = AdapterFactory.canonical(provider)
        adapter = self._adapters.get(name)
        if adapter is None:
            try:
                adapter = AdapterFactory.create(name)
            except UnknownProviderError as exc:
                raise GatewayError(
                    kind=ErrorKind.INVALID_REQUEST,
                    message=f"Unknown provider: {provider}",
                ) from exc
            self._adapters[name] = adapter
        return adapter

    async def dispatch(self, request: ChatRequest, *, request_id: Optional[str] = None) -> ChatResult:
        """Run one chat call and return its normalized result."""
        ctx = LogContext.for_request(request, request_id)
        start = time.perf_counter()
        normalized_log_event(
            _logger,
            "chat.start",
            ctx,
            phase="start",
        )
        try:
            content = await self._dispatch(request, ctx)
        except GatewayError as err:
            err.with_provider(request.provider)
            normalized_log_event(
                _logger,
                "chat.error",
                ctx,
                phase="finalize",
                error_kind=err.kind.value,
                upstream_status=err.upstream_status,
                latency_ms=int((time.perf_counter() - start) * 1000),
            )
            return ChatResult.failure(err)
        except asyncio.CancelledError:
            normalized_log_event(
                _logger,
                "chat.cancelled",
                ctx,
                phase="cancelled",
                latency_ms=int((time.perf_counter() - start) * 1000),
            )
            raise
        normalized_log_event(
            _logger,
            "chat.end",
            ctx,
            phase="finalize",
            latency_ms=int((time.perf_counter() - start) * 1000),
            response_chars=len(content),
        )
        return ChatResult.success(content)

    async def _dispatch(self, request: ChatRequest, ctx: LogContext) -> str:
        adapter = self.adapter_for(request.provider)
        provider = adapter.provider_name
        credential = self._credentials.resolve(provider)
        if not credential or not credential.strip():
            raise GatewayError(
                kind=ErrorKind.NOT_CONFIGURED,
                message=NOT_CONFIGURED_MESSAGE.format(label=PROVIDER_LABELS.get(provider, provider)),
                provider=provider,
            )
        credential = credential.strip()
        wire = adapter.encode(request, credential)

        async def attempt() -> str:
            response = await self._send(provider, wire)
            try:
                return adapter.decode(response)
            except GatewayError as err:
                err.message = _redact(err.message, credential)
                raise

        retry_cfg = self._retry
        if retry_cfg.max_attempts > 1 and retry_cfg.attempt_logger is None:
            retry_cfg = dataclasses.replace(retry_cfg, attempt_logger=self._attempt_logger(ctx))

        call = retry_async(attempt, retry_cfg)
        overall = self._timeouts.overall_timeout_seconds
        if overall is None:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=overall)
        except asyncio.TimeoutError as exc:
            raise error_from_exception(exc, provider=provider, message=_transport_message(provider, exc)) from exc

    async def _send(self, provider: str, wire: WireRequest) -> WireResponse:
        semaphore = self._semaphore(provider)
        try:
            if semaphore is None:
                response = await self._request(wire)
            else:
                async with semaphore:
                    response = await self._request(wire)
        except httpx.HTTPError as exc:
            raise error_from_exception(exc, provider=provider, message=_transport_message(provider, exc)) from exc
        return WireResponse.from_httpx(response)

    async def _request(self, wire: WireRequest) -> httpx.Response:
        return await self._client.request(
            wire.method,
            wire.url,
            json=wire.json,
            headers=wire.headers,
            params=wire.params or None,
        )

    def _semaphore(self, provider: str) -> Optional[asyncio.Semaphore]:
        if self._max_concurrency is None:
            return None
        sem = self._semaphores.get(provider)
        if sem is None:
            sem = asyncio.Semaphore(self._max_concurrency)
            self._semaphores[provider] = sem
        return sem

    @staticmethod
    def _attempt_logger(ctx: LogContext):
        def _log(*, attempt: int, max_attempts: int, delay: float | None, error: GatewayError | None) -> None:
            normalized_log_event(
                _logger,
                "retry.attempt",
                ctx,
                phase="retry",
                attempt=attempt + 1,
                error_kind=error.kind.value if error else None,
                max_attempts=max_attempts,
                delay_s=delay,
                upstream_status=error.upstream_status if error else None,
            )

        return _log


__all__ = ["Dispatcher"]

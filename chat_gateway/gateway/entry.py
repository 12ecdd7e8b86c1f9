"""Gateway entry point: ``chat(raw_request) -> ChatResult``.

Composes the validator and the dispatcher. Validation failures short-circuit
with ``INVALID_REQUEST`` before any credential lookup; every other error kind
comes back from the dispatcher unchanged.
"""
from __future__ import annotations

import uuid
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from ..base.constants import SUPPORTED_PROVIDERS
from ..base.errors import GatewayError
from ..base.http import build_async_client
from ..base.interfaces import CredentialResolver, ProviderAdapter
from ..base.models import ChatRequest, ChatResult
from ..base.resilience import RetryConfig
from ..base.timeouts import TimeoutConfig
from ..base.validation import validate_request
from .dispatcher import Dispatcher


class Gateway:
    """Provider-agnostic chat facade.

    Parameters:
        credentials: Injected resolver; the gateway never reads env itself.
        client: Shared ``httpx.AsyncClient``. When omitted one is built from
            ``timeout_config`` and owned (closed by :meth:`aclose`).
        timeout_config: HTTP and overall deadlines.
        retry_config: Dispatcher retry policy (single attempt by default).
        max_concurrency: Optional per-provider in-flight cap.
        adapters: Adapter overrides keyed by provider.

    Usage::

        async with Gateway(EnvCredentialResolver()) as gw:
            result = await gw.chat({"provider": "openai", "messages": [...]})
    """

    def __init__(
        self,
        credentials: CredentialResolver,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout_config: Optional[TimeoutConfig] = None,
        retry_config: Optional[RetryConfig] = None,
        max_concurrency: Optional[int] = None,
        adapters: Optional[Mapping[str, ProviderAdapter]] = None,
    ) -> None:
        self._credentials = credentials
        self._owns_client = client is None
        self._client = client if client is not None else build_async_client(timeout_config)
        self._dispatcher = Dispatcher(
            credentials,
            self._client,
            timeout_config=timeout_config,
            retry_config=retry_config,
            max_concurrency=max_concurrency,
            adapters=adapters,
        )

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    async def chat(
        self,
        raw_request: Union[Mapping[str, Any], ChatRequest],
        *,
        request_id: Optional[str] = None,
    ) -> ChatResult:
        """Validate ``raw_request`` and dispatch it.

        Returns a :class:`ChatResult`; only cancellation escapes as an
        exception.
        """
        try:
            request = validate_request(raw_request)
        except GatewayError as err:
            return ChatResult.failure(err)
        return await self._dispatcher.dispatch(request, request_id=request_id or uuid.uuid4().hex)

    def health(self) -> Dict[str, bool]:
        """Return ``{provider: configured}``; never exposes key values."""
        out: Dict[str, bool] = {}
        for provider in SUPPORTED_PROVIDERS:
            key = self._credentials.resolve(provider)
            out[provider] = bool(key and key.strip())
        return out

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Gateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


__all__ = ["Gateway"]

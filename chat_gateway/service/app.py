from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from chat_gateway.base.http import build_async_client
from chat_gateway.base.interfaces import CredentialResolver
from chat_gateway.base.logging import get_logger, log_event
from chat_gateway.config.credentials import EnvCredentialResolver
from chat_gateway.config.defaults import GATEWAY_CORS_DEFAULT_ORIGINS
from chat_gateway.gateway import Gateway

from .app_parts.app_core import (
    _build_health_response,
    _handle_chat,
    get_gateway,
)

_logger = get_logger("service")


def _cors_origins() -> list[str]:
    cors_origins_env = os.getenv("GATEWAY_CORS_ORIGINS", GATEWAY_CORS_DEFAULT_ORIGINS)
    return [o.strip() for o in cors_origins_env.split(",") if o.strip()]


def create_app(
    gateway: Optional[Gateway] = None,
    *,
    credentials: Optional[CredentialResolver] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the gateway FastAPI application.

    Parameters:
        gateway: Pre-built gateway to serve. When omitted, the lifespan builds
            one from ``credentials`` (default: :class:`EnvCredentialResolver`)
            and a shared ``httpx.AsyncClient`` that is closed on shutdown.
        credentials: Resolver used when ``gateway`` is omitted.
        transport: Optional httpx transport for the shared client (tests).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if gateway is not None:
            app.state.gateway = gateway
            yield
            return
        client = build_async_client(transport=transport)
        app.state.gateway = Gateway(credentials or EnvCredentialResolver(), client=client)
        log_event(_logger, "service.startup", providers=app.state.gateway.health())
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(title="LLM Chat Gateway", version="0.1.0", lifespan=lifespan)

    # -----------------------------------------------------------------------
    # CORS configuration
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    def health(gw: Gateway = Depends(get_gateway)) -> Dict[str, Any]:
        """Report liveness and which providers have a credential (booleans only)."""
        return _build_health_response(gw)

    @app.post("/api/llm")
    async def post_llm(request: Request, gw: Gateway = Depends(get_gateway)) -> Response:
        """Unified chat endpoint; the provider comes from the JSON body."""
        return await _handle_chat(request, gw)

    @app.post("/api/{provider}")
    async def post_provider(provider: str, request: Request, gw: Gateway = Depends(get_gateway)) -> Response:
        """Per-provider alias of ``/api/llm`` (``/api/openai``, ``/api/claude``, ...)."""
        return await _handle_chat(request, gw, provider=provider)

    return app


app = create_app()


def get_app() -> FastAPI:
    """Return the module-level FastAPI application instance."""
    return app


__all__ = ["app", "create_app", "get_app"]

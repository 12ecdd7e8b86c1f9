from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from chat_gateway.base.errors import ErrorKind, GatewayError, http_status_for
from chat_gateway.base.logging import get_logger, log_event
from chat_gateway.base.models import ChatResult
from chat_gateway.gateway import Gateway

# Status used when the caller hung up before the upstream answered.
CLIENT_CLOSED_REQUEST = 499

DISCONNECT_POLL_SECONDS = 0.25

_logger = get_logger("service")


def get_gateway(request: Request) -> Gateway:
    """FastAPI dependency returning the gateway built in the app lifespan."""
    return request.app.state.gateway


def _error_response(error: GatewayError) -> JSONResponse:
    """Render a failure as ``{"error": message}`` with the mapped status."""
    return JSONResponse(status_code=http_status_for(error), content={"error": error.message})


def _result_response(result: ChatResult) -> JSONResponse:
    if result.ok:
        return JSONResponse(status_code=200, content={"content": result.content})
    return _error_response(result.error)


async def _read_payload(request: Request) -> Any:
    """Return the decoded JSON body or raise ``INVALID_REQUEST``."""
    raw = await request.body()
    try:
        return json.loads(raw) if raw else None
    except ValueError as exc:
        raise GatewayError(
            kind=ErrorKind.INVALID_REQUEST,
            message="Invalid request: body must be valid JSON",
        ) from exc


async def _run_until_disconnect(
    request: Request,
    call: Awaitable[ChatResult],
    poll_interval: float = DISCONNECT_POLL_SECONDS,
) -> Optional[ChatResult]:
    """Await ``call`` and cancel it if the client disconnects first.

    Returns ``None`` when the call was cancelled because of a disconnect.
    """
    task = asyncio.ensure_future(call)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                task.cancel()
                await asyncio.wait({task})
                return None
    except asyncio.CancelledError:
        task.cancel()
        raise


async def _handle_chat(
    request: Request,
    gateway: Gateway,
    provider: Optional[str] = None,
) -> Response:
    """Run one chat call for an HTTP request.

    ``provider`` comes from the per-provider alias routes and replaces any
    provider field in the body.
    """
    try:
        payload = await _read_payload(request)
    except GatewayError as err:
        return _error_response(err)
    if provider is not None and isinstance(payload, dict):
        payload = {**payload, "provider": provider}
    result = await _run_until_disconnect(request, gateway.chat(payload))
    if result is None:
        log_event(_logger, "http.client_disconnected", path=request.url.path)
        return Response(status_code=CLIENT_CLOSED_REQUEST)
    return _result_response(result)


def _build_health_response(gateway: Gateway) -> Dict[str, Any]:
    return {"status": "ok", "providers": gateway.health()}


__all__ = [
    "CLIENT_CLOSED_REQUEST",
    "get_gateway",
    "_error_response",
    "_result_response",
    "_run_until_disconnect",
    "_handle_chat",
    "_build_health_response",
]

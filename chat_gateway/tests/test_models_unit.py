from __future__ import annotations

import httpx
import pytest

from chat_gateway.base.errors import ErrorKind, GatewayError
from chat_gateway.base.models import ChatMessage, ChatRequest, ChatResult, WireResponse


def test_first_system_and_without_system():
    req = ChatRequest(
        provider="anthropic",
        messages=(ChatMessage("user", "u"), ChatMessage("system", "a"), ChatMessage("system", "b")),
    )
    assert req.first_system() == "a"  # nosec B101
    assert req.without_system() == (ChatMessage("user", "u"),)  # nosec B101
    assert ChatRequest(provider="openai", messages=(ChatMessage("user", "u"),)).first_system() is None  # nosec B101


def test_chat_request_is_immutable():
    req = ChatRequest(provider="openai", messages=(ChatMessage("user", "u"),))
    with pytest.raises(AttributeError):
        req.provider = "gemini"  # type: ignore[misc]


def test_chat_result_shapes():
    ok = ChatResult.success("")
    assert ok.ok and ok.to_dict() == {"content": ""}  # nosec B101
    fail = ChatResult.failure(GatewayError(kind=ErrorKind.TRANSPORT_ERROR, message="boom"))
    assert not fail.ok  # nosec B101
    assert fail.error_kind is ErrorKind.TRANSPORT_ERROR  # nosec B101
    assert fail.to_dict() == {"errorKind": "transport_error", "message": "boom"}  # nosec B101


def test_wire_response_from_httpx():
    resp = WireResponse.from_httpx(httpx.Response(200, json={"a": 1}))
    assert resp.is_success and resp.body == {"a": 1}  # nosec B101
    resp = WireResponse.from_httpx(httpx.Response(502, text="Bad Gateway"))
    assert not resp.is_success and resp.body is None and resp.text == "Bad Gateway"  # nosec B101
    assert WireResponse.from_httpx(httpx.Response(204)).body is None  # nosec B101

"""End-to-end tests for Gateway.chat against stub upstreams."""
from __future__ import annotations

import asyncio
from typing import List, Optional

import httpx
import pytest

from chat_gateway import ErrorKind, Gateway, StaticCredentialResolver
from chat_gateway.tests.utils import StubUpstream, anthropic_body, gemini_body, msgs, openai_body


class _RecordingResolver(StaticCredentialResolver):
    def __init__(self, keys=None) -> None:
        super().__init__(keys)
        self.lookups: List[str] = []

    def resolve(self, provider: str) -> Optional[str]:
        self.lookups.append(provider)
        return super().resolve(provider)


def _chat(stub, raw, keys=None, resolver=None):
    async def _run():
        async with httpx.AsyncClient(transport=stub.transport()) as client:
            gw = Gateway(resolver or StaticCredentialResolver(keys or {}), client=client)
            return await gw.chat(raw)

    return asyncio.run(_run())


def test_openai_end_to_end_returns_content_unsanitized():
    fenced = '```json\n{"a":1}\n```'
    stub = StubUpstream(body=openai_body(fenced))
    result = _chat(stub, {"provider": "openai", "messages": msgs(("user", "hi"))}, {"openai": "sk-1"})
    assert result.ok  # nosec B101
    assert result.to_dict() == {"content": fenced}  # nosec B101
    sent = stub.last_json()
    assert sent["messages"] == [{"role": "user", "content": "hi"}]  # nosec B101
    assert stub.requests[0].headers["authorization"] == "Bearer sk-1"  # nosec B101


def test_anthropic_end_to_end_sanitizes():
    stub = StubUpstream(body=anthropic_body('```json\n{"a":1}\n```'))
    result = _chat(
        stub,
        {"provider": "claude", "messages": msgs(("system", "S"), ("user", "U")), "jsonMode": True},
        {"anthropic": "ak"},
    )
    assert result.content == '{"a":1}'  # nosec B101
    assert stub.last_json()["system"].startswith("S\n\nIMPORTANT")  # nosec B101


def test_unknown_provider_fails_before_credential_lookup():
    stub = StubUpstream(body=openai_body("x"))
    resolver = _RecordingResolver({"openai": "k"})
    result = _chat(stub, {"provider": "unknown", "messages": msgs(("user", "x"))}, resolver=resolver)
    assert result.error_kind is ErrorKind.INVALID_REQUEST  # nosec B101
    assert resolver.lookups == []  # nosec B101
    assert stub.calls == 0  # nosec B101


def test_gemini_model_with_url_delimiters_is_rejected_before_any_call():
    stub = StubUpstream(body=gemini_body("g"))
    resolver = _RecordingResolver({"gemini": "k"})
    raw = {"provider": "gemini", "model": "../../../evil/path?x=1#", "messages": msgs(("user", "x"))}
    result = _chat(stub, raw, resolver=resolver)
    assert result.error_kind is ErrorKind.INVALID_REQUEST  # nosec B101
    assert resolver.lookups == []  # nosec B101
    assert stub.calls == 0  # nosec B101


def test_not_configured_propagates_unchanged():
    stub = StubUpstream(body=openai_body("x"))
    result = _chat(stub, {"provider": "gemini", "messages": msgs(("user", "x"))}, {})
    assert result.to_dict() == {  # nosec B101
        "errorKind": "not_configured",
        "message": "Gemini API key not configured",
        "provider": "gemini",
    }
    assert stub.calls == 0  # nosec B101


def test_upstream_error_to_dict_carries_status():
    stub = StubUpstream(status_code=404, body={"error": {"message": "model not found"}})
    result = _chat(stub, {"provider": "openai", "messages": msgs(("user", "x"))}, {"openai": "k"})
    assert result.to_dict() == {  # nosec B101
        "errorKind": "upstream_error",
        "message": "model not found",
        "provider": "openai",
        "upstreamStatus": 404,
    }


def test_health_reports_booleans_only():
    gw = Gateway(StaticCredentialResolver({"openai": "sk-secret", "gemini": " "}))
    health = gw.health()
    assert health == {"openai": True, "anthropic": False, "gemini": False}  # nosec B101
    assert "sk-secret" not in repr(health)  # nosec B101
    asyncio.run(gw.aclose())


def test_gateway_owns_client_when_not_injected():
    async def _run():
        async with Gateway(StaticCredentialResolver({})) as gw:
            client = gw.dispatcher._client
            result = await gw.chat({"provider": "openai", "messages": msgs(("user", "x"))})
        return client, result

    client, result = asyncio.run(_run())
    assert result.error_kind is ErrorKind.NOT_CONFIGURED  # nosec B101
    assert client.is_closed  # nosec B101


@pytest.mark.parametrize("raw", [None, {"provider": "openai"}, {"provider": "openai", "messages": []}])
def test_invalid_inputs_never_raise(raw):
    result = _chat(StubUpstream(), raw, {"openai": "k"})
    assert result.error_kind is ErrorKind.INVALID_REQUEST  # nosec B101


def test_concurrent_calls_are_independent():
    def handler(request: httpx.Request) -> httpx.Response:
        body = request.read().decode()
        text = "first" if "one" in body else "second"
        return httpx.Response(200, json=openai_body(text))

    async def _run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            gw = Gateway(StaticCredentialResolver({"openai": "k"}), client=client)
            return await asyncio.gather(
                gw.chat({"provider": "openai", "messages": msgs(("user", "one"))}),
                gw.chat({"provider": "openai", "messages": msgs(("user", "two"))}),
            )

    a, b = asyncio.run(_run())
    assert (a.content, b.content) == ("first", "second")  # nosec B101

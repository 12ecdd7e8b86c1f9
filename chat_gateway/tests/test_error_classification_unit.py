from __future__ import annotations

import asyncio
import types

import httpx
import pytest

from chat_gateway.base.errors import (
    ErrorKind,
    GatewayError,
    classify_exception,
    error_from_exception,
    http_status_for,
    is_retryable,
)


def test_classify_gateway_error_passthrough():
    e = GatewayError(kind=ErrorKind.MALFORMED_RESPONSE, message="bad shape", provider="x")
    assert classify_exception(e) is ErrorKind.MALFORMED_RESPONSE  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.parametrize(
    "exc",
    [
        TimeoutError(),
        asyncio.TimeoutError(),
        httpx.ReadTimeout("t"),
        httpx.ConnectError("c"),
        RuntimeError("anything else"),
    ],
)
def test_classify_transport_family(exc):
    assert classify_exception(exc) is ErrorKind.TRANSPORT_ERROR  # nosec B101 - assert is appropriate in unit tests


def test_classify_http_status_shapes():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorKind.UPSTREAM_ERROR  # nosec B101 - assert is appropriate in unit tests
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorKind.UPSTREAM_ERROR  # nosec B101 - assert is appropriate in unit tests


def test_is_retryable_matrix():
    assert is_retryable(ErrorKind.TRANSPORT_ERROR)  # nosec B101
    assert is_retryable(ErrorKind.UPSTREAM_ERROR, 429)  # nosec B101
    assert is_retryable(ErrorKind.UPSTREAM_ERROR, 503)  # nosec B101
    assert is_retryable(ErrorKind.UPSTREAM_ERROR, 408)  # nosec B101
    assert not is_retryable(ErrorKind.UPSTREAM_ERROR, 404)  # nosec B101
    assert not is_retryable(ErrorKind.UPSTREAM_ERROR, 400)  # nosec B101
    assert not is_retryable(ErrorKind.UPSTREAM_ERROR, None)  # nosec B101
    for kind in (ErrorKind.INVALID_REQUEST, ErrorKind.NOT_CONFIGURED, ErrorKind.MALFORMED_RESPONSE):
        assert not is_retryable(kind, 503)  # nosec B101


@pytest.mark.parametrize(
    "kind, status, expected",
    [
        (ErrorKind.INVALID_REQUEST, None, 400),
        (ErrorKind.NOT_CONFIGURED, None, 400),
        (ErrorKind.UPSTREAM_ERROR, 418, 418),
        (ErrorKind.UPSTREAM_ERROR, None, 502),
        (ErrorKind.UPSTREAM_ERROR, 503, 503),
        (ErrorKind.UPSTREAM_ERROR, 302, 502),
        (ErrorKind.UPSTREAM_ERROR, 101, 502),
        (ErrorKind.UPSTREAM_ERROR, 200, 502),
        (ErrorKind.MALFORMED_RESPONSE, None, 500),
        (ErrorKind.TRANSPORT_ERROR, None, 500),
    ],
)
def test_http_status_for(kind, status, expected):
    assert http_status_for(GatewayError(kind=kind, message="m", upstream_status=status)) == expected  # nosec B101


def test_error_kind_values_are_stable_strings():
    assert [k.value for k in ErrorKind] == [  # nosec B101
        "invalid_request",
        "not_configured",
        "upstream_error",
        "malformed_response",
        "transport_error",
    ]


def test_with_provider_keeps_existing():
    err = GatewayError(kind=ErrorKind.UPSTREAM_ERROR, message="m", provider="openai")
    assert err.with_provider("gemini").provider == "openai"  # nosec B101
    err = GatewayError(kind=ErrorKind.UPSTREAM_ERROR, message="m")
    assert err.with_provider("gemini").provider == "gemini"  # nosec B101


def test_error_from_exception_transport():
    exc = httpx.ConnectError("https://host/path?key=secret")
    err = error_from_exception(exc, provider="gemini", message="Gemini request failed (ConnectError)")
    assert err.kind is ErrorKind.TRANSPORT_ERROR  # nosec B101
    assert err.retryable is True  # nosec B101
    assert err.upstream_status is None  # nosec B101
    assert err.raw is exc  # nosec B101
    assert "secret" not in err.message  # nosec B101


def test_error_from_exception_carries_status():
    request = httpx.Request("POST", "https://api.example/v1")
    exc = httpx.HTTPStatusError("nope", request=request, response=httpx.Response(404, request=request))
    err = error_from_exception(exc, provider="openai", message="m")
    assert (err.kind, err.upstream_status, err.retryable) == (ErrorKind.UPSTREAM_ERROR, 404, False)  # nosec B101


def test_error_from_exception_passes_gateway_errors_through():
    original = GatewayError(kind=ErrorKind.MALFORMED_RESPONSE, message="bad")
    err = error_from_exception(original, provider="anthropic", message="ignored")
    assert err is original  # nosec B101
    assert err.provider == "anthropic"  # nosec B101
    assert err.message == "bad"  # nosec B101

"""ChatRequest validator.

``validate_request`` is the first stage of every gateway call. It turns a raw
inbound payload into a well-typed :class:`ChatRequest` or raises
:class:`GatewayError` with ``ErrorKind.INVALID_REQUEST``. It has no side
effects and never looks at credentials, so an unknown provider is rejected
before any credential lookup.
"""
from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import ValidationError

from .dto import ChatRequestDTO
from .errors import ErrorKind, GatewayError
from .models import ChatMessage, ChatRequest


def _describe(exc: ValidationError) -> str:
    """Flatten pydantic errors into one caller-facing message."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "body"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "Invalid request: " + "; ".join(parts)


def validate_request(raw: Union[Mapping[str, Any], ChatRequest]) -> ChatRequest:
    """Validate ``raw`` and return a normalized :class:`ChatRequest`.

    Parameters:
        raw: Decoded JSON body (mapping). An already-built ``ChatRequest`` is
            re-validated through the same rules.

    Returns:
        ChatRequest with messages as an ordered tuple.

    Raises:
        GatewayError: ``INVALID_REQUEST`` when the payload is not an object,
            the provider is unknown, messages are missing/empty, a message has
            an unknown role or non-string content, or a parameter is out of
            range.
    """
    if isinstance(raw, ChatRequest):
        raw = raw.to_dict()
    if not isinstance(raw, Mapping):
        raise GatewayError(
            kind=ErrorKind.INVALID_REQUEST,
            message="Invalid request: body must be a JSON object",
        )
    if not raw.get("provider") or raw.get("messages") is None:
        raise GatewayError(
            kind=ErrorKind.INVALID_REQUEST,
            message="Missing required fields: provider and messages",
        )
    try:
        dto = ChatRequestDTO.model_validate(dict(raw))
    except ValidationError as exc:
        raise GatewayError(
            kind=ErrorKind.INVALID_REQUEST,
            message=_describe(exc),
        ) from exc

    return ChatRequest(
        provider=dto.provider,
        messages=tuple(ChatMessage(role=m.role, content=m.content) for m in dto.messages),
        json_mode=dto.json_mode,
        temperature=dto.temperature,
        max_tokens=dto.max_tokens,
        model=dto.model,
    )


__all__ = ["validate_request"]

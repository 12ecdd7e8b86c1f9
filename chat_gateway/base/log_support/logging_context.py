"""Per-request logging context.

A :class:`LogContext` is built once per dispatched chat request and passed
to every log call for that request, so ``chat.start``, ``retry.attempt``
and ``chat.end`` lines share the same correlation fields. It carries only
request shape (provider, model, message count, json mode); message text
and credentials never enter it.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:  # pragma: no cover
    from ..models_parts.chat_request import ChatRequest


@dataclass
class LogContext:
    provider: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    message_count: Optional[int] = None
    json_mode: Optional[bool] = None

    @classmethod
    def for_request(cls, request: "ChatRequest", request_id: Optional[str] = None) -> "LogContext":
        """Build the context for one chat request."""
        return cls(
            provider=request.provider,
            model=request.model,
            request_id=request_id,
            message_count=len(request.messages),
            json_mode=request.json_mode,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                out[f.name] = value
        return out


__all__ = ["LogContext"]

"""
ChatResult DTO representing the normalized outcome of one gateway call.

Exactly one of ``content`` or ``error`` is set. Failures keep the original
:class:`GatewayError` so the kind, provider and upstream status survive every
layer untouched.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import ErrorKind, GatewayError


@dataclass(frozen=True)
class ChatResult:
    """Provider-agnostic result of a chat call.

    Use :meth:`success` and :meth:`failure` to build instances.
    """

    content: Optional[str] = None
    error: Optional[GatewayError] = None

    @classmethod
    def success(cls, content: str) -> "ChatResult":
        return cls(content=content)

    @classmethod
    def failure(cls, error: GatewayError) -> "ChatResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    def to_dict(self) -> Dict[str, Any]:
        """Return the caller-facing payload.

        Success is ``{"content": ...}``; failure carries kind, message and,
        when known, provider and upstream status. Raw exceptions are never
        included.
        """
        if self.error is None:
            return {"content": self.content}
        out: Dict[str, Any] = {
            "errorKind": self.error.kind.value,
            "message": self.error.message,
        }
        if self.error.provider:
            out["provider"] = self.error.provider
        if self.error.upstream_status is not None:
            out["upstreamStatus"] = self.error.upstream_status
        return out


__all__ = ["ChatResult"]

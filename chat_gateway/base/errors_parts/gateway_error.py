"""
Structured gateway error exception type.

Carries a normalized `ErrorKind` plus optional provider and upstream status
context so every layer can add detail without losing the original kind.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_kind import ErrorKind


@dataclass(eq=False)
class GatewayError(Exception):
    """Represents a structured gateway failure with a normalized kind.

    Attributes:
        kind: Normalized :class:`ErrorKind` classification for the failure.
        message: Human-readable message safe to show to the caller. Must never
            contain credential material.
        provider: Provider key where the error originated (e.g. ``"openai"``),
            ``None`` when the failure happened before provider selection.
        upstream_status: HTTP status returned by the provider, when known.
        retryable: Hint for dispatcher-level retry policy (not authoritative).
        raw: Optional original exception for diagnostics; never serialized.
    """

    kind: ErrorKind
    message: str
    provider: Optional[str] = None
    upstream_status: Optional[int] = None
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        status = f" [{self.upstream_status}]" if self.upstream_status is not None else ""
        return f"{self.provider or '-'} {self.kind.value}{status}: {self.message}"

    def with_provider(self, provider: str) -> "GatewayError":
        """Return this error with ``provider`` filled in when it was unset."""
        if self.provider is None:
            self.provider = provider
        return self


__all__ = ["GatewayError"]

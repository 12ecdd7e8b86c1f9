"""ProviderAdapter Protocol (single-class module).

Defines the pure encode/decode contract every provider adapter implements.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import ChatRequest, WireRequest, WireResponse


@runtime_checkable
class ProviderAdapter(Protocol):
    """Translate between the normalized chat shape and one provider's wire format.

    Implementations are pure: no I/O, no retries, no shared mutable state.
    The dispatcher owns the HTTP call.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g., ``"openai"`` or ``"gemini"``."""
        ...

    def encode(self, request: ChatRequest, credential: str) -> WireRequest:
        """Build the upstream HTTP request for ``request``."""
        ...

    def decode(self, response: WireResponse) -> str:
        """Extract the model text from ``response``.

        Raises ``GatewayError`` with ``UPSTREAM_ERROR`` for non-2xx statuses
        and ``MALFORMED_RESPONSE`` when a 2xx body lacks the expected text.
        """
        ...

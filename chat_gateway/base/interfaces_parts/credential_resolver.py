"""CredentialResolver Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CredentialResolver(Protocol):
    """Look up the API key for a provider.

    Returns ``None`` (or an empty string) when the provider is not configured.
    Implementations must never log or persist the returned value.
    """

    def resolve(self, provider: str) -> Optional[str]:
        ...

"""
Provider-agnostic interfaces (Protocols) for the gateway.

Re-exports the single-class modules under
``chat_gateway.base.interfaces_parts`` so upstream imports stay stable.
"""

from __future__ import annotations

from .interfaces_parts import CredentialResolver, ProviderAdapter

__all__ = [
    "ProviderAdapter",
    "CredentialResolver",
]

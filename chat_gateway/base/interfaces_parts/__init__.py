"""Interfaces (Protocols) split into single-class modules.

``chat_gateway.base.interfaces`` re-exports them as a stable API.
"""

from .credential_resolver import CredentialResolver
from .provider_adapter import ProviderAdapter

__all__ = ["ProviderAdapter", "CredentialResolver"]

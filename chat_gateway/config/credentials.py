"""Credential resolvers injected into the gateway.

A resolver answers one question: "what is the API key for provider X?". The
gateway never reads process environment itself and never stores credentials
anywhere but the resolver it was constructed with.

- :class:`EnvCredentialResolver` loads ``.env`` (once per process) and then
  snapshots the environment at construction (read-only afterwards).
- :class:`StaticCredentialResolver` wraps an explicit mapping, for tests and
  embedding.
"""
from __future__ import annotations

import os
from typing import Dict, Iterable, Mapping, Optional

from ..base.constants import SUPPORTED_PROVIDERS
from . import load_dotenv_once
from .env import resolve_provider_key


class StaticCredentialResolver:
    """Resolve credentials from a fixed provider -> key mapping.

    Blank values are treated as absent.
    """

    def __init__(self, keys: Optional[Mapping[str, Optional[str]]] = None) -> None:
        self._keys: Dict[str, str] = {
            name.lower(): value.strip()
            for name, value in (keys or {}).items()
            if value and value.strip()
        }

    def resolve(self, provider: str) -> Optional[str]:
        return self._keys.get((provider or "").lower())

    def configured(self, providers: Iterable[str] = SUPPORTED_PROVIDERS) -> Dict[str, bool]:
        """Return ``{provider: bool}`` without exposing any key value."""
        return {p: self.resolve(p) is not None for p in providers}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(providers={sorted(self._keys)!r})"


class EnvCredentialResolver(StaticCredentialResolver):
    """Resolve credentials from environment variables (canonical + aliases).

    Parameters:
        environ: Mapping to read; defaults to ``os.environ`` after the
            ``.env`` file has been merged into it. The values are copied at
            construction, later environment changes are not seen.
        providers: Providers to resolve.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        providers: Iterable[str] = SUPPORTED_PROVIDERS,
    ) -> None:
        if environ is None:
            load_dotenv_once()
            env: Mapping[str, str] = os.environ
        else:
            env = environ
        super().__init__({p: resolve_provider_key(p, env)[0] for p in providers})


__all__ = ["StaticCredentialResolver", "EnvCredentialResolver"]

"""chat_gateway.config.env
=======================

Centralized environment variable mapping for provider credentials.

Purpose
-------
- Single source of truth mapping provider identifiers to the environment
  variable names that may hold their API key (canonical first, then aliases).
- Small lookup helpers used by :class:`EnvCredentialResolver`.

Design Notes
------------
The browser application historically exposed keys under ``VITE_*`` names and
Gemini keys under both ``GEMINI_API_KEY`` and ``GOOGLE_API_KEY``. All of
those are accepted; the canonical name wins when several are set.

Failure Modes
-------------
Helpers never raise on unknown providers or unset variables; they return
``None`` and let callers decide (the dispatcher turns that into
``NOT_CONFIGURED``).
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Mapping, Optional, Tuple

# Canonical provider -> env var mapping
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "gemini": "GEMINI_API_KEY",
}


# Provider -> ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "openai": ("OPENAI_API_KEY", "VITE_OPENAI_API_KEY"),
    "anthropic": ("ANTHROPIC_API_KEY", "VITE_ANTHROPIC_API_KEY"),
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY", "VITE_GOOGLE_API_KEY", "VITE_GEMINI_API_KEY"),
}


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a provider.

    The canonical name is yielded first, followed by any aliases.
    """
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(
    provider: str, environ: Optional[Mapping[str, str]] = None
) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for a provider from an environment mapping.

    Parameters
    ----------
    provider: str
        Provider identifier (case-insensitive).
    environ: Mapping[str, str] | None
        Mapping to read from; defaults to ``os.environ``.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-blank candidate, or
        ``(None, None)`` when nothing is set.
    """
    env = os.environ if environ is None else environ
    for name in get_env_var_candidates(provider):
        val = env.get(name)
        if val and val.strip():
            return val.strip(), name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "get_env_var_candidates",
    "resolve_provider_key",
]

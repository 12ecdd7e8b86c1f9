"""Adapter Factory utilities.

Purpose
-------
Centralize creation of adapter instances implementing the ``ProviderAdapter``
protocol. Adapters are imported lazily using ``importlib`` so the registry
itself has no import-time side effects.

Scope
-----
Supported providers: ``openai``, ``anthropic``, ``gemini``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple, Type

from .constants import PROVIDER_ALIASES


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or its adapter initialized."""


class AdapterFactory:
    """Create provider adapters based on a canonical name (e.g., ``"openai"``).

    Aliases from ``PROVIDER_ALIASES`` (``claude``) resolve to their canonical
    provider.
    """

    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "chat_gateway.openai.adapter", "class": "OpenAIAdapter"},
        "anthropic": {"module": "chat_gateway.anthropic.adapter", "class": "AnthropicAdapter"},
        "gemini": {"module": "chat_gateway.gemini.adapter", "class": "GeminiAdapter"},
    }

    @classmethod
    def canonical(cls, provider: str) -> str:
        name = (provider or "").lower().strip()
        return PROVIDER_ALIASES.get(name, name)

    @classmethod
    def create(cls, provider: str, **kwargs: Any) -> Any:
        """Create an adapter instance.

        Parameters
        ----------
        provider:
            Provider name or alias (case-insensitive).
        **kwargs:
            Adapter constructor kwargs (``model``, ``base_url``,
            ``config_overrides``).

        Raises
        ------
        UnknownProviderError
            If the provider is unknown, its module fails to import, the class
            is missing, or the constructor rejects the arguments.
        """
        name = cls.canonical(provider)
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(**kwargs)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter constructor: {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the canonical provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())


__all__ = ["AdapterFactory", "UnknownProviderError"]

"""Unified configuration layer for the gateway.

Goals
-----
* Centralize defaults (models, base URLs, Anthropic API version).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by GATEWAY_CONFIG_FILE
    3. Environment variables (e.g. OPENAI_MODEL, GEMINI_BASE_URL, ANTHROPIC_VERSION)
    4. In-code overrides passed to helper
* Provide a single call site: ``get_provider_config(provider: str)``.

Credentials are NOT part of this layer; they come from a resolver
(:mod:`chat_gateway.config.credentials`) injected into the gateway.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_BASE_URL, <PROVIDER>_VERSION
e.g. OPENAI_MODEL, ANTHROPIC_VERSION.

External Config File (Optional)
-------------------------------
If GATEWAY_CONFIG_FILE is set to a path, we attempt to load JSON first and
fall back to YAML. Structure example:

```
openai:
  model: gpt-4o-mini
anthropic:
  model: claude-3-5-haiku-latest
  version: "2023-06-01"
gemini:
  base_url: https://generativelanguage.googleapis.com/v1beta
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* load_dotenv_once() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MODEL,
    ANTHROPIC_DEFAULT_VERSION,
    GEMINI_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_MODEL,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_MODEL,
)

# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL, "base_url": OPENAI_DEFAULT_BASE_URL},
    "anthropic": {
        "model": ANTHROPIC_DEFAULT_MODEL,
        "base_url": ANTHROPIC_DEFAULT_BASE_URL,
        "version": ANTHROPIC_DEFAULT_VERSION,
    },
    "gemini": {"model": GEMINI_DEFAULT_MODEL, "base_url": GEMINI_DEFAULT_BASE_URL},
}


ENV_FIELD_MAP = {
    "model": "MODEL",
    "base_url": "BASE_URL",
    "version": "VERSION",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Never overrides a variable already present in the
    environment.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("export "):
                    line = line[len("export "):]
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and k not in os.environ:
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("GATEWAY_CONFIG_FILE")
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        # YAML is a superset of JSON; anything json rejects gets a second chance.
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None and val.strip():
            out[field] = val.strip()
    return out


def reset_config_cache() -> None:
    """Forget the cached config file and .env state (tests, reloads)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    # 1. Defaults
    cfg |= DEFAULTS.get(name, {})

    # 2. External config file section
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    # 3. Env overrides
    cfg |= _env_overrides(name)

    # 4. Explicit overrides arg
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


__all__ = [
    "get_provider_config",
    "load_dotenv_once",
    "reset_config_cache",
    "DEFAULTS",
]

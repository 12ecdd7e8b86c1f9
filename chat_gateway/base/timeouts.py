"""Unified timeout configuration for the gateway.

The only blocking operation in a gateway call is the single upstream HTTP
request, so this module centralizes the values that bound it.

TimeoutConfig
    Dataclass capturing normalized timeout values (seconds).

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and again only when the relevant variables change. Supported
    environment variables (all optional):
        GATEWAY_HTTP_TIMEOUT_SECONDS
        GATEWAY_CONNECT_TIMEOUT_SECONDS
        GATEWAY_OVERALL_TIMEOUT_SECONDS

Invalid or non-positive values fall back to the defaults.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

_ENV_NAMES = (
    "GATEWAY_HTTP_TIMEOUT_SECONDS",
    "GATEWAY_CONNECT_TIMEOUT_SECONDS",
    "GATEWAY_OVERALL_TIMEOUT_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool timeout of one upstream call.
        connect_timeout_seconds: Time allowed to establish the connection.
        overall_timeout_seconds: Optional absolute cap on one dispatch,
            enforced around the upstream call in addition to the httpx
            timeouts. ``None`` disables the cap.
    """

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: float = 10.0
    overall_timeout_seconds: float | None = None


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float | None) -> float | None:
    """Parse an environment variable as a positive float with a fallback default."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    cur_guard = "/".join(os.getenv(n, "") for n in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    defaults = TimeoutConfig()
    http = _parse_env_float("GATEWAY_HTTP_TIMEOUT_SECONDS", defaults.http_timeout_seconds)
    connect = _parse_env_float("GATEWAY_CONNECT_TIMEOUT_SECONDS", defaults.connect_timeout_seconds)
    overall = _parse_env_float("GATEWAY_OVERALL_TIMEOUT_SECONDS", None)

    _CACHED = TimeoutConfig(
        http_timeout_seconds=float(http),
        connect_timeout_seconds=float(connect),
        overall_timeout_seconds=overall,
    )
    _ENV_GUARD = cur_guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]

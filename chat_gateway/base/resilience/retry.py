from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Optional, Protocol, TypeVar

from ...config.defaults import GATEWAY_DEFAULT_MAX_ATTEMPTS, GATEWAY_DEFAULT_RETRY_DELAY_BASE
from ..errors import GatewayError

T = TypeVar("T")


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: GatewayError | None,
    ) -> None: ...


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = GATEWAY_DEFAULT_MAX_ATTEMPTS
    delay_base: float = GATEWAY_DEFAULT_RETRY_DELAY_BASE  # exponential base (base**attempt)
    attempt_logger: AttemptLogger | None = None

    def delays(self) -> Iterable[float]:
        for attempt in range(max(self.max_attempts, 1) - 1):
            yield self.delay_base**attempt


DEFAULT_RETRY_CONFIG = RetryConfig()


def get_retry_config(attempt_logger: AttemptLogger | None = None) -> RetryConfig:
    """Build a :class:`RetryConfig` from ``GATEWAY_MAX_ATTEMPTS``.

    Invalid or non-positive values fall back to a single attempt.
    """
    raw = os.getenv("GATEWAY_MAX_ATTEMPTS")
    try:
        attempts = int(raw) if raw else GATEWAY_DEFAULT_MAX_ATTEMPTS
    except ValueError:
        attempts = GATEWAY_DEFAULT_MAX_ATTEMPTS
    return RetryConfig(max_attempts=max(attempts, 1), attempt_logger=attempt_logger)


async def retry_async(
    func: Callable[[], Awaitable[T]],
    config: Optional[RetryConfig] = None,
) -> T:
    """Await ``func`` under the retry policy in ``config``.

    - Retries only ``GatewayError`` instances flagged ``retryable``
    - Exponential backoff using ``delay_base ** attempt`` via ``asyncio.sleep``
    - ``asyncio.CancelledError`` and non-gateway exceptions propagate untouched
    """
    cfg = config or DEFAULT_RETRY_CONFIG
    delays: list[float | None] = list(cfg.delays()) + [None]  # final attempt has delay None
    for attempt, delay in enumerate(delays):
        try:
            result = await func()
        except GatewayError as e:
            if cfg.attempt_logger:
                cfg.attempt_logger(
                    attempt=attempt,
                    max_attempts=cfg.max_attempts,
                    delay=delay,
                    error=e,
                )
            if e.retryable and delay is not None:
                await asyncio.sleep(delay)
                continue
            raise
        if cfg.attempt_logger and attempt > 0:
            cfg.attempt_logger(
                attempt=attempt,
                max_attempts=cfg.max_attempts,
                delay=None,
                error=None,
            )
        return result
    raise RuntimeError("retry_async: exhausted attempts without a result")  # pragma: no cover


__all__ = [
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "get_retry_config",
    "retry_async",
]

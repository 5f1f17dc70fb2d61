"""Retry policy for GitHub requests.

Only :class:`NetworkError` instances whose code is in
``RetryConfig.retryable_codes`` are retried. The wait before attempt ``n + 1``
is ``delay_base ** n`` seconds unless the error carries a server-provided
``retry_after`` hint (GitHub's secondary rate limit sends ``Retry-After``),
which takes precedence. Every wait is capped at ``max_delay``.
"""

from __future__ import annotations

import functools
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, TypeVar

from ..errors import RETRYABLE_CODES, ErrorCode, NetworkError

T = TypeVar("T")


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: NetworkError | None,
    ) -> None: ...


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = 3
    delay_base: float = 2.0  # exponential base (base ** attempt)
    max_delay: float = 60.0
    retryable_codes: tuple[ErrorCode, ...] = RETRYABLE_CODES
    attempt_logger: AttemptLogger | None = None

    def delay_for(self, attempt: int, error: NetworkError) -> Optional[float]:
        """Seconds to wait after failed ``attempt``; ``None`` means give up."""
        if error.code not in self.retryable_codes or attempt >= self.max_attempts - 1:
            return None
        if error.retry_after is not None:
            return min(max(error.retry_after, 0.0), self.max_delay)
        return min(self.delay_base**attempt, self.max_delay)


DEFAULT_RETRY_CONFIG = RetryConfig()


def retry(config: RetryConfig = DEFAULT_RETRY_CONFIG):
    """Return a decorator applying ``config`` to the wrapped callable.

    The attempt logger, when set, sees every attempt: failures with the
    chosen delay (``None`` on the final one) and the success with
    ``error=None``. The last error propagates unchanged.
    """

    def notify(attempt: int, delay: Optional[float], error: Optional[NetworkError]) -> None:
        if config.attempt_logger:
            config.attempt_logger(
                attempt=attempt,
                max_attempts=config.max_attempts,
                delay=delay,
                error=error,
            )

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            attempt = 0
            while True:
                try:
                    result = func(*args, **kwargs)
                except NetworkError as e:
                    delay = config.delay_for(attempt, e)
                    notify(attempt, delay, e)
                    if delay is None:
                        raise
                    time.sleep(delay)
                    attempt += 1
                    continue
                notify(attempt, None, None)
                return result

        return wrapper

    return decorator


__all__ = [
    "AttemptLogger",
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "retry",
]

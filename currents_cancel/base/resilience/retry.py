from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterator, Protocol, TypeVar

from ...config.defaults import (
    RETRY_BACKOFF_FACTOR,
    RETRY_MAX_DELAY_SECONDS,
    RETRY_MAX_RETRIES,
    RETRY_MIN_DELAY_SECONDS,
)
from .outcome import AttemptOutcome, OutcomeKind

T = TypeVar("T")


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt_number: int,
        retries_left: int,
        delay: float | None,
        error: Exception,
    ) -> None: ...


@dataclass(frozen=True)
class RetryConfig:
    retries: int = RETRY_MAX_RETRIES
    min_delay: float = RETRY_MIN_DELAY_SECONDS
    max_delay: float = RETRY_MAX_DELAY_SECONDS
    factor: float = RETRY_BACKOFF_FACTOR
    attempt_logger: AttemptLogger | None = None

    @property
    def max_attempts(self) -> int:
        return self.retries + 1

    def delays(self) -> Iterator[float]:
        """Yield the wait before each retry: min_delay * factor**n, capped."""
        for n in range(self.retries):
            yield min(self.min_delay * self.factor**n, self.max_delay)


DEFAULT_RETRY_CONFIG = RetryConfig()


def call_with_retry(fn: Callable[[], AttemptOutcome[T]], config: RetryConfig = DEFAULT_RETRY_CONFIG) -> T:
    """Run ``fn`` until it succeeds, aborts, or the retry budget is spent.

    - ``SUCCESS`` returns the outcome's value.
    - ``FATAL`` raises the outcome's error at once; nothing is logged.
    - ``RETRYABLE`` calls the attempt logger, sleeps, and tries again; after
      the last attempt the error is raised.
    """
    delays = list(config.delays()) + [None]  # final attempt has delay None
    last_error: Exception | None = None
    for index, delay in enumerate(delays):
        outcome = fn()
        if outcome.kind is OutcomeKind.SUCCESS:
            return outcome.value  # type: ignore[return-value]
        error = outcome.error if outcome.error is not None else RuntimeError("attempt failed without an error")
        if outcome.kind is OutcomeKind.FATAL:
            raise error
        last_error = error
        if config.attempt_logger:
            config.attempt_logger(
                attempt_number=index + 1,
                retries_left=len(delays) - index - 1,
                delay=delay,
                error=error,
            )
        if delay is not None:
            time.sleep(delay)
    # Every attempt returned RETRYABLE; the loop always assigns last_error.
    if last_error is None:  # pragma: no cover - retries is never negative
        raise RuntimeError("retry: reached terminal state without captured error")
    raise last_error


__all__ = [
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "call_with_retry",
]

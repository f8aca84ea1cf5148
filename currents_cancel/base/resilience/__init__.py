"""Resilience helpers: tagged attempt outcomes and the bounded retry policy."""

from .outcome import AttemptOutcome, OutcomeKind
from .retry import DEFAULT_RETRY_CONFIG, RetryConfig, call_with_retry

__all__ = [
    "AttemptOutcome",
    "OutcomeKind",
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "call_with_retry",
]

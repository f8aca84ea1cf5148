"""Tagged result of a single attempt.

An attempt reports what happened instead of raising: the retry policy reads
``kind`` to decide between returning, retrying and aborting.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    RETRYABLE = "retryable"
    FATAL = "fatal"


@dataclass(frozen=True)
class AttemptOutcome(Generic[T]):
    """Classification of one attempt.

    Exactly one of ``value`` (``SUCCESS``) or ``error`` (``RETRYABLE`` /
    ``FATAL``) is meaningful.
    """

    kind: OutcomeKind
    value: Optional[T] = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, value: T) -> "AttemptOutcome[T]":
        return cls(kind=OutcomeKind.SUCCESS, value=value)

    @classmethod
    def retryable(cls, error: Exception) -> "AttemptOutcome[T]":
        return cls(kind=OutcomeKind.RETRYABLE, error=error)

    @classmethod
    def fatal(cls, error: Exception) -> "AttemptOutcome[T]":
        return cls(kind=OutcomeKind.FATAL, error=error)


__all__ = ["AttemptOutcome", "OutcomeKind"]

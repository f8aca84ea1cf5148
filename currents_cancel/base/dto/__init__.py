"""Pydantic DTOs for the cancel-by-github-ci endpoint."""

from .cancellation import (
    CancellationRequest,
    CancellationResult,
    ResponseStatus,
    RunCancellation,
    parse_cancellation_result,
)

__all__ = [
    "CancellationRequest",
    "CancellationResult",
    "ResponseStatus",
    "RunCancellation",
    "parse_cancellation_result",
]

"""
Domain models public surface.

Re-exports the dataclass records under ``models_parts`` and the pydantic wire
DTOs under ``dto`` from one stable import path.
"""

from .models_parts.typed_response import TypedResponse
from .dto.cancellation import (
    CancellationRequest,
    CancellationResult,
    ResponseStatus,
    RunCancellation,
    parse_cancellation_result,
)

__all__ = [
    "TypedResponse",
    "CancellationRequest",
    "CancellationResult",
    "ResponseStatus",
    "RunCancellation",
    "parse_cancellation_result",
]

"""
Pydantic DTOs for the cancel-by-github-ci request and response bodies.

Purpose
-------
Describe the wire shapes exchanged with the Currents API. Fields use
snake_case in Python and camelCase aliases on the wire; serialize with
``model_dump(by_alias=True)``.

External dependencies: Pydantic only (no network calls).

Fallback semantics
------------------
The response model is used for reporting only. ``parse_cancellation_result``
returns ``None`` for payloads that do not match so an unexpected but
successful response never turns into a failure.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

ResponseStatus = Literal["OK", "FAILED"]


class CancellationRequest(BaseModel):
    """Request body: the GitHub run to cancel.

    Immutable; built once per invocation from the step inputs.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    github_run_id: str = Field(alias="githubRunId", min_length=1)
    github_run_attempt: str = Field(alias="githubRunAttempt", min_length=1)

    def to_wire(self) -> dict[str, str]:
        """Return the JSON-ready body keyed by wire names."""
        return self.model_dump(by_alias=True)


class RunCancellation(BaseModel):
    """Cancellation details echoed back by the API."""

    model_config = ConfigDict(populate_by_name=True)

    actor: str
    canceled_at: str = Field(alias="canceledAt")
    reason: str
    github_run_id: str = Field(alias="githubRunId")
    github_run_attempt: str = Field(alias="githubRunAttempt")

    @field_validator("github_run_id", "github_run_attempt", mode="before")
    @classmethod
    def _coerce_to_str(cls, value: Any) -> Any:
        # The API may send the attempt number as a JSON number.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class CancellationResult(BaseModel):
    """Successful response body: ``{"status": ..., "data": {...}}``."""

    status: ResponseStatus
    data: RunCancellation


def parse_cancellation_result(payload: Any) -> Optional[CancellationResult]:
    """Validate ``payload`` as a :class:`CancellationResult`.

    Returns ``None`` when the payload does not match the schema.
    """
    try:
        return CancellationResult.model_validate(payload)
    except ValidationError:
        return None


__all__ = [
    "CancellationRequest",
    "CancellationResult",
    "ResponseStatus",
    "RunCancellation",
    "parse_cancellation_result",
]

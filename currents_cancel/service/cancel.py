"""Retry-wrapped cancellation call.

Each attempt issues one PUT and classifies what came back:

- ``result is None``: the server has nothing to cancel. The attempt is
  ``FATAL`` with ``Resource not found`` and the retry loop stops, whatever
  the status code was.
- any raised exception: ``RETRYABLE``; the error code is logged.
- otherwise ``SUCCESS`` carrying the :class:`TypedResponse`.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..base.errors import CancelError, ErrorCode, classify_exception
from ..base.http import request
from ..base.logging import EVENTS_LOGGER_NAME, LogContext, log_event
from ..base.models import CancellationRequest, TypedResponse
from ..base.resilience import DEFAULT_RETRY_CONFIG, AttemptOutcome, RetryConfig, call_with_retry
from ..config import ActionInputs

NOT_FOUND_MESSAGE = "Resource not found"

_events = logging.getLogger(EVENTS_LOGGER_NAME)


def build_request(inputs: ActionInputs) -> CancellationRequest:
    return CancellationRequest(
        github_run_id=inputs.github_run_id,
        github_run_attempt=inputs.github_run_attempt,
    )


def _attempt(
    inputs: ActionInputs,
    body: CancellationRequest,
    client: Optional[httpx.Client],
    ctx: LogContext,
) -> AttemptOutcome[TypedResponse[Any]]:
    try:
        response = request(inputs.cancel_url, body, inputs.bearer_token, client=client)
    except Exception as e:  # every request failure consumes one attempt
        log_event(
            _events,
            "cancel.attempt_failed",
            ctx,
            error_code=classify_exception(e).value,
            error=str(e),
        )
        return AttemptOutcome.retryable(e)

    if response.result is None:
        log_event(_events, "cancel.aborted", ctx, status_code=response.status_code)
        return AttemptOutcome.fatal(CancelError(code=ErrorCode.NOT_FOUND, message=NOT_FOUND_MESSAGE))

    log_event(_events, "cancel.succeeded", ctx, status_code=response.status_code)
    return AttemptOutcome.success(response)


def cancel_run(
    inputs: ActionInputs,
    *,
    client: Optional[httpx.Client] = None,
    retry_config: RetryConfig = DEFAULT_RETRY_CONFIG,
) -> TypedResponse[Any]:
    """Cancel the run described by ``inputs``.

    Returns the successful response. Raises ``CancelError(NOT_FOUND)`` on an
    empty result, or the last attempt's error once retries are exhausted.
    """
    body = build_request(inputs)
    ctx = LogContext(github_run_id=inputs.github_run_id, github_run_attempt=inputs.github_run_attempt)
    return call_with_retry(lambda: _attempt(inputs, body, client, ctx), retry_config)


__all__ = ["NOT_FOUND_MESSAGE", "build_request", "cancel_run"]

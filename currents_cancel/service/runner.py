"""End-to-end cancellation flow.

``run`` loads the inputs from an explicit environment mapping, performs the
retry-wrapped call and reports through an explicit :class:`Reporter`.

States: START -> CONFIG_LOADED -> REQUEST_SENT -> SUCCESS, or back through
RETRY to REQUEST_SENT, or ABORTED. ABORTED covers missing/invalid inputs, a
not-found response and an exhausted retry budget; all of them end in one
``set_failed`` call carrying the error message.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

import httpx

from ..base.models import TypedResponse, parse_cancellation_result
from ..base.reporting import Reporter
from ..base.resilience import DEFAULT_RETRY_CONFIG, RetryConfig
from ..config import is_debug, load_inputs
from .cancel import cancel_run

SUCCESS_MESSAGE = "The run was successfully canceled!"


@dataclass(frozen=True)
class RunOutcome:
    succeeded: bool
    message: Optional[str] = None
    response: Optional[TypedResponse[Any]] = None


def _retry_notice(reporter: Reporter):
    def attempt_logger(*, attempt_number: int, retries_left: int, delay, error) -> None:
        reporter.info(f"Attempt {attempt_number} failed. There are {retries_left} retries left.")

    return attempt_logger


def _report_success(reporter: Reporter, response: TypedResponse[Any], debug: bool) -> None:
    if debug:
        reporter.debug(json.dumps(response.to_dict(), default=str))
        parsed = parse_cancellation_result(response.result)
        if parsed is not None:
            reporter.debug(
                f"Cancellation status {parsed.status}: canceled by {parsed.data.actor} "
                f"at {parsed.data.canceled_at} ({parsed.data.reason})"
            )
    reporter.info(SUCCESS_MESSAGE)


def run(
    environ: Mapping[str, str],
    reporter: Reporter,
    *,
    client: Optional[httpx.Client] = None,
    retry_config: RetryConfig = DEFAULT_RETRY_CONFIG,
) -> RunOutcome:
    """Cancel the run described by ``environ`` and report the outcome.

    Parameters:
        environ: Mapping holding the ``INPUT_*`` variables; ``RUNNER_DEBUG=1``
            in it enables the debug dump, as does ``reporter.debug_enabled``.
        reporter: Sink for progress lines and the final failure.
        client: Optional ``httpx.Client`` (tests pass one with a mock transport).
        retry_config: Retry policy; its attempt logger is replaced with one
            that reports retry notices through ``reporter``.

    Returns:
        :class:`RunOutcome`. Errors are never raised to the caller; they are
        reported through ``reporter.set_failed`` and carried in the outcome.
    """
    try:
        inputs = load_inputs(environ)

        reporter.info("Calling the Currents API...")
        reporter.info(f"GitHub run id: {inputs.github_run_id}")
        reporter.info(f"GitHub run attempt: {inputs.github_run_attempt}")

        response = cancel_run(
            inputs,
            client=client,
            retry_config=replace(retry_config, attempt_logger=_retry_notice(reporter)),
        )
        _report_success(reporter, response, reporter.debug_enabled or is_debug(environ))
        return RunOutcome(succeeded=True, response=response)
    except Exception as e:  # top-level boundary: every failure becomes the reported message
        message = str(e) or type(e).__name__
        reporter.set_failed(message)
        return RunOutcome(succeeded=False, message=message)


__all__ = ["SUCCESS_MESSAGE", "RunOutcome", "run"]

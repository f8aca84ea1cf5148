"""Configuration layer for the cancellation invoker.

Loads the four required step inputs into an immutable :class:`ActionInputs`
record and validates the API URL before any network activity happens.

Public API
----------
* load_inputs(environ: Mapping[str, str] | None = None) -> ActionInputs
* get_input / input_env_name / is_debug (re-exported from ``.env``)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

import httpx

from ..base.errors import CancelError, ErrorCode
from .defaults import (
    ALLOWED_URL_SCHEMES,
    CANCEL_BY_GITHUB_CI_PATH,
    INPUT_BEARER_TOKEN,
    INPUT_CURRENTS_API_URL,
    INPUT_GITHUB_RUN_ATTEMPT,
    INPUT_GITHUB_RUN_ID,
)
from .env import get_input, input_env_name, is_debug


@dataclass(frozen=True)
class ActionInputs:
    """Validated inputs for one invocation."""

    currents_api_url: str
    bearer_token: str
    github_run_id: str
    github_run_attempt: str

    @property
    def cancel_url(self) -> str:
        """Full URL of the cancel-by-github-ci endpoint."""
        return f"{self.currents_api_url.rstrip('/')}{CANCEL_BY_GITHUB_CI_PATH}"


def validate_api_url(value: str) -> str:
    """Return ``value`` when it is an absolute http(s) URL.

    Raises:
        CancelError: ``INVALID_CONFIGURATION`` for anything else, including
            strings httpx refuses to parse.
    """
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise CancelError(
            code=ErrorCode.INVALID_CONFIGURATION,
            message=f"Invalid URL for {INPUT_CURRENTS_API_URL}: {value}",
            raw=e,
        ) from e
    if url.scheme not in ALLOWED_URL_SCHEMES or not url.host:
        raise CancelError(
            code=ErrorCode.INVALID_CONFIGURATION,
            message=f"Invalid URL for {INPUT_CURRENTS_API_URL}: {value}",
        )
    return value


def load_inputs(environ: Optional[Mapping[str, str]] = None) -> ActionInputs:
    """Read and validate the required inputs.

    Inputs are checked in a fixed order so the first missing one is the one
    reported. URL validation runs only once all four are present.
    """
    currents_api_url = get_input(INPUT_CURRENTS_API_URL, required=True, environ=environ)
    bearer_token = get_input(INPUT_BEARER_TOKEN, required=True, environ=environ)
    github_run_id = get_input(INPUT_GITHUB_RUN_ID, required=True, environ=environ)
    github_run_attempt = get_input(INPUT_GITHUB_RUN_ATTEMPT, required=True, environ=environ)
    return ActionInputs(
        currents_api_url=validate_api_url(currents_api_url),
        bearer_token=bearer_token,
        github_run_id=github_run_id,
        github_run_attempt=github_run_attempt,
    )


__all__ = [
    "ActionInputs",
    "load_inputs",
    "validate_api_url",
    "get_input",
    "input_env_name",
    "is_debug",
]

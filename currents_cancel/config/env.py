"""currents_cancel.config.env
==========================

Helpers for reading step inputs and runner flags from the environment.

Purpose
-------
- Map an input name (``currents-api-url``) to the environment variable the
  runner exposes it under (``INPUT_CURRENTS-API-URL``).
- Read required inputs with a uniform failure message.
- Detect whether step debug logging is enabled.

Design Notes
------------
- Every helper accepts the environment mapping explicitly and only falls back
  to ``os.environ`` when none is given, so callers and tests never need to
  mutate the process environment.

Failure Modes
-------------
- ``get_input(..., required=True)`` raises :class:`CancelError` with code
  ``MISSING_CONFIGURATION`` when the value is absent or blank.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from ..base.errors import CancelError, ErrorCode
from .defaults import INPUT_ENV_PREFIX, RUNNER_DEBUG_ENV


def input_env_name(name: str) -> str:
    """Return the environment variable name holding input ``name``.

    Spaces become underscores and the result is upper-cased; hyphens are kept
    as-is, e.g. ``bearer-token`` -> ``INPUT_BEARER-TOKEN``.
    """
    return f"{INPUT_ENV_PREFIX}{name.replace(' ', '_').upper()}"


def get_input(
    name: str,
    *,
    required: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Return the trimmed value of input ``name`` (empty string when unset).

    Raises:
        CancelError: ``MISSING_CONFIGURATION`` when ``required`` and the value
            is absent or whitespace only.
    """
    env = os.environ if environ is None else environ
    value = (env.get(input_env_name(name)) or "").strip()
    if required and not value:
        raise CancelError(
            code=ErrorCode.MISSING_CONFIGURATION,
            message=f"Input required and not supplied: {name}",
        )
    return value


def is_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return True when the runner enabled step debug logging."""
    env = os.environ if environ is None else environ
    return env.get(RUNNER_DEBUG_ENV) == "1"


__all__ = ["input_env_name", "get_input", "is_debug"]

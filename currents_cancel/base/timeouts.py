"""Timeout configuration for outbound HTTP calls.

The cancellation call runs without a client-side timeout unless one is set
explicitly, leaving the retry budget as the only bound on total run time.

Key Components
--------------
TimeoutConfig
    Dataclass capturing the normalized timeout value.

get_timeout_config()
    Returns a process-cached configuration, parsing the environment on first
    use only. Supported environment variable (optional):
        CURRENTS_HTTP_TIMEOUT_SECONDS

reset_timeout_config()
    Drop the cached value so the next call re-reads the environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ..config.defaults import HTTP_TIMEOUT_ENV


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Per-request HTTP timeout; ``None`` disables it.
    """

    http_timeout_seconds: Optional[float] = None


_CACHED: TimeoutConfig | None = None


def _parse_env_float(name: str, default: float | None) -> float | None:
    """Parse an environment variable as a positive float.

    Returns ``default`` if the variable is unset, not a number, or not positive.
    """
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED  # noqa: PLW0603 - module cache
    if _CACHED is None:
        _CACHED = TimeoutConfig(http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, None))
    return _CACHED


def reset_timeout_config() -> None:
    global _CACHED  # noqa: PLW0603 - module cache
    _CACHED = None


__all__ = ["TimeoutConfig", "get_timeout_config", "reset_timeout_config"]

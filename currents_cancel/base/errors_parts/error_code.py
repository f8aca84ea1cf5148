"""
Normalized cancellation error codes (taxonomy).

Defines the `ErrorCode` enumeration used by configuration loading, the HTTP
layer and the retry wrapper. Values are lowercase snake_case and appear as
``error_code`` in structured log events.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    MISSING_CONFIGURATION = "missing_configuration"
    INVALID_CONFIGURATION = "invalid_configuration"
    NOT_FOUND = "not_found"
    TRANSIENT = "transient"
    TIMEOUT = "timeout"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]

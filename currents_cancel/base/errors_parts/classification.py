"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Used for structured logging of failed attempts. Classification never decides
whether an attempt is retried; that is the attempt outcome's job.
"""
from __future__ import annotations

from typing import Dict, Optional

import httpx

from .cancel_error import CancelError
from .error_code import ErrorCode


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    val = getattr(exc, "status_code", None)
    if isinstance(val, int) and 100 <= val < 600:
        return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    429: ErrorCode.RATE_LIMIT,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.TRANSIENT,
    504: ErrorCode.TIMEOUT,
}


def _code_for_status(status: int) -> ErrorCode:
    mapped = _HTTP_STATUS_MAP.get(status)
    if mapped is not None:
        return mapped
    if 400 <= status < 500:
        return ErrorCode.CLIENT_ERROR
    if status >= 500:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. CancelError passthrough.
        2. Timeouts (httpx and builtin).
        3. Other httpx transport failures -> ``TRANSIENT``.
        4. HTTP status mapping.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, CancelError):
        return exc.code
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSIENT
    status = _extract_status(exc)
    if status is not None:
        return _code_for_status(status)
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]

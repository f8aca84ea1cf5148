"""
HTTP error raised for non-2xx responses.

Carries the status code and whatever JSON body could be parsed so callers can
classify or report it without re-reading the response.
"""
from __future__ import annotations

from typing import Any, Optional


class HttpClientError(Exception):
    """Raised by ``request`` when the server answers with status > 299."""

    def __init__(self, message: str, status_code: int, result: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.result = result


__all__ = ["HttpClientError"]

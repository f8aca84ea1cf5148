"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `currents_cancel.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .cancel_error import CancelError
from .http_client_error import HttpClientError
from .classification import classify_exception

__all__ = ["ErrorCode", "CancelError", "HttpClientError", "classify_exception"]

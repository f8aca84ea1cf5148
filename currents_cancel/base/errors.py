"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``currents_cancel.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.cancel_error import CancelError
from .errors_parts.http_client_error import HttpClientError
from .errors_parts.classification import classify_exception

__all__ = ["ErrorCode", "CancelError", "HttpClientError", "classify_exception"]

"""currents_cancel package

Cancel a Currents run from a CI pipeline through the Currents HTTP API.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`CancelError`, :class:`ErrorCode`, :class:`HttpClientError`
    - Flow: :func:`run`, :func:`cancel_run`, :class:`RunOutcome`
    - HTTP: :func:`request`
    - Configuration: :class:`ActionInputs`, :func:`load_inputs`
"""

from .base.errors import CancelError, ErrorCode, HttpClientError
from .base.http import request
from .config import ActionInputs, load_inputs
from .service import RunOutcome, cancel_run, run

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CancelError",
    "ErrorCode",
    "HttpClientError",
    "request",
    "ActionInputs",
    "load_inputs",
    "RunOutcome",
    "cancel_run",
    "run",
]

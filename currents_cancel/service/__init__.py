"""Service layer: the retry-wrapped cancellation call, the run flow and the CLI."""

from .cancel import build_request, cancel_run
from .runner import RunOutcome, run

__all__ = ["build_request", "cancel_run", "RunOutcome", "run"]

"""Reporting surface handed to the cancellation flow.

The flow never writes to the environment directly. It receives a
:class:`Reporter` and calls ``info``/``debug``/``set_failed`` on it, which
keeps the core testable with a recording stand-in.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol


class Reporter(Protocol):  # pragma: no cover - structural protocol
    debug_enabled: bool

    def info(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def set_failed(self, message: str) -> None: ...


class LoggingReporter:
    """Reporter backed by a stdlib logger.

    ``set_failed`` logs at ERROR (``::error::`` in workflow format) and
    records the message; ``exit_code`` is 1 once a failure was reported.
    """

    def __init__(self, logger: logging.Logger, *, debug_enabled: bool = False):
        self._logger = logger
        self.debug_enabled = debug_enabled
        self.failure_message: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.failure_message is not None

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def info(self, message: str) -> None:
        self._logger.info(message)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def set_failed(self, message: str) -> None:
        self.failure_message = message
        self._logger.error(message)


__all__ = ["Reporter", "LoggingReporter"]

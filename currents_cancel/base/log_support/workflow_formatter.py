"""GitHub Actions workflow-command formatter.

Renders DEBUG records as ``::debug::msg``, WARNING as ``::warning::msg``,
ERROR and above as ``::error::msg`` and everything else as the bare message,
which is how the runner expects step output on stdout.
"""
from __future__ import annotations

import logging


def escape_data(value: str) -> str:
    """Escape a workflow command message (``%``, ``\\r``, ``\\n``)."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if record.levelno >= logging.ERROR:
            return f"::error::{escape_data(message)}"
        if record.levelno >= logging.WARNING:
            return f"::warning::{escape_data(message)}"
        if record.levelno <= logging.DEBUG:
            return f"::debug::{escape_data(message)}"
        return message


__all__ = ["WorkflowCommandFormatter", "escape_data"]

"""Auxiliary logging helpers (formatters, context) used by base.logging."""

from .json_formatter import JsonFormatter, ISO
from .logging_context import LogContext
from .workflow_formatter import WorkflowCommandFormatter, escape_data

__all__ = ["JsonFormatter", "ISO", "LogContext", "WorkflowCommandFormatter", "escape_data"]

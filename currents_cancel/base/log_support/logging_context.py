"""Structured logging context for a cancellation invocation.

:class:`LogContext` carries the run identifiers merged into every structured
event. ``to_dict`` prunes ``None`` values for clean output.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for cancellation logging events."""

    github_run_id: Optional[str] = None
    github_run_attempt: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


__all__ = ["LogContext"]

"""
Structured cancellation error exception type.

Wraps failures with a normalized `ErrorCode`. Its string form is the bare
message because that text is what the caller records as the failure reason.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class CancelError(Exception):
    """Represents a structured failure with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable message reported as the failure reason.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


__all__ = ["CancelError"]

"""
TypedResponse record returned by the HTTP request function.

Holds the status code, lower-cased response headers and the parsed JSON body
(``None`` when the body was empty, unparseable, or the status was 404).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class TypedResponse(Generic[T]):
    """Outcome of one HTTP call.

    Attributes:
        status_code: HTTP status code.
        headers: Response headers keyed by lower-case name.
        result: Parsed JSON body, or ``None``.

    Methods:
        to_dict: Return the camelCase wire-style mapping
            ``{"statusCode", "headers", "result"}`` used for debug output.
    """

    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    result: Optional[T] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "result": self.result,
        }


__all__ = ["TypedResponse"]

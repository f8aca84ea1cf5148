"""Models parts package: one class per file, re-exported by ``base.models``."""

from .typed_response import TypedResponse

__all__ = ["TypedResponse"]

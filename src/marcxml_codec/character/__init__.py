"""Character layer: text-level preparation of XML before parsing."""

from .prolog import (
    DEFAULT_PROLOG,
    declared_encoding,
    has_prolog,
    normalize_prolog,
    to_document_bytes,
)

__all__ = [
    "DEFAULT_PROLOG",
    "declared_encoding",
    "has_prolog",
    "normalize_prolog",
    "to_document_bytes",
]

"""Exception hierarchy for the MARCXML codec.

Nothing in the codec swallows these: detection and file access raise
``MarcXmlIOError``, malformed XML raises ``MarcXmlParseError`` and streaming
calls made before a file was opened raise ``CollectionStateError``.
"""

from typing import Iterable, List

from .result import DiagnosticEntry


class MarcXmlError(Exception):
    """Base exception for all codec errors."""


class MarcXmlIOError(MarcXmlError, OSError):
    """A file could not be opened or read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Cannot open file '{path}' for reading")
        self.path = path


class MarcXmlParseError(MarcXmlError):
    """XML is not well-formed.

    Attributes:
        diagnostics: Every error the parser reported, in the order reported
    """

    def __init__(self, diagnostics: Iterable[DiagnosticEntry]) -> None:
        self.diagnostics: List[DiagnosticEntry] = list(diagnostics)
        super().__init__("\n".join(str(d) for d in self.diagnostics))


class CollectionStateError(MarcXmlError, RuntimeError):
    """A streaming operation was called before a collection file was opened."""

    def __init__(self, message: str = "Collection file not open") -> None:
        super().__init__(message)

"""Diagnostic types reported by the XML parser underneath the codec."""

from dataclasses import dataclass
from enum import Enum, auto


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    WARNING = auto()    # Recoverable problem, document still usable
    ERROR = auto()      # Well-formedness error
    CRITICAL = auto()   # Fatal error, parsing stopped


@dataclass(frozen=True)
class DiagnosticEntry:
    """Single parser diagnostic with its position in the input."""

    line: int
    column: int
    code: int
    message: str
    severity: DiagnosticSeverity = DiagnosticSeverity.ERROR

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")

    def __str__(self) -> str:
        return f"[{self.line}:{self.column}] Error {self.code}: {self.message}"

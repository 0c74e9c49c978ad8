"""Shared utilities for the MARCXML codec.

This module provides configuration objects, diagnostic types, exceptions and
logging helpers used across all codec layers.
"""

from .config import (
    DEFAULT_CONFIG,
    MARC21_NAMESPACE,
    CodecConfig,
    ConfigError,
    ConfigValidationError,
)
from .exceptions import (
    CollectionStateError,
    MarcXmlError,
    MarcXmlIOError,
    MarcXmlParseError,
)
from .logging import CorrelationLogger, get_logger
from .result import DiagnosticEntry, DiagnosticSeverity

__all__ = [
    "DEFAULT_CONFIG",
    "MARC21_NAMESPACE",
    "CodecConfig",
    "ConfigError",
    "ConfigValidationError",
    "CollectionStateError",
    "MarcXmlError",
    "MarcXmlIOError",
    "MarcXmlParseError",
    "CorrelationLogger",
    "get_logger",
    "DiagnosticEntry",
    "DiagnosticSeverity",
]

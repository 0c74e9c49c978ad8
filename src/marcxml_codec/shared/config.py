"""Configuration classes for the MARCXML codec.

This module provides the configuration object shared by detection, decoding,
encoding and streaming, with validation at construction time.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional

MARC21_NAMESPACE = "http://www.loc.gov/MARC21/slim"

# fgets($f, 10) style bounded read: at most this many characters per line
DEFAULT_SNIFF_READ_SIZE = 9


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class CodecConfig:
    """Immutable configuration for every codec component.

    Attributes:
        namespace: MARC21 slim namespace written on encode and accepted on decode
        pretty_print: Indent encoded output
        sniff_read_size: Characters read per line by the collection file sniffer
        huge_tree: Disable lxml's security limits on very large text nodes
        resolve_entities: Let lxml substitute entities declared in a DTD
        correlation_id: Optional correlation ID attached to every log record
    """

    namespace: str = MARC21_NAMESPACE
    pretty_print: bool = True
    sniff_read_size: int = DEFAULT_SNIFF_READ_SIZE
    huge_tree: bool = False
    resolve_entities: bool = False
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate codec configuration."""
        if not self.namespace:
            raise ValueError("namespace cannot be empty")
        if self.sniff_read_size <= 0:
            raise ValueError("sniff_read_size must be > 0")

    def override(self, **kwargs: Any) -> "CodecConfig":
        """Create a copy of this configuration with some fields replaced.

        Raises:
            ConfigValidationError: If a field name is unknown or a value is invalid
        """
        for key in kwargs:
            if key not in self.__dataclass_fields__:
                raise ConfigValidationError(
                    f"Unknown configuration field: {key}",
                    field_name=key,
                    suggestions=sorted(self.__dataclass_fields__),
                )
        try:
            return replace(self, **kwargs)
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a plain dictionary."""
        return asdict(self)


DEFAULT_CONFIG = CodecConfig()

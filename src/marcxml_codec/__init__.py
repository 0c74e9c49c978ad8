"""MARCXML codec.

Converts between MARCXML text and an in-memory leader-and-fields record
model, detects MARCXML input, and streams records out of collection files
too large to parse in one go.

Progressive API Disclosure:
- Level 1: Simple functions - from_string(), to_string(), collection_from_string()
- Level 2: MarcXmlSerialization class for format registries
- Level 3: CollectionReader for record-at-a-time file reading
"""

__version__ = "0.1.0"
__author__ = "MARCXML Codec Team"

from .api import (
    MarcXmlSerialization,
    can_parse,
    can_parse_collection,
    can_parse_collection_file,
    collection_from_string,
    from_string,
    to_string,
)
from .model import ControlField, DataField, FieldEntry, FieldTable, Record, Subfield
from .shared import (
    MARC21_NAMESPACE,
    CodecConfig,
    CollectionStateError,
    MarcXmlError,
    MarcXmlIOError,
    MarcXmlParseError,
)
from .streaming import CollectionReader

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: detection and conversion functions
    "can_parse",
    "can_parse_collection",
    "can_parse_collection_file",
    "from_string",
    "to_string",
    "collection_from_string",

    # Level 2 and 3
    "MarcXmlSerialization",
    "CollectionReader",

    # Record model
    "Record",
    "ControlField",
    "DataField",
    "Subfield",
    "FieldEntry",
    "FieldTable",

    # Configuration and errors
    "MARC21_NAMESPACE",
    "CodecConfig",
    "MarcXmlError",
    "MarcXmlIOError",
    "MarcXmlParseError",
    "CollectionStateError",
]

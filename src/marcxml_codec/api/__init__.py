"""Public codec API.

Level 1: module-level functions for detection, decoding, encoding and
splitting. Level 2: ``MarcXmlSerialization``, the same operations plus
collection file reading behind one object.
"""

from .codec import (
    collection_from_string,
    from_string,
    record_from_element,
    to_string,
)
from .detection import can_parse, can_parse_collection, can_parse_collection_file
from .serialization import MarcXmlSerialization

__all__ = [
    "can_parse",
    "can_parse_collection",
    "can_parse_collection_file",
    "collection_from_string",
    "from_string",
    "record_from_element",
    "to_string",
    "MarcXmlSerialization",
]

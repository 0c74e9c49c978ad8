"""Single-object view of the codec for format registries.

A registry that chooses between MARC serializations holds one object per
format and asks it whether it can parse some input before handing it over.
``MarcXmlSerialization`` bundles the stateless checks and conversions with a
``CollectionReader`` for file-based reading.
"""

from pathlib import Path
from typing import List, Optional, Union

from marcxml_codec.api.codec import collection_from_string, from_string, to_string
from marcxml_codec.api.detection import (
    can_parse,
    can_parse_collection,
    can_parse_collection_file,
)
from marcxml_codec.model import FieldTable, Record
from marcxml_codec.shared import DEFAULT_CONFIG, CodecConfig
from marcxml_codec.streaming import CollectionReader


class MarcXmlSerialization:
    """MARCXML serialization with string conversion and collection file reading."""

    name = "marcxml"

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.reader = CollectionReader(config=self.config)

    @staticmethod
    def can_parse(text: str) -> bool:
        return can_parse(text)

    @staticmethod
    def can_parse_collection(text: str) -> bool:
        return can_parse_collection(text)

    @staticmethod
    def can_parse_collection_file(path: Union[str, Path]) -> bool:
        return can_parse_collection_file(path)

    def from_string(self, text: str) -> Record:
        return from_string(text, self.config)

    def to_string(self, leader: str, fields: FieldTable) -> str:
        return to_string(leader, fields, self.config)

    def collection_from_string(self, text: str) -> List[str]:
        return collection_from_string(text, self.config)

    def open_collection_file(self, path: Union[str, Path]) -> None:
        self.reader.open(path)

    def rewind(self) -> None:
        self.reader.rewind()

    def get_next_record(self) -> str:
        """Next record XML from the open collection file, "" at end of file."""
        return self.reader.next_record()

    def close(self) -> None:
        self.reader.close()

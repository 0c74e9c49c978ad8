"""Record data model.

A record is a leader plus a field table. The table maps each tag to the
entries recorded under it, in document order; Python dicts keep tag order
too. Every entry is either a ``ControlField`` or a ``DataField``.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Union


@dataclass(frozen=True)
class Subfield:
    """Coded subfield value. Codes may repeat within a data field."""

    code: str
    value: str


@dataclass(frozen=True)
class ControlField:
    """Field with a single unstructured value and no indicators."""

    value: str


@dataclass
class DataField:
    """Field with two indicators and an ordered list of subfields."""

    ind1: str = " "
    ind2: str = " "
    subfields: List[Subfield] = field(default_factory=list)

    def add_subfield(self, code: str, value: str) -> None:
        self.subfields.append(Subfield(code, value))

    def get_subfields(self, code: str) -> List[str]:
        """Return the values of all subfields with the given code."""
        return [s.value for s in self.subfields if s.code == code]


FieldEntry = Union[ControlField, DataField]
FieldTable = Dict[str, List[FieldEntry]]


@dataclass
class Record:
    """Leader and fields of one MARC record.

    Unpacks like the ``(leader, fields)`` pair it stands for:

        >>> leader, fields = Record("00000nam", {"001": [ControlField("x")]})
        >>> fields["001"][0].value
        'x'
    """

    leader: str = ""
    fields: FieldTable = field(default_factory=dict)

    def __iter__(self) -> Iterator:
        yield self.leader
        yield self.fields

    def add_field(self, tag: str, entry: FieldEntry) -> None:
        self.fields.setdefault(tag, []).append(entry)

    def to_xml(self, config=None) -> str:
        """Encode this record as a one-record MARCXML collection."""
        from marcxml_codec.api.codec import to_string  # circular at import time

        return to_string(self.leader, self.fields, config)

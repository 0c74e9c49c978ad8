"""MARCXML record codec.

Decoding maps a ``record`` element to a ``Record``; encoding writes a
``Record``'s leader and fields as a one-record ``collection`` document.
Elements are matched by local name and may be unqualified or in the MARC21
slim namespace.
"""

from typing import Iterator, List, Optional

from lxml import etree

from marcxml_codec.model import ControlField, DataField, FieldTable, Record, Subfield
from marcxml_codec.shared import DEFAULT_CONFIG, CodecConfig, get_logger
from marcxml_codec.tree import load_xml


def is_marc_element(node: etree._Element, name: str, namespace: str) -> bool:
    """Check that node is an element called name, unqualified or in namespace."""
    if not isinstance(node.tag, str):
        # comment or processing instruction
        return False
    qname = etree.QName(node)
    return qname.localname == name and qname.namespace in (None, namespace)


def marc_children(
    element: etree._Element, name: str, namespace: str
) -> Iterator[etree._Element]:
    return (child for child in element if is_marc_element(child, name, namespace))


def _text(element: etree._Element) -> str:
    return str(element.xpath("string()"))


def _indicator(element: etree._Element, name: str) -> str:
    return element.get(name, "").ljust(1)


def record_from_element(
    element: etree._Element, config: Optional[CodecConfig] = None
) -> Record:
    """Build a Record from a parsed ``record`` element."""
    ns = (config or DEFAULT_CONFIG).namespace

    leader = next(marc_children(element, "leader", ns), None)
    record = Record(leader=_text(leader) if leader is not None else "")

    for field in marc_children(element, "controlfield", ns):
        record.add_field(field.get("tag", ""), ControlField(_text(field)))

    for field in marc_children(element, "datafield", ns):
        data_field = DataField(
            ind1=_indicator(field, "ind1"),
            ind2=_indicator(field, "ind2"),
            subfields=[
                Subfield(subfield.get("code", ""), _text(subfield))
                for subfield in marc_children(field, "subfield", ns)
            ],
        )
        record.add_field(field.get("tag", ""), data_field)

    return record


def from_string(text: str, config: Optional[CodecConfig] = None) -> Record:
    """Decode a MARCXML record.

    A whole collection is accepted too, in which case its first record is
    decoded. Missing leaders decode as an empty string and missing or empty
    indicators as a single space; nothing else is defaulted or validated.

    Args:
        text: MARCXML ``record`` or ``collection`` document
        config: Codec configuration

    Returns:
        Decoded record with fields in document order

    Raises:
        MarcXmlParseError: If the text is not well-formed XML

    Examples:
        >>> record = from_string('<record><controlfield tag="001">A</controlfield></record>')
        >>> record.fields["001"]
        [ControlField(value='A')]
    """
    config = config or DEFAULT_CONFIG
    logger = get_logger(__name__, config.correlation_id, "record_codec")

    element = load_xml(text.strip(), config)
    first = next(marc_children(element, "record", config.namespace), None)
    if first is not None:
        element = first

    record = record_from_element(element, config)
    logger.debug(
        "Decoded record",
        extra={
            "tag_count": len(record.fields),
            "has_leader": bool(record.leader),
            "from_collection": first is not None,
        },
    )
    return record


def to_string(
    leader: str, fields: FieldTable, config: Optional[CodecConfig] = None
) -> str:
    """Encode a record as a MARCXML collection containing that one record.

    The leader element is written only for a non-empty leader, and subfields
    with an empty value are left out.

    Args:
        leader: Record leader
        fields: Field table, written in its own order
        config: Codec configuration

    Returns:
        Complete document text including the XML declaration

    Raises:
        TypeError: If a field entry is neither a ControlField nor a DataField
        ValueError: If a value contains characters XML cannot represent
    """
    config = config or DEFAULT_CONFIG
    logger = get_logger(__name__, config.correlation_id, "record_codec")
    ns = config.namespace

    def qualified(name: str) -> str:
        return f"{{{ns}}}{name}"

    collection = etree.Element(qualified("collection"), nsmap={None: ns})
    record = etree.SubElement(collection, qualified("record"))
    if leader:
        etree.SubElement(record, qualified("leader")).text = leader

    skipped = 0
    for tag, entries in fields.items():
        for entry in entries:
            if isinstance(entry, ControlField):
                control = etree.SubElement(record, qualified("controlfield"), {"tag": tag})
                control.text = entry.value
            elif isinstance(entry, DataField):
                data = etree.SubElement(
                    record,
                    qualified("datafield"),
                    {"tag": tag, "ind1": entry.ind1, "ind2": entry.ind2},
                )
                for subfield in entry.subfields:
                    if subfield.value == "":
                        skipped += 1
                        continue
                    sub = etree.SubElement(data, qualified("subfield"), {"code": subfield.code})
                    sub.text = subfield.value
            else:
                raise TypeError(
                    f"Unsupported field entry for tag {tag}: {type(entry).__name__}"
                )

    xml = etree.tostring(
        collection,
        xml_declaration=True,
        encoding="UTF-8",
        pretty_print=config.pretty_print,
    ).decode("utf-8")

    logger.debug(
        "Encoded record",
        extra={"tag_count": len(fields), "empty_subfields_skipped": skipped},
    )
    return xml


def collection_from_string(
    text: str, config: Optional[CodecConfig] = None
) -> List[str]:
    """Split a MARCXML collection into standalone record documents.

    Each ``record`` child of the root is serialized on its own, carrying the
    namespace declarations it needs to be parsed again.

    Raises:
        MarcXmlParseError: If the text is not well-formed XML
    """
    config = config or DEFAULT_CONFIG
    logger = get_logger(__name__, config.correlation_id, "collection_splitter")

    root = load_xml(text.strip(), config)
    records = [
        etree.tostring(element, encoding="unicode", with_tail=False)
        for element in marc_children(root, "record", config.namespace)
    ]
    logger.debug("Split collection", extra={"record_count": len(records)})
    return records

"""Cheap format detection for MARCXML.

These checks only tell MARCXML apart from the other MARC serializations a
format registry may hold (ISO 2709, MARC-in-JSON). They do not validate; a
false positive is caught later by the real parse.
"""

from pathlib import Path
from typing import Optional, Union

from marcxml_codec.shared import (
    DEFAULT_CONFIG,
    CodecConfig,
    MarcXmlIOError,
    get_logger,
)


def can_parse(text: str) -> bool:
    """Check whether text looks like a MARCXML record.

    >>> can_parse(" \\n <record/>")
    True
    >>> can_parse("{}")
    False
    """
    return text.lstrip().startswith("<")


def can_parse_collection(text: str) -> bool:
    """Check whether text looks like a MARCXML collection."""
    return text.lstrip().startswith("<")


def can_parse_collection_file(
    path: Union[str, Path], config: Optional[CodecConfig] = None
) -> bool:
    """Check whether a file looks like a MARCXML collection.

    Reads short chunks of the file, skipping blank lines, and applies
    ``can_parse_collection`` to the first non-blank one.

    Raises:
        MarcXmlIOError: If the file cannot be opened for reading
    """
    config = config or DEFAULT_CONFIG
    logger = get_logger(__name__, config.correlation_id, "format_sniffer")

    try:
        with open(path, encoding="utf-8-sig", errors="replace") as f:
            while True:
                chunk = f.readline(config.sniff_read_size)
                head = chunk.lstrip()
                if head or not chunk:
                    break
    except OSError as e:
        logger.error("Cannot open file for sniffing", extra={"path": str(path)})
        raise MarcXmlIOError(str(path)) from e

    result = can_parse_collection(head)
    logger.debug("Sniffed collection file", extra={"path": str(path), "match": result})
    return result

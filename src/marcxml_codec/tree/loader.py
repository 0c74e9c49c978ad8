"""Document loading: normalized text to an lxml element tree.

Parsing is all-or-nothing. Every error lxml reports for a document is
collected into a single ``MarcXmlParseError``; no partial tree is returned.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from lxml import etree

from marcxml_codec.character import declared_encoding, to_document_bytes
from marcxml_codec.shared import (
    DEFAULT_CONFIG,
    CodecConfig,
    DiagnosticEntry,
    DiagnosticSeverity,
    MarcXmlParseError,
    get_logger,
)

# libxml2 XML_ERR_UNSUPPORTED_ENCODING
UNSUPPORTED_ENCODING_CODE = 32

_SEVERITIES = {
    etree.ErrorLevels.WARNING: DiagnosticSeverity.WARNING,
    etree.ErrorLevels.ERROR: DiagnosticSeverity.ERROR,
    etree.ErrorLevels.FATAL: DiagnosticSeverity.CRITICAL,
}


def make_parser(config: CodecConfig = DEFAULT_CONFIG) -> etree.XMLParser:
    """Create a fresh parser so that its error log belongs to one document."""
    return etree.XMLParser(
        resolve_entities=config.resolve_entities,
        huge_tree=config.huge_tree,
        no_network=True,
    )


def diagnostics_from_log(error_log: etree._ListErrorLog) -> List[DiagnosticEntry]:
    """Convert lxml log entries of error level or above to diagnostics."""
    diagnostics = []
    for entry in error_log:
        if entry.level < etree.ErrorLevels.ERROR:
            continue
        diagnostics.append(
            DiagnosticEntry(
                line=entry.line,
                column=entry.column,
                code=entry.type,
                message=entry.message.strip() or entry.type_name,
                severity=_SEVERITIES.get(entry.level, DiagnosticSeverity.ERROR),
            )
        )
    return diagnostics


@contextmanager
def collecting_errors(correlation_id: Optional[str] = None) -> Iterator[None]:
    """Raise every XML syntax error inside the block as one MarcXmlParseError.

    The capture is scoped to the block: nothing outside it changes, whether
    the block succeeds or fails.
    """
    try:
        yield
    except etree.XMLSyntaxError as e:
        diagnostics = diagnostics_from_log(e.error_log)
        if not diagnostics:
            line, column = e.position
            diagnostics = [
                DiagnosticEntry(
                    line=line or 0,
                    column=column or 0,
                    code=e.code or 0,
                    message=e.msg or "XML syntax error",
                    severity=DiagnosticSeverity.CRITICAL,
                )
            ]
        logger = get_logger(__name__, correlation_id, "document_loader")
        logger.error(
            "XML is not well-formed",
            extra={"error_count": len(diagnostics), "first_error": str(diagnostics[0])},
        )
        raise MarcXmlParseError(diagnostics) from e


def load_xml(
    text: str, config: Optional[CodecConfig] = None
) -> etree._Element:
    """Parse XML text into an element tree and return its root element.

    The prolog is normalized first so that the parser always sees an
    explicit encoding declaration.

    Args:
        text: XML document text
        config: Codec configuration

    Returns:
        Root element of the parsed document

    Raises:
        MarcXmlParseError: If the text is not well-formed XML

    Examples:
        >>> load_xml('<record><leader>00000nam</leader></record>').tag
        'record'
    """
    config = config or DEFAULT_CONFIG
    logger = get_logger(__name__, config.correlation_id, "document_loader")

    try:
        data = to_document_bytes(text)
    except LookupError as e:
        encoding = declared_encoding(text)
        logger.error("Unsupported encoding declared", extra={"encoding": encoding})
        raise MarcXmlParseError([
            DiagnosticEntry(
                line=1,
                column=1,
                code=UNSUPPORTED_ENCODING_CODE,
                message=f"Unsupported encoding {encoding}",
                severity=DiagnosticSeverity.CRITICAL,
            )
        ]) from e

    parser = make_parser(config)
    with collecting_errors(config.correlation_id):
        root = etree.fromstring(data, parser)

    for entry in parser.error_log:
        if entry.level == etree.ErrorLevels.WARNING:
            logger.warning(
                "XML parser warning",
                extra={"line": entry.line, "column": entry.column,
                       "warning": entry.message},
            )

    logger.debug("Document loaded", extra={"root": root.tag, "size": len(data)})
    return root

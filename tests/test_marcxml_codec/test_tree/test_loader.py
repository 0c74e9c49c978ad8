"""Tests for document loading and error aggregation."""

import pytest
from lxml import etree

from marcxml_codec.shared import (
    CodecConfig,
    DiagnosticSeverity,
    MarcXmlError,
    MarcXmlParseError,
)
from marcxml_codec.tree.loader import (
    UNSUPPORTED_ENCODING_CODE,
    collecting_errors,
    load_xml,
)


class TestLoadXml:
    """Test successful document loading."""

    def test_loads_without_prolog(self):
        root = load_xml("<record><leader>00000nam</leader></record>")

        assert root.tag == "record"
        assert root[0].text == "00000nam"

    def test_loads_prolog_without_encoding(self):
        root = load_xml('<?xml version="1.0"?><record/>')

        assert root.tag == "record"

    def test_loads_declared_non_utf8_encoding(self):
        root = load_xml(
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            "<record><leader>café</leader></record>"
        )

        assert root[0].text == "café"

    def test_keeps_namespace(self):
        root = load_xml('<collection xmlns="http://www.loc.gov/MARC21/slim"/>')

        assert etree.QName(root).namespace == "http://www.loc.gov/MARC21/slim"

    def test_accepts_config(self):
        root = load_xml("<record/>", CodecConfig(huge_tree=True))

        assert root.tag == "record"


class TestLoadXmlErrors:
    """Test that malformed input fails as a whole."""

    def test_malformed_input_raises_parse_error(self):
        with pytest.raises(MarcXmlParseError) as exc_info:
            load_xml("<record><record")

        diagnostics = exc_info.value.diagnostics
        assert len(diagnostics) >= 1
        assert all(d.line > 0 for d in diagnostics)
        assert isinstance(exc_info.value, MarcXmlError)

    def test_message_lists_every_diagnostic(self):
        with pytest.raises(MarcXmlParseError) as exc_info:
            load_xml("<record><a></b></record>")

        error = exc_info.value
        lines = str(error).split("\n")
        assert len(lines) == len(error.diagnostics)
        assert lines[0].startswith(f"[{error.diagnostics[0].line}:")
        assert "Error" in lines[0]

    def test_diagnostics_are_errors_or_fatal(self):
        with pytest.raises(MarcXmlParseError) as exc_info:
            load_xml("<record>")

        for diagnostic in exc_info.value.diagnostics:
            assert diagnostic.severity in (
                DiagnosticSeverity.ERROR,
                DiagnosticSeverity.CRITICAL,
            )

    def test_empty_input_raises_parse_error(self):
        with pytest.raises(MarcXmlParseError):
            load_xml("")

    def test_unknown_encoding_raises_parse_error(self):
        with pytest.raises(MarcXmlParseError) as exc_info:
            load_xml('<?xml version="1.0" encoding="x-no-such-codec"?><record/>')

        assert exc_info.value.diagnostics[0].code == UNSUPPORTED_ENCODING_CODE

    def test_loader_usable_after_failure(self):
        with pytest.raises(MarcXmlParseError):
            load_xml("<record>")

        assert load_xml("<record/>").tag == "record"


class TestCollectingErrors:
    """Test the scoped syntax error conversion."""

    def test_converts_syntax_error(self):
        with pytest.raises(MarcXmlParseError) as exc_info:
            with collecting_errors():
                etree.fromstring(b"<a><b></a>")

        assert isinstance(exc_info.value.__cause__, etree.XMLSyntaxError)

    def test_other_exceptions_pass_through(self):
        with pytest.raises(KeyError):
            with collecting_errors():
                raise KeyError("tag")

    def test_no_error_no_effect(self):
        with collecting_errors():
            root = etree.fromstring(b"<a/>")

        assert root.tag == "a"

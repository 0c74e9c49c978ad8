"""Tests for MARCXML format detection."""

import tempfile
from pathlib import Path

import pytest

from marcxml_codec.api.detection import (
    can_parse,
    can_parse_collection,
    can_parse_collection_file,
)
from marcxml_codec.shared import CodecConfig, MarcXmlIOError


class TestStringDetection:
    """Test detection on in-memory text."""

    def test_leading_whitespace_ignored(self):
        assert can_parse(" \n <record/>") is True

    def test_json_rejected(self):
        assert can_parse("{}") is False

    def test_iso2709_rejected(self):
        assert can_parse("00714cam a2200205 a 4500") is False

    def test_empty_rejected(self):
        assert can_parse("") is False
        assert can_parse_collection("   ") is False

    def test_collection_detection(self):
        assert can_parse_collection("\t<collection/>") is True
        assert can_parse_collection('[{"leader": ""}]') is False


class TestFileDetection:
    """Test detection on collection files."""

    def _write(self, content, mode="w"):
        with tempfile.NamedTemporaryFile(mode=mode, suffix=".xml", delete=False) as f:
            f.write(content)
            return Path(f.name)

    def test_xml_file(self):
        path = self._write('<?xml version="1.0"?>\n<collection/>\n')
        try:
            assert can_parse_collection_file(path) is True
        finally:
            path.unlink()

    def test_skips_blank_lines(self):
        path = self._write("\n\n   \n\n<collection/>\n")
        try:
            assert can_parse_collection_file(str(path)) is True
        finally:
            path.unlink()

    def test_long_whitespace_line(self):
        path = self._write(" " * 40 + "<collection/>\n")
        try:
            assert can_parse_collection_file(path) is True
        finally:
            path.unlink()

    def test_non_xml_file(self):
        path = self._write("\n\n[{\"leader\": \"00000nam\"}]\n")
        try:
            assert can_parse_collection_file(path) is False
        finally:
            path.unlink()

    def test_empty_file(self):
        path = self._write("")
        try:
            assert can_parse_collection_file(path) is False
        finally:
            path.unlink()

    def test_byte_order_mark(self):
        path = self._write(b"\xef\xbb\xbf<collection/>", mode="wb")
        try:
            assert can_parse_collection_file(path) is True
        finally:
            path.unlink()

    def test_small_read_size(self):
        path = self._write("          <collection/>")
        try:
            config = CodecConfig(sniff_read_size=2)
            assert can_parse_collection_file(path, config) is True
        finally:
            path.unlink()

    def test_missing_file_raises(self):
        with pytest.raises(MarcXmlIOError) as exc_info:
            can_parse_collection_file("/nonexistent/collection.xml")

        assert "Cannot open file '/nonexistent/collection.xml' for reading" in str(
            exc_info.value
        )
        assert isinstance(exc_info.value, OSError)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

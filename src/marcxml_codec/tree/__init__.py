"""Tree layer: parsing normalized XML text into an lxml element tree.

Key Components:
    load_xml: Parse a whole document, aggregating errors into one exception
    collecting_errors: Scoped conversion of lxml syntax errors to MarcXmlParseError
"""

from .loader import collecting_errors, diagnostics_from_log, load_xml, make_parser

__all__ = [
    "collecting_errors",
    "diagnostics_from_log",
    "load_xml",
    "make_parser",
]

"""XML prolog normalization.

The parser must always see an explicit encoding declaration. Text that has a
prolog without one gets ``encoding="utf-8"`` inserted; text without a prolog
gets a fresh one prepended. The normalized text is then turned into bytes in
whatever encoding the prolog declares, since lxml refuses ``str`` input that
carries an encoding declaration.
"""

import codecs
import re
from typing import Optional

XML_HEAD = "<?xml version"
DEFAULT_PROLOG = '<?xml version="1.0" encoding="utf-8"?>'
DEFAULT_ENCODING = "utf-8"

_ENCODING_RE = re.compile(r"""encoding\s*=\s*["']([A-Za-z][A-Za-z0-9._-]*)["']""")


def has_prolog(text: str) -> bool:
    """Check whether text starts with an XML declaration (case-insensitive)."""
    return text[:len(XML_HEAD)].lower() == XML_HEAD


def normalize_prolog(text: str) -> str:
    """Make sure text starts with an XML prolog that declares an encoding.

    Args:
        text: XML document text, already trimmed

    Returns:
        Text with a prolog that carries an ``encoding`` pseudo-attribute
    """
    if not has_prolog(text):
        return f"{DEFAULT_PROLOG}\n\n{text}"

    end = text.find("?>")
    if end == -1:
        # Unterminated declaration, leave it for the parser to report
        return text
    declaration = text[:end]
    if "encoding" in declaration:
        return text
    return f'{declaration} encoding="{DEFAULT_ENCODING}"{text[end:]}'


def declared_encoding(text: str) -> Optional[str]:
    """Return the encoding named in the prolog of text, if any."""
    if not has_prolog(text):
        return None
    end = text.find("?>")
    match = _ENCODING_RE.search(text[:end] if end != -1 else text)
    return match.group(1) if match else None


def to_document_bytes(text: str) -> bytes:
    """Normalize the prolog and encode text with the encoding it declares.

    Characters the declared encoding cannot represent become character
    references, which every XML parser resolves back to the same character.

    Raises:
        LookupError: If the declared encoding is unknown to Python
    """
    normalized = normalize_prolog(text)
    encoding = declared_encoding(normalized) or DEFAULT_ENCODING
    codecs.lookup(encoding)
    return normalized.encode(encoding, errors="xmlcharrefreplace")

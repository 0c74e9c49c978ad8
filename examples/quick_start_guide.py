#!/usr/bin/env python3
"""
Quick Start Guide for the MARCXML codec.

Decodes a record, edits it, encodes it again, then streams the records of a
collection file one at a time.
"""

import sys
import tempfile
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from marcxml_codec import (
    CollectionReader,
    DataField,
    Subfield,
    can_parse,
    can_parse_collection_file,
    from_string,
    to_string,
)

RECORD = """<record xmlns="http://www.loc.gov/MARC21/slim">
  <leader>00000cam a2200000 a 4500</leader>
  <controlfield tag="001">ocm00001</controlfield>
  <datafield tag="245" ind1="1" ind2="0">
    <subfield code="a">Cataloging basics</subfield>
  </datafield>
</record>"""


def record_example():
    """Decode, modify and encode one record."""
    print("Step 1: Decoding a record")
    print("-" * 30)

    assert can_parse(RECORD)
    record = from_string(RECORD)
    print(f"Leader: {record.leader}")
    for tag, entries in record.fields.items():
        print(f"{tag}: {entries}")

    record.add_field("650", DataField(" ", "0", [Subfield("a", "Metadata.")]))

    print("\nStep 2: Encoding it again")
    print("-" * 30)
    print(to_string(record.leader, record.fields))
    return record


def streaming_example(record):
    """Write a small collection file and stream it back."""
    print("Step 3: Streaming a collection file")
    print("-" * 30)

    collection = record.to_xml().replace("</collection>", RECORD + "\n</collection>")
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "collection.xml"
        path.write_text(collection, encoding="utf-8")

        assert can_parse_collection_file(path)
        with CollectionReader(path) as reader:
            for fragment in reader:
                print(from_string(fragment).fields["001"][0].value)
            print(f"Read {reader.records_read} records")


def main():
    """Main function."""
    record = record_example()
    streaming_example(record)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Tests for the record data model."""

from marcxml_codec.model import ControlField, DataField, Record, Subfield


class TestRecord:
    """Test Record behaviour."""

    def test_unpacks_to_leader_and_fields(self):
        leader, fields = Record("L", {"001": [ControlField("x")]})

        assert leader == "L"
        assert fields == {"001": [ControlField("x")]}

    def test_defaults(self):
        record = Record()

        assert record.leader == ""
        assert record.fields == {}

    def test_add_field_keeps_order(self):
        record = Record()
        record.add_field("245", DataField("1", "0"))
        record.add_field("001", ControlField("a"))
        record.add_field("245", DataField("0", "0"))

        assert list(record.fields) == ["245", "001"]
        assert [f.ind1 for f in record.fields["245"]] == ["1", "0"]


class TestDataField:
    """Test DataField behaviour."""

    def test_default_indicators(self):
        field = DataField()

        assert (field.ind1, field.ind2) == (" ", " ")
        assert field.subfields == []

    def test_subfields(self):
        field = DataField("0", "4")
        field.add_subfield("a", "one")
        field.add_subfield("b", "two")
        field.add_subfield("a", "three")

        assert field.get_subfields("a") == ["one", "three"]
        assert field.subfields[1] == Subfield("b", "two")

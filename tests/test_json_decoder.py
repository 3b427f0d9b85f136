"""Tests for the JSON object decoder."""

import pytest
from decimal import Decimal
from entrylist_json.processors.json_decoder import JsonObjectDecoder
from entrylist_json.models import TEXT_PLAIN, APPLICATION_OCTET_STREAM, ENTRY_LIST_MIME_TYPE
from entrylist_json.types import InvalidInputError, JsonKind, classify_json_value

TEXT = "text/plain; charset=UTF-8"


class TestClassifyJsonValue:
    """Tests for classify_json_value function."""

    def test_classify_kinds(self):
        """Test classification of every JSON value kind."""
        assert classify_json_value({}) is JsonKind.OBJECT
        assert classify_json_value([]) is JsonKind.ARRAY
        assert classify_json_value("s") is JsonKind.STRING
        assert classify_json_value(True) is JsonKind.TRUE
        assert classify_json_value(False) is JsonKind.FALSE
        assert classify_json_value(None) is JsonKind.NULL
        assert classify_json_value(7) is JsonKind.INTEGRAL
        assert classify_json_value(Decimal("7")) is JsonKind.INTEGRAL
        assert classify_json_value(Decimal("7.0")) is JsonKind.FRACTIONAL
        assert classify_json_value(7.5) is JsonKind.FRACTIONAL

    def test_classify_unknown_kind(self):
        """Test classification of a non-JSON value (should fail)."""
        with pytest.raises(InvalidInputError, match="Unexpected Value Type 'set'"):
            classify_json_value({1, 2})

    def test_classify_non_finite_numbers(self):
        """Test that NaN and infinity are not JSON numbers."""
        with pytest.raises(InvalidInputError):
            classify_json_value(float("nan"))
        with pytest.raises(InvalidInputError):
            classify_json_value(Decimal("Infinity"))


class TestJsonObjectDecoder:
    """Tests for JsonObjectDecoder class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.decoder = JsonObjectDecoder()

    def test_decode_sample_document(self, sample_document, read_snapshot):
        """Test decoding scalars, an array and a nested object."""
        entry_list = self.decoder.decode(sample_document)

        assert read_snapshot(entry_list) == [
            ("a", TEXT, b"1"),
            ("b", TEXT, b"2"),
            ("b", TEXT, b"3"),
            ("c", "application/vnd.entrylist+xml", [("d", TEXT, b"true")]),
        ]

    def test_decode_scalars(self, read_snapshot):
        """Test decoding each scalar kind."""
        entry_list = self.decoder.decode({
            "s": "text",
            "t": True,
            "f": False,
            "n": None,
        })

        assert read_snapshot(entry_list) == [
            ("s", TEXT, b"text"),
            ("t", TEXT, b"true"),
            ("f", TEXT, b"false"),
            ("n", "application/octet-stream", b""),
        ]

    def test_decode_content_types(self):
        """Test the content type chosen for each value kind."""
        entry_list = self.decoder.decode({"s": "x", "n": None, "o": {"k": "v"}})

        types = [entry.content_type.as_type_string() for entry in entry_list]
        assert types == [TEXT_PLAIN, APPLICATION_OCTET_STREAM, ENTRY_LIST_MIME_TYPE]

    def test_decode_large_integer_exactly(self):
        """Test that integers keep every digit."""
        entry_list = self.decoder.decode({"big": 123456789012345678901234567890})

        assert entry_list[0].read_bytes() == b"123456789012345678901234567890"

    def test_decode_decimal_exactly(self):
        """Test that Decimal values keep their textual form."""
        entry_list = self.decoder.decode({
            "price": Decimal("1.50"),
            "tiny": Decimal("0.000000000000000000001"),
            "sci": Decimal("1E+3"),
        })

        assert [e.read_bytes() for e in entry_list] == [b"1.50", b"1E-21", b"1E+3"]

    def test_decode_float(self):
        """Test decoding a float produced by a default JSON parser."""
        entry_list = self.decoder.decode({"x": 0.1})

        assert entry_list[0].read_bytes() == b"0.1"

    def test_decode_array_preserves_order(self):
        """Test that an array of N elements becomes N entries with the same name."""
        values = [str(i) for i in range(10)]
        entry_list = self.decoder.decode({"k": values})

        assert entry_list.names() == ["k"] * 10
        assert [e.read_bytes().decode() for e in entry_list] == values

    def test_decode_empty_array(self):
        """Test that an empty array produces no entries."""
        entry_list = self.decoder.decode({"before": "1", "k": [], "after": "2"})

        assert entry_list.names() == ["before", "after"]

    def test_decode_nested_arrays_are_not_special_cased(self):
        """Test that arrays inside arrays recurse with the same key."""
        entry_list = self.decoder.decode({"m": [[1, 2], [3]]})

        assert entry_list.names() == ["m", "m", "m"]
        assert [e.read_bytes() for e in entry_list] == [b"1", b"2", b"3"]

    def test_decode_objects_in_array(self, read_snapshot):
        """Test that objects inside arrays become sibling nested lists."""
        entry_list = self.decoder.decode({"items": [{"id": 1}, {"id": 2}]})

        assert read_snapshot(entry_list) == [
            ("items", "application/vnd.entrylist+xml", [("id", TEXT, b"1")]),
            ("items", "application/vnd.entrylist+xml", [("id", TEXT, b"2")]),
        ]

    def test_decode_empty_object(self, read_snapshot):
        """Test that an empty object becomes an empty nested list."""
        entry_list = self.decoder.decode({"empty": {}})

        assert read_snapshot(entry_list) == [("empty", "application/vnd.entrylist+xml", [])]

    def test_decode_preserves_property_order(self):
        """Test that entries follow property order."""
        entry_list = self.decoder.decode({"z": "1", "a": "2", "m": "3"})

        assert entry_list.names() == ["z", "a", "m"]

    def test_decode_invalid_value(self):
        """Test decoding a document with a non-JSON value (should fail)."""
        with pytest.raises(InvalidInputError, match="Unexpected Value Type 'bytes'"):
            self.decoder.decode({"bad": b"raw"})

    def test_decode_non_object(self):
        """Test decoding a non-object document (should fail)."""
        with pytest.raises(InvalidInputError, match="Expected a JSON object"):
            self.decoder.decode([1, 2, 3])

"""Tests for leaf value coercion."""

from __future__ import annotations

import pytest

from ncbi_seqmodel.errors import NumericFormatError
from ncbi_seqmodel.schema.types import (
    INT64_MAX,
    INT64_MIN,
    LeafKind,
    get_leaf_codec,
    parse_boolean,
    parse_hex,
    parse_integer,
    parse_real,
)


class TestParseInteger:
    """Tests for parse_integer."""

    def test_valid_integer(self) -> None:
        """Test parsing of valid integers."""
        for text, expected in [("0", 0), ("42", 42), ("-17", -17), ("+7", 7)]:
            assert parse_integer(text) == expected, f"{text} should parse"

    def test_surrounding_whitespace(self) -> None:
        """Test leading and trailing whitespace is tolerated."""
        assert parse_integer("  120\n") == 120

    def test_empty_is_none(self) -> None:
        """Test empty and whitespace-only text yield None."""
        assert parse_integer(None) is None
        assert parse_integer("") is None
        assert parse_integer(" \t\n ") is None

    def test_invalid_integer(self) -> None:
        """Test non-integer text raises NumericFormatError."""
        for text in ["1.5", "abc", "12a", "1 2"]:
            with pytest.raises(NumericFormatError):
                parse_integer(text)

    def test_int64_range(self) -> None:
        """Test the 64-bit signed range is enforced."""
        assert parse_integer(str(INT64_MAX)) == INT64_MAX
        assert parse_integer(str(INT64_MIN)) == INT64_MIN

        with pytest.raises(NumericFormatError):
            parse_integer(str(INT64_MAX + 1))

    def test_error_carries_path(self) -> None:
        """Test the error reports the text and path it was given."""
        with pytest.raises(NumericFormatError) as exc_info:
            parse_integer("ten", ("Seq-inst", "Seq-inst_length"))

        assert exc_info.value.text == "ten"
        assert exc_info.value.path == ("Seq-inst", "Seq-inst_length")
        assert "Seq-inst/Seq-inst_length" in str(exc_info.value)


class TestParseReal:
    """Tests for parse_real."""

    def test_valid_real(self) -> None:
        """Test parsing of valid reals."""
        assert parse_real("0.125") == 0.125
        assert parse_real("-3") == -3.0
        assert parse_real("1e-3") == 0.001

    def test_empty_is_none(self) -> None:
        """Test whitespace-only text yields None."""
        assert parse_real("   ") is None

    def test_invalid_real(self) -> None:
        """Test non-numeric text and NaN are rejected."""
        for text in ["abc", "1.2.3", "nan"]:
            with pytest.raises(NumericFormatError):
                parse_real(text)


class TestParseBoolean:
    """Tests for parse_boolean."""

    def test_valid_boolean_values(self) -> None:
        """Test the accepted spellings."""
        for text, expected in [("true", True), ("false", False), ("1", True), ("0", False), ("TRUE", True)]:
            assert parse_boolean(text) is expected, f"{text} should parse"

    def test_invalid_boolean_values(self) -> None:
        """Test other words are rejected."""
        for text in ["yes", "no", "2"]:
            with pytest.raises(NumericFormatError):
                parse_boolean(text)


class TestParseHex:
    """Tests for parse_hex."""

    def test_valid_hex(self) -> None:
        """Test parsing of hex octets in either case."""
        assert parse_hex("1B2D40") == b"\x1b\x2d\x40"
        assert parse_hex("1b2d40") == b"\x1b\x2d\x40"

    def test_internal_whitespace(self) -> None:
        """Test line breaks inside long sequence data are ignored."""
        assert parse_hex("1248\n  1248") == b"\x12\x48\x12\x48"

    def test_invalid_hex(self) -> None:
        """Test odd-length and non-hex text is rejected."""
        for text in ["ABC", "XYZW"]:
            with pytest.raises(NumericFormatError):
                parse_hex(text)


class TestLeafCodecs:
    """Tests for formatting and type checks of the leaf codecs."""

    def test_format_round_trip(self) -> None:
        """Test formatted text parses back to the same value."""
        cases = [
            (LeafKind.INTEGER, -42),
            (LeafKind.REAL, 0.1),
            (LeafKind.BOOLEAN, False),
            (LeafKind.OCTETS, b"\x00\xff"),
            (LeafKind.STRING, "Homo sapiens"),
        ]
        for kind, value in cases:
            codec = get_leaf_codec(kind)
            assert codec.parse(codec.format(value)) == value, kind

    def test_octets_format_uppercase(self) -> None:
        """Test octets are written as uppercase hex."""
        assert get_leaf_codec(LeafKind.OCTETS).format(b"\xab\x0c") == "AB0C"

    def test_integer_accepts(self) -> None:
        """Test booleans and out-of-range ints are not integers."""
        codec = get_leaf_codec(LeafKind.INTEGER)
        assert codec.accepts(5)
        assert not codec.accepts(True)
        assert not codec.accepts("5")
        assert not codec.accepts(INT64_MAX + 1)

    def test_null_accepts_only_true(self) -> None:
        """Test NULL fields hold True when present."""
        codec = get_leaf_codec(LeafKind.NULL)
        assert codec.accepts(True)
        assert not codec.accepts(False)

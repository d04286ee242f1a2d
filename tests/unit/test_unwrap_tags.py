#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for synthetic tag encoding."""
import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from clausemark.ast import Attribute, TagInfo
from clausemark.schema import SchemaValidator
from clausemark.unwrap.tags import (
    build_tag,
    format_attribute_string,
    percent_decode,
    percent_encode,
    self_closing_tag,
)

UNRESERVED = set(string.ascii_letters + string.digits + "-_.!~*'()")


@pytest.mark.unit
class TestPercentEncode:
    """Test encodeURIComponent-compatible encoding."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("a b", "a%20b"),
            ("1+1", "1%2B1"),
            ('say "hi"', "say%20%22hi%22"),
            ("<b>&</b>", "%3Cb%3E%26%3C%2Fb%3E"),
            ("$0,0.00", "%240%2C0.00"),
            ("a=b;c?d#e", "a%3Db%3Bc%3Fd%23e"),
            ("café", "caf%C3%A9"),
            ("", ""),
        ],
    )
    def test_known_values(self, value, expected) -> None:
        """Test encoding of reserved and non-ASCII characters."""
        assert percent_encode(value) == expected

    def test_unreserved_unchanged(self) -> None:
        """Test the unreserved set passes through."""
        unreserved = "AZaz09-_.!~*'()"
        assert percent_encode(unreserved) == unreserved

    def test_decode(self) -> None:
        """Test decoding reverses encoding and leaves plus signs alone."""
        assert percent_decode("1%2B1") == "1+1"
        assert percent_decode("a+b") == "a+b"


@pytest.mark.unit
@pytest.mark.fuzzing
class TestPercentEncodeProperties:
    """Property-based tests for the encoder."""

    @given(st.text())
    def test_round_trip(self, value) -> None:
        """Test decoding an encoded string gives the original."""
        assert percent_decode(percent_encode(value)) == value

    @given(st.text())
    def test_output_alphabet(self, value) -> None:
        """Test encoded text only holds unreserved characters and escapes."""
        assert set(percent_encode(value)) <= UNRESERVED | set("%0123456789ABCDEF")

    @given(st.text(), st.text())
    def test_attribute_string_quotes_balanced(self, value, fmt) -> None:
        """Test encoded values can never close the attribute quotes early."""
        attribute_string = format_attribute_string([("value", value, True), ("format", fmt, True)])

        assert attribute_string.count('"') == 4
        assert attribute_string == f'value="{percent_encode(value)}" format="{percent_encode(fmt)}"'


@pytest.mark.unit
class TestTagBuilding:
    """Test attribute strings and tag records."""

    def test_attribute_string(self) -> None:
        """Test identifier attributes are written verbatim."""
        result = format_attribute_string([("id", "x", False), ("value", "a b", True)])
        assert result == 'id="x" value="a%20b"'

    def test_empty_attribute_string(self) -> None:
        """Test no attributes give an empty string."""
        assert format_attribute_string([]) == ""

    def test_self_closing_tag(self) -> None:
        """Test self-closing tags with and without attributes."""
        assert self_closing_tag("list") == "<list/>"
        assert self_closing_tag("computed", 'value="1%2B1"') == '<computed value="1%2B1"/>'

    def test_build_tag_validates(self) -> None:
        """Test built records validate into tag descriptors."""
        record = build_tag("variable", 'id="x" value="a%20b"', closed=True, attributes=[("id", "x"), ("value", "a b")])
        tag = SchemaValidator().from_dict(record, expected=TagInfo)

        assert tag == TagInfo(
            tag_name="variable",
            attribute_string='id="x" value="a%20b"',
            content="",
            closed=True,
            attributes=[Attribute(name="id", value="x"), Attribute(name="value", value="a b")],
        )

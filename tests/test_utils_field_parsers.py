"""
Tests for feed field parsing helpers.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from audioscrobbler.utils.field_parsers import escape_segment, parse_flag, parse_number, text_value


class TestTextValue:
    """Tests for text_value function."""

    def test_plain_string(self):
        """Test that strings are stripped."""
        assert text_value("  Metallica \n") == "Metallica"

    def test_blank_is_none(self):
        """Test that blank text reads as missing."""
        assert text_value("   ") is None
        assert text_value(None) is None

    def test_content_mapping(self):
        """Test reading text stored under content."""
        assert text_value({"mbid": "x", "content": "Slayer"}) == "Slayer"

    def test_name_mapping(self):
        """Test reading a mapping through its name."""
        assert text_value({"name": "Slayer", "url": "http://x"}) == "Slayer"

    def test_mapping_without_text(self):
        """Test that a mapping without text reads as missing."""
        assert text_value({"url": "http://x"}) is None

    def test_number(self):
        """Test that numbers become strings."""
        assert text_value(42) == "42"


class TestParseFlag:
    """Tests for parse_flag function."""

    @pytest.mark.parametrize("value", ["1", "yes", "YES", "true", " True ", True])
    def test_true_values(self, value):
        """Test values read as true."""
        assert parse_flag(value) is True

    @pytest.mark.parametrize("value", ["0", "no", "false", False])
    def test_false_values(self, value):
        """Test values read as false."""
        assert parse_flag(value) is False

    @pytest.mark.parametrize("value", [None, "", "maybe"])
    def test_unknown_values(self, value):
        """Test that unknown values are None."""
        assert parse_flag(value) is None


class TestParseNumber:
    """Tests for parse_number function."""

    def test_numeric_strings(self):
        """Test numeric text."""
        assert parse_number("87") == 87.0
        assert parse_number(" 64.5 ") == 64.5

    def test_numbers(self):
        """Test native numbers."""
        assert parse_number(3) == 3.0
        assert parse_number(2.5) == 2.5

    @pytest.mark.parametrize("value", [None, "", "n/a", True, {"url": "x"}])
    def test_not_numbers(self, value):
        """Test values that are not numbers."""
        assert parse_number(value) is None


class TestEscapeSegment:
    """Tests for escape_segment function."""

    def test_spaces(self):
        """Test that spaces are percent-escaped."""
        assert escape_segment("thrash metal") == "thrash%20metal"

    def test_slash(self):
        """Test that slashes cannot split the path."""
        assert escape_segment("AC/DC") == "AC%2FDC"

    def test_unicode(self):
        """Test UTF-8 escaping."""
        assert escape_segment("Björk") == "Bj%C3%B6rk"

    def test_plain(self):
        """Test that unreserved characters are untouched."""
        assert escape_segment("Metallica") == "Metallica"

    @pytest.mark.parametrize("segment,expected", [
        ("Guns N' Roses", "Guns%20N'%20Roses"),
        ("(hed) p.e.", "(hed)%20p.e."),
        ("Panic! at the Disco", "Panic!%20at%20the%20Disco"),
        ("*NSYNC", "*NSYNC"),
    ])
    def test_marks_stay_literal(self, segment, expected):
        """Test that apostrophes, parentheses, bangs and stars are not escaped."""
        assert escape_segment(segment) == expected

"""Tests for property value conversions."""

import sys

import pytest
from registryconfig.conversions import parse_bool, parse_int, to_property_string
from registryconfig.exceptions import FormatError


class TestToPropertyString:
    """Test cases for to_property_string."""

    def test_int(self):
        assert to_property_string(500) == "500"
        assert to_property_string(-3) == "-3"

    def test_str_unchanged(self):
        assert to_property_string("http://a:8081") == "http://a:8081"

    def test_bool_lowercase(self):
        assert to_property_string(True) == "true"
        assert to_property_string(False) == "false"


class TestParseInt:
    """Test cases for parse_int."""

    @pytest.mark.parametrize("raw, expected", [
        ("0", 0),
        ("30000", 30000),
        ("-1", -1),
        ("+7", 7),
        (" 42 ", 42),
        ("007", 7),
    ])
    def test_valid(self, raw, expected):
        assert parse_int("key", raw) == expected

    @pytest.mark.parametrize("raw", ["", " ", "notanumber", "1.5", "1e3", "1_000", "0x10", "12abc"])
    def test_invalid(self, raw):
        with pytest.raises(FormatError) as exc_info:
            parse_int("schema.registry.request.timeout.ms", raw)

        assert "schema.registry.request.timeout.ms" in str(exc_info.value)

    def test_too_many_digits(self):
        """Test that digit strings over the interpreter limit raise FormatError."""
        limit = sys.get_int_max_str_digits()
        if limit == 0:
            pytest.skip("int/str digit limit disabled")

        with pytest.raises(FormatError, match="too long"):
            parse_int("schema.registry.max.cached.schemas", "1" * (limit + 1))


class TestParseBool:
    """Test cases for parse_bool."""

    @pytest.mark.parametrize("raw, expected", [
        ("true", True),
        ("True", True),
        ("TRUE", True),
        ("false", False),
        (" False ", False),
    ])
    def test_valid(self, raw, expected):
        assert parse_bool("key", raw) is expected

    @pytest.mark.parametrize("raw", ["", "1", "0", "yes", "no", "t"])
    def test_invalid(self, raw):
        with pytest.raises(FormatError):
            parse_bool("key", raw)

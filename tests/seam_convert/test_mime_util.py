"""
Tests for charset parsing
"""
import pytest

from seam_convert.mime import parse_charset


class TestParseCharset:
    """Test charset extraction from MIME types"""

    @pytest.mark.parametrize("mime_type,expected", [
        ("application/json; charset=ISO-8859-1", "ISO-8859-1"),
        ("application/json;charset=utf-8", "utf-8"),
        ("text/html; CHARSET=UTF-16; boundary=x", "UTF-16"),
        ('application/json; charset="windows-1252"', "windows-1252"),
        ("application/json; charset=UTF-8 ", "UTF-8"),
    ])
    def test_charset_present(self, mime_type, expected):
        """Test charset parameter is extracted"""
        assert parse_charset(mime_type, "UTF-8") == expected

    @pytest.mark.parametrize("mime_type", [
        "application/json",
        "text/plain; format=flowed",
        "",
        "charset=ISO-8859-1",
    ])
    def test_charset_absent_uses_default(self, mime_type):
        """Test default is returned when no charset parameter is found"""
        assert parse_charset(mime_type, "US-ASCII") == "US-ASCII"

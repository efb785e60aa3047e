"""Tests for URL parsing helpers."""

import pytest

from quicklaunch.core.errors import InvalidUrlError
from quicklaunch.core.urls import host_of, is_absolute_url, parse_absolute_url, query_param


class TestParseAbsoluteUrl:
    """Tests for parse_absolute_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://mail.google.com/#inbox",
            "http://localhost:8080/path?x=1",
            "https://example.com",
        ],
    )
    def test_accepts_absolute_urls(self, url: str):
        """Test absolute URLs parse."""
        assert parse_absolute_url(url).hostname

    @pytest.mark.parametrize("url", ["", "   "])
    def test_missing_url(self, url: str):
        """Test empty input is reported as missing."""
        with pytest.raises(InvalidUrlError, match="No URL provided"):
            parse_absolute_url(url)

    @pytest.mark.parametrize(
        "url",
        ["example.com", "/relative/path", "mailto:", "https://", "http://host:notaport/"],
    )
    def test_rejects_non_absolute(self, url: str):
        """Test URLs without scheme or host are rejected."""
        with pytest.raises(InvalidUrlError, match="Invalid URL"):
            parse_absolute_url(url)

    def test_invalid_url_error_is_value_error(self):
        """Test InvalidUrlError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_absolute_url("nope")


def test_is_absolute_url():
    """Test boolean wrapper."""
    assert is_absolute_url("https://a.example")
    assert not is_absolute_url("a.example")


def test_host_of_lowercases_and_drops_port():
    """Test host extraction."""
    assert host_of("https://Mail.Google.COM:443/x") == "mail.google.com"


class TestQueryParam:
    """Tests for query_param."""

    def test_first_value(self):
        """Test the first occurrence wins."""
        assert query_param("https://a.example/?continue=x&continue=y", "continue") == "x"

    def test_decoded(self):
        """Test values are percent-decoded."""
        url = "https://a.example/?continue=https%3A%2F%2Fmail.google.com%2Fmail%2F"
        assert query_param(url, "continue") == "https://mail.google.com/mail/"

    def test_blank_and_missing(self):
        """Test blank values are kept and missing ones are None."""
        assert query_param("https://a.example/?continue=", "continue") == ""
        assert query_param("https://a.example/", "continue") is None

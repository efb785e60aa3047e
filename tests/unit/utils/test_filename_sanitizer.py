"""Tests for sanitize_for_filename."""

import pytest

from quicklaunch.core.utils.formatting import sanitize_for_filename


@pytest.mark.parametrize(
    "text,expected",
    [
        ("My Site! <3", "my-site!-3"),
        ("mail.google.com", "mail.google.com"),
        ("  padded  ", "padded"),
        ("a   b\t\nc", "a-b-c"),
        ('a/b\\c?d%e*f:g|h"i<j>k', "abcdefghijk"),
        ("Work Inbox", "work-inbox"),
        ("", ""),
        ("///", ""),
    ],
)
def test_sanitize_for_filename(text: str, expected: str):
    """Test illegal characters are dropped and whitespace becomes dashes."""
    assert sanitize_for_filename(text) == expected


@pytest.mark.parametrize(
    "text",
    ["My Site! <3", "  Hello   World  ", "a : b", "ÄÖÜ Straße", "x\ty"],
)
def test_sanitize_is_idempotent(text: str):
    """Test sanitizing twice gives the same result as once."""
    once = sanitize_for_filename(text)
    assert sanitize_for_filename(once) == once


@pytest.mark.parametrize("text", ["My Site! <3", "A/B:C", "  Spaced Out  ", "TAB\tHERE"])
def test_sanitized_output_has_no_illegal_characters(text: str):
    """Test output contains no illegal characters, whitespace or uppercase."""
    result = sanitize_for_filename(text)
    assert not set(result) & set('/\\?%*:|"<>')
    assert not any(ch.isspace() for ch in result)
    assert result == result.lower()


def test_no_length_limit():
    """Test long input is not truncated."""
    text = "a" * 500
    assert sanitize_for_filename(text) == text

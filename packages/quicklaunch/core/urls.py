"""URL parsing helpers.

Only absolute URLs (scheme + host) are accepted anywhere in QuickLaunch.
"""

from __future__ import annotations

from urllib.parse import SplitResult, parse_qs, urlsplit

from quicklaunch.core.errors import InvalidUrlError


def parse_absolute_url(url: str) -> SplitResult:
    """Parse ``url`` and require it to be absolute.

    Args:
        url: Candidate URL string

    Returns:
        Split URL components

    Raises:
        InvalidUrlError: If the URL has no scheme or host, or cannot be parsed

    Example:
        >>> parse_absolute_url("https://mail.google.com/#inbox").hostname
        'mail.google.com'
    """
    if not url or not url.strip():
        raise InvalidUrlError("No URL provided.")

    try:
        parts = urlsplit(url.strip())
        # Accessing .port validates the port component
        _ = parts.port
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL: {url}") from e

    if not parts.scheme or not parts.hostname:
        raise InvalidUrlError(f"Invalid URL: {url}")
    return parts


def is_absolute_url(url: str) -> bool:
    """Return True when ``url`` parses as an absolute URL."""
    try:
        parse_absolute_url(url)
    except InvalidUrlError:
        return False
    return True


def host_of(url: str) -> str:
    """Return the lowercased host of an absolute URL (port excluded)."""
    hostname = parse_absolute_url(url).hostname
    # parse_absolute_url guarantees a hostname
    assert hostname is not None
    return hostname


def query_param(url: str, name: str) -> str | None:
    """Return the first value of query parameter ``name`` in ``url``, if any."""
    values = parse_qs(urlsplit(url).query, keep_blank_values=True).get(name)
    if not values:
        return None
    return values[0]

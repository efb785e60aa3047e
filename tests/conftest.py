"""Shared pytest fixtures for quicklaunch tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from quicklaunch.core.io import AbsolutePath, FakeFileSystem, absolute_path

FAVICON_HOST = "t0.gstatic.com"

Handler = Callable[[httpx.Request], httpx.Response]

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def out_root() -> AbsolutePath:
    """Output root used with the in-memory filesystem."""
    return absolute_path("/out")


# ============================================================================
# Filesystem Fixtures
# ============================================================================


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Provide fresh FakeFileSystem instance."""
    return FakeFileSystem()


# ============================================================================
# HTTP Fixtures
# ============================================================================


def _icon_bytes(size: int) -> bytes:
    """Fake PNG payload tagged with its size."""
    return b"\x89PNG-" + str(size).encode()


def site_handler(
    pages: dict[str, tuple[int, dict[str, str]]] | None = None,
    *,
    failing_sizes: frozenset[int] = frozenset(),
    icon_status: int = 404,
    calls: list[httpx.Request] | None = None,
) -> Handler:
    """Build a MockTransport handler serving pages and favicons.

    Pages map a host to (status, headers); unknown hosts answer 200. Favicon
    requests answer with a fake PNG tagged with the size unless the size is failing.
    """
    pages = pages or {}

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if request.url.host == FAVICON_HOST:
            size = int(request.url.params["size"])
            if size in failing_sizes:
                return httpx.Response(icon_status, text="not found")
            return httpx.Response(200, content=_icon_bytes(size))
        status, headers = pages.get(request.url.host, (200, {}))
        return httpx.Response(status, headers=headers, text="<html></html>")

    return handler


@pytest.fixture
def transport_factory() -> Callable[..., httpx.MockTransport]:
    """Factory for MockTransports built with ``site_handler``."""

    def _make(**kwargs) -> httpx.MockTransport:
        return httpx.MockTransport(site_handler(**kwargs))

    return _make

"""Favicon acquisition for generated extensions."""

from quicklaunch.core.icons.acquire import acquire_icons
from quicklaunch.core.icons.favicon import FaviconService
from quicklaunch.core.icons.models import FetchResult, err_result, ok_result
from quicklaunch.core.icons.policy import AbortOnFirstFailure, FetchPolicy

__all__ = [
    "AbortOnFirstFailure",
    "FaviconService",
    "FetchPolicy",
    "FetchResult",
    "acquire_icons",
    "err_result",
    "ok_result",
]

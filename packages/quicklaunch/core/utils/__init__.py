"""Shared utilities for QuickLaunch."""

from quicklaunch.core.utils.formatting import sanitize_for_filename
from quicklaunch.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "sanitize_for_filename",
    "configure_logging",
    "get_logger",
    "StructuredJSONFormatter",
]

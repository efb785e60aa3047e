"""Filesystem abstraction layer for QuickLaunch.

Example:
    >>> from quicklaunch.core.io import RealFileSystem, absolute_path
    >>> fs = RealFileSystem()
    >>> path = fs.join(absolute_path("/tmp"), "quick-launch-example.com", "manifest.json")
    >>> await fs.write_text(path, "{}")
"""

from .impl_fake import FakeFileSystem
from .impl_real import RealFileSystem
from .models import AbsolutePath, WriteResult, absolute_path
from .protocols import FileSystem

__all__ = [
    "AbsolutePath",
    "absolute_path",
    "WriteResult",
    "FileSystem",
    "RealFileSystem",
    "FakeFileSystem",
]

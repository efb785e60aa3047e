"""Protocol for the async filesystem operations the generator needs."""

from typing import Protocol

from .models import AbsolutePath, WriteResult


class FileSystem(Protocol):
    """
    Protocol for async filesystem operations.

    Writes replace the whole file. There is no multi-file transaction:
    a failure part-way through a generation leaves earlier files in place.
    """

    def join(self, base: AbsolutePath, *parts: str) -> AbsolutePath:
        """
        Safely join path components.

        Raises:
            ValueError: If result escapes base directory
        """
        ...

    async def exists(self, path: AbsolutePath) -> bool:
        """Check if path exists (file or directory)."""
        ...

    async def is_dir(self, path: AbsolutePath) -> bool:
        """Check if path exists and is a directory."""
        ...

    async def write_text(
        self,
        path: AbsolutePath,
        content: str,
        encoding: str = "utf-8",
    ) -> WriteResult:
        """Write text to a file, replacing any previous content."""
        ...

    async def write_bytes(self, path: AbsolutePath, content: bytes) -> WriteResult:
        """Write binary content to a file, replacing any previous content."""
        ...

    async def mkdirs(self, path: AbsolutePath, exist_ok: bool = True) -> None:
        """
        Create directory and parents.

        Raises:
            FileExistsError: If the directory exists and exist_ok is False
        """
        ...

"""In-memory filesystem for fast, isolated testing.

Simulates filesystem operations without disk I/O.
Async operations complete immediately but maintain async interface.
"""

from pathlib import Path

from .models import AbsolutePath, WriteResult


class FakeFileSystem:
    """
    In-memory async filesystem for testing.

    Not thread-safe (use per-test instance). Paths listed in
    ``fail_writes_to`` raise PermissionError on write, to exercise
    write-failure handling.
    """

    def __init__(self, fail_writes_to: set[str] | None = None) -> None:
        self._files: dict[str, bytes] = {}
        self._dirs: set[str] = {"/"}  # Root always exists
        self.fail_writes_to: set[str] = set(fail_writes_to or ())

    def join(self, base: AbsolutePath, *parts: str) -> AbsolutePath:
        """Join paths (sync - no I/O)."""
        result = Path(base).joinpath(*parts)
        if not result.is_absolute():
            result = Path("/") / result
        return AbsolutePath(result)

    async def exists(self, path: AbsolutePath) -> bool:
        """Check existence (async, immediate)."""
        path_str = str(Path(path))
        return path_str in self._files or path_str in self._dirs

    async def is_dir(self, path: AbsolutePath) -> bool:
        """Check if directory (async, immediate)."""
        return str(Path(path)) in self._dirs

    def read_bytes(self, path: AbsolutePath | str) -> bytes:
        """Return stored bytes (sync helper for assertions)."""
        path_str = str(Path(path))
        if path_str not in self._files:
            raise FileNotFoundError(f"File not found: {path}")
        return self._files[path_str]

    def files(self) -> list[str]:
        """Return all stored file paths, sorted."""
        return sorted(self._files)

    async def write_text(
        self,
        path: AbsolutePath,
        content: str,
        encoding: str = "utf-8",
    ) -> WriteResult:
        """Write text (async, immediate)."""
        return self._store(path, content.encode(encoding))

    async def write_bytes(self, path: AbsolutePath, content: bytes) -> WriteResult:
        """Write bytes (async, immediate)."""
        return self._store(path, content)

    async def mkdirs(self, path: AbsolutePath, exist_ok: bool = True) -> None:
        """Create directory (async, immediate)."""
        path_str = str(Path(path))
        if not exist_ok and path_str in self._dirs:
            raise FileExistsError(f"Directory exists: {path}")
        self._ensure_parents(Path(path))

    def _store(self, path: AbsolutePath, payload: bytes) -> WriteResult:
        path_obj = Path(path)
        path_str = str(path_obj)
        if path_str in self.fail_writes_to:
            raise PermissionError(f"Permission denied: {path}")

        self._ensure_parents(path_obj.parent)
        self._files[path_str] = payload

        return WriteResult(path=path_str, bytes_written=len(payload), duration_ms=0.0)

    def _ensure_parents(self, path: Path) -> None:
        """Create ``path`` and all of its parents (sync helper)."""
        parts = path.parts
        for i in range(1, len(parts) + 1):
            self._dirs.add(str(Path(*parts[:i])))

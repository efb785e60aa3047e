"""Real filesystem implementation using aiofiles for async I/O.

Each file is written via temp file + os.replace(), so a single artifact is
never observed half-written. The artifact set as a whole is not atomic.
"""

import asyncio
import contextlib
import os
import time
from pathlib import Path
from tempfile import NamedTemporaryFile

import aiofiles  # type: ignore[import-untyped]
import aiofiles.os  # type: ignore[import-untyped]

from .models import AbsolutePath, WriteResult


def _create_temp_file(parent: Path) -> str:
    tmp = NamedTemporaryFile(mode="wb", dir=parent, delete=False)
    tmp_path = tmp.name
    tmp.close()
    return tmp_path


class RealFileSystem:
    """
    Real filesystem implementation using aiofiles for async I/O.

    Provides per-file atomic writes via temp file + os.replace().
    """

    def join(self, base: AbsolutePath, *parts: str) -> AbsolutePath:
        """Join paths (sync - no I/O)."""
        result = Path(base).joinpath(*parts).resolve()

        # Security: Ensure result is still under base
        base_resolved = Path(base).resolve()
        try:
            result.relative_to(base_resolved)
        except ValueError as e:
            raise ValueError(f"Path traversal detected: {result} escapes {base}") from e

        return AbsolutePath(result)

    async def exists(self, path: AbsolutePath) -> bool:
        """Check existence asynchronously."""
        return bool(await aiofiles.os.path.exists(path))

    async def is_dir(self, path: AbsolutePath) -> bool:
        """Check if directory asynchronously."""
        return bool(await aiofiles.os.path.isdir(path))

    async def write_text(
        self,
        path: AbsolutePath,
        content: str,
        encoding: str = "utf-8",
    ) -> WriteResult:
        """Atomically write text file asynchronously."""
        return await self._write(path, content.encode(encoding))

    async def write_bytes(self, path: AbsolutePath, content: bytes) -> WriteResult:
        """Atomically write binary file asynchronously."""
        return await self._write(path, content)

    async def mkdirs(self, path: AbsolutePath, exist_ok: bool = True) -> None:
        """Create directory and parents asynchronously."""
        await aiofiles.os.makedirs(path, exist_ok=exist_ok)

    async def _write(self, path: AbsolutePath, payload: bytes) -> WriteResult:
        start = time.perf_counter()
        path_obj = Path(path)

        await aiofiles.os.makedirs(path_obj.parent, exist_ok=True)

        # Temp file lives in the target directory so os.replace stays atomic
        tmp_path = await asyncio.to_thread(_create_temp_file, path_obj.parent)
        try:
            async with aiofiles.open(tmp_path, mode="wb") as f:
                await f.write(payload)
            await asyncio.to_thread(os.replace, tmp_path, str(path))
        except BaseException:
            with contextlib.suppress(OSError):
                await aiofiles.os.unlink(tmp_path)
            raise

        return WriteResult(
            path=str(path),
            bytes_written=len(payload),
            duration_ms=(time.perf_counter() - start) * 1000,
        )

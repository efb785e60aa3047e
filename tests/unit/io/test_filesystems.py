"""Tests for RealFileSystem (on tmp_path) and FakeFileSystem."""

from __future__ import annotations

from pathlib import Path

import pytest

from quicklaunch.core.io import AbsolutePath, FakeFileSystem, RealFileSystem, absolute_path


@pytest.fixture
def real_fs() -> RealFileSystem:
    return RealFileSystem()


@pytest.fixture
def root(tmp_path: Path) -> AbsolutePath:
    return absolute_path(tmp_path)


class TestRealFileSystem:
    """Tests for RealFileSystem."""

    def test_join_stays_under_base(self, real_fs: RealFileSystem, root: AbsolutePath):
        """Test joining a normal name."""
        assert real_fs.join(root, "a", "b.txt") == Path(root) / "a" / "b.txt"

    def test_join_rejects_traversal(self, real_fs: RealFileSystem, root: AbsolutePath):
        """Test '..' cannot escape the base directory."""
        with pytest.raises(ValueError, match="Path traversal"):
            real_fs.join(root, "..", "elsewhere")

    async def test_write_text_creates_parents(self, real_fs: RealFileSystem, root: AbsolutePath):
        """Test text round-trips and parents are created."""
        path = real_fs.join(root, "nested", "manifest.json")
        result = await real_fs.write_text(path, '{"a": 1}')

        assert result.bytes_written == len('{"a": 1}')
        assert Path(path).read_text(encoding="utf-8") == '{"a": 1}'
        assert await real_fs.is_dir(real_fs.join(root, "nested"))

    async def test_write_bytes_replaces(self, real_fs: RealFileSystem, root: AbsolutePath):
        """Test a second write replaces the file and leaves no temp files."""
        path = real_fs.join(root, "icon-64.png")
        await real_fs.write_bytes(path, b"first")
        await real_fs.write_bytes(path, b"second")

        assert Path(path).read_bytes() == b"second"
        assert [p.name for p in Path(root).iterdir()] == ["icon-64.png"]

    async def test_mkdirs_exist_ok(self, real_fs: RealFileSystem, root: AbsolutePath):
        """Test exist_ok controls re-creation."""
        path = real_fs.join(root, "out")
        await real_fs.mkdirs(path)
        await real_fs.mkdirs(path, exist_ok=True)
        with pytest.raises(FileExistsError):
            await real_fs.mkdirs(path, exist_ok=False)

    async def test_exists(self, real_fs: RealFileSystem, root: AbsolutePath):
        assert await real_fs.exists(root)
        assert not await real_fs.exists(real_fs.join(root, "missing"))


class TestFakeFileSystem:
    """Tests for the in-memory fake."""

    async def test_write_creates_parents(self, fake_fs: FakeFileSystem):
        """Test parent directories appear on write."""
        path = fake_fs.join(absolute_path("/out"), "ext", "background.js")
        await fake_fs.write_text(path, "x")

        assert await fake_fs.is_dir(absolute_path("/out/ext"))
        assert fake_fs.files() == ["/out/ext/background.js"]
        assert fake_fs.read_bytes(path) == b"x"

    async def test_fail_writes_to(self):
        """Test configured paths raise PermissionError on write."""
        fs = FakeFileSystem(fail_writes_to={"/out/icon-64.png"})
        with pytest.raises(PermissionError):
            await fs.write_bytes(absolute_path("/out/icon-64.png"), b"x")
        assert fs.files() == []

    def test_read_missing(self, fake_fs: FakeFileSystem):
        with pytest.raises(FileNotFoundError):
            fake_fs.read_bytes("/nope.txt")

    async def test_mkdirs_not_exist_ok(self, fake_fs: FakeFileSystem):
        """Test exist_ok=False mirrors os.makedirs."""
        await fake_fs.mkdirs(absolute_path("/out"))
        with pytest.raises(FileExistsError):
            await fake_fs.mkdirs(absolute_path("/out"), exist_ok=False)

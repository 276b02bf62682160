"""
Unit tests for scratch output file generation.
"""
import pytest

from video_tools.services import cache_manager
from video_tools.services.cache_manager import generate_file


class TestGenerateFile:
    """Tests for generate_file."""

    @pytest.mark.asyncio
    async def test_generates_path_with_extension(self, tmp_path):
        path = await generate_file("mp4", cache_dir=tmp_path)
        assert path.startswith(str(tmp_path.resolve()))
        assert path.endswith(".mp4")

    @pytest.mark.asyncio
    async def test_creates_missing_directory(self, tmp_path):
        cache_dir = tmp_path / "nested" / "cache"
        path = await generate_file("mkv", cache_dir=cache_dir)
        assert cache_dir.is_dir()
        assert path is not None

    @pytest.mark.asyncio
    async def test_unusable_directory_returns_none(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        assert await generate_file("mp4", cache_dir=blocker / "cache") is None

    @pytest.mark.asyncio
    async def test_gives_up_when_names_collide(self, tmp_path, monkeypatch):
        (tmp_path / "taken.mp4").write_text("")
        monkeypatch.setattr(cache_manager, "generate_random_string", lambda: "taken")
        assert await generate_file("mp4", cache_dir=tmp_path) is None

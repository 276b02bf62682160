"""
Unit tests for command construction.
"""
import shlex

import pytest

from video_tools.domain.enums import Preset
from video_tools.services.command_builder import (
    build_compress_arguments,
    build_compress_command,
    build_size_probe_command,
)


class TestBuildCompressCommand:
    """Tests for the compression command string."""

    def test_argument_order(self):
        command = build_compress_command("/a/in.mp4", "18", "veryslow", None, "/a/out.mp4")
        assert command == "-i /a/in.mp4 -c:v libx264 -crf 18 -preset veryslow /a/out.mp4"

    def test_bitrate_goes_before_output(self):
        command = build_compress_command("/a/in.mp4", "18", "veryslow", "1M", "/a/out.mp4")
        assert command == "-i /a/in.mp4 -c:v libx264 -crf 18 -preset veryslow bitrate 1M /a/out.mp4"

    def test_missing_preset_uses_default(self):
        command = build_compress_command("/a/in.mp4", "14", None, None, "/a/out.mp4")
        assert "-preset veryslow" in command

    def test_enum_preset_is_rendered_as_value(self):
        command = build_compress_command("/a/in.mp4", "22", Preset.FAST, None, "/a/out.mp4")
        assert "-preset fast" in command

    def test_arguments_are_ordered_pairs(self):
        pairs = build_compress_arguments("/a/in.mp4", "18", "slow", "2M")
        assert pairs == [
            ("-i", "/a/in.mp4"),
            ("-c:v", "libx264"),
            ("-crf", "18"),
            ("-preset", "slow"),
            ("bitrate", "2M"),
        ]


def test_size_probe_command():
    assert build_size_probe_command("/a/in.mp4") == (
        '-i "/a/in.mp4" -v error -select_streams v:0 -show_entries format=size '
        "-show_entries stream=size,width,height -of json"
    )


class TestQuoting:
    """Paths with shell-special characters must come back from shlex as single arguments."""

    def test_paths_with_spaces(self):
        command = build_compress_command("/videos/my clip.mp4", "18", "veryslow", None, "/out/my out.mp4")
        assert shlex.split(command) == [
            "-i", "/videos/my clip.mp4",
            "-c:v", "libx264",
            "-crf", "18",
            "-preset", "veryslow",
            "/out/my out.mp4",
        ]

    def test_paths_with_apostrophe(self):
        command = build_compress_command("/videos/john's.mp4", "14", None, "1M", "/out/john's.mp4")
        args = shlex.split(command)
        assert args[1] == "/videos/john's.mp4"
        assert args[-3:] == ["bitrate", "1M", "/out/john's.mp4"]

    @pytest.mark.parametrize(
        "path",
        ['/videos/say "hi".mp4', "/videos/back\\slash.mp4", "/videos/my clip's.mp4"],
    )
    def test_size_probe_path_survives_splitting(self, path):
        args = shlex.split(build_size_probe_command(path))
        assert args[:2] == ["-i", path]
        assert args[-2:] == ["-of", "json"]

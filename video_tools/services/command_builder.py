"""
Builds the command strings sent to the FFmpeg engine.

Arguments are kept as an ordered list of (flag, value) pairs. FFmpeg reads its
arguments sequentially, so the order in which pairs are appended is part of the
command's meaning and must never be sorted or deduplicated.
"""
import shlex
from typing import List, Optional, Tuple

from ..config.video import (
    BITRATE_KEY,
    CRF_FLAG,
    DEFAULT_PRESET,
    INPUT_FLAG,
    PRESET_FLAG,
    VIDEO_CODEC,
    VIDEO_CODEC_FLAG,
)
from ..domain.enums import Preset

ArgumentPairs = List[Tuple[str, str]]


def build_compress_arguments(
    input_path: str,
    crf: str,
    preset: Preset | str | None = None,
    bitrate: Optional[str] = None,
) -> ArgumentPairs:
    """
    Returns the ordered (flag, value) pairs of a compression command.

    The input comes first, then codec, CRF and preset. The bitrate pair is only
    appended when a bitrate is given. A missing preset falls back to the default one.
    """
    pairs: ArgumentPairs = [
        (INPUT_FLAG, input_path),
        (VIDEO_CODEC_FLAG, VIDEO_CODEC),
        (CRF_FLAG, crf),
        (PRESET_FLAG, str(preset or DEFAULT_PRESET)),
    ]
    if bitrate:
        pairs.append((BITRATE_KEY, bitrate))
    return pairs


def serialize_command(pairs: ArgumentPairs, output_path: str) -> str:
    """
    Joins the pairs and the trailing, unflagged output path with single spaces.

    Values and the output path are shell-quoted so that the engine splits them back
    into single arguments. Paths without special characters are left unchanged.
    """
    cmd: List[str] = []
    for flag, value in pairs:
        cmd.append(flag)
        cmd.append(shlex.quote(value))
    cmd.append(shlex.quote(output_path))
    return " ".join(cmd)


def build_compress_command(
    input_path: str,
    crf: str,
    preset: Preset | str | None,
    bitrate: Optional[str],
    output_path: str,
) -> str:
    """
    Builds the full compression command.

    Example:
        >>> build_compress_command("/a/in.mp4", "18", "veryslow", None, "/a/out.mp4")
        '-i /a/in.mp4 -c:v libx264 -crf 18 -preset veryslow /a/out.mp4'
    """
    return serialize_command(
        build_compress_arguments(input_path, crf, preset, bitrate), output_path
    )


def _double_quote(value: str) -> str:
    """Wraps a value in double quotes, escaping the characters shlex treats as special inside them."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_size_probe_command(input_path: str) -> str:
    """
    Builds the ffprobe command that reports container size and first-stream dimensions.

    The command runs with "-v error" and prints JSON shaped like
    {"streams": [{"width": 640, "height": 360}], "format": {"size": "15804433"}}.
    """
    return (
        f"-i {_double_quote(input_path)} -v error -select_streams v:0 "
        f"-show_entries format=size -show_entries stream=size,width,height -of json"
    )

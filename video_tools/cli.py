"""
Command-Line Interface (CLI) setup for Video Tools.

This module uses Python's `argparse` to define and parse the command-line
arguments, with one sub-command per `VideoTools` workflow.
"""
import argparse
from typing import List, Optional

from .domain.enums import Preset, Quality
from .config.video import DEFAULT_PRESET, DEFAULT_QUALITY


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for Video Tools.

    Args:
        argv: Arguments to parse. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: The parsed arguments. `command` holds the chosen
                            sub-command ("compress" or "probe").
    """
    parser = argparse.ArgumentParser(description="Compress and inspect videos with FFmpeg.")
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set the logging level."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    compress_parser = subparsers.add_parser("compress", help="Compress a video with libx264.")
    compress_parser.add_argument("path", type=str, help="Path of the video to compress.")
    compress_parser.add_argument(
        "--quality", type=str, default=DEFAULT_QUALITY.value,
        help=f"Quality level, one of {', '.join(Quality.values())}."
    )
    compress_parser.add_argument(
        "--speed", type=str, default=DEFAULT_PRESET.value,
        help=f"Encoder preset, one of {', '.join(Preset.values())}."
    )
    compress_parser.add_argument(
        "--bitrate", type=str, default=None, help="Target bitrate, e.g. 1M."
    )
    compress_parser.add_argument(
        "--output", type=str, default=None,
        help="Output file. A file in the scratch directory is generated if omitted."
    )

    probe_parser = subparsers.add_parser("probe", help="Print the media details of a video.")
    probe_parser.add_argument("path", type=str, help="Path of the video to probe.")
    probe_parser.add_argument(
        "--force", action="store_true", help="Ignore cached details and probe again."
    )

    return parser.parse_args(argv)

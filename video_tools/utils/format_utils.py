"""
This module contains helper functions for turning paths, sizes and durations into
the strings used throughout the application, particularly in logging and in
output-file naming.
"""

from datetime import timedelta

from ..config.common import INCORRECT_INPUT_PATH


def get_extension(path: str) -> str:
    """
    Extracts the extension from a file path.

    The path is split on "." and the last segment is returned as is (case is
    preserved). A path ending with a dot, an empty path and a path without any
    dot have no usable extension and yield the `INCORRECT_INPUT_PATH` sentinel.

    Args:
        path: The path of the media file, e.g. "/videos/a.b.mp4".

    Returns:
        The extension without its leading dot (e.g. "mp4"), or the sentinel.
        For example, "/videos/a.b.mp4" gives "mp4" and "/videos/clip." gives the sentinel.
    """
    segments = path.split(".")
    if len(segments) < 2 or not segments[-1]:
        return INCORRECT_INPUT_PATH
    return segments[-1]


def format_elapsed(elapsed: timedelta) -> str:
    """Renders an elapsed time as "HH:MM:SS" for the compression log."""
    hours, remainder = divmod(max(int(elapsed.total_seconds()), 0), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02}:{minutes:02}:{seconds:02}"


def formatted_size(size_bytes: float) -> str:
    """
    Renders a byte count with one decimal in the largest fitting unit up to GB.

    For example, 512 becomes "512 B" and 15804433 becomes "15.1 MB".
    """
    size = max(float(size_bytes), 0.0)
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{int(size)} B" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"

"""
Video Tools: a typed façade over FFmpeg for compressing and probing videos.

The main entry point is `VideoTools`, which wraps a single media file:

    from video_tools import VideoTools, CompressionOptions, Quality

    tools = VideoTools("/videos/holiday.mp4")
    result = await tools.compress(CompressionOptions(quality=Quality.LOW))
    details = await tools.get_details()
"""

from .domain.enums import Preset, Quality
from .domain.media import CompressionOptions, MediaDetails
from .services.video_tools import VideoTools

__all__ = ["CompressionOptions", "MediaDetails", "Preset", "Quality", "VideoTools"]

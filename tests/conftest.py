"""
Pytest configuration and shared fixtures for Video Tools tests.

No test spawns a real FFmpeg process: the shared engine is replaced by a
`MagicMock` whose coroutine methods are `AsyncMock`s.
"""
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from video_tools.services.engine import LastCommandOutput
from video_tools.services.video_tools import VideoTools


SIZE_PROBE_OUTPUT = {
    "programs": [],
    "streams": [{"width": 640, "height": 360}],
    "format": {"size": "15804433"},
}

MEDIA_INFORMATION = {
    "format": {
        "filename": "/videos/input.mp4",
        "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
        "duration": "120.500000",
        "size": "15804433",
    },
    "streams": [
        {"index": 0, "codec_type": "video", "codec_name": "h264", "width": 640, "height": 360},
        {"index": 1, "codec_type": "audio", "codec_name": "aac"},
    ],
    "size": "stale",
}


def make_engine(size_output=None, media_information=None, rc=0):
    """Builds an engine double answering both probe steps and every execute call."""
    engine = MagicMock()
    engine.execute = AsyncMock(return_value=rc)
    engine.execute_probe = AsyncMock(return_value=0)
    raw = json.dumps(SIZE_PROBE_OUTPUT if size_output is None else size_output)
    engine.get_last_command_output = AsyncMock(return_value=LastCommandOutput(raw=raw))
    engine.get_media_information = AsyncMock(
        return_value=dict(MEDIA_INFORMATION if media_information is None else media_information)
    )
    engine.cancel = MagicMock()
    return engine


@pytest.fixture
def fake_engine(monkeypatch):
    """Installs an engine double as the process-wide VideoTools engine."""
    engine = make_engine()
    monkeypatch.setattr(VideoTools, "engine", engine)
    return engine


@pytest.fixture
def output_generator():
    return AsyncMock(return_value="/cache/generated.mp4")

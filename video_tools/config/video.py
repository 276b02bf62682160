"""
Configuration settings related to video compression.

This module defines the codec, the command flags and the quality-to-CRF table
used when building compression commands.
"""
from ..domain.enums import Preset, Quality

# --- Encoder Settings ---
VIDEO_CODEC = "libx264"

# --- Command Flags ---
INPUT_FLAG = "-i"
VIDEO_CODEC_FLAG = "-c:v"
CRF_FLAG = "-crf"
PRESET_FLAG = "-preset"
# Passed through to consumers that read the bitrate under this bare key.
BITRATE_KEY = "bitrate"

# --- Quality Settings ---
# Lower CRF means higher quality and a larger file.
CRF_BY_QUALITY = {
    Quality.HIGH: 14,
    Quality.MEDIUM: 18,
    Quality.LOW: 22,
}
DEFAULT_CRF = 14

DEFAULT_QUALITY = Quality.MEDIUM
DEFAULT_PRESET = Preset.VERY_SLOW

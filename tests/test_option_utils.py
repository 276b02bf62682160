"""
Unit tests for compression option validation and CRF resolution.
"""
import pytest

from video_tools.domain.enums import Preset, Quality
from video_tools.domain.media import CompressionOptions
from video_tools.utils.option_utils import (
    find_incorrect_option,
    get_compression_options_resolution,
    is_options_value_correct,
)


class TestIsOptionsValueCorrect:
    """Tests for the quality/speed validator."""

    def test_none_is_valid(self):
        assert is_options_value_correct(None) == (True, "")

    def test_defaults_are_valid(self):
        assert is_options_value_correct(CompressionOptions()) == (True, "")

    def test_empty_values_are_valid(self):
        assert is_options_value_correct(CompressionOptions(quality=None, speed=None)) == (True, "")

    def test_raw_strings_are_accepted(self):
        options = CompressionOptions(quality="low", speed="ultrafast")
        assert is_options_value_correct(options) == (True, "")

    def test_bogus_quality_lists_all_qualities(self):
        is_correct, message = is_options_value_correct(CompressionOptions(quality="bogus"))
        assert is_correct is False
        assert message == "Incorrect quality options. Please provide one of ['high', 'medium', 'low']"

    def test_bogus_speed_lists_all_presets(self):
        is_correct, message = is_options_value_correct(CompressionOptions(speed="bogus"))
        assert is_correct is False
        assert message.startswith("Incorrect speed options.")
        for value in Preset.values():
            assert f"'{value}'" in message

    def test_quality_is_reported_before_speed(self):
        is_correct, message = is_options_value_correct(
            CompressionOptions(quality="bogus", speed="bogus")
        )
        assert is_correct is False
        assert "quality" in message
        assert "speed" not in message

    def test_find_incorrect_option_returns_field_and_values(self):
        assert find_incorrect_option(CompressionOptions(speed="warp")) == ("speed", Preset.values())
        assert find_incorrect_option(CompressionOptions()) is None


class TestGetCompressionOptionsResolution:
    """Tests for the quality-to-CRF mapping."""

    @pytest.mark.parametrize(
        "quality, crf",
        [
            (Quality.HIGH, "14"),
            (Quality.MEDIUM, "18"),
            (Quality.LOW, "22"),
            ("medium", "18"),
            (None, "14"),
            ("bogus", "14"),
        ],
    )
    def test_mapping(self, quality, crf):
        assert get_compression_options_resolution(quality) == {"-crf": crf}

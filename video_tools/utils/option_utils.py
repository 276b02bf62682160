"""
Validation and resolution of user-supplied compression options.
"""
from typing import Dict, Tuple

from ..config.video import CRF_BY_QUALITY, CRF_FLAG, DEFAULT_CRF
from ..domain.enums import Preset, Quality
from ..domain.media import CompressionOptions


def _incorrect_value_message(field: str, allowed_values: list[str]) -> str:
    quoted = ", ".join(f"'{value}'" for value in allowed_values)
    return f"Incorrect {field} options. Please provide one of [{quoted}]"


def find_incorrect_option(options: CompressionOptions | None) -> Tuple[str, list[str]] | None:
    """
    Returns the first option field holding an illegal value, with its legal values.

    Quality is checked before speed. Empty values are treated as absent.
    """
    if options is None:
        return None
    if options.quality and options.quality not in Quality.values():
        return "quality", Quality.values()
    if options.speed and options.speed not in Preset.values():
        return "speed", Preset.values()
    return None


def is_options_value_correct(options: CompressionOptions | None) -> Tuple[bool, str]:
    """
    Checks compression options against the legal quality and speed values.

    Only the first failure is reported.

    Args:
        options: The options to check. `None` is valid.

    Returns:
        `(True, "")` when the options are valid, otherwise `(False, message)` where
        the message lists every legal value of the offending field.
    """
    incorrect = find_incorrect_option(options)
    if incorrect is None:
        return True, ""
    field, allowed_values = incorrect
    return False, _incorrect_value_message(field, allowed_values)


def get_compression_options_resolution(quality: Quality | str | None) -> Dict[str, str]:
    """
    Maps a quality level to the FFmpeg CRF setting.

    HIGH gives 14, MEDIUM 18 and LOW 22. Anything else, including `None` and
    unknown values, falls back to 14.

    Returns:
        A dictionary holding the CRF value as a string under the "-crf" key.
    """
    try:
        crf = CRF_BY_QUALITY.get(Quality(quality), DEFAULT_CRF)
    except ValueError:
        crf = DEFAULT_CRF
    return {CRF_FLAG: str(crf)}

"""
Value objects passed in and out of the `VideoTools` workflows.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple

from ..config.video import DEFAULT_PRESET, DEFAULT_QUALITY
from .enums import Preset, Quality


@dataclass(frozen=True)
class CompressionOptions:
    """
    User-supplied parameters of a single compression.

    `quality` and `speed` are usually enum members but may carry raw strings from
    user input; they are checked against the enum value sets before a command is
    built.

    Attributes:
        quality: Abstract quality level, mapped to a CRF value.
        speed: Encoder preset.
        bitrate: Optional target bitrate, e.g. "1M".
        output_file_path: Optional explicit output path. When omitted a scratch
                          file is generated.
    """

    quality: Quality | str | None = DEFAULT_QUALITY
    speed: Preset | str | None = DEFAULT_PRESET
    bitrate: str | None = None
    output_file_path: str | None = None


class InputCheck(NamedTuple):
    is_correct: bool
    message: str


class CompressResult(NamedTuple):
    rc: int
    output_file_path: str


class MediaDetails(Mapping[str, Any]):
    """
    Read-only view of a merged probe result.

    It holds every field of the full media-information probe, with `size`,
    `width`, `height` and `extension` overwritten from the size probe and the
    asset's path. Instances are never mutated; a refresh builds a new one.
    """

    def __init__(self, data: Mapping[str, Any]):
        self._data = MappingProxyType(dict(data))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return (
            f"MediaDetails(size={self.size}, width={self.width}, "
            f"height={self.height}, extension={self.extension!r})"
        )

    @property
    def size(self) -> int | float:
        return self._data["size"]

    @property
    def width(self) -> int | float:
        return self._data["width"]

    @property
    def height(self) -> int | float:
        return self._data["height"]

    @property
    def extension(self) -> str:
        return self._data["extension"]

"""
Closed enumerations for the user-facing compression options.

Each enumeration exposes the set of legal raw values through `values()`, which
is what the option validator checks user input against.
"""
from enum import Enum


class _ValueListEnum(str, Enum):
    """A string enumeration that can list its legal values."""

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    def __str__(self) -> str:
        return self.value


class Quality(_ValueListEnum):
    """Abstract quality level of a compressed video."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Preset(_ValueListEnum):
    """x264 encoding speed presets, fastest first."""

    ULTRA_FAST = "ultrafast"
    SUPER_FAST = "superfast"
    VERY_FAST = "veryfast"
    FASTER = "faster"
    FAST = "fast"
    MEDIUM = "medium"
    SLOW = "slow"
    SLOWER = "slower"
    VERY_SLOW = "veryslow"

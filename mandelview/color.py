"""RGB color value type shared by the palette and the raster."""

from __future__ import annotations

import string
from dataclasses import dataclass


def _clamp_channel(value: int) -> int:
    return max(0, min(int(value), 255))


@dataclass(frozen=True)
class Color:
    """An RGB triple with channels clamped to ``[0, 255]``.

    The packed form is ``0xRRGGBB``.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", _clamp_channel(self.r))
        object.__setattr__(self, "g", _clamp_channel(self.g))
        object.__setattr__(self, "b", _clamp_channel(self.b))

    @classmethod
    def from_packed(cls, packed: int) -> Color:
        packed = int(packed) & 0xFFFFFF
        return cls((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF)

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        hex_color = hex_color.strip().lstrip('#')
        if len(hex_color) != 6:
            raise ValueError('color must be in the form #RRGGBB.')
        if any(ch not in string.hexdigits for ch in hex_color):
            raise ValueError('color must contain only hexadecimal digits.')
        return cls.from_packed(int(hex_color, 16))

    @property
    def packed(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    @property
    def hex(self) -> str:
        return f"#{self.packed:06x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

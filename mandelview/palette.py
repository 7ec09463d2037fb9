"""Indexed color tables mapping escape steps to colors."""

from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np

from .color import Color
from .errors import InitializationError

SENTINEL_COLOR = Color(0, 0, 0)


class Palette:
    """Immutable table of ``max_iteration + 1`` colors.

    Slots ``0 .. max_iteration - 1`` color escaped points. The terminal slot
    holds a sentinel and is never used for bounded points.
    """

    def __init__(self, colors: Sequence[Color]):
        if len(colors) < 2:
            raise InitializationError("a palette needs at least one gradient slot and a terminal slot")
        self._colors = tuple(colors)
        try:
            lut = np.array([color.as_tuple() for color in self._colors], dtype=np.uint8)
        except MemoryError as exc:
            raise InitializationError("unable to allocate the palette lookup table") from exc
        lut.setflags(write=False)
        self._lut = lut

    @property
    def max_iteration(self) -> int:
        return len(self._colors) - 1

    @property
    def lut(self) -> np.ndarray:
        """Read-only ``(max_iteration + 1, 3)`` uint8 table."""
        return self._lut

    def __len__(self) -> int:
        return len(self._colors)

    def __getitem__(self, index: int) -> Color:
        return self._colors[index]

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return f"Palette({self._colors[0].hex} .. {self._colors[-2].hex}, max_iteration={self.max_iteration})"


def build_palette(start: Color, end: Color, max_iteration: int) -> Palette:
    """Build a linear gradient from ``start`` toward ``end``.

    Each channel advances by ``abs(end - start) // max_iteration`` per slot,
    so the gradient only reaches ``end`` when every channel of ``end`` is at
    least the matching channel of ``start``. Overshoot is clamped to 255.
    """

    max_iteration = int(max_iteration)
    if max_iteration < 1:
        raise InitializationError(f"max_iteration must be positive, got {max_iteration}")

    red_step = abs(end.r - start.r) // max_iteration
    green_step = abs(end.g - start.g) // max_iteration
    blue_step = abs(end.b - start.b) // max_iteration

    try:
        colors = [
            Color(start.r + i * red_step, start.g + i * green_step, start.b + i * blue_step)
            for i in range(max_iteration)
        ]
    except MemoryError as exc:
        raise InitializationError("unable to create color palette") from exc
    colors.append(SENTINEL_COLOR)
    return Palette(colors)


def colormap_palette(name: str, max_iteration: int, *, invert: bool = False) -> Palette:
    """Sample the matplotlib colormap ``name`` into a palette."""

    from matplotlib import colormaps

    max_iteration = int(max_iteration)
    if max_iteration < 1:
        raise InitializationError(f"max_iteration must be positive, got {max_iteration}")
    try:
        cmap = colormaps[name]
    except KeyError as exc:
        raise InitializationError(f"unknown colormap '{name}'") from exc

    samples = np.linspace(0.0, 1.0, max_iteration, dtype=np.float64)
    if invert:
        samples = 1.0 - samples
    rgba = np.uint8(np.clip(np.asarray(cmap(samples)) * 255, 0, 255))
    colors = [Color(int(r), int(g), int(b)) for r, g, b, _ in rgba]
    colors.append(SENTINEL_COLOR)
    return Palette(colors)

"""Pixel buffer builder: evaluates a whole viewport into a color raster."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import PIL.Image

from .color import Color
from .errors import RenderError
from .evaluator import escape_counts
from .mapping import PlaneBounds, plane_grid
from .palette import Palette


@dataclass(frozen=True, eq=False)
class PixelRaster:
    """Row-major RGB raster produced by one recompute."""

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def color_at(self, x: int, y: int) -> Color:
        r, g, b = self.pixels[y, x]
        return Color(int(r), int(g), int(b))

    def to_image(self) -> PIL.Image.Image:
        return PIL.Image.fromarray(np.array(self.pixels, copy=True))


def render(
    bounds: PlaneBounds,
    width: int,
    height: int,
    palette: Palette,
    in_set_color: Color,
    escape_threshold: float = 2.0,
) -> PixelRaster:
    """Map every pixel to the plane, classify it and look up its color.

    Escaped points take ``palette[n]``; bounded points take ``in_set_color``.
    The iteration bound is the palette's ``max_iteration``.
    """

    width = int(width)
    height = int(height)
    if width < 1 or height < 1:
        raise RenderError(f"unable to create pixels for a {width}x{height} raster")

    try:
        grid = plane_grid(bounds, width, height)
        counts = escape_counts(grid, palette.max_iteration, escape_threshold)
        pixels = palette.lut[np.maximum(counts, 0)]
        pixels[counts < 0] = in_set_color.as_tuple()
    except MemoryError as exc:
        raise RenderError(f"unable to create pixels for a {width}x{height} raster") from exc

    pixels.setflags(write=False)
    return PixelRaster(pixels=pixels)

"""Mapping between pixel coordinates and the complex plane."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def map_range(value: float, in_lo: float, in_hi: float, out_lo: float, out_hi: float) -> float:
    """Linearly map ``value`` from ``[in_lo, in_hi]`` onto ``[out_lo, out_hi]``."""

    return out_lo + (value - in_lo) * (out_hi - out_lo) / (in_hi - in_lo)


@dataclass(frozen=True)
class PlaneBounds:
    """Rectangle of the complex plane covered by the pixel grid."""

    real_lo: float
    real_hi: float
    imag_lo: float
    imag_hi: float

    @property
    def real_range(self) -> float:
        return self.real_hi - self.real_lo

    @property
    def imag_range(self) -> float:
        return self.imag_hi - self.imag_lo


def pixel_to_plane(bounds: PlaneBounds, x: float, y: float, width: int, height: int) -> complex:
    """Plane point under pixel ``(x, y)``; pixel ``(0, 0)`` is ``(real_lo, imag_lo)``."""

    real = map_range(x, 0, width, bounds.real_lo, bounds.real_hi)
    imag = map_range(y, 0, height, bounds.imag_lo, bounds.imag_hi)
    return complex(real, imag)


def plane_grid(bounds: PlaneBounds, width: int, height: int) -> np.ndarray:
    """Complex128 array of shape ``(height, width)`` with one plane point per pixel."""

    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(height, dtype=np.float64)
    real = map_range(xs, 0, width, np.float64(bounds.real_lo), np.float64(bounds.real_hi))
    imag = map_range(ys, 0, height, np.float64(bounds.imag_lo), np.float64(bounds.imag_hi))
    X, Y = np.meshgrid(real, imag)
    grid = np.empty((height, width), dtype=np.complex128)
    grid.real = X
    grid.imag = Y
    return grid

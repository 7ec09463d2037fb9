"""Escape-time classification of points in the complex plane."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np


@dataclass(frozen=True)
class Escaped:
    """The orbit left the escape radius on step ``iteration`` (0-based)."""

    iteration: int


class _Bounded:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "BOUNDED"

    def __reduce__(self):
        return (_Bounded, ())


BOUNDED = _Bounded()

EscapeResult = Union[Escaped, _Bounded]


def _check_threshold(escape_threshold: float) -> None:
    if not math.isfinite(escape_threshold):
        raise ValueError(f"escape_threshold must be finite, got {escape_threshold}")


def evaluate(c: complex, max_iteration: int, escape_threshold: float = 2.0) -> EscapeResult:
    """Iterate ``z <- z*z + c`` from zero for at most ``max_iteration`` steps."""

    _check_threshold(escape_threshold)
    # |z| > threshold, compared on squares
    limit = escape_threshold * escape_threshold
    z = 0j
    for n in range(max_iteration):
        z = z * z + c
        if z.real * z.real + z.imag * z.imag > limit:
            return Escaped(n)
    return BOUNDED


def _escape_step(zr: np.ndarray, zi: np.ndarray, cr: np.ndarray, ci: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Advance one step of ``z <- z*z + c`` on split real/imaginary parts."""

    return zr * zr - zi * zi + cr, zr * zi + zi * zr + ci


def escape_counts(points: np.ndarray, max_iteration: int, escape_threshold: float = 2.0) -> np.ndarray:
    """Classify every point of ``points`` the way :func:`evaluate` does.

    Returns an int32 array of the same shape holding the escape step for
    points that escaped and ``-1`` for bounded points. Only orbits that are
    still inside the escape radius are advanced on each step.
    """

    _check_threshold(escape_threshold)
    cs = np.asarray(points, dtype=np.complex128)
    counts = np.full(cs.shape, -1, dtype=np.int32)
    limit = escape_threshold * escape_threshold

    # Flat indices of the orbits still running, with their state.
    index = np.arange(cs.size)
    cr = np.ascontiguousarray(cs.real).ravel()
    ci = np.ascontiguousarray(cs.imag).ravel()
    zr = np.zeros_like(cr)
    zi = np.zeros_like(ci)
    flat_counts = counts.reshape(-1)

    with np.errstate(over="ignore", invalid="ignore"):
        for n in range(max_iteration):
            if index.size == 0:
                break
            zr, zi = _escape_step(zr, zi, cr, ci)
            escaped = zr * zr + zi * zi > limit
            flat_counts[index[escaped]] = n
            active = np.logical_not(escaped)
            index, zr, zi, cr, ci = index[active], zr[active], zi[active], cr[active], ci[active]

    return counts

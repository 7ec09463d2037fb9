"""Configuration values consumed at startup."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .color import Color
from .errors import InitializationError

DEFAULT_MAX_ITERATION = 100
DEFAULT_ESCAPE_THRESHOLD = 2.0
DEFAULT_ZOOM_RATIO = 1.1
DEFAULT_MOVE_RATIO = 10.0
DEFAULT_REFRESH_DELAY = 0.002

PALETTE_START = Color.from_packed(0x000022)
PALETTE_END = Color.from_packed(0xD62F2F)
IN_SET_COLOR = Color.from_packed(0x050505)


@dataclass(frozen=True)
class EngineConfig:
    """Constants shared by the evaluator, the palette and the viewport transitions."""

    max_iteration: int = DEFAULT_MAX_ITERATION
    escape_threshold: float = DEFAULT_ESCAPE_THRESHOLD
    palette_start: Color = PALETTE_START
    palette_end: Color = PALETTE_END
    in_set_color: Color = IN_SET_COLOR
    zoom_ratio: float = DEFAULT_ZOOM_RATIO
    move_ratio: float = DEFAULT_MOVE_RATIO
    refresh_delay: float = DEFAULT_REFRESH_DELAY

    def validate(self) -> EngineConfig:
        if int(self.max_iteration) < 1:
            raise InitializationError(f"max_iteration must be positive, got {self.max_iteration}")
        if not math.isfinite(self.escape_threshold) or self.escape_threshold < 2.0:
            raise InitializationError(
                f"escape_threshold must be finite and at least 2.0, got {self.escape_threshold}"
            )
        if not self.zoom_ratio > 0:
            raise InitializationError(f"zoom_ratio must be positive, got {self.zoom_ratio}")
        if not self.move_ratio > 0:
            raise InitializationError(f"move_ratio must be positive, got {self.move_ratio}")
        if not self.refresh_delay >= 0:
            raise InitializationError(f"refresh_delay must not be negative, got {self.refresh_delay}")
        return self


@dataclass(frozen=True)
class ViewportConfig:
    """Window size and the initial window onto the complex plane."""

    width: int
    height: int
    real_range: float
    imag_range: float
    center_real: float
    center_imag: float

    def validate(self) -> ViewportConfig:
        if int(self.width) < 1 or int(self.height) < 1:
            raise InitializationError(f"window must be at least 1x1, got {self.width}x{self.height}")
        for name in ("real_range", "imag_range"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InitializationError(f"{name} must be finite and positive, got {value}")
        if not (math.isfinite(self.center_real) and math.isfinite(self.center_imag)):
            raise InitializationError(
                f"center must be finite, got ({self.center_real}, {self.center_imag})"
            )
        return self

    @property
    def center(self) -> complex:
        return complex(self.center_real, self.center_imag)

"""Viewport state and the transitions driven by input events."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from .config import EngineConfig, ViewportConfig
from .errors import InitializationError
from .events import Direction, Event, Pan, Quit, Recenter, ZoomIn, ZoomOut
from .mapping import PlaneBounds, pixel_to_plane


@dataclass(frozen=True)
class Viewport:
    """Window onto the complex plane, described by its center and extents."""

    center: complex
    real_range: float
    imag_range: float

    def __post_init__(self) -> None:
        if not (self.real_range > 0 and self.imag_range > 0):
            raise InitializationError(
                f"viewport ranges must be positive, got {self.real_range} x {self.imag_range}"
            )

    def bounds(self) -> PlaneBounds:
        half_real = self.real_range / 2
        half_imag = self.imag_range / 2
        return PlaneBounds(
            real_lo=self.center.real - half_real,
            real_hi=self.center.real + half_real,
            imag_lo=self.center.imag - half_imag,
            imag_hi=self.center.imag + half_imag,
        )


def _check_ratio(ratio: float) -> None:
    if not (ratio > 0 and math.isfinite(ratio)):
        raise ValueError(f"ratio must be positive and finite, got {ratio}")


@dataclass
class RenderState:
    """Mutable session state owned by the render cycle."""

    viewport: Viewport
    width: int
    height: int
    dirty: bool = True
    running: bool = True

    @classmethod
    def from_config(cls, config: ViewportConfig) -> RenderState:
        config.validate()
        viewport = Viewport(config.center, float(config.real_range), float(config.imag_range))
        return cls(viewport=viewport, width=int(config.width), height=int(config.height))

    def bounds(self) -> PlaneBounds:
        return self.viewport.bounds()

    def pan(self, direction: Direction, move_ratio: float) -> None:
        _check_ratio(move_ratio)
        viewport = self.viewport
        center = viewport.center
        if direction is Direction.UP:
            center = complex(center.real, center.imag - viewport.imag_range / move_ratio)
        elif direction is Direction.DOWN:
            center = complex(center.real, center.imag + viewport.imag_range / move_ratio)
        elif direction is Direction.LEFT:
            center = complex(center.real - viewport.real_range / move_ratio, center.imag)
        elif direction is Direction.RIGHT:
            center = complex(center.real + viewport.real_range / move_ratio, center.imag)
        else:
            raise ValueError(f"unknown pan direction {direction!r}")
        self.viewport = replace(viewport, center=center)
        self.dirty = True

    def zoom_in(self, ratio: float) -> None:
        _check_ratio(ratio)
        viewport = self.viewport
        self.viewport = replace(
            viewport,
            real_range=viewport.real_range / ratio,
            imag_range=viewport.imag_range / ratio,
        )
        self.dirty = True

    def zoom_out(self, ratio: float) -> None:
        _check_ratio(ratio)
        viewport = self.viewport
        self.viewport = replace(
            viewport,
            real_range=viewport.real_range * ratio,
            imag_range=viewport.imag_range * ratio,
        )
        self.dirty = True

    def recenter_at_pixel(self, x: float, y: float) -> None:
        center = pixel_to_plane(self.bounds(), x, y, self.width, self.height)
        self.viewport = replace(self.viewport, center=center)
        self.dirty = True

    def quit(self) -> None:
        self.running = False

    def mark_clean(self) -> None:
        self.dirty = False

    def apply(self, event: Event, config: EngineConfig) -> None:
        """Apply one input event as a single transition."""

        if isinstance(event, Quit):
            self.quit()
        elif isinstance(event, Pan):
            self.pan(event.direction, config.move_ratio)
        elif isinstance(event, ZoomIn):
            self.zoom_in(config.zoom_ratio)
        elif isinstance(event, ZoomOut):
            self.zoom_out(config.zoom_ratio)
        elif isinstance(event, Recenter):
            self.recenter_at_pixel(event.x, event.y)
        else:
            raise TypeError(f"unsupported event {event!r}")

"""Render cycle: drains input, mutates the viewport and repaints when it changed."""

from __future__ import annotations

import time
from typing import Callable, Optional, Protocol

from .config import EngineConfig
from .events import Event
from .palette import Palette
from .raster import PixelRaster, render
from .viewport import RenderState


class EventSource(Protocol):
    def poll(self) -> list[Event]:
        """Return every event queued since the previous call, oldest first."""


class Presenter(Protocol):
    def present(self, raster: PixelRaster) -> None:
        """Display or store ``raster``."""


def _no_log(message: str) -> None:
    pass


class RenderCycle:
    """Owns the :class:`RenderState` and repaints it at most once per tick."""

    def __init__(
        self,
        state: RenderState,
        config: EngineConfig,
        palette: Palette,
        events: EventSource,
        presenter: Presenter,
        *,
        sleep: Callable[[float], None] = time.sleep,
        log: Callable[[str], None] = _no_log,
    ):
        self.state = state
        self.config = config
        self.palette = palette
        self.events = events
        self.presenter = presenter
        self.frames_presented = 0
        self._sleep = sleep
        self._log = log

    def drain_events(self) -> int:
        pending = self.events.poll()
        for event in pending:
            self.state.apply(event, self.config)
        return len(pending)

    def recompute(self) -> PixelRaster:
        state = self.state
        return render(
            state.bounds(),
            state.width,
            state.height,
            self.palette,
            self.config.in_set_color,
            self.config.escape_threshold,
        )

    def tick(self) -> Optional[PixelRaster]:
        """Apply pending events, then repaint if the viewport changed."""

        self.drain_events()
        if not self.state.dirty:
            return None

        started = time.perf_counter()
        raster = self.recompute()
        self.presenter.present(raster)
        self.state.mark_clean()
        self.frames_presented += 1

        viewport = self.state.viewport
        self._log(
            "frame {0}: center=({1:.6g}, {2:.6g}) range={3:.6g} x {4:.6g} in {5:.3f}s".format(
                self.frames_presented,
                viewport.center.real,
                viewport.center.imag,
                viewport.real_range,
                viewport.imag_range,
                time.perf_counter() - started,
            )
        )
        return raster

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Tick until a quit event arrives or ``max_ticks`` ticks have run.

        Returns the number of rasters presented during this call.
        """

        presented = 0
        ticks = 0
        while self.state.running and (max_ticks is None or ticks < max_ticks):
            if self.tick() is not None:
                presented += 1
            ticks += 1
            if self.state.running and self.config.refresh_delay > 0:
                self._sleep(self.config.refresh_delay)
        return presented

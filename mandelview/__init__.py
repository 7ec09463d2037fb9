"""Public API for the Mandelbrot viewport engine."""

from .color import Color
from .config import EngineConfig, ViewportConfig
from .cycle import EventSource, Presenter, RenderCycle
from .errors import EngineError, InitializationError, RenderError
from .evaluator import BOUNDED, Escaped, EscapeResult, escape_counts, evaluate
from .events import (
    Direction,
    Pan,
    Quit,
    Recenter,
    ScriptedEventSource,
    ZoomIn,
    ZoomOut,
    event_for_button,
    event_for_close,
    event_for_key,
    event_for_wheel,
    parse_script,
)
from .mapping import PlaneBounds, map_range, pixel_to_plane, plane_grid
from .palette import Palette, build_palette, colormap_palette
from .presenters import (
    FanOutPresenter,
    FrameSequencePresenter,
    GifPresenter,
    LastFramePresenter,
    write_image,
)
from .raster import PixelRaster, render
from .viewport import RenderState, Viewport

__all__ = [
    "BOUNDED",
    "Color",
    "Direction",
    "EngineConfig",
    "EngineError",
    "EscapeResult",
    "Escaped",
    "EventSource",
    "FanOutPresenter",
    "FrameSequencePresenter",
    "GifPresenter",
    "InitializationError",
    "LastFramePresenter",
    "Palette",
    "Pan",
    "PixelRaster",
    "PlaneBounds",
    "Presenter",
    "Quit",
    "Recenter",
    "RenderCycle",
    "RenderError",
    "RenderState",
    "ScriptedEventSource",
    "Viewport",
    "ViewportConfig",
    "ZoomIn",
    "ZoomOut",
    "build_palette",
    "colormap_palette",
    "escape_counts",
    "evaluate",
    "event_for_button",
    "event_for_close",
    "event_for_key",
    "event_for_wheel",
    "map_range",
    "parse_script",
    "pixel_to_plane",
    "plane_grid",
    "render",
    "write_image",
]

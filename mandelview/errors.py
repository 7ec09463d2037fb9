"""Exception types raised by the viewport engine."""


class EngineError(RuntimeError):
    """Base class for fatal engine failures."""


class InitializationError(EngineError):
    """A palette, configuration value or other startup resource could not be built."""


class RenderError(EngineError):
    """A raster could not be built for the current frame."""

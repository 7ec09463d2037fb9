"""Headless presentation collaborators that store rasters instead of showing them."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import imageio

from .raster import PixelRaster


def _pil_format_name(ext: str) -> str:
    upper = ext.upper()
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def normalize_format(image_format: Optional[str]) -> str:
    image_format = (image_format or "png").lower().lstrip(".")
    return image_format or "png"


def write_image(raster: PixelRaster, output_path: Path, image_format: str) -> Path:
    """Write ``raster`` to ``output_path`` using the provided format."""

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    raster.to_image().save(str(output_path), format=_pil_format_name(normalize_format(image_format)))
    return output_path


class LastFramePresenter:
    """Keeps the most recently presented raster."""

    def __init__(self):
        self.raster: Optional[PixelRaster] = None
        self.count = 0

    def present(self, raster: PixelRaster) -> None:
        self.raster = raster
        self.count += 1

    def close(self) -> None:
        pass


class FrameSequencePresenter:
    """Persists every presented raster as a numbered image inside ``frame_dir``."""

    def __init__(self, frame_dir: Path, image_format: str = "png", prefix: str = "frame", digits: int = 3):
        self.frame_dir = Path(frame_dir)
        self.image_format = normalize_format(image_format)
        self.prefix = prefix
        self.digits = digits
        self.paths: list[Path] = []

    def present(self, raster: PixelRaster) -> None:
        index = len(self.paths)
        frame_path = self.frame_dir / f"{self.prefix}{index:0{self.digits}d}.{self.image_format}"
        self.paths.append(write_image(raster, frame_path, self.image_format))

    def close(self) -> None:
        pass


class GifPresenter:
    """Appends every presented raster to an animated GIF."""

    def __init__(self, path: Path, duration: float = 0.1):
        self.path = Path(path)
        self.duration = duration
        self.frames = 0
        self._writer: Any = None

    def present(self, raster: PixelRaster) -> None:
        if self._writer is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._writer = imageio.get_writer(str(self.path), mode='I', duration=self.duration, loop=0)
        self._writer.append_data(raster.pixels)
        self.frames += 1

    def close(self) -> None:
        if self._writer is not None:
            self._writer.close()
            self._writer = None


class FanOutPresenter:
    """Forwards each raster to several presenters in order."""

    def __init__(self, *presenters: Any):
        self.presenters = list(presenters)

    def present(self, raster: PixelRaster) -> None:
        for presenter in self.presenters:
            presenter.present(raster)

    def close(self) -> None:
        for presenter in self.presenters:
            presenter.close()

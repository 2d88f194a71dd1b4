"""Raster canvas: CPU stand-in for the GPU texture the strokes accumulate on.

Coordinates follow the drawing convention of the scenes: origin at the canvas
centre, x to the right, y up. The buffer is linear float RGB in [0, 1].
"""

from __future__ import annotations

import logging
from typing import Protocol

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from sandspline.errors import ConfigurationError, ResourceError
from sandspline.utils.color import RGBA

logger = logging.getLogger(__name__)


class Canvas(Protocol):
    @property
    def size(self) -> tuple[int, int]: ...

    def fill_background(self, color: RGBA) -> None: ...

    def draw_filled_ellipse(self, radius: float, color: RGBA) -> None: ...

    def draw_points(self, points: NDArray[np.float64], color: RGBA) -> None: ...

    def snapshot(self) -> Image.Image: ...


class RasterCanvas:
    """numpy-backed canvas with source-over compositing."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"canvas size must be positive, got {width}x{height}")
        try:
            self._buf = np.zeros((height, width, 3), dtype=np.float32)
        except MemoryError as e:
            raise ResourceError(f"cannot allocate a {width}x{height} canvas") from e
        self.width = width
        self.height = height
        logger.debug("Allocated %dx%d canvas", width, height)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def pixels(self) -> NDArray[np.float32]:
        """Read-only view of the (height, width, 3) buffer."""
        view = self._buf.view()
        view.flags.writeable = False
        return view

    def fill_background(self, color: RGBA) -> None:
        rgb = np.asarray(color[:3], dtype=np.float32)
        alpha = np.float32(color[3])
        self._buf[:] = rgb * alpha + self._buf * (1 - alpha)

    def draw_filled_ellipse(self, radius: float, color: RGBA) -> None:
        """Filled circle of ``radius`` pixels centred on the canvas."""
        if radius <= 0:
            raise ConfigurationError(f"ellipse radius must be positive, got {radius}")
        ys, xs = np.ogrid[: self.height, : self.width]
        dx = xs + 0.5 - self.width / 2
        dy = ys + 0.5 - self.height / 2
        mask = dx**2 + dy**2 <= radius**2
        rgb = np.asarray(color[:3], dtype=np.float32)
        alpha = np.float32(color[3])
        self._buf[mask] = rgb * alpha + self._buf[mask] * (1 - alpha)

    def draw_points(self, points: NDArray[np.float64], color: RGBA) -> None:
        """Composite each point as one pixel; points off the canvas are dropped.

        ``k`` points of one colour on a pixel compose in closed form:
        ``dst = c + (dst - c) * (1 - a) ** k``.
        """
        points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if len(points) == 0:
            return
        px = np.floor(points[:, 0] + self.width / 2).astype(np.int64)
        py = np.floor(self.height / 2 - points[:, 1]).astype(np.int64)
        inside = (px >= 0) & (px < self.width) & (py >= 0) & (py < self.height)
        if not inside.any():
            return

        flat_idx, counts = np.unique(py[inside] * self.width + px[inside], return_counts=True)
        rgb = np.asarray(color[:3], dtype=np.float64)
        keep = (1.0 - float(color[3])) ** counts.astype(np.float64)

        flat = self._buf.reshape(-1, 3)
        dst = flat[flat_idx].astype(np.float64)
        flat[flat_idx] = (rgb + (dst - rgb) * keep[:, None]).astype(np.float32)

    def snapshot(self) -> Image.Image:
        """8-bit RGB copy of the current raster."""
        data = np.clip(self._buf * 255.0 + 0.5, 0, 255).astype(np.uint8)
        return Image.fromarray(data)

"""Draw commands produced by scene phases and applied to a canvas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

import numpy as np
from numpy.typing import NDArray

from sandspline.errors import ConfigurationError
from sandspline.utils.color import RGBA

if TYPE_CHECKING:
    from sandspline.render.canvas import Canvas


@dataclass(frozen=True)
class FillBackground:
    color: RGBA

    def apply(self, canvas: Canvas) -> None:
        canvas.fill_background(self.color)


@dataclass(frozen=True)
class FillEllipse:
    """Filled circle centred on the canvas."""

    radius: float
    color: RGBA

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ConfigurationError(f"ellipse radius must be positive, got {self.radius}")

    def apply(self, canvas: Canvas) -> None:
        canvas.draw_filled_ellipse(self.radius, self.color)


@dataclass(frozen=True, eq=False)
class DrawPoints:
    """An unordered point cloud with one colour."""

    points: NDArray[np.float64]
    color: RGBA

    def __len__(self) -> int:
        return len(self.points)

    def apply(self, canvas: Canvas) -> None:
        if len(self.points):
            canvas.draw_points(self.points, self.color)


DrawCommand = Union[FillBackground, FillEllipse, DrawPoints]

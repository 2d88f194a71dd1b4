"""Coherent noise displacement field.

The third noise coordinate indexes the stroke: stroke ``i`` samples x-offsets at
``base_z + step * 2i`` and y-offsets at ``-base_z + step * (2i + 1)``, so
neighbouring strokes drift smoothly apart instead of jumping.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex

# Structural seed for the permutation table. Not an RNG seed: the field must
# look the same in every run.
NOISE_SEED = 0


class NoiseField:
    """3D coherent noise plus the drifting base z-offset it is viewed at."""

    def __init__(self, step: float = 0.002, base_z: float = 1.0, seed: int = NOISE_SEED) -> None:
        self.step = step
        self.base_z = base_z
        self._noise = OpenSimplex(seed=seed)

    def get(self, x: float, y: float, z: float) -> float:
        return min(1.0, max(-1.0, float(self._noise.noise3(x, y, z))))

    def drift_to(self, base_z: float) -> None:
        self.base_z = float(base_z)

    def offset(self, point: NDArray[np.float64], stroke_index: int) -> tuple[float, float]:
        """Raw (dx, dy) noise sample in [-1, 1] for one point and stroke."""
        x, y = float(point[0]), float(point[1])
        dx = self.get(x, y, self.base_z + self.step * (stroke_index * 2))
        dy = self.get(x, y, -self.base_z + self.step * (stroke_index * 2 + 1))
        return dx, dy

    def displace(
        self,
        point: NDArray[np.float64],
        stroke_index: int,
        magnitude: float,
    ) -> NDArray[np.float64]:
        dx, dy = self.offset(point, stroke_index)
        return np.asarray(point, dtype=np.float64) + np.array([dx, dy]) * magnitude

    def displace_shape(
        self,
        shape: NDArray[np.float64],
        stroke_index: int,
        magnitude: float,
    ) -> NDArray[np.float64]:
        """Displace every point of ``shape``; returns a new array."""
        offsets = np.array(
            [self.offset(p, stroke_index) for p in shape], dtype=np.float64
        ).reshape(-1, 2)
        return np.asarray(shape, dtype=np.float64) + offsets * magnitude

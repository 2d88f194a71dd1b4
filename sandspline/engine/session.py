"""RenderSession — the single mutable state object shared by every frame.

Owns the RNG cursor and the noise field. Both persist across phases, so
stroke-to-stroke coherence spans phase boundaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

import numpy as np

from sandspline.engine.config import StrokeConfig
from sandspline.engine.noise import NoiseField


class RandomSource(Protocol):
    """The subset of ``numpy.random.Generator`` the renderer draws from."""

    def random(self, size: Any = None) -> Any: ...

    def integers(self, low: int, high: int | None = None) -> Any: ...


@dataclass
class RenderSession:
    rng: RandomSource
    noise: NoiseField
    stroke: StrokeConfig = field(default_factory=StrokeConfig)
    # Frame currently being composed
    nth: int = 0
    # Frames whose construction failed, keyed by frame number
    errors: dict[int, str] = field(default_factory=dict)
    # Strokes sampled so far in this session
    strokes_drawn: int = 0

    @classmethod
    def create(cls, seed: int, stroke: StrokeConfig | None = None) -> RenderSession:
        stroke = stroke or StrokeConfig()
        return cls(
            rng=np.random.default_rng(seed),
            noise=NoiseField(step=stroke.noise_step, base_z=stroke.noise_base_z),
            stroke=stroke,
        )

"""Shared test fixtures."""

from __future__ import annotations

from concurrent.futures import Future

import numpy as np
import pytest

from sandspline.engine.config import StrokeConfig
from sandspline.engine.noise import NoiseField
from sandspline.engine.session import RenderSession


class CountingRng:
    """Stub RNG returning a fixed value and counting every draw."""

    def __init__(self, value: float = 0.5) -> None:
        self.value = value
        self.draws = 0

    def random(self, size=None):
        if size is None:
            self.draws += 1
            return self.value
        values = np.full(size, self.value, dtype=np.float64)
        self.draws += values.size
        return values

    def integers(self, low, high=None):
        self.draws += 1
        return low


class RecordingCanvas:
    """Canvas that records calls instead of rasterizing."""

    def __init__(self, width: int = 200, height: int = 100) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def fill_background(self, color) -> None:
        self.calls.append(("background", color))

    def draw_filled_ellipse(self, radius, color) -> None:
        self.calls.append(("ellipse", radius, color))

    def draw_points(self, points, color) -> None:
        self.calls.append(("points", len(points), color))

    def snapshot(self):
        return None


class RecordingSink:
    """Sink that remembers which frames were emitted."""

    def __init__(self) -> None:
        self.frames: list[int] = []
        self.waited = False

    def emit_frame(self, canvas, nth: int) -> Future:
        self.frames.append(nth)
        future: Future = Future()
        future.set_result(None)
        return future

    def wait(self) -> None:
        self.waited = True


@pytest.fixture
def counting_rng() -> CountingRng:
    return CountingRng()


@pytest.fixture
def noise() -> NoiseField:
    return NoiseField(step=0.002, base_z=1.0)


@pytest.fixture
def stub_session(noise: NoiseField) -> RenderSession:
    return RenderSession(rng=CountingRng(), noise=noise, stroke=StrokeConfig())


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()

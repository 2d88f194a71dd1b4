"""Stroke renderer: noise-displaced spline sampled into a jittered point cloud.

One stroke: displace the base shape with the noise field at the stroke's
index, fit a clamped B-spline through the displaced points, sample it at
``n_grains`` evenly spaced parameters and jitter every sample with the RNG.
Thousands of low-alpha strokes accumulate into the final texture.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from sandspline.engine.commands import DrawPoints
from sandspline.engine.noise import NoiseField
from sandspline.engine.session import RandomSource, RenderSession
from sandspline.engine.spline import ClampedBSpline
from sandspline.utils.color import RGBA
from sandspline.utils.geometry import set_knots

logger = logging.getLogger(__name__)

PointCloud = DrawPoints


@dataclass(frozen=True, eq=False)
class StrokeSpec:
    """Everything needed to sample one stroke."""

    degree: int
    control_points: NDArray[np.float64]
    knots: NDArray[np.float64]
    n_grains: int
    jitter_scale: float
    color: RGBA
    stroke_index: int


def build_stroke(
    shape: NDArray[np.float64],
    degree: int,
    n_grains: int,
    magnitude: float,
    color: RGBA,
    stroke_index: int,
    noise: NoiseField,
    jitter_scale: float = 1.5,
) -> StrokeSpec:
    knots = set_knots((0.0, float(len(shape))), degree, len(shape))
    return StrokeSpec(
        degree=degree,
        control_points=noise.displace_shape(shape, stroke_index, magnitude),
        knots=knots,
        n_grains=n_grains,
        jitter_scale=jitter_scale,
        color=color,
        stroke_index=stroke_index,
    )


def sample_stroke(spec: StrokeSpec, rng: RandomSource) -> PointCloud:
    """Sample ``spec`` into a point cloud, drawing ``2 * n_grains`` values from ``rng``."""
    empty = PointCloud(points=np.empty((0, 2)), color=spec.color)
    if spec.n_grains <= 0:
        return empty

    # before spline construction: scipy rejects zero-width knot vectors
    start = float(spec.knots[spec.degree])
    end = float(spec.knots[-spec.degree - 1])
    knot_range = end - start
    if knot_range <= 0:
        logger.debug("Stroke %d has an empty knot domain, skipped", spec.stroke_index)
        return empty

    spline = ClampedBSpline(spec.degree, spec.control_points, spec.knots)

    ts = np.arange(spec.n_grains, dtype=np.float64) / spec.n_grains * knot_range + start
    jitter = np.asarray(rng.random((spec.n_grains, 2)), dtype=np.float64) * spec.jitter_scale
    return PointCloud(points=spline.points(ts) + jitter, color=spec.color)


def render_stroke(
    shape: NDArray[np.float64],
    degree: int,
    n_grains: int,
    magnitude: float,
    color: RGBA,
    stroke_index: int,
    rng: RandomSource,
    noise: NoiseField,
    jitter_scale: float = 1.5,
) -> PointCloud:
    spec = build_stroke(
        shape, degree, n_grains, magnitude, color, stroke_index, noise, jitter_scale
    )
    return sample_stroke(spec, rng)


def render_strokes(
    session: RenderSession,
    shape: NDArray[np.float64],
    n_lines: int,
    n_grains: int,
    magnitude: float,
    color: RGBA,
    first_stroke: int = 0,
    rng: RandomSource | None = None,
) -> list[PointCloud]:
    """Render ``n_lines`` strokes of one shape as a bundle.

    Stroke indices run from ``first_stroke``; jitter comes from ``rng`` if given,
    otherwise from the session's RNG.
    """
    rng = rng if rng is not None else session.rng
    cfg = session.stroke
    # the knot vector is shared by every stroke of the bundle; fail before sampling
    set_knots((0.0, float(len(shape))), cfg.degree, len(shape))

    clouds: list[PointCloud] = []
    for i_line in range(first_stroke, first_stroke + n_lines):
        clouds.append(
            render_stroke(
                shape,
                cfg.degree,
                n_grains,
                magnitude,
                color,
                i_line,
                rng,
                session.noise,
                cfg.jitter_scale,
            )
        )
    session.strokes_drawn += n_lines
    return clouds

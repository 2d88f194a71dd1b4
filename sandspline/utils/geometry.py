"""Leaf-node geometry helpers: base shapes and knot vectors. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from sandspline.errors import ConfigurationError, InvalidShapeError
from sandspline.utils.math_helpers import linspace


def wrap_count(resolution: int, wrap_fraction: float) -> int:
    """Number of leading points repeated at the end of a closed shape."""
    return int(resolution * wrap_fraction)


def gen_circle_points(
    n_control_points: int,
    size: float,
    wrap_fraction: float = 0.25,
) -> NDArray[np.float64]:
    """Closed circle of diameter ``size`` with its first points appended again.

    The repeated points let a spline fitted through the sequence close
    without a visible pinch at the seam.
    """
    if n_control_points < 1:
        raise ConfigurationError(f"circle needs at least one point, got {n_control_points}")
    if size <= 0:
        raise ConfigurationError(f"circle size must be positive, got {size}")
    if not 0.0 <= wrap_fraction <= 1.0:
        raise ConfigurationError(f"wrap fraction must be in [0, 1], got {wrap_fraction}")

    radius = size / 2.0
    angles = np.arange(n_control_points, dtype=np.float64) * (2 * math.pi / n_control_points)
    ring = np.column_stack([radius * np.cos(angles), radius * np.sin(angles)])

    n_wrap = wrap_count(n_control_points, wrap_fraction)
    return np.concatenate([ring, ring[:n_wrap]], axis=0)


def gen_radial_points(
    inner_radius: float,
    outer_radius: float,
    n_control_points: int,
    theta: float,
) -> NDArray[np.float64]:
    """Points along a single ray at angle ``theta``. Not wrapped."""
    if inner_radius < 0 or outer_radius < 0:
        raise ConfigurationError(
            f"radial radii must be non-negative, got {inner_radius}..{outer_radius}"
        )
    radii = linspace(inner_radius, outer_radius, n_control_points).to_array()
    return np.column_stack([radii * math.cos(theta), radii * math.sin(theta)])


# see the scipy documentation for the constraints on the number of knots etc.
# https://docs.scipy.org/doc/scipy/reference/generated/scipy.interpolate.BSpline.html
def set_knots(domain: tuple[float, float], degree: int, npoints: int) -> NDArray[np.float64]:
    """Clamped uniform knot vector of length ``npoints + degree + 1``.

    The leading pad is ``degree`` zeros regardless of ``domain[0]``.
    """
    if degree < 0:
        raise InvalidShapeError(f"spline degree must be non-negative, got {degree}")
    if npoints < degree + 1:
        raise InvalidShapeError(
            f"{npoints} control points cannot carry a degree-{degree} spline "
            f"(need at least {degree + 1})"
        )
    start, end = float(domain[0]), float(domain[1])
    return np.concatenate([
        np.zeros(degree),
        linspace(start, end, npoints - degree).to_array(),
        np.full(degree + 1, end),
    ])

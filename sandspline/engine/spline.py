"""Spline evaluator: a narrow interface over scipy's B-spline."""

from __future__ import annotations

from typing import Protocol

import numpy as np
from numpy.typing import NDArray
from scipy.interpolate import BSpline

from sandspline.errors import InvalidShapeError


class Spline(Protocol):
    def point(self, t: float) -> NDArray[np.float64]: ...

    def points(self, ts: NDArray[np.float64]) -> NDArray[np.float64]: ...

    def knot_domain(self) -> tuple[float, float]: ...


class ClampedBSpline:
    """B-spline of fixed degree through 2D control points."""

    def __init__(
        self,
        degree: int,
        control_points: NDArray[np.float64],
        knots: NDArray[np.float64],
    ) -> None:
        control_points = np.asarray(control_points, dtype=np.float64)
        knots = np.asarray(knots, dtype=np.float64)
        if len(knots) != len(control_points) + degree + 1:
            raise InvalidShapeError(
                f"{len(knots)} knots do not match {len(control_points)} control points "
                f"at degree {degree} (expected {len(control_points) + degree + 1})"
            )
        try:
            self._spline = BSpline(knots, control_points, degree, extrapolate=False)
        except ValueError as e:
            raise InvalidShapeError(f"invalid B-spline: {e}") from e
        self.degree = degree
        self.knots = knots

    def knot_domain(self) -> tuple[float, float]:
        return (float(self.knots[self.degree]), float(self.knots[-self.degree - 1]))

    def point(self, t: float) -> NDArray[np.float64]:
        return np.asarray(self._spline(t), dtype=np.float64)

    def points(self, ts: NDArray[np.float64]) -> NDArray[np.float64]:
        return np.asarray(self._spline(np.asarray(ts, dtype=np.float64)), dtype=np.float64).reshape(-1, 2)

"""Tests for the clamped B-spline evaluator."""

import numpy as np
import pytest

from sandspline.engine.spline import ClampedBSpline
from sandspline.errors import InvalidShapeError
from sandspline.utils.geometry import gen_circle_points, set_knots


def _spline(n: int = 12, degree: int = 4) -> ClampedBSpline:
    points = gen_circle_points(n, 100.0, 0.0)
    return ClampedBSpline(degree, points, set_knots((0.0, float(n)), degree, n))


def test_knot_domain_spans_point_count():
    assert _spline(12).knot_domain() == (0.0, 12.0)


def test_curve_starts_at_first_control_point():
    points = gen_circle_points(12, 100.0, 0.0)
    spline = ClampedBSpline(4, points, set_knots((0.0, 12.0), 4, 12))
    assert spline.point(0.0) == pytest.approx(points[0])


def test_points_shape():
    spline = _spline()
    ts = np.linspace(0.0, 11.9, 50)
    out = spline.points(ts)
    assert out.shape == (50, 2)
    assert np.all(np.isfinite(out))
    assert out[7] == pytest.approx(spline.point(ts[7]))


def test_mismatched_knots_rejected():
    points = gen_circle_points(10, 100.0, 0.0)
    with pytest.raises(InvalidShapeError):
        ClampedBSpline(4, points, set_knots((0.0, 10.0), 4, 9))


def test_decreasing_knots_rejected():
    # zero start pad before a negative domain start is not a valid knot vector
    points = gen_circle_points(6, 100.0, 0.0)
    with pytest.raises(InvalidShapeError):
        ClampedBSpline(2, points, set_knots((-5.0, 5.0), 2, 6))

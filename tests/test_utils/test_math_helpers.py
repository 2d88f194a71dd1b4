"""Tests for linspace and easing."""

import math

import pytest

from sandspline.utils.math_helpers import ease_in_out, linspace


def test_linspace_endpoints_and_length():
    values = list(linspace(2.0, 7.0, 6))
    assert len(values) == 6
    assert values[0] == 2.0
    assert values[-1] == pytest.approx(7.0)
    assert values == pytest.approx([2.0, 3.0, 4.0, 5.0, 6.0, 7.0])


def test_linspace_strictly_monotonic():
    rising = list(linspace(0.0, 1.0, 50))
    falling = list(linspace(1.0, -3.0, 17))
    assert all(b > a for a, b in zip(rising, rising[1:]))
    assert all(b < a for a, b in zip(falling, falling[1:]))


def test_linspace_single_value_is_start():
    assert list(linspace(3.5, 9.0, 1)) == [3.5]


def test_linspace_empty_and_negative():
    assert list(linspace(0.0, 1.0, 0)) == []
    with pytest.raises(ValueError):
        linspace(0.0, 1.0, -1)


def test_linspace_is_restartable():
    seq = linspace(0.0, 10.0, 11)
    assert list(seq) == list(seq)
    assert len(seq) == 11


def test_linspace_to_array_matches_iteration():
    seq = linspace(-1.0, 1.0, 9)
    assert seq.to_array().tolist() == list(seq)


def test_ease_in_out_endpoints():
    assert ease_in_out(0.0, 1.0, 4.0, 100.0) == pytest.approx(1.0)
    assert ease_in_out(50.0, 1.0, 4.0, 100.0) == pytest.approx(3.0)
    assert ease_in_out(100.0, 1.0, 4.0, 100.0) == pytest.approx(5.0)


def test_ease_in_out_is_smooth_and_increasing():
    values = [ease_in_out(float(t), 1.0, 4.0, 1800.0) for t in range(1801)]
    steps = [b - a for a, b in zip(values, values[1:])]
    assert all(s >= 0 for s in steps)
    # slowest at the ends, fastest in the middle
    assert steps[0] < steps[900]
    assert max(steps) <= 4.0 * math.pi / 2 / 1800 + 1e-12


def test_linspace_iterates_lazily():
    it = iter(linspace(0.0, 1.0, 10**12))
    assert next(it) == 0.0
    assert next(it) == pytest.approx(1.0 / (10**12 - 1))

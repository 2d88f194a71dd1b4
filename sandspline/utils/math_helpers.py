"""Math helpers: linspace, easing. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray


class Linspace:
    """Finite, restartable sequence of ``n`` evenly spaced floats.

    Starts at ``start`` and steps by ``(stop - start) / max(n - 1, 1)``, so
    ``n == 1`` yields just ``start``.
    """

    def __init__(self, start: float, stop: float, n: int) -> None:
        if n < 0:
            raise ValueError(f"linspace needs a non-negative count, got {n}")
        self.start = float(start)
        self.stop = float(stop)
        self.n = n
        self.increment = (self.stop - self.start) / max(n - 1, 1)

    def __iter__(self) -> Iterator[float]:
        for i in range(self.n):
            if i == self.n - 1 and self.n > 1:
                yield self.stop
            else:
                yield self.start + i * self.increment

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"Linspace({self.start!r}, {self.stop!r}, {self.n!r})"

    def to_array(self) -> NDArray[np.float64]:
        values = self.start + np.arange(self.n, dtype=np.float64) * self.increment
        if self.n > 1:
            # pin the endpoint so rounding never overshoots ``stop``
            values[-1] = self.stop
        return values


def linspace(start: float, stop: float, n: int) -> Linspace:
    return Linspace(start, stop, n)


def ease_in_out(t: float, begin: float, change: float, duration: float) -> float:
    """Sine ease-in-out (Penner form): ``begin`` at t=0, ``begin + change`` at t=duration."""
    if duration <= 0:
        return begin + change
    return -change / 2 * (math.cos(math.pi * t / duration) - 1) + begin

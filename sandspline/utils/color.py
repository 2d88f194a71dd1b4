"""Colour helpers. Colours are RGBA tuples of floats in [0, 1]."""

from __future__ import annotations

RGBA = tuple[float, float, float, float]

# Slate palette used by the iris scene.
COLORS: list[tuple[int, int, int]] = [
    (52, 64, 77),
    (85, 101, 115),
    (171, 185, 201),
    (147, 169, 189),
    (133, 150, 166),
]

WHITE: RGBA = (1.0, 1.0, 1.0, 1.0)
BLACK: RGBA = (0.0, 0.0, 0.0, 1.0)


def rgba(r: float, g: float, b: float, a: float = 1.0) -> RGBA:
    return (float(r), float(g), float(b), float(a))


def rgb8(r: int, g: int, b: int) -> RGBA:
    return (r / 255.0, g / 255.0, b / 255.0, 1.0)


def color_to_rgba8(arr: tuple[int, int, int], alpha: float) -> RGBA:
    """Palette entry with ``alpha`` truncated to a byte, e.g. 0.02 -> 5/255."""
    a8 = int(alpha * 255.0)
    return (arr[0] / 255.0, arr[1] / 255.0, arr[2] / 255.0, a8 / 255.0)

"""Render configuration: stroke constants and resolved run parameters."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StrokeConfig:
    """Constants shared by every stroke of a scene."""

    # Spline degree (clamped uniform B-spline)
    degree: int = 4
    # Jitter added to each sampled point, in pixels
    jitter_scale: float = 1.5
    # Noise z-step between consecutive stroke samples
    noise_step: float = 0.002
    # Initial noise base z-offset
    noise_base_z: float = 1.0
    # Fraction of a closed shape's points repeated at its end
    wrap_fraction: float = 0.25


@dataclass(frozen=True)
class RenderConfig:
    """Start-of-run parameters. Never changed mid-run."""

    seed: int
    n_frames: int
    canvas_width: int
    canvas_height: int
    output: Path

    @property
    def canvas_size(self) -> tuple[int, int]:
        return (self.canvas_width, self.canvas_height)

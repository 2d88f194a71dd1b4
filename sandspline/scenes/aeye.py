"""AEye: an iris accumulated over many frames, saved as one still image.

Frame 0 lays down the background and the outer edge of the iris, frames
1..N each add one random radial streak, and the final frame draws the pupil.
The render is split over frames so no single frame carries every vertex.
"""

from __future__ import annotations

import math

from sandspline.engine.commands import DrawCommand, FillBackground, FillEllipse
from sandspline.engine.config import StrokeConfig
from sandspline.engine.registry import CaptureMode, Phase, PhaseSpan, SceneSpec, scene
from sandspline.engine.session import RenderSession
from sandspline.engine.stroke import render_strokes
from sandspline.errors import ConfigurationError
from sandspline.utils.color import COLORS, WHITE, color_to_rgba8, rgba
from sandspline.utils.geometry import gen_circle_points, gen_radial_points

SEED = 38274903
N_FRAMES = 202
# 4K UHD, portrait
CANVAS_SIZE = (2160, 3840)
STROKE = StrokeConfig(degree=4, jitter_scale=1.5, noise_step=0.002, noise_base_z=1.0, wrap_fraction=0.25)


def _min_dim(canvas_size: tuple[int, int]) -> float:
    return float(min(canvas_size))


def draw_outer_edge(canvas_size: tuple[int, int], session: RenderSession) -> list[DrawCommand]:
    min_dim = _min_dim(canvas_size)
    commands: list[DrawCommand] = [
        FillBackground(WHITE),
        FillEllipse(radius=min_dim * 0.5 * 0.75, color=color_to_rgba8(COLORS[1], 1.0)),
    ]
    commands.extend(
        render_strokes(
            session,
            gen_circle_points(25, min_dim * 0.75, session.stroke.wrap_fraction),
            n_lines=400,
            n_grains=6000 * 2,
            magnitude=80.0 * 2.0,
            color=color_to_rgba8(COLORS[0], 0.02),
        )
    )
    return commands


def draw_iris_streak(canvas_size: tuple[int, int], session: RenderSession) -> list[DrawCommand]:
    min_dim = _min_dim(canvas_size)
    rng = session.rng
    theta = float(rng.random()) * math.tau
    max_r = (0.1 * float(rng.random()) + 0.7) * 0.5
    n_control_points = int(10.0 * float(rng.random())) + 10
    color = color_to_rgba8(COLORS[int(rng.integers(0, len(COLORS)))], 0.02)

    return render_strokes(
        session,
        gen_radial_points(0.1 * min_dim, max_r * min_dim, n_control_points, theta),
        n_lines=100,
        n_grains=1000 * 3,
        magnitude=80.0 * 3.0,
        color=color,
    )


def draw_pupil(canvas_size: tuple[int, int], session: RenderSession) -> list[DrawCommand]:
    min_dim = _min_dim(canvas_size)
    wrap = session.stroke.wrap_fraction
    commands: list[DrawCommand] = [
        FillEllipse(radius=min_dim * 0.5 * 0.25, color=rgba(0.2, 0.2, 0.2)),
    ]
    commands.extend(
        render_strokes(
            session,
            gen_circle_points(25, min_dim * 0.25, wrap),
            n_lines=200,
            n_grains=1000 * 3,
            magnitude=20.0 * 3.0,
            color=color_to_rgba8(COLORS[1], 0.02),
        )
    )
    commands.extend(
        render_strokes(
            session,
            gen_circle_points(8, min_dim * 0.1, wrap),
            n_lines=200 * 2,
            n_grains=1000 * 2,
            magnitude=80.0 * 2.0,
            color=rgba(1.0, 1.0, 1.0, 0.02),
        )
    )
    return commands


@scene(name="aeye", description="Iris of radial noise streaks, saved as one 4K still")
def aeye(n_frames: int | None = None) -> SceneSpec:
    n_frames = N_FRAMES if n_frames is None else n_frames
    if n_frames < 2:
        raise ConfigurationError(f"aeye needs at least 2 frames (edge + pupil), got {n_frames}")
    return SceneSpec(
        name="aeye",
        spans=[
            PhaseSpan(Phase.BACKGROUND, 1, draw_outer_edge),
            PhaseSpan(Phase.IRIS, n_frames - 2, draw_iris_streak),
            PhaseSpan(Phase.PUPIL, 1, draw_pupil),
        ],
        n_frames=n_frames,
        seed=SEED,
        canvas_size=CANVAS_SIZE,
        capture=CaptureMode.FINAL,
        output_name="aeye.png",
        stroke=STROKE,
    )

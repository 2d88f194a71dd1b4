"""Sand spline: one breathing ring of noise strokes, written as an image sequence."""

from __future__ import annotations

import copy

from sandspline.engine.commands import DrawCommand, FillBackground
from sandspline.engine.config import StrokeConfig
from sandspline.engine.registry import CaptureMode, Phase, PhaseSpan, SceneSpec, scene
from sandspline.engine.session import RenderSession
from sandspline.engine.stroke import render_strokes
from sandspline.utils.color import rgb8, rgba
from sandspline.utils.geometry import gen_circle_points
from sandspline.utils.math_helpers import ease_in_out

SEED = 6382987
N_FRAMES = 1800
CANVAS_SIZE = (1024, 768)
STROKE = StrokeConfig(degree=4, jitter_scale=1.5, noise_step=0.001, noise_base_z=1.0, wrap_fraction=0.3)

BACKGROUND = rgb8(236, 230, 220)
STROKE_COLOR = rgba(0.0, 0.0, 0.0, 0.01)

# Noise base z-offset eases from DRIFT_BEGIN to DRIFT_BEGIN + DRIFT_CHANGE
DRIFT_BEGIN = 1.0
DRIFT_CHANGE = 4.0


def drift_noise(nth: int, spec: SceneSpec, session: RenderSession) -> None:
    session.noise.drift_to(ease_in_out(float(nth), DRIFT_BEGIN, DRIFT_CHANGE, float(spec.n_frames)))


def draw_ring(canvas_size: tuple[int, int], session: RenderSession) -> list[DrawCommand]:
    radius = min(canvas_size) * 0.4
    # every frame replays the same jitter sequence; only the noise drift moves
    rng = copy.deepcopy(session.rng)
    commands: list[DrawCommand] = [FillBackground(BACKGROUND)]
    commands.extend(
        render_strokes(
            session,
            gen_circle_points(10, radius, session.stroke.wrap_fraction),
            n_lines=1000,
            n_grains=8000,
            magnitude=300.0,
            color=STROKE_COLOR,
            rng=rng,
        )
    )
    return commands


@scene(name="sand-spline", description="Animated ring whose noise field drifts over the sequence")
def sand_spline(n_frames: int | None = None) -> SceneSpec:
    n_frames = N_FRAMES if n_frames is None else n_frames
    return SceneSpec(
        name="sand-spline",
        spans=[PhaseSpan(Phase.ANIMATE, n_frames, draw_ring)],
        n_frames=n_frames,
        seed=SEED,
        canvas_size=CANVAS_SIZE,
        capture=CaptureMode.SEQUENCE,
        output_name="frames",
        stroke=STROKE,
        update=drift_noise,
    )

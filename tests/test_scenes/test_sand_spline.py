"""Tests for the animated sand-spline scene."""

import numpy as np
import pytest

from sandspline.engine.registry import CaptureMode, Phase
from sandspline.engine.session import RenderSession
from sandspline.scenes.sand_spline import (
    SEED,
    STROKE,
    draw_ring,
    drift_noise,
    sand_spline,
)


def test_every_frame_animates_and_is_captured():
    spec = sand_spline(30)
    assert spec.capture is CaptureMode.SEQUENCE
    assert spec.output_name == "frames"
    assert all(spec.phase_at(n).phase is Phase.ANIMATE for n in range(30))
    assert spec.phase_at(30).phase is Phase.IDLE


def test_noise_drift_eases_across_the_run():
    spec = sand_spline(100)
    session = RenderSession.create(SEED, STROKE)
    drift_noise(0, spec, session)
    assert session.noise.base_z == pytest.approx(1.0)
    drift_noise(50, spec, session)
    assert session.noise.base_z == pytest.approx(3.0)
    drift_noise(100, spec, session)
    assert session.noise.base_z == pytest.approx(5.0)


def test_ring_replays_the_same_jitter_each_frame():
    session = RenderSession.create(SEED, STROKE)
    commands = draw_ring((200, 150), session)
    assert len(commands) == 1 + 1000
    assert all(len(c) == 8000 for c in commands[1:])
    # the session RNG is untouched; frames fork it
    assert session.rng.random() == np.random.default_rng(SEED).random()

"""Composer: drives a scene frame by frame onto a canvas and into a sink."""

from __future__ import annotations

import logging
import time

from sandspline.engine.commands import DrawCommand
from sandspline.engine.registry import CaptureMode, Phase, SceneSpec
from sandspline.engine.session import RenderSession
from sandspline.errors import ConfigurationError
from sandspline.render.canvas import Canvas
from sandspline.render.sink import Sink

logger = logging.getLogger(__name__)


class Composer:
    """Runs one scene for a fixed number of frames.

    Each frame is computed completely before its commands touch the canvas, so
    stopping after any frame leaves earlier output intact.
    """

    def __init__(
        self,
        scene: SceneSpec,
        canvas: Canvas,
        sink: Sink,
        session: RenderSession | None = None,
    ) -> None:
        self.scene = scene
        self.canvas = canvas
        self.sink = sink
        self.session = session or RenderSession.create(scene.seed, scene.stroke)

    def compose(self, nth: int) -> tuple[Phase, list[DrawCommand]]:
        """Build frame ``nth``'s draw commands without touching the canvas."""
        self.session.nth = nth
        if self.scene.update is not None:
            self.scene.update(nth, self.scene, self.session)
        span = self.scene.phase_at(nth)
        return span.phase, span.draw(self.canvas.size, self.session)

    def step(self, nth: int) -> bool:
        """Compose, draw and emit frame ``nth``. Returns False if the frame was skipped."""
        t0 = time.perf_counter()
        try:
            phase, commands = self.compose(nth)
        except ConfigurationError as e:
            self.session.errors[nth] = str(e)
            logger.warning("  frame %d FAILED: %s", nth, e)
            return False

        for command in commands:
            command.apply(self.canvas)

        if self._should_emit(nth):
            self.sink.emit_frame(self.canvas, nth)

        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  frame %d (%s, %d commands) in %.1fms", nth, phase.value, len(commands), elapsed)
        return True

    def run(self, n_frames: int | None = None) -> RenderSession:
        total = n_frames if n_frames is not None else self.scene.n_frames
        start = time.perf_counter()
        logger.info("Composer: scene %s, %d frames queued", self.scene.name, total)
        if self.scene.capture is CaptureMode.FINAL and total <= self.scene.terminal_frame:
            logger.warning(
                "Terminal frame %d is never reached; no image will be written",
                self.scene.terminal_frame,
            )

        for nth in range(total):
            self.step(nth)

        logger.info(
            "Composer complete: %d/%d frames in %.0fms (%d strokes)",
            total - len(self.session.errors),
            total,
            (time.perf_counter() - start) * 1000,
            self.session.strokes_drawn,
        )
        return self.session

    def _should_emit(self, nth: int) -> bool:
        if self.scene.capture is CaptureMode.SEQUENCE:
            return True
        return nth == self.scene.terminal_frame

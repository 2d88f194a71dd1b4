"""Output sinks: persist canvas snapshots as PNG files.

Writes happen on one background thread from a snapshot copy, so the next
frame can be drawn while the previous one is encoded. ``wait()`` must be
called (or the sink used as a context manager) before the process exits.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Protocol

from PIL import Image

from sandspline.errors import ConfigurationError, ResourceError
from sandspline.render.canvas import Canvas

logger = logging.getLogger(__name__)


class Sink(Protocol):
    def emit_frame(self, canvas: Canvas, nth: int) -> Future[Path]: ...

    def wait(self) -> None: ...


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigurationError(f"Failed to create output directory '{path}': {e}") from e


def write_png(image: Image.Image, path: Path) -> Path:
    """Write ``image`` to ``path`` via a temporary file so no partial PNG is left behind."""
    tmp = path.with_name(path.name + ".tmp")
    try:
        image.save(tmp, format="PNG")
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise ResourceError(f"failed to save texture to png image '{path}': {e}") from e
    return path


class ImageSink:
    """Base sink: background PNG writer with pending-write tracking."""

    def __init__(self) -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="png-writer")
        self._pending: list[Future[Path]] = []
        self.written: list[Path] = []

    def path_for(self, nth: int) -> Path:
        raise NotImplementedError

    def emit_frame(self, canvas: Canvas, nth: int) -> Future[Path]:
        self._collect(block=False)
        image = canvas.snapshot()
        path = self.path_for(nth)
        future = self._executor.submit(write_png, image, path)
        self._pending.append(future)
        logger.debug("Queued frame %d -> %s", nth, path)
        return future

    def wait(self) -> None:
        logger.info("Waiting for PNG writing to complete...")
        try:
            self._collect(block=True)
        finally:
            self._executor.shutdown(wait=True)
        logger.info("Done!")

    def _collect(self, block: bool) -> None:
        """Record finished writes and re-raise the first failure."""
        for future in list(self._pending):
            if block or future.done():
                self._pending.remove(future)
                self.written.append(future.result())

    def __enter__(self) -> ImageSink:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wait()


class StillImageSink(ImageSink):
    """Writes every emitted frame to the same file; normally emitted once."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        _ensure_dir(self.path.parent)
        super().__init__()

    def path_for(self, nth: int) -> Path:
        return self.path


class FrameSequenceSink(ImageSink):
    """Writes ``frame-0000.png``, ``frame-0001.png``, ... into ``out_dir``."""

    def __init__(self, out_dir: Path | str) -> None:
        self.out_dir = Path(out_dir)
        _ensure_dir(self.out_dir)
        super().__init__()

    def path_for(self, nth: int) -> Path:
        return self.out_dir / f"frame-{nth:04d}.png"

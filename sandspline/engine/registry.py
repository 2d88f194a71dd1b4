"""Scene registry — every scene is a builder function registered via decorator.

Usage:
    @scene(name="aeye", description="Iris built up over 200 frames")
    def aeye(n_frames: int | None = None) -> SceneSpec:
        return SceneSpec(...)

Adding a new scene = creating one module under ``sandspline.scenes`` with the
decorator. Nothing else changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from sandspline.engine.config import StrokeConfig
from sandspline.errors import ConfigurationError

if TYPE_CHECKING:
    from sandspline.engine.commands import DrawCommand
    from sandspline.engine.session import RenderSession

logger = logging.getLogger(__name__)

PhaseFn = Callable[[tuple[int, int], "RenderSession"], list["DrawCommand"]]
UpdateFn = Callable[[int, "SceneSpec", "RenderSession"], None]


class Phase(enum.Enum):
    BACKGROUND = "background"
    IRIS = "iris"
    PUPIL = "pupil"
    ANIMATE = "animate"
    IDLE = "idle"


class CaptureMode(enum.Enum):
    # One still image once the terminal phase has been drawn
    FINAL = "final"
    # One numbered image per frame
    SEQUENCE = "sequence"


def _draw_nothing(canvas_size: tuple[int, int], session: RenderSession) -> list[DrawCommand]:
    return []


@dataclass(frozen=True)
class PhaseSpan:
    phase: Phase
    frames: int
    draw: PhaseFn


IDLE_SPAN = PhaseSpan(phase=Phase.IDLE, frames=0, draw=_draw_nothing)


@dataclass
class SceneSpec:
    name: str
    spans: list[PhaseSpan]
    n_frames: int
    seed: int
    canvas_size: tuple[int, int]
    capture: CaptureMode = CaptureMode.FINAL
    # Default file (FINAL) or directory (SEQUENCE) name
    output_name: str = "out"
    stroke: StrokeConfig = field(default_factory=StrokeConfig)
    # Called before each frame is composed
    update: UpdateFn | None = None

    def __post_init__(self) -> None:
        if self.n_frames < 1:
            raise ConfigurationError(f"scene {self.name!r} needs at least one frame")
        for span in self.spans:
            if span.frames < 0:
                raise ConfigurationError(f"phase {span.phase.name} has a negative frame count")

    @property
    def drawn_frames(self) -> int:
        """Frames covered by the phase table; everything after is idle."""
        return sum(s.frames for s in self.spans)

    @property
    def terminal_frame(self) -> int:
        return self.drawn_frames - 1

    def phase_at(self, nth: int) -> PhaseSpan:
        """Transition table: frame number -> phase span."""
        if nth < 0:
            raise ValueError(f"frame numbers start at 0, got {nth}")
        first = 0
        for span in self.spans:
            if nth < first + span.frames:
                return span
            first += span.frames
        return IDLE_SPAN


SceneBuilder = Callable[..., SceneSpec]


@dataclass
class SceneEntry:
    name: str
    build: SceneBuilder
    description: str = ""


class SceneRegistry:
    """Registry of all scene builders."""

    def __init__(self) -> None:
        self._scenes: dict[str, SceneEntry] = {}

    def register(self, entry: SceneEntry) -> None:
        if entry.name in self._scenes:
            raise ValueError(f"Duplicate scene name: {entry.name}")
        self._scenes[entry.name] = entry
        logger.debug("Registered scene %s", entry.name)

    def get(self, name: str) -> SceneEntry:
        try:
            return self._scenes[name]
        except KeyError:
            known = ", ".join(sorted(self._scenes)) or "none"
            raise ConfigurationError(f"Unknown scene {name!r} (known: {known})") from None

    def all(self) -> list[SceneEntry]:
        return sorted(self._scenes.values(), key=lambda e: e.name)

    @property
    def count(self) -> int:
        return len(self._scenes)


# Module-level singleton
_registry = SceneRegistry()


def get_registry() -> SceneRegistry:
    return _registry


def scene(*, name: str, description: str = ""):
    """Decorator to register a scene builder."""

    def decorator(fn: SceneBuilder) -> SceneBuilder:
        _registry.register(SceneEntry(name=name, build=fn, description=description))
        return fn

    return decorator

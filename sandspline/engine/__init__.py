"""sandspline stroke engine."""

from sandspline.engine.composer import Composer
from sandspline.engine.registry import CaptureMode, Phase, PhaseSpan, SceneSpec, get_registry, scene
from sandspline.engine.session import RenderSession

__all__ = [
    "scene",
    "get_registry",
    "Phase",
    "PhaseSpan",
    "CaptureMode",
    "SceneSpec",
    "RenderSession",
    "Composer",
]

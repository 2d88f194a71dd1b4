"""Command-line entry point.

Usage:
  sandspline                                  # render the aeye still
  sandspline --scene sand-spline --frames 60  # first 60 frames of the animation
  sandspline --seed 7 --size 1080x1920 --out eye.png
  sandspline --list                           # show registered scenes
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from sandspline.config import Settings, settings
from sandspline.engine.composer import Composer
from sandspline.engine.config import RenderConfig
from sandspline.engine.registry import CaptureMode, SceneSpec, get_registry
from sandspline.engine.session import RenderSession
from sandspline.errors import ConfigurationError, SandSplineError
from sandspline.render.canvas import RasterCanvas
from sandspline.render.sink import FrameSequenceSink, ImageSink, StillImageSink

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_SCENE = "aeye"


def _register_scenes() -> None:
    """Import all scene modules so @scene decorators fire."""
    import importlib
    import pkgutil

    package = importlib.import_module("sandspline.scenes")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"sandspline.scenes.{module_name}")


def parse_size(text: str) -> tuple[int, int]:
    try:
        w, h = text.lower().split("x")
        return int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sandspline",
        description="Render noise-perturbed B-spline stroke imagery",
    )
    parser.add_argument("--scene", default=DEFAULT_SCENE, help="scene to render")
    parser.add_argument("--seed", type=int, help="RNG seed (default: the scene's)")
    parser.add_argument("--frames", type=int, help="number of frames to run")
    parser.add_argument("--size", type=parse_size, help="canvas size as WIDTHxHEIGHT")
    parser.add_argument("-o", "--out", type=Path, help="output file (still) or directory (sequence)")
    parser.add_argument("--list", action="store_true", help="list scenes and exit")
    return parser


def resolve_config(args: argparse.Namespace, spec: SceneSpec, cfg: Settings) -> RenderConfig:
    """CLI flags override settings, settings override scene defaults."""
    seed = args.seed if args.seed is not None else cfg.seed
    width, height = spec.canvas_size
    if args.size is not None:
        width, height = args.size
    else:
        width = cfg.canvas_width or width
        height = cfg.canvas_height or height
    output = args.out if args.out is not None else Path(cfg.out_dir) / spec.output_name
    return RenderConfig(
        seed=spec.seed if seed is None else seed,
        n_frames=spec.n_frames,
        canvas_width=width,
        canvas_height=height,
        output=output,
    )


def make_sink(spec: SceneSpec, output: Path) -> ImageSink:
    if spec.capture is CaptureMode.SEQUENCE:
        return FrameSequenceSink(output)
    return StillImageSink(output)


def render(args: argparse.Namespace, cfg: Settings) -> Path:
    entry = get_registry().get(args.scene)
    n_frames = args.frames if args.frames is not None else cfg.n_frames
    if n_frames is not None and n_frames < 1:
        raise ConfigurationError(f"frame count must be positive, got {n_frames}")
    spec = entry.build(n_frames)
    run_cfg = resolve_config(args, spec, cfg)

    logger.info(
        "Rendering %s: seed=%d frames=%d canvas=%dx%d -> %s",
        spec.name,
        run_cfg.seed,
        run_cfg.n_frames,
        run_cfg.canvas_width,
        run_cfg.canvas_height,
        run_cfg.output,
    )
    canvas = RasterCanvas(run_cfg.canvas_width, run_cfg.canvas_height)
    session = RenderSession.create(run_cfg.seed, spec.stroke)
    with make_sink(spec, run_cfg.output) as sink:
        Composer(spec, canvas, sink, session).run(run_cfg.n_frames)
    return run_cfg.output


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    _register_scenes()

    if args.list:
        for entry in get_registry().all():
            print(f"{entry.name:<14} {entry.description}")
        return 0

    try:
        output = render(args, settings)
    except SandSplineError as e:
        logger.error("%s", e)
        return 1
    logger.info("Wrote %s", output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

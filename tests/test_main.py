"""Tests for the command-line entry point."""

import argparse
from pathlib import Path

import pytest
from PIL import Image

from sandspline.config import Settings
from sandspline.main import build_parser, main, parse_size, resolve_config
from sandspline.scenes.aeye import aeye


def test_list_scenes(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "aeye" in out
    assert "sand-spline" in out


def test_unknown_scene_exits_with_error():
    assert main(["--scene", "nope"]) == 1


def test_zero_frames_exits_with_error(tmp_path):
    assert main(["--frames", "0", "--out", str(tmp_path / "x.png")]) == 1


def test_parse_size():
    assert parse_size("1080x1920") == (1080, 1920)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_size("big")


def test_flags_override_settings_override_scene(tmp_path):
    spec = aeye()
    cfg = Settings(seed=11, canvas_width=640, out_dir=str(tmp_path))

    args = build_parser().parse_args([])
    resolved = resolve_config(args, spec, cfg)
    assert resolved.seed == 11
    assert resolved.canvas_size == (640, spec.canvas_size[1])
    assert resolved.output == Path(tmp_path) / "aeye.png"

    args = build_parser().parse_args(["--seed", "3", "--size", "10x20", "--out", "eye.png"])
    resolved = resolve_config(args, spec, cfg)
    assert resolved.seed == 3
    assert resolved.canvas_size == (10, 20)
    assert resolved.output == Path("eye.png")


def test_scene_defaults_without_overrides():
    spec = aeye()
    resolved = resolve_config(build_parser().parse_args([]), spec, Settings(_env_file=None))
    assert resolved.seed == spec.seed
    assert resolved.canvas_size == (2160, 3840)
    assert resolved.n_frames == 202


def test_render_short_aeye(tmp_path):
    out = tmp_path / "eye.png"
    assert main(["--frames", "3", "--size", "120x90", "--out", str(out)]) == 0
    with Image.open(out) as image:
        assert image.size == (120, 90)


def test_render_sand_spline_frame(tmp_path):
    out_dir = tmp_path / "frames"
    assert main(["--scene", "sand-spline", "--frames", "1", "--size", "64x48", "--out", str(out_dir)]) == 0
    assert [p.name for p in out_dir.iterdir()] == ["frame-0000.png"]

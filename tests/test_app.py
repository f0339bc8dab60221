"""Command line evaluation of a crop state."""

import json
import logging

import pytest

from rotacrop.app import main


def _run(capsys, *argv: str) -> dict:
    assert main(list(argv)) == 0
    return json.loads(capsys.readouterr().out)


def test_full_image_without_rotation(capsys) -> None:
    out = _run(capsys, "800", "600", "--min-size", "100", "100")
    assert out["crop_size"] == {"width": 800.0, "height": 600.0}
    assert out["crop"] == {"x": -400.0, "y": -300.0, "width": 800.0, "height": 600.0}
    assert out["max_rotation"] == 45.0
    assert out["contained"] is True


def test_rotated_default_crop_is_contained(capsys) -> None:
    out = _run(capsys, "800", "600", "--rotation", "10", "--min-size", "100", "100")
    assert out["rotation"] == 10.0
    assert out["crop_size"]["width"] < 800
    assert out["contained"] is True


def test_rotation_is_clamped_to_limit(capsys) -> None:
    out = _run(capsys, "800", "600", "--rotation", "40", "--min-size", "700", "500")
    assert out["rotation"] == out["max_rotation"]
    assert out["rotation"] < 40


def test_explicit_crop_and_offset(capsys) -> None:
    out = _run(
        capsys,
        "800",
        "600",
        "--crop",
        "300",
        "200",
        "--offset",
        "1000",
        "0",
        "--min-size",
        "100",
        "100",
    )
    assert out["offset"] == {"x": 250.0, "y": 0.0}
    assert out["crop"]["x"] == 100.0


def test_base_rotation_swaps_dims(capsys) -> None:
    out = _run(capsys, "800", "600", "--base", "90", "--min-size", "100", "100")
    assert out["effective_dims"] == {"width": 600.0, "height": 800.0}
    assert out["base_rotation"] == 90


def test_config_file_sets_minimums(capsys, tmp_path) -> None:
    cfg = tmp_path / "rotacrop.json"
    cfg.write_text(json.dumps({"min_crop_width": 700, "min_crop_height": 500}))
    out = _run(capsys, "800", "600", "--rotation", "40", "--config", str(cfg))
    assert out["rotation"] < 40


def test_unreadable_config_falls_back_to_defaults(capsys, tmp_path, caplog) -> None:
    cfg = tmp_path / "broken.json"
    cfg.write_text("{not json")
    with caplog.at_level(logging.WARNING, logger="rotacrop.app"):
        out = _run(capsys, "500", "400", "--config", str(cfg))
    assert "Could not read config" in caplog.text
    assert out["crop_size"] == {"width": 500.0, "height": 400.0}


def test_negative_min_size_is_an_error(capsys) -> None:
    assert main(["800", "600", "--min-size", "-1", "100"]) == 2


def test_invalid_base_rotation_exits() -> None:
    with pytest.raises(SystemExit):
        main(["800", "600", "--base", "45"])

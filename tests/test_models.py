import json

import pytest

from rotacrop.models import (
    CropperConfig,
    CropperState,
    DefaultCrop,
    ExplicitCrop,
    Size,
)


def test_default_state() -> None:
    state = CropperState()
    assert state.rotation == 0.0
    assert state.base_rotation == 0
    assert state.crop == DefaultCrop()
    assert state.explicit_size is None
    assert state.display_angle == 0.0


def test_state_display_angle_and_explicit_size() -> None:
    state = CropperState(
        rotation=-7.5, base_rotation=270, crop=ExplicitCrop(Size(3, 4))
    )
    assert state.display_angle == 262.5
    assert state.explicit_size == Size(3, 4)


def test_state_rejects_unknown_base_rotation() -> None:
    with pytest.raises(ValueError):
        CropperState(base_rotation=45)


def test_config_json_round_trip() -> None:
    cfg = CropperConfig(
        min_crop_width=120.0, min_crop_height=80.0, commit_delay_ms=250
    )
    assert CropperConfig.from_json(cfg.to_json()) == cfg


def test_config_from_partial_json_uses_defaults() -> None:
    cfg = CropperConfig.from_json(json.dumps({"min_crop_width": 10}))
    assert cfg.min_crop_width == 10.0
    assert cfg.min_crop_height == 250.0
    assert cfg.commit_delay_ms == 500


@pytest.mark.parametrize(
    "kwargs",
    ({"min_crop_width": -1.0}, {"min_crop_height": -0.5}, {"commit_delay_ms": -10}),
)
def test_config_rejects_negative_values(kwargs) -> None:
    with pytest.raises(ValueError):
        CropperConfig(**kwargs)

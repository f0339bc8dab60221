"""Command line entry point: evaluate the crop layout for one image state."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

import argparse
import json
import logging
import sys

from . import __version__ as APP_VERSION
from .geometry import (
    clamp_rotation,
    crop_data_for,
    crop_is_contained,
    effective_dims,
    max_rotation_for,
    resolve_crop_size,
    resolve_offset,
)
from .models import (
    BASE_ROTATIONS,
    CropperConfig,
    CropperState,
    DefaultCrop,
    ExplicitCrop,
    Point,
    Size,
)

_LOGGER = logging.getLogger(__name__)


def _load_config(path: Optional[Path]) -> CropperConfig:
    if path is None:
        return CropperConfig()
    try:
        return CropperConfig.from_json(path.read_text(encoding="utf-8"))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        _LOGGER.warning("Could not read config %s (%s); using defaults", path, exc)
        return CropperConfig()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rotacrop",
        description="Compute the constrained crop box for a rotated image.",
    )
    parser.add_argument("width", type=float, help="Displayed image width")
    parser.add_argument("height", type=float, help="Displayed image height")
    parser.add_argument(
        "--rotation", type=float, default=0.0, help="Fine rotation in degrees"
    )
    parser.add_argument(
        "--base", type=int, choices=BASE_ROTATIONS, default=0, help="Base rotation"
    )
    parser.add_argument(
        "--crop", type=float, nargs=2, metavar=("W", "H"), help="Requested crop size"
    )
    parser.add_argument(
        "--offset",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        default=(0.0, 0.0),
        help="Crop centre offset from the image centre",
    )
    parser.add_argument(
        "--min-size", type=float, nargs=2, metavar=("W", "H"), help="Minimum crop size"
    )
    parser.add_argument("--config", type=Path, help="JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=APP_VERSION)
    return parser


def evaluate(display: Size, state: CropperState, config: CropperConfig) -> dict:
    """Resolve ``state`` against the image the way a crop session displays it."""
    min_w = config.min_crop_width
    min_h = config.min_crop_height
    dims = effective_dims(display, state.base_rotation)
    max_rotation = max_rotation_for(state, dims, min_w, min_h)
    rotation = clamp_rotation(state.rotation, max_rotation)
    if rotation != state.rotation:
        _LOGGER.info("rotation %.2f clamped to +/-%.1f", state.rotation, max_rotation)
    resolved = CropperState(
        rotation=rotation,
        base_rotation=state.base_rotation,
        crop=state.crop,
        offset=state.offset,
    )
    crop = resolve_crop_size(resolved, dims, min_w, min_h)
    offset = resolve_offset(resolved, crop, dims)
    return {
        "effective_dims": asdict(dims),
        "max_rotation": max_rotation,
        "rotation": rotation,
        "base_rotation": state.base_rotation,
        "crop_size": asdict(crop),
        "offset": asdict(offset),
        "crop": asdict(crop_data_for(crop, offset)),
        "contained": crop_is_contained(
            offset.x,
            offset.y,
            crop.width,
            crop.height,
            dims.width,
            dims.height,
            rotation,
            tolerance=0.5,
        ),
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = _load_config(args.config)
    if args.min_size is not None:
        try:
            config = CropperConfig(
                min_crop_width=args.min_size[0],
                min_crop_height=args.min_size[1],
                commit_delay_ms=config.commit_delay_ms,
            )
        except ValueError as exc:
            _LOGGER.error("%s", exc)
            return 2

    state = CropperState(
        rotation=args.rotation,
        base_rotation=args.base,
        crop=ExplicitCrop(Size(*args.crop)) if args.crop else DefaultCrop(),
        offset=Point(*args.offset),
    )
    result = evaluate(Size(args.width, args.height), state, config)
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

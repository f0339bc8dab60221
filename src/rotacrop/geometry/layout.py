"""Derive the displayed crop box from a stored :class:`CropperState`."""

from __future__ import annotations

from ..models import (
    CropData,
    CropperState,
    DefaultCrop,
    ExplicitCrop,
    Point,
    Size,
)
from ..utils import clamp
from .core import (
    MAX_FINE_ROTATION,
    clamp_crop_dims,
    compute_crop_size,
    find_max_rotation,
)
from .offset import clamp_offset


def _is_swapped(base_rotation: int) -> bool:
    return base_rotation in (90, 270)


def effective_dims(display: Size, base_rotation: int) -> Size:
    """Image size as seen after the base rotation (W/H swap for 90 and 270)."""
    if _is_swapped(base_rotation):
        return Size(display.height, display.width)
    return display


def resolve_crop_size(
    state: CropperState, dims: Size, min_w: float, min_h: float
) -> Size:
    """Crop size for ``state`` at its current rotation."""
    crop = state.crop
    if isinstance(crop, DefaultCrop):
        return compute_crop_size(dims.width, dims.height, state.rotation)
    if isinstance(crop, ExplicitCrop):
        return clamp_crop_dims(
            crop.size.width,
            crop.size.height,
            dims.width,
            dims.height,
            state.rotation,
            min_w,
            min_h,
        )
    raise TypeError(f"Unknown crop box {crop!r}")


def resolve_offset(state: CropperState, crop: Size, dims: Size) -> Point:
    """Stored offset pulled back inside the rotated image."""
    return clamp_offset(
        state.offset.x,
        state.offset.y,
        crop.width,
        crop.height,
        dims.width,
        dims.height,
        state.rotation,
    )


def max_rotation_for(
    state: CropperState, dims: Size, min_w: float, min_h: float
) -> float:
    """Slider limit for the fine rotation of ``state``.

    With no image size yet, the full range is allowed.
    """
    if dims.width <= 0 or dims.height <= 0:
        return MAX_FINE_ROTATION
    return find_max_rotation(dims.width, dims.height, state.explicit_size, min_w, min_h)


def clamp_rotation(rotation: float, limit: float) -> float:
    return clamp(rotation, -limit, limit)


def crop_data_for(crop: Size, offset: Point) -> CropData:
    """Crop rectangle with its top-left corner relative to the image centre."""
    return CropData(
        x=offset.x - crop.width / 2.0,
        y=offset.y - crop.height / 2.0,
        width=crop.width,
        height=crop.height,
    )


def can_rotate_quarter(
    display: Size, base_rotation: int, min_w: float, min_h: float
) -> bool:
    """True if the image still fits the minimum crop after another 90 degrees."""
    dims = effective_dims(display, (base_rotation + 90) % 360)
    return dims.width >= min_w and dims.height >= min_h


__all__ = [
    "can_rotate_quarter",
    "clamp_rotation",
    "crop_data_for",
    "effective_dims",
    "max_rotation_for",
    "resolve_crop_size",
    "resolve_offset",
]

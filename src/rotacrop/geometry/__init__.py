"""Crop geometry for rectangles inside a rotated image."""

from .containment import (
    corners_contained,
    crop_corners,
    crop_is_contained,
    point_in_rotated_image,
)
from .core import (
    MAX_FINE_ROTATION,
    clamp_crop_dims,
    compute_crop_size,
    find_max_rotation,
)
from .layout import (
    can_rotate_quarter,
    clamp_rotation,
    crop_data_for,
    effective_dims,
    max_rotation_for,
    resolve_crop_size,
    resolve_offset,
)
from .offset import clamp_offset

__all__ = [
    "MAX_FINE_ROTATION",
    "can_rotate_quarter",
    "clamp_crop_dims",
    "clamp_offset",
    "clamp_rotation",
    "compute_crop_size",
    "corners_contained",
    "crop_corners",
    "crop_data_for",
    "crop_is_contained",
    "effective_dims",
    "find_max_rotation",
    "max_rotation_for",
    "point_in_rotated_image",
    "resolve_crop_size",
    "resolve_offset",
]

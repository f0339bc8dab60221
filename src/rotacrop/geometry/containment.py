"""Containment tests for points and rectangles inside a rotated image.

All coordinates are relative to the image centre. A point ``(px, py)`` lies
inside an image of size ``img_w x img_h`` rotated by ``rotation_deg`` when its
inverse-rotated coordinates ``(u, v)`` satisfy ``|u| <= img_w/2`` and
``|v| <= img_h/2``.
"""

from __future__ import annotations

import numpy as np

from ..utils import to_image_frame, trig


def point_in_rotated_image(
    px: float,
    py: float,
    img_w: float,
    img_h: float,
    rotation_deg: float,
    tolerance: float = 0.0,
) -> bool:
    """Return True if the centre-relative point lies inside the rotated image."""
    u, v = to_image_frame(px, py, rotation_deg)
    return abs(u) <= img_w / 2.0 + tolerance and abs(v) <= img_h / 2.0 + tolerance


def crop_corners(
    offset_x: float, offset_y: float, crop_w: float, crop_h: float
) -> np.ndarray:
    """Return the four corners of an axis-aligned crop as a ``(4, 2)`` array."""
    hw = crop_w / 2.0
    hh = crop_h / 2.0
    signs = np.array([[-1.0, -1.0], [1.0, -1.0], [-1.0, 1.0], [1.0, 1.0]])
    return signs * np.array([hw, hh]) + np.array([offset_x, offset_y])


def corners_contained(
    points: np.ndarray,
    img_w: float,
    img_h: float,
    rotation_deg: float,
    tolerance: float = 0.0,
) -> np.ndarray:
    """Vectorised containment test; returns one boolean per row of ``points``."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    _, cos_t, sin_t = trig(rotation_deg)
    u = pts[:, 0] * cos_t + pts[:, 1] * sin_t
    v = -pts[:, 0] * sin_t + pts[:, 1] * cos_t
    return (np.abs(u) <= img_w / 2.0 + tolerance) & (
        np.abs(v) <= img_h / 2.0 + tolerance
    )


def crop_is_contained(
    offset_x: float,
    offset_y: float,
    crop_w: float,
    crop_h: float,
    img_w: float,
    img_h: float,
    rotation_deg: float,
    tolerance: float = 1e-6,
) -> bool:
    """Return True if every corner of the crop lies inside the rotated image."""
    corners = crop_corners(offset_x, offset_y, crop_w, crop_h)
    return bool(
        np.all(corners_contained(corners, img_w, img_h, rotation_deg, tolerance))
    )


__all__ = [
    "point_in_rotated_image",
    "crop_corners",
    "corners_contained",
    "crop_is_contained",
]

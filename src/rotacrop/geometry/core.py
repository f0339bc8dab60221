"""Crop sizing under rotation: inscribed rectangle, clamp, max-angle search."""

from __future__ import annotations

import math
from typing import Optional

from ..models import Size
from ..utils import EPSILON, trig

MAX_FINE_ROTATION = 45.0
SEARCH_ITERATIONS = 50


def compute_crop_size(width: float, height: float, rotation_deg: float) -> Size:
    """Largest centred, aspect-locked rectangle inside the rotated image.

    The result does not depend on the sign of the rotation.
    """
    if width == 0 or height == 0:
        return Size(0.0, 0.0)
    theta, cos_t, sin_t = trig(abs(rotation_deg))
    if theta < EPSILON:
        return Size(width, height)
    s = min(
        width / (width * cos_t + height * sin_t),
        height / (width * sin_t + height * cos_t),
    )
    return Size(s * width, s * height)


def _max_half_width(
    hh: float, hi_w: float, hi_h: float, cos_t: float, sin_t: float
) -> float:
    bound = math.inf
    if cos_t > EPSILON:
        bound = min(bound, (hi_w - hh * sin_t) / cos_t)
    if sin_t > EPSILON:
        bound = min(bound, (hi_h - hh * cos_t) / sin_t)
    return bound


def _max_half_height(
    hw: float, hi_w: float, hi_h: float, cos_t: float, sin_t: float
) -> float:
    bound = math.inf
    if sin_t > EPSILON:
        bound = min(bound, (hi_w - hw * cos_t) / sin_t)
    if cos_t > EPSILON:
        bound = min(bound, (hi_h - hw * sin_t) / cos_t)
    return bound


def clamp_crop_dims(
    crop_w: float,
    crop_h: float,
    img_w: float,
    img_h: float,
    rotation_deg: float,
    min_w: float,
    min_h: float,
) -> Size:
    """Largest feasible centred crop no larger than ``crop_w x crop_h``.

    Width is settled first. If the minimum width cannot fit next to the
    requested height, the width is pinned to its minimum and the height
    gives way instead. Minimums always win, so with infeasible minimums the
    returned size may leave the image; callers treat that as a rotation that
    is out of range rather than an error.
    """
    theta, cos_t, sin_t = trig(abs(rotation_deg))
    hi_w = img_w / 2.0
    hi_h = img_h / 2.0
    min_hw = min_w / 2.0
    min_hh = min_h / 2.0

    hw = max(crop_w / 2.0, min_hw)
    hh = max(crop_h / 2.0, min_hh)

    if theta < EPSILON:
        hw = min(hw, hi_w)
        hh = min(hh, hi_h)
    else:
        max_hw = _max_half_width(hh, hi_w, hi_h, cos_t, sin_t)
        if max_hw < min_hw:
            # Minimum width does not fit at this height: anchor on it.
            max_hh = _max_half_height(min_hw, hi_w, hi_h, cos_t, sin_t)
            hh = max(min(hh, max_hh), min_hh)
            hw = min_hw
        else:
            hw = min(hw, max_hw)

        max_hh = _max_half_height(hw, hi_w, hi_h, cos_t, sin_t)
        hh = max(min(hh, max_hh), min_hh)

    return Size(hw * 2.0, hh * 2.0)


def find_max_rotation(
    img_w: float,
    img_h: float,
    custom_crop: Optional[Size],
    min_w: float,
    min_h: float,
) -> float:
    """Largest rotation magnitude in ``[0, 45]`` that still fits the minimum crop.

    Binary search over a fixed number of iterations; the result is rounded
    half-up to one decimal.
    """
    lo = 0.0
    hi = MAX_FINE_ROTATION
    for _ in range(SEARCH_ITERATIONS):
        mid = (lo + hi) / 2.0
        if custom_crop is not None:
            c = clamp_crop_dims(
                custom_crop.width, custom_crop.height, img_w, img_h, mid, min_w, min_h
            )
        else:
            c = compute_crop_size(img_w, img_h, mid)
        if c.width >= min_w and c.height >= min_h:
            lo = mid
        else:
            hi = mid
    return math.floor(lo * 10.0 + 0.5) / 10.0


__all__ = [
    "MAX_FINE_ROTATION",
    "SEARCH_ITERATIONS",
    "compute_crop_size",
    "clamp_crop_dims",
    "find_max_rotation",
]

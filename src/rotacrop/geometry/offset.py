"""Pull an off-centre crop back inside the rotated image."""

from __future__ import annotations

import logging

from ..models import Point
from ..utils import trig

_LOGGER = logging.getLogger(__name__)

RELAX_ITERATIONS = 8
CORNER_TOLERANCE = 0.5


def clamp_offset(
    ox: float,
    oy: float,
    crop_w: float,
    crop_h: float,
    img_w: float,
    img_h: float,
    rotation_deg: float,
) -> Point:
    """Nudge the crop centre ``(ox, oy)`` until all four corners are inside the image.

    Each violating corner shifts the centre back along the image axis it
    overshoots, by exactly the overshoot. The loop stops early once every
    corner is within ``CORNER_TOLERANCE``; otherwise it gives up silently
    after ``RELAX_ITERATIONS`` passes.
    """
    _, cos_t, sin_t = trig(rotation_deg)
    hi_w = img_w / 2.0
    hi_h = img_h / 2.0
    hw = crop_w / 2.0
    hh = crop_h / 2.0
    corners = ((-hw, -hh), (hw, -hh), (-hw, hh), (hw, hh))

    cx = ox
    cy = oy
    for _ in range(RELAX_ITERATIONS):
        ok = True
        for dx, dy in corners:
            px = cx + dx
            py = cy + dy
            u = px * cos_t + py * sin_t
            v = -px * sin_t + py * cos_t

            if abs(u) > hi_w + CORNER_TOLERANCE:
                excess = u - hi_w if u > 0 else u + hi_w
                cx -= excess * cos_t
                cy -= excess * sin_t
                ok = False
            if abs(v) > hi_h + CORNER_TOLERANCE:
                excess = v - hi_h if v > 0 else v + hi_h
                cx += excess * sin_t
                cy -= excess * cos_t
                ok = False
        if ok:
            break
    else:
        _LOGGER.debug(
            "offset relaxation stopped after %d passes at (%.3f, %.3f)",
            RELAX_ITERATIONS,
            cx,
            cy,
        )

    return Point(cx, cy)


__all__ = ["RELAX_ITERATIONS", "CORNER_TOLERANCE", "clamp_offset"]

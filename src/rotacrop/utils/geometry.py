"""Small trigonometry helpers shared by the crop geometry."""

import math
from typing import Tuple

EPSILON = 1e-9


def rotate_point(
    x: float, y: float, cx: float, cy: float, angle_deg: float
) -> Tuple[float, float]:
    """Rotate a point around ``(cx, cy)`` by ``angle_deg`` degrees."""
    theta = math.radians(angle_deg)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    x0 = x - cx
    y0 = y - cy
    xr = x0 * cos_t - y0 * sin_t + cx
    yr = x0 * sin_t + y0 * cos_t + cy
    return xr, yr


def to_image_frame(px: float, py: float, angle_deg: float) -> Tuple[float, float]:
    """Express a centre-relative point in the frame of the rotated image."""
    return rotate_point(px, py, 0.0, 0.0, -angle_deg)


def trig(angle_deg: float) -> Tuple[float, float, float]:
    """Return ``(theta, cos, sin)`` for an angle in degrees."""
    theta = math.radians(angle_deg)
    return theta, math.cos(theta), math.sin(theta)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


__all__ = ["EPSILON", "rotate_point", "to_image_frame", "trig", "clamp"]

"""Utility helpers for rotacrop."""

from .geometry import EPSILON, clamp, rotate_point, to_image_frame, trig

__all__ = ["EPSILON", "clamp", "rotate_point", "to_image_frame", "trig"]

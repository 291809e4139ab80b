"""
Geometry helpers for movement and collision
"""

from __future__ import annotations

import math

from .models import Circle, Rect


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def normalize(x: float, y: float) -> tuple[float, float] | None:
    """Normalize a vector to unit length; None when it has no length"""
    length = math.hypot(x, y)
    if length == 0.0 or not math.isfinite(length):
        return None
    return x / length, y / length


def sanitize_delta(delta_time: float, max_delta: float) -> float:
    """Frame time guard: non-finite or negative frames count as zero."""
    try:
        dt = float(delta_time)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(dt) or dt < 0.0:
        return 0.0
    return min(dt, max_delta)


def intersects(rect: Rect, circle: Circle) -> bool:
    """
    Rectangle vs circle overlap.

    The circle center is clamped into the rectangle on each axis to find the
    closest point; touching edges do not count as a collision.
    """
    closest_x = clamp(circle.x, rect.x, rect.x + rect.width)
    closest_y = clamp(circle.y, rect.y, rect.y + rect.height)
    dx = circle.x - closest_x
    dy = circle.y - closest_y
    return dx * dx + dy * dy < circle.radius * circle.radius

from __future__ import annotations

"""Hazard entities: straight-line projectiles and delayed area effects.

Both variants share the same contract: an `active` flag, `update(dt)`,
`hit_circle()` for collision and `view()` for rendering. The `kind` tag lets
the simulation branch on variant-specific rules without isinstance checks.
"""

import math

from .constants import (
    AREA_WARNING_ALPHA_FLOOR, AREA_ACTIVE_ALPHA, DEFAULT_DIRECTION, LINEAR_COLOR,
)
from .models import AreaPhase, Circle, HazardKind, HazardShape, HazardView
from .utils import normalize


class LinearHazard:
    """
    A projectile travelling in a straight line at constant speed.

    The direction is fixed at construction: it is aimed at where the target
    was, not re-tracked. It deactivates once fully outside the arena on a
    side it is moving away from.
    """

    kind = HazardKind.LINEAR

    def __init__(self, start_x: float, start_y: float, target_x: float, target_y: float,
                 speed: float, radius: float, arena_width: float, arena_height: float,
                 shape: HazardShape = HazardShape.ORB, color: tuple[int, int, int] = LINEAR_COLOR,
                 length: float = 0.0) -> None:
        self.x = start_x
        self.y = start_y
        self.radius = radius
        self.speed = speed
        self.arena_width = arena_width
        self.arena_height = arena_height
        self.shape = shape
        self.color = color
        self.length = length
        self.active = True

        direction = normalize(target_x - start_x, target_y - start_y) or DEFAULT_DIRECTION
        self.vx = direction[0] * speed
        self.vy = direction[1] * speed

    @property
    def orientation(self) -> float:
        """Angle of the velocity vector in degrees."""
        return math.degrees(math.atan2(self.vy, self.vx))

    def update(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

        # Spawns start outside the arena, so only leaving counts
        if (self.x + self.radius < 0 and self.vx <= 0) \
                or (self.x - self.radius > self.arena_width and self.vx >= 0) \
                or (self.y + self.radius < 0 and self.vy <= 0) \
                or (self.y - self.radius > self.arena_height and self.vy >= 0):
            self.active = False

    @property
    def damaging(self) -> bool:
        return True

    def hit_circle(self) -> Circle:
        return Circle(self.x, self.y, self.radius)

    def view(self) -> HazardView:
        return HazardView(
            kind=self.kind, x=self.x, y=self.y, radius=self.radius, color=self.color,
            shape=self.shape, orientation=self.orientation, length=self.length,
        )


class AreaEffectHazard:
    """
    A stationary zone that detonates after a telegraph.

    Lifecycle:
    - WARNING: a ring whose alpha ramps linearly from the floor to 1.0 over
      `warning_duration`; overlapping it is harmless.
    - ACTIVE:  a filled region for `active_duration`; overlapping it kills.
    - then inactive and purged.

    Fully deterministic once created.
    """

    kind = HazardKind.AREA_EFFECT

    def __init__(self, x: float, y: float, radius: float, warning_duration: float,
                 active_duration: float, color: tuple[int, int, int] = LINEAR_COLOR) -> None:
        self.x = x
        self.y = y
        self.radius = radius
        self.warning_duration = warning_duration
        self.active_duration = active_duration
        self.color = color
        self.elapsed = 0.0
        self.phase = AreaPhase.WARNING
        self.active = True

    def update(self, dt: float) -> None:
        self.elapsed += dt
        if self.phase is AreaPhase.WARNING and self.elapsed >= self.warning_duration:
            self.phase = AreaPhase.ACTIVE
        if self.phase is AreaPhase.ACTIVE and self.elapsed >= self.warning_duration + self.active_duration:
            self.active = False

    def hit_circle(self) -> Circle:
        return Circle(self.x, self.y, self.radius)

    @property
    def damaging(self) -> bool:
        """Still True on the frame the zone expires, before it is purged."""
        return self.phase is AreaPhase.ACTIVE

    def warning_alpha(self) -> float:
        """Ring intensity during the telegraph."""
        progress = min(self.elapsed / self.warning_duration, 1.0)
        return AREA_WARNING_ALPHA_FLOOR + (1.0 - AREA_WARNING_ALPHA_FLOOR) * progress

    def view(self) -> HazardView:
        alpha = self.warning_alpha() if self.phase is AreaPhase.WARNING else AREA_ACTIVE_ALPHA
        return HazardView(
            kind=self.kind, x=self.x, y=self.y, radius=self.radius, color=self.color,
            alpha=alpha, phase=self.phase,
        )

"""Game variants expressed as configuration.

Both variants share one simulation; they differ in movement policy, hazard
shape/speed/color, spawner curve, key bindings and cosmetic text.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    WIDTH, HEIGHT, MAX_FRAME_TIME,
    AVATAR_WIDTH, AVATAR_HEIGHT, AVATAR_SPEED,
    DASH_COOLDOWN, DASH_DISTANCE, DASH_SPEED, FLASH_COOLDOWN, FLASH_RANGE,
    CLASSIC_DASH_KEY, CLASSIC_FLASH_KEY, THEMED_DASH_KEY, THEMED_FLASH_KEY,
    LINEAR_RADIUS, LINEAR_BASE_SPEED, LINEAR_SPEED_PER_SCORE, LINEAR_COLOR,
    BOLT_RADIUS, BOLT_LENGTH, BOLT_BASE_SPEED, BOLT_SPEED_PER_SCORE, BOLT_COLOR,
    EDGE_MARGIN, AREA_RADIUS, AREA_WARNING_DURATION, AREA_ACTIVE_DURATION,
    AREA_CHANCE_PER_FRAME, AREA_MIN_SCORE,
    CLASSIC_SPAWN_BASE, CLASSIC_SPAWN_DIVISOR, CLASSIC_SPAWN_FLOOR,
    THEMED_SPAWN_BASE, THEMED_SPAWN_DIVISOR, THEMED_SPAWN_FLOOR,
    DOUBLE_SPAWN_SCORE, DOUBLE_SPAWN_CHANCE,
)
from .models import HazardShape, MovementMode


@dataclass(frozen=True)
class GameConfig:
    """
    Tuning for one game variant.

    Attributes
    ----------
    width, height : int
        Arena size in pixels.
    movement : MovementMode
        KEYS for held-direction velocity, SEEK for move-to-target.
    spawn_base, spawn_divisor, spawn_floor : float
        Spawner curve, interval = max(spawn_floor, spawn_base - score / spawn_divisor).
    """
    name: str = "classic"
    title: str = "CLICK TO START"
    width: int = WIDTH
    height: int = HEIGHT
    max_frame_time: float = MAX_FRAME_TIME

    movement: MovementMode = MovementMode.KEYS
    avatar_width: float = AVATAR_WIDTH
    avatar_height: float = AVATAR_HEIGHT
    avatar_speed: float = AVATAR_SPEED

    dash_key: str = CLASSIC_DASH_KEY
    dash_cooldown: float = DASH_COOLDOWN
    dash_distance: float = DASH_DISTANCE
    dash_speed: float = DASH_SPEED
    flash_key: str = CLASSIC_FLASH_KEY
    flash_cooldown: float = FLASH_COOLDOWN
    flash_range: float = FLASH_RANGE

    hazard_shape: HazardShape = HazardShape.ORB
    hazard_radius: float = LINEAR_RADIUS
    hazard_length: float = 0.0
    hazard_base_speed: float = LINEAR_BASE_SPEED
    hazard_speed_per_score: float = LINEAR_SPEED_PER_SCORE
    hazard_color: tuple[int, int, int] = LINEAR_COLOR
    edge_margin: float = EDGE_MARGIN

    area_radius: float = AREA_RADIUS
    area_warning_duration: float = AREA_WARNING_DURATION
    area_active_duration: float = AREA_ACTIVE_DURATION
    area_chance: float = AREA_CHANCE_PER_FRAME
    area_min_score: float = AREA_MIN_SCORE

    spawn_base: float = CLASSIC_SPAWN_BASE
    spawn_divisor: float = CLASSIC_SPAWN_DIVISOR
    spawn_floor: float = CLASSIC_SPAWN_FLOOR
    double_spawn_score: float = DOUBLE_SPAWN_SCORE
    double_spawn_chance: float = DOUBLE_SPAWN_CHANCE

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"arena size must be positive, got {self.width}x{self.height}")
        if self.avatar_width > self.width or self.avatar_height > self.height:
            raise ValueError("avatar does not fit in the arena")
        if self.spawn_floor <= 0:
            raise ValueError("spawn_floor must be positive")
        if self.spawn_divisor <= 0:
            raise ValueError("spawn_divisor must be positive")
        if self.dash_speed <= 0 or self.max_frame_time <= 0:
            raise ValueError("dash_speed and max_frame_time must be positive")
        if self.area_warning_duration <= 0:
            raise ValueError("area_warning_duration must be positive")


CLASSIC = GameConfig()

THEMED = GameConfig(
    name="themed",
    title="CLICK TO ENTER THE RIFT",
    movement=MovementMode.SEEK,
    dash_key=THEMED_DASH_KEY,
    flash_key=THEMED_FLASH_KEY,
    hazard_shape=HazardShape.BOLT,
    hazard_radius=BOLT_RADIUS,
    hazard_length=BOLT_LENGTH,
    hazard_base_speed=BOLT_BASE_SPEED,
    hazard_speed_per_score=BOLT_SPEED_PER_SCORE,
    hazard_color=BOLT_COLOR,
    spawn_base=THEMED_SPAWN_BASE,
    spawn_divisor=THEMED_SPAWN_DIVISOR,
    spawn_floor=THEMED_SPAWN_FLOOR,
)

VARIANTS = {CLASSIC.name: CLASSIC, THEMED.name: THEMED}


def get_config(name: str) -> GameConfig:
    """Look up a variant by name (case-insensitive)."""
    try:
        return VARIANTS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown variant {name!r}; expected one of {sorted(VARIANTS)}") from None

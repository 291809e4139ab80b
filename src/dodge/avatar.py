from __future__ import annotations

"""Avatar entity: movement, dash and flash abilities, damage and reset.

Timings are driven by the `dt` handed in each frame (seconds, frame-rate
independent). Both abilities count their timers up from 0 and are ready once
the timer reaches the cooldown.
"""

import math
from dataclasses import dataclass

from .config import GameConfig
from .constants import ARRIVAL_EPSILON, AVATAR_COLOR, DEFAULT_DIRECTION, KEYS_UP, KEYS_DOWN, KEYS_LEFT, KEYS_RIGHT
from .models import AbilityView, AvatarView, InputSnapshot, MovementMode, Rect
from .utils import clamp, normalize


@dataclass
class Ability:
    """
    Cooldown-gated ability record.

    Attributes
    ----------
    key : str
        Key that triggers the ability.
    cooldown : float
        Seconds between uses.
    timer : float
        Seconds since last use; the ability is ready when timer >= cooldown.
    reach : float
        Dash distance or maximum flash range.
    """
    key: str
    cooldown: float
    timer: float
    reach: float

    @property
    def ready(self) -> bool:
        return self.timer >= self.cooldown

    def remaining(self) -> float:
        return max(0.0, self.cooldown - self.timer)

    def view(self) -> AbilityView:
        return AbilityView(self.key.upper(), self.ready, round(self.remaining(), 1))


class Avatar:
    """
    The player-controlled box.

    `x`/`y` is the top-left corner. Movement follows the configured policy:
    KEYS moves by held direction keys, SEEK walks to the last point the
    pointer was held on. Abilities are level-triggered: holding the key fires
    the ability whenever it becomes ready.
    """

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.width = config.avatar_width
        self.height = config.avatar_height
        self.speed = config.avatar_speed
        self.dash_ability = Ability(config.dash_key, config.dash_cooldown, config.dash_cooldown, config.dash_distance)
        self.flash_ability = Ability(config.flash_key, config.flash_cooldown, config.flash_cooldown, config.flash_range)
        self.reset()

    # ------------------------------- Geometry ---------------------------------------

    @property
    def spawn_position(self) -> tuple[float, float]:
        return (self.config.width / 2 - self.width / 2, self.config.height / 2 - self.height / 2)

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def clamp_to_arena(self) -> None:
        self.x = clamp(self.x, 0.0, self.config.width - self.width)
        self.y = clamp(self.y, 0.0, self.config.height - self.height)

    # ------------------------------- Update & State ----------------------------------

    def reset(self) -> None:
        self.x, self.y = self.spawn_position
        self.health = 1
        self.dash_ability.timer = self.dash_ability.cooldown
        self.flash_ability.timer = self.flash_ability.cooldown
        self.dashing = False
        self.dash_target_x = self.x
        self.dash_target_y = self.y
        self.move_target: tuple[float, float] | None = None

    def take_damage(self) -> None:
        self.health = 0

    @property
    def alive(self) -> bool:
        return self.health > 0

    def update(self, dt: float, snapshot: InputSnapshot, pointer_enabled: bool = True) -> list[str]:
        """
        Advance one frame and return the names of the abilities that fired.

        Parameters
        ----------
        dt : float
            Sanitized frame time in seconds.
        snapshot : InputSnapshot
            This frame's input.
        pointer_enabled : bool
            False while a click that started the run is still held, so it is
            not taken as a move order.
        """
        self.dash_ability.timer += dt
        self.flash_ability.timer += dt

        fired: list[str] = []
        if self.dashing:
            self.perform_dash_movement(dt)
            return fired

        if self.config.movement is MovementMode.SEEK:
            self.seek(dt, snapshot, pointer_enabled)
        else:
            self.move_by_keys(dt, snapshot.held_keys)

        if self.dash_ability.key in snapshot.held_keys and self.dash(snapshot.pointer_x, snapshot.pointer_y):
            fired.append("dash")
        if self.flash_ability.key in snapshot.held_keys and self.flash(snapshot.pointer_x, snapshot.pointer_y):
            fired.append("flash")

        self.clamp_to_arena()
        return fired

    def move_by_keys(self, dt: float, held_keys: frozenset[str]) -> None:
        dx = 0.0
        dy = 0.0
        if KEYS_UP in held_keys:
            dy -= 1
        if KEYS_DOWN in held_keys:
            dy += 1
        if KEYS_LEFT in held_keys:
            dx -= 1
        if KEYS_RIGHT in held_keys:
            dx += 1

        # Diagonals move at axis speed
        direction = normalize(dx, dy)
        if direction is None:
            return
        self.x += direction[0] * self.speed * dt
        self.y += direction[1] * self.speed * dt

    def seek(self, dt: float, snapshot: InputSnapshot, pointer_enabled: bool) -> None:
        if snapshot.pointer_down and pointer_enabled:
            # The center can only rest inside the arena
            self.move_target = (
                clamp(snapshot.pointer_x, self.width / 2, self.config.width - self.width / 2),
                clamp(snapshot.pointer_y, self.height / 2, self.config.height - self.height / 2),
            )
        if self.move_target is None:
            return

        cx, cy = self.center
        tx, ty = self.move_target
        dx = tx - cx
        dy = ty - cy
        distance = math.hypot(dx, dy)
        step = self.speed * dt
        if distance <= step + ARRIVAL_EPSILON:
            self.x = tx - self.width / 2
            self.y = ty - self.height / 2
            self.move_target = None
        else:
            self.x += dx / distance * step
            self.y += dy / distance * step

    # ------------------------------- Abilities ---------------------------------------

    def dash(self, target_x: float, target_y: float) -> bool:
        """Begin a dash toward a point. Returns False when on cooldown or already dashing."""
        if not self.dash_ability.ready or self.dashing:
            return False
        self.dash_ability.timer = 0.0

        cx, cy = self.center
        direction = normalize(target_x - cx, target_y - cy) or DEFAULT_DIRECTION
        self.dash_target_x = clamp(self.x + direction[0] * self.dash_ability.reach, 0.0, self.config.width - self.width)
        self.dash_target_y = clamp(self.y + direction[1] * self.dash_ability.reach, 0.0, self.config.height - self.height)
        self.dashing = True
        self.move_target = None
        return True

    def perform_dash_movement(self, dt: float) -> None:
        dx = self.dash_target_x - self.x
        dy = self.dash_target_y - self.y
        distance = math.hypot(dx, dy)
        step = self.config.dash_speed * dt

        if distance <= step + ARRIVAL_EPSILON:
            self.x = self.dash_target_x
            self.y = self.dash_target_y
            self.dashing = False
        else:
            self.x += dx / distance * step
            self.y += dy / distance * step

    def flash(self, target_x: float, target_y: float) -> bool:
        """Blink toward a point, capped at the flash range. Returns False when on cooldown."""
        if not self.flash_ability.ready:
            return False
        self.flash_ability.timer = 0.0

        cx, cy = self.center
        dx = target_x - cx
        dy = target_y - cy
        distance = math.hypot(dx, dy)
        if distance <= self.flash_ability.reach:
            self.x = target_x - self.width / 2
            self.y = target_y - self.height / 2
        else:
            ratio = self.flash_ability.reach / distance
            self.x += dx * ratio
            self.y += dy * ratio
        self.move_target = None
        return True

    # ------------------------------- Rendering ---------------------------------------

    def view(self) -> AvatarView:
        return AvatarView(self.x, self.y, self.width, self.height,
                          health_ratio=float(self.health), dashing=self.dashing, color=AVATAR_COLOR)

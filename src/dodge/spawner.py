from __future__ import annotations

import random

from .avatar import Avatar
from .config import GameConfig
from .hazards import AreaEffectHazard, LinearHazard


class Spawner:
    """
    Responsible for spawning hazards at a score-driven cadence and randomized
    edge locations.

    Notes
    - Spawn timing accumulates frame time in seconds, independent of frame rate.
    - The interval is recomputed from score every frame, never stored and
      decremented, so it cannot drift below the configured floor.
    - Projectile speed grows with score; past a score threshold a second
      projectile may join the same tick.
    """

    def __init__(self, config: GameConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng or random.Random()
        self.reset()

    def reset(self) -> None:
        self.spawn_interval = self.config.spawn_base
        self.spawn_timer = 0.0

    def spawn_interval_for(self, score: float) -> float:
        """
        Calculate spawn interval (seconds) for a score.
        """
        cfg = self.config
        return max(cfg.spawn_floor, cfg.spawn_base - score / cfg.spawn_divisor)

    def projectile_speed_for(self, score: float) -> float:
        return self.config.hazard_base_speed + score * self.config.hazard_speed_per_score

    def update(self, dt: float, score: float, avatar: Avatar, hazards: list) -> None:
        """
        Spawn hazards if timing is due.

        Parameters
        ----------
        dt : float
            Sanitized frame time in seconds
        score : float
            Seconds survived so far, drives difficulty
        avatar : Avatar
            Projectiles are aimed at its center; area effects land on it
        hazards : list
            Live hazard collection, appended to in place
        """
        cfg = self.config
        self.spawn_timer += dt
        self.spawn_interval = self.spawn_interval_for(score)

        if self.spawn_timer >= self.spawn_interval:
            self.spawn_timer = 0.0
            hazards.append(self.spawn_projectile(score, avatar))

            if score > cfg.double_spawn_score and self.rng.random() < cfg.double_spawn_chance:
                hazards.append(self.spawn_projectile(score, avatar))

        # Occasional area effect on top of the avatar
        if dt > 0 and score > cfg.area_min_score and self.rng.random() < cfg.area_chance:
            hazards.append(self.spawn_area_effect(avatar))

    def edge_point(self) -> tuple[float, float]:
        """Uniform point on a uniformly chosen arena edge, just outside it."""
        cfg = self.config
        edge = self.rng.randrange(4)
        if edge == 0:   # top
            return self.rng.random() * cfg.width, -cfg.edge_margin
        if edge == 1:   # right
            return cfg.width + cfg.edge_margin, self.rng.random() * cfg.height
        if edge == 2:   # bottom
            return self.rng.random() * cfg.width, cfg.height + cfg.edge_margin
        return -cfg.edge_margin, self.rng.random() * cfg.height

    def spawn_projectile(self, score: float, avatar: Avatar) -> LinearHazard:
        cfg = self.config
        x, y = self.edge_point()
        target_x, target_y = avatar.center
        return LinearHazard(
            x, y, target_x, target_y,
            speed=self.projectile_speed_for(score),
            radius=cfg.hazard_radius,
            arena_width=cfg.width,
            arena_height=cfg.height,
            shape=cfg.hazard_shape,
            color=cfg.hazard_color,
            length=cfg.hazard_length,
        )

    def spawn_area_effect(self, avatar: Avatar) -> AreaEffectHazard:
        cfg = self.config
        x, y = avatar.center
        return AreaEffectHazard(x, y, cfg.area_radius, cfg.area_warning_duration,
                                cfg.area_active_duration, color=cfg.hazard_color)

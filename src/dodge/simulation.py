"""Simulation core: game state machine, per-frame update and render data."""

from __future__ import annotations

import math
import random

from .avatar import Avatar
from .config import GameConfig, CLASSIC
from .constants import (
    TEXT_COLOR, MUTED_TEXT_COLOR, GAME_OVER_COLOR,
    FONT_SIZE_SMALL, FONT_SIZE_MEDIUM, FONT_SIZE_LARGE, FONT_SIZE_TITLE,
)
from .logger import GameLogger
from .models import (
    GameState, InputSnapshot, RenderFrame, TextCommand,
)
from .persistence import HighScoreStore
from .spawner import Spawner
from .utils import intersects, sanitize_delta


class Simulation:
    """
    Owns the avatar, the spawner and the live hazards, and drives them
    through MENU -> PLAYING -> GAME_OVER -> PLAYING.

    The host calls `update(dt, snapshot)` then `draw()` once per frame.
    Neither method raises for any frame time or snapshot.
    """

    def __init__(self, config: GameConfig = CLASSIC, store: HighScoreStore | None = None,
                 rng: random.Random | None = None, logger: GameLogger | None = None) -> None:
        self.config = config
        self.store = store
        self.logger = logger
        self.rng = rng or random.Random()

        self.avatar = Avatar(config)
        self.spawner = Spawner(config, self.rng)
        self.hazards: list = []
        self.score = 0.0
        self.high_score = self.load_high_score()
        self.state = GameState.MENU
        self.runs = 0

        # A click that starts a run must be released before it counts as
        # pointer-held input again.
        self.await_pointer_release = False

    def load_high_score(self) -> int:
        if self.store is None:
            return 0
        try:
            return max(0, int(self.store.get_high_score()))
        except Exception as e:
            print(f"Failed to load high score: {e}")
            return 0

    def reset(self) -> None:
        """Reset all run state to initial values."""
        self.avatar.reset()
        self.spawner.reset()
        self.hazards = []
        self.score = 0.0

    def spawn_hazard(self, hazard) -> None:
        self.hazards.append(hazard)

    # --------------------------------- Update ---------------------------------------

    def update(self, delta_time: float, snapshot: InputSnapshot | None = None) -> None:
        dt = sanitize_delta(delta_time, self.config.max_frame_time)
        snapshot = snapshot or InputSnapshot()
        click = snapshot.primary_click

        if self.await_pointer_release and not snapshot.pointer_down:
            self.await_pointer_release = False

        if self.state is GameState.MENU:
            if click:
                self.start_run()
        elif self.state is GameState.PLAYING:
            self.update_playing(dt, snapshot)
        elif self.state is GameState.GAME_OVER:
            if click:
                self.reset()
                self.start_run()

    def start_run(self) -> None:
        self.state = GameState.PLAYING
        self.await_pointer_release = True
        self.runs += 1
        if self.logger:
            self.logger.log_run_start(self.runs)

    def update_playing(self, dt: float, snapshot: InputSnapshot) -> None:
        self.score += dt
        fired = self.avatar.update(dt, snapshot, pointer_enabled=not self.await_pointer_release)
        if self.logger:
            for name in fired:
                self.logger.log_ability(name, self.avatar.center)

        self.spawner.update(dt, self.score, self.avatar, self.hazards)

        avatar_rect = self.avatar.rect()
        for hazard in self.hazards:
            hazard.update(dt)
            if hazard.damaging and intersects(avatar_rect, hazard.hit_circle()):
                self.avatar.take_damage()

        self.hazards = [h for h in self.hazards if h.active]

        if self.avatar.health <= 0:
            self.end_run()

    def end_run(self) -> None:
        self.state = GameState.GAME_OVER
        previous = self.high_score
        new_record = math.floor(self.score) > previous
        if self.score > previous:
            self.high_score = math.floor(self.score)
            if self.store is not None:
                try:
                    self.store.set_high_score(self.high_score)
                except Exception as e:
                    print(f"Failed to save high score: {e}")
        if self.logger:
            self.logger.log_game_over(self.score, self.high_score, new_record)

    # --------------------------------- Rendering ------------------------------------

    def draw(self) -> RenderFrame:
        """
        Compose this frame's render data for the current state.
        """
        w, h = self.config.width, self.config.height
        score = math.floor(self.score)

        if self.state is GameState.MENU:
            return RenderFrame(
                state=self.state,
                texts=[TextCommand(self.config.title, w / 2, h / 2, FONT_SIZE_LARGE, TEXT_COLOR)],
                high_score=self.high_score,
            )

        if self.state is GameState.GAME_OVER:
            return RenderFrame(
                state=self.state,
                texts=[
                    TextCommand("GAME OVER", w / 2, h / 2 - 60, FONT_SIZE_TITLE, GAME_OVER_COLOR),
                    TextCommand(f"Score: {score}", w / 2, h / 2 + 10, FONT_SIZE_MEDIUM + 10, TEXT_COLOR),
                    TextCommand(f"High Score: {self.high_score}", w / 2, h / 2 + 60, FONT_SIZE_MEDIUM, MUTED_TEXT_COLOR),
                    TextCommand("Click to Play Again", w / 2, h / 2 + 120, FONT_SIZE_MEDIUM, TEXT_COLOR),
                ],
                score=score,
                high_score=self.high_score,
            )

        return RenderFrame(
            state=self.state,
            texts=[
                TextCommand(f"Score: {score}", 20, 40, FONT_SIZE_MEDIUM, TEXT_COLOR, align="left"),
                TextCommand(f"High Score: {self.high_score}", 20, 80, FONT_SIZE_SMALL, MUTED_TEXT_COLOR, align="left"),
            ],
            avatar=self.avatar.view(),
            hazards=[hz.view() for hz in self.hazards if hz.active],
            abilities=[self.avatar.dash_ability.view(), self.avatar.flash_ability.view()],
            score=score,
            high_score=self.high_score,
        )


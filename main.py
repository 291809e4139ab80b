"""Game entry point"""

from __future__ import annotations

import os
import pygame

from dodge.config import get_config
from dodge.constants import FPS, FONT_NAME, FONT_SIZE_MEDIUM, LOG_FILE, HIGHSCORE_FILE
from dodge.logger import GameLogger
from dodge.models import GameState, InputSnapshot
from dodge.persistence import JsonHighScoreStore
from dodge.simulation import Simulation
from dodge.ui import Renderer


class Game:
    """
    Host process: owns the window and clock, turns pygame events into an
    InputSnapshot each frame, and drives Simulation.update/draw.
    """

    def __init__(self, variant: str = "classic") -> None:
        """Initialize subsystems and construct the simulation."""
        pygame.init()
        self.config = get_config(variant)
        pygame.display.set_caption("Skillshot Dodge")

        # SCALED keeps arena coordinates fixed when the window is resized
        self.screen = pygame.display.set_mode((self.config.width, self.config.height), pygame.SCALED | pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)

        store_path = os.environ.get("DODGE_HIGHSCORE_FILE", HIGHSCORE_FILE)
        self.logger = GameLogger(LOG_FILE)
        self.simulation = Simulation(self.config, JsonHighScoreStore(store_path), logger=self.logger)
        self.renderer = Renderer()

        self.held_keys: set[str] = set()
        self.paused = False
        self.show_fps = False
        self.fps_samples = []

    # --------------------------------- Input ----------------------------------------

    def poll_events(self) -> tuple[bool, InputSnapshot]:
        """
        Drain the event queue.

        Returns
        -------
        tuple[bool, InputSnapshot]
            Whether the game should keep running, and this frame's input.
        """
        running = True
        clicked = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_p:
                    self.toggle_pause()
                elif event.key == pygame.K_F3:
                    self.show_fps = not self.show_fps
                else:
                    self.held_keys.add(pygame.key.name(event.key).lower())
            elif event.type == pygame.KEYUP:
                self.held_keys.discard(pygame.key.name(event.key).lower())
            elif event.type == pygame.WINDOWFOCUSLOST:
                # Key-ups are lost while unfocused
                self.held_keys.clear()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                clicked = True

        mouse_x, mouse_y = pygame.mouse.get_pos()
        snapshot = InputSnapshot(
            held_keys=frozenset(self.held_keys),
            pointer_x=float(mouse_x),
            pointer_y=float(mouse_y),
            pointer_down=pygame.mouse.get_pressed()[0],
            primary_click=clicked,
        )
        return running, snapshot

    def toggle_pause(self) -> None:
        if self.simulation.state is GameState.PLAYING:
            self.paused = not self.paused

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main game loop: process events, update, render; exits on quit request."""
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0

            self.fps_samples.append(self.clock.get_fps())
            if len(self.fps_samples) > 10:
                self.fps_samples.pop(0)
            avg_fps = sum(self.fps_samples) / len(self.fps_samples)

            running, snapshot = self.poll_events()
            if not self.paused:
                self.simulation.update(dt, snapshot)

            self.renderer.draw(self.screen, self.simulation.draw())
            if self.paused:
                pause_text = self.font_small.render("PAUSED", True, (255, 255, 100))
                self.screen.blit(pause_text, pause_text.get_rect(center=(self.config.width // 2, 80)))
            if self.show_fps:
                self.renderer.draw_fps(self.screen, avg_fps)

            pygame.display.flip()

        pygame.quit()


if __name__ == "__main__":
    Game(os.environ.get("DODGE_VARIANT", "classic")).run()

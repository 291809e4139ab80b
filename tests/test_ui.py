"""Smoke tests for the pygame renderer."""

import pygame
import pytest

from dodge.config import THEMED
from dodge.constants import AVATAR_COLOR, BG_COLOR
from dodge.hazards import AreaEffectHazard
from dodge.models import InputSnapshot
from dodge.simulation import Simulation
from dodge.ui import Renderer


@pytest.fixture(scope="module", autouse=True)
def pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def surface():
    return pygame.Surface((1280, 720))


def test_menu_frame_renders(simulation, surface):
    Renderer(font_name=None).draw(surface, simulation.draw())
    assert surface.get_at((0, 0))[:3] == BG_COLOR


def test_playing_frame_draws_avatar_and_hazards(simulation, surface):
    simulation.update(1 / 60, InputSnapshot(primary_click=True))
    simulation.spawn_hazard(AreaEffectHazard(200, 200, 60, 1.0, 0.3))
    simulation.avatar.dash(0, 0)
    Renderer(font_name=None).draw(surface, simulation.draw())
    cx, cy = simulation.avatar.center
    assert surface.get_at((int(cx), int(cy)))[:3] == AVATAR_COLOR


def test_themed_bolts_and_game_over_render(surface, store, seeded_rng):
    sim = Simulation(THEMED, store, rng=seeded_rng)
    sim.update(1 / 60, InputSnapshot(primary_click=True))
    for _ in range(60):
        sim.update(1 / 30, InputSnapshot())
    renderer = Renderer(font_name=None)
    renderer.draw(surface, sim.draw())
    renderer.draw_fps(surface, 42.0)

    sim.avatar.take_damage()
    sim.update(1 / 60, InputSnapshot())
    renderer.draw(surface, sim.draw())

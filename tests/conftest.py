"""Pytest configuration and fixtures for dodge tests."""

import os
import random

import pytest

# Headless pygame for renderer tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def store():
    from dodge.persistence import MemoryHighScoreStore

    return MemoryHighScoreStore()


@pytest.fixture
def calm_config():
    """Classic config slow enough that nothing reaches the center in 5s."""
    from dataclasses import replace

    from dodge.config import CLASSIC

    return replace(CLASSIC, spawn_base=6.0, area_min_score=100)


@pytest.fixture
def simulation(calm_config, store, seeded_rng):
    """Provide a simulation in the menu state with an in-memory store."""
    from dodge.simulation import Simulation

    return Simulation(calm_config, store, rng=seeded_rng)

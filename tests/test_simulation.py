"""End-to-end tests for the game state machine."""

from dataclasses import replace

import pytest

from dodge.config import THEMED
from dodge.hazards import AreaEffectHazard, LinearHazard
from dodge.logger import GameLogger
from dodge.models import GameState, InputSnapshot
from dodge.persistence import MemoryHighScoreStore
from dodge.simulation import Simulation

CLICK = InputSnapshot(primary_click=True)
FRAME = 1 / 60


def run_frames(sim, seconds, snapshot=None):
    for _ in range(round(seconds / FRAME)):
        sim.update(FRAME, snapshot or InputSnapshot())


def hazard_on_avatar(sim):
    cx, cy = sim.avatar.center
    return LinearHazard(cx, cy, cx + 1, cy, 1.0, 8.0, sim.config.width, sim.config.height)


def test_starts_in_menu_and_waits_for_click(simulation):
    assert simulation.state is GameState.MENU
    run_frames(simulation, 1.0)
    assert simulation.state is GameState.MENU
    assert simulation.score == 0.0
    assert simulation.hazards == []

    simulation.update(FRAME, CLICK)
    assert simulation.state is GameState.PLAYING
    assert simulation.score == 0.0


def test_survive_then_die_end_to_end(simulation, store):
    simulation.update(FRAME, CLICK)
    run_frames(simulation, 5.0)
    assert simulation.score == pytest.approx(5.0)
    assert simulation.avatar.health == 1
    assert simulation.state is GameState.PLAYING

    simulation.spawn_hazard(hazard_on_avatar(simulation))
    simulation.update(FRAME, InputSnapshot())
    assert simulation.avatar.health == 0
    assert simulation.state is GameState.GAME_OVER
    assert simulation.high_score == 5
    assert store.get_high_score() == 5


def test_game_over_freezes_score(simulation):
    simulation.update(FRAME, CLICK)
    simulation.spawn_hazard(hazard_on_avatar(simulation))
    simulation.update(FRAME, InputSnapshot())
    score = simulation.score
    run_frames(simulation, 1.0)
    assert simulation.state is GameState.GAME_OVER
    assert simulation.score == score


def test_area_effect_only_damages_when_active(simulation):
    simulation.update(FRAME, CLICK)
    cx, cy = simulation.avatar.center
    simulation.spawn_hazard(AreaEffectHazard(cx, cy, 60, warning_duration=0.5, active_duration=0.3))

    simulation.update(0.25, InputSnapshot())
    assert simulation.avatar.health == 1
    assert simulation.state is GameState.PLAYING

    simulation.update(0.25, InputSnapshot())
    assert simulation.avatar.health == 0
    assert simulation.state is GameState.GAME_OVER


def test_inactive_hazards_are_purged(simulation):
    simulation.update(FRAME, CLICK)
    simulation.spawn_hazard(AreaEffectHazard(10, 10, 5, warning_duration=0.1, active_duration=0.1))
    simulation.spawn_hazard(LinearHazard(5, 300, -100, 300, 500.0, 8.0, 1280, 720))
    simulation.update(0.25, InputSnapshot())
    assert simulation.hazards == []
    assert simulation.state is GameState.PLAYING


def test_restart_resets_run_state(simulation):
    simulation.update(FRAME, CLICK)
    simulation.avatar.flash(100, 100)
    simulation.avatar.dash(0, 0)
    run_frames(simulation, 0.5)
    simulation.spawn_hazard(hazard_on_avatar(simulation))
    simulation.update(FRAME, InputSnapshot())
    assert simulation.state is GameState.GAME_OVER

    simulation.update(FRAME, CLICK)
    assert simulation.state is GameState.PLAYING
    assert (simulation.avatar.x, simulation.avatar.y) == simulation.avatar.spawn_position
    assert simulation.avatar.health == 1
    assert simulation.avatar.dash_ability.ready
    assert simulation.avatar.flash_ability.ready
    assert simulation.hazards == []
    assert simulation.score == 0.0
    assert simulation.spawner.spawn_timer == 0.0


def test_high_score_never_decreases(calm_config, seeded_rng):
    store = MemoryHighScoreStore(100)
    sim = Simulation(calm_config, store, rng=seeded_rng)
    assert sim.high_score == 100
    sim.update(FRAME, CLICK)
    run_frames(sim, 1.0)
    sim.spawn_hazard(hazard_on_avatar(sim))
    sim.update(FRAME, InputSnapshot())
    assert sim.state is GameState.GAME_OVER
    assert sim.high_score == 100
    assert store.get_high_score() == 100


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), -1.0])
def test_bad_frame_times_do_not_advance(simulation, bad):
    simulation.update(FRAME, CLICK)
    before = (simulation.score, simulation.avatar.x, simulation.avatar.dash_ability.timer)
    simulation.update(bad, InputSnapshot(held_keys=frozenset("d")))
    assert (simulation.score, simulation.avatar.x, simulation.avatar.dash_ability.timer) == before
    assert simulation.state is GameState.PLAYING


def test_long_frames_are_clamped(simulation):
    simulation.update(FRAME, CLICK)
    simulation.update(10.0, InputSnapshot())
    assert simulation.score == simulation.config.max_frame_time


def test_missing_snapshot_is_treated_as_no_input(simulation):
    simulation.update(FRAME)
    assert simulation.state is GameState.MENU


def test_starting_click_is_not_a_move_order(seeded_rng, store):
    config = replace(THEMED, spawn_base=60.0, area_min_score=100)
    sim = Simulation(config, store, rng=seeded_rng)
    start = sim.avatar.center

    sim.update(FRAME, InputSnapshot(pointer_x=10, pointer_y=10, pointer_down=True, primary_click=True))
    sim.update(0.1, InputSnapshot(pointer_x=10, pointer_y=10, pointer_down=True))
    assert sim.avatar.center == start

    # Released, then pressed again: now it is a move order
    sim.update(FRAME, InputSnapshot(pointer_x=10, pointer_y=10))
    sim.update(0.1, InputSnapshot(pointer_x=10, pointer_y=10, pointer_down=True))
    assert sim.avatar.center != start


def test_draw_menu_has_single_label(simulation):
    frame = simulation.draw()
    assert frame.state is GameState.MENU
    assert len(frame.texts) == 1
    assert frame.texts[0].text == simulation.config.title
    assert frame.avatar is None


def test_draw_playing_exposes_entities_and_cooldowns(simulation):
    simulation.update(FRAME, CLICK)
    simulation.avatar.dash(0, 0)
    simulation.spawn_hazard(LinearHazard(100, 100, 200, 100, 10.0, 8.0, 1280, 720))
    frame = simulation.draw()

    assert frame.state is GameState.PLAYING
    assert frame.avatar.health_ratio == 1.0
    assert len(frame.hazards) == 1
    dash, flash = frame.abilities
    assert (dash.key, dash.ready, dash.remaining) == ("E", False, 3.0)
    assert (flash.key, flash.ready, flash.remaining) == ("F", True, 0.0)
    assert [t.text for t in frame.texts] == ["Score: 0", "High Score: 0"]


def test_draw_game_over_shows_scores_and_prompt(simulation):
    simulation.update(FRAME, CLICK)
    run_frames(simulation, 2.0)
    simulation.spawn_hazard(hazard_on_avatar(simulation))
    simulation.update(FRAME, InputSnapshot())
    texts = [t.text for t in simulation.draw().texts]
    assert texts == ["GAME OVER", "Score: 2", "High Score: 2", "Click to Play Again"]


def test_logger_records_run_events(calm_config, seeded_rng, tmp_path):
    log_file = tmp_path / "log.md"
    sim = Simulation(calm_config, MemoryHighScoreStore(), rng=seeded_rng, logger=GameLogger(str(log_file)))
    sim.update(FRAME, CLICK)
    sim.update(FRAME, InputSnapshot(held_keys=frozenset({"f"}), pointer_x=700, pointer_y=400))
    sim.spawn_hazard(hazard_on_avatar(sim))
    sim.update(FRAME, InputSnapshot())

    text = log_file.read_text(encoding="utf-8")
    assert "RUN START" in text
    assert "| FLASH | (700, 400) |" in text
    assert "GAME OVER" in text
    assert "NEW RECORD" in text


def test_game_over_log_row_keeps_table_columns(calm_config, seeded_rng, tmp_path):
    log_file = tmp_path / "log.md"
    sim = Simulation(calm_config, MemoryHighScoreStore(), rng=seeded_rng, logger=GameLogger(str(log_file)))
    sim.update(FRAME, CLICK)
    run_frames(sim, 1.0)
    sim.spawn_hazard(hazard_on_avatar(sim))
    sim.update(FRAME, InputSnapshot())

    lines = log_file.read_text(encoding="utf-8").splitlines()
    header = next(line for line in lines if line.startswith("| Timestamp"))
    game_over = next(line for line in lines if "GAME OVER" in line)
    assert game_over.count("|") == header.count("|")


def test_tying_high_score_is_not_logged_as_record(calm_config, seeded_rng, tmp_path):
    log_file = tmp_path / "log.md"
    store = MemoryHighScoreStore(1)
    sim = Simulation(calm_config, store, rng=seeded_rng, logger=GameLogger(str(log_file)))
    sim.update(FRAME, CLICK)
    run_frames(sim, 1.5)
    sim.spawn_hazard(hazard_on_avatar(sim))
    sim.update(FRAME, InputSnapshot())

    assert sim.state is GameState.GAME_OVER
    assert sim.high_score == 1
    assert store.get_high_score() == 1
    assert "NEW RECORD" not in log_file.read_text(encoding="utf-8")


def test_area_effect_expiring_over_avatar_still_kills(simulation):
    simulation.update(FRAME, CLICK)
    cx, cy = simulation.avatar.center
    simulation.spawn_hazard(AreaEffectHazard(cx, cy, 60, warning_duration=0.1, active_duration=0.05))

    simulation.update(0.2, InputSnapshot())
    assert simulation.state is GameState.GAME_OVER
    assert simulation.hazards == []

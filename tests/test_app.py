import random

import pytest

from terrifried.app import SPLASH_FRAMES, Game, GameState, Screen, main
from terrifried.profiles import profile_named
from terrifried.score import Scoreboard, save_high_score
from terrifried.world import Sound, World


def make_state(seed=1):
    world = World(profile_named("desktop"), Scoreboard(None), random.Random(seed))
    return GameState(world)


def to_title(state):
    for _ in range(SPLASH_FRAMES + 1):
        state.tick(False, False, 0, 0)


def to_playing(state, x=10, y=20):
    to_title(state)
    state.tick(True, False, x, y)


def test_first_tick_plays_splash():
    state = make_state()
    assert state.tick(False, False, 0, 0) == [Sound.SPLASH]
    assert state.screen is Screen.SPLASH


def test_splash_sound_plays_once():
    state = make_state()
    state.tick(False, False, 0, 0)
    assert state.tick(False, False, 0, 0) == []


def test_splash_lasts_until_timer_passes_limit():
    state = make_state()
    to_title(state)
    assert state.screen is Screen.SPLASH
    assert state.tick(False, False, 0, 0) == [Sound.SELECT]
    assert state.screen is Screen.TITLE


def test_click_during_splash_does_not_start():
    state = make_state()
    state.tick(True, False, 5, 5)
    state.tick(False, True, 5, 5)
    assert state.screen is Screen.SPLASH


def test_title_click_starts_game_and_records_press_point():
    state = make_state()
    to_title(state)
    state.tick(False, False, 0, 0)
    assert state.tick(True, False, 33, 44) == [Sound.SELECT]
    assert state.screen is Screen.PLAYING
    assert (state.world.mouse_down_x, state.world.mouse_down_y) == (33, 44)


def test_first_release_only_ends_title_click():
    state = make_state()
    to_playing(state)
    state.tick(False, False, 10, 20)
    assert state.world.player.on_platform
    sounds = state.tick(False, True, 10, 20)
    assert Sound.LAUNCH not in sounds
    assert state.world.first_release is False


def test_press_and_release_launch():
    state = make_state()
    to_playing(state)
    state.tick(False, False, 10, 20)
    state.tick(False, True, 10, 20)
    assert Sound.CLICK in state.tick(True, False, 100, 100)
    assert state.aiming
    sounds = state.tick(False, True, 150, 60)
    assert Sound.LAUNCH in sounds
    assert not state.aiming


def test_mouse_down_tracks_press_and_release():
    state = make_state()
    state.tick(True, False, 0, 0)
    assert state.mouse_down
    state.tick(False, True, 0, 0)
    assert not state.mouse_down


def test_game_loads_saved_best(tmp_path):
    path = tmp_path / "best.bin"
    save_high_score(path, 7)
    game = Game(profile_named("desktop"), tmp_path, path)
    assert game.scoreboard.best == 7
    assert game.state.screen is Screen.SPLASH


def test_main_rejects_unknown_profile():
    with pytest.raises(SystemExit) as info:
        main(["--profile", "nope"])
    assert info.value.code == 2


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
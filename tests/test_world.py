import random

import pytest

from terrifried.profiles import profile_named
from terrifried.score import Scoreboard, load_high_score
from terrifried.world import Sound, World


class _FixedRng:
    """Always rolls the same value, reduced into the requested range."""

    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value % stop


def _world(tmp_path, name="desktop", value=1):
    board = Scoreboard(tmp_path / "highscore.bin")
    return World(profile_named(name), board, _FixedRng(value))


def test_player_starts_centred_on_first_platform(tmp_path):
    world = _world(tmp_path)
    first = world.platforms[0]
    player = world.player
    assert player.x + player.width // 2 == first.x + first.width // 2
    assert player.y + player.height == first.y
    assert len(world.platforms) == world.profile.platform_count


def test_first_platform_never_has_coin(tmp_path):
    world = _world(tmp_path)
    assert world.platforms[0].has_coin is False
    assert all(p.has_coin for p in world.platforms[1:])


def test_resting_player_lands(tmp_path):
    world = _world(tmp_path)
    first = world.platforms[0]
    sounds = world.check_collisions()
    assert sounds == []
    assert world.player.on_platform is True
    assert world.player.y == first.y - world.player.height + world.profile.landing_nudge


def test_press_while_airborne_is_ignored(tmp_path):
    world = _world(tmp_path)
    world.player.y = 200
    world.check_collisions()
    assert world.player.on_platform is False
    assert world.press(50, 60) == []
    assert (world.mouse_down_x, world.mouse_down_y) == (0, 0)


def test_first_release_is_swallowed_then_launch(tmp_path):
    world = _world(tmp_path, "console")
    world.check_collisions()
    assert world.press(100, 100) == [Sound.CLICK]
    assert world.release(200, 150) == []
    assert world.player.velocity_x == 0
    assert world.press(100, 100) == [Sound.CLICK]
    y_before = world.player.y
    assert world.release(200, 150) == [Sound.LAUNCH]
    scale = world.profile.launch_scale
    assert world.player.velocity_x == pytest.approx(100 * scale)
    assert world.player.velocity_y == pytest.approx(50 * scale)
    assert world.player.y == y_before - world.profile.landing_nudge


def test_desktop_velocity_is_truncated_to_whole_numbers(tmp_path):
    world = _world(tmp_path, "desktop")
    world.check_collisions()
    world.press(0, 0)
    world.release(0, 0)
    world.press(0, 0)
    world.release(10, 10)
    assert world.player.velocity_x == 0
    assert world.player.velocity_y == 0
    assert isinstance(world.player.velocity_x, int)


def test_collecting_coin_scores(tmp_path):
    world = _world(tmp_path)
    target = world.platforms[1]
    world.player.x = target.coin_x()
    world.player.y = target.coin_y()
    sounds = world.check_collisions()
    assert sounds == [Sound.COIN]
    assert world.scoreboard.score == 1
    assert target.has_coin is False
    assert world.check_collisions() == []
    assert world.scoreboard.score == 1


def test_hitting_platform_from_below_bumps_down(tmp_path):
    world = _world(tmp_path)
    target = world.platforms[1]
    world.player.x = target.x
    world.player.y = target.y + target.height // 2 + 1
    world.check_collisions()
    assert world.player.velocity_y == world.profile.bump_velocity
    assert world.player.on_platform is False


def test_falling_below_screen_resets_game(tmp_path):
    world = _world(tmp_path)
    world.scoreboard.add(3)
    world.player.y = world.profile.screen_height + 10
    sounds = world.step()
    assert Sound.DEATH in sounds
    assert world.scoreboard.score == 0
    assert load_high_score(tmp_path / "highscore.bin") == 3
    first = world.platforms[0]
    assert world.player.velocity_x == 0
    assert world.player.velocity_y == 0
    assert world.player.y == pytest.approx(
        first.y - world.profile.platform_speed - world.player.height
    )


def test_lava_starts_at_rest_height(tmp_path):
    world = _world(tmp_path)
    profile = world.profile
    assert world.lava_y() == profile.screen_height - profile.lava_offset
    world.step()
    assert world.lava_y() == pytest.approx(profile.screen_height - profile.lava_offset)


@pytest.mark.parametrize("name", ["desktop", "console", "vita", "handheld"])
def test_lava_stays_within_amplitude(tmp_path, name):
    board = Scoreboard(tmp_path / "highscore.bin")
    world = World(profile_named(name), board, random.Random(4))
    profile = world.profile
    rest = profile.screen_height - profile.lava_offset
    for _ in range(300):
        world.step()
        assert abs(world.lava_y() - rest) <= profile.lava_amplitude + 1e-9
    assert world.timer == pytest.approx(300 * profile.lava_speed)


def test_long_run_keeps_platforms_in_bounds(tmp_path):
    board = Scoreboard(tmp_path / "highscore.bin")
    world = World(profile_named("desktop"), board, random.Random(7))
    profile = world.profile
    for _ in range(1000):
        world.step()
        for platform in world.platforms:
            assert profile.platform_x_offset <= platform.x
            assert platform.x < profile.platform_x_offset + profile.platform_x_range
            assert platform.y <= profile.screen_height + profile.platform_speed
        assert world.player.y <= profile.screen_height
    assert world.scoreboard.best >= world.scoreboard.score
"""Per-target tuning: screen size, object sizes and physics constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Profile:
    """Every number that differs between the supported screen layouts."""

    name: str
    screen_width: int
    screen_height: int
    platform_width: int
    platform_height: int
    platform_x_offset: int
    platform_x_range: int
    platform_spacing: int
    platform_speed: float
    platform_count: int
    coin_size: int
    coin_gap: int
    coin_margin: int
    gravity: float
    player_width: int
    player_height: int
    bump_velocity: float
    landing_nudge: float
    integer_velocity: bool
    integer_positions: bool
    launch_scale: float
    lava_offset: int
    lava_amplitude: float
    lava_speed: float


_PROFILES: dict[str, Profile] = {
    profile.name: profile
    for profile in (
        Profile(
            name="desktop",
            screen_width=800,
            screen_height=450,
            platform_width=100,
            platform_height=32,
            platform_x_offset=20,
            platform_x_range=660,
            platform_spacing=100,
            platform_speed=1,
            platform_count=4,
            coin_size=24,
            coin_gap=5,
            coin_margin=3,
            gravity=1,
            player_width=26,
            player_height=32,
            bump_velocity=5,
            landing_nudge=1,
            integer_velocity=True,
            integer_positions=True,
            launch_scale=0.08,
            lava_offset=43,
            lava_amplitude=5,
            lava_speed=0.05,
        ),
        Profile(
            name="console",
            screen_width=640,
            screen_height=480,
            platform_width=100,
            platform_height=32,
            platform_x_offset=10,
            platform_x_range=520,
            platform_spacing=100,
            platform_speed=1,
            platform_count=4,
            coin_size=24,
            coin_gap=5,
            coin_margin=3,
            gravity=1,
            player_width=26,
            player_height=32,
            bump_velocity=5,
            landing_nudge=1,
            integer_velocity=False,
            integer_positions=True,
            launch_scale=0.08,
            lava_offset=43,
            lava_amplitude=5,
            lava_speed=0.05,
        ),
        Profile(
            name="vita",
            screen_width=960,
            screen_height=544,
            platform_width=100,
            platform_height=32,
            platform_x_offset=20,
            platform_x_range=820,
            platform_spacing=100,
            platform_speed=1,
            platform_count=4,
            coin_size=24,
            coin_gap=5,
            coin_margin=3,
            gravity=1,
            player_width=26,
            player_height=32,
            bump_velocity=5,
            landing_nudge=1,
            integer_velocity=False,
            integer_positions=True,
            launch_scale=0.08,
            lava_offset=43,
            lava_amplitude=5,
            lava_speed=0.05,
        ),
        Profile(
            name="handheld",
            screen_width=256,
            screen_height=192,
            platform_width=50,
            platform_height=16,
            platform_x_offset=10,
            platform_x_range=196,
            platform_spacing=50,
            platform_speed=0.5,
            platform_count=4,
            coin_size=12,
            coin_gap=3,
            coin_margin=1,
            gravity=0.5,
            player_width=12,
            player_height=16,
            bump_velocity=2.5,
            landing_nudge=0.5,
            integer_velocity=False,
            integer_positions=False,
            launch_scale=0.08,
            lava_offset=29,
            lava_amplitude=2.5,
            lava_speed=0.05,
        ),
    )
}


def profile_named(name: str) -> Profile:
    """Return the profile called ``name`` (case-insensitive)."""
    try:
        return _PROFILES[name.lower()]
    except KeyError:
        known = ", ".join(profile_names())
        raise ValueError(f"unknown profile {name!r}; choose one of: {known}") from None


def profile_names() -> tuple[str, ...]:
    """Names of all known profiles, sorted."""
    return tuple(sorted(_PROFILES))
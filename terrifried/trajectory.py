"""Aiming helpers: the launch velocity of a drag and the path it predicts."""

from __future__ import annotations

from .profiles import Profile

LAUNCH_SCALE = 0.08
DEFAULT_STEPS = 32


def aim_velocity(down_x: float, down_y: float, x: float, y: float) -> tuple[float, float]:
    """Velocity a drag from ``(down_x, down_y)`` to ``(x, y)`` would launch with.

    The drag is measured in whole pixels before it is scaled.
    """
    drag_x = int(x - down_x)
    drag_y = int(y - down_y)
    return drag_x * LAUNCH_SCALE, drag_y * LAUNCH_SCALE


def trajectory(
    x: float,
    y: float,
    velocity_x: float,
    velocity_y: float,
    profile: Profile,
    steps: int = DEFAULT_STEPS,
) -> list[tuple[float, float]]:
    """Predicted centre points of a launched egg, one per frame.

    The first point is the starting point. Gravity is added after each move,
    and the horizontal speed flips when the egg's centre comes within half a
    sprite of either side wall. Consecutive points are meant to be joined by
    line segments.
    """
    if steps < 0:
        raise ValueError(f"steps must not be negative, got {steps}")
    half = profile.player_height // 2
    pos_x, pos_y = float(x), float(y)
    vel_x, vel_y = float(velocity_x), float(velocity_y)
    points: list[tuple[float, float]] = []
    for _ in range(steps):
        points.append((pos_x, pos_y))
        pos_x += vel_x
        pos_y += vel_y
        vel_y += profile.gravity
        if pos_x < half:
            vel_x = -vel_x
        if pos_x + half > profile.screen_width:
            vel_x = -vel_x
    return points
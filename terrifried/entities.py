"""The falling platforms and the egg the player flings between them."""

from __future__ import annotations

from typing import Protocol

from .profiles import Profile


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Platform:
    """A platform that sinks steadily and respawns at the top when it leaves the screen."""

    def __init__(self, index: int, profile: Profile, rng: _RandomSource) -> None:
        self.profile = profile
        self.width = profile.platform_width
        self.height = profile.platform_height
        self._rng = rng
        self.x: float = 0
        self.y: float = 0
        self.has_coin = False
        self._coin_x = 0
        self._coin_y = 0
        self.reset(index)

    def _random_x(self) -> int:
        return self._rng.randrange(self.profile.platform_x_range) + self.profile.platform_x_offset

    def _place_coin(self) -> None:
        size = self.profile.coin_size
        self._coin_x = int(self.x + self.width // 2 - size // 2)
        self._coin_y = int(self.y - size - self.profile.coin_gap)

    def reset(self, index: int) -> None:
        """Put the platform back at its starting slot above the screen."""
        self.x = self._random_x()
        self.y = -self.height - index * self.profile.platform_spacing
        coin_roll = self._rng.randrange(4)
        self.has_coin = coin_roll != 0 and index != 0
        self._place_coin()

    def update(self) -> None:
        """Sink by one frame; respawn at the top once below the screen.

        The coin position is refreshed before any respawn, so on the frame
        of a respawn it still describes the old place.
        """
        self.y += self.profile.platform_speed
        self._place_coin()
        if self.y > self.profile.screen_height:
            self.x = self._random_x()
            self.y = -self.height
            self.has_coin = self._rng.randrange(4) != 0

    def coin_x(self) -> int:
        """Left edge of the coin sitting on this platform."""
        return self._coin_x

    def coin_y(self) -> int:
        """Top edge of the coin sitting on this platform."""
        return self._coin_y


class Player:
    """The egg: position, size, velocity and whether it rests on a platform."""

    def __init__(self, x: float, y: float, width: int, height: int, profile: Profile) -> None:
        self.profile = profile
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.on_platform = False
        self._velocity_x: float = 0
        self._velocity_y: float = 0

    def _coerce(self, value: float) -> float:
        return int(value) if self.profile.integer_velocity else value

    @property
    def velocity_x(self) -> float:
        return self._velocity_x

    @velocity_x.setter
    def velocity_x(self, value: float) -> None:
        self._velocity_x = self._coerce(value)

    @property
    def velocity_y(self) -> float:
        return self._velocity_y

    @velocity_y.setter
    def velocity_y(self, value: float) -> None:
        self._velocity_y = self._coerce(value)

    def update(self) -> None:
        """Move one frame, apply gravity or stop, and bounce off the side walls."""
        self.x += self.velocity_x
        self.y += self.velocity_y
        if not self.on_platform:
            self.velocity_y = self.velocity_y + self.profile.gravity
        else:
            self.velocity_x = 0
            self.velocity_y = 0
        if self.x < 0:
            self.velocity_x = -self.velocity_x
        if self.x + self.width > self.profile.screen_width:
            self.velocity_x = -self.velocity_x
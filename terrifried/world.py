"""The play field: platforms, the egg, coins, scoring and the lava line."""

from __future__ import annotations

import math
import random
from enum import Enum
from typing import Optional

from .entities import Platform, Player
from .profiles import Profile
from .score import Scoreboard


class Sound(Enum):
    """Sound effects the game asks for; the value is the resource file stem."""

    CLICK = "click"
    LAUNCH = "launch"
    DEATH = "die"
    COIN = "coin"
    SPLASH = "splash"
    SELECT = "select"


class World:
    """One running game: advances the simulation and reports sounds to play."""

    def __init__(
        self,
        profile: Profile,
        scoreboard: Scoreboard,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.profile = profile
        self.scoreboard = scoreboard
        self._rng = rng if rng is not None else random.Random()
        self.platforms = [
            Platform(index, profile, self._rng) for index in range(profile.platform_count)
        ]
        x, y = self._start_position()
        self.player = Player(x, y, profile.player_width, profile.player_height, profile)
        self.mouse_down_x = 0
        self.mouse_down_y = 0
        self.first_release = True
        self.timer = 0.0
        self._lava_y = self._lava_height()

    def _start_position(self) -> tuple[float, float]:
        first = self.platforms[0]
        x = first.x + first.width // 2 - self.profile.player_width // 2
        y = first.y - self.profile.player_height
        return x, y

    def _position(self, value: float) -> float:
        return int(value) if self.profile.integer_positions else value

    def _set_player_x(self, value: float) -> None:
        self.player.x = self._position(value)

    def _set_player_y(self, value: float) -> None:
        self.player.y = self._position(value)

    def _lava_height(self) -> float:
        profile = self.profile
        return profile.screen_height - profile.lava_offset - math.sin(self.timer) * profile.lava_amplitude

    def reset(self) -> None:
        """Start over: store the best score and put everything back in place."""
        self.scoreboard.reset()
        for index, platform in enumerate(self.platforms):
            platform.reset(index)
        self.player.velocity_x = 0
        self.player.velocity_y = 0
        x, y = self._start_position()
        self._set_player_x(x)
        self._set_player_y(y)

    def check_collisions(self) -> list[Sound]:
        """Collect touched coins, bump off platform undersides and land on tops."""
        profile = self.profile
        player = self.player
        margin = profile.coin_margin
        size = profile.coin_size
        sounds: list[Sound] = []
        on_platform = False
        for platform in self.platforms:
            coin_x, coin_y = platform.coin_x(), platform.coin_y()
            if (
                platform.has_coin
                and player.x + player.width - margin > coin_x
                and player.x + margin < coin_x + size
                and player.y + player.height - margin > coin_y
                and player.y + margin < coin_y + size
            ):
                self.scoreboard.add(1)
                platform.has_coin = False
                sounds.append(Sound.COIN)
            if (
                player.x + 1 < platform.x + platform.width
                and player.x + player.width > platform.x
                and player.y + player.height >= platform.y
                and player.y < platform.y + platform.height
            ):
                if player.y > platform.y + platform.height // 2:
                    player.velocity_y = profile.bump_velocity
                elif player.y + player.height < platform.y + platform.height:
                    on_platform = True
                    self._set_player_y(platform.y - player.height)
                    self._set_player_y(player.y + profile.landing_nudge)
        player.on_platform = on_platform
        return sounds

    def press(self, x: int, y: int) -> list[Sound]:
        """Start aiming at ``(x, y)`` if the egg is resting on a platform."""
        if not self.player.on_platform:
            return []
        self.mouse_down_x = x
        self.mouse_down_y = y
        return [Sound.CLICK]

    def release(self, x: int, y: int) -> list[Sound]:
        """Launch the egg by the drag from the press point to ``(x, y)``.

        The very first release only ends the click that left the title screen.
        """
        player = self.player
        if not player.on_platform:
            return []
        if self.first_release:
            self.first_release = False
            return []
        if player.on_platform:
            self._set_player_y(player.y - self.profile.landing_nudge)
        drag_x = int(x - self.mouse_down_x)
        drag_y = int(y - self.mouse_down_y)
        player.velocity_x = drag_x * self.profile.launch_scale
        player.velocity_y = drag_y * self.profile.launch_scale
        return [Sound.LAUNCH]

    def step(self) -> list[Sound]:
        """Advance one frame and return the sounds it caused."""
        sounds = self.check_collisions()
        self.player.update()
        if self.player.y > self.profile.screen_height:
            sounds.append(Sound.DEATH)
            self.reset()
        for platform in self.platforms:
            platform.update()
        self._lava_y = self._lava_height()
        self.timer += self.profile.lava_speed
        return sounds

    def lava_y(self) -> float:
        """Top edge of the lava as of the last frame."""
        return self._lava_y
"""The playable game: splash, title screen, the play loop and the command entry point."""

from __future__ import annotations

import argparse
import os
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Sequence, Union

from .profiles import Profile, profile_named, profile_names
from .score import Scoreboard
from .world import Sound, World

SPLASH_FRAMES = 120
FRAME_RATE = 60

_BACKGROUND = (237, 227, 224)
_AIM_COLOUR = (178, 150, 125)
_SPLASH_TEXT_COLOUR = (213, 128, 90)
_HINT_COLOUR = (178, 150, 125)
_BLACK = (0, 0, 0)

_IMAGE_FILES = {
    "player": "egg.png",
    "lava": "lava.png",
    "platform": "platform.png",
    "coin": "coin.png",
    "scorebox": "scorebox.png",
    "logo": "logo.png",
    "splash_egg": "splash_egg.png",
}

_FALLBACK_COLOURS = {
    "player": (250, 250, 240),
    "lava": (230, 90, 40),
    "platform": (178, 150, 125),
    "coin": (240, 200, 60),
    "scorebox": (255, 255, 255),
    "logo": (213, 128, 90),
    "splash_egg": (250, 250, 240),
}


class Screen(Enum):
    """Which part of the game is showing."""

    SPLASH = auto()
    TITLE = auto()
    PLAYING = auto()


class GameState:
    """Screen flow and input handling, independent of any window or audio device."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.screen = Screen.SPLASH
        self.splash_timer = 0
        self.mouse_down = False
        self._played_splash = False
        self._played_select = False

    @property
    def aiming(self) -> bool:
        """True while the button is held and the egg rests on a platform."""
        return self.mouse_down and self.world.player.on_platform

    def tick(self, pressed: bool, released: bool, mouse_x: int, mouse_y: int) -> list[Sound]:
        """Advance one frame of input and game logic; return the sounds to play."""
        if pressed:
            self.mouse_down = True
        if released:
            self.mouse_down = False

        if self.screen is Screen.SPLASH and self.splash_timer > SPLASH_FRAMES:
            self.screen = Screen.TITLE

        if self.screen is Screen.SPLASH:
            return self._splash_tick()
        if self.screen is Screen.TITLE:
            return self._title_tick(pressed, mouse_x, mouse_y)
        return self._play_tick(pressed, released, mouse_x, mouse_y)

    def _splash_tick(self) -> list[Sound]:
        sounds: list[Sound] = []
        if not self._played_splash:
            sounds.append(Sound.SPLASH)
            self._played_splash = True
        self.splash_timer += 1
        return sounds

    def _title_tick(self, pressed: bool, mouse_x: int, mouse_y: int) -> list[Sound]:
        sounds: list[Sound] = []
        if not self._played_select:
            sounds.append(Sound.SELECT)
            self._played_select = True
        if pressed:
            sounds.append(Sound.SELECT)
            self.screen = Screen.PLAYING
            self.world.mouse_down_x = mouse_x
            self.world.mouse_down_y = mouse_y
        return sounds

    def _play_tick(self, pressed: bool, released: bool, mouse_x: int, mouse_y: int) -> list[Sound]:
        sounds: list[Sound] = []
        if pressed:
            sounds.extend(self.world.press(mouse_x, mouse_y))
        if released:
            sounds.extend(self.world.release(mouse_x, mouse_y))
        sounds.extend(self.world.step())
        return sounds


class Game:
    """A window that runs the game with images, sounds and a font from ``resources``."""

    def __init__(
        self,
        profile: Profile,
        resources: Union[str, "os.PathLike[str]"] = "resources",
        score_path: Optional[Union[str, "os.PathLike[str]"]] = "highscore.bin",
    ) -> None:
        self.profile = profile
        self.resources = Path(resources)
        self.scoreboard = Scoreboard(score_path)
        self.world = World(profile, self.scoreboard)
        self.state = GameState(self.world)
        self._images: dict = {}
        self._sounds: dict = {}
        self._fonts: dict = {}

    def _load_image(self, key: str, size: tuple[int, int]):
        import pygame

        try:
            image = pygame.image.load(str(self.resources / _IMAGE_FILES[key])).convert_alpha()
        except (pygame.error, OSError):
            return None
        return pygame.transform.scale(image, size)

    def _load_sound(self, sound: Sound):
        import pygame

        try:
            return pygame.mixer.Sound(str(self.resources / f"{sound.value}.wav"))
        except (pygame.error, OSError):
            return None

    def _font(self, size: int):
        import pygame

        font = self._fonts.get(size)
        if font is None:
            try:
                font = pygame.font.Font(str(self.resources / "font.otf"), size)
            except (pygame.error, OSError):
                font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _sprite_sizes(self) -> dict[str, tuple[int, int]]:
        p = self.profile
        return {
            "player": (p.player_height, p.player_height),
            "lava": (p.screen_width, 48),
            "platform": (p.platform_width, p.platform_height),
            "coin": (p.coin_size, p.coin_size),
            "scorebox": (102, 70),
            "logo": (400, 90),
            "splash_egg": (32, 32),
        }

    def _blit(self, surface, key: str, x: float, y: float) -> None:
        import pygame

        image = self._images.get(key)
        if image is None:
            width, height = self._sprite_sizes()[key]
            pygame.draw.rect(surface, _FALLBACK_COLOURS[key], (int(x), int(y), width, height))
        else:
            surface.blit(image, (int(x), int(y)))

    def _text(self, surface, text: str, x: float, y: float, size: int, colour) -> None:
        rendered = self._font(size).render(text, True, colour)
        surface.blit(rendered, (int(x), int(y)))

    def _play(self, sounds: Sequence[Sound]) -> None:
        for sound in sounds:
            clip = self._sounds.get(sound)
            if clip is not None:
                clip.play()

    def _draw_splash(self, surface) -> None:
        w, h = self.profile.screen_width, self.profile.screen_height
        surface.fill(_BACKGROUND)
        self._text(surface, "POLYMARS", w // 2 - 54, h // 2 + 3, 32, _SPLASH_TEXT_COLOUR)
        self._blit(surface, "splash_egg", w // 2 - 16, h // 2 - 16 - 23)

    def _draw_title(self, surface) -> None:
        w, h = self.profile.screen_width, self.profile.screen_height
        surface.fill(_BACKGROUND)
        self._blit(surface, "logo", w // 2 - 200, h // 2 - 45 - 30)
        self._text(surface, self.scoreboard.best_text(), w // 2 - 37, h // 2 + 10, 32, _BLACK)
        self._text(surface, "CLICK ANYWHERE TO BEGIN", w // 2 - 134, h // 2 + 50, 32, _HINT_COLOUR)

    def _draw_playing(self, surface, mouse_x: int, mouse_y: int) -> None:
        import pygame

        world = self.world
        player = world.player
        surface.fill(_BACKGROUND)
        if self.state.aiming:
            offset_x = player.x - world.mouse_down_x + player.width // 2
            offset_y = player.y - world.mouse_down_y + player.height // 2
            start = (int(world.mouse_down_x + offset_x), int(world.mouse_down_y + offset_y))
            end = (int(mouse_x + offset_x), int(mouse_y + offset_y))
            pygame.draw.line(surface, _AIM_COLOUR, start, end)
        for platform in world.platforms:
            self._blit(surface, "platform", platform.x, platform.y)
            if platform.has_coin:
                self._blit(surface, "coin", platform.coin_x(), platform.coin_y())
        self._blit(surface, "player", player.x, player.y)
        self._blit(surface, "lava", 0, world.lava_y())
        self._blit(surface, "scorebox", 17, 17)
        self._text(surface, self.scoreboard.score_text(), 28, 20, 64, _BLACK)
        self._text(surface, self.scoreboard.best_text(), 17, 90, 32, _BLACK)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        import pygame

        self.scoreboard.reset()
        pygame.init()
        try:
            try:
                pygame.mixer.init(22050, -16, 2, 4096)
                audio = True
            except pygame.error:
                audio = False
            size = (self.profile.screen_width, self.profile.screen_height)
            surface = pygame.display.set_mode(size)
            pygame.display.set_caption("Terri-Fried")
            sizes = self._sprite_sizes()
            self._images = {key: self._load_image(key, sizes[key]) for key in _IMAGE_FILES}
            icon = self._images.get("player")
            if icon is not None:
                pygame.display.set_icon(icon)
            if audio:
                self._sounds = {sound: self._load_sound(sound) for sound in Sound}
            clock = pygame.time.Clock()

            running = True
            while running:
                pressed = released = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        pressed = True
                    elif event.type == pygame.MOUSEBUTTONUP:
                        released = True
                if not running:
                    break
                mouse_x, mouse_y = pygame.mouse.get_pos()
                self._play(self.state.tick(pressed, released, mouse_x, mouse_y))

                if self.state.screen is Screen.SPLASH:
                    self._draw_splash(surface)
                elif self.state.screen is Screen.TITLE:
                    self._draw_title(surface)
                else:
                    self._draw_playing(surface, mouse_x, mouse_y)
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line and run the game."""
    parser = argparse.ArgumentParser(
        prog="terrifried",
        description="Fling an egg between falling platforms and keep it out of the lava.",
    )
    parser.add_argument("--profile", choices=profile_names(), default="desktop",
                        help="screen layout and physics to use")
    parser.add_argument("--resources", type=Path, default=Path("resources"),
                        help="directory holding images, sounds and the font")
    parser.add_argument("--score-file", type=Path, default=Path("highscore.bin"),
                        help="file the best score is kept in")
    args = parser.parse_args(argv)
    Game(profile_named(args.profile), args.resources, args.score_file).run()
    return 0
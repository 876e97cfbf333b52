# terrifried

A small arcade game. You are an egg standing on a platform. Platforms sink
slowly towards a pool of lava. Press, drag and release the mouse to fling the
egg: the drag from the press point to the release point sets the launch
direction and speed. Land on another platform before yours sinks away. Coins
sitting above platforms add one point each. Fall off the bottom of the screen
and the game starts over.

Your best score is kept between sessions in a small file.

## Installing

```
pip install .
```

This installs pygame as well.

## Playing

```
terrifried
```

The game opens with a short splash screen (about two seconds) and then a title
screen showing your best score. Click anywhere to begin.

- Press the mouse button while standing on a platform to start aiming; a line
  from the egg shows the drag.
- Drag to set the launch direction and strength.
- Release to jump.

The first release after the title screen only arms the controls; jumps start
from the next one. Close the window to quit.

Options:

- `--profile {console,desktop,handheld,vita}` – screen size, sprite sizes and
  physics to use (default `desktop`, 800×450).
- `--resources DIR` – directory holding the images (`egg.png`, `lava.png`,
  `platform.png`, `coin.png`, `scorebox.png`, `logo.png`, `splash_egg.png`),
  the sound effects (`click.wav`, `launch.wav`, `die.wav`, `coin.wav`,
  `splash.wav`, `select.wav`) and the font (`font.otf`). Default `resources`.
- `--score-file FILE` – where the best score is kept (default
  `highscore.bin`). It holds a single 4-byte little-endian signed integer; a
  missing or short file counts as 0. The best score is written whenever a run
  starts over.

## What is not included

The package ships no images, sounds or font. Without a resource directory the
game still runs: missing images are drawn as plain coloured rectangles,
missing sounds are skipped, and pygame's default font stands in for
`font.otf`. If no audio device can be opened, the game plays silently.

Input is mouse only; there is no keyboard or gamepad control. The predicted
flight path computed by `terrifried.trajectory` is not drawn by the game
window, which shows a straight aiming line instead.

## Using the pieces

The game logic works without a window:

- `terrifried.profiles` – `Profile` holds every number that differs between
  layouts; `profile_named(name)` looks one up (case-insensitive, raising
  `ValueError` for unknown names) and `profile_names()` lists them.
- `terrifried.entities` – `Platform` (sinks each frame, respawns at the top
  with a 3-in-4 chance of a coin) and `Player` (moves, falls under gravity,
  bounces off the side walls).
- `terrifried.score` – `Scoreboard` tracks the current and best score, with
  `score_text()` (padded to three digits) and `best_text()` (`"BEST: n"`);
  `load_high_score(path)` and `save_high_score(path, value)` read and write
  the score file. Pass `None` as the path to keep the best score in memory.
- `terrifried.world` – `World` advances the game one frame at a time with
  `step()`, takes input through `press(x, y)` and `release(x, y)`, and returns
  the `Sound` effects each call asks for. `lava_y()` gives the current lava
  line.
- `terrifried.trajectory` – `aim_velocity(down_x, down_y, x, y)` gives the
  launch velocity of a drag and `trajectory(...)` the predicted centre points
  of a launched egg, one per frame.
- `terrifried.app` – `GameState` runs the splash, title and play screens
  (`Screen`) from plain input flags; `Game` opens the pygame window; `main()`
  is the `terrifried` command.

```python
import random
from terrifried.profiles import profile_named
from terrifried.score import Scoreboard
from terrifried.world import World

world = World(profile_named("desktop"), Scoreboard(None), random.Random(1))
for _ in range(60):
    sounds = world.step()
print(world.scoreboard.score_text(), world.lava_y())
```

## Running the tests

```
pip install .[test]
pytest
```
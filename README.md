# lawnmower

Lawn Mower Revolution is a short arcade game. You steer a lawn mower with the
mouse. You cut down as much grass and as many weeds as you can before the
sixty-second clock runs out.

## Installing

```
pip install .
```

The game uses pygame for its window, drawing and sound.

## Playing

```
lawnmower
```

The command opens a 1920x1080 window and starts a round at once.

- Move the mouse to steer the mower. Any patch that the mower overlaps takes
  the mower's damage once per frame.
- Grass has 225 hit points and scores 1 when it is cut down. The round starts
  with 20 patches of grass.
- Weeds have 350 hit points and score 2. They start to appear after ten
  seconds.
- A new patch of grass grows every second while there are fewer than 30. A
  new weed grows every one and a half seconds while there are fewer than 20.
- The mower's damage starts at 5 and goes up by 2 every ten seconds. A
  "Damage increased!" notice shows for two and a half seconds after each
  increase.
- The score and the time remaining are shown in the top right corner. When
  the time runs out, the screen shows "Time's Up!" and the final score.
- Close the window or press Escape to quit.

The game looks for its assets relative to the working directory:

- `sprites/Player.png`, `sprites/Grass.png` and `sprites/Weed.png`. If a
  sprite is missing, the game reports it on standard error. That object is
  then not drawn and cannot be hit.
- `fonts/kenney_mini.ttf`. Without it the game reports
  `Failed to load font: kenney_mini.ttf` and exits with status 1.
- `audio/background.wav`. It is played in a loop. If it cannot be played,
  the game reports the error and runs without music.

## Using the pieces

You can drive the game logic without a window:

```python
import random

from lawnmower.game import Game

game = Game(rng=random.Random(1))
game.advance(1 / 60, (960, 540))
print(game.score, game.time_remaining(), game.is_over())
```

- `lawnmower.game.Game` holds one round. Its parts are:
  - `advance(dt, mouse_position)` runs one frame.
  - `time_remaining()`, `is_over()` and `show_damage_alert()` report on the
    round.
  - `render(surface, font)` draws the frame onto a pygame surface. `font` is
    a font file path, or `None` for pygame's default font.
  - The `grass`, `weeds`, `score` and `elapsed` attributes hold the round's
    state.
  - When no player is passed, the game uses the shared
    `Player.instance()`. Its damage carries over between rounds made in the
    same process.
- `lawnmower.game.main` is what the `lawnmower` command runs.
- `lawnmower.enemy` provides these names:
  - `Enemy`, with `take_damage`, `is_dead`, `bounds`, `draw` and
    `set_image`.
  - `Grass` and `Weed`, which are placed at random between (100, 100) and
    (1820, 980). Both accept an optional `random.Random` and image.
  - `EnemyFactory.grass(rng)` and `EnemyFactory.weed(rng)`.
  - `draw_enemies(patches, surface)`.
- `lawnmower.player.Player` is the mower. Its parts are:
  - `Player.instance()` returns the shared mower.
  - `follow_mouse(position)` moves it.
  - `plus_damage(amount)` raises its `damage`.
- `lawnmower.entity` provides the abstract `Entity` base class. It also
  provides `Rect`, whose `intersects` and `Rect.centered` are used for
  collisions.

## Limits

A round has no pause, menu or restart. After the time is up, the final score
stays on screen until the window is closed. Scores are not saved.

## Tests

```
pip install ".[test]"
pytest
```
# zombiesurvival

A top-down survival shooter. You run across an endless tiled floor and shoot
at the zombies that keep spawning around you. The slow green zombies are
worth 10 points and the fast red ones 25. Once your score reaches 100,
rocks start falling from the top of the screen. Once it reaches 200, the
zombies move twice as fast.

## Installation

```
pip install .
```

## Playing

```
zombiesurvival
```

The game loads its images, font and music from an `Assets` directory in the
working directory. Pass `--assets DIR` to use another directory:

```
zombiesurvival --assets path/to/Assets
```

The directory is expected to hold:

- `Sprites/player5.png`: the player sprite sheet, with frames 20×64 px
- `Sprites/zombie3.png`: the zombie sprite
- `Sprites/floor3.png`: the floor tile sheet
- `Sprites/brim.png`: the portrait in the tutorial dialog
- `Sprites/gameover.png`: the game-over screen
- `Fonts/arial.ttf`: the font for the HUD (the default pygame font is used if it is missing)
- `Audio/soundtrack.ogg`: the background music, played in a loop

A missing asset does not stop the game: it carries on without it, and for
most files prints a message on standard error.

Controls:

| Key / button | Action |
|--------------|--------|
| W A S D      | move |
| Left mouse   | shoot at the cursor |
| P            | pause and resume |
| Enter        | leave the tutorial dialog |
| Escape       | close the game-over screen |

The player starts with 50 health and can fire once every 0.25 seconds. A
falling rock costs 10 health per frame of contact. Touching a slow zombie
costs 2 health per frame, and touching a fast one costs 1. A new zombie
spawns every 2 seconds, at least 250 pixels away from the player.

## Using the simulation from code

The game logic does not need a window. `zombiesurvival.game.GameState` runs
the game one frame at a time:

```python
from zombiesurvival.game import GameState

state = GameState()
state.step(1 / 60, movement=(1.0, 0.0), mouse_pos=(500.0, 300.0), shooting=True)
print(state.score, state.player.health, state.game_over)
```

`GameState` accepts a `random.Random` through `rng` for repeatable runs, and
`toggle_pause()` stops and resumes the simulation.

The building blocks live in their own modules:

- `zombiesurvival.player.Player` and `movement_from_keys`
- `zombiesurvival.enemy.EnemyManager`, `EnemyType1`, `EnemyType2`
- `zombiesurvival.bullet.Bullet`
- `zombiesurvival.asteroid.Asteroid`, a falling rectangular block (the game
  itself uses the round `zombiesurvival.game.FallingRock`)
- `zombiesurvival.tilemap.TileMap`
- `zombiesurvival.geometry.Rect`, `shape_bounds`, `normalized`

## What it does not do

There is no saved high score, no menu beyond the opening tutorial dialog,
and no way to restart after game over other than running the command again.

## Running the tests

```
pip install .[test]
pytest
```
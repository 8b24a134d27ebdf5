# wavecrawler

A small turn-based dungeon crawler played in a text terminal. You start in
a randomly carved dungeon of twenty rooms joined by corridors and have to
survive three waves of monsters: three goblins, then two goblins and two
orcs, and finally three orcs led by a troll.

## Installing

```
pip install .
```

The terminal front end uses the standard-library `curses` module, so it
needs a Python that ships `curses` (Linux, macOS and other POSIX systems).

## Playing

```
wavecrawler
wavecrawler --seed 42
```

`--seed` fixes the dungeon layout and the waves, so a game can be replayed.

Controls:

- Arrow keys move one tile. Moving into a monster attacks it instead.
- Space waits a turn.
- `D` enters dash targeting (only with enough mana). Click a floor tile
  within range that has a clear straight path from you to dash there.
- `F` enters fireball targeting (only with enough mana). Click a floor tile
  within range and in line of sight. The blast damages every monster on or
  next to the target tile.
- Escape or a right click cancels targeting.
- `q` quits.

The player starts with 15 health and 8 mana. A dash costs 4 mana and
reaches 4 tiles; a fireball costs 5 mana, reaches 6 tiles and deals 3
damage. Mana comes back one point per player turn. Every ordinary attack,
yours or a monster's, does one point of damage. Monsters act every other
turn, hunting you down with a flow field across the map. Between waves
there is a short countdown shown at the top of the screen; after the third
wave is cleared the game announces victory.

## Using it as a library

The game logic does not need a terminal. `wavecrawler.game.Game` holds the
world and resources and advances one frame per call to `Game.tick`, which
takes the key pressed (a `wavecrawler.player_input.Key` or `None`), the
mouse position in screen tiles, and whether the left and right buttons are
pressed. It returns a `wavecrawler.draw.Canvas` with the drawn layers,
which can be read with `Canvas.cell` and `Canvas.text_at`.

```python
import random

from wavecrawler.game import Game
from wavecrawler.geometry import Point
from wavecrawler.player_input import Key

game = Game(random.Random(7))
canvas = game.tick(Key.SPACE, Point(0, 0), False, False)
print(canvas.text_at(2, 1))
```

Other parts can be used on their own:

- `wavecrawler.map_builder.MapBuilder` generates a room-and-corridor
  `wavecrawler.map.Map`.
- `wavecrawler.pathfinding.create_flow_field` and `find_best_move` compute
  monster movement toward a point.
- `wavecrawler.world.World` and `CommandBuffer` store entities and apply
  deferred changes; `wavecrawler.schedule.Schedule` runs systems in stages.
- `wavecrawler.geometry` has `Point`, `distance`, `bresenham_line` and
  `has_clear_path`.

## What it does not do

There is no graphical tile window: the game draws only to a `curses`
terminal. Games cannot be saved or loaded, and the fixed three waves are
the whole game.

## Running the tests

```
pip install .[test]
pytest
```
# dungeonrun

A small tile-based dungeon puzzle. Walk through a maze, pick up every coin,
and leave through the exit once it opens.

## Installing

```
pip install .
```

The game window uses pygame.

## Playing

```
dungeonrun path/to/map.ber
```

The bonus edition adds animated sprites, stationary toxic tiles, wandering
enemies and an on-screen movement counter below the map:

```
dungeonrun-bonus path/to/map.ber
```

Controls:

- `W` / `Up`, `S` / `Down`, `A` / `Left`, `D` / `Right`: move
- `Esc`: quit (`Q` also quits in the bonus edition)

Every step is counted; the plain game prints the count to the terminal after
each move. You win by stepping onto the exit after collecting all coins; until
then the exit stays closed. In the bonus edition, walking into an enemy or
being caught by a wandering one ends the game.

If the arguments or the map are not usable, the reason is printed and the
command exits with status 1.

## Sprites

The package does not include any image files. Sprites are loaded from
`assets/sprites/...` relative to the directory you start the game from
(for example `assets/sprites/wall/wall.xpm`, `assets/sprites/floor.xpm`,
`assets/sprites/coin/coin1.xpm`). If one is missing the game stops with an
error. The file names the game looks for are listed in `dungeonrun.tiles`.

## Map files

Maps are plain text files whose name ends in `.ber`, one row per line:

| Char | Meaning                           |
|------|-----------------------------------|
| `1`  | wall                              |
| `0`  | floor                             |
| `P`  | player start (exactly one)        |
| `E`  | exit (exactly one)                |
| `C`  | coin (at least one)               |
| `K`  | toxic tile (bonus only)           |
| `X`  | wandering enemy (bonus only)      |

A map is rejected if:

- it is empty or not rectangular;
- it is not enclosed by walls;
- it contains unknown characters (`K` and `X` count as unknown in the plain game);
- it has an empty line at the start, in the middle or at the end; note that
  this includes a newline after the last row, so the file must not end with one;
- any coin or the exit cannot be reached from the start (coins must be
  reachable without walking through the exit; in the bonus edition toxic
  tiles block the way);
- in the bonus edition, it is larger than 1920 × 1080 pixels at 32 pixels per tile.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from dungeonrun.maps import load_map
from dungeonrun.validate import validate_map
from dungeonrun.game import Game, Outcome

game_map = load_map("level.ber")
summary = validate_map(game_map, bonus=False)
game = Game(game_map, summary)
outcome = game.move(1, 0)
if outcome is Outcome.WON:
    print("escaped in", game.movements, "moves")
```

- `dungeonrun.maps`: `load_map`, `parse_map`, `check_arguments`,
  `check_empty_lines` and the `GameMap` grid, indexed by `(x, y)`.
- `dungeonrun.validate`: `validate_map` and the individual checks
  (`check_rectangular`, `count_elements`, `reachable_counts`,
  `check_display_size`); it returns a `MapSummary`.
- `dungeonrun.game`: `Game` and `BonusGame`, with `move`, `handle_key` and,
  for the bonus game, `step_enemies`; the state is reported as an `Outcome`
  (`PLAYING`, `WON`, `LOST`, `QUIT`).
- `dungeonrun.animation`: `Animation`, a time-driven frame cycle.
- `dungeonrun.render`: `Renderer` and `BonusRenderer`, which draw onto a
  pygame surface.
- `dungeonrun.messages`: the end-of-game and error banners.

Invalid input raises `dungeonrun.maps.MapError` carrying the reason.

## Running the tests

```
pip install .[test]
pytest
```
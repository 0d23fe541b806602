"""Map tiles, movement directions, key codes and shared game constants."""

from __future__ import annotations

from enum import Enum, IntEnum

IMG_WIDTH = 32
IMG_HEIGHT = 32
DELAY = 80
WIN_W = 1920
WIN_H = 1080

GREEN = "\033[0;32m"
RED = "\033[1;31m"
GREY = "\033[0;90m"
CYAN = "\033[1;96m"
YELLOW = "\033[1;33m"
WHITE = "\033[1;37m"
RESET = "\033[0m"

WALL_SPRITES = (
    "assets/sprites/wall/wall.xpm",
    "assets/sprites/wall/wall2.xpm",
    "assets/sprites/wall/wall3.xpm",
    "assets/sprites/wall/wall4.xpm",
    "assets/sprites/wall/wall5.xpm",
)
FLOOR_SPRITE = "assets/sprites/floor.xpm"
COIN_SPRITES = (
    "assets/sprites/coin/coin1.xpm",
    "assets/sprites/coin/coin2.xpm",
    "assets/sprites/coin/coin3.xpm",
    "assets/sprites/coin/coin4.xpm",
)
PLAYER_FRONT_SPRITES = tuple(
    f"assets/sprites/player/front/player{n}.xpm" for n in range(17, 25)
)
PLAYER_LEFT_SPRITES = tuple(
    f"assets/sprites/player/left/player{n}.xpm" for n in range(9, 17)
)
PLAYER_RIGHT_SPRITES = tuple(
    f"assets/sprites/player/right/player{n}.xpm" for n in range(1, 9)
)
PLAYER_BACK_SPRITES = tuple(
    f"assets/sprites/player/back/player{n}.xpm" for n in range(25, 33)
)
EXIT_OPEN_SPRITE = "assets/sprites/door/opened_door/opened_door.xpm"
EXIT_CLOSED_SPRITE = "assets/sprites/door/dungeon_door.xpm"
WANDER_LEFT_SPRITES = tuple(
    f"assets/sprites/enemy/left/enemy{n}.xpm" for n in range(1, 5)
)
WANDER_RIGHT_SPRITES = tuple(
    f"assets/sprites/enemy/right/enemy{n}.xpm" for n in range(1, 5)
)
TOXIC_SPRITES = (
    "assets/sprites/toxic_river/toxic-river.xpm",
    "assets/sprites/toxic_river/toxic-river2.xpm",
    "assets/sprites/toxic_river/toxic-river3.xpm",
    "assets/sprites/toxic_river/toxic-river4.xpm",
)

# Sprites of the plain game.
WALL_SPRITE = WALL_SPRITES[0]
COIN_SPRITE = COIN_SPRITES[0]
PLAYER_SPRITE = PLAYER_FRONT_SPRITES[0]


class Tile(str, Enum):
    """A character that may appear in a map file."""

    WALL = "1"
    FLOOR = "0"
    COINS = "C"
    PLAYER = "P"
    EXIT = "E"
    STAT_ENEMY = "K"
    WANDER_ENEMY = "X"

    def __str__(self) -> str:
        return self.value


class Direction(IntEnum):
    """Facing of the player or of a wandering enemy."""

    FRONT = 0
    BACK = 1
    LEFT = 2
    RIGHT = 3
    HORIZONTAL = 4
    VERTICAL = 5
    IDLE = 6

    @property
    def delta(self) -> tuple[int, int]:
        """The (dx, dy) step taken when moving this way."""
        return _DELTAS.get(self, (0, 0))


_DELTAS = {
    Direction.BACK: (0, -1),
    Direction.FRONT: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Key(IntEnum):
    """X11 key codes the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    UP = 65362
    LEFT = 65361
    RIGHT = 65363
    DOWN = 65364
    Q = 113
    ESC = 65307


_KEY_DIRECTIONS = {
    Key.W: Direction.BACK,
    Key.UP: Direction.BACK,
    Key.S: Direction.FRONT,
    Key.DOWN: Direction.FRONT,
    Key.A: Direction.LEFT,
    Key.LEFT: Direction.LEFT,
    Key.D: Direction.RIGHT,
    Key.RIGHT: Direction.RIGHT,
}

_BASE_TILES = frozenset(
    {Tile.WALL, Tile.FLOOR, Tile.COINS, Tile.PLAYER, Tile.EXIT}
)
_BONUS_TILES = _BASE_TILES | {Tile.STAT_ENEMY, Tile.WANDER_ENEMY}


def allowed_tiles(bonus: bool = False) -> frozenset[Tile]:
    """Tiles a map may contain; the bonus game adds the two enemy kinds."""
    return _BONUS_TILES if bonus else _BASE_TILES


def direction_for_key(keycode: int) -> Direction | None:
    """The movement direction bound to a key code, or None if unbound."""
    return _KEY_DIRECTIONS.get(keycode)
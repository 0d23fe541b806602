"""Game state and rules: player moves, collecting, winning and enemies."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from enum import Enum, auto

from dungeonrun.maps import GameMap
from dungeonrun.tiles import Direction, Key, Tile, direction_for_key
from dungeonrun.validate import MapSummary

ENEMY_STEP_INTERVAL = 0.1

_ENEMY_BLOCKERS = frozenset(
    {
        Tile.WALL.value,
        Tile.STAT_ENEMY.value,
        Tile.WANDER_ENEMY.value,
        Tile.COINS.value,
        Tile.EXIT.value,
    }
)

# A blocked enemy draws a new heading in this order.
_REROLL = (Direction.BACK, Direction.FRONT, Direction.LEFT, Direction.RIGHT)


class Outcome(Enum):
    """Where a game stands."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()
    QUIT = auto()


@dataclass
class Enemy:
    """A wandering enemy on the map."""

    x: int
    y: int
    direction: Direction
    last_move_time: float

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


def is_valid_location(game_map: GameMap, x: int, y: int) -> bool:
    """Whether a wandering enemy may step onto (x, y)."""
    if (x, y) not in game_map:
        return False
    return game_map[(x, y)] not in _ENEMY_BLOCKERS


def spawn_enemies(
    game_map: GameMap, rng: random.Random, now: float
) -> list[Enemy]:
    """Create an enemy for every wandering-enemy tile.

    The enemy found last in row order comes first in the list.
    """
    enemies: list[Enemy] = []
    for (x, y), char in game_map.positions():
        if char == Tile.WANDER_ENEMY.value:
            enemies.insert(0, Enemy(x, y, Direction(rng.randrange(4)), now))
    return enemies


class Game:
    """The plain game: walk, collect every coin, then reach the exit."""

    def __init__(self, game_map: GameMap, summary: MapSummary) -> None:
        if summary.player is None:
            raise ValueError("the map summary has no player position")
        self.map = game_map
        self.player: tuple[int, int] = summary.player
        self.coins = summary.coins
        self.movements = 0
        self.outcome = Outcome.PLAYING

    def _step_player(self, target: tuple[int, int]) -> None:
        self.map[self.player] = Tile.FLOOR
        self.player = target
        self.map[target] = Tile.PLAYER
        self.movements += 1

    def move(self, dx: int, dy: int) -> Outcome:
        """Try to move the player by (dx, dy) and return the outcome."""
        if self.outcome is not Outcome.PLAYING:
            return self.outcome
        x, y = self.player
        target = (x + dx, y + dy)
        tile = self.map[target]
        if tile == Tile.WALL.value:
            return self.outcome
        if tile == Tile.EXIT.value:
            if self.coins == 0:
                self.movements += 1
                self.outcome = Outcome.WON
            return self.outcome
        if tile == Tile.COINS.value:
            self.coins -= 1
        self._step_player(target)
        return self.outcome

    def handle_key(self, keycode: int) -> Outcome:
        """React to a key press."""
        if self.outcome is not Outcome.PLAYING:
            return self.outcome
        if keycode == Key.ESC:
            self.outcome = Outcome.QUIT
            return self.outcome
        direction = direction_for_key(keycode)
        if direction is not None:
            return self.move(*direction.delta)
        return self.outcome


class BonusGame(Game):
    """The bonus game, with static and wandering enemies."""

    def __init__(
        self,
        game_map: GameMap,
        summary: MapSummary,
        rng: random.Random | None = None,
        now: float | None = None,
    ) -> None:
        super().__init__(game_map, summary)
        self.rng = rng if rng is not None else random.Random()
        start = time.time() if now is None else now
        self.direction = Direction.FRONT
        self.enemies = spawn_enemies(game_map, self.rng, start)

    def move(self, dx: int, dy: int) -> Outcome:
        """Try to move the player; touching an enemy loses the game."""
        if self.outcome is not Outcome.PLAYING:
            return self.outcome
        x, y = self.player
        target = (x + dx, y + dy)
        tile = self.map[target]
        if tile == Tile.WALL.value or (
            tile == Tile.EXIT.value and self.coins != 0
        ):
            return self.outcome
        if tile == Tile.COINS.value:
            self.coins -= 1
        elif tile == Tile.EXIT.value:
            self.outcome = Outcome.WON
            return self.outcome
        elif tile in (Tile.STAT_ENEMY.value, Tile.WANDER_ENEMY.value):
            self.outcome = Outcome.LOST
            return self.outcome
        self._step_player(target)
        return self.outcome

    def handle_key(self, keycode: int) -> Outcome:
        """React to a key press; Q quits as well as Escape."""
        if self.outcome is not Outcome.PLAYING:
            return self.outcome
        if keycode in (Key.ESC, Key.Q):
            self.outcome = Outcome.QUIT
            return self.outcome
        direction = direction_for_key(keycode)
        if direction is not None:
            self.direction = direction
            return self.move(*direction.delta)
        return self.outcome

    def _step_enemy(self, enemy: Enemy, now: float) -> None:
        if now - enemy.last_move_time < ENEMY_STEP_INTERVAL:
            return
        dx, dy = enemy.direction.delta
        target = (enemy.x + dx, enemy.y + dy)
        if is_valid_location(self.map, *target):
            if self.map[target] == Tile.PLAYER.value:
                self.outcome = Outcome.LOST
                return
            self.map[enemy.position] = Tile.FLOOR
            enemy.x, enemy.y = target
            self.map[target] = Tile.WANDER_ENEMY
        else:
            enemy.direction = _REROLL[self.rng.randrange(4)]
        enemy.last_move_time = now

    def step_enemies(self, now: float | None = None) -> Outcome:
        """Move every wandering enemy whose turn has come."""
        current = time.time() if now is None else now
        for enemy in self.enemies:
            if self.outcome is not Outcome.PLAYING:
                break
            self._step_enemy(enemy, current)
        return self.outcome
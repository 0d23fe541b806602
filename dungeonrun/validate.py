"""Checks that a parsed map is playable: shape, contents and reachability."""

from __future__ import annotations

from dataclasses import dataclass

from dungeonrun.maps import GameMap, MapError
from dungeonrun.tiles import IMG_HEIGHT, IMG_WIDTH, WIN_H, WIN_W, Tile, allowed_tiles


@dataclass
class MapSummary:
    """What a scan of the map found."""

    width: int
    height: int
    players: int = 0
    exits: int = 0
    coins: int = 0
    player: tuple[int, int] | None = None
    static_enemies: int = 0
    wandering_enemies: int = 0


def check_rectangular(game_map: GameMap) -> int:
    """Raise MapError unless every row has the first row's length; return it."""
    if game_map.height == 0:
        raise MapError("Map is empty!")
    width = game_map.width
    if any(len(row) != width for row in game_map.grid):
        raise MapError("Map is not rectangular!")
    return width


def count_elements(game_map: GameMap, bonus: bool = False) -> MapSummary:
    """Count the map's contents, checking its walls and its characters."""
    width, height = game_map.width, game_map.height
    summary = MapSummary(width=width, height=height)
    allowed = {tile.value for tile in allowed_tiles(bonus)}
    for (x, y), char in game_map.positions():
        on_border = y in (0, height - 1) or x in (0, width - 1)
        if on_border and char != Tile.WALL.value:
            raise MapError(
                "Invalid Map." if bonus else "Map is not surrounded by walls."
            )
        if char == Tile.PLAYER.value:
            summary.players += 1
            summary.player = (x, y)
        elif char == Tile.EXIT.value:
            summary.exits += 1
        elif char == Tile.COINS.value:
            summary.coins += 1
        elif char not in allowed:
            raise MapError(
                "Invalid character in map"
                if bonus
                else "Invalid character in map."
            )
        elif char == Tile.STAT_ENEMY.value:
            summary.static_enemies += 1
        elif char == Tile.WANDER_ENEMY.value:
            summary.wandering_enemies += 1
    if summary.players != 1:
        raise MapError("Map must contain exactly one starting location ('P')")
    if summary.exits != 1:
        raise MapError("Map must contain exactly one exit ('E')")
    if summary.coins < 1:
        raise MapError("Map must contain at least one collectible ('C')")
    return summary


def _fill_count(
    game_map: GameMap, start: tuple[int, int], blocked: set[str], target: str
) -> int:
    """Count cells holding target that are reachable from start."""
    seen: set[tuple[int, int]] = set()
    stack = [start]
    found = 0
    while stack:
        pos = stack.pop()
        if pos in seen or pos not in game_map:
            continue
        char = game_map[pos]
        if char in blocked:
            continue
        seen.add(pos)
        if char == target:
            found += 1
        x, y = pos
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return found


def reachable_counts(
    game_map: GameMap, start: tuple[int, int], bonus: bool = False
) -> tuple[int, int]:
    """Return (coins, exits) reachable from start.

    Coins are searched without walking through the exit; static enemies
    block both searches in the bonus game.
    """
    blocked = {Tile.WALL.value}
    if bonus:
        blocked.add(Tile.STAT_ENEMY.value)
    coins = _fill_count(
        game_map, start, blocked | {Tile.EXIT.value}, Tile.COINS.value
    )
    exits = _fill_count(game_map, start, blocked, Tile.EXIT.value)
    return coins, exits


def check_display_size(game_map: GameMap) -> None:
    """Raise MapError if the map would not fit on the display."""
    if not (
        WIN_W >= game_map.width * IMG_WIDTH
        and WIN_H >= game_map.height * IMG_HEIGHT
    ):
        raise MapError("The map is too large for your display.")


def validate_map(game_map: GameMap, bonus: bool = False) -> MapSummary:
    """Run every check on the map and return its summary."""
    check_rectangular(game_map)
    summary = count_elements(game_map, bonus)
    if bonus:
        check_display_size(game_map)
    assert summary.player is not None
    coins, exits = reachable_counts(game_map.copy(), summary.player, bonus)
    if coins != summary.coins or exits != summary.exits:
        raise MapError(
            "All of coins or exit can't accessible."
            if bonus
            else "Pathfinding failed: Exit or all collectibles are not reachable!"
        )
    return summary
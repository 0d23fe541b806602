"""Drawing the map with pygame, for the plain and the bonus game."""

from __future__ import annotations

import time
from collections.abc import Mapping
from pathlib import Path

import pygame

from dungeonrun.animation import (
    COIN_ANIMATION,
    DEFAULT_SPEED,
    TOXIC_ANIMATION,
    WALL_ANIMATION,
    WALL_SPEED,
    WANDER_LEFT_ANIMATION,
    WANDER_RIGHT_ANIMATION,
    Animation,
    player_animation_paths,
)
from dungeonrun.maps import GameMap, MapError
from dungeonrun.tiles import (
    COIN_SPRITE,
    EXIT_CLOSED_SPRITE,
    EXIT_OPEN_SPRITE,
    FLOOR_SPRITE,
    IMG_HEIGHT,
    IMG_WIDTH,
    PLAYER_SPRITE,
    WALL_SPRITE,
    Direction,
    Key,
    Tile,
)

PLAIN_SPRITE_ERROR = "Couldn't load a sprite. Check assets/sprites paths."
BONUS_SPRITE_ERROR = "Couldn't find a sprite. Does it exist?"
STATUS_COLOUR = (255, 255, 255)
STATUS_FONT_SIZE = 16

_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_q: Key.Q,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESC,
}


def pygame_key_to_code(key: int) -> Key | None:
    """The game's key code for a pygame key, or None if the game ignores it."""
    return _KEYS.get(key)


def window_size(game_map: GameMap, bonus: bool = False) -> tuple[int, int]:
    """Pixel size of the window; the bonus game adds two rows for the status bar."""
    rows = game_map.height + (2 if bonus else 0)
    return game_map.width * IMG_WIDTH, rows * IMG_HEIGHT


def load_image(path: str | Path) -> pygame.Surface:
    """Load an image file, raising MapError if it cannot be read."""
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise MapError(PLAIN_SPRITE_ERROR) from exc


class _SpriteSource:
    """Looks sprites up in a directory or in a mapping of path to surface."""

    def __init__(self, assets, error: str) -> None:
        self._assets = assets
        self._error = error
        self._cache: dict[str, pygame.Surface] = {}

    def __call__(self, path: str) -> pygame.Surface:
        if path not in self._cache:
            self._cache[path] = self._load(path)
        return self._cache[path]

    def _load(self, path: str) -> pygame.Surface:
        if isinstance(self._assets, Mapping):
            try:
                return self._assets[path]
            except KeyError:
                raise MapError(self._error) from None
        try:
            return load_image(Path(self._assets) / path)
        except MapError as exc:
            raise MapError(self._error) from exc


def _cell(x: int, y: int) -> tuple[int, int]:
    return x * IMG_WIDTH, y * IMG_HEIGHT


class Renderer:
    """Draws the plain game onto an off-screen surface."""

    def __init__(self, game, assets) -> None:
        self.game = game
        sprite = _SpriteSource(assets, PLAIN_SPRITE_ERROR)
        self._images = {
            Tile.WALL.value: sprite(WALL_SPRITE),
            Tile.FLOOR.value: sprite(FLOOR_SPRITE),
            Tile.COINS.value: sprite(COIN_SPRITE),
            Tile.PLAYER.value: sprite(PLAYER_SPRITE),
        }
        self.exit_closed = sprite(EXIT_CLOSED_SPRITE)
        self.exit_open = sprite(EXIT_OPEN_SPRITE)
        self.surface = pygame.Surface(window_size(game.map, False))

    def _tile_image(self, char: str) -> pygame.Surface | None:
        if char == Tile.EXIT.value:
            return self.exit_open if self.game.coins == 0 else self.exit_closed
        return self._images.get(char)

    def draw(self) -> pygame.Surface:
        """Draw every tile and return the surface."""
        for (x, y), char in self.game.map.positions():
            image = self._tile_image(char)
            if image is not None:
                self.surface.blit(image, _cell(x, y))
        return self.surface


class BonusRenderer:
    """Draws the bonus game, with animations and a movement counter."""

    def __init__(self, game, assets) -> None:
        self.game = game
        sprite = _SpriteSource(assets, BONUS_SPRITE_ERROR)

        def animate(paths, speed: float = DEFAULT_SPEED) -> Animation:
            return Animation([sprite(path) for path in paths], speed)

        self.floor = sprite(FLOOR_SPRITE)
        self.exit_open = sprite(EXIT_OPEN_SPRITE)
        self.exit_closed = sprite(EXIT_CLOSED_SPRITE)
        self.wall = animate(WALL_ANIMATION, WALL_SPEED)
        self.coins = animate(COIN_ANIMATION)
        self.toxic = animate(TOXIC_ANIMATION)
        self.enemy_left = animate(WANDER_LEFT_ANIMATION)
        self.enemy_right = animate(WANDER_RIGHT_ANIMATION)
        self.players = {
            direction: animate(player_animation_paths(direction))
            for direction in (
                Direction.FRONT,
                Direction.BACK,
                Direction.LEFT,
                Direction.RIGHT,
            )
        }
        self.surface = pygame.Surface(window_size(game.map, True))
        self._font: pygame.font.Font | None = None

    def _enemy_image(self, now: float) -> pygame.Surface | None:
        if not self.game.enemies:
            return None
        direction = self.game.enemies[0].direction
        if direction in (Direction.LEFT, Direction.BACK):
            return self.enemy_left.frame(now)
        if direction in (Direction.RIGHT, Direction.FRONT):
            return self.enemy_right.frame(now)
        return None

    def _tile_image(self, char: str, now: float) -> pygame.Surface | None:
        if char == Tile.WALL.value:
            return self.wall.frame(now)
        if char == Tile.FLOOR.value:
            return self.floor
        if char == Tile.COINS.value:
            return self.coins.frame(now)
        if char == Tile.WANDER_ENEMY.value:
            return self._enemy_image(now)
        if char == Tile.STAT_ENEMY.value:
            return self.toxic.frame(now)
        if char == Tile.PLAYER.value:
            animation = self.players.get(self.game.direction)
            return animation.frame(now) if animation is not None else None
        if char == Tile.EXIT.value:
            return self.exit_open if self.game.coins == 0 else self.exit_closed
        return None

    def _status_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, STATUS_FONT_SIZE)
        return self._font

    def _draw_status(self) -> None:
        game_map = self.game.map
        for row in (game_map.height, game_map.height + 1):
            for col in range(game_map.width):
                self.surface.blit(self.floor, _cell(col, row))
        font = self._status_font()
        x = IMG_WIDTH
        baseline = (game_map.height + 1) * IMG_HEIGHT
        top = baseline - font.get_ascent()
        self.surface.blit(
            font.render("Movements: ", True, STATUS_COLOUR), (x, top)
        )
        self.surface.blit(
            font.render(str(self.game.movements), True, STATUS_COLOUR),
            (x + 2 * IMG_WIDTH, top),
        )

    def draw(self, now: float | None = None) -> pygame.Surface:
        """Move the enemies, draw the map and status bar, return the surface."""
        current = time.time() if now is None else now
        self.game.step_enemies(current)
        for (x, y), char in self.game.map.positions():
            image = self._tile_image(char, current)
            if image is not None:
                self.surface.blit(image, _cell(x, y))
        self._draw_status()
        return self.surface
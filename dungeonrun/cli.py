"""Command-line entry points: validate a map, open a window and play."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

import pygame

from dungeonrun.game import BonusGame, Game, Outcome
from dungeonrun.maps import MapError, check_arguments, load_map
from dungeonrun.messages import (
    bonus_error_text,
    bonus_win_banner,
    error_banner,
    game_over_banner,
    win_banner,
)
from dungeonrun.render import (
    BonusRenderer,
    Renderer,
    pygame_key_to_code,
    window_size,
)
from dungeonrun.tiles import CYAN, GREEN, RESET, YELLOW
from dungeonrun.validate import validate_map

ASSETS_DIR = "."
FRAME_RATE = 60
WINDOW_TITLE = "so_long"


def prepare(args: Sequence[str], bonus: bool = False) -> Game:
    """Check the arguments, load and validate the map, and build the game."""
    if not bonus:
        print(f"{CYAN}Initializing so_long...\n{RESET}", end="")
    path = check_arguments(args, bonus)
    if not bonus:
        print(f"{YELLOW}Parsing map: {path}\n{RESET}", end="")
    game_map = load_map(path)
    summary = validate_map(game_map, bonus)
    if bonus:
        print(f"{GREEN}Map validation passed!\n{RESET}", end="")
        print(f"{GREEN}Passed from flood fill\n{RESET}", end="")
        return BonusGame(game_map, summary)
    print(f"{GREEN}Map validation successful!\n{RESET}", end="")
    return Game(game_map, summary)


def _open_window(size: tuple[int, int], bonus: bool) -> pygame.Surface:
    try:
        pygame.init()
        screen = pygame.display.set_mode(size)
    except pygame.error as exc:
        raise MapError(
            "Couldn't find mlx pointer. Try it using a VNC."
            if bonus
            else "Couldn't find mlx pointer."
        ) from exc
    pygame.display.set_caption(WINDOW_TITLE)
    return screen


def _print_movements(movements: int) -> None:
    print(f"{CYAN}Movements: {YELLOW}{movements}\n{RESET}", end="")


def _play(game: Game) -> bool:
    """Run the plain game until it ends; True if the window was closed."""
    screen = _open_window(window_size(game.map, False), False)
    renderer = Renderer(game, ASSETS_DIR)
    print(f"{GREEN}Graphics initialized. Enjoy the game!\n{RESET}", end="")
    clock = pygame.time.Clock()
    while game.outcome is Outcome.PLAYING:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return True
            if event.type != pygame.KEYDOWN:
                continue
            code = pygame_key_to_code(event.key)
            if code is None:
                continue
            before = game.movements
            game.handle_key(code)
            if game.movements != before:
                _print_movements(game.movements)
            if game.outcome is not Outcome.PLAYING:
                break
        screen.blit(renderer.draw(), (0, 0))
        pygame.display.flip()
        clock.tick(FRAME_RATE)
    return False


def _play_bonus(game: BonusGame) -> bool:
    """Run the bonus game until it ends; True if the window was closed."""
    screen = _open_window(window_size(game.map, True), True)
    renderer = BonusRenderer(game, ASSETS_DIR)
    print(f"{GREEN}ctx initialization successful!\n{RESET}", end="")
    clock = pygame.time.Clock()
    while game.outcome is Outcome.PLAYING:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return True
            if event.type == pygame.KEYDOWN:
                code = pygame_key_to_code(event.key)
                if code is not None:
                    game.handle_key(code)
                if game.outcome is not Outcome.PLAYING:
                    break
        if game.outcome is not Outcome.PLAYING:
            break
        screen.blit(renderer.draw(time.time()), (0, 0))
        pygame.display.flip()
        clock.tick(FRAME_RATE)
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Play the plain game with the map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        game = prepare(args, bonus=False)
        _play(game)
    except MapError as exc:
        print(error_banner(str(exc)), end="")
        return 1
    finally:
        pygame.quit()
    if game.outcome is Outcome.WON:
        _print_movements(game.movements)
        print(f"{GREEN}Congratulations! You won!\n{RESET}", end="")
    print(win_banner(game.movements), end="")
    return 0


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Play the bonus game with the map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        game = prepare(args, bonus=True)
        _play_bonus(game)
    except MapError as exc:
        print(bonus_error_text(str(exc)), end="")
        return 1
    finally:
        pygame.quit()
    if game.outcome is Outcome.WON:
        print(bonus_win_banner(), end="")
    elif game.outcome is Outcome.LOST:
        print(game_over_banner(), end="")
    return 0
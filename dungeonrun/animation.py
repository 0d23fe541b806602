"""Looping sprite animations driven by elapsed time."""

from __future__ import annotations

from collections.abc import Sequence

from dungeonrun.tiles import (
    COIN_SPRITES,
    DELAY,
    PLAYER_BACK_SPRITES,
    PLAYER_FRONT_SPRITES,
    PLAYER_LEFT_SPRITES,
    PLAYER_RIGHT_SPRITES,
    TOXIC_SPRITES,
    WALL_SPRITES,
    WANDER_LEFT_SPRITES,
    WANDER_RIGHT_SPRITES,
    Direction,
)

DEFAULT_SPEED = 2000.0
WALL_SPEED = 1000.0

# Each animation starts with the sprite loaded first, then the full cycle.
COIN_ANIMATION = (COIN_SPRITES[0],) + COIN_SPRITES
WALL_ANIMATION = (WALL_SPRITES[0],) + WALL_SPRITES
TOXIC_ANIMATION = (TOXIC_SPRITES[0],) + TOXIC_SPRITES
WANDER_LEFT_ANIMATION = (WANDER_LEFT_SPRITES[0],) + WANDER_LEFT_SPRITES
WANDER_RIGHT_ANIMATION = (WANDER_RIGHT_SPRITES[0],) + WANDER_RIGHT_SPRITES

_PLAYER_ANIMATIONS = {
    Direction.FRONT: (PLAYER_FRONT_SPRITES[0],) + PLAYER_FRONT_SPRITES,
    Direction.LEFT: (PLAYER_LEFT_SPRITES[1],) + PLAYER_LEFT_SPRITES,
    Direction.RIGHT: (PLAYER_RIGHT_SPRITES[2],) + PLAYER_RIGHT_SPRITES,
    Direction.BACK: (PLAYER_BACK_SPRITES[3],) + PLAYER_BACK_SPRITES,
}


def player_animation_paths(direction: Direction) -> tuple[str, ...]:
    """Sprite paths of the player facing this way; empty for other facings."""
    return _PLAYER_ANIMATIONS.get(direction, ())


class Animation:
    """Cycles through frames, advancing once scaled elapsed time reaches DELAY."""

    def __init__(self, frames: Sequence, speed: float = DEFAULT_SPEED) -> None:
        self.frames = list(frames)
        if not self.frames:
            raise ValueError("an animation needs at least one frame")
        self.speed = speed
        self.index = 0
        self.last_time = 0.0

    def frame(self, now: float):
        """The frame to show at time now (seconds)."""
        if (now - self.last_time) * self.speed >= DELAY:
            self.index = (self.index + 1) % len(self.frames)
            self.last_time = now
        return self.frames[self.index]
"""Reading map files and checking the command line."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from dungeonrun.tiles import Tile


class MapError(Exception):
    """Raised when the command line or a map file cannot be used."""


@dataclass
class GameMap:
    """A grid of map characters, addressed by (x, y)."""

    grid: list[list[str]] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> GameMap:
        return cls([list(line) for line in lines])

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def lines(self) -> list[str]:
        return ["".join(row) for row in self.grid]

    def __contains__(self, pos: object) -> bool:
        try:
            x, y = pos  # type: ignore[misc]
        except (TypeError, ValueError):
            return False
        return 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y])

    def __getitem__(self, pos: tuple[int, int]) -> str:
        if pos not in self:
            raise IndexError(f"position {pos} is outside the map")
        x, y = pos
        return self.grid[y][x]

    def __setitem__(self, pos: tuple[int, int], tile: Tile | str) -> None:
        if pos not in self:
            raise IndexError(f"position {pos} is outside the map")
        char = tile.value if isinstance(tile, Tile) else str(tile)
        if len(char) != 1:
            raise ValueError(f"a map cell holds one character, not {char!r}")
        x, y = pos
        self.grid[y][x] = char

    def copy(self) -> GameMap:
        """An independent copy of the grid."""
        return GameMap([list(row) for row in self.grid])

    def positions(self) -> Iterator[tuple[tuple[int, int], str]]:
        """Yield ((x, y), character) for every cell, row by row."""
        for y, row in enumerate(self.grid):
            for x, char in enumerate(row):
                yield (x, y), char


def check_arguments(args: Sequence[str], bonus: bool = False) -> str:
    """Check the arguments after the program name and return the map path."""
    args = list(args)
    if not args:
        raise MapError("Please Enter a map!")
    if len(args) > 1:
        raise MapError(
            "You entered alot of argument."
            if bonus
            else "You entered too many arguments."
        )
    path = args[0]
    if bonus:
        if not (len(path) >= 4 and path.endswith(".ber")):
            raise MapError("Map file is not valid. You can enter just .ber file.")
    elif len(path) < 5 or not path.endswith(".ber"):
        raise MapError("Map file is not valid. It must be a .ber file.")
    return path


def check_empty_lines(text: str) -> None:
    """Reject a map text with an empty line at its start, end or middle."""
    if not text:
        return
    if text[0] == "\n":
        raise MapError("Invalid map: empty line at the beginning.")
    if text[-1] == "\n":
        raise MapError("Invalid map: empty line at the end.")
    if "\n\n" in text:
        raise MapError("Invalid map: empty line in the middle.")


def parse_map(text: str) -> GameMap:
    """Turn the text of a map file into a GameMap."""
    check_empty_lines(text)
    lines = [line for line in text.split("\n") if line]
    if not lines:
        raise MapError("Map is empty!")
    return GameMap.from_lines(lines)


def load_map(path: str | Path) -> GameMap:
    """Read and parse a map file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError("The Map couldn't be opened. Does the Map exist?") from exc
    return parse_map(data.decode("latin-1"))
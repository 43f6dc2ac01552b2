"""Tile maps: loading, inspecting and validating a level."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from os import PathLike

from .reader import LineReader
from .strings import split_words

WALL = "1"
EMPTY = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"


class MapError(ValueError):
    """Raised when a map cannot be read or built."""


class GameMap:
    """A rectangular grid of one-character tiles, addressed as (x, y)."""

    def __init__(self, rows: Iterable[str]) -> None:
        grid = [list(row) for row in rows]
        if not grid:
            raise MapError("the map is empty")
        self._grid = grid

    @property
    def width(self) -> int:
        """Number of columns, taken from the first row."""
        return len(self._grid[0])

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self._grid)

    @property
    def rows(self) -> list[str]:
        """The rows of the map as strings."""
        return ["".join(row) for row in self._grid]

    def tile(self, x: int, y: int) -> str | None:
        """Return the tile at (x, y), or None outside the map."""
        if 0 <= y < len(self._grid) and 0 <= x < len(self._grid[y]):
            return self._grid[y][x]
        return None

    def set_tile(self, x: int, y: int, value: str) -> None:
        """Replace the tile at (x, y)."""
        if len(value) != 1:
            raise ValueError("a tile is a single character")
        if self.tile(x, y) is None:
            raise IndexError(f"no tile at ({x}, {y})")
        self._grid[y][x] = value

    def find_player(self) -> tuple[int, int] | None:
        """Return the position of the player; the last one found wins."""
        position = None
        for y, row in enumerate(self._grid):
            for x, char in enumerate(row):
                if char == PLAYER:
                    position = (x, y)
        return position

    def count(self, tile: str) -> int:
        """Count the tiles equal to ``tile``."""
        return sum(row.count(tile) for row in self._grid)

    def borders_closed(self) -> bool:
        """True when every tile on the outer edge is a wall."""
        width, height = self.width, self.height
        sides = all(
            self.tile(0, y) == WALL and self.tile(width - 1, y) == WALL
            for y in range(height)
        )
        ends = all(
            self.tile(x, 0) == WALL and self.tile(x, height - 1) == WALL
            for x in range(width)
        )
        return sides and ends

    def elements_valid(self) -> bool:
        """True with one player, at least one exit and at least one collectible."""
        counts = Counter(
            self.tile(x, y) for y in range(self.height) for x in range(self.width)
        )
        return counts[PLAYER] == 1 and counts[EXIT] > 0 and counts[COLLECTIBLE] > 0

    def exit_reachable(self) -> bool:
        """True when an exit can be reached from the player without crossing walls."""
        start = self.find_player()
        if start is None:
            return False
        visited: set[tuple[int, int]] = set()
        stack = [start]
        while stack:
            x, y = stack.pop()
            if (x, y) in visited or not 0 <= x < self.width:
                continue
            char = self.tile(x, y)
            if char is None or char == WALL:
                continue
            if char == EXIT:
                return True
            visited.add((x, y))
            stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
        return False

    def is_valid(self) -> bool:
        """True when the borders, the elements and the path to an exit are all right."""
        return self.borders_closed() and self.elements_valid() and self.exit_reachable()

    def render(self) -> str:
        """Return the map as text, one line per row."""
        return "\n".join(self.rows)

    def __str__(self) -> str:
        return self.render()


def parse_map(text: str) -> GameMap:
    """Build a map from text; blank lines are ignored."""
    rows = split_words(text, "\n")
    if not rows:
        raise MapError("the map is empty")
    return GameMap(rows)


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read a map file."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = "".join(LineReader(handle))
    except OSError as exc:
        raise MapError("Failed to open the map file") from exc
    return parse_map(text)
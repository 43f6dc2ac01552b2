"""Game state and player movement."""

from __future__ import annotations

from enum import Enum

from .gamemap import COLLECTIBLE, EMPTY, EXIT, PLAYER, WALL, GameMap, MapError
from .printf import printf

KEY_ESCAPE = 65307
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100


class Direction(Enum):
    """A step on the grid, as (dx, dy)."""

    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_KEYS = {
    KEY_W: Direction.UP,
    KEY_A: Direction.LEFT,
    KEY_S: Direction.DOWN,
    KEY_D: Direction.RIGHT,
}


def key_to_direction(keycode: int) -> Direction | None:
    """Return the direction bound to ``keycode``, or None."""
    return _KEYS.get(keycode)


class Game:
    """A level being played: the map, the player and the counters."""

    def __init__(self, game_map: GameMap) -> None:
        position = game_map.find_player()
        if position is None:
            raise MapError("the map has no player")
        self.map = game_map
        self.x, self.y = position
        self.move_count = 0
        self.collected = 0
        self.collectible_max = game_map.count(COLLECTIBLE)
        self.running = True
        self.won = False

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def _enter(self, tile: str) -> bool:
        """Decide whether the player may step onto ``tile``, updating counters."""
        printf("collectible count : %i\n", self.collected)
        if tile == WALL:
            return False
        if tile == COLLECTIBLE:
            self.collected += 1
        if tile == EXIT:
            if self.collected != self.collectible_max:
                return False
            printf("Congratulations, you finished the level!\n")
            self.won = True
            self.running = False
        return True

    def move(self, direction: Direction) -> bool:
        """Try to move the player; return True if it stepped to a new square."""
        if not self.running:
            return False
        nx, ny = self.x + direction.dx, self.y + direction.dy
        target = self.map.tile(nx, ny)
        if target is None or target == WALL:
            return False
        if not self._enter(target):
            self.move_count += 1
            return False
        if self.won:
            return False
        self.map.set_tile(self.x, self.y, EMPTY)
        self.x, self.y = nx, ny
        self.map.set_tile(nx, ny, PLAYER)
        printf("Movement Count : %i\n", self.move_count)
        self.move_count += 1
        return True

    def handle_key(self, keycode: int) -> bool:
        """React to a key press; return whether the game keeps running."""
        if keycode == KEY_ESCAPE:
            self.running = False
            return False
        direction = key_to_direction(keycode)
        if direction is not None:
            self.move(direction)
        return self.running


__all__ = ["Direction", "Game", "key_to_direction", "EXIT"]
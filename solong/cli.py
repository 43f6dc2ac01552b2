"""Command line entry point: play a map file in the terminal."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from .game import KEY_ESCAPE, Game
from .gamemap import MapError, load_map
from .printf import printf

_QUIT_KEYS = {"q", "\x1b"}


def _keycodes(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for char in line.strip():
            yield KEY_ESCAPE if char in _QUIT_KEYS else ord(char.lower())


def _show(game: Game) -> None:
    printf("%s\n", game.map.render())


def main(argv: list[str] | None = None) -> int:
    """Load the map named on the command line and play it with w, a, s, d keys."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        printf("Error\nexpected exactly one map file\n")
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    if not game_map.is_valid():
        printf("Error\nInvalid map\n")
        return 1
    game = Game(game_map)
    _show(game)
    for keycode in _keycodes(sys.stdin):
        game.handle_key(keycode)
        if not game.running:
            break
        _show(game)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
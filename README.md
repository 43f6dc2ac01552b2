# solong

A small tile-based puzzle game played in the terminal. You walk a player
around a walled map, pick up every collectible, and then step onto the exit
to finish the level.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

Start the game with a map file:

```
solong path/to/level.ber
```

The map is checked before play begins. If the file cannot be read, or the
map is invalid, an error is printed and the command exits with status 1.

The map is printed as text, and the game then reads keys from standard
input one line at a time: type one or more keys and press Enter. Each key
is applied in turn and the map is printed again after it.

| Key          | Action     |
|--------------|------------|
| `w`          | move up    |
| `a`          | move left  |
| `s`          | move down  |
| `d`          | move right |
| `q` / Escape | quit       |

Keys are case-insensitive. The move counter and the number of collectibles
picked up are printed as you play. The exit only lets you through once
every collectible is taken; stepping onto it then prints a congratulation
and ends the game. The game also ends when standard input runs out.

## Map files

A map is a plain text file, one row per line (blank lines are ignored),
built from these tiles:

| Tile | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A map is valid when:

- its outer border is made entirely of walls;
- it has exactly one player, at least one exit and at least one collectible;
- an exit can be reached from the player's start without crossing walls.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from solong.gamemap import parse_map, load_map, MapError
from solong.game import Game, Direction, key_to_direction

game_map = parse_map("1111111\n1P0C0E1\n1111111\n")
print(game_map.width, game_map.height)      # 7 3
print(game_map.find_player())               # (1, 1)
print(game_map.count("C"))                  # 1
print(game_map.is_valid())                  # True
print(game_map.render())

game = Game(game_map)
game.handle_key(ord("d"))                   # step right; returns whether the game runs on
game.move(Direction.RIGHT)                  # the same, by direction
print(game.position, game.collected, game.move_count)
```

`GameMap` also exposes the individual checks — `borders_closed()`,
`elements_valid()` and `exit_reachable()` — as well as `tile(x, y)` and
`set_tile(x, y, value)` for reading and changing single cells, and `rows`
for the map as a list of strings. `load_map(path)` reads a map from disk and
raises `MapError` when the file cannot be opened or holds no rows.

A `Game` keeps `map`, `x`, `y` (and `position`), `move_count`,
`collected`, `collectible_max`, `running` and `won`. `key_to_direction`
maps the key codes of `w`, `a`, `s` and `d` to a `Direction`.

The package also carries the small helpers the game is built on:

- `solong.strings` — `split_words`, `atoi`, `itoa`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `count_occurrences`;
- `solong.reader` — `LineReader` and `read_lines`, for reading a text or
  binary stream one line at a time through a fixed-size buffer;
- `solong.printf` — `format_printf` and `printf`, supporting `%c`, `%s`,
  `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and `%%`, plus `hex_digit`,
  `decimal_length` and `hex_length`.

## What it does not do

There is no graphical window and no tile images: the map is drawn as text
in the terminal, and keys are read line by line from standard input rather
than as individual key presses.
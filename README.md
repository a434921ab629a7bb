# solong

A small top-down puzzle game. You walk a player around a walled map,
pick up every collectible and then step onto the exit. Every move is
counted and printed to the terminal as `Moves count: N`.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
solong path/to/level.ber
```

Run with anything other than exactly one argument, the command prints a
usage line and exits with status 1.

Controls (acted on when the key is released):

- `W` / `A` / `S` / `D`: move up, left, down, right
- `Esc` or closing the window: quit

Walls block movement, and so does the exit until every collectible has
been picked up. Stepping onto the exit with nothing left to collect ends
the game.

Textures are read from the `./textures` directory, relative to where the
command is run: `background.xpm`, `wall.xpm`, `item.xpm`, `player.xpm`
and `exit.xpm`. Each map cell is drawn at 64×64 pixels, so the window is
64 times the map's width and height.

## Map files

A map is a plain text file whose name ends in `.ber`. It uses these
characters:

| Char | Meaning      |
|------|--------------|
| `0`  | empty floor  |
| `1`  | wall         |
| `C`  | collectible  |
| `P`  | player spawn |
| `E`  | exit         |

A map is rejected unless all of the following hold:

- every line has the same length and there are no empty lines;
- the first and last lines are all walls and every line starts and ends
  with a wall;
- only the five characters above are used;
- it holds at least one collectible, exactly one spawn and exactly one exit;
- it is wider than it is tall;
- every collectible, and then the exit, can be reached from the spawn.

When a map is rejected, or a file or texture cannot be read, the command
writes `Error` and the reason to standard error (followed by a `Details:`
line when the system gave one) and exits with status 1.

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

## Using it as a library

```python
from solong.mapfile import load_map, MapError
from solong.game import Game, MoveResult

try:
    game_map = load_map("level.ber")
except MapError as exc:
    print(exc)
else:
    game = Game(game_map)
    result = game.move(1, 0)          # MoveResult.MOVED, BLOCKED or WON
    game.handle_key(100)              # the keycode for D
```

The modules:

- `solong.mapfile`: `load_map`, `parse_map`, `check_map_name`,
  `check_reachable`, the `GameMap` and `Tile` types and `MapError`.
- `solong.game`: `Game` and `MoveResult`; moving the player updates the
  map, the remaining item count and the move counter.
- `solong.display`: the pygame window (`run`, `render`, `load_textures`,
  `window_size`, `keycode_for`) and `main`, the `solong` command.
- `solong.xpm`: `parse_xpm` and `load_xpm` decode XPM images into an
  `XpmImage` of 0xRRGGBB values; `XpmError` on malformed input.
- `solong.colors`: `lookup_color` resolves X11 colour names
  (case-insensitively) and `parse_color` reads XPM colour specifications.
- `solong.printf`: `render` and `printf`, a small formatter for the
  `%s %c %d %i %u %x %X %o %p %%` conversions.
- `solong.chars`, `solong.strings`, `solong.memory`: small character,
  string and byte-buffer helpers.

## What it does not do

Textures must be XPM files; no other image format is read. The window
shows only the map tiles: the move count goes to the terminal, and there
is no score screen, sound, level selection or saved progress.

## Running the tests

```
pip install .[test]
pytest
```
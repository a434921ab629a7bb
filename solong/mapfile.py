"""Loading and validating ``.ber`` map files."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Iterable, Iterator

TILE_SIZE = 64
MAP_FILE_EXTENSION = ".ber"
BUFFER_SIZE = 42

_VISITED = "X"


class MapError(Exception):
    """Raised when a map file is missing, malformed or unplayable."""


class Tile(str, Enum):
    """The characters a map is made of."""

    EMPTY = "0"
    WALL = "1"
    EXIT = "E"
    ITEM = "C"
    PLAYER = "P"


_VALID_CHARS = frozenset(tile.value for tile in Tile)


@dataclass
class GameMap:
    """A validated grid of tiles plus the state derived from it."""

    rows: list[list[str]]
    remaining_items: int = field(init=False)
    player_x: int | None = field(init=False, default=None)
    player_y: int | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        self.rows = [list(row) for row in self.rows]
        self.remaining_items = self.count(Tile.ITEM)
        position = self.find_player()
        if position is not None:
            self.player_x, self.player_y = position

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def find_player(self) -> tuple[int, int] | None:
        """Return the (x, y) of the first player tile, or None."""
        for y, row in enumerate(self.rows):
            for x, char in enumerate(row):
                if char == Tile.PLAYER.value:
                    return x, y
        return None

    def count(self, tile: Tile | str) -> int:
        """Count how many cells hold the given tile."""
        value = tile.value if isinstance(tile, Tile) else tile
        return sum(row.count(value) for row in self.rows)

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile at column x, row y."""
        if not (0 <= y < self.height and 0 <= x < len(self.rows[y])):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return Tile(self.rows[y][x])


def next_lines(stream: IO[str]) -> Iterator[str]:
    """Yield lines from a stream, each keeping its trailing newline."""
    pending = ""
    while True:
        chunk = stream.read(BUFFER_SIZE)
        if not chunk:
            break
        pending += chunk
        while "\n" in pending:
            line, _, pending = pending.partition("\n")
            yield line + "\n"
    if pending:
        yield pending


def check_map_name(path: str | os.PathLike[str]) -> None:
    """Reject paths that do not end with the map file extension."""
    if not os.fspath(path).endswith(MAP_FILE_EXTENSION):
        raise MapError("Map file doesn't terminate by .ber")


def _check_wall(line: str) -> None:
    if not line.endswith("\n") or any(c != Tile.WALL.value for c in line[:-1]):
        raise MapError("(Map) First/last line is not a wall.")


def _check_line(line: str, line_len: int) -> None:
    if line.startswith("\n"):
        raise MapError("(Map) Empty lines.")
    if len(line) != line_len:
        raise MapError("(Map) Line length mismatch.")
    if line[0] != Tile.WALL.value or line[line_len - 2] != Tile.WALL.value:
        raise MapError("(Map) Line is not surrounded by walls.")
    if any(c not in _VALID_CHARS for c in line[: line_len - 1]):
        raise MapError("(Map) Invalid map chars.")


def _check_content(content: str, line_count: int, line_len: int) -> None:
    if content.count(Tile.ITEM.value) == 0:
        raise MapError("(Map) The map must have at least one item.")
    if content.count(Tile.PLAYER.value) != 1:
        raise MapError("(Map) The map must have one player spawn.")
    if content.count(Tile.EXIT.value) != 1:
        raise MapError("(Map) The map must have one exit.")
    if line_count >= line_len - 1:
        raise MapError("(Map) The map must be rectangular.")


def _build_map(lines: Iterable[str]) -> GameMap:
    it = iter(lines)
    first = next(it, None)
    if first is None:
        raise MapError("(Map) Empty map.")
    line_len = len(first)
    _check_wall(first)
    collected = [first]
    for line in it:
        _check_line(line, line_len)
        collected.append(line)
    _check_wall(collected[-1])
    _check_content("".join(collected), len(collected), line_len)
    return GameMap([line[:-1] for line in collected])


def parse_map(text: str) -> GameMap:
    """Validate the text of a map file and build a GameMap from it."""
    return _build_map(next_lines(io.StringIO(text)))


def check_reachable(game_map: GameMap) -> list[str]:
    """Flood-fill from the spawn; raise if an item or the exit is unreachable.

    Returns the filled copy of the grid, visited cells marked with ``X``.
    """
    position = game_map.find_player()
    if position is None:
        raise MapError("(Map) Spawn point not found.")
    grid = [list(row) for row in game_map.rows]
    height = len(grid)
    items_left = sum(row.count(Tile.ITEM.value) for row in grid)

    stack = [position]
    while stack:
        x, y = stack.pop()
        if y < 0 or x < 0 or y >= height or x >= len(grid[y]):
            continue
        cell = grid[y][x]
        if cell in (Tile.WALL.value, _VISITED):
            continue
        if cell == Tile.EXIT.value and items_left:
            grid[y][x] = Tile.EMPTY.value
            continue
        if cell == Tile.ITEM.value:
            items_left -= 1
        grid[y][x] = _VISITED
        # Pushed in reverse so that right, left, down, up are explored in order.
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))

    filled = ["".join(row) for row in grid]
    if any(Tile.ITEM.value in row for row in filled):
        raise MapError("(Map) Map not reachable.")
    if any(Tile.EXIT.value in row for row in filled):
        raise MapError("(Map) Exit not reachable.")
    return filled


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read, validate and check a map file, returning the playable map."""
    check_map_name(path)
    try:
        handle = open(path, encoding="utf-8", newline="")
    except OSError as exc:
        raise MapError("Can't open the file.") from exc
    with handle:
        game_map = _build_map(next_lines(handle))
    check_reachable(game_map)
    return game_map
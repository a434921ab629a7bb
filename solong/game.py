"""Game state and the effect of each key press."""

from __future__ import annotations

from enum import Enum
from typing import IO

from .mapfile import GameMap, MapError, Tile
from .printf import printf

KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_ESCAPE = 65307

_DIRECTIONS = {
    KEY_W: (0, -1),
    KEY_A: (-1, 0),
    KEY_S: (0, 1),
    KEY_D: (1, 0),
}


class MoveResult(Enum):
    """What a key press did."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    QUIT = "quit"
    IGNORED = "ignored"


class Game:
    """A running game on a validated map; moving the player mutates the map."""

    def __init__(self, game_map: GameMap, out: IO[str] | None = None) -> None:
        if game_map.player_x is None or game_map.player_y is None:
            raise MapError("(Map) Spawn point not found.")
        self.map = game_map
        self.out = out
        self.moves_count = 0
        self.finished = False

    def move(self, dx: int, dy: int) -> MoveResult:
        """Try to move the player by (dx, dy)."""
        if self.finished:
            return MoveResult.IGNORED
        x, y = self.map.player_x, self.map.player_y
        tx, ty = x + dx, y + dy
        target = self.map.tile_at(tx, ty)
        if target is Tile.WALL:
            return MoveResult.BLOCKED
        if target is Tile.EXIT:
            if self.map.remaining_items:
                return MoveResult.BLOCKED
            self.finished = True
            return MoveResult.WON
        if target is Tile.ITEM:
            self.map.remaining_items -= 1
        self.map.rows[y][x] = Tile.EMPTY.value
        self.map.rows[ty][tx] = Tile.PLAYER.value
        self.map.player_x, self.map.player_y = tx, ty
        self.moves_count += 1
        printf("Moves count: %i\n", self.moves_count, out=self.out)
        return MoveResult.MOVED

    def handle_key(self, keycode: int) -> MoveResult:
        """Apply a key: W/A/S/D move, Escape quits, anything else is ignored."""
        if keycode == KEY_ESCAPE:
            self.finished = True
            return MoveResult.QUIT
        direction = _DIRECTIONS.get(keycode)
        if direction is None:
            return MoveResult.IGNORED
        return self.move(*direction)

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the current tile at column x, row y."""
        return self.map.tile_at(x, y)
"""The game window: drawing the map and feeding key presses to the game."""

from __future__ import annotations

import os
import sys
from typing import Mapping, Sequence

import pygame

from .game import KEY_A, KEY_D, KEY_ESCAPE, KEY_S, KEY_W, Game
from .mapfile import TILE_SIZE, GameMap, MapError, Tile, load_map
from .xpm import TRANSPARENT, XpmError, XpmImage, load_xpm

WINDOW_TITLE = "not_so_long"
DEFAULT_TEXTURE_DIR = "./textures"
USAGE = "Usage: solong <map_file.ber>"

TEXTURE_FILES = {
    Tile.EMPTY: "background.xpm",
    Tile.WALL: "wall.xpm",
    Tile.ITEM: "item.xpm",
    Tile.PLAYER: "player.xpm",
    Tile.EXIT: "exit.xpm",
}

_KEYSYMS = {
    pygame.K_w: KEY_W,
    pygame.K_a: KEY_A,
    pygame.K_s: KEY_S,
    pygame.K_d: KEY_D,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


def window_size(game_map: GameMap) -> tuple[int, int]:
    """Return the window size in pixels for a map."""
    return game_map.width * TILE_SIZE, game_map.height * TILE_SIZE


def keycode_for(key: int) -> int | None:
    """Map a pygame key to the keycode the game understands, or None."""
    return _KEYSYMS.get(key)


def _to_surface(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            if value == TRANSPARENT:
                color = (0, 0, 0, 0)
            else:
                color = ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255)
            surface.set_at((x, y), color)
    return surface


def load_textures(directory: str | os.PathLike[str]) -> dict[Tile, pygame.Surface]:
    """Load the five tile textures from a directory of XPM files."""
    textures = {}
    for tile, filename in TEXTURE_FILES.items():
        try:
            image = load_xpm(os.path.join(directory, filename))
        except XpmError as exc:
            raise XpmError("Can't turn xpm to image.") from exc
        textures[tile] = _to_surface(image)
    return textures


def render(
    surface: pygame.Surface, game: Game, textures: Mapping[Tile, pygame.Surface]
) -> None:
    """Clear the surface and draw every tile of the map onto it."""
    surface.fill((0, 0, 0))
    for y, row in enumerate(game.map.rows):
        for x, char in enumerate(row):
            surface.blit(textures[Tile(char)], (x * TILE_SIZE, y * TILE_SIZE))


def run(game_map: GameMap, texture_dir: str | os.PathLike[str] = DEFAULT_TEXTURE_DIR) -> Game:
    """Open the window and play until the player wins, quits or closes it."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(game_map))
        pygame.display.set_caption(WINDOW_TITLE)
        textures = load_textures(texture_dir)
        game = Game(game_map)
        render(screen, game, textures)
        pygame.display.flip()
        while not game.finished:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type != pygame.KEYUP:
                continue
            keycode = keycode_for(event.key)
            if keycode is not None:
                game.handle_key(keycode)
            if game.finished:
                break
            render(screen, game, textures)
            pygame.display.flip()
        return game
    finally:
        pygame.quit()


def _report(exc: BaseException) -> None:
    print("Error", file=sys.stderr)
    print(exc, file=sys.stderr)
    cause = exc.__cause__
    if isinstance(cause, OSError) and cause.strerror:
        print(f"Details: {cause.strerror}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return 1
    try:
        game_map = load_map(args[0])
        run(game_map, DEFAULT_TEXTURE_DIR)
    except (MapError, XpmError, pygame.error) as exc:
        _report(exc)
        return 1
    return 0
from unittest import mock

import pygame
import pytest

from solong.display import (
    TEXTURE_FILES,
    USAGE,
    keycode_for,
    load_textures,
    main,
    render,
    run,
    window_size,
)
from solong.game import KEY_A, KEY_D, KEY_ESCAPE, KEY_S, KEY_W, Game
from solong.mapfile import TILE_SIZE, Tile, parse_map
from solong.xpm import XpmError

MAP_TEXT = "11111\n1PCE1\n11111\n"

COLOURS = {
    Tile.EMPTY: (10, 20, 30),
    Tile.WALL: (200, 0, 0),
    Tile.ITEM: (0, 200, 0),
    Tile.PLAYER: (0, 0, 200),
    Tile.EXIT: (90, 90, 0),
}


def _xpm(rgb, size=2):
    spec = "#{:02X}{:02X}{:02X}".format(*rgb)
    rows = ",\n".join(f'"{"." * size}"' for _ in range(size))
    return f'static char *t[] = {{\n"{size} {size} 1 1",\n". c {spec}",\n{rows}\n}};\n'


def _texture_dir(tmp_path):
    for tile, name in TEXTURE_FILES.items():
        (tmp_path / name).write_text(_xpm(COLOURS[tile]))
    return tmp_path


def _solid_textures():
    textures = {}
    for tile, rgb in COLOURS.items():
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surface.fill(rgb)
        textures[tile] = surface
    return textures


def test_window_size():
    assert window_size(parse_map(MAP_TEXT)) == (5 * TILE_SIZE, 3 * TILE_SIZE)


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_w, KEY_W),
        (pygame.K_a, KEY_A),
        (pygame.K_s, KEY_S),
        (pygame.K_d, KEY_D),
        (pygame.K_ESCAPE, KEY_ESCAPE),
    ],
)
def test_keycode_for(key, expected):
    assert keycode_for(key) == expected


def test_keycode_for_unknown_key():
    assert keycode_for(pygame.K_q) is None


def test_load_textures_colours(tmp_path):
    textures = load_textures(_texture_dir(tmp_path))
    assert set(textures) == set(TEXTURE_FILES)
    for tile, rgb in COLOURS.items():
        assert tuple(textures[tile].get_at((1, 1))) == (*rgb, 255)


def test_load_textures_transparent_pixel(tmp_path):
    _texture_dir(tmp_path)
    (tmp_path / TEXTURE_FILES[Tile.WALL]).write_text('"1 1 1 1",\n". c None",\n"."\n')
    textures = load_textures(tmp_path)
    assert textures[Tile.WALL].get_at((0, 0)).a == 0


def test_load_textures_missing(tmp_path):
    with pytest.raises(XpmError, match="Can't turn xpm to image."):
        load_textures(tmp_path)


def test_render_draws_each_tile(capsys):
    game_map = parse_map(MAP_TEXT)
    game = Game(game_map)
    surface = pygame.Surface(window_size(game_map))
    render(surface, game, _solid_textures())
    for y, row in enumerate(game_map.rows):
        for x, char in enumerate(row):
            pixel = surface.get_at((x * TILE_SIZE, y * TILE_SIZE))
            assert tuple(pixel)[:3] == COLOURS[Tile(char)]


def test_render_follows_player(capsys):
    game_map = parse_map(MAP_TEXT)
    game = Game(game_map)
    surface = pygame.Surface(window_size(game_map))
    game.move(1, 0)
    render(surface, game, _solid_textures())
    assert tuple(surface.get_at((2 * TILE_SIZE, TILE_SIZE)))[:3] == COLOURS[Tile.PLAYER]
    assert tuple(surface.get_at((TILE_SIZE, TILE_SIZE)))[:3] == COLOURS[Tile.EMPTY]


def test_run_plays_to_the_exit(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    events = [
        pygame.event.Event(pygame.KEYUP, key=pygame.K_d),
        pygame.event.Event(pygame.KEYUP, key=pygame.K_d),
    ]
    with mock.patch("pygame.event.wait", side_effect=events):
        game = run(parse_map(MAP_TEXT), _texture_dir(tmp_path))
    assert game.finished
    assert game.moves_count == 1
    assert "Moves count: 1" in capsys.readouterr().out


def test_run_stops_on_window_close(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with mock.patch("pygame.event.wait", side_effect=[pygame.event.Event(pygame.QUIT)]):
        game = run(parse_map(MAP_TEXT), _texture_dir(tmp_path))
    assert game.moves_count == 0
    assert not game.finished


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == USAGE + "\n"


def test_main_bad_extension(capsys):
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().err == "Error\nMap file doesn't terminate by .ber\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error\nCan't open the file.\n")
    assert "Details: " in err


def test_main_empty_map(tmp_path, capsys):
    path = tmp_path / "empty.ber"
    path.write_text("")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == "Error\n(Map) Empty map.\n"
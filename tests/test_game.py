import io

import pytest

from solong.game import KEY_A, KEY_D, KEY_ESCAPE, KEY_S, Game, MoveResult
from solong.mapfile import Tile, parse_map


def make_game(text):
    out = io.StringIO()
    return Game(parse_map(text), out=out), out


def test_walk_into_wall_is_blocked():
    game, out = make_game("11111\n1PCE1\n11111\n")
    assert game.move(-1, 0) is MoveResult.BLOCKED
    assert game.moves_count == 0
    assert out.getvalue() == ""


def test_collect_item_then_win():
    game, out = make_game("11111\n1PCE1\n11111\n")
    assert game.handle_key(KEY_D) is MoveResult.MOVED
    assert game.map.remaining_items == 0
    assert game.tile_at(2, 1) is Tile.PLAYER
    assert game.tile_at(1, 1) is Tile.EMPTY
    assert out.getvalue() == "Moves count: 1\n"
    assert game.handle_key(KEY_D) is MoveResult.WON
    assert game.finished
    assert game.moves_count == 1


def test_exit_blocked_while_items_remain():
    game, _ = make_game("111111\n1PEC01\n111111\n")
    assert game.move(1, 0) is MoveResult.BLOCKED
    assert game.tile_at(2, 1) is Tile.EXIT
    assert (game.map.player_x, game.map.player_y) == (1, 1)


def test_moves_are_counted():
    game, out = make_game("1111111\n1P0C0E1\n1000001\n1111111\n")
    game.handle_key(KEY_D)
    game.handle_key(KEY_S)
    game.handle_key(KEY_A)
    assert game.moves_count == 3
    assert out.getvalue().splitlines()[-1] == "Moves count: 3"


def test_escape_quits_and_stops_moves():
    game, _ = make_game("11111\n1PCE1\n11111\n")
    assert game.handle_key(KEY_ESCAPE) is MoveResult.QUIT
    assert game.move(1, 0) is MoveResult.IGNORED
    assert game.moves_count == 0


def test_unknown_key_ignored():
    game, _ = make_game("11111\n1PCE1\n11111\n")
    assert game.handle_key(ord("q")) is MoveResult.IGNORED
    assert game.tile_at(1, 1) is Tile.PLAYER


def test_tile_at_outside_map():
    game, _ = make_game("11111\n1PCE1\n11111\n")
    with pytest.raises(IndexError):
        game.tile_at(10, 10)
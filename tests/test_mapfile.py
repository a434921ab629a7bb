import io

import pytest

from solong.mapfile import (
    GameMap,
    MapError,
    Tile,
    check_map_name,
    check_reachable,
    load_map,
    next_lines,
    parse_map,
)

VALID = "1111111\n1PC0E01\n1111111\n"


def test_next_lines_keeps_newlines_and_tail():
    stream = io.StringIO("ab\ncd\nef")
    assert list(next_lines(stream)) == ["ab\n", "cd\n", "ef"]


def test_next_lines_handles_lines_longer_than_buffer():
    long_line = "1" * 100 + "\n"
    text = long_line + "x\n"
    assert list(next_lines(io.StringIO(text))) == [long_line, "x\n"]


def test_next_lines_empty_stream():
    assert list(next_lines(io.StringIO(""))) == []


def test_check_map_name_rejects_other_extension():
    with pytest.raises(MapError, match="doesn't terminate by .ber"):
        check_map_name("maps/level.txt")


def test_check_map_name_accepts_ber():
    assert check_map_name("maps/level.ber") is None


def test_parse_valid_map_dimensions_and_state():
    game_map = parse_map(VALID)
    assert game_map.height == 3
    assert game_map.width == len("1PC0E01")
    assert game_map.remaining_items == game_map.count(Tile.ITEM)
    assert game_map.find_player() == (1, 1)
    assert (game_map.player_x, game_map.player_y) == (1, 1)
    assert game_map.tile_at(1, 1) is Tile.PLAYER
    assert game_map.tile_at(4, 1) is Tile.EXIT
    assert game_map.count(Tile.EXIT) == 1


def test_tile_at_out_of_bounds():
    game_map = parse_map(VALID)
    with pytest.raises(IndexError):
        game_map.tile_at(game_map.width, 0)
    with pytest.raises(IndexError):
        game_map.tile_at(-1, 0)


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "Empty map"),
        ("1101111\n1PC0E01\n1111111\n", "First/last line is not a wall"),
        ("1111111\n1PC0E01\n1111011\n", "First/last line is not a wall"),
        ("1111111\n\n1PC0E01\n1111111\n", "Empty lines"),
        ("1111111\n1PC0E0001\n1111111\n", "Line length mismatch"),
        ("1111111\n1PC0E01\n1111111", "Line length mismatch"),
        ("1111111\n0PC0E01\n1111111\n", "Line is not surrounded by walls"),
        ("1111111\n1PC0E00\n1111111\n", "Line is not surrounded by walls"),
        ("1111111\n1PCZE01\n1111111\n", "Invalid map chars"),
        ("1111111\n1P00E01\n1111111\n", "at least one item"),
        ("1111111\n1PCPE01\n1111111\n", "one player spawn"),
        ("1111111\n1PC0001\n1111111\n", "one exit"),
        ("1111111\n1PCEE01\n1111111\n", "one exit"),
        ("11111\n1PCE1\n10001\n10001\n11111\n", "must be rectangular"),
    ],
)
def test_parse_map_errors(text, message):
    with pytest.raises(MapError, match=message):
        parse_map(text)


def test_single_wall_line_without_newline_is_rejected():
    with pytest.raises(MapError, match="First/last line is not a wall"):
        parse_map("1111")


def test_check_reachable_marks_visited_cells():
    game_map = parse_map(VALID)
    filled = check_reachable(game_map)
    assert len(filled) == game_map.height
    assert not any("C" in row or "E" in row or "P" in row for row in filled)
    assert filled[1][1] == "X"
    # The original map is left untouched.
    assert game_map.tile_at(1, 1) is Tile.PLAYER
    assert game_map.tile_at(2, 1) is Tile.ITEM


def test_unreachable_item():
    game_map = parse_map("11111111\n1P01CE01\n11111111\n")
    with pytest.raises(MapError, match="Map not reachable"):
        check_reachable(game_map)


def test_unreachable_exit():
    game_map = parse_map("1111111\n1PC1E01\n1111111\n")
    with pytest.raises(MapError, match="Exit not reachable"):
        check_reachable(game_map)


def test_exit_blocks_path_until_items_collected():
    game_map = parse_map("1111111\n1PEC001\n1111111\n")
    with pytest.raises(MapError, match="Map not reachable"):
        check_reachable(game_map)


def test_exit_revisited_after_items_collected():
    game_map = parse_map("1111111\n1PE0C01\n1000001\n1111111\n")
    filled = check_reachable(game_map)
    assert all(set(row) <= {"1", "X"} for row in filled)


def test_spawn_missing():
    game_map = GameMap(["11111", "10C01", "11111"])
    assert game_map.find_player() is None
    with pytest.raises(MapError, match="Spawn point not found"):
        check_reachable(game_map)


def test_load_map_from_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID)
    game_map = load_map(path)
    assert ["".join(row) for row in game_map.rows] == VALID.splitlines()
    assert game_map.remaining_items == 1


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="Can't open the file"):
        load_map(tmp_path / "absent.ber")


def test_load_map_bad_extension(tmp_path):
    path = tmp_path / "level.map"
    path.write_text(VALID)
    with pytest.raises(MapError, match="doesn't terminate by .ber"):
        load_map(path)


def test_load_map_runs_reachability(tmp_path):
    path = tmp_path / "blocked.ber"
    path.write_text("1111111\n1PC1E01\n1111111\n")
    with pytest.raises(MapError, match="Exit not reachable"):
        load_map(path)


def test_carriage_returns_are_invalid(tmp_path):
    path = tmp_path / "crlf.ber"
    path.write_bytes(b"1111111\r\n1PC0E01\r\n1111111\r\n")
    with pytest.raises(MapError, match="First/last line is not a wall"):
        load_map(path)
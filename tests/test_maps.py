import pytest

from dungeonrun.maps import (
    GameMap,
    MapError,
    check_arguments,
    check_empty_lines,
    load_map,
    parse_map,
)
from dungeonrun.tiles import Tile

SAMPLE = "1111111\n1P0C0E1\n1111111"


def test_check_arguments_returns_path():
    assert check_arguments(["maps/level.ber"]) == "maps/level.ber"
    assert check_arguments(["maps/level.ber"], bonus=True) == "maps/level.ber"


def test_check_arguments_missing_map():
    with pytest.raises(MapError, match="Please Enter a map!"):
        check_arguments([])


def test_check_arguments_too_many():
    with pytest.raises(MapError, match="You entered too many arguments."):
        check_arguments(["a.ber", "b.ber"])
    with pytest.raises(MapError, match="You entered alot of argument."):
        check_arguments(["a.ber", "b.ber"], bonus=True)


@pytest.mark.parametrize("path", ["map.txt", "map.bert", "map", ".ber"])
def test_check_arguments_bad_extension(path):
    with pytest.raises(MapError, match="It must be a .ber file."):
        check_arguments([path])


def test_bonus_accepts_bare_extension():
    assert check_arguments([".ber"], bonus=True) == ".ber"
    with pytest.raises(MapError, match="You can enter just .ber file."):
        check_arguments(["ber"], bonus=True)


@pytest.mark.parametrize(
    "text, message",
    [
        ("\n111", "empty line at the beginning."),
        ("111\n", "empty line at the end."),
        ("111\n\n111", "empty line in the middle."),
    ],
)
def test_check_empty_lines_errors(text, message):
    with pytest.raises(MapError, match=message):
        check_empty_lines(text)


def test_parse_map_round_trip():
    game_map = parse_map(SAMPLE)
    assert "\n".join(game_map.lines) == SAMPLE
    assert game_map.height == 3
    assert game_map.width == len("1111111")


def test_parse_map_empty():
    with pytest.raises(MapError, match="Map is empty!"):
        parse_map("")


def test_parse_map_trailing_newline_rejected():
    with pytest.raises(MapError, match="empty line at the end."):
        parse_map(SAMPLE + "\n")


def test_getitem_uses_x_then_y():
    game_map = parse_map(SAMPLE)
    assert game_map[1, 1] == Tile.PLAYER
    assert game_map[3, 1] == Tile.COINS
    assert game_map[5, 1] == Tile.EXIT


def test_out_of_bounds_raises():
    game_map = parse_map(SAMPLE)
    with pytest.raises(IndexError):
        game_map[-1, 0]
    with pytest.raises(IndexError):
        game_map[0, game_map.height]
    assert (game_map.width, 0) not in game_map


def test_setitem_and_copy_independent():
    game_map = parse_map(SAMPLE)
    clone = game_map.copy()
    clone[1, 1] = Tile.FLOOR
    assert clone[1, 1] == Tile.FLOOR
    assert game_map[1, 1] == Tile.PLAYER
    assert clone != game_map


def test_setitem_rejects_multiple_characters():
    game_map = parse_map(SAMPLE)
    with pytest.raises(ValueError):
        game_map[1, 1] = "PP"
    assert game_map[1, 1] == Tile.PLAYER
    assert "\n".join(game_map.lines) == SAMPLE


def test_positions_cover_every_cell():
    game_map = parse_map(SAMPLE)
    cells = list(game_map.positions())
    assert len(cells) == game_map.width * game_map.height
    assert all(game_map[pos] == char for pos, char in cells)
    assert cells[0] == ((0, 0), Tile.WALL)


def test_load_map_reads_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(SAMPLE)
    assert load_map(path) == parse_map(SAMPLE)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="The Map couldn't be opened"):
        load_map(tmp_path / "missing.ber")
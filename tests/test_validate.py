import pytest

from dungeonrun.maps import GameMap, MapError
from dungeonrun.validate import (
    check_display_size,
    check_rectangular,
    count_elements,
    reachable_counts,
    validate_map,
)

VALID = [
    "1111111",
    "1P0C0E1",
    "1000C01",
    "1111111",
]


def make(lines):
    return GameMap.from_lines(lines)


def test_valid_map_summary():
    summary = validate_map(make(VALID))
    assert summary.players == 1
    assert summary.exits == 1
    assert summary.coins == 2
    assert summary.player == (1, 1)
    assert (summary.width, summary.height) == (len(VALID[0]), len(VALID))


def test_check_rectangular_returns_width():
    assert check_rectangular(make(VALID)) == len(VALID[0])


def test_not_rectangular():
    with pytest.raises(MapError, match="Map is not rectangular!"):
        check_rectangular(make(["1111", "111", "1111"]))


def test_empty_map():
    with pytest.raises(MapError, match="Map is empty!"):
        check_rectangular(GameMap())


def test_open_border_plain_and_bonus():
    lines = ["1111", "1PC0", "1E11", "1111"]
    with pytest.raises(MapError, match="Map is not surrounded by walls."):
        count_elements(make(lines))
    with pytest.raises(MapError, match="Invalid Map."):
        count_elements(make(lines), bonus=True)


def test_enemies_invalid_in_plain_game():
    lines = ["111111", "1PCEK1", "111111"]
    with pytest.raises(MapError, match="Invalid character in map"):
        count_elements(make(lines))
    summary = count_elements(make(lines), bonus=True)
    assert summary.static_enemies == 1
    assert summary.wandering_enemies == 0


def test_wandering_enemy_counted():
    summary = count_elements(make(["111111", "1PCEX1", "111111"]), bonus=True)
    assert summary.wandering_enemies == 1


@pytest.mark.parametrize(
    "lines, message",
    [
        (["11111", "1PPC1", "1E001", "11111"], "exactly one starting location"),
        (["11111", "100C1", "1E001", "11111"], "exactly one starting location"),
        (["11111", "1PEC1", "1E001", "11111"], "exactly one exit"),
        (["11111", "1P001", "1E001", "11111"], "at least one collectible"),
    ],
)
def test_element_counts(lines, message):
    with pytest.raises(MapError, match=message):
        count_elements(make(lines))


def test_unreachable_exit():
    lines = ["111111", "1PC111", "111E01", "111111"]
    with pytest.raises(MapError, match="Pathfinding failed"):
        validate_map(make(lines))
    with pytest.raises(MapError, match="can't accessible"):
        validate_map(make(lines), bonus=True)


def test_coin_behind_exit_is_unreachable():
    lines = ["111111", "1P0EC1", "111111"]
    game_map = make(lines)
    coins, exits = reachable_counts(game_map, (1, 1))
    assert coins == 0
    assert exits == 1
    with pytest.raises(MapError):
        validate_map(game_map)


def test_static_enemy_blocks_only_in_bonus():
    lines = ["1111111", "1P0K0C1", "1E11111", "1111111"]
    game_map = make(lines)
    assert reachable_counts(game_map, (1, 1), bonus=False)[0] == 1
    assert reachable_counts(game_map, (1, 1), bonus=True)[0] == 0
    with pytest.raises(MapError, match="can't accessible"):
        validate_map(game_map, bonus=True)


def test_validation_does_not_change_map():
    game_map = make(VALID)
    validate_map(game_map)
    assert game_map.lines == VALID


def test_display_size_limits():
    check_display_size(make(["1" * 60] * 33))
    with pytest.raises(MapError, match="too large"):
        check_display_size(make(["1" * 61] * 3))
    with pytest.raises(MapError, match="too large"):
        check_display_size(make(["111"] * 34))
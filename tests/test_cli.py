import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from dungeonrun.cli import main, main_bonus, prepare
from dungeonrun.game import BonusGame
from dungeonrun.maps import MapError

PLAIN_MAP = "11111\n1PCE1\n11111"
BONUS_MAP = "1111111\n1PC0E01\n1X0K001\n1111111"


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_prepare_plain_game(tmp_path, capsys):
    path = _write(tmp_path, "map.ber", PLAIN_MAP)
    game = prepare([path], bonus=False)
    assert not isinstance(game, BonusGame)
    assert game.player == (1, 1)
    assert game.coins == 1
    assert game.movements == 0
    out = capsys.readouterr().out
    assert f"Parsing map: {path}" in out
    assert "Map validation successful!" in out


def test_prepare_bonus_game(tmp_path, capsys):
    path = _write(tmp_path, "map.ber", BONUS_MAP)
    game = prepare([path], bonus=True)
    assert isinstance(game, BonusGame)
    assert [enemy.position for enemy in game.enemies] == [(1, 2)]
    assert "Map validation passed!" in capsys.readouterr().out


def test_prepare_without_map():
    with pytest.raises(MapError, match="Please Enter a map!"):
        prepare([], bonus=False)


def test_prepare_rejects_wrong_extension(tmp_path):
    path = _write(tmp_path, "map.txt", PLAIN_MAP)
    with pytest.raises(MapError, match=r"\.ber"):
        prepare([path], bonus=False)


def test_prepare_rejects_enemy_in_plain_game(tmp_path):
    path = _write(tmp_path, "map.ber", BONUS_MAP)
    with pytest.raises(MapError, match="Invalid character in map."):
        prepare([path], bonus=False)


def test_main_without_map_reports_error(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "ERROR OCCURRED" in out
    assert "Reason: Please Enter a map!" in out


def test_main_reports_open_walls(tmp_path, capsys):
    path = _write(tmp_path, "map.ber", "11111\n1PCE0\n11111")
    assert main([path]) == 1
    assert "Map is not surrounded by walls." in capsys.readouterr().out


def test_main_bonus_missing_file(tmp_path, capsys):
    assert main_bonus([str(tmp_path / "absent.ber")]) == 1
    out = capsys.readouterr().out
    assert "ERROR\nThe Map couldn't be opened. Does the Map exist?\n" in out


def test_main_bonus_too_many_arguments(capsys):
    assert main_bonus(["a.ber", "b.ber"]) == 1
    assert "You entered alot of argument." in capsys.readouterr().out
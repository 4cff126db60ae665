import io
from datetime import datetime

import pytest

from caro.colors import Color
from caro.files import read_text_file
from caro.load import LOAD_EXIT, LoadFunction, SavedGame, parse_save, read_save
from caro.menus import InteractiveMenu, Menu
from caro.save import format_save, write_save
from caro.screen import Screen
from caro.ui import UIBound

WHEN = datetime(2023, 5, 6, 7, 8, 9)


def scripted(*keys):
    it = iter(keys)

    def reader():
        try:
            return next(it)
        except StopIteration:
            raise EOFError("script exhausted") from None

    return reader


def make_page(tmp_path, played, *keys):
    screen = Screen(io.StringIO())
    items = [UIBound(content=[f"slot{i}"], screen=screen) for i in range(LOAD_EXIT + 1)]
    return LoadFunction(
        static_menu=Menu([]),
        dynamic_menu=InteractiveMenu(items, scripted(*keys)),
        directory=tmp_path,
        play=played.append,
    )


def test_parse_save_round_trip():
    marks = [[1, 0, 2], [0, 2, 0], [1, 0, 0]]
    saved = parse_save(format_save(2, 1, 3, marks))
    assert saved == SavedGame(mode=2, turn=1, size=3, time_to_win=3, marks=marks)


def test_parse_save_accepts_any_whitespace():
    saved = parse_save("0 1 2 2 1 2 0 1")
    assert saved.marks == [[1, 2], [0, 1]]


def test_parse_save_missing_cells():
    with pytest.raises(ValueError):
        parse_save("0\n0\n3\n3\n1 0 0\n")


def test_parse_save_missing_header():
    with pytest.raises(ValueError):
        parse_save("1 0")


def test_parse_save_not_numbers():
    with pytest.raises(ValueError):
        parse_save("a b c d")


def test_parse_save_bad_size():
    with pytest.raises(ValueError):
        parse_save("0 0 0 3")


def test_read_save_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_save(tmp_path / "Save_2.txt")


def test_first_check_colours_slots(tmp_path):
    write_save(tmp_path, 1, 0, "2 Players", 0, 3, [[0] * 3] * 3, WHEN)
    page = make_page(tmp_path, [])
    page.first_check()
    menu = page.dynamic_menu
    assert menu.component(1).color == Color.WHITE_BLACK
    assert menu.component(1).content == read_text_file(tmp_path / "Save_Show_1.txt")
    assert menu.component(0).color == Color.BLACK_BLACK
    assert menu.component(3).color == Color.BLACK_BLACK


def test_first_check_needs_description(tmp_path):
    write_save(tmp_path, 0, 0, "2 Players", 0, 3, [[0] * 3] * 3, WHEN)
    (tmp_path / "Save_Show_0.txt").unlink()
    page = make_page(tmp_path, [])
    page.first_check()
    assert page.dynamic_menu.component(0).color == Color.BLACK_BLACK


def test_load_file_plays_saved_game(tmp_path):
    marks = [[1, 0, 0], [0, 2, 0], [0, 0, 0]]
    write_save(tmp_path, 2, 1, "Easy Bot", 1, 3, marks, WHEN)
    played = []
    page = make_page(tmp_path, played)
    saved = page.load_file(2)
    assert played == [saved]
    assert saved.marks == marks


def test_load_file_empty_slot(tmp_path):
    played = []
    page = make_page(tmp_path, played)
    assert page.load_file(0) is None
    assert played == []


def test_load_without_player_raises(tmp_path):
    write_save(tmp_path, 0, 0, "2 Players", 0, 3, [[0] * 3] * 3, WHEN)
    page = LoadFunction(directory=tmp_path)
    with pytest.raises(RuntimeError):
        page.load_file(0)


def test_start_loads_then_exits(tmp_path):
    marks = [[0, 1, 0], [0, 0, 0], [2, 0, 0]]
    write_save(tmp_path, 1, 0, "2 Players", 1, 3, marks, WHEN)
    played = []
    page = make_page(tmp_path, played, "S", "E", "W", "E")
    page.start()
    assert [game.marks for game in played] == [marks]
    assert played[0].turn == 1
import io
from datetime import datetime

import pytest

from caro.colors import Color
from caro.load import read_save
from caro.menus import InteractiveMenu, Menu
from caro.save import (
    MAX_SLOT,
    SaveFunction,
    format_description,
    format_save,
    write_save,
)
from caro.screen import Screen
from caro.ui import UIBound

WHEN = datetime(2024, 1, 2, 3, 4, 5)


def scripted(*keys):
    it = iter(keys)

    def reader():
        try:
            return next(it)
        except StopIteration:
            raise EOFError("script exhausted") from None

    return reader


def make_page(tmp_path, *keys):
    screen = Screen(io.StringIO())
    items = [UIBound(content=[f"slot{i}"], screen=screen) for i in range(MAX_SLOT + 1)]
    return SaveFunction(
        static_menu=Menu([]),
        dynamic_menu=InteractiveMenu(items, scripted(*keys)),
        directory=tmp_path,
        clock=lambda: WHEN,
    )


def test_format_save_layout():
    text = format_save(1, 0, 3, [[1, 0, 2], [0, 1, 0], [2, 0, 0]])
    assert text == "1\n0\n3\n3\n1 0 2 \n0 1 0 \n2 0 0 \n"


def test_format_description_layout():
    text = format_description(2, "Easy Bot", WHEN)
    assert text == "Save slot: 2\n\nTime: 3:4:5-2024:1:2\n\nMode: Easy Bot"


def test_format_save_header_holds_board_size():
    marks = [[0] * 5 for _ in range(5)]
    lines = format_save(2, 1, 3, marks).splitlines()
    assert lines[2] == str(len(marks))
    assert len(lines) == 4 + len(marks)


def test_write_save_round_trip(tmp_path):
    marks = [[1, 2, 0], [0, 0, 0], [2, 1, 1]]
    save_file, description_file = write_save(tmp_path, 3, 2, "Hard Bot", 1, 3, marks, WHEN)
    saved = read_save(save_file)
    assert saved.mode == 2
    assert saved.turn == 1
    assert saved.marks == marks
    assert description_file.read_text() == format_description(3, "Hard Bot", WHEN)


def test_start_writes_chosen_slot(tmp_path):
    page = make_page(tmp_path, "S", "E")
    marks = [[1, 0, 0], [0, 2, 0], [0, 0, 0]]
    assert page.start(1, "Easy Bot", 0, 3, marks) == 1
    assert read_save(tmp_path / "Save_1.txt").marks == marks
    assert (tmp_path / "Save_Show_1.txt").read_text() == format_description(1, "Easy Bot", WHEN)


def test_start_back_item_writes_nothing(tmp_path):
    page = make_page(tmp_path, "W", "E")
    assert page.start(0, "2 Players", 0, 3, [[0] * 3] * 3) is None
    assert list(tmp_path.iterdir()) == []


def test_start_marks_used_slots_red(tmp_path):
    write_save(tmp_path, 2, 0, "2 Players", 0, 3, [[0] * 3] * 3, WHEN)
    page = make_page(tmp_path, "W", "E")
    page.start(0, "2 Players", 0, 3, None)
    assert page.dynamic_menu.component(2).color == Color.RED_RED
    assert page.dynamic_menu.component(0).color != Color.RED_RED


def test_start_without_menus_does_nothing(tmp_path):
    page = SaveFunction(directory=tmp_path)
    assert page.start(0, "2 Players", 0, 3, [[0]]) is None
    assert list(tmp_path.iterdir()) == []


def test_read_back_of_missing_slot_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_save(tmp_path / "Save_0.txt")
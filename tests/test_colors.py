import re

import pytest

from caro.colors import Color, ansi_sequence


@pytest.mark.parametrize(
    "color,value",
    [(Color.WHITE_BLACK, 240), (Color.RED_RED, 68), (Color.DEFAULT, 255), (Color.WHITE_WHITE, 255)],
)
def test_documented_constants(color, value):
    assert ansi_sequence(color) == ansi_sequence(value)


def test_black_on_black():
    assert ansi_sequence(Color.BLACK_BLACK) == "\x1b[30;40m"


def test_black_on_white():
    assert ansi_sequence(Color.WHITE_BLACK) == "\x1b[30;107m"


@pytest.mark.parametrize("bad", [-1, 256, 1000])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        ansi_sequence(bad)


def test_every_attribute_is_distinct_and_well_formed():
    sequences = [ansi_sequence(value) for value in range(256)]
    assert len(set(sequences)) == 256
    assert all(re.fullmatch(r"\x1b\[\d+;\d+m", s) for s in sequences)


@pytest.mark.parametrize(
    "color",
    [Color.GRAY_GRAY, Color.GREEN_GREEN, Color.RED_RED, Color.YELLOW_YELLOW, Color.WHITE_WHITE],
)
def test_solid_colours_use_same_hue_for_text_and_background(color):
    fg, bg = map(int, re.fullmatch(r"\x1b\[(\d+);(\d+)m", ansi_sequence(color)).groups())
    assert bg == fg + 10
"""Console colour attributes and their terminal escape sequences."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Console attributes: high nibble is the background, low nibble the text."""

    BLACK_BLACK = 0
    WHITEGRAY_WHITEGRAY = 119
    GRAY_GRAY = 136
    GREEN_GREEN = 34
    RED_RED = 68
    YELLOW_YELLOW = 102
    WHITE_BLACK = 240
    WHITE_BLUE = 243
    WHITE_RED = 244
    WHITE_YELLOW = 246
    WHITE_LIGHTGRAY = 247
    WHITE_GRAY = 248
    WHITE_GREEN = 250
    WHITE_LIGHTBLUE = 251
    WHITE_ORANGE = 252
    WHITE_PURPLE = 253
    WHITE_WHITE = 255
    DEFAULT = 255


# Console palette index (0-7) to ANSI colour offset.
_ANSI_ORDER = (0, 4, 2, 6, 1, 5, 3, 7)


def _ansi_code(index: int, base: int) -> int:
    bright = 60 if index >= 8 else 0
    return base + bright + _ANSI_ORDER[index & 7]


def ansi_sequence(color: int) -> str:
    """Return the escape sequence selecting the attribute ``color``."""
    if not 0 <= int(color) <= 255:
        raise ValueError(f"colour attribute out of range: {color}")
    value = int(color)
    foreground = _ansi_code(value & 0x0F, 30)
    background = _ansi_code(value >> 4, 40)
    return f"\x1b[{foreground};{background}m"
"""Key codes, per-role key sets and blocking keyboard input."""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, Iterable


class Key(str, Enum):
    """Special keys, as the characters a console reports for them."""

    ARROW_UP = chr(72)
    ARROW_DOWN = chr(80)
    ARROW_LEFT = chr(75)
    ARROW_RIGHT = chr(77)
    SPACE = chr(32)
    ENTER = chr(13)
    ESC = chr(27)
    TAB = chr(9)


PLAYER_ONE_KEYS = ("W", "A", "S", "D", "E", Key.ESC, Key.TAB)
PLAYER_TWO_KEYS = (
    Key.ARROW_DOWN,
    Key.ARROW_LEFT,
    Key.ARROW_RIGHT,
    Key.ARROW_UP,
    Key.ENTER,
    Key.ESC,
    Key.TAB,
)
MENU_KEYS = (Key.ARROW_DOWN, Key.ARROW_UP, "W", "S", Key.ENTER, "E")

EXIT_KEY = Key.ESC
PAUSE_KEY = Key.SPACE
SAVE_KEY = Key.TAB

_ARROW_FINALS = {
    "A": Key.ARROW_UP.value,
    "B": Key.ARROW_DOWN.value,
    "C": Key.ARROW_RIGHT.value,
    "D": Key.ARROW_LEFT.value,
}


def _read_posix_key() -> str:
    if not sys.stdin.isatty():
        ch = sys.stdin.read(1)
        if not ch:
            raise EOFError("no more input")
        return ch

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        data = os.read(fd, 1)
        if not data:
            raise EOFError("no more input")
        ch = data.decode(errors="replace")
        if ch == Key.ESC and select.select([fd], [], [], 0.05)[0]:
            rest = os.read(fd, 2).decode(errors="replace")
            if len(rest) == 2 and rest[0] in "[O" and rest[1] in _ARROW_FINALS:
                return _ARROW_FINALS[rest[1]]
        return ch
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def read_key() -> str:
    """Block until one key is pressed and return its character, unechoed."""
    if os.name == "nt":
        import msvcrt

        return msvcrt.getwch()
    return _read_posix_key()


def wait_for(expected: Iterable[str], reader: Callable[[], str] = read_key) -> str:
    """Read keys until an upper-cased one is among ``expected``; return it."""
    choices = tuple(expected)
    while True:
        ch = reader()
        if ch.isascii():
            ch = ch.upper()
        if ch in choices:
            return ch


def read_line() -> str:
    """Read one line from standard input; empty at end of input."""
    try:
        return input()
    except EOFError:
        return ""
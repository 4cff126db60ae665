"""Drawing text shapes at positions on an ANSI terminal."""

from __future__ import annotations

import functools
import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

from caro.colors import Color, ansi_sequence
from caro.geometry import Point
from caro.utility import char_string

_HIDE_CURSOR = "\x1b[?25l"
_CLEAR = "\x1b[2J"


@dataclass
class Screen:
    """A terminal addressed by cursor position; writes to ``stream`` or stdout."""

    stream: TextIO | None = None

    @property
    def _out(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def setup(self) -> None:
        """Hide the cursor and paint the terminal black on white."""
        out = self._out
        out.write(_HIDE_CURSOR)
        self.set_color(Color.WHITE_BLACK)
        out.write(_CLEAR)
        self.jump(Point(0, 0))
        out.flush()

    def jump(self, point: Point) -> None:
        """Move the cursor to ``point``."""
        row = max(point.y, 0) + 1
        col = max(point.x, 0) + 1
        self._out.write(f"\x1b[{row};{col}H")

    def set_color(self, color: int) -> None:
        """Select the colour attribute for following output."""
        self._out.write(ansi_sequence(color))

    def draw(self, anchor: Point, content: Iterable[str], color: int = Color.WHITE_WHITE) -> None:
        """Draw ``content`` with its top left at ``anchor``; blanks stay untouched."""
        out = self._out
        cursor = anchor
        self.jump(cursor)
        self.set_color(color)
        for line in content:
            for ch in line:
                cursor = cursor.moved(1, 0)
                if ch.isspace():
                    self.jump(cursor)
                else:
                    out.write(ch)
            cursor = Point(anchor.x, cursor.y + 1)
            self.jump(cursor)
        out.flush()

    def print_at(self, point: Point, text: str) -> None:
        """Write ``text`` starting at ``point``."""
        self.jump(point)
        self._out.write(text)
        self._out.flush()

    def draw_area(self, start: Point, end: Point, color: int = Color.WHITE_WHITE) -> None:
        """Fill the block around ``start``..``end`` with stars in ``color``."""
        self.set_color(color)
        line = char_string(end.x - start.x + 4, "*")
        for r in range(end.y - start.y + 2):
            self.jump(Point(start.x - 1, start.y + r - 1))
            self._out.write(line)
        self._out.flush()


@functools.lru_cache(maxsize=None)
def default_screen() -> Screen:
    """Return the shared screen that writes to standard output."""
    return Screen()
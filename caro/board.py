"""The playing board: cells, the cursor, move input and win detection."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Sequence, Union

from caro.colors import Color
from caro.files import read_number_file, read_text_file
from caro.geometry import PairIndex, Point
from caro.screen import Screen, default_screen
from caro.ui import SlotBoard

PathLike = Union[str, Path]

SPACE_X = 10
SPACE_Y = 7
WAIT_TO_DRAW = 0.05
WIN_BLINK = 0.5
WIN_HOLD = 3.0

# Directions scanned for a line of marks, as (row step, column step).
_DIRECTIONS = ((-1, 1), (0, 1), (1, 0), (-1, -1))


class Board:
    """A square grid of cells with a cursor; marks are 0 (empty), 1 (X) or 2 (O).

    The cell layout is read from ``BoardSize_<size>.txt`` (anchor x and y) and
    the shapes from ``MarkX.txt``, ``MarkO.txt`` and ``MarkSlot.txt`` in
    ``resources``; missing files give an anchor at the origin and empty shapes.
    """

    def __init__(
        self,
        size: int,
        time_to_win: int,
        points: Sequence[Sequence[int]] | None = None,
        *,
        resources: PathLike = ".",
        screen: Screen | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if size <= 0:
            raise ValueError(f"board size must be positive: {size}")
        self.size = size
        self.time_to_win = time_to_win
        self.winner = 0
        self.count = 0
        self.screen = default_screen() if screen is None else screen
        self.sleep = sleep
        self.win_slots: list[PairIndex] = []
        self.current = PairIndex()

        base = Path(resources)
        numbers = read_number_file(base / f"BoardSize_{size}.txt")
        self.anchor = Point(numbers[0], numbers[1]) if len(numbers) >= 2 else Point()
        x_shape = read_text_file(base / "MarkX.txt")
        o_shape = read_text_file(base / "MarkO.txt")
        shell = read_text_file(base / "MarkSlot.txt")

        left = self.anchor.x - (size // 2) * SPACE_X
        self.slots = [
            [
                SlotBoard(
                    content=list(shell),
                    anchor=Point(left + col * SPACE_X, self.anchor.y + row * SPACE_Y),
                    color=Color.WHITEGRAY_WHITEGRAY,
                    screen=self.screen,
                    x_shape=list(x_shape),
                    o_shape=list(o_shape),
                )
                for col in range(size)
            ]
            for row in range(size)
        ]

        for row, line in enumerate(points or ()):
            for col, mark in enumerate(line):
                if mark:
                    self.slots[row][col].set_mark(mark)
                    self.count += 1

    @property
    def marks(self) -> list[list[int]]:
        """The marks of every cell, row by row."""
        return [[slot.mark for slot in row] for row in self.slots]

    def _slot(self, index: PairIndex) -> SlotBoard:
        return self.slots[index.row][index.col]

    def is_full(self) -> bool:
        """Tell whether every cell has been filled."""
        return self.count == self.size * self.size

    def is_end_game(self) -> bool:
        """Tell whether someone has won."""
        return self.winner != 0

    def available_slots(self) -> list[PairIndex]:
        """Return the empty cells in row-major order."""
        return [
            PairIndex(row, col)
            for row, line in enumerate(self.slots)
            for col, slot in enumerate(line)
            if slot.mark == 0
        ]

    def mark_at(self, row: int, col: int) -> int:
        """Return the mark in the cell at ``row``, ``col``."""
        return self.slots[row][col].mark

    def set_marks(self, marks: Sequence[Sequence[int]]) -> None:
        """Overwrite cell marks from a grid; the fill count is left alone."""
        for row, line in enumerate(marks):
            for col, mark in enumerate(line):
                self.slots[row][col].set_mark(mark)

    def draw(self) -> None:
        """Draw the background, every cell with its mark, and the first frame."""
        start = self.slots[0][0]
        end = self.slots[-1][-1]
        self.screen.draw_area(start.anchor, end.anchor + Point(5, 5), Color.GRAY_GRAY)
        for row in self.slots:
            for slot in row:
                slot.show()
                slot.draw_mark()
                self.sleep(WAIT_TO_DRAW)
        start.draw_bound()

    def show_end_game(self) -> None:
        """Flash red frames around the winning line, then restore them."""
        if self.winner == 0:
            return
        self._slot(self.current).clear_bound()
        for index in self.win_slots:
            slot = self._slot(index)
            slot.make_bound(Point(1, 1), Color.RED_RED)
            slot.draw_bound()
            self.sleep(WIN_BLINK)
        self.sleep(WIN_HOLD)
        for index in self.win_slots:
            slot = self._slot(index)
            slot.make_bound(Point(1, 1), Color.YELLOW_YELLOW)
            slot.clear_bound(Color.GRAY_GRAY)

    def move_cursor(self, offset_row: int, offset_col: int) -> None:
        """Move the cursor; steps past the top or left stop at the edge."""
        if offset_row == 0 and offset_col == 0:
            return
        target = PairIndex.clamped(self.current.row + offset_row, self.current.col + offset_col)
        if target.is_valid(self.size, self.size):
            self._slot(self.current).clear_bound(Color.GRAY_GRAY)
            self._slot(target).draw_bound()
            self.current = target

    def set_current_index(self, row: int, col: int) -> None:
        """Put the cursor on ``row``, ``col`` if that cell exists."""
        target = PairIndex(row, col)
        if target.is_valid(self.size, self.size):
            self._slot(self.current).clear_bound(Color.GRAY_GRAY)
            self._slot(target).draw_bound()
            self.current = target

    def place(self, who: int) -> bool:
        """Mark the cell under the cursor for ``who`` if empty; tell whether it was."""
        slot = self._slot(self.current)
        if slot.mark != 0:
            return False
        slot.set_mark(who)
        if self._check_state(who, self.current):
            self.winner = who
        self.count += 1
        slot.draw_mark()
        return True

    def place_at(self, who: int, index: PairIndex) -> None:
        """Mark ``index`` for ``who`` without drawing, updating the winner."""
        self._slot(index).set_mark(who)
        if self._check_state(who, index):
            self.winner = who
        self.count += 1

    def retrieve(self, index: PairIndex) -> None:
        """Undo a mark made with ``place_at``."""
        self._slot(index).set_mark(0)
        self.count -= 1
        self.winner = 0

    def clear_buffer(self) -> None:
        """Empty every cell and forget the winner."""
        self.winner = 0
        self.count = 0
        for row in self.slots:
            for slot in row:
                slot.set_mark(0)

    def clear(self) -> None:
        """Reset the cursor and paint over the board area."""
        self.current = PairIndex()
        start = self.slots[0][0]
        end = self.slots[-1][-1]
        self.screen.draw_area(start.anchor, end.anchor + Point(5, 5), Color.WHITE_WHITE)

    def _check_state(self, mark: int, index: PairIndex) -> bool:
        return any(
            self._check_direction(mark, index, d_row, d_col) for d_row, d_col in _DIRECTIONS
        )

    def _check_direction(self, mark: int, index: PairIndex, d_row: int, d_col: int) -> bool:
        """Scan the line through ``index``; keep the winning cells in ``win_slots``."""
        self.win_slots = []
        reach = self.time_to_win - 1
        offset = index.moved(-reach * d_row, -reach * d_col)
        for _ in range(2 * self.time_to_win - 1):
            row, col = offset.row, offset.col
            if (
                (row >= self.size and d_row >= 0)
                or (col >= self.size and d_col >= 0)
                or (row < 0 and d_row <= 0)
                or (col < 0 and d_col <= 0)
            ):
                return False
            if not offset.is_valid(self.size, self.size):
                offset = offset.moved(d_row, d_col)
                continue
            if self.slots[row][col].mark == mark:
                self.win_slots.append(offset)
                if len(self.win_slots) >= self.time_to_win:
                    return True
            else:
                self.win_slots = []
            offset = offset.moved(d_row, d_col)
        return False
"""Reading saved games and the page that resumes them."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from caro.colors import Color
from caro.files import read_text_file
from caro.function import Function
from caro.save import DESCRIPTION_NAME, SAVE_NAME

PathLike = Union[str, Path]

LOAD_EXIT = 4
LOAD_SLOTS = 4


@dataclass
class SavedGame:
    """A game as stored in a save slot."""

    mode: int
    turn: int
    size: int
    time_to_win: int
    marks: list[list[int]]


def parse_save(text: str) -> SavedGame:
    """Parse a save: mode, turn, size, line length, then size x size marks."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError("save holds something that is not a number") from exc
    if len(numbers) < 4:
        raise ValueError("save is missing its header")
    mode, turn, size, time_to_win = numbers[:4]
    if size <= 0:
        raise ValueError(f"save has an invalid board size: {size}")
    cells = numbers[4 : 4 + size * size]
    if len(cells) < size * size:
        raise ValueError("save is missing board cells")
    marks = [cells[start : start + size] for start in range(0, size * size, size)]
    return SavedGame(mode, turn, size, time_to_win, marks)


def read_save(path: PathLike) -> SavedGame:
    """Read and parse the save file at ``path``."""
    return parse_save(Path(path).read_text(encoding="utf-8"))


@dataclass(eq=False)
class LoadFunction(Function):
    """The load page: one item per save slot, then one to go back."""

    directory: Path = Path(".")
    play: Optional[Callable[[SavedGame], object]] = field(default=None, repr=False)

    def first_check(self) -> None:
        """Show used slots with their description, and grey out empty ones."""
        if self.dynamic_menu is None:
            return
        base = Path(self.directory)
        for slot in range(LOAD_SLOTS):
            item = self.dynamic_menu.component(slot)
            save_file = base / SAVE_NAME.format(slot)
            description_file = base / DESCRIPTION_NAME.format(slot)
            if save_file.is_file() and description_file.is_file():
                item.content = read_text_file(description_file)
                item.color = Color.WHITE_BLACK
            else:
                item.color = Color.BLACK_BLACK

    def start(self) -> None:
        """Let the user resume saved games until Back is chosen."""
        if self.static_menu is None or self.dynamic_menu is None:
            return
        while True:
            self.first_check()
            self.static_menu.show()
            self.dynamic_menu.show()
            choice = self.dynamic_menu.interact()
            self.end()
            if choice == LOAD_EXIT:
                return
            self.load_file(choice)

    def load_file(self, choice: int) -> SavedGame | None:
        """Play the game saved in slot ``choice``; None if the slot is empty."""
        path = Path(self.directory) / SAVE_NAME.format(choice)
        if not path.is_file():
            return None
        saved = read_save(path)
        if self.play is None:
            raise RuntimeError("no way to play a loaded game is configured")
        self.play(saved)
        return saved
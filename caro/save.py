"""Saving a game in progress to one of the numbered save slots."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Sequence, Union

from caro.colors import Color
from caro.function import Function

PathLike = Union[str, Path]

MAX_SLOT = 4
SAVE_NAME = "Save_{}.txt"
DESCRIPTION_NAME = "Save_Show_{}.txt"


def format_save(mode: int, turn: int, time_to_win: int, marks: Sequence[Sequence[int]]) -> str:
    """Return the save file text: mode, turn, size, line length, then the grid."""
    header = [str(mode), str(turn), str(len(marks)), str(time_to_win)]
    rows = ["".join(f"{mark} " for mark in row) for row in marks]
    return "\n".join(header + rows) + "\n"


def format_description(slot: int, player_name: str, when: datetime) -> str:
    """Return the text shown for a save slot in the load menu."""
    return (
        f"Save slot: {slot}\n\n"
        f"Time: {when.hour}:{when.minute}:{when.second}"
        f"-{when.year}:{when.month}:{when.day}\n\n"
        f"Mode: {player_name}"
    )


def write_save(
    directory: PathLike,
    slot: int,
    mode: int,
    player_name: str,
    turn: int,
    time_to_win: int,
    marks: Sequence[Sequence[int]],
    when: datetime | None = None,
) -> tuple[Path, Path]:
    """Write the save and its description for ``slot``; return both paths."""
    base = Path(directory)
    save_file = base / SAVE_NAME.format(slot)
    description_file = base / DESCRIPTION_NAME.format(slot)
    save_file.write_text(format_save(mode, turn, time_to_win, marks), encoding="utf-8")
    stamp = datetime.now() if when is None else when
    description_file.write_text(format_description(slot, player_name, stamp), encoding="utf-8")
    return save_file, description_file


@dataclass(eq=False)
class SaveFunction(Function):
    """The save page: pick one of the slots, or the last item to go back."""

    directory: Path = Path(".")
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False)

    def start(
        self,
        mode: int,
        player_name: str,
        turn: int,
        time_to_win: int,
        marks: Sequence[Sequence[int]] | None,
    ) -> int | None:
        """Let the user pick a slot and save there; return the slot, or None."""
        if self.static_menu is None or self.dynamic_menu is None:
            return None
        base = Path(self.directory)
        self.static_menu.show()
        for slot in range(MAX_SLOT):
            if (base / SAVE_NAME.format(slot)).exists():
                self.dynamic_menu.component(slot).color = Color.RED_RED
            self.dynamic_menu.show(slot)
        self.dynamic_menu.component(MAX_SLOT).show()
        self.dynamic_menu.draw_bound(0)
        choice = self.dynamic_menu.interact()
        if choice == MAX_SLOT or marks is None:
            return None
        write_save(base, choice, mode, player_name, turn, time_to_win, marks, self.clock())
        return choice
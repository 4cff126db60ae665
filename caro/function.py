"""A screen of the game: a static menu plus an interactive one."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

from caro.files import read_text_file
from caro.keys import read_key
from caro.menus import InteractiveMenu, Menu
from caro.screen import Screen

PathLike = Union[str, Path]


def _listed_paths(list_file: PathLike) -> list[Path]:
    """Return the component paths listed in ``list_file``, relative to it."""
    if not str(list_file):
        return []
    base = Path(list_file).parent
    return [base / line for line in read_text_file(list_file)]


@dataclass(eq=False)
class Function:
    """A page of the game: what it shows and which item the user chose."""

    static_menu: Menu | None = None
    dynamic_menu: InteractiveMenu | None = None
    choice: int = 0

    @classmethod
    def from_files(
        cls,
        static_file: PathLike,
        dynamic_file: PathLike,
        screen: Screen | None = None,
        reader: Callable[[], str] = read_key,
    ) -> Function:
        """Build the page from two files that list component files, one per line."""
        return cls(
            Menu.from_files(_listed_paths(static_file), screen),
            InteractiveMenu.from_files(_listed_paths(dynamic_file), screen, reader),
        )

    def set_color_bound(self, color: int) -> None:
        """Set the colour of the selection frames."""
        if self.dynamic_menu is not None:
            self.dynamic_menu.set_color(color)

    def start(self) -> None:
        """Show the page and, if it has items, let the user choose one."""
        if self.static_menu is None or self.dynamic_menu is None:
            return
        self.static_menu.show()
        if len(self.dynamic_menu) > 0:
            self.dynamic_menu.show()
            self.choice = self.dynamic_menu.interact()

    def start_gradually(self, time_step: float) -> None:
        """Reveal the static part one component per ``time_step`` ms."""
        if self.static_menu is not None:
            self.static_menu.gradually_show(time_step)

    def end_gradually(self, time_step: float) -> None:
        """Hide the static part one component per ``time_step`` ms."""
        if self.static_menu is not None:
            self.static_menu.gradually_hide(time_step)

    def start_specific(self, static_index: int, dynamic_index: int) -> None:
        """Show one component of each menu (all if negative) and take a choice."""
        if self.static_menu is None or self.dynamic_menu is None:
            return
        self.static_menu.show(static_index if static_index >= 0 else None)
        self.dynamic_menu.show(dynamic_index if dynamic_index >= 0 else None)
        self.choice = self.dynamic_menu.interact()

    def end(self) -> int:
        """Hide the page and return the last choice."""
        if self.static_menu is not None and self.dynamic_menu is not None:
            self.static_menu.hide()
            self.dynamic_menu.hide()
        return self.choice
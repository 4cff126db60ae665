"""Static menus and menus whose items the user walks with the keyboard."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Union

from caro.colors import Color
from caro.geometry import Point
from caro.keys import MENU_KEYS, Key, read_key, wait_for
from caro.screen import Screen
from caro.ui import UIBound, UIComponent

PathLike = Union[str, Path]

_UP = ("W", Key.ARROW_UP)
_DOWN = ("S", Key.ARROW_DOWN)
_CONFIRM = ("E", Key.ENTER)


@dataclass(eq=False)
class Menu:
    """An ordered collection of components shown and hidden together."""

    components: list[UIComponent] = field(default_factory=list)

    @classmethod
    def from_files(cls, paths: Iterable[PathLike], screen: Screen | None = None) -> Menu:
        """Build a menu with one component per resource file."""
        return cls([UIComponent.from_file(path, screen) for path in paths])

    def __len__(self) -> int:
        return len(self.components)

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self.components)

    def gradually_show(self, time_step: float) -> None:
        """Show the components one by one, pausing ``time_step`` ms after each."""
        for component in self.components:
            component.show()
            time.sleep(time_step / 1000)

    def gradually_hide(self, time_step: float) -> None:
        """Hide the components one by one, pausing ``time_step`` ms after each."""
        for component in self.components:
            component.hide()
            time.sleep(time_step / 1000)

    def component(self, index: int) -> UIComponent:
        """Return the component at ``index``."""
        return self.components[index]

    def show(self, index: int | None = None) -> None:
        """Show every component, or only the one at ``index`` if it exists."""
        if index is None:
            for component in self.components:
                component.show()
        elif self._valid(index):
            self.components[index].show()

    def hide(self, index: int | None = None) -> None:
        """Hide every component, or only the one at ``index`` if it exists."""
        if index is None:
            for component in self.components:
                component.hide()
        elif self._valid(index):
            self.components[index].hide()


@dataclass(eq=False)
class InteractiveMenu(Menu):
    """A menu of framed items; the frame marks the selected one."""

    components: list[UIBound] = field(default_factory=list)
    reader: Callable[[], str] = field(default=read_key, repr=False)
    current: int = 0

    @classmethod
    def from_files(
        cls,
        paths: Iterable[PathLike],
        screen: Screen | None = None,
        reader: Callable[[], str] = read_key,
    ) -> InteractiveMenu:
        """Build a menu of items read from files, each with a yellow frame."""
        items = []
        for path in paths:
            item = UIBound.from_file(path, screen)
            item.make_bound(Point(2, 2), Color.YELLOW_YELLOW)
            items.append(item)
        return cls(items, reader)

    def component(self, index: int) -> UIBound:
        """Return the item at ``index``."""
        return self.components[index]

    def interact(self) -> int:
        """Move the selection with W/S or arrows until E or Enter; return it."""
        while True:
            key = wait_for(MENU_KEYS, self.reader)
            if key in _UP:
                self.switch_component(-1)
            elif key in _DOWN:
                self.switch_component(1)
            elif key in _CONFIRM:
                return self.current

    def set_color(self, color: int) -> None:
        """Rebuild every item's frame in ``color``."""
        for item in self.components:
            item.make_bound(Point(2, 2), color)

    def switch_component(self, offset: int) -> None:
        """Move the selection by ``offset``, wrapping at either end."""
        self.components[self.current].clear_bound()
        position = self.current + offset
        if position < 0:
            self.current = len(self.components) - 1
        elif position >= len(self.components):
            self.current = 0
        else:
            self.current = position
        self.components[self.current].draw_bound()

    def show(self, index: int | None = None) -> None:
        """Show every item with the first framed, or only the item at ``index``."""
        if index is None:
            for item in self.components:
                item.show()
            if self.components:
                self.components[0].draw_bound()
        elif self._valid(index):
            self.components[index].show()

    def draw_bound(self, index: int) -> None:
        """Move the selection frame to the item at ``index`` if it exists."""
        if self._valid(index):
            self.components[self.current].clear_bound()
            self.current = index
            self.components[index].draw_bound()

    def hide_bound(self, index: int) -> None:
        """Select the item at ``index`` and clear its frame, if it exists."""
        if self._valid(index):
            self.current = index
            self.components[index].clear_bound()

    def hide(self, index: int | None = None) -> None:
        """Hide every item and reset the selection, or only the item at ``index``."""
        if index is None:
            if self.components:
                self.components[self.current].clear_bound()
                for item in self.components:
                    item.hide()
                self.current = 0
        elif self._valid(index):
            self.components[index].hide()
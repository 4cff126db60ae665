"""Board size and line length choices, and the page that changes them."""

from __future__ import annotations

from dataclasses import dataclass, field

from caro.function import Function

TIME_TO_WIN_OFFSET = 4
HOLD_SIZES = (3, 5, 7)


@dataclass
class GameSettings:
    """The chosen board size and marks-in-a-row needed to win.

    ``size_index`` counts from 1 and ``time_to_win_index`` from 0 into ``sizes``;
    the line length may not exceed the board size when it is chosen.
    """

    size_index: int = 1
    time_to_win_index: int = 0
    sizes: tuple[int, ...] = HOLD_SIZES

    @property
    def board_size(self) -> int:
        """Cells along one side of the board."""
        return self.sizes[self.size_index - 1]

    @property
    def time_to_win(self) -> int:
        """Marks in a row needed to win."""
        return self.sizes[self.time_to_win_index]

    def _check(self, choice: int) -> None:
        if not 0 <= choice < len(self.sizes):
            raise ValueError(f"no such setting: {choice}")

    def select_size(self, choice: int) -> bool:
        """Choose the board size by menu item; tell whether it changed."""
        self._check(choice)
        index = choice + 1
        if index == self.size_index:
            return False
        self.size_index = index
        return True

    def select_time_to_win(self, choice: int) -> bool:
        """Choose the line length by menu item if it fits the board; tell whether it changed."""
        self._check(choice)
        if choice == self.time_to_win_index or choice >= self.size_index:
            return False
        self.time_to_win_index = choice
        return True


@dataclass(eq=False)
class SettingFunction(Function):
    """The settings page: pick the board size or the line length, or go back."""

    size_page: Function = field(default_factory=Function)
    time_page: Function = field(default_factory=Function)
    settings: GameSettings = field(default_factory=GameSettings)

    def start(self) -> None:
        """Show the current settings and handle choices until Back is chosen."""
        if self.static_menu is None or self.dynamic_menu is None:
            return
        self.static_menu.show(0)
        self.static_menu.show(self.settings.size_index)
        self.static_menu.show(TIME_TO_WIN_OFFSET)
        self.dynamic_menu.show()
        while True:
            choice = self.dynamic_menu.interact()
            if choice == 0:
                self.setting_size()
            elif choice == 1:
                self.setting_time_to_win()
            elif choice == 2:
                return

    def setting_size(self) -> None:
        """Let the user pick a board size and show the new one."""
        self.size_page.start()
        choice = self.size_page.end()
        old = self.settings.size_index
        if self.settings.select_size(choice) and self.static_menu is not None:
            self.static_menu.hide(old)
            self.static_menu.show(self.settings.size_index)

    def setting_time_to_win(self) -> None:
        """Let the user pick a line length and show the new one."""
        self.time_page.start()
        choice = self.time_page.end()
        old = self.settings.time_to_win_index
        if self.settings.select_time_to_win(choice) and self.static_menu is not None:
            self.static_menu.hide(TIME_TO_WIN_OFFSET + old)
            self.static_menu.show(TIME_TO_WIN_OFFSET + self.settings.time_to_win_index)
"""The game's pages, the main menu that links them, and the command entry."""

from __future__ import annotations

import argparse
import sys
import time
import webbrowser
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from caro.board import Board
from caro.colors import Color
from caro.function import Function
from caro.keys import read_key
from caro.load import LoadFunction, SavedGame
from caro.rounds import RoundManager
from caro.save import SaveFunction
from caro.screen import Screen, default_screen
from caro.settings import SettingFunction

PathLike = Union[str, Path]

MODE = 0
LOAD = 1
SETTING = 2
ABOUT = 3
EXIT_GAME = 4
GAME_MODE_BACK_MENU = 3

_RESET_TERMINAL = "\x1b[0m\x1b[?25h"


@dataclass(eq=False)
class GameModeFunction(Function):
    """The mode page: two players, easy bot, hard bot, or back."""

    play: Optional[Callable[[int], object]] = field(default=None, repr=False)

    def start(self) -> None:
        """Play a round in the chosen mode, again and again until Back."""
        while self.static_menu is not None and self.dynamic_menu is not None:
            self.static_menu.show()
            self.dynamic_menu.show()
            self.choice = self.dynamic_menu.interact()
            self.end()
            if self.choice == GAME_MODE_BACK_MENU:
                return
            if self.play is None:
                raise RuntimeError("no way to play a round is configured")
            self.play(self.choice)


@dataclass(eq=False)
class AboutFunction(Function):
    """The about page; its first item opens the project page, if one is set."""

    url: str | None = None
    opener: Optional[Callable[[str], object]] = field(default=None, repr=False)

    def start(self) -> None:
        """Show the page and open the project page if the first item is chosen."""
        if self.static_menu is None or self.dynamic_menu is None:
            return
        self.static_menu.show()
        self.dynamic_menu.show()
        self.choice = self.dynamic_menu.interact()
        if self.choice == 0 and self.url and self.opener is not None:
            self.opener(self.url)


class GameManager:
    """Builds every page from the resource directory and runs the main menu."""

    def __init__(
        self,
        resources: PathLike = ".",
        screen: Screen | None = None,
        reader: Callable[[], str] = read_key,
        *,
        sleep: Callable[[float], None] = time.sleep,
        about_url: str | None = None,
        opener: Callable[[str], object] = webbrowser.open,
    ) -> None:
        self.resources = Path(resources)
        self.screen = default_screen() if screen is None else screen
        self.reader = reader
        self.sleep = sleep

        self.intro = self._page("Intro_None.txt", "")
        self.outro = self._page("Outro_None.txt", "")
        self.first_menu = self._page("Menu_None.txt", "Menu_Has.txt")

        self.game_mode = self._page("Mode_None.txt", "Mode_Has.txt", GameModeFunction)
        self.game_mode.play = self._play_mode

        self.setting = self._page("Setting_None.txt", "Setting_Has.txt", SettingFunction)
        self.setting.size_page = self._page("", "Setting_Size_Has.txt")
        self.setting.time_page = self._page("", "Setting_Time_Has.txt")

        self.about = self._page("About_None.txt", "About_Has.txt", AboutFunction)
        self.about.url = about_url
        self.about.opener = opener

        self.loader = self._page("Load_None.txt", "Load_Has.txt", LoadFunction)
        self.loader.directory = self.resources
        self.loader.play = self._play_saved

        self.saver = self._page("Save_None.txt", "Save_Has.txt", SaveFunction)
        self.saver.directory = self.resources

    def _resource(self, name: str) -> PathLike:
        return self.resources / name if name else ""

    def _page(self, static_file: str, dynamic_file: str, kind: type = Function):
        return kind.from_files(
            self._resource(static_file),
            self._resource(dynamic_file),
            self.screen,
            self.reader,
        )

    def _board(self, size: int, time_to_win: int, marks=None) -> Board:
        return Board(
            size,
            time_to_win,
            marks,
            resources=self.resources,
            screen=self.screen,
            sleep=self.sleep,
        )

    def _round(self, mode: int, board: Board) -> RoundManager:
        page = self._page("Round_None.txt", "")
        confirm = self._page("Round_Confirm_Out_None.txt", "Round_Confirm_Out_Has.txt")
        confirm.set_color_bound(Color.RED_RED)
        return RoundManager(
            mode,
            board,
            page.static_menu,
            page.dynamic_menu,
            confirm_out=confirm,
            save_page=self.saver,
            reader=self.reader,
            sleep=self.sleep,
        )

    def _play_mode(self, mode: int) -> None:
        settings = self.setting.settings
        rounds = self._round(mode, self._board(settings.board_size, settings.time_to_win))
        rounds.start()
        rounds.end()

    def _play_saved(self, saved: SavedGame) -> None:
        board = self._board(saved.size, saved.time_to_win, saved.marks)
        rounds = self._round(saved.mode, board)
        rounds.start(saved.turn)
        rounds.end()

    def run(self) -> None:
        """Show the intro, run the main menu, then show the outro."""
        self.intro.start_gradually(600)
        self.intro.end_gradually(300)
        self.start_page()
        self.first_menu.end()
        self.outro.start_gradually(600)
        self.outro.end()

    def start_page(self) -> None:
        """Dispatch main menu choices until Exit is chosen."""
        while True:
            self.first_menu.start()
            choice = self.first_menu.end()
            if choice == MODE:
                self.mode_menu()
            elif choice == LOAD:
                self.load_page()
            elif choice == SETTING:
                self.setting_page()
            elif choice == ABOUT:
                self.about_page()
            else:
                return

    def mode_menu(self) -> None:
        """Run the game mode page."""
        self.game_mode.start()
        self.game_mode.end()

    def load_page(self) -> None:
        """Run the load page."""
        self.loader.start()
        self.loader.end()

    def about_page(self) -> None:
        """Run the about page."""
        self.about.start()
        self.about.end()

    def setting_page(self) -> None:
        """Run the settings page."""
        self.setting.start()
        self.setting.end()


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(prog="caro", description="Play caro in the terminal.")
    parser.add_argument(
        "--resources",
        default=".",
        help="directory holding the game's resource files and save slots",
    )
    parser.add_argument("--about-url", default=None, help="page opened from the about screen")
    args = parser.parse_args(argv)

    screen = default_screen()
    screen.setup()
    try:
        GameManager(args.resources, screen, about_url=args.about_url).run()
    except (EOFError, KeyboardInterrupt):
        return 1
    finally:
        sys.stdout.write(_RESET_TERMINAL)
        sys.stdout.flush()
    return 0
"""One match between player 1 and a human or computer opponent."""

from __future__ import annotations

import time
from typing import Callable

from caro.board import WAIT_TO_DRAW, Board
from caro.colors import Color
from caro.function import Function
from caro.keys import read_key
from caro.menus import InteractiveMenu, Menu
from caro.players import EasyBot, HardBot, MoveResult, Player, RealPlayer
from caro.save import SaveFunction

REAL = 0
EASY_BOT = 1
HARD_BOT = 2
ICON_OFFSET = 6
WIN_OFFSET = 2
CONGRATULATE_FRAMES = 50


def _opponent(mode: int, board: Board, reader: Callable[[], str]) -> Player:
    prototypes = (RealPlayer(reader=reader), EasyBot(), HardBot())
    if not 0 <= mode < len(prototypes):
        raise ValueError(f"no such game mode: {mode}")
    return prototypes[mode].clone(2, board)


class RoundManager(Function):
    """Runs rounds on one board until the players choose to leave.

    The static menu holds the title parts (0, 1), the results from
    ``WIN_OFFSET`` on (draw, player 1, player 2, bot) and the player icons
    from ``ICON_OFFSET`` on (player 1, then one per opponent kind).
    """

    def __init__(
        self,
        mode: int,
        board: Board,
        static_menu: Menu,
        dynamic_menu: InteractiveMenu | None = None,
        *,
        confirm_out: Function | None = None,
        save_page: SaveFunction | None = None,
        reader: Callable[[], str] = read_key,
        sleep: Callable[[float], None] = time.sleep,
        player1: Player | None = None,
        player2: Player | None = None,
    ) -> None:
        super().__init__(static_menu, dynamic_menu if dynamic_menu is not None else InteractiveMenu())
        self.mode = mode
        self.board = board
        self.confirm_out = confirm_out if confirm_out is not None else Function()
        self.save_page = save_page if save_page is not None else SaveFunction()
        self.sleep = sleep
        self.player1 = player1 if player1 is not None else RealPlayer(1, board, reader)
        self.player2 = player2 if player2 is not None else _opponent(mode, board, reader)
        self.player2_index = self.player2.code + ICON_OFFSET + 1
        self.live_game = False

    def start(self, turn: int = 0) -> None:
        """Play rounds, the first starting with ``turn``, until leaving is confirmed."""
        while True:
            self.static_menu.show(0)
            self.static_menu.show(1)
            self.static_menu.show(ICON_OFFSET)
            self.static_menu.show(self.player2_index)

            win = self.start_round(turn)
            turn = 0
            self.board.clear()

            if win >= 0:
                self.board.clear_buffer()
                shown = win + WIN_OFFSET
                if win >= 2 and self.player2.code > 0:
                    shown += 1
                self.congratulate(shown)

            self.confirm_out.start()
            if self.confirm_out.end() == 0:
                return

    def start_round(self, turn: int = 0) -> int:
        """Play one round; return 0 for a draw, the winner's order, or -1 on exit."""
        self.board.draw()
        while not self.live_game:
            icon_index = ICON_OFFSET if turn == 0 else self.player2_index
            icon = self.static_menu.component(icon_index)
            icon.color = Color.YELLOW_YELLOW
            self.static_menu.show(icon_index)
            icon.color = Color.GRAY_GRAY

            player = self.player1 if turn == 0 else self.player2
            outcome = player.get_move()
            self.static_menu.show(icon_index)

            if outcome == MoveResult.SAVE:
                self.board.clear()
                self.save_page.start(
                    self.mode,
                    self.player2.name,
                    turn,
                    self.board.time_to_win,
                    self.board.marks,
                )
                self.save_page.end()
                self.board.draw()

            if outcome == MoveResult.EXIT:
                return -int(outcome)

            if self.board.is_end_game():
                self.board.show_end_game()
                return turn + 1
            if self.board.is_full():
                return 0
            turn = (turn + 1) % 2
        return 0

    def congratulate(self, winner: int) -> None:
        """Flash the result component ``winner`` in changing colours."""
        self.end()
        shown = self.static_menu.component(winner)
        for frame in range(CONGRATULATE_FRAMES):
            shown.color = (frame * 17) % 255
            shown.show()
            self.sleep(WAIT_TO_DRAW)
        shown.hide()
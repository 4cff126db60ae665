"""Players: a human at the keyboard and two computer opponents."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable, ClassVar

from caro.board import Board
from caro.geometry import PairIndex
from caro.keys import PLAYER_ONE_KEYS, PLAYER_TWO_KEYS, Key, read_key, wait_for

WIN_SCORE = 10
LOSE_SCORE = -10
TIE_SCORE = 0
MARK_BOT = 2
MARK_PLAYER = 1

_SCORES = (TIE_SCORE, LOSE_SCORE, WIN_SCORE)

_PLAYER_ONE_MOVES = {"W": (-1, 0), "A": (0, -1), "D": (0, 1), "S": (1, 0)}
_PLAYER_TWO_MOVES = {
    Key.ARROW_UP.value: (-1, 0),
    Key.ARROW_LEFT.value: (0, -1),
    Key.ARROW_RIGHT.value: (0, 1),
    Key.ARROW_DOWN.value: (1, 0),
}


class MoveResult(IntEnum):
    """What a turn ended with."""

    MOVED = 0
    EXIT = 1
    SAVE = 2


class Player(ABC):
    """A participant placing mark ``order`` (1 or 2) on ``board``."""

    name: ClassVar[str] = ""
    code: ClassVar[int] = -1

    def __init__(self, order: int = 0, board: Board | None = None) -> None:
        self.order = order
        self.board = board
        self._score = 0

    @property
    def score(self) -> int:
        """Points won so far; only positive values are accepted."""
        return self._score

    @score.setter
    def score(self, value: int) -> None:
        if value > 0:
            self._score = value

    def _require_board(self) -> Board:
        if self.board is None:
            raise RuntimeError(f"{self.name or type(self).__name__} has no board")
        return self.board

    @abstractmethod
    def get_move(self) -> MoveResult:
        """Play one turn and tell how it ended."""

    @abstractmethod
    def clone(self, order: int, board: Board) -> Player:
        """Return a new player of the same kind for ``order`` on ``board``."""


class RealPlayer(Player):
    """A person: player 1 uses W/A/S/D and E, player 2 the arrows and Enter."""

    name = "2 Players"
    code = 0

    def __init__(
        self,
        order: int = 0,
        board: Board | None = None,
        reader: Callable[[], str] = read_key,
    ) -> None:
        super().__init__(order, board)
        self.reader = reader

    def get_move(self) -> MoveResult:
        """Move the cursor until a mark is placed, or Esc or Tab is pressed."""
        board = self._require_board()
        if self.order == 1:
            keys, moves, confirm = PLAYER_ONE_KEYS, _PLAYER_ONE_MOVES, "E"
        else:
            keys, moves, confirm = PLAYER_TWO_KEYS, _PLAYER_TWO_MOVES, Key.ENTER.value
        while True:
            key = wait_for(keys, self.reader)
            if key in moves:
                board.move_cursor(*moves[key])
            elif key == confirm:
                if board.place(self.order):
                    return MoveResult.MOVED
            elif key == Key.ESC:
                return MoveResult.EXIT
            elif key == Key.TAB:
                return MoveResult.SAVE

    def clone(self, order: int, board: Board) -> RealPlayer:
        return RealPlayer(order, board, self.reader)


class EasyBot(Player):
    """A computer player that marks a random empty cell."""

    name = "Easy Bot"
    code = 1

    def __init__(
        self,
        order: int = 0,
        board: Board | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(order, board)
        self.rng = rng if rng is not None else random.Random()

    def get_move(self) -> MoveResult:
        """Mark one empty cell chosen uniformly at random."""
        board = self._require_board()
        free = board.available_slots()
        if not free:
            raise ValueError("no empty cell left to mark")
        index = self.rng.choice(free)
        board.set_current_index(index.row, index.col)
        board.place(self.order)
        return MoveResult.MOVED

    def clone(self, order: int, board: Board) -> EasyBot:
        return EasyBot(order, board, self.rng)


class HardBot(Player):
    """A computer player searching the whole game tree with alpha-beta pruning."""

    name = "Hard Bot"
    code = 2

    def alpha_beta(self, who: int, depth: int, alpha: int, beta: int) -> tuple[int, PairIndex]:
        """Return the best score reachable with ``who`` to move, and its move.

        The bot (mark 2) maximises, the player (mark 1) minimises. The board is
        left as it was found.
        """
        board = self._require_board()
        best_move = PairIndex.clamped(-1, -1)
        best_score = LOSE_SCORE if who == MARK_BOT else WIN_SCORE

        if board.is_full() or board.is_end_game():
            return _SCORES[board.winner], best_move

        for index in board.available_slots():
            if board.mark_at(index.row, index.col) != 0:
                continue
            board.place_at(who, index)
            if who == MARK_BOT:
                score, _ = self.alpha_beta(MARK_PLAYER, depth + 1, alpha, beta)
                if best_score < score:
                    best_score = score
                    best_move = index
                    alpha = max(alpha, best_score)
            else:
                score, _ = self.alpha_beta(MARK_BOT, depth + 1, alpha, beta)
                if best_score > score:
                    best_score = score
                    best_move = index
                    beta = min(beta, best_score)
            board.retrieve(index)
            if beta <= alpha:
                break

        return best_score, best_move

    def get_move(self) -> MoveResult:
        """Play the move the search rates best."""
        board = self._require_board()
        _, move = self.alpha_beta(MARK_BOT, 0, LOSE_SCORE, WIN_SCORE)
        board.set_current_index(move.row, move.col)
        board.place(self.order)
        return MoveResult.MOVED

    def clone(self, order: int, board: Board) -> HardBot:
        return HardBot(order, board)
"""
Game session for Tic-Tac-Toe.
Owns the board and whose turn it is, and applies moves.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .board import Board, CellOccupiedError, Mark
from .win_checker import Outcome, WinChecker


# Returns True for X to start, False for O
CoinFlip = Callable[[], bool]


def random_coin() -> bool:
    """Fair coin flip."""
    return random.random() < 0.5


class MoveError(Enum):
    """Why a move was rejected. The session is left untouched."""
    CELL_OCCUPIED = "cell_occupied"
    GAME_ALREADY_OVER = "game_already_over"


@dataclass(frozen=True)
class MoveEffect:
    """What an accepted move changed."""
    index: int                      # Cell that was written
    mark: Mark                      # Mark that was written there
    board: Tuple[Mark, ...]         # Board after the move
    turn: Optional[Mark]            # Who moves next, None once the game is over
    outcome: Outcome
    winning_line: Optional[Tuple[int, int, int]] = None

    def as_view(self) -> "GameView":
        """The session as it stands right after this move."""
        return GameView(
            board=self.board,
            turn=self.turn,
            outcome=self.outcome,
            winning_line=self.winning_line,
        )


@dataclass(frozen=True)
class MoveResult:
    """Result of apply_move: either an effect or an error."""
    effect: Optional[MoveEffect] = None
    error: Optional[MoveError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> Optional[str]:
        if self.error == MoveError.CELL_OCCUPIED:
            return "That cell is already taken!"
        if self.error == MoveError.GAME_ALREADY_OVER:
            return "Game is already over!"
        return None


@dataclass(frozen=True)
class GameView:
    """Read-only picture of a session for the presentation layer."""
    board: Tuple[Mark, ...]
    turn: Optional[Mark]
    outcome: Outcome
    winning_line: Optional[Tuple[int, int, int]] = None


class GameSession:
    """
    One game of Tic-Tac-Toe.

    The session is the only writer of its board. It is either active
    (someone is to move) or terminal (won or drawn). The first mover is
    picked by the coin: X on True, O on False.
    """

    def __init__(self, coin: Optional[CoinFlip] = None):
        """
        Start a new game.

        Args:
            coin: Random boolean source for the first mover.
                Defaults to a fair coin.
        """
        self._coin = coin if coin is not None else random_coin
        self._board = Board()
        self._win_checker = WinChecker()
        self._current_mark = self._flip()
        self._outcome = Outcome.in_progress()

    def _flip(self) -> Mark:
        return Mark.X if self._coin() else Mark.O

    @property
    def is_game_over(self) -> bool:
        return self._outcome.is_terminal

    @property
    def current_mark(self) -> Optional[Mark]:
        """Mark to move next, None once the game is over."""
        return None if self.is_game_over else self._current_mark

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    def apply_move(self, index: int) -> MoveResult:
        """
        Place the current player's mark.

        Args:
            index: Cell index (0-8).

        Returns:
            MoveResult with the effect, or the reason it was rejected.

        Raises:
            IndexOutOfRangeError: index is not 0-8. This is a caller bug,
                not a game rule.
        """
        if self.is_game_over:
            # Still reject garbage indices the same way as during play
            self._board.get(index)
            return MoveResult(error=MoveError.GAME_ALREADY_OVER)

        mark = self._current_mark
        try:
            self._board.set(index, mark)
        except CellOccupiedError:
            return MoveResult(error=MoveError.CELL_OCCUPIED)

        self._outcome = self._win_checker.evaluate(self._board)
        if not self._outcome.is_terminal:
            self._current_mark = mark.opposite()

        return MoveResult(effect=MoveEffect(
            index=index,
            mark=mark,
            board=self._board.snapshot(),
            turn=self.current_mark,
            outcome=self._outcome,
            winning_line=self._win_checker.get_winning_line(self._board),
        ))

    def restart(self):
        """Clear the board and flip for a new first mover."""
        self._board.reset()
        self._current_mark = self._flip()
        self._outcome = Outcome.in_progress()

    def current_view(self) -> GameView:
        """Snapshot of the board, whose turn it is, and the outcome."""
        return GameView(
            board=self._board.snapshot(),
            turn=self.current_mark,
            outcome=self._outcome,
            winning_line=self._win_checker.get_winning_line(self._board),
        )

    def valid_moves(self) -> List[int]:
        """Empty cells, or nothing once the game is over."""
        if self.is_game_over:
            return []
        return self._board.empty_cells()

    def __str__(self) -> str:
        view = self.current_view()
        lines = [str(Board(view.board)), ""]
        if view.outcome.is_terminal:
            lines.append(view.outcome.message)
        else:
            lines.append(f"Current symbol is {view.turn}")
        return "\n".join(lines)

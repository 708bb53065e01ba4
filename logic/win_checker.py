"""
Win checker for Tic-Tac-Toe.
Works out whether a board is won, drawn, or still in play.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .board import CELL_COUNT, Board, Mark


# All possible winning lines (as cell indices)
WINNING_LINES = np.array([
    # Rows
    [0, 1, 2],
    [3, 4, 5],
    [6, 7, 8],
    # Columns
    [0, 3, 6],
    [1, 4, 7],
    [2, 5, 8],
    # Diagonals
    [0, 4, 8],
    [2, 4, 6],
])

# Marks are checked in this order, so X wins ties
PLAYER_MARKS = (Mark.X, Mark.O)


class OutcomeKind(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    winner is set only for WIN.
    """
    kind: OutcomeKind
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(OutcomeKind.IN_PROGRESS)

    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        if mark not in PLAYER_MARKS:
            raise ValueError(f"Only X or O can win, got {mark}")
        return cls(OutcomeKind.WIN, mark)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeKind.DRAW)

    @property
    def is_terminal(self) -> bool:
        """True for a win or a draw."""
        return self.kind != OutcomeKind.IN_PROGRESS

    @property
    def message(self) -> str:
        """Announcement text, empty while the game is running."""
        if self.kind == OutcomeKind.WIN:
            return f"The winner is {self.winner}!"
        if self.kind == OutcomeKind.DRAW:
            return "It's a draw!"
        return ""

    def __str__(self) -> str:
        if self.kind == OutcomeKind.WIN:
            return f"Win({self.winner})"
        return "Draw" if self.kind == OutcomeKind.DRAW else "InProgress"


BoardLike = Union[Board, Sequence[Mark]]


class WinChecker:
    """
    Checks for win conditions in Tic-Tac-Toe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally).

    Holds no state, every method reads a board and returns a value.
    """

    def _cell_values(self, board: BoardLike) -> np.ndarray:
        cells = board.snapshot() if isinstance(board, Board) else tuple(board)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"Expected 9 cells, got {len(cells)}")
        return np.array([mark.value for mark in cells])

    def _completed_lines(self, values: np.ndarray, mark: Mark) -> np.ndarray:
        """Indices into WINNING_LINES of the lines fully held by mark."""
        counts = (values[WINNING_LINES] == mark.value).sum(axis=1)
        # 2 marks and an empty cell is not a line
        return np.flatnonzero(counts == 3)

    def check_winner(self, board: BoardLike) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: A Board or a 9-mark snapshot.

        Returns:
            The winning Mark, or None if no winner.
        """
        values = self._cell_values(board)
        for mark in PLAYER_MARKS:
            if self._completed_lines(values, mark).size:
                return mark
        return None

    def get_winning_line(self, board: BoardLike) -> Optional[Tuple[int, int, int]]:
        """
        Get the first completed line of the winner, if there is one.

        Returns:
            Three cell indices, or None.
        """
        values = self._cell_values(board)
        for mark in PLAYER_MARKS:
            lines = self._completed_lines(values, mark)
            if lines.size:
                return tuple(int(i) for i in WINNING_LINES[lines[0]])
        return None

    def check_draw(self, board: BoardLike) -> bool:
        """True if the board is full and nobody has a line."""
        values = self._cell_values(board)
        if self.check_winner(board) is not None:
            return False
        return not (values == Mark.EMPTY.value).any()

    def evaluate(self, board: BoardLike) -> Outcome:
        """
        Compute the outcome of a board.

        Args:
            board: A Board or a 9-mark snapshot. Never modified.

        Returns:
            Win(X) if X has a line, else Win(O) if O has a line,
            else Draw if the board is full, else InProgress.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.win(winner)
        if self.check_draw(board):
            return Outcome.draw()
        return Outcome.in_progress()


def all_lines() -> List[Tuple[int, int, int]]:
    """The 8 winning lines as plain tuples."""
    return [tuple(int(i) for i in line) for line in WINNING_LINES]

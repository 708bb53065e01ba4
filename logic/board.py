"""
Board for Tic-Tac-Toe.
Holds the 9 cells of the 3x3 grid and guards direct mutation.

Cells are laid out in row-major order:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Mark(Enum):
    """What a cell can hold."""
    EMPTY = 0
    X = 1
    O = 2

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        raise ValueError("EMPTY has no opposite")

    def __str__(self) -> str:
        return "Empty" if self == Mark.EMPTY else self.name


class BoardError(Exception):
    """Base class for board errors."""


class IndexOutOfRangeError(BoardError, IndexError):
    """A cell index outside 0-8 was used."""

    def __init__(self, index):
        super().__init__(f"Cell index {index!r} is out of range (0-{CELL_COUNT - 1})")
        self.index = index


class CellOccupiedError(BoardError):
    """Tried to write into a cell that is not empty."""

    def __init__(self, index: int, mark: Mark):
        super().__init__(f"Cell {index} is already occupied by {mark}")
        self.index = index
        self.mark = mark


def cell_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise IndexOutOfRangeError((row, col))
    return row * BOARD_SIZE + col


class Board:
    """
    The 3x3 grid of marks.

    The board only knows about cells: it does not know whose turn it is.
    Writing into an occupied cell is the one thing it refuses.
    """

    def __init__(self, cells: Optional[Iterable[Mark]] = None):
        """
        Create a board.

        Args:
            cells: Optional 9 marks to start from. Empty board if omitted.
        """
        if cells is None:
            self._cells: List[Mark] = [Mark.EMPTY] * CELL_COUNT
        else:
            self._cells = list(cells)
            if len(self._cells) != CELL_COUNT:
                raise ValueError(
                    f"A board needs exactly {CELL_COUNT} cells, got {len(self._cells)}"
                )
            for mark in self._cells:
                if not isinstance(mark, Mark):
                    raise ValueError(f"Not a mark: {mark!r}")

    def _check_index(self, index: int):
        # bool is an int subclass but never a valid cell
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRangeError(index)
        if not 0 <= index < CELL_COUNT:
            raise IndexOutOfRangeError(index)

    def get(self, index: int) -> Mark:
        """Get the mark at a cell."""
        self._check_index(index)
        return self._cells[index]

    def set(self, index: int, mark: Mark):
        """
        Write a mark into an empty cell.

        Args:
            index: Cell index (0-8).
            mark: The mark to write.

        Raises:
            IndexOutOfRangeError: index is not 0-8.
            CellOccupiedError: the cell already holds a mark.
        """
        self._check_index(index)
        current = self._cells[index]
        if current != Mark.EMPTY:
            raise CellOccupiedError(index, current)
        self._cells[index] = mark

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return Mark.EMPTY not in self._cells

    def reset(self):
        """Clear every cell."""
        self._cells = [Mark.EMPTY] * CELL_COUNT

    def empty_cells(self) -> List[int]:
        """Indices of all empty cells."""
        return [i for i, mark in enumerate(self._cells) if mark == Mark.EMPTY]

    def snapshot(self) -> Tuple[Mark, ...]:
        """Immutable copy of the cells."""
        return tuple(self._cells)

    def __len__(self) -> int:
        return CELL_COUNT

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.snapshot()!r})"

    def __str__(self) -> str:
        return render_board(self._cells)


def render_board(cells: Iterable[Mark]) -> str:
    """
    Render cells as text. Empty cells show their index so a console
    player knows what to type.
    """
    cells = list(cells)
    rows = []
    for row in range(BOARD_SIZE):
        labels = []
        for col in range(BOARD_SIZE):
            index = row * BOARD_SIZE + col
            mark = cells[index]
            labels.append(str(index) if mark == Mark.EMPTY else mark.name)
        rows.append(" " + " | ".join(labels))
    return "\n---+---+---\n".join(rows)

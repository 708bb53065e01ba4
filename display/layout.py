"""
Board geometry for Tic-Tac-Toe.
Maps cell indices to canvas positions and canvas clicks back to cells.
"""

from typing import Optional, Tuple

import numpy as np

from logic.board import BOARD_SIZE, CELL_COUNT, IndexOutOfRangeError

from .config import DisplayConfig


class BoardLayout:
    """
    Places the 3x3 grid in the middle of a canvas.

    Canvas coordinates grow right (x) and down (y). Cell 0 is top-left,
    cell 8 bottom-right.
    """

    def __init__(
        self,
        config: Optional[DisplayConfig] = None,
        width: Optional[float] = None,
        height: Optional[float] = None
    ):
        """
        Args:
            config: Display settings.
            width: Canvas width, defaults to the window width.
            height: Canvas height, defaults to the window height.
        """
        self.config = config or DisplayConfig()
        self.width = width if width is not None else self.config.WINDOW_WIDTH
        self.height = height if height is not None else self.config.WINDOW_HEIGHT
        self.cell_size = self.config.cell_size
        self.centers = self._compute_centers()

    def _compute_centers(self) -> np.ndarray:
        """(9, 2) array of cell centres, row-major."""
        offsets = (np.arange(BOARD_SIZE) - (BOARD_SIZE - 1) / 2.0) * self.config.cell_pitch
        rows, cols = np.meshgrid(offsets, offsets, indexing="ij")
        centers = np.stack([cols.ravel(), rows.ravel()], axis=1)
        return centers + np.array([self.width / 2.0, self.height / 2.0])

    def cell_center(self, index: int) -> Tuple[float, float]:
        """Centre of a cell on the canvas."""
        if not 0 <= index < CELL_COUNT:
            raise IndexOutOfRangeError(index)
        x, y = self.centers[index]
        return float(x), float(y)

    def cell_bounds(self, index: int) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) of a cell."""
        x, y = self.cell_center(index)
        half = self.cell_size / 2.0
        return x - half, y - half, x + half, y + half

    def cell_at(self, x: float, y: float) -> Optional[int]:
        """
        Find the cell under a canvas point.

        Args:
            x: Canvas x.
            y: Canvas y.

        Returns:
            Cell index, or None for gaps and points off the board.
        """
        half = self.cell_size / 2.0
        point = np.array([x, y], dtype=float)
        low = self.centers - half
        high = self.centers + half
        # Half-open so a point on a shared edge picks one cell
        inside = np.all((point >= low) & (point < high), axis=1)
        hits = np.flatnonzero(inside)
        if hits.size == 0:
            return None
        return int(hits[0])

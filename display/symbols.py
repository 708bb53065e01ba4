"""
Symbol textures for Tic-Tac-Toe.
Draws the X, O and empty cell images with Pillow.
"""

from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from logic.board import Mark
from logic.win_checker import Outcome

from .config import DisplayConfig


class SymbolRenderer:
    """
    Draws and caches one texture per (mark, highlighted) pair.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()
        self.size = int(self.config.cell_size)
        self._cache: Dict[Tuple[Mark, bool], Image.Image] = {}

    def get(self, mark: Mark, highlighted: bool = False) -> Image.Image:
        """
        Get the texture for a mark.

        Args:
            mark: The cell content.
            highlighted: Draw the cell as part of the winning line.

        Returns:
            RGBA image of SYMBOL_SIZE * SYMBOL_SCALE pixels square.
        """
        key = (mark, highlighted)
        if key not in self._cache:
            self._cache[key] = self._draw(mark, highlighted)
        return self._cache[key]

    def _draw(self, mark: Mark, highlighted: bool) -> Image.Image:
        size = self.size
        background = self.config.HIGHLIGHT_COLOR if highlighted else self.config.EMPTY_COLOR
        image = Image.new("RGBA", (size, size), background)
        draw = ImageDraw.Draw(image)

        stroke = max(1, int(size * self.config.STROKE_RATIO))
        margin = size // 5

        if mark == Mark.X:
            draw.line(
                [(margin, margin), (size - margin, size - margin)],
                fill=self.config.X_COLOR, width=stroke
            )
            draw.line(
                [(margin, size - margin), (size - margin, margin)],
                fill=self.config.X_COLOR, width=stroke
            )
        elif mark == Mark.O:
            draw.ellipse(
                [margin, margin, size - margin, size - margin],
                outline=self.config.O_COLOR, width=stroke
            )

        return image


def current_symbol_text(mark: Optional[Mark]) -> str:
    """Label for whose turn it is. Empty once the game is over."""
    if mark is None:
        return ""
    return f"Current symbol is {mark}"


def winner_text(outcome: Outcome) -> str:
    """Label announcing the result. Empty while the game is running."""
    return outcome.message

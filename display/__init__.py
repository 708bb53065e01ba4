"""
Display module for Tic-Tac-Toe.
Window settings, board geometry, and symbol textures.
"""

from .config import DisplayConfig
from .layout import BoardLayout
from .symbols import SymbolRenderer, current_symbol_text, winner_text

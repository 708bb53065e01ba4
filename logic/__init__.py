"""
Logic module for Tic-Tac-Toe.
Handles the board, win detection, and the game session.
"""

__version__ = "1.0.0"

from .board import (
    Board,
    BoardError,
    CellOccupiedError,
    IndexOutOfRangeError,
    Mark,
    cell_index,
)
from .win_checker import Outcome, OutcomeKind, WinChecker, WINNING_LINES
from .game_state import GameSession, GameView, MoveEffect, MoveError, MoveResult

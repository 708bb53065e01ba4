"""
Test script for Tic-Tac-Toe modules.
Run this to verify all components work before playing:

    python test_modules.py

The same tests run under pytest.
"""

import sys

from logic.board import Mark
from logic.win_checker import Outcome
from main import ConsoleGame, fixed_coin


def scripted(*lines):
    """Line reader that replays lines, then quits."""
    queue = list(lines) + ["q"]
    return lambda prompt: queue.pop(0)


def test_package_exports():
    import logic
    import display

    assert logic.__version__
    session = logic.GameSession(coin=lambda: True)
    assert session.current_mark == logic.Mark.X
    assert display.BoardLayout().cell_at(300, 300) == 4


def test_fixed_coin():
    assert fixed_coin("x")() is True
    assert fixed_coin("O")() is False


def test_console_game_plays_to_a_win():
    game = ConsoleGame(coin=fixed_coin("x"), read=scripted("0", "3", "1", "4", "2"))
    game.start()
    assert game.session.outcome == Outcome.win(Mark.X)
    assert not game.is_running


def test_console_game_ignores_bad_input():
    game = ConsoleGame(coin=fixed_coin("o"), read=scripted("hello", "9", "-1", "²", "4", "4"))
    game.start()
    view = game.session.current_view()
    assert view.board.count(Mark.O) == 1
    assert view.board.count(Mark.X) == 0
    assert view.turn == Mark.X


def test_console_game_restart():
    game = ConsoleGame(coin=fixed_coin("x"), read=scripted("0", "3", "1", "4", "2", "5", "r", "8"))
    game.start()
    view = game.session.current_view()
    assert view.outcome == Outcome.in_progress()
    assert view.board[8] == Mark.X
    assert view.board.count(Mark.EMPTY) == 8


def test_console_game_stops_on_eof():
    def read(prompt):
        raise EOFError

    game = ConsoleGame(coin=fixed_coin("x"), read=read)
    game.start()
    assert not game.is_running


def run_all_tests():
    """Run every test function in the project's test modules."""
    import pytest

    print("="*60)
    print("   Tic-Tac-Toe - Module Tests")
    print("="*60)

    code = pytest.main(["-q", "test_logic.py", "test_display.py", "test_ui.py", "test_modules.py"])

    print("="*60)
    if code == 0:
        print("\nAll tests passed! Ready to play Tic-Tac-Toe.\n")
    else:
        print("\nSome tests failed. Check the errors above.\n")
    return int(code)


if __name__ == "__main__":
    sys.exit(run_all_tests())

"""
Main entry point for Tic-Tac-Toe.

Two players share one machine and take turns. The window UI starts by
default; --console plays in the terminal instead.
"""

import argparse
from typing import Callable, Optional

from logic.board import Board
from logic.game_state import CoinFlip, GameSession, MoveError


RESTART_COMMANDS = ("r", "restart")
QUIT_COMMANDS = ("q", "quit", "exit")


class ConsoleGame:
    """
    Text front end for a GameSession.

    Commands:
        0-8     place the current symbol in that cell
        r       restart the game
        q       quit
    """

    def __init__(
        self,
        coin: Optional[CoinFlip] = None,
        read: Callable[[str], str] = input
    ):
        """
        Args:
            coin: Random boolean source for the first mover.
            read: Line reader, input() by default.
        """
        self.session = GameSession(coin=coin)
        self.read = read
        self.is_running = False

    def start(self):
        """Play until the user quits."""
        print("\nStarting Tic-Tac-Toe...")
        print("Type a cell number (0-8), 'r' to restart, 'q' to quit\n")

        self.is_running = True
        self._show()
        while self.is_running:
            self._turn()

    def _prompt(self) -> str:
        if self.session.is_game_over:
            return "Game over - 'r' to play again, 'q' to quit: "
        return f"{self.session.current_mark} to move: "

    def _turn(self):
        """Read and handle one command."""
        try:
            command = self.read(self._prompt()).strip().lower()
        except EOFError:
            self.is_running = False
            return

        if command in QUIT_COMMANDS:
            self.is_running = False
            return

        if command in RESTART_COMMANDS:
            self.session.restart()
            print("\nGame restarted!")
            self._show()
            return

        # isdecimal, not isdigit: "²" is a digit that int() rejects
        if not command.isdecimal() or not 0 <= int(command) <= 8:
            print("Please enter a cell number from 0 to 8.")
            return

        result = self.session.apply_move(int(command))
        if not result.is_valid:
            print(result.error_message)
            if result.error == MoveError.GAME_ALREADY_OVER:
                print("Type 'r' to start a new game.")
            return

        self._show()

    def _show(self):
        """Print the board and status."""
        view = self.session.current_view()
        print()
        print(Board(view.board))
        print()
        if view.outcome.is_terminal:
            print(f"*** {view.outcome.message} ***")
        else:
            print(f"Current symbol is {view.turn}")


def fixed_coin(first: str) -> CoinFlip:
    """Coin that always lands the same way, for --first."""
    x_starts = first.lower() == "x"
    return lambda: x_starts


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe for two players")
    parser.add_argument(
        "--console",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--first",
        choices=["x", "o"],
        type=str.lower,
        help="Who moves first (random if not given)"
    )

    args = parser.parse_args(argv)
    coin = fixed_coin(args.first) if args.first else None

    # Launch UI by default
    if not args.console:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   Tic-Tac-Toe")
        print("="*60 + "\n")
        ui = TicTacToeUI(coin=coin)
        ui.run()
        return

    game = ConsoleGame(coin=coin)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()

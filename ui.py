"""
Tic-Tac-Toe UI
A graphical interface for Tic-Tac-Toe using Tkinter.

Shows:
- Menu with "Start game" and "Quit game"
- The 3x3 board, clickable
- Whose turn it is and the winner
- "Restart game" and "Quit game" during play
"""

import tkinter as tk
from typing import Dict, List, Optional

from PIL import ImageTk

# Logic imports
from logic.game_state import CoinFlip, GameSession, GameView, MoveEffect

# Display imports
from display.config import DisplayConfig, to_hex
from display.layout import BoardLayout
from display.symbols import SymbolRenderer, current_symbol_text, winner_text


class TicTacToeUI:
    """
    Main UI class for Tic-Tac-Toe.

    Holds one GameSession while the game screen is shown. Going back to
    the menu drops it, starting a game creates a new one.
    """

    def __init__(self, config: Optional[DisplayConfig] = None, coin: Optional[CoinFlip] = None):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.coin = coin
        self.session: Optional[GameSession] = None

        self.layout = BoardLayout(self.config, self.config.WINDOW_WIDTH, self.config.canvas_height)
        self.renderer = SymbolRenderer(self.config)
        # Tk drops images that are not referenced from Python
        self._photos: Dict[tuple, ImageTk.PhotoImage] = {}
        self._screen_widgets: List[tk.Widget] = []

        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter window."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.geometry(f"{self.config.WINDOW_WIDTH}x{self.config.WINDOW_HEIGHT}")
        resizable = self.config.WINDOW_RESIZABLE
        self.root.resizable(resizable, resizable)
        self.root.configure(bg=to_hex(self.config.BACKGROUND_COLOR))

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

        self._show_menu()

    # ==================== WIDGETS ====================

    def _make_button(self, parent: tk.Widget, text: str, command) -> tk.Button:
        """Create a button that changes colour on hover and press."""
        normal = to_hex(self.config.BUTTON_NORMAL_COLOR)
        hovered = to_hex(self.config.BUTTON_HOVERED_COLOR)
        pressed = to_hex(self.config.BUTTON_PRESSED_COLOR)

        button = tk.Button(
            parent,
            text=text,
            font=(self.config.FONT_FAMILY, self.config.BUTTON_FONT_SIZE, 'bold'),
            bg=normal,
            fg=to_hex(self.config.TEXT_COLOR),
            activebackground=hovered,
            activeforeground=to_hex(self.config.TEXT_COLOR),
            relief='flat',
            padx=self.config.BUTTON_PADDING,
            pady=self.config.BUTTON_PADDING,
            command=command
        )
        button.bind("<Enter>", lambda e: button.configure(bg=hovered))
        button.bind("<Leave>", lambda e: button.configure(bg=normal))
        # X11 paints activebackground while the pointer is over the button
        button.bind("<ButtonPress-1>", lambda e: button.configure(activebackground=pressed))
        button.bind("<ButtonRelease-1>", lambda e: button.configure(activebackground=hovered))
        return button

    def _make_label(self, parent: tk.Widget) -> tk.Label:
        return tk.Label(
            parent,
            text="",
            font=(self.config.FONT_FAMILY, self.config.FONT_SIZE, 'bold'),
            bg=to_hex(self.config.BACKGROUND_COLOR),
            fg=to_hex(self.config.TEXT_COLOR)
        )

    def _clear_screen(self):
        for widget in self._screen_widgets:
            widget.destroy()
        self._screen_widgets = []

    # ==================== MENU SCREEN ====================

    def _show_menu(self):
        """Show the start menu."""
        self._clear_screen()
        self.session = None

        frame = tk.Frame(self.root, bg=to_hex(self.config.BACKGROUND_COLOR))
        frame.place(relx=0.5, rely=0.5, anchor='center')
        self._screen_widgets.append(frame)

        self._make_button(frame, self.config.START_GAME_LABEL, self._start_game).pack(side=tk.LEFT, padx=10)
        self._make_button(frame, self.config.QUIT_GAME_LABEL, self._quit).pack(side=tk.LEFT, padx=10)

    # ==================== GAME SCREEN ====================

    def _start_game(self):
        """Leave the menu and start a new session."""
        self._clear_screen()
        self.session = GameSession(coin=self.coin)
        print(f"New game! {self.session.current_mark} starts.")

        background = to_hex(self.config.BACKGROUND_COLOR)

        # Top bar - current symbol on the left, winner on the right
        top_frame = tk.Frame(self.root, bg=background, height=self.config.CONTROL_BAR_HEIGHT)
        top_frame.pack(side=tk.TOP, fill=tk.X)
        top_frame.pack_propagate(False)
        self._screen_widgets.append(top_frame)

        self.turn_label = self._make_label(top_frame)
        self.turn_label.pack(side=tk.LEFT, padx=16, pady=12)
        self.winner_label = self._make_label(top_frame)
        self.winner_label.pack(side=tk.RIGHT, padx=16, pady=12)

        # Bottom bar - controls
        bottom_frame = tk.Frame(self.root, bg=background, height=self.config.CONTROL_BAR_HEIGHT)
        bottom_frame.pack(side=tk.BOTTOM, fill=tk.X)
        bottom_frame.pack_propagate(False)
        self._screen_widgets.append(bottom_frame)

        self._make_button(bottom_frame, self.config.RESTART_GAME_LABEL, self._restart_game).pack(side=tk.LEFT, padx=16, pady=12)
        self._make_button(bottom_frame, self.config.QUIT_GAME_LABEL, self._quit).pack(side=tk.RIGHT, padx=16, pady=12)

        # Board canvas fills the rest
        self.board_canvas = tk.Canvas(
            self.root,
            bg=background,
            highlightthickness=0
        )
        self.board_canvas.pack(fill=tk.BOTH, expand=True)
        self.board_canvas.bind("<Button-1>", self._on_click)
        self.board_canvas.bind("<Configure>", self._on_resize)
        self._screen_widgets.append(self.board_canvas)

        self._refresh(self.session.current_view())

    def _on_resize(self, event):
        """Recentre the board when the canvas gets its real size."""
        self.layout = BoardLayout(self.config, event.width, event.height)
        if self.session is not None:
            self._refresh(self.session.current_view())

    def _on_click(self, event):
        """Turn a click into a move."""
        if self.session is None:
            return

        index = self.layout.cell_at(event.x, event.y)
        if index is None:
            return

        result = self.session.apply_move(index)
        if not result.is_valid:
            # Occupied cell or finished game, wait for another click
            return

        self._on_move(result.effect)

    def _on_move(self, effect: MoveEffect):
        """Redraw after an accepted move."""
        self._refresh(effect.as_view())
        if effect.outcome.is_terminal:
            print(effect.outcome.message)

    def _restart_game(self):
        """Clear the board and flip for a new first mover."""
        if self.session is None:
            return
        self.session.restart()
        print(f"Game restarted! {self.session.current_mark} starts.")
        self._refresh(self.session.current_view())

    def _refresh(self, view: GameView):
        """Redraw the board and labels from a view."""
        self.turn_label.configure(text=current_symbol_text(view.turn))
        self.winner_label.configure(text=winner_text(view.outcome))

        self.board_canvas.delete("cell")
        winning = set(view.winning_line or ())
        for index, mark in enumerate(view.board):
            highlighted = index in winning
            key = (mark, highlighted)
            if key not in self._photos:
                self._photos[key] = ImageTk.PhotoImage(self.renderer.get(mark, highlighted))
            x, y = self.layout.cell_center(index)
            self.board_canvas.create_image(x, y, image=self._photos[key], tags="cell")

    # ==================== LIFECYCLE ====================

    def _quit(self):
        """Close the window."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Entry point for the UI."""
    print("\n" + "="*60)
    print("   Tic-Tac-Toe")
    print("="*60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()

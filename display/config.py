"""
Display configuration for Tic-Tac-Toe.
All the settings for the window, board drawing, and buttons.
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the game.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    WINDOW_WIDTH = 600
    WINDOW_HEIGHT = 600
    WINDOW_RESIZABLE = False
    BACKGROUND_COLOR = (40, 44, 52)

    # ==================== BOARD SETTINGS ====================
    # Size of one symbol texture in pixels
    SYMBOL_SIZE = 64
    # Gap between two cells
    SPACE_SIZE = SYMBOL_SIZE / 3.0
    # Textures are scaled up by this much on screen
    SYMBOL_SCALE = 1.5

    # Height of the label bar above the board and the button bar below it
    CONTROL_BAR_HEIGHT = 80

    # Texture colours (RGBA)
    X_COLOR = (224, 108, 117, 255)
    O_COLOR = (97, 175, 239, 255)
    EMPTY_COLOR = (62, 68, 81, 255)
    HIGHLIGHT_COLOR = (152, 195, 121, 255)
    # Stroke width as a fraction of the symbol size
    STROKE_RATIO = 0.12

    # ==================== TEXT SETTINGS ====================
    FONT_FAMILY = "Fira Sans"
    FONT_SIZE = 28
    TEXT_COLOR = (255, 255, 255)

    # ==================== BUTTON SETTINGS ====================
    BUTTON_NORMAL_COLOR = (190, 105, 177)
    BUTTON_HOVERED_COLOR = (220, 124, 217)
    BUTTON_PRESSED_COLOR = (120, 85, 136)
    BUTTON_FONT_SIZE = 20
    BUTTON_PADDING = 8

    START_GAME_LABEL = "Start game"
    RESTART_GAME_LABEL = "Restart game"
    QUIT_GAME_LABEL = "Quit game"

    @property
    def cell_size(self) -> float:
        """On-screen size of one cell."""
        return self.SYMBOL_SIZE * self.SYMBOL_SCALE

    @property
    def cell_pitch(self) -> float:
        """On-screen distance between two cell centres."""
        return (self.SYMBOL_SIZE + self.SPACE_SIZE) * self.SYMBOL_SCALE

    @property
    def board_extent(self) -> float:
        """On-screen width and height of the whole 3x3 board."""
        return 2 * self.cell_pitch + self.cell_size

    @property
    def canvas_height(self) -> float:
        """Height left for the board between the two control bars."""
        return self.WINDOW_HEIGHT - 2 * self.CONTROL_BAR_HEIGHT


def to_hex(color) -> str:
    """Convert an (r, g, b[, a]) tuple to a Tk colour string."""
    r, g, b = color[:3]
    return f"#{r:02x}{g:02x}{b:02x}"

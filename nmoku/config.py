"""Configuration constants used across the N moku project."""

from nmoku.enums import Mode, Stone

# ====== Board ======
BOARD_SIZE: int = 3

BLACK_GLYPH: str = "o"
WHITE_GLYPH: str = "x"
EMPTY_GLYPH: str = "-"

# ====== Text ======
TITLE: str = "N moku"
MODE_LABELS = {
    Mode.VS_AI: "1P GAME",
    Mode.TWO_PLAYERS: "2P GAME",
}
START_PROMPT: str = "Press [ENTER] to start"
QUIT_PROMPT: str = "Press [ESC] to quit"
WINNER_TEXT = {
    Stone.BLACK: "1st player WIN!!!",
    Stone.WHITE: "2nd player WIN!!!",
}
DRAW_TEXT: str = "DRAW"

# ====== Window (pygame renderer) ======
DEFAULT_WIDTH, DEFAULT_HEIGHT = 900, 700
WINDOW_CAPTION: str = "N moku"

# ====== Logging ======
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s - %(message)s"
DEFAULT_LOG_LEVEL: str = "INFO"

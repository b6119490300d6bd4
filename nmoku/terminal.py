"""Terminal renderer built on curses.

Everything is laid out around the centre of the screen and re-centred
when the terminal is resized. Raw mode and the alternate screen are
owned by curses.wrapper in the caller, not by this class.
"""

import curses
import logging
from typing import Optional

from nmoku import config
from nmoku.board import Board
from nmoku.enums import Mode, Stone
from nmoku.events import Event, Move, Quit, Resize, translate_char
from nmoku.renderer import Renderer

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    curses.KEY_LEFT: Move(-1, 0),
    curses.KEY_DOWN: Move(0, 1),
    curses.KEY_UP: Move(0, -1),
    curses.KEY_RIGHT: Move(1, 0),
}

GLYPHS = {
    Stone.BLACK: config.BLACK_GLYPH,
    Stone.WHITE: config.WHITE_GLYPH,
    None: config.EMPTY_GLYPH,
}


def translate_key(key: int) -> Optional[Event]:
    """Map a curses key code to an event; None for unbound keys."""
    if key in ARROW_KEYS:
        return ARROW_KEYS[key]
    if key == curses.KEY_ENTER:
        return translate_char("\n")
    if 0 <= key < 256:
        return translate_char(chr(key))
    return None


def set_cursor_visibility(visibility: int):
    # not every terminal supports changing it
    try:
        curses.curs_set(visibility)
    except curses.error:
        pass


class CursesRenderer(Renderer):
    def __init__(self, screen, n: int = config.BOARD_SIZE):
        self.screen = screen
        self.n = n
        height, width = screen.getmaxyx()
        self.center_x = width // 2
        self.center_y = height // 2
        self.screen.keypad(True)

    def _write(self, y: int, x: int, text: str):
        # clip rather than fail when the terminal is too small
        height, width = self.screen.getmaxyx()
        if y < 0 or y >= height or x >= width:
            return
        if x < 0:
            text = text[-x:]
            x = 0
        text = text[: max(0, width - x - 1)]
        if not text:
            return
        try:
            self.screen.addstr(y, x, text)
        except curses.error:
            logger.debug("Could not draw %r at (%d, %d)", text, x, y)

    def _centered(self, y: int, text: str):
        self._write(y, self.center_x - len(text) // 2, text)

    def clear(self):
        self.screen.erase()

    def render_title(self, current_mode: Mode):
        set_cursor_visibility(0)
        all_modes = Mode.all_modes()
        total_modes = len(all_modes)
        top = self.center_y - (total_modes - 1) // 2

        self._centered(top - 2, config.TITLE)
        for i, mode in enumerate(all_modes):
            label = config.MODE_LABELS[mode]
            if mode == current_mode:
                label = f"> {label} <"
            self._centered(top + i, label)
        self._centered(self.center_y + total_modes // 2 + 2, config.START_PROMPT)

    def _board_origin(self):
        return self.center_x - self.n // 2, self.center_y - self.n // 2

    def render_board(self, board: Board):
        left, top = self._board_origin()
        for y, row in enumerate(board.stones):
            self._write(top + y, left, "".join(GLYPHS[stone] for stone in row))

    def render_cursor(self, x: int, y: int):
        left, top = self._board_origin()
        height, width = self.screen.getmaxyx()
        cursor_y, cursor_x = top + y, left + x
        if 0 <= cursor_y < height and 0 <= cursor_x < width:
            self.screen.move(cursor_y, cursor_x)
        set_cursor_visibility(1)

    def _render_result(self, text: str):
        set_cursor_visibility(0)
        self._centered(self.center_y - self.n, text)
        self._centered(self.center_y + self.n, config.QUIT_PROMPT)

    def render_winner(self, winner: Stone):
        self._render_result(config.WINNER_TEXT[winner])

    def render_drew(self):
        self._render_result(config.DRAW_TEXT)

    def read_event(self) -> Event:
        self.screen.refresh()
        while True:
            key = self.screen.getch()
            if key == curses.KEY_RESIZE:
                height, width = self.screen.getmaxyx()
                return Resize(width, height)
            event = translate_key(key)
            if event is not None:
                return event

    def process_event(self, event: Event):
        if isinstance(event, Resize):
            self.center_x = event.width // 2
            self.center_y = event.height // 2
        elif isinstance(event, Quit):
            logger.info("Quit requested")

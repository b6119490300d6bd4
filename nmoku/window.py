# Windowed renderer for N moku.
# - Resizable window, board scaled to fit
# - Mode panels with highlighted selection
# - Cursor highlight and result modal
#
# Run: python -m nmoku --gui
# Requires pygame

import logging
from typing import Optional, Tuple

import pygame

from nmoku import config
from nmoku.board import Board
from nmoku.enums import Mode, Stone
from nmoku.events import Event, Move, Quit, Resize, translate_char
from nmoku.renderer import Renderer

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    pygame.K_LEFT: Move(-1, 0),
    pygame.K_DOWN: Move(0, 1),
    pygame.K_UP: Move(0, -1),
    pygame.K_RIGHT: Move(1, 0),
}


def translate_event(event) -> Optional[Event]:
    """Map a pygame event to a game event; None for anything unbound."""
    if event.type == pygame.QUIT:
        return Quit()
    if event.type == pygame.VIDEORESIZE:
        return Resize(event.w, event.h)
    if event.type != pygame.KEYDOWN:
        return None
    if event.key in ARROW_KEYS:
        return ARROW_KEYS[event.key]
    if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        return translate_char("\n")
    if event.key == pygame.K_ESCAPE:
        return Quit()
    if event.unicode:
        return translate_char(event.unicode)
    return None


# ====== Theme Manager ======
class ThemeManager:
    def __init__(self):
        # Light theme palette
        self.primary = pygame.Color('#4a6fa5')  # Soft blue
        self.secondary = pygame.Color('#ff7e5f')  # Coral
        self.accent = pygame.Color('#6b5b95')  # Purple
        self.dark_gray = pygame.Color('#495057')

        self.bg_a = pygame.Color('#f8f9fa')
        self.bg_b = pygame.Color('#e9ecef')
        self.panel = pygame.Color('#ffffff')
        self.line = pygame.Color('#adb5bd')
        self.muted = pygame.Color('#ced4da')

    def stone_color(self, stone: Stone) -> pygame.Color:
        return self.primary if stone == Stone.BLACK else self.secondary


# ====== Renderer ======
class PygameRenderer(Renderer):
    def __init__(self, n: int = config.BOARD_SIZE,
                 width: int = config.DEFAULT_WIDTH, height: int = config.DEFAULT_HEIGHT):
        self.n = n
        self.width = width
        self.height = height
        self.screen = None
        self.theme = ThemeManager()
        self.fonts = {}

    # the window is a scoped resource
    def __enter__(self):
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption(config.WINDOW_CAPTION)
        self.fonts = {
            'title': pygame.font.SysFont('Segoe UI', 46, bold=True),
            'sub': pygame.font.SysFont('Segoe UI', 20),
            'button': pygame.font.SysFont('Segoe UI', 22, bold=True),
            'mark': pygame.font.SysFont('Segoe UI', 120, bold=True),
        }
        logger.info("Opened %dx%d window", self.width, self.height)
        return self

    def __exit__(self, exc_type, exc, tb):
        pygame.quit()
        self.screen = None

    def board_layout(self) -> Tuple[pygame.Rect, int]:
        w, h = self.screen.get_size()
        max_board_size = min(w * 0.7, h * 0.6, 600)
        cell_size = int(max_board_size // self.n)
        board_size = cell_size * self.n
        board_left = (w - board_size) // 2
        board_top = (h - board_size) // 2
        return pygame.Rect(board_left, board_top, board_size, board_size), cell_size

    def _blit_centered(self, font_key: str, text: str, color, y: int):
        surf = self.fonts[font_key].render(text, True, color)
        self.screen.blit(surf, ((self.screen.get_width() - surf.get_width()) // 2, y))

    def clear(self):
        w, h = self.screen.get_size()
        # gradient background
        for y in range(h):
            t = y / max(1, h - 1)
            c = self.theme.bg_a.lerp(self.theme.bg_b, t)
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def render_title(self, current_mode: Mode):
        w, h = self.screen.get_size()
        all_modes = Mode.all_modes()
        btn_w, btn_h, spacing = 280, 56, 20
        total_height = len(all_modes) * btn_h + (len(all_modes) - 1) * spacing
        start_y = (h - total_height) // 2

        self._blit_centered('title', config.TITLE, self.theme.primary, start_y - 110)

        for i, mode in enumerate(all_modes):
            rect = pygame.Rect((w - btn_w) // 2, start_y + i * (btn_h + spacing), btn_w, btn_h)
            selected = mode == current_mode

            # subtle shadow
            shadow = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
            pygame.draw.rect(shadow, (0, 0, 0, 30), shadow.get_rect(), border_radius=14)
            self.screen.blit(shadow, (rect.x + 2, rect.y + 3))

            fill = self.theme.primary if selected else self.theme.muted
            pygame.draw.rect(self.screen, fill, rect, border_radius=14)
            txt = self.fonts['button'].render(config.MODE_LABELS[mode], True, (255, 255, 255))
            self.screen.blit(txt, (rect.x + (rect.w - txt.get_width()) // 2,
                                   rect.y + (rect.h - txt.get_height()) // 2))

        self._blit_centered('sub', config.START_PROMPT, self.theme.dark_gray,
                            start_y + total_height + 40)

    def render_board(self, board: Board):
        board_rect, cell_size = self.board_layout()
        pygame.draw.rect(self.screen, self.theme.panel, board_rect, border_radius=16)

        line_width = 6
        for k in range(1, self.n):
            offset = k * cell_size
            pygame.draw.line(self.screen, self.theme.line,
                             (board_rect.x + 10, board_rect.y + offset),
                             (board_rect.right - 10, board_rect.y + offset), line_width)
            pygame.draw.line(self.screen, self.theme.line,
                             (board_rect.x + offset, board_rect.y + 10),
                             (board_rect.x + offset, board_rect.bottom - 10), line_width)

        glyphs = {Stone.BLACK: config.BLACK_GLYPH, Stone.WHITE: config.WHITE_GLYPH}
        for y, row in enumerate(board.stones):
            for x, stone in enumerate(row):
                if stone is None:
                    continue
                mark = self.fonts['mark'].render(glyphs[stone], True, self.theme.stone_color(stone))
                cx = board_rect.x + x * cell_size + cell_size // 2
                cy = board_rect.y + y * cell_size + cell_size // 2
                self.screen.blit(mark, (cx - mark.get_width() // 2, cy - mark.get_height() // 2))

    def render_cursor(self, x: int, y: int):
        board_rect, cell_size = self.board_layout()
        inner = pygame.Rect(board_rect.x + x * cell_size + 8, board_rect.y + y * cell_size + 8,
                            cell_size - 16, cell_size - 16)
        highlight = pygame.Surface((inner.w, inner.h), pygame.SRCALPHA)
        pygame.draw.rect(highlight, (*self.theme.primary[:3], 60), highlight.get_rect(), border_radius=10)
        self.screen.blit(highlight, inner.topleft)
        pygame.draw.rect(self.screen, self.theme.primary, inner, width=3, border_radius=10)

    def _render_modal(self, title: str, color):
        mw, mh = 500, 160
        mx = (self.screen.get_width() - mw) // 2
        my = (self.screen.get_height() - mh) // 2

        modal_shadow = pygame.Surface((mw + 10, mh + 10), pygame.SRCALPHA)
        pygame.draw.rect(modal_shadow, (0, 0, 0, 80), modal_shadow.get_rect(), border_radius=18)
        self.screen.blit(modal_shadow, (mx - 5, my - 5))

        modal = pygame.Surface((mw, mh), pygame.SRCALPHA)
        pygame.draw.rect(modal, (255, 255, 255, 240), modal.get_rect(), border_radius=16)
        ts = self.fonts['title'].render(title, True, color)
        modal.blit(ts, ((mw - ts.get_width()) // 2, 30))
        hint = self.fonts['sub'].render(config.QUIT_PROMPT, True, self.theme.dark_gray)
        modal.blit(hint, ((mw - hint.get_width()) // 2, mh - 50))
        self.screen.blit(modal, (mx, my))

    def render_winner(self, winner: Stone):
        self._render_modal(config.WINNER_TEXT[winner], self.theme.stone_color(winner))

    def render_drew(self):
        self._render_modal(config.DRAW_TEXT, self.theme.accent)

    def read_event(self) -> Event:
        pygame.display.flip()
        while True:
            event = translate_event(pygame.event.wait())
            if event is not None:
                return event

    def process_event(self, event: Event):
        if isinstance(event, Resize):
            self.width, self.height = event.width, event.height
            self.screen = pygame.display.set_mode((event.width, event.height), pygame.RESIZABLE)

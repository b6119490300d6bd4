"""Title -> Game -> Finish state machine.

Each state renders itself, reacts to input events and, once per cycle,
is asked for its successor. Transitions only ever move forward.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from nmoku import config
from nmoku.ai import AI
from nmoku.board import Board
from nmoku.enums import Mode, Stone
from nmoku.events import Confirm, Event, Move, Place, SelectMode
from nmoku.renderer import Renderer

logger = logging.getLogger(__name__)


def _clamp(value: int, n: int) -> int:
    return max(0, min(n - 1, value))


class State:
    @staticmethod
    def new(n: int = config.BOARD_SIZE, ai: Optional[AI] = None) -> "Title":
        return Title(n=n, ai=ai if ai is not None else AI())

    def render(self, renderer: Renderer):
        renderer.clear()
        self.draw(renderer)

    def draw(self, renderer: Renderer):
        raise NotImplementedError

    def process_event(self, event: Event):
        pass

    def next_state(self) -> Optional["State"]:
        return None


# ====== Title ======
@dataclass
class Title(State):
    n: int
    current_mode: Mode = Mode.VS_AI
    to_next: bool = False
    ai: AI = field(default_factory=AI, compare=False, repr=False)

    def draw(self, renderer: Renderer):
        renderer.render_title(self.current_mode)

    def process_event(self, event: Event):
        if isinstance(event, Move) and event.dy != 0:
            modes = Mode.all_modes()
            if event.jump:
                index = 0 if event.dy < 0 else len(modes) - 1
            else:
                index = _clamp(modes.index(self.current_mode) + event.dy, len(modes))
            self.current_mode = modes[index]
        elif isinstance(event, SelectMode):
            self.current_mode = event.mode
        elif isinstance(event, Confirm):
            self.to_next = True

    def next_state(self) -> Optional[State]:
        if not self.to_next:
            return None
        logger.info("Starting %s game on a %dx%d board", self.current_mode.name, self.n, self.n)
        return Game(n=self.n, mode=self.current_mode, board=Board(self.n), ai=self.ai)


# ====== Game ======
@dataclass
class Game(State):
    n: int
    mode: Mode
    board: Board
    cursor_x: int = 0
    cursor_y: int = 0
    turn: Stone = Stone.BLACK
    ai: AI = field(default_factory=AI, compare=False, repr=False)

    def draw(self, renderer: Renderer):
        renderer.render_board(self.board)
        renderer.render_cursor(self.cursor_x, self.cursor_y)

    def process_event(self, event: Event):
        if isinstance(event, Place):
            self.place()
        elif isinstance(event, Move):
            self.move_cursor(event)

    def place(self):
        if not self.board.is_empty(self.cursor_x, self.cursor_y):
            return

        self.board.put(self.turn, self.cursor_x, self.cursor_y)
        logger.debug("%s placed at (%d, %d)", self.turn.name, self.cursor_x, self.cursor_y)
        self.turn = self.turn.opponent()

        # the human is always Black, the AI always White
        if (
            self.mode == Mode.VS_AI
            and self.turn == Stone.WHITE
            and not self.board.outcome().finished
        ):
            self.ai.action(self.board, self.turn)
            self.turn = self.turn.opponent()

    def move_cursor(self, move: Move):
        last = self.n - 1
        if move.jump:
            if move.dx:
                self.cursor_x = 0 if move.dx < 0 else last
            if move.dy:
                self.cursor_y = 0 if move.dy < 0 else last
        else:
            self.cursor_x = _clamp(self.cursor_x + move.dx, self.n)
            self.cursor_y = _clamp(self.cursor_y + move.dy, self.n)

    def next_state(self) -> Optional[State]:
        outcome = self.board.outcome()
        if not outcome.finished:
            return None
        if outcome.winner is not None:
            logger.info("Game over: %s wins", outcome.winner.name)
        else:
            logger.info("Game over: draw")
        return Finish(board=self.board.copy(), winner=outcome.winner)


# ====== Finish ======
@dataclass
class Finish(State):
    board: Board
    winner: Optional[Stone] = None

    def draw(self, renderer: Renderer):
        renderer.render_board(self.board)
        if self.winner is not None:
            renderer.render_winner(self.winner)
        else:
            renderer.render_drew()

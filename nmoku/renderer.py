from abc import ABC, abstractmethod

from nmoku.board import Board
from nmoku.enums import Mode, Stone
from nmoku.events import Event


class Renderer(ABC):
    """Draws states and produces input events for the driving loop.

    One frame is: clear(), the render_* calls for the live state, then
    read_event(), which presents the frame and blocks for the next event.
    """

    @abstractmethod
    def clear(self):
        pass

    @abstractmethod
    def render_title(self, current_mode: Mode):
        pass

    @abstractmethod
    def render_board(self, board: Board):
        pass

    @abstractmethod
    def render_cursor(self, x: int, y: int):
        pass

    @abstractmethod
    def render_winner(self, winner: Stone):
        pass

    @abstractmethod
    def render_drew(self):
        pass

    @abstractmethod
    def read_event(self) -> Event:
        pass

    def process_event(self, event: Event):
        """Layout-only reactions, e.g. re-centering after a resize."""
        pass

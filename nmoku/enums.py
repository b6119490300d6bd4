from enum import Enum
from typing import List


class Stone(Enum):
    BLACK = "black"
    WHITE = "white"

    def opponent(self) -> "Stone":
        return Stone.WHITE if self is Stone.BLACK else Stone.BLACK


class Mode(Enum):
    VS_AI = "vs_ai"
    TWO_PLAYERS = "two_players"

    @staticmethod
    def all_modes() -> List["Mode"]:
        # declared order is the menu order
        return list(Mode)

import logging
import random
from typing import List, Optional, Tuple

from nmoku.board import Board
from nmoku.enums import Stone

logger = logging.getLogger(__name__)


# ====== AI ======
class AI:
    """Places its stone on a uniformly random empty cell.

    Pass a seed to make the picks reproducible.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.random = random.Random(seed)

    @staticmethod
    def available_actions(board: Board) -> List[Tuple[int, int]]:
        # row-major order
        return [
            (x, y)
            for y, row in enumerate(board.stones)
            for x, stone in enumerate(row)
            if stone is None
        ]

    def action(self, board: Board, ai_stone: Stone):
        actions = self.available_actions(board)
        if not actions:
            return

        x, y = actions[self.random.randrange(len(actions))]
        board.put(ai_stone, x, y)
        logger.debug("AI placed %s at (%d, %d)", ai_stone.name, x, y)

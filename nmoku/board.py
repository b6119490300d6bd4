from typing import Iterator, List, NamedTuple, Optional, Tuple

from nmoku.enums import Stone
from nmoku.exceptions import InvalidSize

Cell = Optional[Stone]


class Outcome(NamedTuple):
    finished: bool
    winner: Optional[Stone] = None

    @property
    def drew(self) -> bool:
        return self.finished and self.winner is None


# ====== Board ======
class Board:
    """Square grid of cells, each empty (None) or holding a Stone.

    Cells are addressed as (x, y): x is the column, y the row.
    """

    def __init__(self, n: int):
        if not isinstance(n, int) or isinstance(n, bool) or n < 1:
            raise InvalidSize(n)
        self._n = n
        self._stones: List[List[Cell]] = [[None] * n for _ in range(n)]

    @property
    def n(self) -> int:
        return self._n

    @property
    def stones(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self._stones)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self._n and 0 <= y < self._n):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self._n}x{self._n} board")

    def is_empty(self, x: int, y: int) -> bool:
        self._check_bounds(x, y)
        return self._stones[y][x] is None

    def put(self, stone: Cell, x: int, y: int):
        # legality is the caller's concern
        self._check_bounds(x, y)
        self._stones[y][x] = stone

    def is_full(self) -> bool:
        return all(cell is not None for row in self._stones for cell in row)

    def _lines(self) -> Iterator[List[Cell]]:
        n = self._n
        for y in range(n):
            yield self._stones[y]
        for x in range(n):
            yield [self._stones[y][x] for y in range(n)]
        yield [self._stones[k][k] for k in range(n)]
        yield [self._stones[k][n - 1 - k] for k in range(n)]

    def check_winner(self) -> Optional[Stone]:
        for line in self._lines():
            first = line[0]
            if first is not None and all(cell == first for cell in line):
                return first
        return None

    def check_draw(self) -> bool:
        return self.is_full() and self.check_winner() is None

    def outcome(self) -> Outcome:
        winner = self.check_winner()
        if winner is not None:
            return Outcome(True, winner)
        if self.is_full():
            return Outcome(True)
        return Outcome(False)

    def copy(self) -> "Board":
        other = Board(self._n)
        other._stones = [row[:] for row in self._stones]
        return other

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._stones == other._stones

    def __repr__(self):
        return f"Board(n={self._n}, stones={self._stones!r})"

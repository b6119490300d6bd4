import pytest

from nmoku.board import Board, Outcome
from nmoku.enums import Stone
from nmoku.exceptions import InvalidSize

B, W = Stone.BLACK, Stone.WHITE


def board_from(rows):
    """Build a board from strings of 'o' (black), 'x' (white) and '-'."""
    glyphs = {"o": B, "x": W, "-": None}
    board = Board(len(rows))
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            board.put(glyphs[char], x, y)
    return board


def lines(n):
    for y in range(n):
        yield [(x, y) for x in range(n)]
    for x in range(n):
        yield [(x, y) for y in range(n)]
    yield [(k, k) for k in range(n)]
    yield [(n - 1 - k, k) for k in range(n)]


def test_new_board_is_empty():
    board = Board(3)

    assert board.n == 3
    assert board.stones == ((None,) * 3,) * 3
    assert all(board.is_empty(x, y) for x in range(3) for y in range(3))
    assert board.check_winner() is None
    assert not board.check_draw()


@pytest.mark.parametrize("size", [0, -1, -3])
def test_invalid_size(size):
    with pytest.raises(InvalidSize) as exc_info:
        Board(size)

    assert exc_info.value.size == size


@pytest.mark.parametrize("size", [1, 2, 3, 4, 7])
def test_any_positive_size(size):
    board = Board(size)

    assert len(board.stones) == size
    assert all(len(row) == size for row in board.stones)


def test_put_and_is_empty():
    board = Board(3)
    board.put(B, 2, 0)

    assert not board.is_empty(2, 0)
    assert board.stones[0][2] == B
    assert board.is_empty(0, 2)

    board.put(W, 2, 0)
    assert board.stones[0][2] == W


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_out_of_range_access(x, y):
    board = Board(3)

    with pytest.raises(IndexError):
        board.is_empty(x, y)
    with pytest.raises(IndexError):
        board.put(B, x, y)


@pytest.mark.parametrize("n", [3, 4, 5])
@pytest.mark.parametrize("stone", [B, W])
def test_every_full_line_wins(n, stone):
    for line in lines(n):
        board = Board(n)
        for x, y in line:
            board.put(stone, x, y)

        assert board.check_winner() == stone
        assert not board.check_draw()
        assert board.outcome() == Outcome(True, stone)


def test_line_with_a_gap_does_not_win():
    board = board_from([
        "oo-",
        "xx-",
        "---",
    ])

    assert board.check_winner() is None
    assert not board.check_draw()
    assert board.outcome() == Outcome(False)


def test_mixed_line_does_not_win():
    board = board_from([
        "oox",
        "---",
        "---",
    ])

    assert board.check_winner() is None


def test_top_row_black():
    board = Board(3)
    for x in range(3):
        board.put(B, x, 0)

    assert board.check_winner() == B


def test_full_board_without_line_is_draw():
    board = board_from([
        "oxo",
        "oxx",
        "xoo",
    ])

    assert board.check_winner() is None
    assert board.is_full()
    assert board.check_draw()
    assert board.outcome().drew


def test_full_board_with_line_is_not_draw():
    board = board_from([
        "ooo",
        "xxo",
        "oxx",
    ])

    assert board.check_winner() == B
    assert not board.check_draw()
    assert not board.outcome().drew


def test_anti_diagonal():
    board = board_from([
        "oox",
        "ox-",
        "x--",
    ])

    assert board.check_winner() == W


def test_copy_is_independent():
    board = board_from([
        "o--",
        "-x-",
        "---",
    ])
    snapshot = board.copy()

    assert snapshot == board

    board.put(B, 2, 2)
    assert snapshot != board
    assert snapshot.is_empty(2, 2)

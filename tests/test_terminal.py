import curses

import pytest

from nmoku.board import Board
from nmoku.enums import Mode, Stone
from nmoku.events import Confirm, Move, Place, Quit, Resize
from nmoku.terminal import CursesRenderer, translate_key


@pytest.fixture
def screen(mocker):
    screen = mocker.Mock()
    screen.getmaxyx.return_value = (24, 80)
    return screen


@pytest.fixture
def renderer(mocker, screen):
    mocker.patch("nmoku.terminal.curses.curs_set")
    return CursesRenderer(screen, 3)


def written(screen):
    return {call.args[2]: (call.args[1], call.args[0]) for call in screen.addstr.call_args_list}


@pytest.mark.parametrize(
    "key, event",
    [
        (ord("l"), Move(1, 0)),
        (ord("L"), Move(1, 0, jump=True)),
        (ord(" "), Place()),
        (10, Confirm()),
        (curses.KEY_ENTER, Confirm()),
        (27, Quit()),
        (curses.KEY_UP, Move(0, -1)),
        (curses.KEY_RIGHT, Move(1, 0)),
    ],
)
def test_translate_key(key, event):
    assert translate_key(key) == event


@pytest.mark.parametrize("key", [-1, ord("z"), curses.KEY_F1])
def test_translate_unbound_key(key):
    assert translate_key(key) is None


def test_render_title(renderer, screen):
    renderer.render_title(Mode.TWO_PLAYERS)

    text = written(screen)
    assert "N moku" in text
    assert "1P GAME" in text
    assert "> 2P GAME <" in text
    assert "Press [ENTER] to start" in text
    # centred on column 40
    x, _ = text["> 2P GAME <"]
    assert x == 40 - len("> 2P GAME <") // 2


def test_render_board_and_cursor(mocker, renderer, screen):
    board = Board(3)
    board.put(Stone.BLACK, 0, 0)
    board.put(Stone.WHITE, 2, 1)

    renderer.render_board(board)
    renderer.render_cursor(2, 1)

    assert screen.addstr.call_args_list == [
        mocker.call(11, 39, "o--"),
        mocker.call(12, 39, "--x"),
        mocker.call(13, 39, "---"),
    ]
    screen.move.assert_called_once_with(12, 41)


def test_render_winner_and_draw(renderer, screen):
    renderer.render_winner(Stone.WHITE)
    assert "2nd player WIN!!!" in written(screen)
    assert "Press [ESC] to quit" in written(screen)

    screen.reset_mock()
    renderer.render_drew()
    assert "DRAW" in written(screen)


def test_resize_recentres(mocker, renderer, screen):
    renderer.process_event(Resize(20, 10))
    screen.getmaxyx.return_value = (10, 20)

    renderer.render_board(Board(3))

    assert screen.addstr.call_args_list[0] == mocker.call(4, 9, "---")


def test_tiny_terminal_clips(renderer, screen):
    screen.getmaxyx.return_value = (3, 6)
    renderer.process_event(Resize(6, 3))

    renderer.render_title(Mode.VS_AI)

    for call in screen.addstr.call_args_list:
        y, x, text = call.args
        assert 0 <= y < 3
        assert x + len(text) < 6


def test_read_event_skips_unbound_keys(renderer, screen):
    screen.getch.side_effect = [ord("z"), -1, ord("j")]

    assert renderer.read_event() == Move(0, 1)
    screen.refresh.assert_called_once()


def test_read_event_resize(renderer, screen):
    screen.getch.side_effect = [curses.KEY_RESIZE]
    screen.getmaxyx.return_value = (30, 100)

    assert renderer.read_event() == Resize(100, 30)

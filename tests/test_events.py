import pytest

from nmoku.enums import Mode
from nmoku.events import KEYMAP, Confirm, Move, Place, Quit, SelectMode, translate_char


@pytest.mark.parametrize(
    "char, event",
    [
        ("h", Move(-1, 0)),
        ("n", Move(1, 1)),
        ("K", Move(0, -1, jump=True)),
        ("Y", Move(-1, -1, jump=True)),
        (" ", Place()),
        ("\n", Confirm()),
        ("\r", Confirm()),
        ("1", SelectMode(Mode.VS_AI)),
        ("2", SelectMode(Mode.TWO_PLAYERS)),
        ("\x1b", Quit()),
    ],
)
def test_translate_char(char, event):
    assert translate_char(char) == event


@pytest.mark.parametrize("char", ["a", "q", "3", "\t"])
def test_unbound_chars(char):
    assert translate_char(char) is None


def test_every_direction_has_a_jump():
    steps = {key: event for key, event in KEYMAP.items() if isinstance(event, Move) and not event.jump}

    assert len(steps) == 8
    for key, event in steps.items():
        assert KEYMAP[key.upper()] == Move(event.dx, event.dy, jump=True)

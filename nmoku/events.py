"""Input events shared by every renderer and the state machine.

Renderers turn raw key presses and window events into these values;
the state machine only ever sees these.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

from nmoku.enums import Mode


@dataclass(frozen=True)
class Move:
    """Step the cursor by (dx, dy), or with jump=True go to the edge in that direction."""

    dx: int
    dy: int
    jump: bool = False


@dataclass(frozen=True)
class Place:
    pass


@dataclass(frozen=True)
class SelectMode:
    mode: Mode


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


Event = Union[Move, Place, SelectMode, Confirm, Quit, Resize]

ESCAPE = "\x1b"

# vi-style directions: lower case steps, upper case jumps to the edge
_DIRECTIONS = {
    "h": (-1, 0),
    "j": (0, 1),
    "k": (0, -1),
    "l": (1, 0),
    "y": (-1, -1),
    "u": (1, -1),
    "b": (-1, 1),
    "n": (1, 1),
}

KEYMAP: Dict[str, Event] = {key: Move(dx, dy) for key, (dx, dy) in _DIRECTIONS.items()}
KEYMAP.update(
    {key.upper(): Move(dx, dy, jump=True) for key, (dx, dy) in _DIRECTIONS.items()}
)
KEYMAP.update(
    {
        " ": Place(),
        "\n": Confirm(),
        "\r": Confirm(),
        "1": SelectMode(Mode.VS_AI),
        "2": SelectMode(Mode.TWO_PLAYERS),
        ESCAPE: Quit(),
    }
)


def translate_char(char: str) -> Optional[Event]:
    return KEYMAP.get(char)

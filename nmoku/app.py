import argparse
import curses
import logging
import os
from typing import List, Optional

from nmoku import config
from nmoku.ai import AI
from nmoku.events import Quit
from nmoku.renderer import Renderer
from nmoku.state import State
from nmoku.terminal import CursesRenderer

logger = logging.getLogger(__name__)


def run(renderer: Renderer, state: State) -> State:
    """Render, read one event, process it, advance. Returns the last state."""
    while True:
        state.render(renderer)

        event = renderer.read_event()
        renderer.process_event(event)
        if isinstance(event, Quit):
            break
        state.process_event(event)

        next_state = state.next_state()
        if next_state is not None:
            logger.info("%s -> %s", type(state).__name__, type(next_state).__name__)
            state = next_state
    return state


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="nmoku",
        description="N moku - N-in-a-row in the terminal",
    )
    parser.add_argument(
        "--gui", action="store_true",
        help="Play in a pygame window instead of the terminal"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the AI's random moves"
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file (the terminal is reserved for the game)"
    )
    parser.add_argument(
        "--log-level", type=str.upper, default=config.DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level used with --log-file"
    )
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], level: str):
    if log_file is None:
        return
    logging.basicConfig(filename=log_file, level=level, format=config.LOG_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.log_level)

    state = State.new(config.BOARD_SIZE, AI(args.seed))
    logger.info("Starting N moku (gui=%s, seed=%s)", args.gui, args.seed)

    if args.gui:
        from nmoku.window import PygameRenderer

        with PygameRenderer(config.BOARD_SIZE) as renderer:
            run(renderer, state)
    else:
        # curses waits a full second after Esc by default
        os.environ.setdefault("ESCDELAY", "25")
        curses.wrapper(lambda screen: run(CursesRenderer(screen, config.BOARD_SIZE), state))
    return 0

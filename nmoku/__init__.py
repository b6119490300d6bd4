"""Top-level package for the N moku terminal game."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "config",
    "enums",
    "board",
    "ai",
    "events",
    "state",
    "renderer",
    "terminal",
    "window",
    "app",
]

"""
digitmind_logger.py - Logging setup for the DigitMind console game
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAMES = ("digitmind", "ai_solver", "game_logic")


def setup_logger(level=logging.WARNING, console=None):
    """
    Route the game's loggers to stderr through rich.
    Log output never goes to stdout, where the game prompts live.
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    handler.setLevel(level)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.handlers = []
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False

    logging.getLogger("digitmind").debug("DigitMind logger initialized")
    return level

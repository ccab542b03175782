"""Logging configuration for mistral_chat.

Library modules only create loggers; handlers are installed here, once, by
the command-line entry point.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "mistral_chat"


def configure_logging(level: int = logging.WARNING, console: Console | None = None) -> None:
    """Route mistral_chat logs through a rich handler.

    Args:
        level: Level for mistral_chat loggers
        console: Console to write to (default: stderr)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

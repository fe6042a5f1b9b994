# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "dayview"


def configure_logging(level: str = "WARNING") -> None:
    """Route the package's log records to stderr through rich."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False

# keysmith/log.py
"""Logging setup shared by the CLI, GUI and web entry points."""

import logging
from typing import Union

from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def setup_logging(level: Union[int, str] = "WARNING") -> None:
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )

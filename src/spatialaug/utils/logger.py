# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Logging setup for applications using spatialaug."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

from spatialaug import __app_name__

RICH_THEME = Theme(
    {
        "error": "bold red",
        "warning": "yellow",
        "info": "green",
        "debug": "blue",
    }
)

_LEVEL_STYLES = (
    (logging.ERROR, "error"),
    (logging.WARNING, "warning"),
    (logging.INFO, "info"),
    (logging.NOTSET, "debug"),
)


class LevelStyleFormatter(logging.Formatter):
    """Wraps each message in the rich markup tag of its level."""

    def format(self, record: logging.LogRecord) -> str:
        style = next(name for level, name in _LEVEL_STYLES if record.levelno >= level)
        original_msg, original_args = record.msg, record.args
        record.msg = f"[{style}]{escape(record.getMessage())}[/{style}]"
        record.args = None
        try:
            return super().format(record)
        finally:
            record.msg, record.args = original_msg, original_args


def setup_logging(
    level: int = logging.WARNING,
    console: Optional[Console] = None,
    name: str = __app_name__,
) -> logging.Logger:
    """Route the spatialaug logger through a rich console handler.

    Calling it again replaces the handler installed before, so the level
    can be changed at any time.

    Args:
        level: Logging level (defaults to WARNING)
        console: Optional rich console, a themed one is created if omitted
        name: Logger to configure

    Returns:
        The configured logger
    """
    if console is None:
        console = Console(theme=RICH_THEME)

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        show_path=False,
        markup=True,
        log_time_format="[%X]",
    )
    handler.setFormatter(LevelStyleFormatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger

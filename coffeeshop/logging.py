"""Console logging setup for the coffee-shop user layer.

Every module logs through ``logging.getLogger(__name__)``; this module only
wires the root logger to a Rich console handler.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "coffeeshop"


def config_console_handler(level: int = logging.INFO, color: bool = True) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
    """
    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(level=level, console=console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s"))
    return handler


def configure_logging(level: int | str = logging.INFO, color: bool = True) -> logging.Logger:
    """Attach a console handler to the root logger and set the project level.

    Calling it again replaces the handler installed by the previous call.

    Raises:
        ValueError: If ``level`` is a name the logging module does not know.

    Returns:
        logging.Logger: The project logger.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level {level!r}")
        level = resolved

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(config_console_handler(level=level, color=color))
    root.setLevel(level)

    project_logger = logging.getLogger(PROJECT_PREFIX)
    project_logger.setLevel(level)
    return project_logger

"""
Rich logging for drawstyle.

Provides colorful console logging using the rich library.
"""

import logging
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table


class RichLogger:
    """
    Logging with rich formatting and colors.
    """

    def __init__(self, name: str = "drawstyle", level: str = "INFO", console: Optional[Console] = None):
        """
        Initialize rich logger.

        Args:
            name: Logger name
            level: Log level
            console: Console to write to, a new stdout console when omitted
        """
        self.name = name
        self.level = level
        self.console = console or Console()

        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self.logger.handlers.clear()

        rich_handler = RichHandler(
            console=self.console,
            show_time=True,
            show_path=True,
            markup=True,
            rich_tracebacks=True,
        )
        rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
        self.logger.addHandler(rich_handler)

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    def table(self, title: str, data: Dict[str, Any]):
        """Display data in a rich table."""
        table = Table(title=title)
        table.add_column("Attribute", style="cyan")
        table.add_column("Value", style="magenta")

        for key, value in data.items():
            table.add_row(str(key), str(value))

        self.console.print(table)


def get_rich_logger(name: str = "drawstyle", level: str = "INFO") -> RichLogger:
    """
    Get rich logger instance.

    Args:
        name: Logger name
        level: Log level

    Returns:
        RichLogger instance
    """
    return RichLogger(name, level)

import click
from typing import Any
from .base import BaseLogger
import sys


class ColorfulLogger(BaseLogger):
    """Logger that outputs colorful text for interactive terminals."""
    
    _EVENT_COLORS = {
        "connected": "green",
        "disconnected": "yellow",
        "connect": "cyan",
        "uploaded": "blue",
        "downloaded": "magenta",
    }

    def __init__(self, log_level: str = "INFO", sink: Any = None):
        super().__init__(log_level)
        # Configure loguru for colored output
        self._add_handler(
            sink if sink is not None else sys.stdout,
            colorize=True,
            format="<cyan>{time:YYYY-MM-DD HH:mm:ss.SSS}</cyan> | "
                   "<level>{level: <8}</level> | "
                   "<white>{message}</white>",
        )
    
    def log_stat(self, message: str, **fields: Any):
        color = self._EVENT_COLORS.get(fields.get("event", ""), "white")
        self.logger.info(click.style(message, fg=color))

    def log_error(self, message: str):
        self.logger.error(click.style(message, fg="red", bold=True))

    def log_warning(self, message: str):
        self.logger.warning(click.style(message, fg="yellow", bold=True))

    def log_info(self, message: str):
        self.logger.info(click.style(message, fg="white"))

    def log_debug(self, message: str):
        self.logger.debug(click.style(message, fg="blue"))

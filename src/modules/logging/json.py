import sys
from typing import Any
from .base import BaseLogger


class JsonLogger(BaseLogger):
    """Logger that outputs JSON for machine parsing."""
    
    def __init__(self, log_level: str = "INFO", sink: Any = None):
        super().__init__(log_level)
        # Configure loguru for JSON output
        self._add_handler(
            sink if sink is not None else sys.stdout,
            serialize=True,  # JSON output
            format="{time} | {level} | {message}",
        )
    
    def log_stat(self, message: str, **fields: Any):
        self.logger.bind(type="stat", **fields).info(message)

    def log_error(self, message: str):
        self.logger.bind(type="error").error(message)

    def log_warning(self, message: str):
        self.logger.bind(type="warning").warning(message)

    def log_info(self, message: str):
        self.logger.bind(type="info").info(message)

    def log_debug(self, message: str):
        self.logger.bind(type="debug").debug(message)

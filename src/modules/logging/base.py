import uuid
from abc import ABC, abstractmethod
from typing import Any, Optional
from loguru import logger


class BaseLogger(ABC):
    """Abstract base class for loggers.

    Each logger owns one loguru handler. Records it emits carry a ``sink_id``
    and only reach that handler; records without one (process-wide warnings)
    reach every logger's handler.
    """
    
    def __init__(self, log_level: str = "INFO"):
        self.sink_id = uuid.uuid4().hex
        self.logger = logger.bind(sink_id=self.sink_id)
        self.log_level = log_level
        self.handler_id: Optional[int] = None

    def _accepts(self, record: Any) -> bool:
        return record["extra"].get("sink_id", self.sink_id) == self.sink_id

    def _add_handler(self, sink: Any, **options: Any) -> None:
        try:
            # loguru ships with a stderr handler that would duplicate every line
            logger.remove(0)
        except ValueError:
            pass
        self.handler_id = logger.add(
            sink,
            level=self.log_level,
            filter=self._accepts,
            **options
        )

    def close(self) -> None:
        """Remove this logger's handler, flushing and closing file sinks."""
        if self.handler_id is None:
            return
        try:
            logger.remove(self.handler_id)
        except ValueError:
            # Already removed by a global logger.remove()
            pass
        self.handler_id = None
    
    @abstractmethod
    def log_stat(self, message: str, **fields: Any):
        """Log a session statistics line.

        Args:
            message: The rendered, human-readable line
            fields: Structured values behind the line (event, user, ...)
        """
        pass

    @abstractmethod
    def log_error(self, message: str):
        """Log an error message."""
        pass

    @abstractmethod
    def log_warning(self, message: str):
        """Log a warning message."""
        pass

    @abstractmethod
    def log_info(self, message: str):
        """Log an info message."""
        pass

    @abstractmethod
    def log_debug(self, message: str):
        """Log a debug message."""
        pass

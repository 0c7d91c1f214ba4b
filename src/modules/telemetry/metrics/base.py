from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
import os
import psutil

@dataclass
class SessionMetrics:
    """Metrics for a single finished session."""
    session_id: str
    user: Optional[str]
    command: str
    remote_addr: str
    dest_addr: str
    start_time: datetime
    end_time: datetime
    duration_ms: float
    bytes_uploaded: int = 0
    bytes_downloaded: int = 0
    upstream_addr: Optional[str] = None  # Remote endpoint of the upstream connection

@dataclass
class BlockedSessionMetrics:
    """Metrics for a session rejected by access-control."""
    session_id: str
    user: Optional[str]
    command: str
    remote_addr: str
    dest_addr: str
    timestamp: datetime

@dataclass
class TelemetrySummary:
    """Totals for the lifetime of the server."""
    start_time: datetime
    end_time: datetime
    duration_ms: float
    total_sessions: int = 0
    blocked_sessions: int = 0
    active_sessions: int = 0  # Sessions started but not finished at shutdown
    total_bytes_uploaded: int = 0
    total_bytes_downloaded: int = 0
    memory_usage_bytes: Optional[int] = None  # Process RSS at shutdown in bytes

class MetricsCollector(ABC):
    """Base class for metrics collectors."""
    
    @abstractmethod
    def record_session(self, metrics: SessionMetrics) -> None:
        """Record metrics for a finished session."""
        pass
    
    @abstractmethod
    def record_blocked(self, metrics: BlockedSessionMetrics) -> None:
        """Record a blocked session."""
        pass
    
    @abstractmethod
    def record_summary(self, metrics: TelemetrySummary) -> None:
        """Record the server-lifetime summary."""
        pass
    
    @abstractmethod
    def finalize(self) -> None:
        """Finalize metrics collection."""
        pass
    
    @staticmethod
    def get_memory_usage() -> int:
        """Get current memory usage in bytes."""
        process = psutil.Process(os.getpid())
        return process.memory_info().rss  # Return in bytes

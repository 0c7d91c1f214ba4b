from .base import (
    MetricsCollector,
    SessionMetrics,
    BlockedSessionMetrics,
    TelemetrySummary
)
from .factory import create_metrics_collector

__all__ = [
    'MetricsCollector',
    'SessionMetrics',
    'BlockedSessionMetrics',
    'TelemetrySummary',
    'create_metrics_collector'
]

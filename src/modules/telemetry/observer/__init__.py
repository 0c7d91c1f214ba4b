"""Observer pattern implementation for proxy session telemetry."""
from .base import SessionObserver
from .dispatcher import EventDispatcher
from .logging_observer import LoggingObserver
from .metrics_observer import MetricsObserver
from .null import NullObserver

__all__ = [
    'SessionObserver',
    'EventDispatcher',
    'LoggingObserver',
    'MetricsObserver',
    'NullObserver'
]

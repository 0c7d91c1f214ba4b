"""Session telemetry: observers notified by the proxy engine."""
from .config import TelemetryConfig, LoggingConfig, MetricsConfig, load_telemetry_config
from .errors import TelemetryError, ConfigError
from .factory import create_event_dispatcher, create_logger_from_config
from .observer import (
    SessionObserver,
    EventDispatcher,
    LoggingObserver,
    MetricsObserver,
    NullObserver
)

__all__ = [
    'TelemetryConfig',
    'LoggingConfig',
    'MetricsConfig',
    'load_telemetry_config',
    'TelemetryError',
    'ConfigError',
    'create_event_dispatcher',
    'create_logger_from_config',
    'SessionObserver',
    'EventDispatcher',
    'LoggingObserver',
    'MetricsObserver',
    'NullObserver'
]

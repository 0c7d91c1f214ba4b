"""Builds the telemetry stack a proxy server runs with."""
from typing import List, Sequence

from src.modules.logging import BaseLogger, create_logger
from src.modules.telemetry.config import LoggingConfig, TelemetryConfig
from src.modules.telemetry.metrics import create_metrics_collector
from src.modules.telemetry.observer import (
    EventDispatcher,
    LoggingObserver,
    MetricsObserver,
    NullObserver,
    SessionObserver
)


def create_logger_from_config(config: LoggingConfig) -> BaseLogger:
    """Create the process-wide log sink described by the logging config."""
    return create_logger(config.output.value, config.level, config.file)


def create_event_dispatcher(
    config: TelemetryConfig,
    logger: BaseLogger,
    extra_observers: Sequence[SessionObserver] = ()
) -> EventDispatcher:
    """Create the dispatcher the proxy engine notifies for every session.
    
    Observers are registered in a fixed order: session logging, metrics,
    then any extra observers.
    
    Args:
        config: Telemetry configuration
        logger: Log sink shared by the logging observer and the dispatcher
        extra_observers: Additional observers supplied by the server
    """
    observers: List[SessionObserver] = []

    if config.log_sessions:
        observers.append(LoggingObserver(logger))

    if config.metrics.enabled:
        metrics_collector = create_metrics_collector(config.metrics)
        observers.append(MetricsObserver(metrics_collector))
        logger.log_info(f"Metrics collection enabled with collector type: {config.metrics.collector.value}")

    observers.extend(extra_observers)

    if not observers:
        observers.append(NullObserver())

    return EventDispatcher(observers, logger)

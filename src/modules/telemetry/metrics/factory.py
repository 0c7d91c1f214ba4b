"""Builds the metrics collector selected in the telemetry config."""
from typing import Callable, Dict

from src.modules.telemetry.config import MetricsConfig, MetricsCollectorType
from src.modules.telemetry.metrics.base import MetricsCollector
from src.modules.telemetry.metrics.console import ConsoleMetricsCollector
from src.modules.telemetry.metrics.json import JsonMetricsCollector
from src.modules.telemetry.metrics.prometheus import PrometheusMetricsCollector

# Collector-specific settings are checked by MetricsConfig when metrics are enabled
_BUILDERS: Dict[MetricsCollectorType, Callable[[MetricsConfig], MetricsCollector]] = {
    MetricsCollectorType.JSON: lambda c: JsonMetricsCollector(c.output_file),
    MetricsCollectorType.PROMETHEUS: lambda c: PrometheusMetricsCollector(c.push_gateway, c.job_name),
    MetricsCollectorType.CONSOLE: lambda c: ConsoleMetricsCollector(c.verbosity),
}


def create_metrics_collector(config: MetricsConfig) -> MetricsCollector:
    """Create the collector an enabled metrics config asks for.
    
    Raises:
        ValueError: If metrics collection is disabled
    """
    if not config.enabled:
        raise ValueError("Metrics collection is disabled")
    return _BUILDERS[config.collector](config)

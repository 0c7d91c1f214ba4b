from dataclasses import fields
from datetime import datetime
from typing import Dict, Any
import json

from .base import MetricsCollector, SessionMetrics, BlockedSessionMetrics, TelemetrySummary

class ConsoleMetricsCollector(MetricsCollector):
    """Collector that outputs metrics to the console."""
    
    def __init__(self, verbosity: str = "info"):
        """Initialize the console collector.
        
        Args:
            verbosity: Log level (debug, info, warning)
        """
        self.verbosity = verbosity
        self._should_print = {
            "debug": lambda _: True,
            "info": lambda metrics: not isinstance(metrics, SessionMetrics),
            "warning": lambda metrics: isinstance(metrics, TelemetrySummary)
        }.get(verbosity, lambda _: True)
    
    def _format_datetime(self, dt: datetime) -> str:
        """Format datetime for console output."""
        return dt.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    
    def _format_metrics(self, metrics: Any) -> Dict[str, Any]:
        """Format metrics for console output."""
        data: Dict[str, Any] = {}
        for field in fields(metrics):
            value = getattr(metrics, field.name)
            if isinstance(value, datetime):
                value = self._format_datetime(value)
            data[field.name] = value
        return data
    
    def _print_metrics(self, prefix: str, metrics: Any) -> None:
        """Print metrics to console if verbosity level allows."""
        if not self._should_print(metrics):
            return
        print(f"{prefix}{json.dumps(self._format_metrics(metrics), indent=2)}")
    
    def record_session(self, metrics: SessionMetrics) -> None:
        """Record session metrics."""
        self._print_metrics("Session Metrics: ", metrics)
    
    def record_blocked(self, metrics: BlockedSessionMetrics) -> None:
        """Record a blocked session."""
        self._print_metrics("Blocked Session: ", metrics)
    
    def record_summary(self, metrics: TelemetrySummary) -> None:
        """Record summary metrics."""
        self._print_metrics("Telemetry Summary: ", metrics)
    
    def finalize(self) -> None:
        """No-op for console collector."""
        pass

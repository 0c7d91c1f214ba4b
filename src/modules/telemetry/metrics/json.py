import json
import threading
from dataclasses import fields
from datetime import datetime
from typing import Dict, Any
from pathlib import Path

from .base import MetricsCollector, SessionMetrics, BlockedSessionMetrics, TelemetrySummary

class JsonMetricsCollector(MetricsCollector):
    """Collector that saves metrics to a JSON file."""
    
    def __init__(self, output_file: str):
        """Initialize the JSON collector.
        
        Args:
            output_file: Path to the output JSON file
        """
        self.output_file = Path(output_file)
        self._lock = threading.Lock()
        self.metrics: Dict[str, Any] = {
            'sessions': [],
            'blocked': [],
            'summary': None
        }
    
    def _serialize_metrics(self, metrics: Any) -> Dict[str, Any]:
        """Serialize metrics to a dictionary."""
        data: Dict[str, Any] = {}
        for field in fields(metrics):
            value = getattr(metrics, field.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            data[field.name] = value
        return data
    
    def record_session(self, metrics: SessionMetrics) -> None:
        """Record session metrics."""
        with self._lock:
            self.metrics['sessions'].append(self._serialize_metrics(metrics))
    
    def record_blocked(self, metrics: BlockedSessionMetrics) -> None:
        """Record a blocked session."""
        with self._lock:
            self.metrics['blocked'].append(self._serialize_metrics(metrics))
    
    def record_summary(self, metrics: TelemetrySummary) -> None:
        """Record summary metrics."""
        with self._lock:
            self.metrics['summary'] = self._serialize_metrics(metrics)
    
    def finalize(self) -> None:
        """Save all collected metrics to the JSON file."""
        # Ensure the output directory exists
        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        
        with self._lock:
            with open(self.output_file, 'w') as f:
                json.dump(self.metrics, f, indent=2)

from loguru import logger
from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, push_to_gateway

from .base import MetricsCollector, SessionMetrics, BlockedSessionMetrics, TelemetrySummary

class PrometheusMetricsCollector(MetricsCollector):
    """Collector that sends metrics to a Prometheus push gateway."""
    
    def __init__(self, push_gateway: str, job_name: str):
        """Initialize the Prometheus collector.
        
        Args:
            push_gateway: URL of the Prometheus push gateway
            job_name: Name of the job for the metrics
        """
        self.push_gateway = push_gateway
        self.job_name = job_name
        self.registry = CollectorRegistry()
        
        # Session metrics
        self.session_duration = Histogram(
            'sockstat_session_duration_seconds',
            'Duration of proxied sessions in seconds',
            ['command'],
            registry=self.registry
        )
        self.sessions_total = Counter(
            'sockstat_sessions_total',
            'Total number of sessions',
            ['command', 'status'],
            registry=self.registry
        )
        self.bytes_total = Counter(
            'sockstat_bytes_total',
            'Total number of bytes relayed',
            ['direction'],
            registry=self.registry
        )
        
        # Summary metrics
        self.active_sessions = Gauge(
            'sockstat_active_sessions',
            'Sessions still open when the summary was taken',
            registry=self.registry
        )
        self.uptime = Gauge(
            'sockstat_uptime_seconds',
            'Time between the first observed event and the summary',
            registry=self.registry
        )
        self.memory_usage = Gauge(
            'sockstat_memory_usage_bytes',
            'Resident memory of the proxy process',
            registry=self.registry
        )
    
    def record_session(self, metrics: SessionMetrics) -> None:
        """Record session metrics."""
        duration = metrics.duration_ms / 1000.0  # Convert to seconds
        self.session_duration.labels(command=metrics.command).observe(duration)
        self.sessions_total.labels(command=metrics.command, status="finished").inc()
        self.bytes_total.labels(direction="upload").inc(metrics.bytes_uploaded)
        self.bytes_total.labels(direction="download").inc(metrics.bytes_downloaded)
    
    def record_blocked(self, metrics: BlockedSessionMetrics) -> None:
        """Record a blocked session."""
        self.sessions_total.labels(command=metrics.command, status="blocked").inc()
    
    def record_summary(self, metrics: TelemetrySummary) -> None:
        """Record summary metrics."""
        self.active_sessions.set(metrics.active_sessions)
        self.uptime.set(metrics.duration_ms / 1000.0)
        if metrics.memory_usage_bytes is not None:
            self.memory_usage.set(metrics.memory_usage_bytes)
    
    def finalize(self) -> None:
        """Push all collected metrics to the Prometheus gateway."""
        try:
            push_to_gateway(
                self.push_gateway,
                job=self.job_name,
                registry=self.registry
            )
        except OSError as e:
            # Report and continue with shutdown
            logger.warning(f"Failed to push metrics to Prometheus gateway: {e}")

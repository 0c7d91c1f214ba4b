"""Metrics observer implementation."""
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

from loguru import logger

from src.models.session.context import SessionContext, remote_endpoint
from src.modules.telemetry.metrics.base import (
    MetricsCollector, SessionMetrics, BlockedSessionMetrics, TelemetrySummary
)
from src.modules.telemetry.observer.base import SessionObserver


@dataclass
class SessionCounters:
    """Tracks server-wide counts."""
    total: int = 0
    blocked: int = 0
    bytes_uploaded: int = 0
    bytes_downloaded: int = 0

@dataclass
class ActiveSession:
    """Tracks a session between its start and finish events."""
    start_time: datetime
    bytes_uploaded: int = 0
    bytes_downloaded: int = 0
    upstream_addr: Optional[str] = None


class MetricsObserver(SessionObserver):
    """Aggregates per-session counters and hands finished records to a collector."""

    def __init__(self, metrics_collector: MetricsCollector):
        self.collector = metrics_collector
        self.started_at = datetime.now()
        self._lock = threading.Lock()
        self._active_sessions: Dict[str, ActiveSession] = {}
        self._counts = SessionCounters()
        self._closed = False

    @property
    def active_session_count(self) -> int:
        with self._lock:
            return len(self._active_sessions)

    def _record(self, record: Callable[[Any], None], metrics: Any) -> None:
        try:
            record(metrics)
        except Exception as e:
            logger.warning(f"Metrics collector {self.collector.__class__.__name__} failed: {e}")

    def on_session_started(self, session: SessionContext) -> None:
        """Handle session start event."""
        with self._lock:
            self._active_sessions[session.id] = ActiveSession(start_time=datetime.now())

    def on_session_finished(self, session: SessionContext, duration: timedelta) -> None:
        """Handle session finish event."""
        end_time = datetime.now()
        with self._lock:
            active = self._active_sessions.pop(session.id, None)
            if active is None:
                return
            self._counts.total += 1

        metrics = SessionMetrics(
            session_id=session.id,
            user=session.username,
            command=session.command.name,
            remote_addr=str(session.remote_addr),
            dest_addr=str(session.dest_addr),
            start_time=active.start_time,
            end_time=end_time,
            duration_ms=duration.total_seconds() * 1000,
            bytes_uploaded=active.bytes_uploaded,
            bytes_downloaded=active.bytes_downloaded,
            upstream_addr=active.upstream_addr
        )
        self._record(self.collector.record_session, metrics)

    def on_session_blocked(self, session: SessionContext) -> None:
        """Handle blocked session event."""
        with self._lock:
            self._counts.blocked += 1

        metrics = BlockedSessionMetrics(
            session_id=session.id,
            user=session.username,
            command=session.command.name,
            remote_addr=str(session.remote_addr),
            dest_addr=str(session.dest_addr),
            timestamp=datetime.now()
        )
        self._record(self.collector.record_blocked, metrics)

    def on_upload_bytes(self, session: SessionContext, byte_count: int) -> None:
        with self._lock:
            active = self._active_sessions.get(session.id)
            if active is None:
                return
            active.bytes_uploaded += byte_count
            self._counts.bytes_uploaded += byte_count

    def on_download_bytes(self, session: SessionContext, byte_count: int) -> None:
        with self._lock:
            active = self._active_sessions.get(session.id)
            if active is None:
                return
            active.bytes_downloaded += byte_count
            self._counts.bytes_downloaded += byte_count

    def on_proxied_connection_started(self, session: SessionContext, upstream_connection: Any) -> None:
        try:
            upstream = remote_endpoint(upstream_connection)
        except Exception as e:
            logger.debug(f"Upstream endpoint unavailable for session {session.id}: {e}")
            return
        with self._lock:
            active = self._active_sessions.get(session.id)
            if active is not None:
                active.upstream_addr = upstream

    def close(self) -> None:
        """Record the summary and finalize the collector. Later calls do nothing."""
        end_time = datetime.now()
        with self._lock:
            if self._closed:
                return
            self._closed = True
            summary = TelemetrySummary(
                start_time=self.started_at,
                end_time=end_time,
                duration_ms=(end_time - self.started_at).total_seconds() * 1000,
                total_sessions=self._counts.total,
                blocked_sessions=self._counts.blocked,
                active_sessions=len(self._active_sessions),
                total_bytes_uploaded=self._counts.bytes_uploaded,
                total_bytes_downloaded=self._counts.bytes_downloaded
            )
            self._active_sessions.clear()

        try:
            summary.memory_usage_bytes = self.collector.get_memory_usage()
        except Exception as e:
            logger.debug(f"Memory usage unavailable: {e}")

        self._record(self.collector.record_summary, summary)
        try:
            self.collector.finalize()
        except Exception as e:
            logger.warning(f"Failed to finalize metrics collector: {e}")

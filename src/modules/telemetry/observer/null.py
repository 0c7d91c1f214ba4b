"""Null observer implementation (no-op)."""
from datetime import timedelta
from typing import Any

from src.models.session.context import SessionContext
from src.modules.telemetry.observer.base import SessionObserver


class NullObserver(SessionObserver):
    """Observer that does nothing. Used when telemetry is disabled."""

    def on_session_started(self, session: SessionContext) -> None:
        pass

    def on_session_finished(self, session: SessionContext, duration: timedelta) -> None:
        pass

    def on_session_blocked(self, session: SessionContext) -> None:
        pass

    def on_upload_bytes(self, session: SessionContext, byte_count: int) -> None:
        pass

    def on_download_bytes(self, session: SessionContext, byte_count: int) -> None:
        pass

    def on_proxied_connection_started(self, session: SessionContext, upstream_connection: Any) -> None:
        pass

"""Observer that renders session events as log lines."""
from datetime import timedelta
from typing import Any

from loguru import logger as fallback_logger

from src.models.session.context import SessionContext, remote_endpoint
from src.modules.logging import BaseLogger
from src.modules.telemetry.observer.base import SessionObserver


class LoggingObserver(SessionObserver):
    """Writes one ``[STAT]`` line per session event to the given logger.

    Blocked sessions produce no line: the access-control layer that rejects
    them logs the rejection itself.
    """

    def __init__(self, logger: BaseLogger):
        self.logger = logger

    def _prefix(self, session: SessionContext) -> str:
        prefix = "[STAT] User"
        if session.auth_context is not None:
            prefix += " " + session.auth_context.username
        return prefix

    def _write(self, session: SessionContext, message: str, event: str, **fields: Any) -> None:
        line = f"{self._prefix(session)} {message}"
        try:
            self.logger.log_stat(
                line,
                event=event,
                user=session.username,
                session_id=session.id,
                **fields
            )
        except Exception as e:
            fallback_logger.warning(f"Failed to write session event '{event}': {e}")

    def on_session_started(self, session: SessionContext) -> None:
        self._write(session, "connected", "connected")

    def on_session_finished(self, session: SessionContext, duration: timedelta) -> None:
        seconds = duration.total_seconds()
        self._write(
            session,
            f"disconnected, session length: {seconds:.2f} secs",
            "disconnected",
            duration_seconds=seconds
        )

    def on_session_blocked(self, session: SessionContext) -> None:
        pass

    def on_upload_bytes(self, session: SessionContext, byte_count: int) -> None:
        self._write(session, f"uploaded {byte_count} bytes", "uploaded", bytes=byte_count)

    def on_download_bytes(self, session: SessionContext, byte_count: int) -> None:
        self._write(session, f"downloaded {byte_count} bytes", "downloaded", bytes=byte_count)

    def on_proxied_connection_started(self, session: SessionContext, upstream_connection: Any) -> None:
        try:
            upstream = remote_endpoint(upstream_connection)
        except Exception as e:
            fallback_logger.warning(f"Failed to read upstream endpoint: {e}")
            return
        dest = session.dest_addr
        self._write(
            session,
            f"connect {upstream} -> {dest.host}:{dest.port}",
            "connect",
            upstream=upstream,
            destination=f"{dest.host}:{dest.port}"
        )

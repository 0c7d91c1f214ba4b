"""Fan-out of session events to registered observers."""
from datetime import timedelta
from typing import Any, Optional, Sequence, Tuple

from loguru import logger as default_logger

from src.models.session.context import SessionContext
from src.modules.logging import BaseLogger
from src.modules.telemetry.observer.base import SessionObserver


class EventDispatcher(SessionObserver):
    """Forwards every event to all observers, in registration order.

    The observer list is fixed at construction, so dispatching needs no
    locking. An observer that raises is reported and skipped; the remaining
    observers still receive the event.
    """
    
    def __init__(self, observers: Sequence[SessionObserver], logger: Optional[BaseLogger] = None):
        """Initialize the dispatcher.
        
        Args:
            observers: Observers to notify, in delivery order
            logger: Logger for observer failures; the process loguru logger when omitted
        """
        self._observers: Tuple[SessionObserver, ...] = tuple(observers)
        self.logger = logger

    @property
    def observers(self) -> Tuple[SessionObserver, ...]:
        return self._observers

    def _report_failure(self, observer: Any, method_name: str, error: Exception) -> None:
        message = (
            f"Observer {observer.__class__.__name__}.{method_name} raised "
            f"{type(error).__name__}: {error}"
        )
        try:
            if self.logger is not None:
                self.logger.log_warning(message)
            else:
                default_logger.warning(message)
        except Exception:
            # Nothing left to report through; drop it.
            pass

    def _notify_all(self, method_name: str, *args: Any) -> None:
        for observer in self._observers:
            try:
                getattr(observer, method_name)(*args)
            except Exception as e:
                self._report_failure(observer, method_name, e)

    def on_session_started(self, session: SessionContext) -> None:
        self._notify_all("on_session_started", session)

    def on_session_finished(self, session: SessionContext, duration: timedelta) -> None:
        self._notify_all("on_session_finished", session, duration)

    def on_session_blocked(self, session: SessionContext) -> None:
        self._notify_all("on_session_blocked", session)

    def on_upload_bytes(self, session: SessionContext, byte_count: int) -> None:
        self._notify_all("on_upload_bytes", session, byte_count)

    def on_download_bytes(self, session: SessionContext, byte_count: int) -> None:
        self._notify_all("on_download_bytes", session, byte_count)

    def on_proxied_connection_started(self, session: SessionContext, upstream_connection: Any) -> None:
        self._notify_all("on_proxied_connection_started", session, upstream_connection)

    def close(self) -> None:
        """Close every observer that holds resources (server shutdown)."""
        for observer in self._observers:
            close = getattr(observer, "close", None)
            if close is None:
                continue
            try:
                close()
            except Exception as e:
                self._report_failure(observer, "close", e)

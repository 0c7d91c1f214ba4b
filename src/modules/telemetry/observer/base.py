"""Observer interface for proxy session events."""
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any

from src.models.session.context import SessionContext


class SessionObserver(ABC):
    """Receives lifecycle notifications for proxied sessions.

    Methods are called synchronously on the session's worker thread, possibly
    from many threads at once. Implementations must return quickly and must
    not raise: there is no channel to report a failure back to the engine.

    Per session the engine calls either ``on_session_started`` ...
    ``on_session_finished`` (with byte counts and the proxied connection in
    between) or a single ``on_session_blocked``.
    """
    
    @abstractmethod
    def on_session_started(self, session: SessionContext) -> None:
        """Handle a session accepted (and authenticated) before proxying begins."""
        pass
    
    @abstractmethod
    def on_session_finished(self, session: SessionContext, duration: timedelta) -> None:
        """Handle the end of a session's relay phase.
        
        Args:
            session: The finished session
            duration: Wall-clock time since the matching start notification
        """
        pass
    
    @abstractmethod
    def on_session_blocked(self, session: SessionContext) -> None:
        """Handle a session rejected by access-control before any data flows."""
        pass
    
    @abstractmethod
    def on_upload_bytes(self, session: SessionContext, byte_count: int) -> None:
        """Handle a batch of client to upstream bytes (not a running total)."""
        pass
    
    @abstractmethod
    def on_download_bytes(self, session: SessionContext, byte_count: int) -> None:
        """Handle a batch of upstream to client bytes (not a running total)."""
        pass
    
    @abstractmethod
    def on_proxied_connection_started(self, session: SessionContext, upstream_connection: Any) -> None:
        """Handle the upstream connection being established.
        
        Args:
            session: The session being proxied
            upstream_connection: Non-owning reference, only read for its endpoints
        """
        pass

from typing import Any, List, Optional, Tuple

from src.modules.telemetry.observer.base import SessionObserver


class FakeConnection:
    """Connection stand-in exposing only its remote endpoint."""
    def __init__(self, remote_addr: str):
        self.remote_addr = remote_addr


class RecordingObserver(SessionObserver):
    """Observer that records every call it receives."""

    def __init__(self, name: str = "recording", journal: Optional[List[Tuple[Any, ...]]] = None):
        self.name = name
        self.events: List[Tuple[Any, ...]] = []
        # Shared across observers to check delivery order
        self.journal = journal if journal is not None else []

    def _record(self, *event: Any) -> None:
        self.events.append(event)
        self.journal.append((self.name,) + event)

    def on_session_started(self, session) -> None:
        self._record("session_started", session)

    def on_session_finished(self, session, duration) -> None:
        self._record("session_finished", session, duration)

    def on_session_blocked(self, session) -> None:
        self._record("session_blocked", session)

    def on_upload_bytes(self, session, byte_count) -> None:
        self._record("upload_bytes", session, byte_count)

    def on_download_bytes(self, session, byte_count) -> None:
        self._record("download_bytes", session, byte_count)

    def on_proxied_connection_started(self, session, upstream_connection) -> None:
        self._record("proxied_connection_started", session, upstream_connection)


class FailingObserver(SessionObserver):
    """Observer that raises from every notification."""

    def __init__(self):
        self.calls = 0

    def _fail(self) -> None:
        self.calls += 1
        raise ValueError("Intentional failure")

    def on_session_started(self, session) -> None:
        self._fail()

    def on_session_finished(self, session, duration) -> None:
        self._fail()

    def on_session_blocked(self, session) -> None:
        self._fail()

    def on_upload_bytes(self, session, byte_count) -> None:
        self._fail()

    def on_download_bytes(self, session, byte_count) -> None:
        self._fail()

    def on_proxied_connection_started(self, session, upstream_connection) -> None:
        self._fail()

    def close(self) -> None:
        self._fail()

"""Tests for the logging observer."""
import ipaddress
from datetime import timedelta
from unittest.mock import Mock, patch

import pytest

from src.models.session.context import AddrSpec, AuthContext, AuthMethod
from src.modules.telemetry.observer import LoggingObserver
from tests.utils.fakes import FakeConnection


@pytest.fixture
def observer(test_logger):
    return LoggingObserver(test_logger)


class TestLoggingPrefix:
    """Test cases for the user prefix."""

    def test_authenticated_user(self, observer, test_logger, make_session):
        observer.on_session_started(make_session(username="alice"))
        assert test_logger.get_logs() == ["STAT: [STAT] User alice connected"]

    def test_unauthenticated_user(self, observer, test_logger, make_session):
        observer.on_session_started(make_session(username=None))
        assert test_logger.get_logs() == ["STAT: [STAT] User connected"]

    def test_missing_username_key(self, observer, test_logger, make_session):
        session = make_session(auth_context=AuthContext(method=AuthMethod.USER_PASS, payload={}))
        observer.on_session_started(session)
        assert test_logger.get_logs() == ["STAT: [STAT] User  connected"]


class TestLoggingEvents:
    """Test cases for rendered event lines."""

    def test_session_finished(self, observer, test_logger, make_session):
        observer.on_session_finished(make_session(), timedelta(milliseconds=100))
        assert test_logger.get_logs() == [
            "STAT: [STAT] User alice disconnected, session length: 0.10 secs"
        ]

    @pytest.mark.parametrize("duration,expected", [
        (timedelta(0), "0.00"),
        (timedelta(seconds=1, milliseconds=234), "1.23"),
        (timedelta(minutes=2), "120.00"),
    ])
    def test_session_length_format(self, observer, test_logger, make_session, duration, expected):
        observer.on_session_finished(make_session(), duration)
        assert f"session length: {expected} secs" in test_logger.get_logs()[0]

    def test_upload_bytes(self, observer, test_logger, make_session):
        observer.on_upload_bytes(make_session(), 14)
        assert test_logger.get_logs() == ["STAT: [STAT] User alice uploaded 14 bytes"]

    def test_download_bytes(self, observer, test_logger, make_session):
        observer.on_download_bytes(make_session(), 0)
        assert test_logger.get_logs() == ["STAT: [STAT] User alice downloaded 0 bytes"]

    def test_proxied_connection_started(self, observer, test_logger, make_session, upstream_connection):
        observer.on_proxied_connection_started(make_session(dest_port=9000), upstream_connection)
        assert test_logger.get_logs() == [
            "STAT: [STAT] User alice connect 127.0.0.1:54321 -> 127.0.0.1:9000"
        ]

    def test_connect_uses_requested_destination(self, observer, test_logger, make_session, upstream_connection):
        session = make_session(
            dest_addr=AddrSpec(fqdn="example.com", port=443),
            real_dest_addr=AddrSpec(ip=ipaddress.ip_address("93.184.216.34"), port=443)
        )
        observer.on_proxied_connection_started(session, upstream_connection)
        assert test_logger.get_logs() == [
            "STAT: [STAT] User alice connect 127.0.0.1:54321 -> example.com:443"
        ]

    def test_session_blocked_logs_nothing(self, observer, test_logger, make_session):
        observer.on_session_blocked(make_session())
        assert test_logger.get_logs() == []

    def test_structured_fields(self, observer, test_logger, make_session):
        session = make_session()
        observer.on_upload_bytes(session, 14)
        assert test_logger.stats == [{
            "event": "uploaded",
            "user": "alice",
            "session_id": session.id,
            "bytes": 14,
        }]


class TestLoggingFailures:
    """Sink failures must never reach the caller."""

    def test_sink_failure_is_contained(self, make_session):
        broken_logger = Mock()
        broken_logger.log_stat.side_effect = OSError("disk full")
        observer = LoggingObserver(broken_logger)

        with patch("src.modules.telemetry.observer.logging_observer.fallback_logger") as fallback:
            observer.on_session_started(make_session())

        fallback.warning.assert_called_once()
        assert "disk full" in fallback.warning.call_args[0][0]

    def test_unreadable_upstream_is_contained(self, observer, test_logger, make_session):
        class ClosedConnection:
            def getpeername(self):
                raise OSError("Transport endpoint is not connected")

        with patch("src.modules.telemetry.observer.logging_observer.fallback_logger") as fallback:
            observer.on_proxied_connection_started(make_session(), ClosedConnection())

        assert test_logger.get_logs() == []
        fallback.warning.assert_called_once()

    def test_callable_remote_addr(self, observer, test_logger, make_session):
        conn = FakeConnection(lambda: "10.0.0.7:4444")
        observer.on_proxied_connection_started(make_session(), conn)
        assert "connect 10.0.0.7:4444 -> 127.0.0.1:9000" in test_logger.get_logs()[0]

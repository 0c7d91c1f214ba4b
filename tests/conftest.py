import ipaddress

import pytest

from src.models.session.context import (
    AddrSpec,
    AuthContext,
    AuthMethod,
    Command,
    SessionContext
)
from tests.utils.fakes import FakeConnection
from tests.utils.test_logger import create_test_logger


@pytest.fixture
def test_logger():
    """Create a test logger instance."""
    return create_test_logger()


@pytest.fixture
def make_session():
    """Build a session context, authenticated as ``username`` unless it is None."""
    def _make_session(username="alice", dest_port=9000, **overrides) -> SessionContext:
        auth_context = None
        if username is not None:
            auth_context = AuthContext(
                method=AuthMethod.USER_PASS,
                payload={"Username": username}
            )
        dest_addr = AddrSpec(ip=ipaddress.ip_address("127.0.0.1"), port=dest_port)
        fields = dict(
            command=Command.CONNECT,
            auth_context=auth_context,
            remote_addr=AddrSpec(ip=ipaddress.ip_address("192.168.1.1"), port=10010),
            dest_addr=dest_addr,
            real_dest_addr=dest_addr
        )
        fields.update(overrides)
        return SessionContext(**fields)
    return _make_session


@pytest.fixture
def upstream_connection():
    return FakeConnection("127.0.0.1:54321")

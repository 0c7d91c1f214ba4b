"""Session context passed by the proxy engine into every telemetry call."""
import ipaddress
import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Optional, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class Command(IntEnum):
    CONNECT = 1
    BIND = 2
    ASSOCIATE = 3


class AuthMethod(IntEnum):
    NO_AUTH = 0
    USER_PASS = 2


@dataclass(frozen=True)
class AuthContext:
    """Result of the authentication phase.

    Set once by the authenticator before any notification is dispatched
    for the session.
    """
    method: AuthMethod
    payload: Dict[str, str] = field(default_factory=dict)

    @property
    def username(self) -> str:
        return self.payload.get("Username", "")


@dataclass(frozen=True)
class AddrSpec:
    """A host/port pair as requested by or resolved for a client."""
    port: int
    ip: Optional[IPAddress] = None
    fqdn: str = ""

    @classmethod
    def parse(cls, text: str) -> "AddrSpec":
        """Build an AddrSpec from ``host:port`` (IPv6 hosts in brackets)."""
        host, sep, port = text.rpartition(":")
        if not sep or not host:
            raise ValueError(f"Invalid address: {text!r}")
        host = host.strip("[]")
        try:
            return cls(port=int(port), ip=ipaddress.ip_address(host))
        except ValueError:
            return cls(port=int(port), fqdn=host)

    @property
    def host(self) -> str:
        return str(self.ip) if self.ip is not None else self.fqdn

    def address(self) -> str:
        """Address suitable for dialing, with IPv6 hosts bracketed."""
        if self.ip is not None and self.ip.version == 6:
            return f"[{self.ip}]:{self.port}"
        return f"{self.host}:{self.port}"

    def __str__(self) -> str:
        if self.fqdn:
            return f"{self.fqdn} ({self.ip}):{self.port}"
        return f"{self.ip}:{self.port}"


@dataclass
class SessionContext:
    """Read-only description of one client session.

    ``connection`` is a non-owning reference to the client connection; the
    telemetry layer never closes or mutates it. ``real_dest_addr`` is only
    meaningful once the upstream connection has been established.
    """
    command: Command
    remote_addr: AddrSpec
    dest_addr: AddrSpec
    auth_context: Optional[AuthContext] = None
    real_dest_addr: Optional[AddrSpec] = None
    connection: Any = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def username(self) -> Optional[str]:
        """The authenticated user name, or None when no authentication occurred."""
        if self.auth_context is None:
            return None
        return self.auth_context.username


def remote_endpoint(conn: Any) -> str:
    """Render the remote endpoint of a connection as ``host:port`` text.

    Objects exposing ``remote_addr`` (attribute or method) are used as is;
    anything else is treated as a socket and asked for its peer name.
    """
    remote = getattr(conn, "remote_addr", None)
    if remote is not None:
        return str(remote() if callable(remote) else remote)

    peer = conn.getpeername()
    if isinstance(peer, tuple):
        host, port = peer[0], peer[1]
        if ":" in host:
            return f"[{host}]:{port}"
        return f"{host}:{port}"
    return str(peer)

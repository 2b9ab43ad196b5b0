"""Transport selection for the MCP server.

The choice is made once at startup from MCP_HTTP_ADDR: an empty value runs
the server over stdin/stdout, anything else runs an HTTP listener that
serves each client over Server-Sent Events.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from github_issue_developer.errors import ConfigError

ALL_INTERFACES = "0.0.0.0"


class TransportKind(str, Enum):
    STDIO = "stdio"
    SSE = "sse"


@dataclass(frozen=True)
class ListenAddress:
    host: str
    port: int

    def __str__(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"


@dataclass(frozen=True)
class TransportConfig:
    kind: TransportKind
    address: Optional[ListenAddress] = None


def select_transport(http_addr: Optional[str]) -> TransportKind:
    """Pick the transport for an MCP_HTTP_ADDR value.

    Depends on the value alone: any non-empty string selects SSE.
    """
    if http_addr:
        return TransportKind.SSE
    return TransportKind.STDIO


def parse_listen_address(addr: str) -> ListenAddress:
    """Parse a ``host:port`` listen address.

    An empty host (``":8080"``) listens on all interfaces. IPv6 hosts must be
    bracketed (``"[::1]:8080"``).

    Raises:
        ConfigError: If the port is missing, not a number, or out of range.
    """
    host, sep, port_text = addr.rpartition(":")
    if not sep:
        raise ConfigError(f"Invalid HTTP address {addr!r}: expected host:port")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ConfigError(f"Invalid HTTP address {addr!r}: IPv6 hosts must be bracketed")
    if not port_text.isdigit():
        raise ConfigError(f"Invalid HTTP address {addr!r}: port must be a number")
    port = int(port_text)
    if not 0 < port < 65536:
        raise ConfigError(f"Invalid HTTP address {addr!r}: port out of range")
    return ListenAddress(host=host or ALL_INTERFACES, port=port)


def resolve_transport(http_addr: Optional[str]) -> TransportConfig:
    """Resolve the full transport configuration for an MCP_HTTP_ADDR value."""
    kind = select_transport(http_addr)
    if kind is TransportKind.STDIO:
        return TransportConfig(kind=kind)
    return TransportConfig(
        kind=kind,
        address=parse_listen_address(http_addr),  # type: ignore[arg-type]
    )

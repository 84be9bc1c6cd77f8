"""Connection lifecycle for the remote syslog collector.

Holds the resolved collector address and the single socket handle used by
an appender. Every failure (resolution, socket creation, connect) leaves
the connection closed and is reported only at DEBUG level.
"""

import enum
import logging
import socket
import threading
from dataclasses import dataclass

from syslog_appender.config import Transport

logger = logging.getLogger(__name__)


class ConnectionState(enum.Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True)
class ResolvedAddress:
    """IPv4 address in network byte order, as returned by inet_aton."""

    packed: bytes

    @property
    def ip(self) -> str:
        return socket.inet_ntoa(self.packed)

    @property
    def value(self) -> int:
        """The address as a 32-bit integer read in network order."""
        return int.from_bytes(self.packed, "big")


def resolve_host(host: str) -> ResolvedAddress | None:
    """Resolve a hostname or dotted quad to an IPv4 address, or None."""
    if not host:
        return None
    try:
        ip = socket.gethostbyname(host)
    except (OSError, TypeError, ValueError) as e:
        logger.debug("Failed to resolve %s: %s", host, e)
        return None
    return ResolvedAddress(socket.inet_aton(ip))


class ConnectionManager:
    """Owns the socket for one appender.

    The address is resolved once and cached. Datagram sockets are created
    on open(); stream sockets are connected lazily by the stream sender,
    which holds ``lock`` while calling connect_stream() and discard().
    """

    def __init__(self, host: str, port: int, transport: Transport,
                 timeout: float | None = None):
        self._host = host
        self._port = port
        self._transport = transport
        self._timeout = timeout
        self._lock = threading.Lock()
        self._sock: socket.socket | None = None
        self._address: ResolvedAddress | None = None

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    @property
    def address(self) -> ResolvedAddress | None:
        return self._address

    @property
    def sock(self) -> socket.socket | None:
        return self._sock

    @property
    def state(self) -> ConnectionState:
        return ConnectionState.OPEN if self._sock is not None else ConnectionState.CLOSED

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    def resolve(self) -> ResolvedAddress | None:
        """Resolve the configured host unless an address is already cached."""
        if self._address is None:
            self._address = resolve_host(self._host)
        return self._address

    def open(self):
        """Resolve the host and, for UDP, create the datagram socket."""
        if self.resolve() is None:
            return

        if self._transport is not Transport.UDP:
            return

        with self._lock:
            if self._sock is not None:
                return
            sock = self._create_socket(socket.SOCK_DGRAM)
            if sock is None:
                return
            try:
                sock.bind(("", 0))
            except OSError as e:
                logger.debug("Failed to bind datagram socket: %s", e)
                sock.close()
                return
            self._sock = sock

    def close(self):
        """Release the socket, if any. Safe to call repeatedly."""
        with self._lock:
            self._release()

    def reopen(self) -> bool:
        """Close and open again. Always returns True."""
        self.close()
        self.open()
        return True

    def connect_stream(self) -> socket.socket | None:
        """Connect a fresh TCP socket to the collector. Caller holds ``lock``."""
        address = self.resolve()
        if address is None:
            return None

        sock = self._create_socket(socket.SOCK_STREAM)
        if sock is None:
            return None
        try:
            sock.connect((address.ip, self._port))
        except (OSError, OverflowError) as e:
            logger.debug("Failed to connect to %s:%d: %s", address.ip, self._port, e)
            sock.close()
            return None
        except BaseException:
            sock.close()
            raise

        self._sock = sock
        return sock

    def discard(self):
        """Drop a socket left in an unknown state. Caller holds ``lock``."""
        self._release()

    def _create_socket(self, kind: int) -> socket.socket | None:
        try:
            sock = socket.socket(socket.AF_INET, kind)
        except OSError as e:
            logger.debug("Failed to create socket: %s", e)
            return None
        if self._timeout is not None:
            try:
                sock.settimeout(self._timeout)
            except ValueError as e:
                logger.debug("Invalid socket timeout %r: %s", self._timeout, e)
                sock.close()
                return None
        return sock

    def _release(self):
        if self._sock is None:
            return
        try:
            self._sock.close()
        except OSError:
            pass
        self._sock = None

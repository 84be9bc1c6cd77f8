"""Transport senders: octet-counted TCP with reconnect, fragmenting UDP."""

import logging
import socket

from syslog_appender.connection import ConnectionManager
from syslog_appender.framing import WireMessage, octet_count_prefix, split_datagrams

logger = logging.getLogger(__name__)

STREAM_ATTEMPTS = 3


def _send_exact(sock: socket.socket, data: bytes) -> bool:
    """Single send() call; True only if every byte was accepted."""
    try:
        return sock.send(data) == len(data)
    except OSError as e:
        logger.debug("Send failed: %s", e)
        return False


class StreamSender:
    """Sends octet-counted frames over the appender's TCP connection.

    The whole attempt loop runs under the connection lock so concurrent
    callers never interleave bytes on the wire.
    """

    def __init__(self, connection: ConnectionManager, max_attempts: int = STREAM_ATTEMPTS):
        self._connection = connection
        self._max_attempts = max_attempts

    def send(self, message: WireMessage) -> bool:
        """Deliver one message. Returns False when every attempt failed."""
        prefix = octet_count_prefix(message)
        payload = message.payload

        with self._connection.lock:
            if self._connection.sock is None and self._connection.resolve() is None:
                logger.debug("Collector %s unresolved, dropping message", self._connection.host)
                return False

            for attempt in range(1, self._max_attempts + 1):
                sock = self._connection.sock
                if sock is None:
                    sock = self._connection.connect_stream()
                    if sock is None:
                        continue

                if _send_exact(sock, prefix) and _send_exact(sock, payload):
                    return True

                # Partial or failed write leaves the stream unframed; start over.
                logger.debug("Write failed on attempt %d/%d, reconnecting",
                             attempt, self._max_attempts)
                self._connection.discard()

        logger.debug("Dropping message after %d attempts", self._max_attempts)
        return False


class DatagramSender:
    """Sends each message as one or more independent UDP datagrams."""

    def __init__(self, connection: ConnectionManager):
        self._connection = connection

    def send(self, message: WireMessage) -> int:
        """Send the message fragments. Returns how many datagrams were sent."""
        sock = self._connection.sock
        address = self._connection.address
        if sock is None or address is None:
            return 0

        target = (address.ip, self._connection.port)
        sent = 0
        for datagram in split_datagrams(message):
            try:
                sock.sendto(datagram, target)
            except (OSError, OverflowError) as e:
                logger.debug("sendto %s:%d failed: %s", target[0], target[1], e)
                continue
            sent += 1
        return sent

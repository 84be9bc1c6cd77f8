"""Thread-safe delivery counters for an appender."""

import threading


class DeliveryStats:
    """Counts what the appender handed to the network and what it dropped.

    Purely informational: delivery never depends on these counters.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._sent = 0
        self._dropped = 0
        self._datagrams = 0

    @property
    def sent(self) -> int:
        with self._lock:
            return self._sent

    @property
    def dropped(self) -> int:
        with self._lock:
            return self._dropped

    @property
    def datagrams(self) -> int:
        with self._lock:
            return self._datagrams

    def record_sent(self, datagrams: int = 0):
        """Record a delivered message, with the datagram count for UDP."""
        with self._lock:
            self._sent += 1
            self._datagrams += datagrams

    def record_dropped(self):
        with self._lock:
            self._dropped += 1

    def snapshot_and_reset(self) -> dict:
        """Atomically read all counters and reset them to zero."""
        with self._lock:
            snapshot = {
                "sent": self._sent,
                "dropped": self._dropped,
                "datagrams": self._datagrams,
            }
            self._sent = 0
            self._dropped = 0
            self._datagrams = 0
            return snapshot

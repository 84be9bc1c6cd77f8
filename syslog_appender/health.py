"""Collector health monitor that triggers a reconnect when the collector comes back."""

import logging
import socket
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class HealthMonitor:
    """Periodically checks a TCP endpoint and calls ``on_recover`` on recovery.

    Uses a plain TCP connect attempt. When the collector goes from unhealthy
    to healthy the callback runs on the monitor thread, typically
    ``appender.reopen``. The appender never starts a monitor itself; the
    application owns this thread.
    """

    def __init__(
        self,
        host: str,
        port: int,
        on_recover: Callable[[], object],
        shutdown_event: threading.Event,
        interval: float = 10.0,
    ):
        self._host = host
        self._port = port
        self._on_recover = on_recover
        self._shutdown = shutdown_event
        self._interval = interval
        self._healthy = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_healthy(self) -> bool:
        return self._healthy.is_set()

    def wait_for_healthy(self, timeout: float | None = None) -> bool:
        """Block until the collector is healthy or timeout expires."""
        return self._healthy.wait(timeout=timeout)

    def start(self):
        """Start the background health check thread."""
        self._thread = threading.Thread(target=self._monitor_loop, daemon=True)
        self._thread.start()

    def stop(self):
        """Signal the monitor to stop."""
        self._shutdown.set()
        if self._thread:
            self._thread.join(timeout=5)

    def check(self) -> bool:
        """Run one reachability check, update state and fire the callback on recovery."""
        healthy = self._reachable()
        was_healthy = self._healthy.is_set()

        if healthy and not was_healthy:
            logger.info("Collector %s:%d is now healthy", self._host, self._port)
            self._healthy.set()
            try:
                self._on_recover()
            except Exception:
                logger.exception("Recovery callback failed")
        elif not healthy and was_healthy:
            logger.warning("Collector %s:%d is now unhealthy", self._host, self._port)
            self._healthy.clear()
        return healthy

    def _monitor_loop(self):
        while not self._shutdown.is_set():
            self.check()
            self._shutdown.wait(self._interval)

    def _reachable(self) -> bool:
        """Attempt a TCP connect to check collector availability."""
        try:
            sock = socket.create_connection((self._host, self._port), timeout=2.0)
        except OSError:
            return False
        sock.close()
        return True

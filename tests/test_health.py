"""Tests for the health monitor module."""

import socket
import threading
import time

from syslog_appender.health import HealthMonitor


def _start_listener():
    """Start a TCP listener on a random port. Returns (sock, host, port)."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.bind(("127.0.0.1", 0))
    sock.listen(5)
    host, port = sock.getsockname()
    return sock, host, port


class TestHealthMonitorCheck:
    def test_recovery_fires_callback_once(self):
        listener, host, port = _start_listener()
        calls = []
        monitor = HealthMonitor(host, port, lambda: calls.append(1), threading.Event())
        try:
            assert monitor.check() is True
            assert monitor.check() is True
            assert monitor.is_healthy is True
            assert calls == [1]
        finally:
            listener.close()

    def test_no_collector(self):
        calls = []
        monitor = HealthMonitor("127.0.0.1", 1, lambda: calls.append(1), threading.Event())
        assert monitor.check() is False
        assert monitor.is_healthy is False
        assert calls == []

    def test_down_then_up_fires_again(self):
        listener, host, port = _start_listener()
        calls = []
        monitor = HealthMonitor(host, port, lambda: calls.append(1), threading.Event())
        monitor.check()
        listener.close()
        assert monitor.check() is False
        assert monitor.is_healthy is False

        relistener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        relistener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        relistener.bind((host, port))
        relistener.listen(5)
        try:
            assert monitor.check() is True
            assert calls == [1, 1]
        finally:
            relistener.close()

    def test_callback_error_is_contained(self):
        listener, host, port = _start_listener()

        def explode():
            raise RuntimeError("reopen failed")

        monitor = HealthMonitor(host, port, explode, threading.Event())
        try:
            assert monitor.check() is True
            assert monitor.is_healthy is True
        finally:
            listener.close()


class TestHealthMonitorThread:
    def test_background_thread(self):
        listener, host, port = _start_listener()
        shutdown = threading.Event()
        recovered = threading.Event()
        monitor = HealthMonitor(host, port, recovered.set, shutdown, interval=0.1)
        try:
            monitor.start()
            assert monitor.wait_for_healthy(timeout=2.0) is True
            assert recovered.wait(timeout=2.0) is True
        finally:
            monitor.stop()
            listener.close()

    def test_stop_is_prompt(self):
        shutdown = threading.Event()
        monitor = HealthMonitor("127.0.0.1", 1, lambda: None, shutdown, interval=10.0)
        monitor.start()
        time.sleep(0.2)
        start = time.monotonic()
        monitor.stop()
        assert time.monotonic() - start < 5.0

"""Shared pytest fixtures for the remote syslog appender test suite."""

import socket

import pytest

SYSLOG_ENV_VARS = (
    "SYSLOG_NAME", "SYSLOG_APP_NAME", "SYSLOG_HOST", "SYSLOG_PORT",
    "SYSLOG_FACILITY", "SYSLOG_TRANSPORT", "SYSLOG_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SYSLOG_* overrides inherited from the calling environment."""
    for var in SYSLOG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def udp_receiver():
    """Bind a UDP socket on an ephemeral port and yield (socket, port)."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    _, port = sock.getsockname()
    yield sock, port
    sock.close()


@pytest.fixture
def tcp_listener():
    """Bind a TCP listener on an ephemeral port and yield (socket, port)."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.bind(("127.0.0.1", 0))
    sock.listen(5)
    sock.settimeout(5.0)
    _, port = sock.getsockname()
    yield sock, port
    sock.close()

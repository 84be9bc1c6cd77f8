"""Tests for the logging.Handler adapter."""

import logging
import socket

import pytest

from syslog_appender.config import AppenderConfig
from syslog_appender.handler import RemoteSyslogHandler


@pytest.fixture
def handler_logger(udp_receiver):
    receiver, port = udp_receiver
    handler = RemoteSyslogHandler(AppenderConfig(host="127.0.0.1", port=port))
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    log = logging.getLogger("tests.handler")
    log.setLevel(logging.DEBUG)
    log.propagate = False
    log.addHandler(handler)
    yield log, handler, receiver
    log.removeHandler(handler)
    handler.close()


class TestRemoteSyslogHandler:
    def test_error_record(self, handler_logger):
        log, _, receiver = handler_logger
        log.error("disk %s", "full")
        data, _ = receiver.recvfrom(4096)
        assert data == b"<11>tests.handler: disk full"

    def test_levels_map_to_severities(self, handler_logger):
        log, _, receiver = handler_logger
        log.critical("c")
        log.warning("w")
        log.info("i")
        log.debug("d")
        received = [receiver.recvfrom(4096)[0] for _ in range(4)]
        assert received == [
            b"<10>tests.handler: c",
            b"<12>tests.handler: w",
            b"<14>tests.handler: i",
            b"<15>tests.handler: d",
        ]

    def test_own_records_are_skipped(self, handler_logger):
        _, handler, receiver = handler_logger
        record = logging.LogRecord("syslog_appender.sender", logging.ERROR, __file__, 1,
                                   "internal", None, None)
        handler.handle(record)
        assert handler.appender.stats.sent == 0
        receiver.settimeout(0.2)
        with pytest.raises(socket.timeout):
            receiver.recvfrom(4096)

    def test_format_error_goes_to_handle_error(self, handler_logger, monkeypatch):
        log, handler, _ = handler_logger
        errors = []
        monkeypatch.setattr(handler, "handleError", lambda record: errors.append(record))
        log.error("%d", "not a number")
        assert len(errors) == 1

    def test_reopen(self, handler_logger):
        log, handler, receiver = handler_logger
        assert handler.reopen() is True
        log.error("after reopen")
        data, _ = receiver.recvfrom(4096)
        assert data == b"<11>tests.handler: after reopen"

    def test_close_closes_appender(self, udp_receiver):
        _, port = udp_receiver
        handler = RemoteSyslogHandler(AppenderConfig(host="127.0.0.1", port=port))
        handler.close()
        assert handler.appender.connection.is_open is False

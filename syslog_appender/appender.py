"""Remote syslog appender: the facade a logging framework talks to."""

import logging

from syslog_appender.config import AppenderConfig, config_from_params
from syslog_appender.connection import ConnectionManager
from syslog_appender.framing import build_wire_message
from syslog_appender.layout import BasicLayout, Layout, LoggingEvent
from syslog_appender.priority import wire_priority
from syslog_appender.sender import DatagramSender, StreamSender
from syslog_appender.stats import DeliveryStats

logger = logging.getLogger(__name__)


class RemoteSyslogAppender:
    """Sends formatted events to a remote syslog collector over UDP or TCP.

    Network setup happens in the constructor and every transport failure
    is absorbed: append() never raises because the collector is down or
    unreachable, it drops the message instead. I/O runs synchronously on
    the calling thread.
    """

    def __init__(self, config: AppenderConfig, layout: Layout | None = None):
        self._config = config
        self._layout = layout or BasicLayout()
        self._connection = ConnectionManager(
            config.host, config.port, config.transport, timeout=config.timeout,
        )
        if config.tcp:
            self._sender = StreamSender(self._connection)
        else:
            self._sender = DatagramSender(self._connection)
        self._stats = DeliveryStats()
        self.open()

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def config(self) -> AppenderConfig:
        return self._config

    @property
    def connection(self) -> ConnectionManager:
        return self._connection

    @property
    def stats(self) -> DeliveryStats:
        return self._stats

    @property
    def layout(self) -> Layout:
        return self._layout

    @layout.setter
    def layout(self, layout: Layout):
        self._layout = layout

    def open(self):
        self._connection.open()

    def close(self):
        self._connection.close()

    def reopen(self) -> bool:
        """Force a reconnect. Always True, even if the collector is unreachable."""
        logger.debug("Reopening appender %s", self._config.name)
        return self._connection.reopen()

    def append(self, event: LoggingEvent):
        """Format the event and ship it to the collector."""
        text = self._layout.format(event)
        message = build_wire_message(wire_priority(self._config.facility, event.priority), text)

        if self._config.tcp:
            delivered = self._sender.send(message)
            datagrams = 0
        else:
            datagrams = self._sender.send(message)
            delivered = datagrams > 0

        if delivered:
            self._stats.record_sent(datagrams)
        else:
            self._stats.record_dropped()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def create_remote_syslog_appender(params: dict, layout: Layout | None = None) -> RemoteSyslogAppender:
    """Build an appender from factory parameters (see config_from_params)."""
    return RemoteSyslogAppender(config_from_params(params), layout=layout)

"""stdlib logging integration for the remote syslog appender."""

import logging

from syslog_appender.appender import RemoteSyslogAppender
from syslog_appender.config import AppenderConfig
from syslog_appender.layout import LoggingEvent, MessageLayout
from syslog_appender.priority import from_logging_level

# Records from this package are never shipped, so a handler attached to the
# root logger cannot feed its own diagnostics back into itself.
_OWN_LOGGER_PREFIX = "syslog_appender"


class RemoteSyslogHandler(logging.Handler):
    """logging.Handler that ships records through a RemoteSyslogAppender.

    The handler's Formatter renders the text; the appender adds the
    priority preamble and framing.
    """

    def __init__(self, config: AppenderConfig, level=logging.NOTSET,
                 appender: RemoteSyslogAppender | None = None):
        super().__init__(level)
        self._appender = appender or RemoteSyslogAppender(config, layout=MessageLayout())

    @property
    def appender(self) -> RemoteSyslogAppender:
        return self._appender

    def emit(self, record: logging.LogRecord):
        if record.name == _OWN_LOGGER_PREFIX or record.name.startswith(_OWN_LOGGER_PREFIX + "."):
            return
        try:
            event = LoggingEvent(
                priority=from_logging_level(record.levelno),
                message=self.format(record),
                category=record.name,
                timestamp=record.created,
                thread_name=record.threadName or "",
            )
            self._appender.append(event)
        except Exception:
            self.handleError(record)

    def reopen(self) -> bool:
        return self._appender.reopen()

    def close(self):
        try:
            self._appender.close()
        finally:
            super().close()

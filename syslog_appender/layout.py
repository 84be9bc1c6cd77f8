"""Logging events and the layouts that render them to message text."""

import threading
import time
from dataclasses import dataclass, field

from syslog_appender.priority import INFO, priority_name


@dataclass
class LoggingEvent:
    priority: int = INFO
    message: str = ""
    category: str = ""
    ndc: str = ""
    timestamp: float = field(default_factory=time.time)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)


class Layout:
    """Turns a LoggingEvent into the text that goes after the syslog preamble."""

    def format(self, event: LoggingEvent) -> str:
        raise NotImplementedError


class BasicLayout(Layout):
    """'<epoch seconds> <PRIORITY> <category> <ndc>: <message>'."""

    def format(self, event: LoggingEvent) -> str:
        return (
            f"{int(event.timestamp)} {priority_name(event.priority)} "
            f"{event.category} {event.ndc}: {event.message}"
        )


class SimpleLayout(Layout):
    """'<PRIORITY> - <message>'."""

    def format(self, event: LoggingEvent) -> str:
        return f"{priority_name(event.priority)} - {event.message}"


class MessageLayout(Layout):
    """Passes the message through untouched, for text formatted upstream."""

    def format(self, event: LoggingEvent) -> str:
        return event.message

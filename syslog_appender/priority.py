"""Priority mapping between the internal level scale and syslog severities."""

import logging

# Internal priority scale, lower is more severe.
EMERG = 0
FATAL = 0
ALERT = 100
CRIT = 200
ERROR = 300
WARN = 400
NOTICE = 500
INFO = 600
DEBUG = 700
NOTSET = 800

PRIORITY_NAMES = {
    "EMERG": EMERG,
    "FATAL": FATAL,
    "ALERT": ALERT,
    "CRIT": CRIT,
    "CRITICAL": CRIT,
    "ERROR": ERROR,
    "WARN": WARN,
    "WARNING": WARN,
    "NOTICE": NOTICE,
    "INFO": INFO,
    "DEBUG": DEBUG,
    "NOTSET": NOTSET,
}

# Syslog severities (RFC 3164).
LOG_EMERG = 0
LOG_ALERT = 1
LOG_CRIT = 2
LOG_ERR = 3
LOG_WARNING = 4
LOG_NOTICE = 5
LOG_INFO = 6
LOG_DEBUG = 7

SEVERITY_TABLE = (
    LOG_EMERG, LOG_ALERT, LOG_CRIT, LOG_ERR,
    LOG_WARNING, LOG_NOTICE, LOG_INFO, LOG_DEBUG,
)

# Facility codes, already shifted into the priority space.
LOG_KERN = 0 << 3
LOG_USER = 1 << 3
LOG_MAIL = 2 << 3
LOG_DAEMON = 3 << 3
LOG_AUTH = 4 << 3
LOG_SYSLOG = 5 << 3
LOG_LPR = 6 << 3
LOG_NEWS = 7 << 3
LOG_UUCP = 8 << 3
LOG_CRON = 9 << 3
LOG_AUTHPRIV = 10 << 3
LOG_FTP = 11 << 3
LOG_LOCAL0 = 16 << 3
LOG_LOCAL1 = 17 << 3
LOG_LOCAL2 = 18 << 3
LOG_LOCAL3 = 19 << 3
LOG_LOCAL4 = 20 << 3
LOG_LOCAL5 = 21 << 3
LOG_LOCAL6 = 22 << 3
LOG_LOCAL7 = 23 << 3

FACILITY_NAMES = {
    "kern": LOG_KERN,
    "user": LOG_USER,
    "mail": LOG_MAIL,
    "daemon": LOG_DAEMON,
    "auth": LOG_AUTH,
    "syslog": LOG_SYSLOG,
    "lpr": LOG_LPR,
    "news": LOG_NEWS,
    "uucp": LOG_UUCP,
    "cron": LOG_CRON,
    "authpriv": LOG_AUTHPRIV,
    "ftp": LOG_FTP,
    "local0": LOG_LOCAL0,
    "local1": LOG_LOCAL1,
    "local2": LOG_LOCAL2,
    "local3": LOG_LOCAL3,
    "local4": LOG_LOCAL4,
    "local5": LOG_LOCAL5,
    "local6": LOG_LOCAL6,
    "local7": LOG_LOCAL7,
}


def to_syslog_severity(level: int) -> int:
    """Map an internal priority value to a syslog severity in [0, 7].

    Values more severe than EMERG map to LOG_EMERG, values past the end
    of the table (NOTSET and beyond) map to LOG_DEBUG.
    """
    index = (level + 1) // 100
    if index < 0:
        return LOG_EMERG
    if index > 7:
        return LOG_DEBUG
    return SEVERITY_TABLE[index]


def wire_priority(facility: int, level: int) -> int:
    """Priority value placed in the <N> preamble.

    The facility is added to the severity, so it must already be shifted
    (e.g. LOG_USER == 8).
    """
    return facility + to_syslog_severity(level)


def priority_from_name(name: str) -> int:
    """Look up an internal priority value by name, case-insensitive."""
    try:
        return PRIORITY_NAMES[name.strip().upper()]
    except KeyError:
        raise ValueError(f"unknown priority name: {name!r}") from None


def facility_from_name(name: str) -> int:
    """Look up a pre-shifted facility code by name, case-insensitive."""
    try:
        return FACILITY_NAMES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown facility name: {name!r}") from None


def from_logging_level(levelno: int) -> int:
    """Translate a stdlib logging level number to the internal scale.

    Levels between two named stdlib levels map like the lower one.
    """
    if levelno >= logging.CRITICAL:
        return CRIT
    if levelno >= logging.ERROR:
        return ERROR
    if levelno >= logging.WARNING:
        return WARN
    if levelno >= logging.INFO:
        return INFO
    if levelno > logging.NOTSET:
        return DEBUG
    return NOTSET


_PRIORITY_LABELS = (
    "FATAL", "ALERT", "CRIT", "ERROR", "WARN", "NOTICE", "INFO", "DEBUG", "NOTSET",
)


def priority_name(level: int) -> str:
    """Display name of an internal priority value, UNKNOWN when out of range."""
    index = (level + 1) // 100
    if index < 0 or index >= len(_PRIORITY_LABELS):
        return "UNKNOWN"
    return _PRIORITY_LABELS[index]

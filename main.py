"""Entry point: ship lines from stdin to a remote syslog collector."""

import logging
import sys

from syslog_appender.appender import RemoteSyslogAppender
from syslog_appender.config import build_arg_parser, load_config
from syslog_appender.layout import LoggingEvent, MessageLayout
from syslog_appender.priority import priority_from_name

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, stream=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        level = priority_from_name(args.level)
        config = load_config(args)
    except ValueError as e:
        parser.error(str(e))

    logger.info("Shipping stdin to %s:%d over %s (facility=%d)",
                config.host, config.port, config.transport.value, config.facility)

    stream = stream if stream is not None else sys.stdin
    with RemoteSyslogAppender(config, layout=MessageLayout()) as appender:
        for line in stream:
            line = line.rstrip("\r\n")
            if not line:
                continue
            appender.append(LoggingEvent(priority=level, message=line,
                                         category=config.syslog_name))

    snapshot = appender.stats.snapshot_and_reset()
    logger.info("Done: sent=%d, dropped=%d, datagrams=%d",
                snapshot["sent"], snapshot["dropped"], snapshot["datagrams"])
    return 0 if snapshot["dropped"] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())

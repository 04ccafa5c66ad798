"""Formatting of the harness log output."""
import logging

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-5s %(name)s : %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# loggers of the harness are shown relative to the package
PACKAGE_PREFIX = "ecs_cli_integ."

SHORT_LEVEL_NAMES = {
    logging.CRITICAL: "FATAL",
    logging.WARNING: "WARN",
}


def short_logger_name(name: str) -> str:
    """Strips the package prefix from harness loggers, ``ecs_cli_integ.testing.aws.ecs`` becomes
    ``testing.aws.ecs``. Third-party loggers are kept as they are."""
    if name.startswith(PACKAGE_PREFIX):
        return name[len(PACKAGE_PREFIX) :]
    return name


def short_level_name(record: logging.LogRecord) -> str:
    return SHORT_LEVEL_NAMES.get(record.levelno, record.levelname)


class DefaultFormatter(logging.Formatter):
    """
    Formats records as ``<timestamp> <level> <logger> : <message>`` with short level and logger names. The record
    itself is left untouched, so other handlers still see the original names.
    """

    def __init__(self, fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT):
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        record.name = short_logger_name(record.name)
        record.levelname = short_level_name(record)
        return super().format(record)

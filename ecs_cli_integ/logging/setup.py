import logging
import sys

from ecs_cli_integ import config, constants

from .format import DefaultFormatter

# default levels of third-party and harness loggers, the AWS SDK is very chatty on DEBUG
default_log_levels = {
    "boto3": logging.INFO,
    "botocore": logging.ERROR,
    "s3transfer": logging.INFO,
    "urllib3": logging.WARNING,
}

# levels applied on top of the defaults when trace logging is enabled
trace_log_levels = {
    "boto3": logging.DEBUG,
    "botocore": logging.DEBUG,
}


def get_log_level_from_config() -> int:
    # ECS_CLI_INTEG_LOG overrides DEBUG
    if config.ECS_CLI_INTEG_LOG:
        log_level = str(config.ECS_CLI_INTEG_LOG).upper()
        if log_level.lower() == constants.LOG_TRACE:
            log_level = "DEBUG"
        if log_level == "WARN":
            log_level = "WARNING"
        return logging.getLevelName(log_level)

    return logging.DEBUG if config.DEBUG else logging.INFO


def is_trace_logging_enabled() -> bool:
    return config.ECS_CLI_INTEG_LOG == constants.LOG_TRACE


def setup_logging_from_config():
    setup_logging(get_log_level_from_config())

    if is_trace_logging_enabled():
        for name, level in trace_log_levels.items():
            logging.getLogger(name).setLevel(level)


def create_default_handler(log_level: int):
    log_handler = logging.StreamHandler(stream=sys.stderr)
    log_handler.setLevel(log_level)
    log_handler.setFormatter(DefaultFormatter())
    return log_handler


def setup_logging(log_level=logging.INFO) -> None:
    """
    Configures the python logging environment for the harness.

    :param log_level: the optional log level.
    """
    log_handler = create_default_handler(log_level)

    # replace any existing handlers
    logging.basicConfig(level=log_level, handlers=[log_handler], force=True)

    logging.root.setLevel(log_level)
    logging.getLogger("ecs_cli_integ").setLevel(log_level)
    for logger, level in default_log_levels.items():
        logging.getLogger(logger).setLevel(level)

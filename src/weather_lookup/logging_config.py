"""Centralized logging configuration."""

import logging

from weather_lookup.config import DEBUG

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# These keep their own handler and stop propagating to the root logger
FRAMEWORK_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "httpx", "fastapi")


def _replace_handlers(logger: logging.Logger, formatter: logging.Formatter, level: int) -> None:
    for existing in logger.handlers[:]:
        logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)


def configure_logging(level: int = logging.DEBUG if DEBUG else logging.INFO):
    """
    Send the proxy, the client and the framework loggers to the console in one format.

    Args:
        level: Level applied to the root logger and the framework loggers
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    _replace_handlers(logging.getLogger(), formatter, level)

    for name in FRAMEWORK_LOGGERS:
        framework_logger = logging.getLogger(name)
        _replace_handlers(framework_logger, formatter, level)
        framework_logger.propagate = False

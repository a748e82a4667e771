"""Logging configuration for the CLI."""

import logging
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from ..config import LoggingConfig, TimestampPrecision
from ..constants.output import PACKAGE_LOGGER_NAME, TIMESTAMP_TIMESPECS

# -v count -> level; no flag shows warnings and errors
_VERBOSITY_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def level_for(config: LoggingConfig) -> int:
    """Map the verbosity settings to a logging level."""
    if config.quiet:
        return logging.CRITICAL + 1
    index = min(config.verbosity, len(_VERBOSITY_LEVELS) - 1)
    return _VERBOSITY_LEVELS[index]


def _time_formatter(timespec: str):
    def format_time(moment: datetime) -> Text:
        return Text(moment.isoformat(timespec=timespec))

    return format_time


def setup_logging(config: LoggingConfig, console: Console | None = None) -> logging.Logger:
    """
    Configure the package logger to write to stderr.

    Calling it again replaces the handler installed by the previous call.

    Args:
        config: Verbosity settings
        console: Console to log to (defaults to a stderr console)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    show_time = config.timestamp is not TimestampPrecision.NONE
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=show_time,
        show_level=True,
        show_path=False,
        omit_repeated_times=False,
        log_time_format=_time_formatter(TIMESTAMP_TIMESPECS[config.timestamp.value]) if show_time else "[%X]",
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(level_for(config))
    return logger

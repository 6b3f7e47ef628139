"""
Logging configuration for SkewT Charts package.

All package modules log under the ``skewt_charts`` logger. This module
attaches the console (and optional file) handlers to that logger, picks the
level from the CLI verbosity or the SKEWT_CHARTS_LOG_LEVEL environment
variable, and keeps matplotlib's own font/backend chatter out of the output.
"""

import logging
import os
import sys
from typing import Optional


PACKAGE_LOGGER = "skewt_charts"
LOG_LEVEL_ENV_VAR = "SKEWT_CHARTS_LOG_LEVEL"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"

# Third-party loggers that are noisy at INFO/DEBUG while rendering
_QUIET_LOGGERS = ("matplotlib", "matplotlib.font_manager", "PIL")

_VERBOSITY_LEVELS = {
    1: logging.DEBUG,
    0: logging.INFO,
    -1: logging.WARNING,
}


def resolve_level(verbosity: int = 0) -> int:
    """
    Map a CLI verbosity to a logging level.

    ``SKEWT_CHARTS_LOG_LEVEL`` (DEBUG, INFO, WARNING, ERROR, CRITICAL) wins
    over the verbosity when set to a known level name.

    Example:
        >>> resolve_level(1) == logging.DEBUG
        True
    """
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if env_level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return getattr(logging, env_level)

    if verbosity >= 1:
        return logging.DEBUG
    return _VERBOSITY_LEVELS.get(verbosity, logging.ERROR)


def setup_logging(
    verbosity: int = 0,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Configure logging for SkewT Charts package.

    Replaces any handlers previously attached to the ``skewt_charts`` logger,
    so it is safe to call repeatedly (the CLI calls it again after parsing
    its flags).

    Args:
        verbosity: Verbosity level (1=DEBUG, 0=INFO, -1=WARNING, -2=ERROR)
        log_file: Optional path; the file receives every record at DEBUG
        format_string: Optional custom format for console records

    Environment Variables:
        SKEWT_CHARTS_LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR)

    Example:
        >>> setup_logging(verbosity=1)  # Enable DEBUG logging
        >>> setup_logging(log_file="skewt.log")  # Also log to file
    """
    level = resolve_level(verbosity)
    if format_string is None:
        format_string = DEFAULT_FORMAT if verbosity >= 0 else SIMPLE_FORMAT

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(format_string))
    logger.addHandler(console)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        except OSError as e:
            logger.warning(f"Failed to create log file {log_file}: {e}")
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            logger.addHandler(file_handler)
            logger.info(f"Logging to file: {log_file}")

    logger.debug(f"Logging configured: level={logging.getLevelName(level)}")


def get_logger(name: str) -> logging.Logger:
    """
    Logger under the ``skewt_charts`` hierarchy.

    Bare names are prefixed, so ``get_logger("profile")`` and
    ``get_logger("skewt_charts.profile")`` return the same logger.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)

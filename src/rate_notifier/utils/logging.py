"""
Logging setup for Rate Notifier

All module loggers live under the ``rate_notifier`` namespace, so configuring
that one logger covers both the rate fetch and the Slack post.
"""

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ..constants import DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT

if TYPE_CHECKING:
    from ..config import Config

PACKAGE_LOGGER = "rate_notifier"


def setup_logger(
    config: Optional["Config"] = None,
    level: Optional[str] = None,
    console: bool = True,
    name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """
    Configure the package logger for one run

    Level and log file come from the run configuration; an explicit level
    (e.g. from the command line) takes precedence over the configured one.

    Args:
        config: Run configuration supplying log_level and log_file
        level: Log level override
        console: Whether to output to stdout
        name: Logger name

    Returns:
        Configured logger instance
    """
    level = (level or (config.log_level if config else None) or DEFAULT_LOG_LEVEL).upper()
    log_file = config.log_file if config else None

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level))

    # Warm Cloud Function instances call this once per invocation
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)

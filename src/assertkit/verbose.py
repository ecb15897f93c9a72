"""Failure logging driven by :class:`~assertkit.config.Settings`."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from assertkit.config import Settings, get_settings

LOG_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logger(
    settings: Settings | None = None, logger_name: str = "assertkit"
) -> logging.Logger:
    """
    Point the check loggers at the destinations named by ``settings``.

    Failures go to ``settings.log_file`` when set and to stderr when
    ``settings.verbose`` is on. With neither, the logger is left without
    handlers and records propagate as usual. Check modules log under
    ``assertkit.*``, so the default name captures them.

    Args:
        settings: Settings to apply; the process-wide settings when omitted.
        logger_name: Name of the logger to configure.

    Returns:
        The configured logger.
    """
    if settings is None:
        settings = get_settings()

    logger = logging.getLogger(logger_name)

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    if not settings.log_file and not settings.verbose:
        logger.setLevel(logging.NOTSET)
        return logger

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if settings.log_file:
        log_file = Path(settings.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if settings.verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger

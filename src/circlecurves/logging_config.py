"""
Logging Configuration
Sets up the global logger for the application.

The level and an optional log file can be given by the caller or through the
environment (see `circlecurves.config.LOG_LEVEL_ENV` and `LOG_FILE_ENV`).
"""
import logging
import os
import sys
from typing import Mapping, Optional

from circlecurves.config import LOG_FILE_ENV, LOG_LEVEL_ENV, MODULE_LOG_LEVELS


def level_from_env(default: int = logging.INFO) -> int:
    """Level named by the environment (e.g. ``DEBUG``), or `default` if unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return logging.getLevelNamesMapping().get(name, default)


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    module_levels: Optional[Mapping[str, int]] = None,
) -> logging.Logger:
    """
    Configures the root logger for the 'circlecurves' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO). Read from
            the environment when omitted.
        log_file: Optional path to save logs to a file. Read from the
            environment when omitted.
        module_levels: Levels for individual modules; defaults to
            `MODULE_LOG_LEVELS`. A module is never made more verbose than
            the package.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = level_from_env()
    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV) or None
    if module_levels is None:
        module_levels = MODULE_LOG_LEVELS

    logger = logging.getLogger("circlecurves")
    logger.setLevel(level)

    # Avoid duplicate handlers when setup runs twice in one process
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name, module_level in module_levels.items():
        logging.getLogger(name).setLevel(max(level, module_level))

    logger.info("Logging initialized at %s.", logging.getLevelName(level))
    return logger

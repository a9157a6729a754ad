"""
Logging Configuration
Console (and optional file) logging for the dimensionless calculator.

Every module logs under the "dimensionless" namespace: registrations at DEBUG,
rejected input and opened calculators at INFO, unreadable stylesheets and
unknown stored preferences at WARNING. The level is taken from the
DIMENSIONLESS_LOG_LEVEL environment variable when the GUI starts.
"""
import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "DIMENSIONLESS_LOG_LEVEL"


def level_from_env(default: int = logging.INFO) -> int:
    """Read the log level name from DIMENSIONLESS_LOG_LEVEL, e.g. 'DEBUG'."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Attach handlers to the "dimensionless" logger, replacing earlier ones.

    Calling it again (e.g. from a test) swaps the handlers instead of
    duplicating output.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("dimensionless")
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs during reload/restart
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
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

    logger.info("Logging initialized.")

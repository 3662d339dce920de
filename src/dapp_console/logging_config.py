"""Logging configuration for dapp-console."""

import logging
import sys

from .constants import SCRIPT_LOGGER_NAME

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
SCRIPT_FORMAT = "%(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False) -> None:
    """
    Configure console logging.

    Library messages go to stderr at WARNING level, or DEBUG when verbose.
    The script logger behind the `console` binding prints bare messages to
    stdout at INFO level, so console.log() and console.info() read like
    print().

    Args:
        verbose: Log debug messages
    """
    level = logging.DEBUG if verbose else logging.WARNING

    package_logger = logging.getLogger("dapp_console")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(SIMPLE_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(handler)

    script_logger = logging.getLogger(SCRIPT_LOGGER_NAME)
    script_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    script_logger.propagate = False
    if not script_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(SCRIPT_FORMAT))
        script_logger.addHandler(handler)

"""
Logging helpers for the "wisched" logger tree

Library modules log through get_logger() and never install a handler;
applications call setup_logging() to print the records.
"""

import logging
import sys
from enum import Enum


class LogLevel(Enum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class SimpleLogger:
    """Named logger with level-only methods"""

    def __init__(self, name: str = "wisched"):
        self.logger = logging.getLogger(name)

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check whether a message at this level would be emitted"""
        return self.logger.isEnabledFor(level.value)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)


def setup_logging(level: LogLevel = LogLevel.INFO, show_timestamp: bool = False) -> SimpleLogger:
    """
    Send "wisched" records at `level` and above to stdout

    Calling it again replaces the previous handler.

    Args:
        level: Lowest level printed
        show_timestamp: Prefix records with time and logger name

    Returns:
        SimpleLogger for the "wisched" root
    """
    root_logger = logging.getLogger("wisched")
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(level.value)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level.value)
    if show_timestamp:
        formatter = logging.Formatter('[%(asctime)s] %(name)s: %(message)s', datefmt='%H:%M:%S')
    else:
        formatter = logging.Formatter('%(message)s')
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # records already printed here must not reach the root handlers too
    root_logger.propagate = False

    return SimpleLogger("wisched")


def get_logger(name: str = "wisched") -> SimpleLogger:
    """Logger for a module path under "wisched", such as wisched.solver"""
    return SimpleLogger(name)

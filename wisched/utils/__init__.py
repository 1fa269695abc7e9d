"""
wisched.utils - Utility modules for the wisched library
"""

from .logger import get_logger, setup_logging, LogLevel, SimpleLogger
from .enums import SortStrategy

__all__ = ["get_logger", "setup_logging", "LogLevel", "SimpleLogger", "SortStrategy"]

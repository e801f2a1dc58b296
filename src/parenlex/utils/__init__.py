"""Utility modules for parenlex.

Provides:
- logger: LOGGER_NAME and get_logger for the parenlex logger namespace
"""

from parenlex.utils.logger import LOGGER_NAME, get_logger

__all__ = ["LOGGER_NAME", "get_logger"]

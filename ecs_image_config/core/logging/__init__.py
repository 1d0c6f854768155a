"""Logging setup for the image configuration tools.

Example usage:
    from ecs_image_config.core.logging import configure_logging, get_logger

    configure_logging("DEBUG", fmt="json")
    logger = get_logger(__name__)
"""

from .exceptions import ConfigurationError, LoggingError
from .formatters import JSONFormatter, TextFormatter, create_formatter
from .manager import LoggingManager, configure_logging, get_logger

__all__ = [
    "LoggingManager",
    "configure_logging",
    "get_logger",
    "JSONFormatter",
    "TextFormatter",
    "create_formatter",
    "LoggingError",
    "ConfigurationError",
]

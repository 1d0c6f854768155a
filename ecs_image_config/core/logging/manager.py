# ecs_image_config/core/logging/manager.py
"""
Logging manager for centralized logging configuration.
"""

import logging
import sys
from typing import TextIO

from .exceptions import ConfigurationError
from .formatters import create_formatter

PACKAGE_LOGGER = "ecs_image_config"
VALID_FORMATS = ("text", "json")


class LoggingManager:
    """Installs one console handler on the package logger."""

    def __init__(
        self,
        level: str | int = "INFO",
        fmt: str = "text",
        stream: TextIO | None = None,
    ):
        """Initialize the logging manager.

        Args:
            level: Logging level name or number.
            fmt: Output format, ``text`` or ``json``.
            stream: Stream for the handler. Defaults to stderr.
        """
        self.level = level
        self.fmt = fmt
        self.stream = stream
        self._handler: logging.Handler | None = None

    def configure(self) -> None:
        """Configure the package logger."""
        if self.fmt not in VALID_FORMATS:
            raise ConfigurationError(
                f"Unknown log format '{self.fmt}', expected one of {VALID_FORMATS}",
                config_key="log_format",
                config_value=self.fmt,
            )

        level = self.level
        if isinstance(level, str):
            level = getattr(logging, level.upper(), None)
            if not isinstance(level, int):
                raise ConfigurationError(
                    f"Unknown log level '{self.level}'",
                    config_key="log_level",
                    config_value=self.level,
                )

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        self.shutdown()

        handler = logging.StreamHandler(self.stream or sys.stderr)
        handler.setFormatter(create_formatter(self.fmt))
        package_logger.addHandler(handler)
        package_logger.setLevel(level)
        self._handler = handler

    def shutdown(self) -> None:
        """Remove the handler installed by :meth:`configure`."""
        if self._handler is not None:
            logging.getLogger(PACKAGE_LOGGER).removeHandler(self._handler)
            self._handler = None


# Global logging manager instance
_logging_manager: LoggingManager | None = None


def configure_logging(
    level: str | int = "INFO", fmt: str = "text", stream: TextIO | None = None
) -> LoggingManager:
    """Configure the global logging system.

    Calling it again replaces the previous handler instead of stacking a new one.
    """
    global _logging_manager
    if _logging_manager is not None:
        _logging_manager.shutdown()
    _logging_manager = LoggingManager(level, fmt, stream)
    _logging_manager.configure()
    return _logging_manager


def get_logger(name: str) -> logging.Logger:
    """Get a logger by name."""
    return logging.getLogger(name)

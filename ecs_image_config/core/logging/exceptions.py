"""Exceptions for the logging setup."""

from typing import Any


class LoggingError(Exception):
    """Base exception for logging errors."""

    def __init__(self, message: str, logger_name: str | None = None):
        self.message = message
        self.logger_name = logger_name
        super().__init__(message)


class ConfigurationError(LoggingError):
    """Raised when logging configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        config_value: Any | None = None,
    ):
        """Initialize the configuration error.

        Args:
            message: Error message
            config_key: Configuration key that caused the error
            config_value: Configuration value that caused the error
        """
        self.config_key = config_key
        self.config_value = config_value
        super().__init__(message)

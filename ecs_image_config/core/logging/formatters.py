# ecs_image_config/core/logging/formatters.py
"""
Log formatters for console output.
"""

from datetime import datetime
import json
import logging

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class TextFormatter(logging.Formatter):
    """Human-readable single line formatter."""

    def __init__(self, fmt: str | None = None, datefmt: str | None = None):
        if fmt is None:
            fmt = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"
        super().__init__(fmt, datefmt)


class JSONFormatter(logging.Formatter):
    """JSON formatter for machine-readable logs."""

    def __init__(self, include_exception: bool = True):
        """Initialize the JSON formatter.

        Args:
            include_exception: Whether to include exception information.
        """
        super().__init__()
        self.include_exception = include_exception

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON formatted log message.
        """
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if self.include_exception and record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        # Custom fields passed through ``extra``
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str, ensure_ascii=False)


def create_formatter(formatter_type: str) -> logging.Formatter:
    """Create a formatter by name (``text`` or ``json``)."""
    if formatter_type == "json":
        return JSONFormatter()
    return TextFormatter()

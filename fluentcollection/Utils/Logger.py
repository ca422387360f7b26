from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Optional

from fluentcollection.Support.Config import settings

LogContext = Dict[str, Any]


class CollectionLogger:
    """Logger wrapper that appends structured context to messages."""

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name or settings.LOG_CHANNEL
        self.logger = logging.getLogger(self.name)

        if not self.logger.handlers:
            self._setup_default_handler()

    def _setup_default_handler(self) -> None:
        """Set up default logging handler."""
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(settings.LOG_FORMAT, datefmt=settings.LOG_DATE_FORMAT)
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)
        self.logger.setLevel(settings.LOG_LEVEL)

    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log debug message."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(message, context))

    def info(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log info message."""
        self.logger.info(self._format_message(message, context))

    def warning(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log warning message."""
        self.logger.warning(self._format_message(message, context))

    def error(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log error message."""
        self.logger.error(self._format_message(message, context))

    def critical(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log critical message."""
        self.logger.critical(self._format_message(message, context))

    def _format_message(self, message: str, context: Optional[LogContext] = None) -> str:
        """Format message with context."""
        if context:
            context_str = " | ".join(f"{k}={v!r}" for k, v in context.items())
            return f"{message} | {context_str}"
        return message


_loggers: Dict[str, CollectionLogger] = {}


def get_logger(name: Optional[str] = None) -> CollectionLogger:
    """Get a (cached) collection logger instance."""
    key = name or settings.LOG_CHANNEL
    if key not in _loggers:
        _loggers[key] = CollectionLogger(key)
    return _loggers[key]

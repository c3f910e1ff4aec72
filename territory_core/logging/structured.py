"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

This module provides a structured logger that outputs one JSON object per
log record.

Design:
- JSON output (compatible with log aggregators)
- Thread-safe (uses standard logging module)
- Typed events (LogEvent enum)
- Level check before serialization (normalization runs on render paths)

Example:
    >>> logger = StructuredLogger(component="geometry")
    >>> logger.debug(
    ...     event=LogEvent.GEOMETRY_RINGS_NORMALIZED,
    ...     message="Normalized territory",
    ...     metadata={'source': 'multi_ring', 'rings': 2}
    ... )

Output:
    {
        "timestamp": "2026-10-16T09:12:03.512201+00:00",
        "level": "DEBUG",
        "component": "geometry",
        "event": "geometry.rings.normalized",
        "message": "Normalized territory",
        "metadata": {"source": "multi_ring", "rings": 2}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Wraps Python's logging module with structured metadata support.

    Attributes:
        component: Component name (e.g., "geometry", "units")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "geometry")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: territory_core.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"territory_core.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Internal log method with structured format.

        Args:
            level: Log level name (DEBUG, INFO, WARNING, ERROR)
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception for ERROR logs
        """
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        # default=repr keeps arbitrary untrusted values serializable
        self.logger.log(
            log_level,
            json.dumps(log_entry, default=repr),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Example:
            >>> logger.info(
            ...     event=LogEvent.CONFIG_LOADED,
            ...     message="Loaded configuration",
            ...     metadata={'path': 'territory.yaml'}
            ... )
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log WARNING level message."""
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Example:
            >>> try:
            ...     CoreConfig.from_yaml(path)
            ... except ValueError as e:
            ...     logger.error(
            ...         event=LogEvent.CONFIG_VALIDATION_ERROR,
            ...         message="Rejected configuration",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change logging level dynamically."""
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Pass-through formatter for records produced by StructuredLogger.

    The message is already a JSON document.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Args:
        component: Component identifier
        level: Logging level (default: INFO)

    Returns:
        Configured StructuredLogger instance
    """
    return StructuredLogger(component=component, level=level)

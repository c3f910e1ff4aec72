"""
Structured Logging for territory_core
=====================================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from territory_core.logging import create_logger, LogEvent
    >>> logger = create_logger("geometry")
    >>> logger.info(
    ...     event=LogEvent.CONFIG_LOADED,
    ...     message="Loaded configuration",
    ...     metadata={'path': 'territory.yaml'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]

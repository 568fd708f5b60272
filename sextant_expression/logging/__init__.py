"""
Structured Logging for Sextant Expressions
==========================================

Bounded Context: Observability

JSON-structured logging on top of the standard logging module.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function
    configure_logging: Set the level of every sextant logger

Example:
    >>> from sextant_expression.logging import create_logger, LogEvent
    >>> logger = create_logger("expression.distance")
    >>> logger.error(
    ...     event=LogEvent.SERIALIZATION_ERROR,
    ...     message="Failed to serialize 'distance' expression",
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, configure_logging, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'configure_logging',
    'create_logger',
]

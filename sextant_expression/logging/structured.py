"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Every sextant component logs through a child of the "sextant" logger.
Children carry no level or handler of their own, so one call to
configure_logging() sets verbosity for the whole package.

Design:
- One JSON line per event (compatible with log aggregators)
- Typed events (LogEvent enum)
- Level and handler live on the "sextant" parent logger only
- Output goes to whatever sys.stderr is at emit time

Example:
    >>> configure_logging(logging.DEBUG)
    >>> logger = create_logger("expression.distance")
    >>> logger.debug(
    ...     event=LogEvent.EXPRESSION_EVALUATED,
    ...     message="Evaluated 'distance' expression",
    ...     metadata={'tile': '14/8800/5373', 'distance': 412.7}
    ... )

Output:
    {"timestamp": "2025-10-24T15:30:45.123456+00:00", "level": "DEBUG",
     "component": "expression.distance", "event": "expression.evaluated",
     "message": "Evaluated 'distance' expression",
     "metadata": {"tile": "14/8800/5373", "distance": 412.7}}
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent

ROOT_LOGGER = "sextant"


class JSONFormatter(logging.Formatter):
    """
    Formatter for StructuredLogger records.

    The message built by StructuredLogger is already JSON, so it is passed
    through unchanged.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


class StderrHandler(logging.StreamHandler):
    """StreamHandler bound to the current sys.stderr rather than the one at import."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def _package_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = StderrHandler()
        handler.setFormatter(JSONFormatter())
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return root


def configure_logging(level: int) -> None:
    """
    Set the level of every sextant logger.

    Args:
        level: logging.DEBUG, INFO, WARNING or ERROR
    """
    _package_logger().setLevel(level)


class StructuredLogger:
    """
    JSON structured logger for one component.

    Attributes:
        component: Component name (e.g., "expression.distance", "cli")
        logger: Underlying logger, named sextant.<component>
    """

    def __init__(self, component: str):
        _package_logger()
        self.component = component
        self.logger = logging.getLogger(f"{ROOT_LOGGER}.{component}")

    def _log(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
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

        self.logger.log(level, json.dumps(log_entry, default=str), exc_info=exc_info)

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log a per-call detail (parse, evaluation, registration)."""
        self._log(logging.DEBUG, event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log(logging.INFO, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log a failure.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance for traceback

        Example:
            >>> try:
            ...     encode(document)
            ... except GeoJSONError as e:
            ...     logger.error(
            ...         event=LogEvent.SERIALIZATION_ERROR,
            ...         message="Failed to serialize expression",
            ...         exc_info=e,
            ...     )
        """
        self._log(logging.ERROR, event, message, metadata, exc_info)


def create_logger(component: str) -> StructuredLogger:
    """
    Create the StructuredLogger for a component.

    Example:
        >>> logger = create_logger("cli")
    """
    return StructuredLogger(component=component)

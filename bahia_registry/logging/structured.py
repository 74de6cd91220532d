"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Design:
- JSON output, one object per line (stderr by default)
- Wraps Python's logging module
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="cli")
    >>> logger.info(
    ...     event=LogEvent.SEGMENT_ADDED,
    ...     message="Segment added",
    ...     metadata={'name': 'Vía Verde', 'length_km': 2.0}
    ... )

Output:
    {"timestamp": "2026-10-19T10:30:45.123456+00:00", "level": "INFO",
     "component": "cli", "event": "segment.added", "message": "Segment added",
     "metadata": {"name": "Vía Verde", "length_km": 2.0}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "cli")
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
            component: Component identifier (e.g., "cli")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: bahia_registry.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"bahia_registry.{component}"
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

        self.logger.log(
            getattr(logging, level),
            json.dumps(log_entry, ensure_ascii=False)
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
            ...     event=LogEvent.REGISTRY_LOADED,
            ...     message="Loaded 2 segments",
            ...     metadata={'segment_count': 2}
            ... )
        """
        self._log('INFO', event, message, metadata)

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
            ...     registry.update_status("Inexistente", "X")
            ... except SegmentNotFoundError as e:
            ...     logger.error(
            ...         event=LogEvent.SEGMENT_NOT_FOUND,
            ...         message="Status update failed",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """Pass-through formatter: StructuredLogger messages are already JSON."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """Factory function to create configured StructuredLogger."""
    return StructuredLogger(component=component, level=level)

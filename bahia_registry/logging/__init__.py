"""
Structured Logging for the lane registry callers
================================================

Bounded Context: Observability

The registry itself never logs; callers (the CLI) report what they did
through these JSON events.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]

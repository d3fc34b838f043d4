"""
Shared utilities
"""

from .logging import (
    ConsoleFormatter, LogContext, StructuredFormatter,
    performance_monitor, setup_logger
)

__all__ = [
    'ConsoleFormatter',
    'LogContext',
    'StructuredFormatter',
    'performance_monitor',
    'setup_logger'
]

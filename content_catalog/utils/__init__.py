"""
Utility functions and services.
"""

from .structured_logger import (
    StructuredLogger,
    LoggingContext,
    get_structured_logger,
)

__all__ = [
    'StructuredLogger',
    'LoggingContext',
    'get_structured_logger',
]

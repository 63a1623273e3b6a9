"""
Structured JSON logging for the content catalog.

This module provides a structured logger that outputs JSON-formatted
logs with correlation IDs, operation names and context fields so log
lines can be filtered by content identifier.
"""

import copy
import json
import logging
import os
import time
from typing import Optional
from datetime import datetime, timezone
from decimal import Decimal


class DecimalEncoder(json.JSONEncoder):
    """JSON encoder that handles Decimal and datetime types."""
    def default(self, obj):
        if isinstance(obj, Decimal):
            return float(obj)
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super().default(obj)


class StructuredLogger:
    """
    Structured JSON logger.

    Outputs logs in JSON format with:
    - Timestamp (ISO 8601)
    - Log level
    - Correlation IDs (contentId, requestId)
    - Component and operation
    - Message and additional context
    """

    def __init__(
        self,
        component: str,
        content_id: Optional[str] = None,
        request_id: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component name (e.g., 'ContentsManager')
            content_id: Content identifier for correlation
            request_id: Request identifier supplied by the caller
        """
        self.component = component
        self.content_id = content_id
        self.request_id = request_id
        self.logger = logging.getLogger(component)

        log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.logger.setLevel(getattr(logging, log_level))

    def bind(self, content_id: Optional[str] = None) -> 'StructuredLogger':
        """
        Return a logger sharing this component and its stdlib logger with
        a new content correlation ID.

        Args:
            content_id: Content identifier for correlation

        Returns:
            New StructuredLogger instance
        """
        bound = copy.copy(self)
        bound.content_id = content_id
        return bound

    def _format_log(
        self,
        level: str,
        message: str,
        operation: Optional[str] = None,
        **kwargs
    ) -> str:
        """
        Format log entry as JSON.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            message: Log message
            operation: Operation being performed
            **kwargs: Additional context fields

        Returns:
            JSON-formatted log string
        """
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': level,
            'component': self.component,
            'message': message
        }

        if self.content_id:
            log_entry['contentId'] = self.content_id
        if self.request_id:
            log_entry['requestId'] = self.request_id

        if operation:
            log_entry['operation'] = operation

        if kwargs:
            log_entry['context'] = kwargs

        return json.dumps(log_entry, cls=DecimalEncoder)

    def debug(
        self,
        message: str,
        operation: Optional[str] = None,
        **kwargs
    ) -> None:
        """Log debug message."""
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        self.logger.debug(
            self._format_log('DEBUG', message, operation, **kwargs)
        )

    def info(
        self,
        message: str,
        operation: Optional[str] = None,
        **kwargs
    ) -> None:
        """Log info message."""
        self.logger.info(
            self._format_log('INFO', message, operation, **kwargs)
        )

    def warning(
        self,
        message: str,
        operation: Optional[str] = None,
        **kwargs
    ) -> None:
        """Log warning message."""
        self.logger.warning(
            self._format_log('WARNING', message, operation, **kwargs)
        )

    def error(
        self,
        message: str,
        operation: Optional[str] = None,
        error: Optional[Exception] = None,
        **kwargs
    ) -> None:
        """
        Log error message.

        Args:
            message: Log message
            operation: Operation being performed
            error: Exception object if available
            **kwargs: Additional context
        """
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_message'] = str(error)

        self.logger.error(
            self._format_log('ERROR', message, operation, **kwargs)
        )

    def log_cache_event(
        self,
        event_type: str,
        **kwargs
    ) -> None:
        """
        Log cache event at DEBUG level.

        Args:
            event_type: Type of event (hit, miss, populate, evict)
            **kwargs: Event details
        """
        self.debug(
            f'Cache {event_type}',
            operation='cache_event',
            event_type=event_type,
            **kwargs
        )


class LoggingContext:
    """
    Context manager for logging operation duration.

    Logs operation start, end, and duration. A failure inside the block
    is logged and then re-raised.
    """

    def __init__(
        self,
        logger: StructuredLogger,
        operation: str,
        **kwargs
    ):
        """
        Initialize logging context.

        Args:
            logger: StructuredLogger instance
            operation: Operation name
            **kwargs: Additional context
        """
        self.logger = logger
        self.operation = operation
        self.context = kwargs
        self.start_time: Optional[float] = None

    def __enter__(self):
        """Log operation start."""
        self.start_time = time.time()
        self.logger.debug(
            f'Starting operation: {self.operation}',
            operation=self.operation,
            **self.context
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Log operation end and duration."""
        if self.start_time is not None:
            duration_ms = (time.time() - self.start_time) * 1000

            if exc_type is not None:
                self.logger.error(
                    f'Operation failed: {self.operation}',
                    operation=self.operation,
                    error=exc_val,
                    duration_ms=duration_ms,
                    **self.context
                )
            else:
                self.logger.debug(
                    f'Completed operation: {self.operation}',
                    operation=self.operation,
                    duration_ms=duration_ms,
                    **self.context
                )


def get_structured_logger(
    component: str,
    content_id: Optional[str] = None,
    request_id: Optional[str] = None
) -> StructuredLogger:
    """
    Factory function for creating StructuredLogger instances.

    Args:
        component: Name of the component (e.g., 'ContentsManager')
        content_id: Optional content ID for context
        request_id: Optional request ID for tracing

    Returns:
        Configured StructuredLogger instance

    Example:
        >>> logger = get_structured_logger('ContentsManager')
        >>> logger.info('Listing contents')
    """
    return StructuredLogger(
        component=component,
        content_id=content_id,
        request_id=request_id
    )


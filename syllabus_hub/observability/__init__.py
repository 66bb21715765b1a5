"""
Observability module.

Provides structured logging, correlation ID tracking and request logging
middleware.
"""

from syllabus_hub.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from syllabus_hub.observability.logger import configure_logging, get_logger
from syllabus_hub.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_correlation_id",
    "set_correlation_id",
    "clear_correlation_id",
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
]

"""Observability module - structured logging, request correlation, metrics"""

from .logging_config import configure_logging, JSONFormatter, RequestIDFilter
from .middleware import RequestIDMiddleware, current_request_id

__all__ = [
    "configure_logging",
    "JSONFormatter",
    "RequestIDFilter",
    "RequestIDMiddleware",
    "current_request_id",
]

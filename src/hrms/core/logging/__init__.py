"""Logging module with structured logging and request tracking."""

from hrms.core.logging.middleware import RequestLoggingMiddleware


__all__ = [
    "RequestLoggingMiddleware",
]
